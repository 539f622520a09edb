"""
Rebuilding linear text from selected regions.
"""

from itertools import groupby
from typing import Iterable, List

from livetext.core.regions.models import TextRegion

# CJK Unified Ideographs
CJK_START = 0x4E00
CJK_END = 0x9FFF

LINE_SEPARATOR = "\n"


def is_cjk_text(text: str) -> bool:
    """
    Check whether more than half of the characters are Han ideographs.

    Only the U+4E00..U+9FFF block counts; kana, Hangul and the extension
    blocks do not.
    """
    if not text:
        return False

    cjk_count = sum(1 for c in text if CJK_START <= ord(c) <= CJK_END)
    return cjk_count * 2 > len(text)


def join_line(words: List[str]) -> str:
    """Join one line of words, without separators for CJK-majority lines."""
    joined = "".join(words)
    if is_cjk_text(joined):
        return joined
    return " ".join(words)


def build_text(regions: Iterable[TextRegion]) -> str:
    """
    Reconstruct text in (line_index, word_index) order.

    Geometry is ignored: inconsistent OCR indices produce text in index
    order, not visual order.
    """
    ordered = sorted(regions, key=lambda r: r.reading_key)
    if not ordered:
        return ""

    lines = []
    for _, line_regions in groupby(ordered, key=lambda r: r.line_index):
        lines.append(join_line([r.text for r in line_regions]))

    return LINE_SEPARATOR.join(lines)
