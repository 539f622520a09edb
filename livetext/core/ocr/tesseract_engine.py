"""
Tesseract OCR through PyMuPDF's OCR text pages.
"""

import os
from pathlib import Path
from threading import Event
from typing import Dict, Iterable, List, Optional, Sequence, Tuple

import fitz

from livetext.core.errors import OcrError, OcrUnavailableError
from livetext.core.regions.models import TextRegion
from livetext.utils.logging_config import logger

from .base import OcrEngine

# Short language hints -> Tesseract traineddata names
LANGUAGE_CODES: Dict[str, str] = {
    "en": "eng",
    "zh": "chi_sim",
    "zh-cn": "chi_sim",
    "zh-hans": "chi_sim",
    "zh-tw": "chi_tra",
    "zh-hant": "chi_tra",
    "ja": "jpn",
    "ko": "kor",
    "fr": "fra",
    "de": "deu",
    "es": "spa",
    "it": "ita",
    "pt": "por",
    "ru": "rus",
}

FALLBACK_LANGUAGE = "eng"


def regions_from_words(
    words: Iterable[Sequence], scale: float = 1.0
) -> List[TextRegion]:
    """
    Convert PyMuPDF word tuples into text regions.

    Word tuples are ``(x0, y0, x1, y1, text, block_no, line_no, word_no)``.
    Lines are numbered globally in (block, line) order and words are
    renumbered from zero within each line.

    Args:
        words: Output of ``page.get_text("words")``
        scale: Factor from page coordinates to bitmap pixels
    """
    ordered = sorted(words, key=lambda w: (w[5], w[6], w[7]))

    regions: List[TextRegion] = []
    line_keys: Dict[Tuple[int, int], int] = {}
    word_counts: Dict[int, int] = {}

    for x0, y0, x1, y1, text, block_no, line_no, _ in ordered:
        text = (text or "").strip()
        if not text:
            continue

        key = (block_no, line_no)
        if key not in line_keys:
            line_keys[key] = len(line_keys)
        line_index = line_keys[key]

        word_index = word_counts.get(line_index, 0)
        word_counts[line_index] = word_index + 1

        regions.append(
            TextRegion.from_box(
                text,
                x0 * scale,
                y0 * scale,
                x1 * scale,
                y1 * scale,
                confidence=1.0,  # Tesseract word confidence isn't exposed here
                line_index=line_index,
                word_index=word_index,
            )
        )

    return regions


class TesseractOcrEngine(OcrEngine):
    """
    OCR backend using PyMuPDF's Tesseract integration.

    Requires Tesseract language data; the folder is taken from the
    constructor, PyMuPDF's own lookup, or ``TESSDATA_PREFIX``.
    """

    engine_name = "Tesseract"

    def __init__(self, tessdata: Optional[str] = None):
        self._tessdata = tessdata
        self._languages: Optional[List[str]] = None

    def tessdata_dir(self) -> Optional[str]:
        """Locate the tessdata folder, or None."""
        if self._tessdata:
            return self._tessdata

        try:
            return fitz.get_tessdata()
        except (AttributeError, RuntimeError):
            # Older PyMuPDF releases only read the environment variable
            return os.environ.get("TESSDATA_PREFIX")

    def supported_languages(self) -> List[str]:
        if self._languages is None:
            tessdata = self.tessdata_dir()
            if tessdata and os.path.isdir(tessdata):
                self._languages = sorted(
                    p.stem
                    for p in Path(tessdata).glob("*.traineddata")
                    if p.stem != "osd"
                )
            else:
                self._languages = []
        return list(self._languages)

    def is_available(self) -> bool:
        return bool(self.supported_languages())

    def resolve_language(self, language_hint: str) -> str:
        """
        Pick a Tesseract language for a hint.

        Unknown or missing languages fall back to English, then to the first
        installed language.
        """
        available = self.supported_languages()
        hint = (language_hint or "").strip()
        candidate = LANGUAGE_CODES.get(hint.lower(), hint)

        if candidate in available:
            return candidate
        if FALLBACK_LANGUAGE in available:
            return FALLBACK_LANGUAGE
        if available:
            return available[0]
        return candidate or FALLBACK_LANGUAGE

    def recognize(
        self,
        bitmap: fitz.Pixmap,
        language_hint: str = "en",
        cancel_event: Optional[Event] = None,
    ) -> List[TextRegion]:
        self.check_cancelled(cancel_event)

        if bitmap is None or bitmap.width == 0 or bitmap.height == 0:
            return []
        if not self.is_available():
            raise OcrUnavailableError("Tesseract language data not found")

        language = self.resolve_language(language_hint)
        image_doc = None
        pdf = None

        try:
            # Wrap the bitmap as a one-page PDF so PyMuPDF can OCR it
            image_doc = fitz.open(stream=bitmap.tobytes("png"), filetype="png")
            pdf = fitz.open(stream=image_doc.convert_to_pdf(), filetype="pdf")
            page = pdf[0]

            scale = bitmap.width / page.rect.width if page.rect.width else 1.0
            dpi = max(1, int(round(72 * scale)))

            self.check_cancelled(cancel_event)
            textpage = page.get_textpage_ocr(
                language=language, dpi=dpi, full=True, tessdata=self.tessdata_dir()
            )

            self.check_cancelled(cancel_event)
            words = page.get_text("words", textpage=textpage)
        except RuntimeError as e:
            raise OcrError(f"Tesseract OCR failed: {e}") from e
        finally:
            if pdf is not None:
                pdf.close()
            if image_doc is not None:
                image_doc.close()

        regions = regions_from_words(words, scale)
        logger.debug(f"OCR ({language}) found {len(regions)} words")
        return regions
