from __future__ import annotations

from livetext.core.regions import TextRegion
from livetext.core.selection.reading_order import build_text, is_cjk_text, join_line


def _word(text: str, line: int, word: int) -> TextRegion:
    return TextRegion.from_box(text, word * 60, line * 30, word * 60 + 50, line * 30 + 20, line_index=line, word_index=word)


def test_is_cjk_text_requires_strict_majority_of_han():
    assert is_cjk_text("你好")
    assert is_cjk_text("你好a")
    assert not is_cjk_text("你a")
    assert not is_cjk_text("")


def test_is_cjk_text_ignores_kana_and_hangul():
    assert not is_cjk_text("ひらがな")
    assert not is_cjk_text("한국어")


def test_join_line_uses_spaces_for_latin():
    assert join_line(["Hello", "World"]) == "Hello World"


def test_join_line_concatenates_cjk():
    assert join_line(["你", "好"]) == "你好"


def test_build_text_orders_by_line_then_word():
    regions = [_word("Bye", 1, 0), _word("World", 0, 1), _word("Hello", 0, 0)]

    assert build_text(regions) == "Hello World\nBye"


def test_build_text_decides_join_style_per_line():
    regions = [_word("你", 0, 0), _word("好", 0, 1), _word("hi", 1, 0), _word("there", 1, 1)]

    assert build_text(regions) == "你好\nhi there"


def test_build_text_follows_indices_not_geometry():
    # Second word sits left of the first on screen
    first = TextRegion.from_box("one", 100, 0, 150, 20, line_index=0, word_index=0)
    second = TextRegion.from_box("two", 0, 0, 50, 20, line_index=0, word_index=1)

    assert build_text([second, first]) == "one two"


def test_build_text_empty():
    assert build_text([]) == ""
