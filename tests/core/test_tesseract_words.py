from __future__ import annotations

from livetext.core.ocr import TesseractOcrEngine, regions_from_words
from livetext.core.regions import Rect


def test_regions_from_words_numbers_lines_globally():
    words = [
        (10, 50, 40, 60, "second", 1, 0, 0),
        (10, 10, 40, 20, "Hello", 0, 0, 0),
        (50, 10, 90, 20, "World", 0, 0, 1),
        (10, 30, 40, 40, "Next", 0, 1, 0),
    ]

    regions = regions_from_words(words)

    assert [(r.text, r.line_index, r.word_index) for r in regions] == [
        ("Hello", 0, 0),
        ("World", 0, 1),
        ("Next", 1, 0),
        ("second", 2, 0),
    ]
    assert all(r.confidence == 1.0 for r in regions)


def test_regions_from_words_skips_blank_words_and_renumbers():
    words = [
        (0, 0, 10, 10, "a", 0, 0, 0),
        (12, 0, 20, 10, "  ", 0, 0, 1),
        (22, 0, 30, 10, "b", 0, 0, 2),
    ]

    regions = regions_from_words(words)

    assert [(r.text, r.word_index) for r in regions] == [("a", 0), ("b", 1)]


def test_regions_from_words_applies_scale():
    regions = regions_from_words([(1, 2, 3, 4, "x", 0, 0, 0)], scale=2.0)

    assert regions[0].bounding_box == Rect(2, 4, 4, 4)


def test_resolve_language_maps_hints_and_falls_back(tmp_path):
    for name in ("eng", "jpn", "osd"):
        (tmp_path / f"{name}.traineddata").write_bytes(b"")
    engine = TesseractOcrEngine(tessdata=str(tmp_path))

    assert engine.supported_languages() == ["eng", "jpn"]
    assert engine.is_available()
    assert engine.resolve_language("ja") == "jpn"
    assert engine.resolve_language("zh-Hans") == "eng"
    assert engine.resolve_language("") == "eng"


def test_engine_without_language_data_is_unavailable(tmp_path):
    engine = TesseractOcrEngine(tessdata=str(tmp_path / "missing"))

    assert engine.supported_languages() == []
    assert not engine.is_available()
