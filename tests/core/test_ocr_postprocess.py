from __future__ import annotations

import pytest

from livetext.core.ocr import filter_by_confidence, rescale_regions
from livetext.core.regions import Rect, TextRegion
from livetext.core.regions.models import Point


def test_filter_by_confidence_keeps_threshold_and_above():
    regions = [
        TextRegion.from_box("low", 0, 0, 10, 10, confidence=0.49),
        TextRegion.from_box("edge", 0, 0, 10, 10, confidence=0.5),
        TextRegion.from_box("high", 0, 0, 10, 10, confidence=0.9),
    ]

    assert [r.text for r in filter_by_confidence(regions)] == ["edge", "high"]
    assert [r.text for r in filter_by_confidence(regions, 0.95)] == []


def test_rescale_regions_maps_capture_back_to_display():
    region = TextRegion.from_box("word", 20, 40, 120, 80, line_index=2, word_index=1)

    scaled = rescale_regions([region], 2.0)[0]

    assert scaled.bounding_box == Rect(10, 20, 50, 20)
    assert scaled.corners == (Point(10, 20), Point(60, 20), Point(60, 40), Point(10, 40))
    assert scaled.reading_key == (2, 1)
    assert region.bounding_box == Rect(20, 40, 100, 40)


def test_rescale_regions_identity_keeps_objects():
    region = TextRegion.from_box("word", 0, 0, 10, 10)

    assert rescale_regions([region], 1.0)[0] is region


def test_rescale_regions_rejects_non_positive_scale():
    with pytest.raises(ValueError):
        rescale_regions([], 0)
