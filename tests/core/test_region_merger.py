from __future__ import annotations

from livetext.core.regions import Rect, RegionMerger, TextRegion


def _region(text: str, x: float, y: float, w: float, h: float) -> TextRegion:
    return TextRegion.from_box(text, x, y, x + w, y + h)


def test_merge_empty_returns_empty():
    assert RegionMerger().merge([]) == []


def test_merge_single_region_returns_box_unchanged():
    region = _region("only", 12, 30, 40, 18)

    assert RegionMerger().merge([region]) == [Rect(12, 30, 40, 18)]


def test_words_on_same_line_within_horizontal_tolerance_merge():
    left = _region("Hello", 0, 0, 50, 20)
    right = _region("World", 84, 2, 50, 20)  # gap 34

    assert RegionMerger().merge([left, right]) == [Rect(0, 0, 134, 22)]


def test_words_at_horizontal_tolerance_stay_separate():
    left = _region("Hello", 0, 0, 50, 20)
    right = _region("World", 85, 0, 50, 20)  # gap 35

    assert RegionMerger().merge([left, right]) == [Rect(0, 0, 50, 20), Rect(85, 0, 50, 20)]


def test_stacked_lines_use_tighter_vertical_tolerance():
    merger = RegionMerger()
    top = Rect(0, 0, 100, 20)

    assert len(merger.merge_rects([top, Rect(10, 24, 100, 20)])) == 1  # gap 4
    assert len(merger.merge_rects([top, Rect(10, 25, 100, 20)])) == 2  # gap 5


def test_intersecting_boxes_merge():
    assert RegionMerger().merge_rects([Rect(0, 0, 30, 30), Rect(20, 20, 30, 30)]) == [
        Rect(0, 0, 50, 50)
    ]


def test_diagonal_boxes_without_axis_overlap_stay_separate():
    rects = [Rect(0, 0, 20, 20), Rect(25, 22, 20, 20)]

    assert RegionMerger().merge_rects(rects) == rects


def test_merge_is_transitive_through_growing_cluster():
    # First and last are far apart but chained through the middle box
    rects = [Rect(0, 0, 40, 20), Rect(200, 0, 40, 20), Rect(70, 0, 100, 20)]

    assert RegionMerger().merge_rects(rects) == [Rect(0, 0, 240, 20)]


def test_degenerate_boxes_are_singletons():
    rects = [Rect(0, 0, 50, 20), Rect(10, 5, 0, 10), Rect(60, 0, -5, 20)]

    assert RegionMerger().merge_rects(rects) == rects


def test_custom_tolerances_are_used():
    merger = RegionMerger(horizontal_tolerance=10, vertical_tolerance=0)
    rects = [Rect(0, 0, 50, 20), Rect(65, 0, 50, 20)]

    assert merger.merge_rects(rects) == rects
