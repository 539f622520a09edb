from __future__ import annotations

from livetext.core.regions import Rect, RegionMerger, TextRegion, build_spotlight_mask


def test_mask_inflates_merged_clusters():
    regions = [
        TextRegion.from_box("Hello", 10, 10, 60, 30),
        TextRegion.from_box("World", 70, 10, 120, 30),
        TextRegion.from_box("Far", 400, 300, 450, 320),
    ]

    mask = build_spotlight_mask(regions, 800, 600)

    assert mask.canvas == Rect(0, 0, 800, 600)
    assert mask.holes == [Rect(0, 0, 130, 40), Rect(390, 290, 70, 40)]
    assert mask.corner_radius == 8.0


def test_mask_without_regions_is_empty():
    mask = build_spotlight_mask([], 100, 100)

    assert mask.is_empty
    assert mask.canvas == Rect(0, 0, 100, 100)


def test_mask_uses_given_merger_and_padding():
    regions = [
        TextRegion.from_box("a", 0, 0, 10, 10),
        TextRegion.from_box("b", 20, 0, 30, 10),
    ]

    mask = build_spotlight_mask(
        regions, 50, 50, merger=RegionMerger(horizontal_tolerance=5), padding=2, corner_radius=4
    )

    assert mask.holes == [Rect(-2, -2, 14, 14), Rect(18, -2, 14, 14)]
    assert mask.corner_radius == 4
