from __future__ import annotations

from PyQt5.QtCore import QPointF

from livetext.core.regions import TextRegion, build_spotlight_mask
from livetext.ui.widgets.live_text_overlay import argb_to_qcolor, mask_path


def test_empty_mask_dims_whole_canvas():
    path = mask_path(build_spotlight_mask([], 200, 100))

    assert path.contains(QPointF(10, 10))
    assert path.contains(QPointF(190, 90))
    assert not path.contains(QPointF(250, 50))


def test_mask_path_leaves_text_clusters_undimmed():
    regions = [TextRegion.from_box("Hello", 50, 40, 100, 60)]

    path = mask_path(build_spotlight_mask(regions, 200, 100))

    assert not path.contains(QPointF(75, 50))
    assert not path.contains(QPointF(45, 35))  # inside the padding
    assert path.contains(QPointF(10, 90))


def test_argb_to_qcolor_splits_channels():
    color = argb_to_qcolor(0x80ADD8E6)

    assert (color.red(), color.green(), color.blue(), color.alpha()) == (0xAD, 0xD8, 0xE6, 0x80)
