"""
Text-region geometry: records, clustering, and mask layout.
"""

from .mask import SpotlightMask, build_spotlight_mask
from .merger import RegionMerger
from .models import Point, Rect, TextRegion

__all__ = [
    "Point",
    "Rect",
    "TextRegion",
    "RegionMerger",
    "SpotlightMask",
    "build_spotlight_mask",
]
