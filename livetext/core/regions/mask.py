"""
Spotlight mask geometry: the dimmed canvas with holes over text clusters.
"""

from dataclasses import dataclass, field
from typing import Iterable, List, Optional

from .merger import RegionMerger
from .models import Rect, TextRegion

DEFAULT_MASK_PADDING = 10.0
DEFAULT_MASK_CORNER_RADIUS = 8.0


@dataclass
class SpotlightMask:
    """Pure description of the mask; painting is left to the widget."""

    canvas: Rect
    holes: List[Rect] = field(default_factory=list)
    corner_radius: float = DEFAULT_MASK_CORNER_RADIUS

    @property
    def is_empty(self) -> bool:
        return not self.holes


def build_spotlight_mask(
    regions: Iterable[TextRegion],
    width: float,
    height: float,
    merger: Optional[RegionMerger] = None,
    padding: float = DEFAULT_MASK_PADDING,
    corner_radius: float = DEFAULT_MASK_CORNER_RADIUS,
) -> SpotlightMask:
    """
    Compute the mask for a canvas of the given size.

    Each merged cluster is inflated by ``padding`` on every side. The holes
    are meant to be unioned and cut from the canvas with an even-odd fill.
    """
    merger = merger or RegionMerger()
    canvas = Rect(0, 0, max(width, 0), max(height, 0))
    holes = [rect.inflated(padding, padding) for rect in merger.merge(regions)]
    return SpotlightMask(canvas=canvas, holes=holes, corner_radius=corner_radius)
