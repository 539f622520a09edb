"""
Host-side clean-up of OCR output before it reaches the selection engine.
"""

from dataclasses import replace
from typing import Iterable, List

from livetext.core.regions.models import Point, TextRegion

DEFAULT_MIN_CONFIDENCE = 0.5


def filter_by_confidence(
    regions: Iterable[TextRegion], threshold: float = DEFAULT_MIN_CONFIDENCE
) -> List[TextRegion]:
    """Drop regions below the confidence threshold."""
    return [r for r in regions if r.confidence >= threshold]


def rescale_regions(regions: Iterable[TextRegion], scale_factor: float) -> List[TextRegion]:
    """
    Map regions from an upscaled capture back to display coordinates.

    Args:
        regions: Regions in capture pixels
        scale_factor: Capture size divided by display size

    Returns:
        New regions; the input is not modified
    """
    if scale_factor <= 0:
        raise ValueError(f"scale_factor must be positive, got {scale_factor}")

    regions = list(regions)
    if scale_factor == 1.0:
        return regions

    factor = 1.0 / scale_factor
    return [
        replace(
            r,
            bounding_box=r.bounding_box.scaled(factor),
            corners=tuple(Point(p.x * factor, p.y * factor) for p in r.corners),
        )
        for r in regions
    ]
