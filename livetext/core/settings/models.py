"""
Live-text settings with their defaults.
"""
from dataclasses import dataclass, fields
from typing import Any, Dict

from livetext.core.regions.merger import RegionMerger


@dataclass
class LiveTextSettings:
    """User-tunable options for OCR, masking and selection."""

    # Feature switches
    enabled: bool = False
    auto_detect_text: bool = False
    show_text_bounds: bool = True
    enable_hotkeys: bool = True
    enable_cache: bool = True
    copy_on_release: bool = False

    # OCR
    preferred_language: str = "en"
    min_confidence: float = 0.5
    max_image_size: int = 2048
    ocr_scale_factor: float = 2.0

    # Geometry
    horizontal_tolerance: float = 35.0
    vertical_tolerance: float = 5.0
    selection_merge_tolerance: float = 35.0
    mask_padding: float = 10.0
    mask_corner_radius: float = 8.0

    # Colors (ARGB)
    bounds_opacity: float = 0.3
    selection_color: int = 0x500078D4
    bounds_color: int = 0x80ADD8E6
    mask_color: int = 0x80000000

    def to_dict(self) -> Dict[str, Any]:
        """Convert settings to a dictionary for JSON serialization."""
        return {f.name: getattr(self, f.name) for f in fields(self)}

    @staticmethod
    def from_dict(data: Dict[str, Any]) -> "LiveTextSettings":
        """
        Create settings from a dictionary.

        Unknown keys are ignored and values of the wrong type fall back to
        the default.
        """
        settings = LiveTextSettings()
        for f in fields(settings):
            if f.name not in data:
                continue
            value = data[f.name]
            default = getattr(settings, f.name)
            if _matches_type(value, default):
                setattr(settings, f.name, type(default)(value))

        settings.min_confidence = _clamp(settings.min_confidence)
        settings.bounds_opacity = _clamp(settings.bounds_opacity)
        return settings

    def reset_to_defaults(self) -> None:
        """Reset all settings to default values."""
        defaults = LiveTextSettings()
        for f in fields(self):
            setattr(self, f.name, getattr(defaults, f.name))

    def merger(self) -> RegionMerger:
        """Build a region merger using the configured tolerances."""
        return RegionMerger(
            horizontal_tolerance=self.horizontal_tolerance,
            vertical_tolerance=self.vertical_tolerance,
        )


def _matches_type(value: Any, default: Any) -> bool:
    # bool is an int subclass; keep the two apart
    if isinstance(default, bool) or isinstance(value, bool):
        return isinstance(value, bool) and isinstance(default, bool)
    if isinstance(default, float):
        return isinstance(value, (int, float))
    return isinstance(value, type(default))


def _clamp(value: float, low: float = 0.0, high: float = 1.0) -> float:
    return max(low, min(high, value))
