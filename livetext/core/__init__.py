"""
Core logic for the live-text overlay.
"""

from .regions import Rect, RegionMerger, SpotlightMask, TextRegion, build_spotlight_mask
from .selection import SelectionChangedEvent, SelectionEngine, SelectionState
from .settings import LiveTextSettings, SettingsStore

__all__ = [
    "Rect",
    "TextRegion",
    "RegionMerger",
    "SpotlightMask",
    "build_spotlight_mask",
    "SelectionEngine",
    "SelectionState",
    "SelectionChangedEvent",
    "LiveTextSettings",
    "SettingsStore",
]
