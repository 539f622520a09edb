"""
Text selection over recognized regions.
"""

from .models import RegionHandle, SelectionChangedEvent, SelectionState
from .reading_order import build_text, is_cjk_text
from .selection_engine import SelectionEngine

__all__ = [
    "SelectionEngine",
    "SelectionState",
    "SelectionChangedEvent",
    "RegionHandle",
    "build_text",
    "is_cjk_text",
]
