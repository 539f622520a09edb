"""
Region-level text selection over OCR results.
"""

from itertools import groupby
from typing import List, Optional, Sequence, Set, Union

from PyQt5.QtCore import QObject, pyqtSignal

from livetext.core.clipboard import Clipboard, PyperclipClipboard
from livetext.core.regions.mask import (
    DEFAULT_MASK_CORNER_RADIUS,
    DEFAULT_MASK_PADDING,
    SpotlightMask,
    build_spotlight_mask,
)
from livetext.core.regions.merger import RegionMerger
from livetext.core.regions.models import Rect, TextRegion
from livetext.utils.logging_config import logger

from .models import RegionHandle, SelectionChangedEvent, SelectionState
from .reading_order import build_text

RegionRef = Union[RegionHandle, TextRegion]

DEFAULT_SELECTION_MERGE_TOLERANCE = 35.0


class SelectionEngine(QObject):
    """
    Owns the recognized regions and the selection over them.

    Supports:
    - Click and drag range selection in collection order
    - Additive (Ctrl) selection
    - Select all / cancel
    - Reading-order text reconstruction and clipboard copy
    - Highlight and mask geometry for painting

    Selection is kept as a set of collection indices; regions themselves are
    never mutated. Handlers connected to ``selection_changed`` run
    synchronously, after the state change, before the call returns.
    """

    # Signals
    selection_changed = pyqtSignal(object)  # SelectionChangedEvent
    regions_changed = pyqtSignal()
    text_copied = pyqtSignal(str)

    def __init__(
        self,
        merger: Optional[RegionMerger] = None,
        clipboard: Optional[Clipboard] = None,
        selection_merge_tolerance: float = DEFAULT_SELECTION_MERGE_TOLERANCE,
        mask_padding: float = DEFAULT_MASK_PADDING,
        mask_corner_radius: float = DEFAULT_MASK_CORNER_RADIUS,
        parent=None,
    ):
        super().__init__(parent)

        self.merger = merger or RegionMerger()
        self.clipboard: Clipboard = clipboard or PyperclipClipboard()
        self.selection_merge_tolerance = selection_merge_tolerance
        self.mask_padding = mask_padding
        self.mask_corner_radius = mask_corner_radius

        # Selection state
        self._text_regions: List[TextRegion] = []
        self._selected: Set[int] = set()
        self._anchor: Optional[int] = None  # Start of an in-progress drag
        self._generation = 0
        self.state = SelectionState.IDLE

    # ===== Region collection =====

    @property
    def text_regions(self) -> List[TextRegion]:
        return list(self._text_regions)

    @text_regions.setter
    def text_regions(self, regions: Optional[Sequence[TextRegion]]):
        self.set_text_regions(regions)

    def set_text_regions(self, regions: Optional[Sequence[TextRegion]]):
        """
        Replace the region collection atomically.

        Clears the selection and any in-progress drag; handles issued for the
        previous collection stop resolving.
        """
        self._text_regions = list(regions or [])
        self._generation += 1
        self.clear_selection()
        self._anchor = None
        self.state = SelectionState.IDLE
        self.regions_changed.emit()

    @property
    def generation(self) -> int:
        return self._generation

    def handle(self, index: int) -> Optional[RegionHandle]:
        """Get a handle for the region at a collection position."""
        if 0 <= index < len(self._text_regions):
            return RegionHandle(index, self._text_regions[index], self._generation)
        return None

    def region_at(self, x: float, y: float) -> Optional[RegionHandle]:
        """
        Find the region under a point in overlay coordinates.

        Overlapping boxes resolve to the first in collection order.
        """
        for index, region in enumerate(self._text_regions):
            if region.contains_point(x, y):
                return RegionHandle(index, region, self._generation)
        return None

    def _resolve(self, target: Optional[RegionRef]) -> Optional[int]:
        """Map a handle or region to its index in the current collection."""
        if isinstance(target, RegionHandle):
            if target.generation != self._generation:
                return None
            index = target.index
            if 0 <= index < len(self._text_regions) and (
                self._text_regions[index] is target.region
            ):
                return index
            return None

        if isinstance(target, TextRegion):
            for index, region in enumerate(self._text_regions):
                if region is target:
                    return index

        return None

    # ===== Selection queries =====

    @property
    def selected_regions(self) -> List[TextRegion]:
        """Selected regions in collection order."""
        return [self._text_regions[i] for i in sorted(self._selected)]

    @property
    def anchor(self) -> Optional[RegionHandle]:
        if self._anchor is None:
            return None
        return self.handle(self._anchor)

    @property
    def is_selecting(self) -> bool:
        return self.state == SelectionState.DRAGGING

    def is_selected(self, target: RegionRef) -> bool:
        index = self._resolve(target)
        return index is not None and index in self._selected

    def has_selection(self) -> bool:
        """Check if there is any selection."""
        return bool(self._selected)

    # ===== State machine =====

    def start_selection(self, target: RegionRef, additive: bool = False):
        """
        Begin a drag at the given region.

        Args:
            target: Region (or handle) the pointer went down on
            additive: Keep the existing selection (Ctrl held)
        """
        index = self._resolve(target)
        if index is None:
            # Stale or foreign reference: no-op without notification
            logger.debug("start_selection ignored: region not in current collection")
            return

        if not additive:
            self.clear_selection()

        self._selected.add(index)
        self._anchor = index
        self.state = SelectionState.DRAGGING
        self._emit_selection_changed()

    def update_selection(self, target: RegionRef):
        """
        Extend the drag to the given region.

        Selects the contiguous index range between anchor and target,
        whatever their on-screen positions.
        """
        if self._anchor is None:
            return

        index = self._resolve(target)
        if index is None:
            logger.debug("update_selection ignored: region not in current collection")
            return

        self.clear_selection()

        start, end = sorted((self._anchor, index))
        self._selected.update(range(start, end + 1))

        self._emit_selection_changed()

    def end_selection(self, copy_to_clipboard: bool = False):
        """Finish the drag, optionally copying the selected text."""
        self._anchor = None
        self.state = SelectionState.IDLE

        if copy_to_clipboard and self._selected:
            self.copy_selection()

        self._emit_selection_changed()

    def cancel_selection(self):
        """Drop the selection and any in-progress drag."""
        self.clear_selection()
        self._anchor = None
        self.state = SelectionState.IDLE
        self._emit_selection_changed()

    def clear_selection(self):
        """Empty the selection without notifying listeners."""
        self._selected.clear()

    def select_all(self):
        """Select every region."""
        self.clear_selection()
        self._selected.update(range(len(self._text_regions)))
        self._anchor = None
        self.state = SelectionState.IDLE
        self._emit_selection_changed()

    # ===== Text and clipboard =====

    def get_selected_text(self) -> str:
        """Get the selection as text in reading order."""
        if not self._selected:
            return ""
        return build_text(self.selected_regions)

    def copy_selection(self) -> bool:
        """
        Put the selected text on the clipboard.

        Returns:
            True if the clipboard accepted the text
        """
        text = self.get_selected_text()
        if not text:
            return False

        try:
            copied = self.clipboard.set_text(text)
        except Exception:
            logger.exception("Clipboard copy failed")
            return False

        if copied:
            self.text_copied.emit(text)
        return bool(copied)

    # ===== Geometry for painting =====

    def get_selection_rects(self) -> List[Rect]:
        """
        Generate highlight rectangles for the selection.

        Words on the same line are merged when the horizontal gap between
        them is within ``selection_merge_tolerance``.
        """
        if not self._selected:
            return []

        by_line = sorted(self.selected_regions, key=lambda r: r.line_index)

        rects: List[Rect] = []
        for _, line_regions in groupby(by_line, key=lambda r: r.line_index):
            boxes = sorted((r.bounding_box for r in line_regions), key=lambda b: b.x)

            current = boxes[0]
            for box in boxes[1:]:
                if box.left - current.right <= self.selection_merge_tolerance:
                    current = current.union(box)
                else:
                    rects.append(current)
                    current = box
            rects.append(current)

        return rects

    def spotlight_mask(self, width: float, height: float) -> SpotlightMask:
        """Mask geometry for a canvas of the given size."""
        return build_spotlight_mask(
            self._text_regions,
            width,
            height,
            merger=self.merger,
            padding=self.mask_padding,
            corner_radius=self.mask_corner_radius,
        )

    def _emit_selection_changed(self):
        event = SelectionChangedEvent(
            selected_regions=tuple(self.selected_regions),
            is_selecting=self.is_selecting,
        )
        self.selection_changed.emit(event)
