from typing import Optional

from PyQt5.QtCore import Qt

from livetext.core.selection import RegionHandle, SelectionEngine
from livetext.core.settings import LiveTextSettings


class OverlayInputHandler:
    """
    Translates pointer and keyboard input on the overlay into selection calls.
    """
    def __init__(self, engine: SelectionEngine, settings: LiveTextSettings):
        """
        Initializes the handler.

        Args:
            engine (SelectionEngine): The selection engine to drive.
            settings (LiveTextSettings): Live-text options (hotkeys, copy on release).
        """
        self.engine = engine
        self.settings = settings
        self._is_dragging = False
        self._last_hovered: Optional[RegionHandle] = None

    @property
    def is_dragging(self) -> bool:
        return self._is_dragging

    def handle_mouse_press(self, x: float, y: float, additive: bool = False) -> bool:
        """
        Handles a left-button press at overlay coordinates.

        Args:
            x, y: Pointer position in overlay coordinates.
            additive: Whether Ctrl is held.

        Returns:
            bool: True if a selection drag started.
        """
        if not self.engine.text_regions:
            return False

        hit = self.engine.region_at(x, y)
        if hit is None:
            if not additive:
                self.engine.cancel_selection()
            return False

        self._is_dragging = True
        self._last_hovered = hit
        self.engine.start_selection(hit, additive)
        return True

    def handle_mouse_move(self, x: float, y: float) -> Optional[RegionHandle]:
        """
        Handles pointer movement.

        Returns:
            RegionHandle or None: The region under the pointer, for cursor feedback.
        """
        hit = self.engine.region_at(x, y)

        # Only extend when the pointer enters a different region
        if self._is_dragging and hit is not None and hit != self._last_hovered:
            self.engine.update_selection(hit)
            self._last_hovered = hit

        return hit

    def handle_mouse_release(self) -> bool:
        """
        Handles a left-button release.

        Returns:
            bool: True if a drag was in progress.
        """
        if not self._is_dragging:
            return False

        self._is_dragging = False
        self._last_hovered = None
        self.engine.end_selection(copy_to_clipboard=self.settings.copy_on_release)
        return True

    def wants_context_menu(self) -> bool:
        """
        Decides what a right click does: show the menu when something is
        selected, otherwise cancel the selection.
        """
        if self.engine.has_selection():
            return True
        self.engine.cancel_selection()
        return False

    def handle_key(self, key, modifiers) -> bool:
        """
        Maps a key press to a selection command.

        Returns:
            bool: True if the key was consumed.
        """
        if not self.settings.enable_hotkeys:
            return False

        ctrl = bool(modifiers & Qt.ControlModifier)

        if ctrl and key == Qt.Key_A:
            self.engine.select_all()
            return True
        if ctrl and key == Qt.Key_C:
            self.engine.copy_selection()
            return True
        if key == Qt.Key_Escape:
            self._is_dragging = False
            self._last_hovered = None
            self.engine.cancel_selection()
            return True

        return False

    def handle_key_press(self, event):
        """
        Handles key press events for the overlay.
        """
        if self.handle_key(event.key(), event.modifiers()):
            event.accept()
        else:
            event.ignore()
