"""
Transparent overlay that dims the image outside text and handles selection.
"""

from PyQt5.QtCore import QPoint, QRectF, Qt, QTimer, pyqtSignal
from PyQt5.QtGui import QBrush, QColor, QContextMenuEvent, QMouseEvent, QPainter, QPainterPath, QPen
from PyQt5.QtWidgets import QLabel, QMenu, QWidget

from livetext.controllers.input_handler import OverlayInputHandler
from livetext.core.regions import Rect, SpotlightMask
from livetext.core.selection import SelectionChangedEvent, SelectionEngine
from livetext.core.settings import LiveTextSettings
from livetext.utils.logging_config import logger

STATUS_TIMEOUT_MS = 2000
HELP_TIMEOUT_MS = 3000
HELP_TEXT = "Drag across text to select it. Ctrl+A selects all, Ctrl+C copies, Esc cancels."


def argb_to_qcolor(argb: int) -> QColor:
    """Convert a 0xAARRGGBB integer to a QColor."""
    return QColor(
        (argb >> 16) & 0xFF,
        (argb >> 8) & 0xFF,
        argb & 0xFF,
        (argb >> 24) & 0xFF,
    )


def _qrect(rect: Rect) -> QRectF:
    return QRectF(rect.x, rect.y, rect.width, rect.height)


def mask_path(mask: SpotlightMask) -> QPainterPath:
    """
    Build the dimming path: the full canvas with rounded holes cut out by
    the even-odd rule. Without holes the whole canvas is dimmed.
    """
    holes = QPainterPath()
    for hole in mask.holes:
        rounded = QPainterPath()
        rounded.addRoundedRect(_qrect(hole), mask.corner_radius, mask.corner_radius)
        holes = holes.united(rounded)

    path = QPainterPath()
    path.setFillRule(Qt.OddEvenFill)
    path.addRect(_qrect(mask.canvas))
    path.addPath(holes)
    return path


class LiveTextOverlay(QWidget):
    """
    Draws on top of the image preview.

    Features:
    - Spotlight mask with rounded holes over merged text clusters
    - Selection highlights, one rectangle per line run
    - Optional outlines around every recognized region
    - Copy / Select All / Cancel context menu
    - Transient status and help messages
    """

    # Signals
    text_selected = pyqtSignal(str)
    status_changed = pyqtSignal(str)

    def __init__(self, engine: SelectionEngine, settings: LiveTextSettings, parent=None):
        super().__init__(parent)

        self.engine = engine
        self.settings = settings
        self.input_handler = OverlayInputHandler(engine, settings)

        self.setAttribute(Qt.WA_TranslucentBackground)
        self.setMouseTracking(True)
        self.setFocusPolicy(Qt.StrongFocus)

        # Transient labels
        self._status_label = self._make_label()
        self._help_label = self._make_label()
        self._status_timer = QTimer(self)
        self._status_timer.setSingleShot(True)
        self._status_timer.timeout.connect(self._status_label.hide)
        self._help_timer = QTimer(self)
        self._help_timer.setSingleShot(True)
        self._help_timer.timeout.connect(self._help_label.hide)

        self.engine.selection_changed.connect(self._on_selection_changed)
        self.engine.regions_changed.connect(self.update)
        self.engine.text_copied.connect(self._on_text_copied)

    def _make_label(self) -> QLabel:
        label = QLabel(self)
        label.setStyleSheet(
            "QLabel { background-color: rgba(0, 0, 0, 180); color: white;"
            " border-radius: 6px; padding: 6px 10px; }"
        )
        label.hide()
        return label

    def apply_settings(self, settings: LiveTextSettings):
        self.settings = settings
        self.input_handler.settings = settings
        self.update()

    # Messages

    def show_status(self, message: str, timeout_ms: int = STATUS_TIMEOUT_MS):
        self._show_transient(self._status_label, self._status_timer, message, timeout_ms, top=False)
        self.status_changed.emit(message)

    def show_help(self):
        self._show_transient(self._help_label, self._help_timer, HELP_TEXT, HELP_TIMEOUT_MS, top=True)

    def _show_transient(self, label: QLabel, timer: QTimer, text: str, timeout_ms: int, top: bool):
        label.setText(text)
        label.adjustSize()
        x = max(0, (self.width() - label.width()) // 2)
        y = 12 if top else max(0, self.height() - label.height() - 12)
        label.move(QPoint(x, y))
        label.show()
        label.raise_()
        timer.start(timeout_ms)

    # Engine callbacks

    def _on_selection_changed(self, event: SelectionChangedEvent):
        if not event.is_selecting and event.count:
            self.text_selected.emit(self.engine.get_selected_text())
        self.update()

    def _on_text_copied(self, text: str):
        self.show_status(f"Copied {len(text)} characters")

    # Mouse event handlers

    def mousePressEvent(self, event: QMouseEvent):
        self.setFocus()

        if event.button() != Qt.LeftButton:
            return super().mousePressEvent(event)

        additive = bool(event.modifiers() & Qt.ControlModifier)
        self.input_handler.handle_mouse_press(event.x(), event.y(), additive)

    def mouseMoveEvent(self, event: QMouseEvent):
        hit = self.input_handler.handle_mouse_move(event.x(), event.y())
        self.setCursor(Qt.IBeamCursor if hit is not None else Qt.ArrowCursor)

    def mouseReleaseEvent(self, event: QMouseEvent):
        if event.button() != Qt.LeftButton:
            return super().mouseReleaseEvent(event)
        self.input_handler.handle_mouse_release()

    def contextMenuEvent(self, event: QContextMenuEvent):
        if not self.input_handler.wants_context_menu():
            return

        menu = QMenu(self)
        copy_action = menu.addAction("Copy Text")
        copy_action.setShortcut("Ctrl+C")
        select_all_action = menu.addAction("Select All")
        select_all_action.setShortcut("Ctrl+A")
        menu.addSeparator()
        cancel_action = menu.addAction("Cancel Selection")

        chosen = menu.exec_(event.globalPos())
        if chosen == copy_action:
            self.engine.copy_selection()
        elif chosen == select_all_action:
            self.engine.select_all()
        elif chosen == cancel_action:
            self.engine.cancel_selection()

    def keyPressEvent(self, event):
        self.input_handler.handle_key_press(event)
        if not event.isAccepted():
            super().keyPressEvent(event)

    # Paint methods

    def paintEvent(self, event):
        painter = QPainter(self)
        try:
            painter.setRenderHint(QPainter.Antialiasing)
            self._paint_mask(painter)
            if self.settings.show_text_bounds:
                self._paint_bounds(painter)
            self._paint_selection(painter)
        except Exception:
            logger.exception("Failed to paint live-text overlay")
        finally:
            painter.end()

    def _paint_mask(self, painter: QPainter):
        """Dim everything except padded text clusters."""
        mask = self.engine.spotlight_mask(self.width(), self.height())
        path = mask_path(mask)

        painter.setPen(Qt.NoPen)
        painter.setBrush(QBrush(argb_to_qcolor(self.settings.mask_color)))
        painter.drawPath(path)

    def _paint_bounds(self, painter: QPainter):
        """Outline each recognized region."""
        color = argb_to_qcolor(self.settings.bounds_color)
        color.setAlphaF(color.alphaF() * self.settings.bounds_opacity)
        painter.setPen(QPen(color, 1))
        painter.setBrush(Qt.NoBrush)

        for region in self.engine.text_regions:
            painter.drawRect(_qrect(region.bounding_box))

    def _paint_selection(self, painter: QPainter):
        """Paint selection highlights."""
        rects = self.engine.get_selection_rects()
        if not rects:
            return

        painter.setPen(Qt.NoPen)
        painter.setBrush(QBrush(argb_to_qcolor(self.settings.selection_color)))
        for rect in rects:
            painter.drawRoundedRect(_qrect(rect), 2, 2)
