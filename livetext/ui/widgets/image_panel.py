"""
Image preview with the live-text overlay and its toggle.
"""

from typing import Optional

from PyQt5.QtCore import Qt, pyqtSignal
from PyQt5.QtWidgets import QHBoxLayout, QLabel, QScrollArea, QToolButton, QVBoxLayout, QWidget

from livetext.controllers.live_text_controller import LiveTextController
from livetext.core.document import ImageDocument
from livetext.core.ocr import OcrEngine
from livetext.core.selection import SelectionEngine
from livetext.core.settings import LiveTextSettings
from livetext.utils.logging_config import logger

from .live_text_overlay import LiveTextOverlay


class ImagePanel(QWidget):
    """
    Shows one image at 100% with the overlay stacked on top.

    The overlay has the same size as the image label, so overlay coordinates
    are image pixel coordinates.
    """

    # Signals
    status_changed = pyqtSignal(str)
    document_loaded = pyqtSignal(str)

    def __init__(self, ocr_engine: OcrEngine, settings: LiveTextSettings, parent=None):
        super().__init__(parent)

        self.settings = settings
        self.document: Optional[ImageDocument] = None
        self._live_text_active = False

        self.engine = SelectionEngine(
            merger=settings.merger(),
            selection_merge_tolerance=settings.selection_merge_tolerance,
            mask_padding=settings.mask_padding,
            mask_corner_radius=settings.mask_corner_radius,
            parent=self,
        )
        self.controller = LiveTextController(self.engine, ocr_engine, settings, parent=self)
        self.controller.status_changed.connect(self._set_status)
        self.controller.processing_changed.connect(self._on_processing_changed)

        self._ocr_available = self.controller.is_available()

        self.setup_ui()

    def setup_ui(self):
        layout = QVBoxLayout(self)
        layout.setContentsMargins(0, 0, 0, 0)
        layout.setSpacing(0)

        # Toolbar
        toolbar = QHBoxLayout()
        toolbar.setContentsMargins(8, 4, 8, 4)

        self.live_text_button = QToolButton()
        self.live_text_button.setText("Live Text")
        self.live_text_button.setCheckable(True)
        self.live_text_button.setEnabled(False)
        self.live_text_button.toggled.connect(self.set_live_text_enabled)
        if not self._ocr_available:
            self.live_text_button.setToolTip("Text recognition is not available (Tesseract language data not found)")
        else:
            self.live_text_button.setToolTip("Select text in the image")

        self.status_label = QLabel()
        self.status_label.setAlignment(Qt.AlignRight | Qt.AlignVCenter)

        toolbar.addWidget(self.live_text_button)
        toolbar.addStretch()
        toolbar.addWidget(self.status_label)
        layout.addLayout(toolbar)

        # Image with overlay
        self.image_label = QLabel()
        self.image_label.setAlignment(Qt.AlignLeft | Qt.AlignTop)

        self.overlay = LiveTextOverlay(self.engine, self.settings, parent=self.image_label)
        self.overlay.hide()
        self.overlay.status_changed.connect(self._set_status)

        self.scroll_area = QScrollArea()
        self.scroll_area.setWidget(self.image_label)
        self.scroll_area.setAlignment(Qt.AlignCenter)
        layout.addWidget(self.scroll_area)

    @property
    def live_text_enabled(self) -> bool:
        return self.live_text_button.isChecked()

    def load_image(self, file_path: str) -> bool:
        """
        Open an image and show it.

        Returns:
            bool: True if the image was loaded.
        """
        try:
            document = ImageDocument(file_path)
        except (RuntimeError, OSError, ValueError) as e:
            logger.error(f"Failed to open image {file_path}: {e}")
            self._set_status(f"Could not open {file_path}")
            return False

        self.controller.clear()
        self.document = document

        pixmap = document.render_pixmap(1.0)
        self.image_label.setPixmap(pixmap)
        self.image_label.setFixedSize(pixmap.size())
        self.overlay.setGeometry(0, 0, pixmap.width(), pixmap.height())

        self.live_text_button.setEnabled(self._ocr_available)
        logger.info(f"Loaded {document!r}")
        self.document_loaded.emit(file_path)

        if self.live_text_enabled:
            self._start_live_text()
        elif self.settings.enabled and self.settings.auto_detect_text:
            self.live_text_button.setChecked(True)
        return True

    def set_live_text_enabled(self, enabled: bool):
        """Show or hide the overlay, running OCR when it is shown."""
        if self.live_text_button.isChecked() != enabled:
            # Re-enters through the toggled signal
            self.live_text_button.setChecked(enabled)
            return
        if enabled == self._live_text_active:
            return

        self._live_text_active = enabled
        if enabled:
            self._start_live_text()
        else:
            self.controller.clear()
            self.overlay.hide()
            self._set_status("")

    def apply_settings(self, settings: LiveTextSettings):
        self.settings = settings
        self.controller.settings = settings
        self.overlay.apply_settings(settings)

    def _start_live_text(self):
        if self.document is None or not self._ocr_available:
            return
        self.overlay.show()
        self.overlay.raise_()
        self.overlay.setFocus()
        self.overlay.show_help()
        self.controller.request_ocr(self.document)

    def _on_processing_changed(self, processing: bool):
        self.setCursor(Qt.BusyCursor if processing else Qt.ArrowCursor)

    def _set_status(self, message: str):
        self.status_label.setText(message)
        self.status_changed.emit(message)
