import os

from PyQt5.QtGui import QKeySequence
from PyQt5.QtWidgets import QAction, QFileDialog, QMainWindow, QMessageBox

from livetext.core.ocr import TesseractOcrEngine
from livetext.core.settings import SettingsStore
from livetext.ui.styles import apply_style
from livetext.ui.widgets.image_panel import ImagePanel
from livetext.utils.logging_config import logger

IMAGE_FILTER = "Images (*.png *.jpg *.jpeg *.bmp *.gif *.tif *.tiff *.webp);;All Files (*)"


class MainWindow(QMainWindow):
    def __init__(self, file_path=None, settings_store=None, ocr_engine=None):
        super().__init__()

        self.setWindowTitle("Live Text Preview")

        self.settings_store = settings_store or SettingsStore()
        self.settings = self.settings_store.load()
        self.ocr_engine = ocr_engine or TesseractOcrEngine()

        self.setup_ui()
        apply_style(self)

        if file_path:
            self.load_image(file_path)

    def setup_ui(self):
        self.image_panel = ImagePanel(self.ocr_engine, self.settings, parent=self)
        self.image_panel.status_changed.connect(self._show_status_message)
        self.setCentralWidget(self.image_panel)

        # File menu
        file_menu = self.menuBar().addMenu("&File")

        open_action = QAction("&Open...", self)
        open_action.setShortcut(QKeySequence.Open)
        open_action.triggered.connect(self.open_image)
        file_menu.addAction(open_action)

        file_menu.addSeparator()

        exit_action = QAction("E&xit", self)
        exit_action.setShortcut(QKeySequence.Quit)
        exit_action.triggered.connect(self.close)
        file_menu.addAction(exit_action)

        # View menu
        view_menu = self.menuBar().addMenu("&View")

        self.live_text_action = QAction("&Live Text", self)
        self.live_text_action.setCheckable(True)
        self.live_text_action.setShortcut("Ctrl+T")
        self.live_text_action.toggled.connect(self.image_panel.set_live_text_enabled)
        self.image_panel.live_text_button.toggled.connect(self.live_text_action.setChecked)
        view_menu.addAction(self.live_text_action)

        self.bounds_action = QAction("Show Text &Bounds", self)
        self.bounds_action.setCheckable(True)
        self.bounds_action.setChecked(self.settings.show_text_bounds)
        self.bounds_action.toggled.connect(self._toggle_text_bounds)
        view_menu.addAction(self.bounds_action)

        self.copy_on_release_action = QAction("Copy on &Release", self)
        self.copy_on_release_action.setCheckable(True)
        self.copy_on_release_action.setChecked(self.settings.copy_on_release)
        self.copy_on_release_action.toggled.connect(self._toggle_copy_on_release)
        view_menu.addAction(self.copy_on_release_action)

    def open_image(self):
        file_path, _ = QFileDialog.getOpenFileName(self, "Open Image", "", IMAGE_FILTER)
        if file_path:
            self.load_image(file_path)

    def load_image(self, file_path):
        if not self.image_panel.load_image(file_path):
            QMessageBox.critical(self, "Open Failed", f"Could not open image:\n{file_path}")
            return
        self.setWindowTitle(f"{os.path.basename(file_path)} - Live Text Preview")

    def _toggle_text_bounds(self, checked):
        self.settings.show_text_bounds = checked
        self.image_panel.apply_settings(self.settings)

    def _toggle_copy_on_release(self, checked):
        self.settings.copy_on_release = checked
        self.image_panel.apply_settings(self.settings)

    def _show_status_message(self, message):
        if message:
            self.statusBar().showMessage(message, 2000)
        else:
            self.statusBar().clearMessage()

    def closeEvent(self, event):
        """Persist live-text settings before closing."""
        self.image_panel.controller.shutdown()
        self.settings.enabled = self.image_panel.live_text_enabled
        if not self.settings_store.save(self.settings):
            logger.warning("Live-text settings were not saved")
        event.accept()
