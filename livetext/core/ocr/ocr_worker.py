"""
Background worker for OCR requests.
"""

from threading import Event

import fitz
from PyQt5.QtCore import QThread, pyqtSignal

from livetext.core.errors import OcrCancelledError, OcrError
from livetext.utils.logging_config import logger

from .base import OcrEngine


class OcrWorker(QThread):
    """Worker thread running text recognition without freezing the UI."""

    # Signals
    result_ready = pyqtSignal(int, object)  # request_id, List[TextRegion]
    failed = pyqtSignal(int, str)  # request_id, error message

    def __init__(
        self,
        engine: OcrEngine,
        bitmap: fitz.Pixmap,
        language: str,
        request_id: int,
        parent=None,
    ):
        super().__init__(parent)
        self._engine = engine
        self._bitmap = bitmap
        self._language = language
        self.request_id = request_id
        self._cancel_event = Event()

    def cancel(self):
        """Cancel the OCR operation."""
        self._cancel_event.set()

    @property
    def is_cancelled(self) -> bool:
        return self._cancel_event.is_set()

    def run(self):
        """Execute recognition in the background thread."""
        try:
            regions = self._engine.recognize(
                self._bitmap, self._language, self._cancel_event
            )
        except OcrCancelledError:
            logger.debug(f"OCR request {self.request_id} cancelled")
            return
        except OcrError as e:
            logger.warning(f"OCR request {self.request_id} failed: {e}")
            self.failed.emit(self.request_id, str(e))
            return
        except Exception as e:
            logger.exception(f"Unexpected error in OCR request {self.request_id}")
            self.failed.emit(self.request_id, str(e))
            return

        if self.is_cancelled:
            return

        self.result_ready.emit(self.request_id, regions)
