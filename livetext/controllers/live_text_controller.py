"""
Coordinates OCR requests with the selection engine.
"""

from typing import Dict, List, Optional, Sequence, Set, Tuple

from PyQt5.QtCore import QObject, pyqtSignal

from livetext.core.document import ImageDocument
from livetext.core.ocr import OcrEngine, OcrWorker, filter_by_confidence, rescale_regions
from livetext.core.regions import TextRegion
from livetext.core.selection import SelectionEngine
from livetext.core.settings import LiveTextSettings
from livetext.utils.logging_config import logger


class LiveTextController(QObject):
    """
    Runs OCR in the background and feeds results to the selection engine.

    Every request gets a new id. Starting a request cancels the previous one,
    and results carrying an outdated id are discarded, so a slow superseded
    recognition can never overwrite newer regions.
    """

    # Signals
    status_changed = pyqtSignal(str)
    processing_changed = pyqtSignal(bool)

    def __init__(
        self,
        engine: SelectionEngine,
        ocr_engine: OcrEngine,
        settings: LiveTextSettings,
        parent=None,
    ):
        super().__init__(parent)
        self.engine = engine
        self.ocr_engine = ocr_engine
        self.settings = settings

        self._request_id = 0
        self._pending: Dict[int, Tuple[float, Optional[str]]] = {}  # id -> (scale, cache key)
        self._worker: Optional[OcrWorker] = None
        self._workers: Set[OcrWorker] = set()  # Running, including cancelled ones
        self._cache: Dict[str, List[TextRegion]] = {}
        self._is_processing = False

    @property
    def is_processing(self) -> bool:
        return self._is_processing

    @property
    def workers(self) -> Tuple[OcrWorker, ...]:
        """Workers whose threads have not finished yet."""
        return tuple(self._workers)

    @property
    def current_request_id(self) -> int:
        return self._request_id

    def is_available(self) -> bool:
        """Ask the OCR backend whether it can run; failures count as unavailable."""
        try:
            return self.ocr_engine.is_available()
        except Exception:
            logger.exception(f"{self.ocr_engine.engine_name} availability check failed")
            return False

    def register_request(self, scale: float = 1.0, cache_key: Optional[str] = None) -> int:
        """
        Start tracking a new request, superseding any earlier one.

        Returns:
            The new request id
        """
        self._pending.clear()
        self._request_id += 1
        self._pending[self._request_id] = (scale, cache_key)
        return self._request_id

    def request_ocr(self, document: ImageDocument) -> int:
        """
        Recognize text in a document in the background.

        Args:
            document: Image to read

        Returns:
            The request id
        """
        self.cancel_ocr()

        language = self.settings.preferred_language
        cache_key = f"{document.digest}:{language}"

        if self.settings.enable_cache and cache_key in self._cache:
            request_id = self.register_request(1.0, None)
            self._pending.pop(request_id, None)
            regions = self._cache[cache_key]
            self.engine.set_text_regions(regions)
            self.status_changed.emit(self._found_message(len(regions)))
            return request_id

        bitmap, scale = document.ocr_capture(
            self.settings.ocr_scale_factor, self.settings.max_image_size
        )
        request_id = self.register_request(scale, cache_key)

        worker = OcrWorker(self.ocr_engine, bitmap, language, request_id, parent=self)
        worker.result_ready.connect(self.apply_result)
        worker.failed.connect(self.apply_failure)
        worker.finished.connect(self._on_worker_finished)
        self._worker = worker
        self._workers.add(worker)

        self._set_processing(True)
        self.status_changed.emit("Recognizing text...")
        logger.info(f"OCR request {request_id} started ({language}, scale {scale:.2f})")
        worker.start()
        return request_id

    def apply_result(self, request_id: int, regions: Sequence[TextRegion]) -> bool:
        """
        Accept OCR output for a request.

        Regions below the confidence threshold are dropped and the rest are
        scaled back to display coordinates before replacing the engine's
        collection.

        Returns:
            True if the result was applied, False if it was superseded
        """
        pending = self._pending.pop(request_id, None)
        if request_id != self._request_id or pending is None:
            logger.debug(f"Discarding superseded OCR result {request_id}")
            return False

        scale, cache_key = pending
        kept = filter_by_confidence(regions, self.settings.min_confidence)
        kept = rescale_regions(kept, scale)

        if self.settings.enable_cache and cache_key:
            self._cache[cache_key] = kept

        self._worker = None
        self._set_processing(False)
        self.engine.set_text_regions(kept)
        self.status_changed.emit(self._found_message(len(kept)))
        return True

    def apply_failure(self, request_id: int, message: str) -> bool:
        """
        Report a failed request.

        Returns:
            True if the failure belonged to the current request
        """
        pending = self._pending.pop(request_id, None)
        if request_id != self._request_id or pending is None:
            return False

        self._worker = None
        self._set_processing(False)
        self.status_changed.emit("Text recognition failed")
        return True

    def cancel_ocr(self):
        """
        Cancel the in-flight request, if any.

        The cancelled worker stays tracked until its thread finishes, since
        recognition cannot be interrupted mid-call.
        """
        if self._worker is not None:
            self._worker.cancel()
            self._worker = None
        self._pending.clear()
        self._set_processing(False)

    def shutdown(self, timeout_ms: Optional[int] = None) -> bool:
        """
        Cancel all OCR and block until every worker thread has stopped.

        Must run before the controller is destroyed: Qt aborts the process
        when a running QThread is deleted.

        Args:
            timeout_ms: Per-worker wait limit, or None to wait until done

        Returns:
            True if no worker is left running
        """
        self.cancel_ocr()
        for worker in list(self._workers):
            worker.cancel()
            finished = worker.wait() if timeout_ms is None else worker.wait(timeout_ms)
            if not finished:
                logger.warning(f"OCR request {worker.request_id} still running after {timeout_ms} ms")
                continue
            self._workers.discard(worker)
        return not self._workers

    def clear(self):
        """Cancel OCR and drop all regions."""
        self.cancel_ocr()
        self.engine.set_text_regions([])
        self.status_changed.emit("")

    def clear_cache(self):
        self._cache.clear()

    def _on_worker_finished(self):
        worker = self.sender()
        if worker in self._workers:
            self._workers.discard(worker)
            worker.deleteLater()

    def _set_processing(self, processing: bool):
        if self._is_processing != processing:
            self._is_processing = processing
            self.processing_changed.emit(processing)

    @staticmethod
    def _found_message(count: int) -> str:
        if count == 0:
            return "No text found"
        return f"Found {count} text region{'s' if count != 1 else ''}"
