"""
Interface every OCR backend implements.
"""

from abc import ABC, abstractmethod
from threading import Event
from typing import List, Optional

import fitz

from livetext.core.errors import OcrCancelledError
from livetext.core.regions.models import TextRegion


class OcrEngine(ABC):
    """Turns a bitmap into text regions in bitmap pixel coordinates."""

    engine_name: str = "OCR"

    @abstractmethod
    def is_available(self) -> bool:
        """Check whether the backend can run on this machine."""

    @abstractmethod
    def supported_languages(self) -> List[str]:
        """Language codes the backend can recognize."""

    @abstractmethod
    def recognize(
        self,
        bitmap: fitz.Pixmap,
        language_hint: str = "en",
        cancel_event: Optional[Event] = None,
    ) -> List[TextRegion]:
        """
        Recognize text in a bitmap.

        Args:
            bitmap: RGB pixmap to read
            language_hint: Preferred language ("en", "zh-Hans", ...)
            cancel_event: Set by the caller to abandon the request

        Returns:
            Regions with line/word indices in reading order

        Raises:
            OcrCancelledError: cancel_event was set
            OcrError: recognition failed
        """

    @staticmethod
    def check_cancelled(cancel_event: Optional[Event]):
        if cancel_event is not None and cancel_event.is_set():
            raise OcrCancelledError("OCR request cancelled")
