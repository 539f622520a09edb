"""
Exceptions raised at the OCR boundary.
"""


class LiveTextError(Exception):
    """Base class for live-text errors."""


class OcrError(LiveTextError):
    """Text recognition failed."""


class OcrCancelledError(OcrError):
    """A recognition request was cancelled before it finished."""


class OcrUnavailableError(OcrError):
    """No usable OCR backend (e.g. Tesseract language data not found)."""
