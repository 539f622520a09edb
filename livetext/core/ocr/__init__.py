"""
OCR providers, background worker and result post-processing.
"""

from .base import OcrEngine
from .ocr_worker import OcrWorker
from .postprocess import filter_by_confidence, rescale_regions
from .tesseract_engine import TesseractOcrEngine, regions_from_words

__all__ = [
    "OcrEngine",
    "OcrWorker",
    "TesseractOcrEngine",
    "filter_by_confidence",
    "rescale_regions",
    "regions_from_words",
]
