"""
Controllers for handling user interactions and OCR flow.
"""
from .input_handler import OverlayInputHandler
from .live_text_controller import LiveTextController

__all__ = [
    'OverlayInputHandler',
    'LiveTextController',
]
