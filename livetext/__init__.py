"""
Live-text image preview: OCR-backed selectable text over images.
"""

__version__ = "0.1.0"
