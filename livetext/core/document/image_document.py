"""
Image loaded for preview and OCR.
"""

import hashlib
from typing import Dict, Optional, Tuple

import fitz
from PyQt5.QtGui import QImage, QPixmap


class ImageDocument:
    """
    A bitmap opened from disk, normalized to RGB without alpha.

    Provides:
    - QPixmap rendering at a zoom level (cached)
    - Upscaled captures for OCR
    - A content digest for caching OCR results
    """

    def __init__(self, path: str):
        self.path = str(path)
        self._pixmap = self._normalize(fitz.Pixmap(self.path))
        self._digest: Optional[str] = None

        # Rendering cache
        self._pixmap_cache: Dict[float, QPixmap] = {}
        self._max_cache_size = 3  # Keep last 3 zoom levels

    @staticmethod
    def _normalize(pix: fitz.Pixmap) -> fitz.Pixmap:
        if pix.colorspace is not None and pix.colorspace.n != 3:
            pix = fitz.Pixmap(fitz.csRGB, pix)
        if pix.alpha:
            pix = fitz.Pixmap(pix, 0)
        return pix

    @property
    def width(self) -> int:
        return self._pixmap.width

    @property
    def height(self) -> int:
        return self._pixmap.height

    @property
    def bitmap(self) -> fitz.Pixmap:
        return self._pixmap

    @property
    def digest(self) -> str:
        """MD5 of the pixel data."""
        if self._digest is None:
            self._digest = hashlib.md5(self._pixmap.samples).hexdigest()
        return self._digest

    def render_pixmap(self, zoom: float = 1.0, use_cache: bool = True) -> QPixmap:
        """
        Render the image to a QPixmap at the specified zoom level.

        Args:
            zoom: Zoom factor (1.0 = 100%)
            use_cache: Whether to use/store in cache

        Returns:
            QPixmap of the image
        """
        if use_cache and zoom in self._pixmap_cache:
            return self._pixmap_cache[zoom]

        pix = self._scaled(zoom)

        # QImage shares the buffer; copy so the pixmap owns its data
        img = QImage(
            pix.samples, pix.width, pix.height, pix.stride, QImage.Format_RGB888
        ).copy()
        pixmap = QPixmap.fromImage(img)

        if use_cache:
            self._pixmap_cache[zoom] = pixmap

            if len(self._pixmap_cache) > self._max_cache_size:
                # Remove oldest entry
                oldest_key = next(iter(self._pixmap_cache))
                del self._pixmap_cache[oldest_key]

        return pixmap

    def ocr_capture(
        self, scale_factor: float = 2.0, max_size: int = 0
    ) -> Tuple[fitz.Pixmap, float]:
        """
        Produce an upscaled copy of the image for recognition.

        Args:
            scale_factor: Requested upscale factor
            max_size: Cap on the longer side in pixels (0 for no cap)

        Returns:
            Tuple of (capture pixmap, effective scale relative to the image)
        """
        longest = max(self.width, self.height)
        scale = scale_factor if scale_factor > 0 else 1.0
        if max_size and longest * scale > max_size:
            scale = max_size / longest

        target_width = max(1, int(round(self.width * scale)))
        target_height = max(1, int(round(self.height * scale)))
        if target_width == self.width and target_height == self.height:
            return self._pixmap, 1.0

        capture = fitz.Pixmap(self._pixmap, target_width, target_height)
        return capture, target_width / self.width

    def _scaled(self, zoom: float) -> fitz.Pixmap:
        if zoom == 1.0:
            return self._pixmap
        width = max(1, int(round(self.width * zoom)))
        height = max(1, int(round(self.height * zoom)))
        return fitz.Pixmap(self._pixmap, width, height)

    def clear_cache(self):
        """Clear the rendering cache to free memory."""
        self._pixmap_cache.clear()

    def __repr__(self) -> str:
        return f"ImageDocument(path={self.path!r}, size={self.width}x{self.height})"
