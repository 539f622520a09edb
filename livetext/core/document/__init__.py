"""
Image document loading and rendering.
"""

from .image_document import ImageDocument

__all__ = ["ImageDocument"]
