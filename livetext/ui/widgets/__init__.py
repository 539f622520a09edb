from .image_panel import ImagePanel
from .live_text_overlay import LiveTextOverlay, argb_to_qcolor, mask_path

__all__ = ['ImagePanel', 'LiveTextOverlay', 'argb_to_qcolor', 'mask_path']
