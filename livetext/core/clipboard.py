"""
Clipboard access for copying recognized text.
"""

from typing import Protocol

import pyperclip

from livetext.utils.logging_config import logger


class Clipboard(Protocol):
    """Anything that can put text on the system clipboard."""

    def set_text(self, text: str) -> bool:
        """Return True when the text was stored."""
        ...


class PyperclipClipboard:
    """System clipboard through pyperclip. Failures are logged, never raised."""

    def set_text(self, text: str) -> bool:
        if not text:
            return False

        try:
            pyperclip.copy(text)
        except pyperclip.PyperclipException as e:
            logger.warning(f"Failed to copy text to clipboard: {e}")
            return False
        return True
