"""
Handles persistence of live-text settings to/from a JSON file.
"""
import json
import os
from pathlib import Path
from typing import Optional, Union

from livetext.utils.logging_config import logger
from livetext.utils.resource_loader import get_config_dir

from .models import LiveTextSettings

SETTINGS_FILE_NAME = "live_text.json"


class SettingsStore:
    """Manages saving and loading settings to/from disk."""

    def __init__(self, file_path: Optional[Union[str, Path]] = None):
        self._file_path: Optional[Path] = Path(file_path) if file_path else None

    @property
    def file_path(self) -> Path:
        """
        Get the settings file path, defaulting to the user's config directory.

        Returns:
            Path to the JSON settings file
        """
        if self._file_path is None:
            self._file_path = get_config_dir() / SETTINGS_FILE_NAME
        return self._file_path

    def load(self) -> LiveTextSettings:
        """
        Load settings from disk.

        Returns:
            Stored settings, or defaults when the file is missing or unreadable
        """
        if not self.file_path.exists():
            return LiveTextSettings()

        try:
            with open(self.file_path, 'r', encoding='utf-8') as f:
                data = json.load(f)
        except (OSError, ValueError) as e:
            logger.warning(f"Failed to load settings from {self.file_path}: {e}")
            return LiveTextSettings()

        if not isinstance(data, dict):
            logger.warning(f"Ignoring malformed settings file: {self.file_path}")
            return LiveTextSettings()

        return LiveTextSettings.from_dict(data)

    def save(self, settings: LiveTextSettings) -> bool:
        """
        Save settings to disk.

        Args:
            settings: Settings to store

        Returns:
            True if save was successful, False otherwise
        """
        try:
            os.makedirs(self.file_path.parent, exist_ok=True)
            with open(self.file_path, 'w', encoding='utf-8') as f:
                json.dump(settings.to_dict(), f, indent=2)
            return True
        except OSError as e:
            logger.warning(f"Failed to save settings to {self.file_path}: {e}")
            return False

    def delete(self) -> bool:
        """
        Delete the settings file.

        Returns:
            True if deletion was successful or file didn't exist
        """
        if not self.file_path.exists():
            return True

        try:
            os.remove(self.file_path)
            return True
        except OSError as e:
            logger.warning(f"Failed to delete settings file: {e}")
            return False
