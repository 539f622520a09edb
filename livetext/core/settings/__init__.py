"""
Live-text settings and their persistence.
"""
from .models import LiveTextSettings
from .persistence import SettingsStore

__all__ = ['LiveTextSettings', 'SettingsStore']
