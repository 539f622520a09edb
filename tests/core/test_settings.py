from __future__ import annotations

import json

from livetext.core.settings import LiveTextSettings, SettingsStore


def test_defaults():
    settings = LiveTextSettings()

    assert settings.preferred_language == "en"
    assert settings.min_confidence == 0.5
    assert settings.horizontal_tolerance == 35.0
    assert settings.vertical_tolerance == 5.0
    assert settings.mask_padding == 10.0
    assert settings.mask_corner_radius == 8.0
    assert settings.enable_hotkeys is True


def test_from_dict_ignores_unknown_keys_and_wrong_types():
    settings = LiveTextSettings.from_dict(
        {
            "preferred_language": "ja",
            "enable_hotkeys": 0,
            "mask_padding": 12,
            "max_image_size": 1024.5,
            "unknown": True,
        }
    )

    assert settings.preferred_language == "ja"
    assert settings.enable_hotkeys is True
    assert settings.mask_padding == 12.0
    assert isinstance(settings.mask_padding, float)
    assert settings.max_image_size == 2048


def test_from_dict_clamps_fractions():
    settings = LiveTextSettings.from_dict({"min_confidence": 1.5, "bounds_opacity": -1})

    assert settings.min_confidence == 1.0
    assert settings.bounds_opacity == 0.0


def test_merger_uses_configured_tolerances():
    merger = LiveTextSettings(horizontal_tolerance=20, vertical_tolerance=2).merger()

    assert merger.horizontal_tolerance == 20
    assert merger.vertical_tolerance == 2


def test_reset_to_defaults():
    settings = LiveTextSettings(copy_on_release=True, mask_color=0)

    settings.reset_to_defaults()

    assert settings == LiveTextSettings()


def test_store_round_trip(tmp_path):
    store = SettingsStore(tmp_path / "live_text.json")
    settings = LiveTextSettings(preferred_language="zh-Hans", copy_on_release=True)

    assert store.save(settings)
    assert store.load() == settings


def test_store_missing_or_corrupt_file_gives_defaults(tmp_path):
    path = tmp_path / "live_text.json"
    store = SettingsStore(path)

    assert store.load() == LiveTextSettings()

    path.write_text("{not json", encoding="utf-8")
    assert store.load() == LiveTextSettings()

    path.write_text(json.dumps([1, 2, 3]), encoding="utf-8")
    assert store.load() == LiveTextSettings()


def test_store_delete(tmp_path):
    store = SettingsStore(tmp_path / "live_text.json")
    store.save(LiveTextSettings())

    assert store.delete()
    assert not store.file_path.exists()
    assert store.delete()


def test_store_defaults_to_config_dir():
    store = SettingsStore()

    assert store.file_path.name == "live_text.json"
    assert store.file_path.parent.is_dir()
