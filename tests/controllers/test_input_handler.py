from __future__ import annotations

from PyQt5.QtCore import Qt

from livetext.controllers import OverlayInputHandler
from livetext.core.regions import TextRegion
from livetext.core.selection import SelectionEngine
from livetext.core.settings import LiveTextSettings


class RecordingClipboard:
    def __init__(self):
        self.texts: list[str] = []

    def set_text(self, text: str) -> bool:
        self.texts.append(text)
        return True


def _setup(**settings_overrides):
    clipboard = RecordingClipboard()
    engine = SelectionEngine(clipboard=clipboard)
    engine.set_text_regions(
        [
            TextRegion.from_box("Hello", 0, 0, 50, 20, line_index=0, word_index=0),
            TextRegion.from_box("World", 60, 0, 110, 20, line_index=0, word_index=1),
            TextRegion.from_box("Bye", 0, 40, 40, 60, line_index=1, word_index=0),
        ]
    )
    handler = OverlayInputHandler(engine, LiveTextSettings(**settings_overrides))
    return handler, engine, clipboard


def test_drag_selects_range_and_release_ends_drag():
    handler, engine, clipboard = _setup()

    assert handler.handle_mouse_press(10, 10)
    handler.handle_mouse_move(55, 10)  # gap between words
    handler.handle_mouse_move(10, 50)
    assert handler.handle_mouse_release()

    assert engine.get_selected_text() == "Hello World\nBye"
    assert not engine.is_selecting
    assert clipboard.texts == []


def test_release_copies_when_copy_on_release_enabled():
    handler, engine, clipboard = _setup(copy_on_release=True)

    handler.handle_mouse_press(70, 10)
    handler.handle_mouse_release()

    assert clipboard.texts == ["World"]


def test_press_on_empty_space_cancels_unless_additive():
    handler, engine, _ = _setup()
    engine.select_all()

    assert not handler.handle_mouse_press(300, 300, additive=True)
    assert engine.has_selection()

    assert not handler.handle_mouse_press(300, 300)
    assert not engine.has_selection()


def test_additive_press_extends_selection():
    handler, engine, _ = _setup()

    handler.handle_mouse_press(10, 10)
    handler.handle_mouse_release()
    handler.handle_mouse_press(10, 50, additive=True)
    handler.handle_mouse_release()

    assert engine.get_selected_text() == "Hello\nBye"


def test_move_without_press_only_reports_hit():
    handler, engine, _ = _setup()

    hit = handler.handle_mouse_move(70, 10)

    assert hit.region.text == "World"
    assert not engine.has_selection()
    assert not handler.handle_mouse_release()


def test_press_without_regions_does_nothing():
    handler, engine, _ = _setup()
    engine.set_text_regions([])

    assert not handler.handle_mouse_press(10, 10)


def test_context_menu_only_with_selection():
    handler, engine, _ = _setup()

    assert not handler.wants_context_menu()

    engine.select_all()
    assert handler.wants_context_menu()


def test_hotkeys_map_to_engine_commands():
    handler, engine, clipboard = _setup()

    assert handler.handle_key(Qt.Key_A, Qt.ControlModifier)
    assert engine.get_selected_text() == "Hello World\nBye"

    assert handler.handle_key(Qt.Key_C, Qt.ControlModifier)
    assert clipboard.texts == ["Hello World\nBye"]

    assert handler.handle_key(Qt.Key_Escape, Qt.NoModifier)
    assert not engine.has_selection()

    assert not handler.handle_key(Qt.Key_A, Qt.NoModifier)


def test_hotkeys_can_be_disabled():
    handler, engine, _ = _setup(enable_hotkeys=False)

    assert not handler.handle_key(Qt.Key_A, Qt.ControlModifier)
    assert not engine.has_selection()
