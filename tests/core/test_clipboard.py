from __future__ import annotations

import pyperclip

from livetext.core.clipboard import PyperclipClipboard


def test_set_text_copies_through_pyperclip(monkeypatch):
    copied = []
    monkeypatch.setattr(pyperclip, "copy", copied.append)

    assert PyperclipClipboard().set_text("hello") is True
    assert copied == ["hello"]


def test_set_text_rejects_empty_text(monkeypatch):
    copied = []
    monkeypatch.setattr(pyperclip, "copy", copied.append)

    assert PyperclipClipboard().set_text("") is False
    assert copied == []


def test_set_text_reports_pyperclip_failure(monkeypatch):
    def fail(text):
        raise pyperclip.PyperclipException("no clipboard mechanism")

    monkeypatch.setattr(pyperclip, "copy", fail)

    assert PyperclipClipboard().set_text("hello") is False
