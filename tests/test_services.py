"""Test the system clipboard service."""
from __future__ import annotations

import subprocess
import sys
from pathlib import Path

import pytest

# Add src to path
src_path = Path(__file__).parent.parent / "src"
if str(src_path) not in sys.path:
    sys.path.insert(0, str(src_path))

from core.exceptions import ClipboardUnavailableError
from services import clipboard


def test_no_clipboard_command(monkeypatch):
    monkeypatch.setattr(clipboard.shutil, "which", lambda name: None)
    assert clipboard.find_clipboard_command() is None
    with pytest.raises(ClipboardUnavailableError):
        clipboard.copy_to_clipboard("https://survey.example.com/")


def test_first_available_command_wins(monkeypatch):
    monkeypatch.setattr(clipboard.shutil, "which", lambda name: "/usr/bin/xclip" if name == "xclip" else None)
    assert clipboard.find_clipboard_command() == ["xclip", "-selection", "clipboard"]


def test_copy_runs_command(monkeypatch):
    calls = []

    def fake_run(command, **kwargs):
        calls.append((command, kwargs["input"]))
        return subprocess.CompletedProcess(command, 0)

    monkeypatch.setattr(clipboard.shutil, "which", lambda name: "/usr/bin/pbcopy" if name == "pbcopy" else None)
    monkeypatch.setattr(clipboard.subprocess, "run", fake_run)

    clipboard.copy_to_clipboard("link")
    assert calls == [(["pbcopy"], b"link")]


def test_command_failure(monkeypatch):
    def fake_run(command, **kwargs):
        raise subprocess.CalledProcessError(1, command)

    monkeypatch.setattr(clipboard.shutil, "which", lambda name: "/usr/bin/pbcopy" if name == "pbcopy" else None)
    monkeypatch.setattr(clipboard.subprocess, "run", fake_run)

    with pytest.raises(ClipboardUnavailableError):
        clipboard.copy_to_clipboard("link")
