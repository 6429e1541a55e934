from __future__ import annotations

import io

import pytest
import typer
from rich.console import Console

from adapters.browser import PrintOpener, SystemOpener
from core.config import AppSettings


def test_system_opener_uses_typer_launch(monkeypatch):
    launched: list[str] = []
    monkeypatch.setattr(typer, "launch", lambda url: launched.append(url) or 0)

    SystemOpener(AppSettings()).open("https://example.com")

    assert launched == ["https://example.com"]


def test_system_opener_shells_out_to_open_command(monkeypatch):
    calls: list[list[str]] = []
    monkeypatch.setattr("adapters.browser.subprocess.Popen", lambda argv: calls.append(argv))

    SystemOpener(AppSettings(open_command="open")).open("https://example.com")

    assert calls == [["open", "https://example.com"]]


def test_open_command_availability(monkeypatch):
    monkeypatch.setattr("adapters.browser.shutil.which", lambda name: None)

    assert SystemOpener(AppSettings(open_command="open")).is_available() is False
    assert SystemOpener(AppSettings()).is_available() is True


def test_print_opener_writes_the_url():
    buffer = io.StringIO()
    PrintOpener(Console(file=buffer, width=20)).open("http://apidock.com/ruby/search?query=[each]")

    assert buffer.getvalue() == "http://apidock.com/ruby/search?query=[each]\n"


def test_system_opener_raises_when_launcher_fails(monkeypatch):
    monkeypatch.setattr(typer, "launch", lambda url: 127)

    with pytest.raises(OSError, match="could not open df"):
        SystemOpener(AppSettings()).open("df")
