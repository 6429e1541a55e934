from __future__ import annotations

import pytest

from core.config import AppSettings


class RecordingOpener:
    def __init__(self) -> None:
        self.urls: list[str] = []

    def open(self, url: str) -> None:
        self.urls.append(url)


@pytest.fixture(autouse=True)
def isolated_config(tmp_path, monkeypatch):
    """Keep real `.env` files and SITEJUMP_* variables out of the tests."""

    monkeypatch.chdir(tmp_path)
    monkeypatch.setenv("XDG_CONFIG_HOME", str(tmp_path / "config"))
    monkeypatch.setenv("APPDATA", str(tmp_path / "config"))
    monkeypatch.setitem(AppSettings.model_config, "env_file", None)
    for name in (
        "SITEJUMP_APIDOCK_URL",
        "SITEJUMP_HOME_URL",
        "SITEJUMP_DEFAULT_BRANCH",
        "SITEJUMP_REPO_ALIASES",
        "SITEJUMP_OPEN_COMMAND",
    ):
        monkeypatch.delenv(name, raising=False)


@pytest.fixture
def settings() -> AppSettings:
    return AppSettings()


@pytest.fixture
def opener() -> RecordingOpener:
    return RecordingOpener()
