from __future__ import annotations

import json

from core.config import AppSettings, get_user_env_file, read_user_env_vars, write_user_env_vars


def test_defaults(settings):
    assert settings.apidock_url == "http://apidock.com"
    assert settings.default_branch == "master"
    assert settings.repo_aliases == {}
    assert settings.open_command is None


def test_environment_overrides(monkeypatch):
    monkeypatch.setenv("SITEJUMP_DEFAULT_BRANCH", "main")
    monkeypatch.setenv("SITEJUMP_REPO_ALIASES", json.dumps({"df": "https://github.com/eqdw/dotfiles"}))
    monkeypatch.setenv("SITEJUMP_OPEN_COMMAND", "xdg-open")

    settings = AppSettings()

    assert settings.default_branch == "main"
    assert settings.repo_aliases == {"df": "https://github.com/eqdw/dotfiles"}
    assert settings.open_command == "xdg-open"


def test_user_env_file_lives_under_xdg_config_home(tmp_path):
    assert get_user_env_file() == tmp_path / "config" / "sitejump" / ".env"


def test_write_then_read_merges_values(tmp_path):
    env_path = tmp_path / "user.env"
    write_user_env_vars({"SITEJUMP_DEFAULT_BRANCH": "main"}, env_path)
    write_user_env_vars({"SITEJUMP_REPO_ALIASES": '{"df": "https://x"}'}, env_path)

    assert read_user_env_vars(env_path) == {
        "SITEJUMP_DEFAULT_BRANCH": "main",
        "SITEJUMP_REPO_ALIASES": '{"df": "https://x"}',
    }


def test_written_env_file_is_readable_by_settings(tmp_path):
    env_path = tmp_path / "user.env"
    write_user_env_vars({"SITEJUMP_REPO_ALIASES": json.dumps({"df": "https://x"})}, env_path)

    settings = AppSettings(_env_file=env_path)

    assert settings.repo_aliases == {"df": "https://x"}


def test_read_missing_file(tmp_path):
    assert read_user_env_vars(tmp_path / "nope.env") == {}
