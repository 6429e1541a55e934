from __future__ import annotations

import pytest

from adapters.sites.web import WebAdapter, parse_url_arg
from core.config import AppSettings
from core.domain.arguments import Arguments


@pytest.mark.parametrize(
    "value,expected",
    [
        ("https://example.com", "https://example.com"),
        ({"url": "https://example.com"}, "https://example.com"),
        (["https://example.com", "ignored"], "https://example.com"),
        (Arguments.of(["https://example.com"]), "https://example.com"),
        (None, None),
        ("", None),
        ([], None),
        ({}, None),
    ],
)
def test_parse_url_arg(value, expected):
    assert parse_url_arg(value) == expected


def test_parse_url_arg_rejects_other_types():
    with pytest.raises(TypeError):
        parse_url_arg(42)


def test_no_arguments_opens_home_url(settings):
    command = WebAdapter(settings).generate_command(Arguments.of())

    assert command.url == "http://eqdw.net"
    assert command.site == "web"


def test_home_url_is_configurable():
    adapter = WebAdapter(AppSettings(home_url="https://start.example"))

    assert adapter.command_for().url == "https://start.example"
    assert adapter.command_for("https://other.example").url == "https://other.example"
