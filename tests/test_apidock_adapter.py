from __future__ import annotations

import pytest

from adapters.sites.apidock import ApiDockAdapter, lookup_url, query_url
from core.config import AppSettings
from core.domain.arguments import Arguments
from core.domain.models import ApiDockSubsite
from core.errors import ArgumentCountError, MissingArgumentError

BASE = "http://apidock.com"


@pytest.mark.parametrize(
    "tokens,prefix",
    [
        (("rb",), "ruby"),
        (("ruby",), "ruby"),
        (("r",), "rails"),
        (("rails",), "rails"),
        (("rs",), "rspec"),
        (("rspec",), "rspec"),
    ],
)
def test_lookup_and_query(settings, tokens: tuple[str, ...], prefix: str):
    adapter = ApiDockAdapter(settings)

    lookup = adapter.generate_command(Arguments.of([*tokens, "Array/each"]))
    query = adapter.generate_command(Arguments.of([*tokens, "q", "each"]))

    assert lookup.url == f"{BASE}/{prefix}/Array/each"
    assert lookup.action == f"{prefix}_lookup"
    assert query.url == f"{BASE}/{prefix}/search?query=each"
    assert query.action == f"{prefix}_query"


@pytest.mark.parametrize("tokens", [(), ("python",), ("js", "q", "map"), ("Q",)])
def test_unrecognized_sub_site_opens_front_page(settings, tokens: tuple[str, ...]):
    command = ApiDockAdapter(settings).generate_command(Arguments.of(tokens))

    assert command.url == BASE
    assert command.action == "home"


def test_missing_term_is_a_usage_error(settings):
    with pytest.raises(MissingArgumentError):
        ApiDockAdapter(settings).generate_command(Arguments.of(["rb", "q"]))
    with pytest.raises(MissingArgumentError):
        ApiDockAdapter(settings).generate_command(Arguments.of(["rails"]))


def test_extra_terms_are_a_usage_error(settings):
    with pytest.raises(ArgumentCountError):
        ApiDockAdapter(settings).generate_command(Arguments.of(["rb", "q", "each", "slice"]))


def test_base_url_from_settings_drops_trailing_slash():
    adapter = ApiDockAdapter(AppSettings(apidock_url="https://apidock.example/"))

    assert adapter.generate_command(Arguments.of(["rs", "expect"])).url == "https://apidock.example/rspec/expect"


def test_url_templates():
    assert query_url(BASE, ApiDockSubsite.RAILS, "has_many") == f"{BASE}/rails/search?query=has_many"
    assert lookup_url(BASE, ApiDockSubsite.RUBY, "String") == f"{BASE}/ruby/String"


def test_routes_cover_every_sub_site(settings):
    templates = [template for _, template in ApiDockAdapter(settings).describe_routes()]

    assert "<base>/ruby/search?query=<term>" in templates
    assert "<base>/rails/<term>" in templates
    assert "<base>/rspec/<term>" in templates
