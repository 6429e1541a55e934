from __future__ import annotations

import pytest

from core.errors import MissingArgumentError
from core.services.url_resolver import UrlResolver, expand_ref, resolve_repo


def test_expand_ref_is_pass_through():
    assert expand_ref("feature/x") == "feature/x"
    assert expand_ref(["ref1"]) == "ref1"
    assert expand_ref(("ref1", "foo.rb")) == "ref1"


def test_expand_ref_requires_a_token():
    with pytest.raises(MissingArgumentError):
        expand_ref([])


def test_resolve_repo_identity_without_alias():
    assert resolve_repo("df") == "df"
    assert resolve_repo("df", {"other": "https://x"}) == "df"


def test_resolve_repo_uses_alias():
    assert resolve_repo("df", {"df": "https://github.com/eqdw/dotfiles/"}) == "https://github.com/eqdw/dotfiles"


def test_url_resolver_exposes_repo_and_expand_ref():
    resolver = UrlResolver("df", {"df": "https://github.com/eqdw/dotfiles"})

    assert resolver.repo == "https://github.com/eqdw/dotfiles"
    assert resolver.expand_ref(["v1", "README"]) == "v1"
