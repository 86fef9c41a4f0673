# SPDX-FileCopyrightText: 2025 Lucas S
#
# SPDX-License-Identifier: GPL-3.0-or-later

"""
Tests for the site entry point and environment configuration.
"""

import pytest

from tests.conftest import FakeTransport
from wpapi import (
    WP,
    MediaRequest,
    PagesRequest,
    PostsRequest,
    TaxonomiesRequest,
    TypesRequest,
    UsersRequest,
)
from wpapi.errors import WPConfigurationError
from wpapi.options import options_from_env


class TestSiteFactories:

    @pytest.mark.parametrize(
        "factory, request_type",
        [
            ("taxonomies", TaxonomiesRequest),
            ("users", UsersRequest),
            ("posts", PostsRequest),
            ("pages", PagesRequest),
            ("types", TypesRequest),
            ("media", MediaRequest),
        ],
    )
    def test_factories_return_fresh_builders(
        self, factory: str, request_type: type
    ) -> None:
        wp = WP.site("/wp-json/")

        first = getattr(wp, factory)()
        second = getattr(wp, factory)()

        assert isinstance(first, request_type)
        assert first is not second
        assert first._options == {"endpoint": "/wp-json/"}

    async def test_builders_share_the_site_transport(
        self, transport: FakeTransport
    ) -> None:
        wp = WP({"endpoint": "/wp-json"}, transport=transport)

        await wp.users().me()
        await wp.taxonomies().id("category")

        assert [request.url for request in transport.requests] == [
            "/wp-json/users/me",
            "/wp-json/taxonomies/category",
        ]


class TestEnvironmentConfiguration:

    def test_reads_prefixed_variables(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("WP_API_ENDPOINT", "https://example.com/wp-json")
        monkeypatch.setenv("WP_API_USERNAME", "admin")
        monkeypatch.setenv("WP_API_PASSWORD", "secret")
        monkeypatch.setenv("WP_API_TIMEOUT", "4.5")

        assert options_from_env() == {
            "endpoint": "https://example.com/wp-json",
            "username": "admin",
            "password": "secret",
            "timeout": 4.5,
        }

    def test_skips_unset_variables(self, monkeypatch: pytest.MonkeyPatch) -> None:
        for name in ("ENDPOINT", "USERNAME", "PASSWORD", "TIMEOUT"):
            monkeypatch.delenv(f"BLOG_{name}", raising=False)
        monkeypatch.setenv("BLOG_ENDPOINT", "/wp-json")

        assert options_from_env("BLOG_") == {"endpoint": "/wp-json"}

    def test_rejects_invalid_timeouts(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("WP_API_TIMEOUT", "soon")

        with pytest.raises(WPConfigurationError):
            options_from_env()

    def test_from_env_applies_overrides(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("WP_API_ENDPOINT", "/wp-json")
        monkeypatch.delenv("WP_API_TIMEOUT", raising=False)

        wp = WP.from_env(username="editor")

        assert wp.options["endpoint"] == "/wp-json"
        assert wp.options["username"] == "editor"
        assert wp.posts().generate_request_uri() == "/wp-json/posts"
