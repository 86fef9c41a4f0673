# SPDX-FileCopyrightText: 2025 Lucas S
#
# SPDX-License-Identifier: GPL-3.0-or-later

import logging
from typing import Any, Mapping, TypeVar

from wpapi.options import DEFAULT_ENV_PREFIX, merge_options, options_from_env
from wpapi.request import WPRequest
from wpapi.resources import (
    MediaRequest,
    PagesRequest,
    PostsRequest,
    TaxonomiesRequest,
    TypesRequest,
    UsersRequest,
)
from wpapi.transport.base import WPTransport

logger = logging.getLogger(__name__)

R = TypeVar("R", bound=WPRequest)


class WP:
    """
    Entry point bound to one site: every factory returns a fresh request
    builder sharing this site's options and transport.

        wp = WP({"endpoint": "https://example.com/wp-json"})
        terms = await wp.taxonomies().id("category").terms()
    """

    def __init__(
        self,
        options: Mapping[str, Any] | None = None,
        transport: WPTransport | None = None,
    ) -> None:
        self._options = dict(options or {})
        self._transport = transport

    @classmethod
    def site(cls, endpoint: str, transport: WPTransport | None = None) -> "WP":
        return cls({"endpoint": endpoint}, transport=transport)

    @classmethod
    def from_env(
        cls,
        prefix: str = DEFAULT_ENV_PREFIX,
        transport: WPTransport | None = None,
        **overrides: Any,
    ) -> "WP":
        options = merge_options(options_from_env(prefix), overrides)
        logger.debug("Configured site from environment: %s", options.get("endpoint"))
        return cls(options, transport=transport)

    @property
    def options(self) -> Mapping[str, Any]:
        return self._options

    def request(self, request_type: type[R]) -> R:
        return request_type(self._options, transport=self._transport)

    def taxonomies(self) -> TaxonomiesRequest:
        return self.request(TaxonomiesRequest)

    def users(self) -> UsersRequest:
        return self.request(UsersRequest)

    def posts(self) -> PostsRequest:
        return self.request(PostsRequest)

    def pages(self) -> PagesRequest:
        return self.request(PagesRequest)

    def types(self) -> TypesRequest:
        return self.request(TypesRequest)

    def media(self) -> MediaRequest:
        return self.request(MediaRequest)
