# SPDX-FileCopyrightText: 2025 Lucas S
#
# SPDX-License-Identifier: GPL-3.0-or-later

from typing import TYPE_CHECKING, Iterable

if TYPE_CHECKING:
    from wpapi.transport.base import TransportRequest, TransportResponse


class WPError(Exception):
    """Base exception for every error raised by wpapi"""


class UnsupportedMethodError(WPError, ValueError):
    """Raised when a verb is invoked on a request that does not permit it"""

    def __init__(self, method: str, supported_methods: Iterable[str]):
        self.method = method
        self.supported_methods = list(supported_methods)
        super().__init__(
            "Unsupported method; supported methods are: "
            + ", ".join(self.supported_methods)
        )


class WPConfigurationError(WPError):
    """Raised when options or environment configuration are invalid"""


class WPTransportError(WPError):
    """Base class for failures surfaced by the transport"""


class WPRequestNetworkError(WPTransportError):

    def __init__(self, request: "TransportRequest", backend_request: object = None):
        self.request = request
        self.backend_request = backend_request
        super().__init__(f"Network error on {request.method} {request.url}")


class WPTimeoutError(WPTransportError):
    """Raised when the transport gives up waiting for a response"""


class WPResponseError(WPTransportError):

    def __init__(self, request: "TransportRequest", response: "TransportResponse"):
        self.request = request
        self.response = response
        self.status_code = response.status_code
        super().__init__(
            f"{request.method} {request.url} failed with status {response.status_code}"
        )


__all__ = [
    "WPError",
    "UnsupportedMethodError",
    "WPConfigurationError",
    "WPTransportError",
    "WPRequestNetworkError",
    "WPTimeoutError",
    "WPResponseError",
]
