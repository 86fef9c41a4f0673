# SPDX-FileCopyrightText: 2025 Lucas S
#
# SPDX-License-Identifier: GPL-3.0-or-later

import base64

from wpapi.transport.base import RequestMiddleware, TransportRequest


class AuthenticationMiddleware(RequestMiddleware):
    """Base class for authentication middleware"""

    def on_request(self, request: TransportRequest) -> TransportRequest:
        return self.add_auth(request)

    def add_auth(self, request: TransportRequest) -> TransportRequest:
        raise NotImplementedError


class BasicAuth(AuthenticationMiddleware):
    """Basic authentication middleware"""

    def __init__(self, username: str | None, password: str | None):
        # Missing credentials are sent as empty strings; the server decides.
        self.username = username or ""
        self.password = password or ""
        self.credentials = base64.b64encode(
            f"{self.username}:{self.password}".encode()
        ).decode()

    def add_auth(self, request: TransportRequest) -> TransportRequest:
        request.headers.append(("Authorization", f"Basic {self.credentials}"))
        return request
