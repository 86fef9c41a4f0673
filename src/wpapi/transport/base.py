# SPDX-FileCopyrightText: 2025 Lucas S
#
# SPDX-License-Identifier: GPL-3.0-or-later

from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Any, Dict, Optional, Protocol

if TYPE_CHECKING:
    from wpapi.errors import WPResponseError


@dataclass
class TransportRequest:
    url: str
    method: str
    headers: list[tuple[str, str]] = field(default_factory=list)
    body: bytes | None = None
    timeout: Optional[float] = None


@dataclass
class TransportResponse:
    status_code: int
    body: Any = None
    headers: Dict[str, str] = field(default_factory=dict)
    error: Optional["WPResponseError"] = None
    elapsed_time: Optional[float] = None


class WPTransport(Protocol):

    async def request(
        self,
        request: TransportRequest,
    ) -> TransportResponse: ...


class RequestMiddleware(Protocol):

    def on_request(self, request: TransportRequest) -> TransportRequest: ...
