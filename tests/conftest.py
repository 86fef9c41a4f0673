"""
Pytest configuration and fixtures for wpapi tests.
"""

from typing import Any

import pytest

from wpapi.transport.base import TransportRequest, TransportResponse


class FakeTransport:
    """Transport double recording every request it is handed."""

    def __init__(self) -> None:
        self.requests: list[TransportRequest] = []
        self.response = TransportResponse(status_code=200, body={}, headers={})
        self.error: Exception | None = None

    async def request(self, request: TransportRequest) -> TransportResponse:
        self.requests.append(request)
        if self.error is not None:
            raise self.error
        return self.response

    def respond(self, status_code: int = 200, body: Any = None, **headers: str) -> None:
        self.response = TransportResponse(
            status_code=status_code, body=body, headers=dict(headers)
        )

    @property
    def last_request(self) -> TransportRequest:
        return self.requests[-1]


@pytest.fixture
def transport() -> FakeTransport:
    return FakeTransport()


@pytest.fixture
def options() -> dict[str, Any]:
    return {"endpoint": "/wp-json/"}
