# SPDX-FileCopyrightText: 2025 Lucas S
#
# SPDX-License-Identifier: GPL-3.0-or-later

import logging
import time
from typing import Any

import httpx

from wpapi.errors import WPRequestNetworkError, WPResponseError, WPTimeoutError
from wpapi.transport.base import TransportRequest, TransportResponse, WPTransport

logger = logging.getLogger(__name__)


def decode_body(response: httpx.Response) -> Any:
    if not response.content:
        return None

    content_type = response.headers.get("content-type", "")
    if "json" in content_type:
        try:
            return response.json()
        except ValueError:
            # Covers both malformed JSON and bodies that are not valid UTF-8.
            logger.debug("Response declared %s but is not valid JSON", content_type)
    return response.text


def backend_request_of(err: httpx.RequestError) -> httpx.Request | None:
    # httpx raises RuntimeError when the error was built without a request.
    try:
        return err.request
    except RuntimeError:
        return None


class HTTPXTransport(WPTransport):

    def __init__(
        self,
        default_timeout: float = 30.0,
        transport: httpx.AsyncBaseTransport | None = None,
    ):
        self.default_timeout = default_timeout
        self.transport = transport

    async def request(
        self,
        request: TransportRequest,
    ) -> TransportResponse:

        start_time = time.time()

        timeout = (
            request.timeout if request.timeout is not None else self.default_timeout
        )

        async with httpx.AsyncClient(transport=self.transport) as client:
            try:
                response = await client.request(
                    method=request.method,
                    url=request.url,
                    headers=request.headers,
                    content=request.body,
                    timeout=timeout,
                )
            except httpx.TimeoutException as err:
                raise WPTimeoutError(f"Request timed out: {err}") from err
            except httpx.RequestError as err:
                raise WPRequestNetworkError(
                    request=request, backend_request=backend_request_of(err)
                ) from err

        elapsed_time = time.time() - start_time

        result = TransportResponse(
            status_code=response.status_code,
            body=decode_body(response),
            headers=dict(response.headers),
            elapsed_time=elapsed_time,
        )

        if response.is_error:
            logger.warning(
                "%s %s answered with status %s",
                request.method,
                request.url,
                response.status_code,
            )
            result.error = WPResponseError(request, result)

        return result
