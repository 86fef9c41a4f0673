# SPDX-FileCopyrightText: 2025 Lucas S
#
# SPDX-License-Identifier: GPL-3.0-or-later

import copy
import inspect
import json
import logging
from typing import (
    Any,
    Awaitable,
    Callable,
    Generator,
    Mapping,
    Optional,
    Self,
    cast,
)

from pydantic import BaseModel

from wpapi.auth import BasicAuth
from wpapi.decorators import HTTP_METHODS, AllowedMethods
from wpapi.errors import UnsupportedMethodError
from wpapi.options import WPRequestOptions
from wpapi.transport.base import TransportRequest, TransportResponse, WPTransport
from wpapi.transport.httpx import HTTPXTransport

logger = logging.getLogger(__name__)

RequestCallback = Callable[[Optional[BaseException], Any], Any]
ResponseTransform = Callable[[TransportResponse], Any]


def noop(err: Optional[BaseException], result: Any) -> None:
    pass


def ensure_callback(callback: Optional[RequestCallback]) -> RequestCallback:
    return callback if callable(callback) else noop


def return_body(response: TransportResponse) -> Any:
    return response.body


def return_headers(response: TransportResponse) -> Any:
    return response.headers


def encode_payload(data: Any) -> tuple[bytes, Optional[str]]:
    """
    Serialize a POST/PUT payload, returning the raw bytes and the content type
    to announce (``None`` when the caller supplied raw content).
    """
    if isinstance(data, BaseModel):
        return data.model_dump_json().encode(), "application/json"
    if isinstance(data, (dict, list)):
        return json.dumps(data).encode(), "application/json"
    if isinstance(data, bytes):
        return data, None
    if isinstance(data, str):
        return data.encode(), None
    raise ValueError(f"Invalid payload type: {type(data)}")


class WPRequest:
    """
    Base request builder.

    Holds the options of the site being queried, the verbs the request
    accepts, and performs the HTTP calls through a ``WPTransport``.
    Subclasses override ``generate_request_uri`` to append their own path
    segments and narrow the verbs with ``@AllowedMethods``.

    Verb methods validate the verb and build the URI immediately, then return
    an awaitable resolving to the transformed response. An optional
    ``callback(err, result)`` is called with the same values right before the
    awaitable settles.
    """

    def __init__(
        self,
        options: Mapping[str, Any] | None = None,
        transport: WPTransport | None = None,
    ) -> None:
        self._options = cast(WPRequestOptions, dict(options or {}))
        self._transport = transport

        allowed = AllowedMethods.get_bound_from_type(type(self), last=True)
        self._supported_methods: list[str] = (
            list(allowed.methods) if allowed is not None else list(HTTP_METHODS)
        )

    def _with(self, **fields: Any) -> Self:
        """Return a copy of this request with the given state fields replaced."""
        clone = copy.copy(self)
        for name, value in fields.items():
            setattr(clone, name, value)
        return clone

    def _get_transport(self) -> WPTransport:
        if self._transport is None:
            self._transport = HTTPXTransport()
        return self._transport

    def _check_method_support(self, method: str) -> bool:
        if method.lower() not in self._supported_methods:
            raise UnsupportedMethodError(method, self._supported_methods)
        return True

    def generate_request_uri(self) -> str:
        """The URI target for the HTTP request"""
        return self._options.get("endpoint", "")

    def _build_request(self, method: str, url: str) -> TransportRequest:
        return TransportRequest(
            url=url,
            method=method,
            headers=[],
            timeout=self._options.get("timeout"),
        )

    def _authenticate(self, request: TransportRequest) -> TransportRequest:
        auth = BasicAuth(self._options.get("username"), self._options.get("password"))
        return auth.on_request(request)

    def _attach_payload(self, request: TransportRequest, data: Any) -> TransportRequest:
        body, content_type = encode_payload({} if data is None else data)
        request.body = body
        if content_type is not None:
            request.headers.append(("Content-Type", content_type))
        return request

    async def _invoke(
        self,
        request: TransportRequest,
        callback: Optional[RequestCallback],
        transform: ResponseTransform,
    ) -> Any:
        report = ensure_callback(callback)

        logger.debug("Executing request: %s %s", request.method, request.url)

        try:
            response = await self._get_transport().request(request)
        except Exception as err:
            logger.debug("Request %s %s failed: %s", request.method, request.url, err)
            report(err, None)
            raise

        logger.debug("Received response: status=%s", response.status_code)

        result = transform(response)
        report(response.error, result)

        if response.error is not None:
            raise response.error

        return result

    # HTTP Methods

    def get(self, callback: Optional[RequestCallback] = None) -> Awaitable[Any]:
        self._check_method_support("get")
        url = self.generate_request_uri()
        request = self._build_request("GET", url)

        return self._invoke(request, callback, return_body)

    def post(
        self, data: Any = None, callback: Optional[RequestCallback] = None
    ) -> Awaitable[Any]:
        self._check_method_support("post")
        url = self.generate_request_uri()
        request = self._authenticate(self._build_request("POST", url))
        request = self._attach_payload(request, data)

        return self._invoke(request, callback, return_body)

    def put(
        self, data: Any = None, callback: Optional[RequestCallback] = None
    ) -> Awaitable[Any]:
        self._check_method_support("put")
        url = self.generate_request_uri()
        request = self._authenticate(self._build_request("PUT", url))
        request = self._attach_payload(request, data)

        return self._invoke(request, callback, return_body)

    def patch(self, callback: Optional[RequestCallback] = None) -> None:
        # The REST API documents PATCH without defining what it does, so
        # nothing is sent.
        self._check_method_support("patch")
        ensure_callback(callback)

    def delete(self, callback: Optional[RequestCallback] = None) -> Awaitable[Any]:
        self._check_method_support("delete")
        url = self.generate_request_uri()
        request = self._authenticate(self._build_request("DELETE", url))

        return self._invoke(request, callback, return_body)

    def head(self, callback: Optional[RequestCallback] = None) -> Awaitable[Any]:
        self._check_method_support("head")
        url = self.generate_request_uri()
        request = self._build_request("HEAD", url)

        return self._invoke(request, callback, return_headers)

    def then(self, callback: Callable[[Any], Any]) -> Awaitable[Any]:
        """Invoke the request as a GET and hand the body to ``callback``."""
        pending = self.get()

        async def chain() -> Any:
            outcome = callback(await pending)
            if inspect.isawaitable(outcome):
                outcome = await outcome
            return outcome

        return chain()

    def __await__(self) -> Generator[Any, None, Any]:
        return self.get().__await__()

    def __repr__(self) -> str:
        return f"<{type(self).__name__} {self.generate_request_uri()!r}>"


__all__ = [
    "WPRequest",
    "RequestCallback",
    "encode_payload",
]
