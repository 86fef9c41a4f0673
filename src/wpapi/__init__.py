from importlib import import_module
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from wpapi.auth import AuthenticationMiddleware, BasicAuth
    from wpapi.decorators import AllowedMethods, Resource
    from wpapi.errors import (
        UnsupportedMethodError,
        WPConfigurationError,
        WPError,
        WPRequestNetworkError,
        WPResponseError,
        WPTimeoutError,
        WPTransportError,
    )
    from wpapi.options import WPRequestOptions, options_from_env
    from wpapi.request import WPRequest
    from wpapi.transport.base import (
        RequestMiddleware,
        TransportRequest,
        TransportResponse,
        WPTransport,
    )
    from wpapi.transport.httpx import HTTPXTransport

    from .resources import (
        CollectionRequest,
        MediaRequest,
        PagesRequest,
        PostsRequest,
        TaxonomiesRequest,
        TypesRequest,
        UsersRequest,
    )
    from .site import WP

    __all__ = [
        "WP",
        "WPRequest",
        "WPRequestOptions",
        "options_from_env",
        "CollectionRequest",
        "TaxonomiesRequest",
        "UsersRequest",
        "PostsRequest",
        "PagesRequest",
        "TypesRequest",
        "MediaRequest",
        "Resource",
        "AllowedMethods",
        "AuthenticationMiddleware",
        "BasicAuth",
        "RequestMiddleware",
        "TransportRequest",
        "TransportResponse",
        "WPTransport",
        "HTTPXTransport",
        "WPError",
        "UnsupportedMethodError",
        "WPConfigurationError",
        "WPTransportError",
        "WPRequestNetworkError",
        "WPTimeoutError",
        "WPResponseError",
    ]

__SPEC_PARENT__: str = __spec__.parent  # type: ignore
# A mapping of {<member name>: (package, <module name>, <real name>)}
_dynamic_imports: "dict[str, tuple[str, str, str | None]]" = {
    "WP": (__SPEC_PARENT__, "site", None),
    "WPRequest": (__SPEC_PARENT__, "request", None),
    "WPRequestOptions": (__SPEC_PARENT__, "options", None),
    "options_from_env": (__SPEC_PARENT__, "options", None),
    "CollectionRequest": (__SPEC_PARENT__, "resources", None),
    "TaxonomiesRequest": (__SPEC_PARENT__, "resources", None),
    "UsersRequest": (__SPEC_PARENT__, "resources", None),
    "PostsRequest": (__SPEC_PARENT__, "resources", None),
    "PagesRequest": (__SPEC_PARENT__, "resources", None),
    "TypesRequest": (__SPEC_PARENT__, "resources", None),
    "MediaRequest": (__SPEC_PARENT__, "resources", None),
    "Resource": (__SPEC_PARENT__, "decorators", None),
    "AllowedMethods": (__SPEC_PARENT__, "decorators", None),
    "AuthenticationMiddleware": (__SPEC_PARENT__, "auth", None),
    "BasicAuth": (__SPEC_PARENT__, "auth", None),
    "RequestMiddleware": (__SPEC_PARENT__, "transport.base", None),
    "TransportRequest": (__SPEC_PARENT__, "transport.base", None),
    "TransportResponse": (__SPEC_PARENT__, "transport.base", None),
    "WPTransport": (__SPEC_PARENT__, "transport.base", None),
    "HTTPXTransport": (__SPEC_PARENT__, "transport.httpx", None),
    "WPError": (__SPEC_PARENT__, "errors", None),
    "UnsupportedMethodError": (__SPEC_PARENT__, "errors", None),
    "WPConfigurationError": (__SPEC_PARENT__, "errors", None),
    "WPTransportError": (__SPEC_PARENT__, "errors", None),
    "WPRequestNetworkError": (__SPEC_PARENT__, "errors", None),
    "WPTimeoutError": (__SPEC_PARENT__, "errors", None),
    "WPResponseError": (__SPEC_PARENT__, "errors", None),
}


def __getattr__(attr_name: str) -> object:

    dynamic_attr = _dynamic_imports.get(attr_name)
    if dynamic_attr is None:
        raise AttributeError(f"module {__name__!r} has no attribute {attr_name!r}")

    package, module_name, realname = dynamic_attr

    module = import_module(f"{package}.{module_name}", package=package)
    result = getattr(module, attr_name if realname is None else realname)
    globals()[attr_name] = result
    return result


def __dir__() -> "list[str]":
    return list(_dynamic_imports.keys())
