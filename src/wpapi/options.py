# SPDX-FileCopyrightText: 2025 Lucas S
#
# SPDX-License-Identifier: GPL-3.0-or-later

from typing import Any, Mapping, TypedDict

from wpapi.errors import WPConfigurationError
from wpapi.utils.env_parse_utils import get_env_float, get_env_str

DEFAULT_ENV_PREFIX = "WP_API_"


class WPRequestOptions(TypedDict, total=False):
    endpoint: str
    """Base URI of the REST API, e.g. ``https://example.com/wp-json``."""

    username: str
    """Username used for the Authorization header of authenticated verbs."""

    password: str
    """Password used for the Authorization header of authenticated verbs."""

    timeout: float
    """Per-request timeout in seconds handed to the transport."""


def options_from_env(prefix: str = DEFAULT_ENV_PREFIX) -> WPRequestOptions:
    """
    Build request options from ``{prefix}ENDPOINT``, ``{prefix}USERNAME``,
    ``{prefix}PASSWORD`` and ``{prefix}TIMEOUT``.
    Unset variables are left out of the returned mapping.
    """
    options = WPRequestOptions()

    endpoint = get_env_str(f"{prefix}ENDPOINT")
    if endpoint is not None:
        options["endpoint"] = endpoint

    username = get_env_str(f"{prefix}USERNAME")
    if username is not None:
        options["username"] = username

    password = get_env_str(f"{prefix}PASSWORD")
    if password is not None:
        options["password"] = password

    timeout = get_env_float(f"{prefix}TIMEOUT")
    if timeout is False:
        raise WPConfigurationError(
            f"{prefix}TIMEOUT must be a number of seconds, got {get_env_str(f'{prefix}TIMEOUT')!r}"
        )
    if timeout is not None:
        options["timeout"] = timeout

    return options


def merge_options(
    base: Mapping[str, Any] | None, overrides: Mapping[str, Any] | None
) -> dict[str, Any]:
    return {**(base or {}), **(overrides or {})}
