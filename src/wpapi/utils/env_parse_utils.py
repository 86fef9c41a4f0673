# SPDX-FileCopyrightText: 2025 Lucas S
#
# SPDX-License-Identifier: GPL-3.0-or-later

import os
from typing import Literal, Optional, TypeVar, overload

DF_FLOAT_T = TypeVar("DF_FLOAT_T", bound="float | None | Literal[False]")


@overload
def get_env_float(
    var_name: str, default: None = None
) -> float | None | Literal[False]: ...


@overload
def get_env_float(
    var_name: str, default: DF_FLOAT_T
) -> DF_FLOAT_T | float | Literal[False]: ...


def get_env_float(
    var_name: str, default: DF_FLOAT_T = None  # type: ignore[assignment]
) -> DF_FLOAT_T | float | Literal[False]:
    value = os.getenv(var_name)
    if value is None or not value.strip():
        return default
    try:
        return float(value)
    except ValueError:
        return False


DF_STR_T = TypeVar("DF_STR_T", bound="Optional[str]")


@overload
def get_env_str(var_name: str, default: None = None) -> str | None: ...


@overload
def get_env_str(var_name: str, default: DF_STR_T) -> DF_STR_T | str: ...


def get_env_str(var_name: str, default: DF_STR_T = None) -> DF_STR_T | str:  # type: ignore[assignment]
    value = os.getenv(var_name)
    if value is None:
        return default
    return value
