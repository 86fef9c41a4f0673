# SPDX-FileCopyrightText: 2025 Lucas S
#
# SPDX-License-Identifier: GPL-3.0-or-later

from typing import Any

from wpapi.reflect.decorators import StackableDecorator

HTTP_METHODS = ("head", "get", "put", "post", "patch", "delete")


class Resource(StackableDecorator):
    """Names the REST collection a request class targets, e.g. ``taxonomies``"""

    def __init__(self, name: str) -> None:
        self.name = name.strip("/")

    @classmethod
    def decorator_key(cls) -> Any:
        return Resource


class AllowedMethods(StackableDecorator):
    """Narrows the HTTP verbs a request class accepts"""

    def __init__(self, *methods: str) -> None:
        unknown = [method for method in methods if method.lower() not in HTTP_METHODS]
        if unknown:
            raise ValueError(f"Unknown HTTP methods: {', '.join(unknown)}")
        self.methods = [method.lower() for method in methods]

    @classmethod
    def decorator_key(cls) -> Any:
        return AllowedMethods


__all__ = [
    "HTTP_METHODS",
    "Resource",
    "AllowedMethods",
]
