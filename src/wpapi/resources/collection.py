# SPDX-FileCopyrightText: 2025 Lucas S
#
# SPDX-License-Identifier: GPL-3.0-or-later

from typing import Any, Mapping, Self

from wpapi.decorators import Resource
from wpapi.request import WPRequest
from wpapi.transport.base import WPTransport

ResourceId = str | int


class CollectionRequest(WPRequest):
    """
    Request against one REST collection, addressed as
    ``{endpoint}/{resource}[/{id}][/{action}[/{action_id}]]``.

    ``id()`` targets an item of the collection until an action is selected,
    and an item of the action's sub-collection afterwards.
    """

    def __init__(
        self,
        options: Mapping[str, Any] | None = None,
        transport: WPTransport | None = None,
    ) -> None:
        super().__init__(options, transport)

        resource = Resource.get_bound_from_type(type(self), last=True)
        if resource is None:
            raise TypeError(f"{type(self).__name__} is not decorated with @Resource")
        self._resource = resource.name

        self._id: ResourceId | None = None
        self._action: str | None = None
        self._action_id: ResourceId | None = None

    def id(self, resource_id: ResourceId) -> Self:
        if self._action is None:
            return self._with(_id=resource_id)
        return self._with(_action_id=resource_id)

    def _select_action(self, action: str) -> Self:
        return self._with(_action=action)

    def _identifier(self) -> ResourceId | None:
        return self._id

    def generate_request_uri(self) -> str:
        segments = [self._options.get("endpoint", "").rstrip("/"), self._resource]

        identifier = self._identifier()
        if identifier is not None:
            segments.append(str(identifier))

        if self._action is not None:
            segments.append(self._action)
            if self._action_id is not None:
                segments.append(str(self._action_id))

        return "/".join(segments)
