# SPDX-FileCopyrightText: 2025 Lucas S
#
# SPDX-License-Identifier: GPL-3.0-or-later

from typing import Any, Mapping, Self

from wpapi.decorators import AllowedMethods, Resource
from wpapi.resources.collection import CollectionRequest, ResourceId
from wpapi.transport.base import WPTransport


@Resource("pages")
@AllowedMethods("head", "get", "put", "post", "delete")
class PagesRequest(CollectionRequest):
    """
    Pages are addressed either by numeric id or by their path (slug),
    whichever was set last.
    """

    def __init__(
        self,
        options: Mapping[str, Any] | None = None,
        transport: WPTransport | None = None,
    ) -> None:
        super().__init__(options, transport)
        self._path: str | None = None

    def id(self, resource_id: ResourceId) -> Self:
        if self._action is None:
            return self._with(_id=resource_id, _path=None)
        return self._with(_action_id=resource_id)

    def path(self, page_path: str) -> Self:
        # An empty path addresses the collection itself.
        return self._with(_path=page_path.strip("/") or None, _id=None)

    def comments(self) -> Self:
        return self._select_action("comments")

    def revisions(self) -> Self:
        return self._select_action("revisions")

    def _identifier(self) -> ResourceId | None:
        return self._path if self._path is not None else self._id
