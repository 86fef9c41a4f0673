# SPDX-FileCopyrightText: 2025 Lucas S
#
# SPDX-License-Identifier: GPL-3.0-or-later

from typing import Self

from wpapi.decorators import AllowedMethods, Resource
from wpapi.resources.collection import CollectionRequest


@Resource("posts")
@AllowedMethods("head", "get", "put", "post", "delete")
class PostsRequest(CollectionRequest):

    def comments(self) -> Self:
        return self._select_action("comments")

    def revisions(self) -> Self:
        return self._select_action("revisions")
