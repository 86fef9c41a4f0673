# SPDX-FileCopyrightText: 2025 Lucas S
#
# SPDX-License-Identifier: GPL-3.0-or-later

from typing import Self

from wpapi.decorators import AllowedMethods, Resource
from wpapi.resources.collection import CollectionRequest, ResourceId

CURRENT_USER = "me"


@Resource("users")
@AllowedMethods("head", "get", "post")
class UsersRequest(CollectionRequest):

    def id(self, resource_id: ResourceId) -> Self:
        return self._with(_id=resource_id)

    def me(self) -> Self:
        """Target the authenticated user; replaces any id set before."""
        return self._with(_id=CURRENT_USER)
