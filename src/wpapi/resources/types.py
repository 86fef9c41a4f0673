# SPDX-FileCopyrightText: 2025 Lucas S
#
# SPDX-License-Identifier: GPL-3.0-or-later

from wpapi.decorators import AllowedMethods, Resource
from wpapi.resources.collection import CollectionRequest


@Resource("posts/types")
@AllowedMethods("head", "get")
class TypesRequest(CollectionRequest):
    """Registered post types; ``.id("page")`` selects one of them."""
