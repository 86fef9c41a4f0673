# SPDX-FileCopyrightText: 2025 Lucas S
#
# SPDX-License-Identifier: GPL-3.0-or-later

from wpapi.decorators import AllowedMethods, Resource
from wpapi.resources.collection import CollectionRequest


@Resource("media")
@AllowedMethods("head", "get", "put", "post", "delete")
class MediaRequest(CollectionRequest):
    pass
