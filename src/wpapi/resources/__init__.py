# SPDX-FileCopyrightText: 2025 Lucas S
#
# SPDX-License-Identifier: GPL-3.0-or-later

from .collection import CollectionRequest
from .media import MediaRequest
from .pages import PagesRequest
from .posts import PostsRequest
from .taxonomies import TaxonomiesRequest
from .types import TypesRequest
from .users import UsersRequest

__all__ = [
    "CollectionRequest",
    "MediaRequest",
    "PagesRequest",
    "PostsRequest",
    "TaxonomiesRequest",
    "TypesRequest",
    "UsersRequest",
]
