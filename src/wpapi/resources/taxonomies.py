# SPDX-FileCopyrightText: 2025 Lucas S
#
# SPDX-License-Identifier: GPL-3.0-or-later

from typing import Self

from wpapi.decorators import AllowedMethods, Resource
from wpapi.resources.collection import CollectionRequest


@Resource("taxonomies")
@AllowedMethods("head", "get")
class TaxonomiesRequest(CollectionRequest):
    """
    ``/taxonomies``, a single taxonomy via ``.id("category")`` and its terms
    via ``.terms()``, optionally followed by ``.id(term_id)``.
    """

    def terms(self) -> Self:
        return self._select_action("terms")
