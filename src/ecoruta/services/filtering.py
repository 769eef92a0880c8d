"""Category filtering over the site catalog."""

from __future__ import annotations

from typing import Final, Iterable, Union

from ..models.domain import Site, WasteCategory
from .economics import parse_category

ALL: Final = "ALL"

CategoryFilter = Union[WasteCategory, str]


def filter_by_category(catalog: Iterable[Site], category: CategoryFilter = ALL) -> list[Site]:
    """Return catalog sites handling the category, in catalog order.

    A site matches when the category appears anywhere in its waste types, not just
    as the primary one.
    """

    if isinstance(category, str) and not isinstance(category, WasteCategory):
        if category.strip().upper() in (ALL, "TODOS"):
            return list(catalog)
    wanted = parse_category(category)
    return [site for site in catalog if wanted in site.waste_types]
