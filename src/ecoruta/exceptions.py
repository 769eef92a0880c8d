"""Error types shared across the planner services."""

from __future__ import annotations

from dataclasses import dataclass


class UnknownCategoryError(ValueError):
    """Raised when a waste category is not part of the fixed category set."""

    def __init__(self, category: object) -> None:
        self.category = category
        super().__init__(f"Unknown waste category '{category}'.")


class CatalogError(ValueError):
    """Raised when site records cannot be loaded into a consistent catalog."""


class SiteNotFoundError(KeyError):
    def __init__(self, site_id: str) -> None:
        self.site_id = site_id
        super().__init__(site_id)

    def __str__(self) -> str:
        return f"Site '{self.site_id}' is not in the catalog."


@dataclass(frozen=True, slots=True)
class InvalidSiteReference:
    """A selected identifier that no longer resolves against the catalog.

    These are skipped by the route engine and reported back to the caller.
    """

    site_id: str
    position: int
