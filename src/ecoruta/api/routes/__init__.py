"""API route registrations."""

from . import categories, health, routes, sites

__all__ = ["categories", "health", "routes", "sites"]
