"""Health endpoints."""

from __future__ import annotations

from fastapi import APIRouter, status

from ...data.sites_repository import load_catalog

router = APIRouter(tags=["health"])


@router.get("/health", status_code=status.HTTP_200_OK)
def health_root() -> dict:
    """Simple health check endpoint that doesn't require any dependencies."""
    return {"status": "ok"}


@router.get("/health/catalog", status_code=status.HTTP_200_OK)
def health_catalog() -> dict:
    """Check that the site catalog can be loaded."""
    try:
        catalog = load_catalog()
        return {"service": "catalog", "healthy": True, "sites": len(catalog), "version": catalog.version}
    except (OSError, ValueError) as exc:
        return {"service": "catalog", "healthy": False, "error": str(exc)}
