"""Site catalog endpoints."""

from __future__ import annotations

import logging

from fastapi import APIRouter, HTTPException, Query, status

from ...config import settings
from ...data.sites_repository import load_catalog
from ...exceptions import SiteNotFoundError, UnknownCategoryError
from ...schemas.sites import EconomicModelModel, SiteListResponse, SiteModel, SiteQuoteResponse
from ...services.economics import quote_site
from ...services.filtering import ALL, filter_by_category

router = APIRouter(prefix="/sites", tags=["sites"])

logger = logging.getLogger(__name__)


@router.get("", response_model=SiteListResponse, status_code=status.HTTP_200_OK)
def list_sites(category: str = Query(default=ALL, description="Waste category or ALL")) -> SiteListResponse:
    try:
        sites = filter_by_category(load_catalog(), category)
    except UnknownCategoryError as exc:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(exc)) from exc
    return SiteListResponse(
        category=category.strip().upper(),
        total=len(sites),
        items=[SiteModel.from_domain(site) for site in sites],
        map_center=list(settings.map_center),
    )


@router.get("/{site_id}/quote", response_model=SiteQuoteResponse, status_code=status.HTTP_200_OK)
def get_site_quote(site_id: str) -> SiteQuoteResponse:
    try:
        site = load_catalog().get(site_id)
        quote = quote_site(site)
    except SiteNotFoundError as exc:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(exc)) from exc
    except UnknownCategoryError as exc:
        logger.exception("Site %s references an unmapped category", site_id)
        raise HTTPException(status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, detail=str(exc)) from exc

    return SiteQuoteResponse(
        site_id=quote.site_id,
        category=quote.category,
        economic_model=EconomicModelModel(
            kind=quote.model.kind,
            label=quote.model.label,
            color=quote.model.color,
            sign=quote.model.sign,
        ),
        quantity=quote.quantity,
        unit=quote.unit,
        price_per_unit=quote.price_per_unit,
        total_amount=quote.total_amount,
        direction=quote.direction,
        action_label=quote.action_label,
        avoided_co2_kg=quote.avoided_co2_kg,
        currency=settings.currency,
    )
