"""Route metrics endpoints."""

from __future__ import annotations

import logging

from fastapi import APIRouter, HTTPException, Response, status

from ...config import settings
from ...data.sites_repository import load_catalog
from ...schemas.routing import RouteMetricsRequest, RouteMetricsResponse
from ...services.outputs.routing_formatter import route_metrics_to_csv, route_metrics_to_json
from ...services.routing.models import RouteMetrics
from ...services.routing.service import compute_route_for_selection

router = APIRouter(prefix="/routes", tags=["routes"])

logger = logging.getLogger(__name__)


def _compute(payload: RouteMetricsRequest) -> RouteMetrics:
    try:
        return compute_route_for_selection(load_catalog(), payload.site_ids)
    except ValueError as exc:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(exc)) from exc
    except Exception as exc:
        logger.exception("Error computing route metrics: %s", exc)
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail=f"Failed to compute route metrics: {str(exc)}",
        ) from exc


@router.post("/metrics", response_model=RouteMetricsResponse, status_code=status.HTTP_200_OK)
def route_metrics(payload: RouteMetricsRequest) -> RouteMetricsResponse:
    metrics = _compute(payload)
    return RouteMetricsResponse(currency=settings.currency, **route_metrics_to_json(metrics))


@router.post("/metrics.csv", status_code=status.HTTP_200_OK)
def route_metrics_csv(payload: RouteMetricsRequest) -> Response:
    """Per-leg breakdown of the route as CSV."""
    metrics = _compute(payload)
    return Response(
        content=route_metrics_to_csv(metrics),
        media_type="text/csv",
        headers={"Content-Disposition": 'attachment; filename="route_metrics.csv"'},
    )
