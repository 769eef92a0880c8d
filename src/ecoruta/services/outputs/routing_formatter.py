"""Serializers for route metrics."""

from __future__ import annotations

import csv
import io
from dataclasses import asdict

from ..geospatial import bounding_box
from ..routing.models import RouteMetrics
from ..routing.service import balance_direction

DISTANCE_DECIMALS = 2
EMISSIONS_DECIMALS = 1
MONEY_DECIMALS = 0


def metrics_to_display(metrics: RouteMetrics) -> dict:
    """Rounded view for display. The metrics object itself is left unrounded."""

    return {
        "distance_km": round(metrics.total_distance_km, DISTANCE_DECIMALS),
        "base_logistics_cost": int(round(metrics.base_logistics_cost, MONEY_DECIMALS)),
        "discount_amount": int(round(metrics.discount_amount, MONEY_DECIMALS)),
        "logistics_cost": int(round(metrics.logistics_cost, MONEY_DECIMALS)),
        "material_balance": int(round(metrics.material_balance, MONEY_DECIMALS)),
        "balance_direction": balance_direction(metrics.material_balance),
        "gross_avoided_co2": round(metrics.gross_avoided_co2, EMISSIONS_DECIMALS),
        "transport_emissions": round(metrics.transport_emissions, EMISSIONS_DECIMALS),
        "net_esg_impact": round(metrics.net_esg_impact, EMISSIONS_DECIMALS),
    }


def _bounds(metrics: RouteMetrics) -> list[float] | None:
    box = bounding_box(metrics.coordinates)
    return list(box) if box else None


def route_metrics_to_json(metrics: RouteMetrics) -> dict:
    return {
        "site_ids": list(metrics.site_ids),
        "site_count": metrics.site_count,
        "discount_applied": metrics.discount_applied,
        "raw": {
            "distance_km": metrics.total_distance_km,
            "base_logistics_cost": metrics.base_logistics_cost,
            "discount_amount": metrics.discount_amount,
            "logistics_cost": metrics.logistics_cost,
            "material_balance": metrics.material_balance,
            "gross_avoided_co2": metrics.gross_avoided_co2,
            "transport_emissions": metrics.transport_emissions,
            "net_esg_impact": metrics.net_esg_impact,
        },
        "display": metrics_to_display(metrics),
        "legs": [asdict(leg) for leg in metrics.legs],
        "coordinates": [list(point) for point in metrics.coordinates],
        "bounds": _bounds(metrics),
        "skipped": [asdict(reference) for reference in metrics.skipped],
    }


def route_metrics_to_csv(metrics: RouteMetrics) -> str:
    buffer = io.StringIO()
    fieldnames = [
        "sequence",
        "from_site_id",
        "to_site_id",
        "distance_km",
        "total_distance_km",
        "logistics_cost",
        "net_esg_impact",
    ]
    writer = csv.DictWriter(buffer, fieldnames=fieldnames)
    writer.writeheader()
    for leg in metrics.legs:
        writer.writerow(
            {
                "sequence": leg.sequence,
                "from_site_id": leg.from_site_id,
                "to_site_id": leg.to_site_id,
                "distance_km": round(leg.distance_km, DISTANCE_DECIMALS),
                "total_distance_km": round(metrics.total_distance_km, DISTANCE_DECIMALS),
                "logistics_cost": int(round(metrics.logistics_cost, MONEY_DECIMALS)),
                "net_esg_impact": round(metrics.net_esg_impact, EMISSIONS_DECIMALS),
            }
        )
    return buffer.getvalue()
