"""Route metrics engine."""

from __future__ import annotations

import logging
from dataclasses import replace
from typing import Sequence

from ...data.sites_repository import SiteCatalog
from ...models.domain import Site
from ..calibration import MetricsConfig
from ..economics import material_amount
from ..emissions import avoided_co2, transport_emissions
from ..geospatial import haversine_km, path_length_km
from .models import RouteLeg, RouteMetrics

logger = logging.getLogger(__name__)


def _build_legs(sites: Sequence[Site]) -> list[RouteLeg]:
    legs: list[RouteLeg] = []
    for index in range(len(sites) - 1):
        origin, destination = sites[index], sites[index + 1]
        legs.append(
            RouteLeg(
                from_site_id=origin.site_id,
                to_site_id=destination.site_id,
                sequence=index + 1,
                distance_km=haversine_km(
                    origin.latitude, origin.longitude, destination.latitude, destination.longitude
                ),
            )
        )
    return legs


def _site_avoided_co2(site: Site, config: MetricsConfig) -> float:
    category = site.primary_category
    if category is None:
        return 0.0
    return avoided_co2(category, site.available_quantity, config)


def compute_route_metrics(sites: Sequence[Site], config: MetricsConfig | None = None) -> RouteMetrics:
    """Fold an ordered list of sites into aggregate route metrics.

    Sites are visited in the order given; no resequencing happens here. Fewer than
    two sites yields all-zero metrics.
    """

    config = config or MetricsConfig()
    site_ids = tuple(site.site_id for site in sites)
    if len(sites) < 2:
        return RouteMetrics(site_ids=site_ids, coordinates=tuple(site.coordinates for site in sites))

    legs = _build_legs(sites)
    coordinates = tuple(site.coordinates for site in sites)
    total_distance = path_length_km(coordinates)

    base_cost = total_distance * config.logistics_rate_per_km
    discount_applied = len(sites) > config.discount_threshold
    discount_amount = base_cost * config.discount_rate if discount_applied else 0.0

    balance = sum(material_amount(site, config) for site in sites)
    gross_avoided = sum(_site_avoided_co2(site, config) for site in sites)
    transport = transport_emissions(total_distance, config)

    metrics = RouteMetrics(
        site_ids=site_ids,
        total_distance_km=total_distance,
        base_logistics_cost=base_cost,
        discount_applied=discount_applied,
        discount_amount=discount_amount,
        logistics_cost=base_cost - discount_amount,
        material_balance=balance,
        gross_avoided_co2=gross_avoided,
        transport_emissions=transport,
        net_esg_impact=gross_avoided - transport,
        legs=tuple(legs),
        coordinates=coordinates,
    )
    logger.debug(
        "Route %s: %.3f km, cost %.2f, balance %.2f, net ESG %.3f",
        "->".join(site_ids),
        metrics.total_distance_km,
        metrics.logistics_cost,
        metrics.material_balance,
        metrics.net_esg_impact,
    )
    return metrics


def compute_route_for_selection(
    catalog: SiteCatalog,
    site_ids: Sequence[str],
    config: MetricsConfig | None = None,
) -> RouteMetrics:
    """Resolve selected identifiers against the catalog and compute the route.

    Identifiers missing from the catalog are skipped and reported on the result.
    """

    sites, skipped = catalog.resolve(list(site_ids))
    for reference in skipped:
        logger.warning(
            "Skipping unknown site '%s' at position %d of the route selection",
            reference.site_id,
            reference.position,
        )
    metrics = compute_route_metrics(sites, config)
    if not skipped:
        return metrics
    return replace(metrics, skipped=tuple(skipped))


def balance_direction(balance: float) -> str:
    """`purchase` when the processor pays out, `services` when it gets paid."""

    if balance > 0:
        return "purchase"
    if balance < 0:
        return "services"
    return "even"
