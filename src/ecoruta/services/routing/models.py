"""Routing domain models."""

from __future__ import annotations

from dataclasses import dataclass

from ...exceptions import InvalidSiteReference


@dataclass(frozen=True, slots=True)
class RouteLeg:
    from_site_id: str
    to_site_id: str
    sequence: int
    distance_km: float


@dataclass(frozen=True, slots=True)
class RouteMetrics:
    """Unrounded aggregate metrics for one collection run."""

    site_ids: tuple[str, ...] = ()
    total_distance_km: float = 0.0
    base_logistics_cost: float = 0.0
    discount_applied: bool = False
    discount_amount: float = 0.0
    logistics_cost: float = 0.0
    material_balance: float = 0.0
    gross_avoided_co2: float = 0.0
    transport_emissions: float = 0.0
    net_esg_impact: float = 0.0
    legs: tuple[RouteLeg, ...] = ()
    coordinates: tuple[tuple[float, float], ...] = ()
    skipped: tuple[InvalidSiteReference, ...] = ()

    @property
    def site_count(self) -> int:
        return len(self.site_ids)
