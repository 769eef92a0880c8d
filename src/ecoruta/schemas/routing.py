"""Route metrics request/response schemas."""

from __future__ import annotations

from typing import List, Optional

from pydantic import BaseModel, Field


class RouteMetricsRequest(BaseModel):
    site_ids: List[str] = Field(default_factory=list, description="Site identifiers in visiting order.")


class RouteLegModel(BaseModel):
    from_site_id: str
    to_site_id: str
    sequence: int
    distance_km: float


class SkippedSiteModel(BaseModel):
    site_id: str
    position: int


class RouteMetricsRaw(BaseModel):
    distance_km: float
    base_logistics_cost: float
    discount_amount: float
    logistics_cost: float
    material_balance: float
    gross_avoided_co2: float
    transport_emissions: float
    net_esg_impact: float


class RouteMetricsDisplay(BaseModel):
    distance_km: float
    base_logistics_cost: int
    discount_amount: int
    logistics_cost: int
    material_balance: int
    balance_direction: str
    gross_avoided_co2: float
    transport_emissions: float
    net_esg_impact: float


class RouteMetricsResponse(BaseModel):
    site_ids: List[str]
    site_count: int
    discount_applied: bool
    currency: str
    raw: RouteMetricsRaw
    display: RouteMetricsDisplay
    legs: List[RouteLegModel]
    coordinates: List[List[float]]
    bounds: Optional[List[float]] = Field(default=None, description="lat_min, lon_min, lat_max, lon_max of the route.")
    skipped: List[SkippedSiteModel]
