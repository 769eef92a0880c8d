"""Carbon accounting for collected material and collection transport."""

from __future__ import annotations

from ..exceptions import UnknownCategoryError
from .calibration import MetricsConfig
from .economics import parse_category


def emission_factor(category: object, config: MetricsConfig | None = None) -> float:
    """kg CO2e avoided per unit of the category processed."""

    config = config or MetricsConfig()
    parsed = parse_category(category)
    try:
        return float(config.emission_factors[parsed])
    except KeyError as exc:
        raise UnknownCategoryError(parsed.value) from exc


def avoided_co2(category: object, quantity: float, config: MetricsConfig | None = None) -> float:
    return quantity * emission_factor(category, config)


def transport_emissions(distance_km: float, config: MetricsConfig | None = None) -> float:
    config = config or MetricsConfig()
    return distance_km * config.truck_emission_per_km
