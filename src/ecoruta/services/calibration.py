"""Calibration tables consumed by the pricing, emissions and route engines."""

from __future__ import annotations

from dataclasses import dataclass, field, replace
from typing import Any, Mapping

from ..config import settings
from ..models.domain import EconomicKind, WasteCategory


@dataclass(frozen=True, slots=True)
class MetricsConfig:
    """Snapshot of the calibration surface.

    Defaults are read from settings when the config is built, so environment
    overrides take effect without touching engine code.
    """

    emission_factors: Mapping[WasteCategory, float] = field(
        default_factory=lambda: dict(settings.emission_factors)
    )
    economic_models: Mapping[WasteCategory, EconomicKind] = field(
        default_factory=lambda: dict(settings.economic_models)
    )
    logistics_rate_per_km: float = field(default_factory=lambda: settings.logistics_rate_per_km)
    truck_emission_per_km: float = field(default_factory=lambda: settings.truck_emission_per_km)
    discount_threshold: int = field(default_factory=lambda: settings.discount_threshold)
    discount_rate: float = field(default_factory=lambda: settings.discount_rate)

    def __post_init__(self) -> None:
        if not 0.0 <= self.discount_rate < 1.0:
            raise ValueError("discount_rate must be in [0, 1)")
        if self.logistics_rate_per_km < 0 or self.truck_emission_per_km < 0:
            raise ValueError("per-km rates must be >= 0")

    def with_overrides(self, **overrides: Any) -> "MetricsConfig":
        return replace(self, **overrides)


def default_config() -> MetricsConfig:
    return MetricsConfig()
