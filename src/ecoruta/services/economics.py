"""Economic model resolution and single-site quotes."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from ..exceptions import UnknownCategoryError
from ..models.domain import EconomicKind, Site, WasteCategory
from .calibration import MetricsConfig


@dataclass(frozen=True, slots=True)
class EconomicModel:
    kind: EconomicKind
    label: str
    color: str
    sign: str  # display only


_MODEL_BY_KIND: dict[EconomicKind, EconomicModel] = {
    EconomicKind.REVENUE: EconomicModel(EconomicKind.REVENUE, "Venta de Material", "#10B981", "+"),
    EconomicKind.FREE: EconomicModel(EconomicKind.FREE, "Recolección Gratuita", "#3B82F6", ""),
    EconomicKind.COST: EconomicModel(EconomicKind.COST, "Servicio de Recolección", "#F59E0B", "-"),
}

_ACTION_LABELS: dict[EconomicKind, str] = {
    EconomicKind.REVENUE: "Ofrecer Residuo",
    EconomicKind.FREE: "Agendar Retiro",
    EconomicKind.COST: "Solicitar Recolección",
}

_DIRECTIONS: dict[EconomicKind, str] = {
    EconomicKind.REVENUE: "receive",
    EconomicKind.FREE: "none",
    EconomicKind.COST: "pay",
}


def parse_category(value: object) -> WasteCategory:
    """Coerce a raw value into a WasteCategory, rejecting anything outside the set."""

    if isinstance(value, WasteCategory):
        return value
    if isinstance(value, str):
        try:
            return WasteCategory(value.strip().upper())
        except ValueError:
            pass
    raise UnknownCategoryError(value)


def resolve_economic_model(category: object, config: MetricsConfig | None = None) -> EconomicModel:
    config = config or MetricsConfig()
    parsed = parse_category(category)
    try:
        kind = config.economic_models[parsed]
    except KeyError as exc:
        raise UnknownCategoryError(parsed.value) from exc
    return _MODEL_BY_KIND[EconomicKind(kind)]


def material_amount(site: Site, config: MetricsConfig | None = None) -> float:
    """Signed contribution of a site to the route's material balance.

    Positive when the processor pays the generator, negative when the generator
    pays for the service.
    """

    category = site.primary_category
    if category is None:
        return 0.0
    model = resolve_economic_model(category, config)
    gross = site.available_quantity * site.price_per_unit
    if model.kind == EconomicKind.REVENUE:
        return gross
    if model.kind == EconomicKind.COST:
        return -gross
    return 0.0


@dataclass(frozen=True, slots=True)
class SiteQuote:
    site_id: str
    category: Optional[WasteCategory]
    model: EconomicModel
    quantity: float
    unit: str
    price_per_unit: float
    total_amount: float
    direction: str
    action_label: str
    avoided_co2_kg: float


def quote_site(site: Site, config: MetricsConfig | None = None) -> SiteQuote:
    """Price a single site on its own, as shown in the per-site calculator."""

    from .emissions import avoided_co2

    config = config or MetricsConfig()
    category = site.primary_category
    if category is None:
        model = _MODEL_BY_KIND[EconomicKind.FREE]
        co2 = 0.0
    else:
        model = resolve_economic_model(category, config)
        co2 = avoided_co2(category, site.available_quantity, config)

    total = 0.0 if model.kind == EconomicKind.FREE else site.available_quantity * site.price_per_unit
    return SiteQuote(
        site_id=site.site_id,
        category=category,
        model=model,
        quantity=site.available_quantity,
        unit=site.unit.value,
        price_per_unit=site.price_per_unit,
        total_amount=total,
        direction=_DIRECTIONS[model.kind],
        action_label=_ACTION_LABELS[model.kind],
        avoided_co2_kg=co2,
    )
