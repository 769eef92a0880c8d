"""Domain models for collection sites and their waste categories."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Optional

from ..exceptions import CatalogError


class WasteCategory(str, Enum):
    ACEITES = "ACEITES"
    GRASAS = "GRASAS"
    VIDRIO = "VIDRIO"
    ORGANICOS = "ORGANICOS"
    PLASTICO = "PLASTICO"
    PAPEL_CARTON = "PAPEL_CARTON"


class SiteRole(str, Enum):
    GENERATOR = "GENERADOR"
    PROCESSOR = "GESTOR"
    AUTHORITY = "AUTORIDAD"
    ADMIN = "ADMIN"


class Unit(str, Enum):
    KG = "kg"
    LITERS = "L"
    UNITS = "unidades"


class EconomicKind(str, Enum):
    """Who pays whom when a category is collected."""

    REVENUE = "REVENUE"  # processor pays the generator
    FREE = "FREE"
    COST = "COST"  # generator pays the processor


@dataclass(frozen=True, slots=True)
class Site:
    """A waste generator, processor plant, or oversight body on the map."""

    site_id: str
    name: str
    role: SiteRole
    address: str
    waste_types: tuple[WasteCategory, ...]
    quantity_description: str
    available_quantity: float
    unit: Unit
    price_per_unit: float
    last_update: str
    latitude: float
    longitude: float
    verified: bool
    traceability_hash: str

    def __post_init__(self) -> None:
        if self.available_quantity < 0:
            raise CatalogError(f"Site '{self.site_id}' has negative available quantity.")
        if self.price_per_unit < 0:
            raise CatalogError(f"Site '{self.site_id}' has a negative unit price.")
        if not self.waste_types and self.role == SiteRole.GENERATOR:
            raise CatalogError(f"Generator site '{self.site_id}' must declare at least one waste category.")

    @property
    def primary_category(self) -> Optional[WasteCategory]:
        """First declared category; drives pricing and impact for the whole site."""
        return self.waste_types[0] if self.waste_types else None

    @property
    def coordinates(self) -> tuple[float, float]:
        return (self.latitude, self.longitude)
