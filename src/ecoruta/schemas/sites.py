"""Site and category API schemas."""

from __future__ import annotations

from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field

from ..models.domain import EconomicKind, Site, SiteRole, Unit, WasteCategory


class SiteModel(BaseModel):
    """Wire/file representation of a site record.

    Accepts both snake_case names and the camelCase keys used by the map client.
    """

    model_config = ConfigDict(populate_by_name=True)

    site_id: str = Field(..., alias="id", min_length=1)
    name: str
    role: SiteRole
    address: str = ""
    waste_types: List[WasteCategory] = Field(default_factory=list, alias="wasteTypes")
    quantity_description: str = Field(default="", alias="quantityDescription")
    available_quantity: float = Field(default=0.0, ge=0, alias="availableQuantity")
    unit: Unit = Unit.KG
    price_per_unit: float = Field(default=0.0, ge=0, alias="pricePerUnit")
    last_update: str = Field(default="", alias="lastUpdate")
    latitude: float = Field(..., ge=-90, le=90, alias="lat")
    longitude: float = Field(..., ge=-180, le=180, alias="lng")
    verified: bool = False
    traceability_hash: Optional[str] = Field(default=None, alias="traceabilityHash")

    def to_domain(self, trace_token: str) -> Site:
        return Site(
            site_id=self.site_id.strip(),
            name=self.name,
            role=self.role,
            address=self.address,
            waste_types=tuple(self.waste_types),
            quantity_description=self.quantity_description,
            available_quantity=self.available_quantity,
            unit=self.unit,
            price_per_unit=self.price_per_unit,
            last_update=self.last_update,
            latitude=self.latitude,
            longitude=self.longitude,
            verified=self.verified,
            traceability_hash=self.traceability_hash or trace_token,
        )

    @classmethod
    def from_domain(cls, site: Site) -> "SiteModel":
        return cls(
            site_id=site.site_id,
            name=site.name,
            role=site.role,
            address=site.address,
            waste_types=list(site.waste_types),
            quantity_description=site.quantity_description,
            available_quantity=site.available_quantity,
            unit=site.unit,
            price_per_unit=site.price_per_unit,
            last_update=site.last_update,
            latitude=site.latitude,
            longitude=site.longitude,
            verified=site.verified,
            traceability_hash=site.traceability_hash,
        )


class SiteListResponse(BaseModel):
    category: str
    total: int
    items: List[SiteModel]
    map_center: List[float]


class EconomicModelModel(BaseModel):
    kind: EconomicKind
    label: str
    color: str
    sign: str


class SiteQuoteResponse(BaseModel):
    site_id: str
    category: Optional[WasteCategory] = None
    economic_model: EconomicModelModel
    quantity: float
    unit: str
    price_per_unit: float
    total_amount: float
    direction: str
    action_label: str
    avoided_co2_kg: float
    currency: str


class CategoryModel(BaseModel):
    category: WasteCategory
    economic_model: EconomicModelModel
    emission_factor: float
