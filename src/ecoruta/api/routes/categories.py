"""Waste category endpoints."""

from __future__ import annotations

from typing import List

from fastapi import APIRouter, status

from ...models.domain import WasteCategory
from ...schemas.sites import CategoryModel, EconomicModelModel
from ...services.calibration import MetricsConfig
from ...services.economics import resolve_economic_model
from ...services.emissions import emission_factor

router = APIRouter(prefix="/categories", tags=["categories"])


@router.get("", response_model=List[CategoryModel], status_code=status.HTTP_200_OK)
def list_categories() -> List[CategoryModel]:
    config = MetricsConfig()
    items: list[CategoryModel] = []
    for category in WasteCategory:
        model = resolve_economic_model(category, config)
        items.append(
            CategoryModel(
                category=category,
                economic_model=EconomicModelModel(kind=model.kind, label=model.label, color=model.color, sign=model.sign),
                emission_factor=emission_factor(category, config),
            )
        )
    return items
