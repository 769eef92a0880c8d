"""Application configuration and settings management."""

from pathlib import Path
from typing import Any, Optional

import json
from pydantic import Field, field_validator, model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from .models.domain import EconomicKind, WasteCategory


# kg CO2e avoided per unit processed (EPA WARM / LCA approximations).
DEFAULT_EMISSION_FACTORS: dict[WasteCategory, float] = {
    WasteCategory.ACEITES: 2.8,
    WasteCategory.GRASAS: 1.2,
    WasteCategory.VIDRIO: 0.3,
    WasteCategory.ORGANICOS: 0.5,
    WasteCategory.PLASTICO: 1.5,
    WasteCategory.PAPEL_CARTON: 1.0,
}

DEFAULT_ECONOMIC_MODELS: dict[WasteCategory, EconomicKind] = {
    WasteCategory.ACEITES: EconomicKind.REVENUE,
    WasteCategory.GRASAS: EconomicKind.COST,
    WasteCategory.VIDRIO: EconomicKind.REVENUE,
    WasteCategory.ORGANICOS: EconomicKind.FREE,
    WasteCategory.PLASTICO: EconomicKind.REVENUE,
    WasteCategory.PAPEL_CARTON: EconomicKind.REVENUE,
}


class Settings(BaseSettings):
    """Runtime configuration loaded from environment variables or defaults."""

    model_config = SettingsConfigDict(
        env_prefix="ECORUTA_",
        case_sensitive=False,
        env_file=".env",
        env_file_encoding="utf-8",
    )

    app_name: str = "EcoRuta Collection Planner API"
    api_prefix: str = "/api"
    catalog_file: Optional[Path] = Field(
        default=None,
        description="Optional JSON file with site records. The built-in Cartagena seed is used when unset.",
    )
    currency: str = Field(default="COP", description="Currency code for prices and logistics costs.")
    map_center: tuple[float, float] = Field(default=(10.4217, -75.5477))

    emission_factors: dict[WasteCategory, float] = Field(
        default_factory=lambda: dict(DEFAULT_EMISSION_FACTORS),
        description="kg CO2e avoided per unit of waste processed, per category.",
    )
    economic_models: dict[WasteCategory, EconomicKind] = Field(
        default_factory=lambda: dict(DEFAULT_ECONOMIC_MODELS),
        description="Pricing regime per waste category.",
    )
    logistics_rate_per_km: float = Field(default=2500.0, ge=0.0)
    truck_emission_per_km: float = Field(
        default=0.25,
        ge=0.0,
        description="kg CO2 emitted per km by a light-duty diesel collection truck.",
    )
    discount_threshold: int = Field(default=2, ge=0, description="Routes with more sites than this get a discount.")
    discount_rate: float = Field(default=0.10, ge=0.0, lt=1.0)

    frontend_allowed_origins: tuple[str, ...] = Field(
        default=(
            "http://localhost:5173",
            "http://127.0.0.1:5173",
        ),
        description="Permitted web origins for browser clients (CORS).",
    )

    @field_validator("catalog_file", mode="before")
    @classmethod
    def _expand_path(cls, value: Any) -> Optional[Path]:
        if value is None or value == "":
            return None
        path_value = value if isinstance(value, Path) else Path(str(value))
        return path_value.expanduser().resolve()

    @field_validator("frontend_allowed_origins", mode="before")
    @classmethod
    def _parse_str_tuple_from_env(cls, value: Any) -> tuple[str, ...]:
        """Parse string tuple from environment variable (comma-separated or JSON array)."""
        if isinstance(value, tuple):
            return value
        if isinstance(value, list):
            return tuple(str(item) for item in value)
        if isinstance(value, str):
            try:
                parsed = json.loads(value)
                if isinstance(parsed, list):
                    return tuple(str(item) for item in parsed)
            except (json.JSONDecodeError, TypeError):
                pass
            if "," in value:
                return tuple(item.strip() for item in value.split(",") if item.strip())
            if value.strip():
                return (value.strip(),)
        return tuple()

    @field_validator("emission_factors")
    @classmethod
    def _check_emission_factors(cls, value: dict[WasteCategory, float]) -> dict[WasteCategory, float]:
        missing = [category.value for category in WasteCategory if category not in value]
        if missing:
            raise ValueError(f"emission_factors is missing categories: {', '.join(missing)}")
        for category, factor in value.items():
            if factor <= 0:
                raise ValueError(f"emission factor for {category.value} must be positive, got {factor}")
        return value

    @field_validator("economic_models")
    @classmethod
    def _check_economic_models(cls, value: dict[WasteCategory, EconomicKind]) -> dict[WasteCategory, EconomicKind]:
        missing = [category.value for category in WasteCategory if category not in value]
        if missing:
            raise ValueError(f"economic_models is missing categories: {', '.join(missing)}")
        return value

    @model_validator(mode="after")
    def _check_map_center(self) -> "Settings":
        lat, lon = self.map_center
        if not -90.0 <= lat <= 90.0 or not -180.0 <= lon <= 180.0:
            raise ValueError(f"map_center {self.map_center} is not a valid coordinate")
        return self


settings = Settings()
