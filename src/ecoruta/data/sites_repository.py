"""Site catalog loading and lookup."""

from __future__ import annotations

import functools
import json
import logging
import secrets
from dataclasses import replace
from pathlib import Path
from typing import Iterable, Iterator, Optional, Sequence

from pydantic import ValidationError

from ..config import settings
from ..exceptions import CatalogError, InvalidSiteReference, SiteNotFoundError
from ..models.domain import Site, SiteRole, Unit, WasteCategory
from ..schemas.sites import SiteModel

logger = logging.getLogger(__name__)


def generate_trace_token() -> str:
    """Cosmetic ledger-style token shown next to each site. Not a credential."""
    return f"0x{secrets.token_hex(4)}...{secrets.token_hex(2)}"


class SiteCatalog:
    """Immutable, ordered collection of sites keyed by identifier."""

    def __init__(self, sites: Iterable[Site], *, version: int = 0) -> None:
        ordered = tuple(sites)
        by_id: dict[str, Site] = {}
        for site in ordered:
            if site.site_id in by_id:
                raise CatalogError(f"Duplicate site identifier '{site.site_id}' in catalog.")
            by_id[site.site_id] = site
        self._sites = ordered
        self._by_id = by_id
        self.version = version

    def __iter__(self) -> Iterator[Site]:
        return iter(self._sites)

    def __len__(self) -> int:
        return len(self._sites)

    def __contains__(self, site_id: object) -> bool:
        return site_id in self._by_id

    @property
    def sites(self) -> tuple[Site, ...]:
        return self._sites

    def find(self, site_id: str) -> Optional[Site]:
        return self._by_id.get(site_id)

    def get(self, site_id: str) -> Site:
        site = self._by_id.get(site_id)
        if site is None:
            raise SiteNotFoundError(site_id)
        return site

    def resolve(self, site_ids: Sequence[str]) -> tuple[list[Site], list[InvalidSiteReference]]:
        """Map identifiers to sites in the given order, collecting the ones that do not exist."""

        sites: list[Site] = []
        skipped: list[InvalidSiteReference] = []
        for position, site_id in enumerate(site_ids):
            site = self._by_id.get(site_id)
            if site is None:
                skipped.append(InvalidSiteReference(site_id=site_id, position=position))
                continue
            sites.append(site)
        return sites, skipped

    def replace(self, site: Site) -> "SiteCatalog":
        """Return a new catalog with the site of the same identifier swapped in."""

        if site.site_id not in self._by_id:
            raise SiteNotFoundError(site.site_id)
        updated = tuple(site if item.site_id == site.site_id else item for item in self._sites)
        return SiteCatalog(updated, version=self.version + 1)


def mark_verified(catalog: SiteCatalog, site_id: str) -> SiteCatalog:
    """Validate a site and issue it a fresh trace token."""

    site = catalog.get(site_id)
    logger.info("Marking site %s as verified", site_id)
    return catalog.replace(replace(site, verified=True, traceability_hash=generate_trace_token()))


def _seed(
    site_id: str,
    name: str,
    role: SiteRole,
    address: str,
    waste_types: tuple[WasteCategory, ...],
    quantity_description: str,
    available_quantity: float,
    unit: Unit,
    price_per_unit: float,
    last_update: str,
    latitude: float,
    longitude: float,
    verified: bool,
) -> Site:
    return Site(
        site_id=site_id,
        name=name,
        role=role,
        address=address,
        waste_types=waste_types,
        quantity_description=quantity_description,
        available_quantity=available_quantity,
        unit=unit,
        price_per_unit=price_per_unit,
        last_update=last_update,
        latitude=latitude,
        longitude=longitude,
        verified=verified,
        traceability_hash=generate_trace_token(),
    )


def seed_sites() -> tuple[Site, ...]:
    """Cartagena demo dataset."""

    return (
        _seed("1", "Restaurante El Baluarte", SiteRole.GENERATOR, "Centro Histórico, Calle 32",
              (WasteCategory.ACEITES,), "50L Aceite Usado", 50, Unit.LITERS, 1500, "2h", 10.4230, -75.5490, True),
        _seed("2", "Hotel Caribe Plaza", SiteRole.GENERATOR, "Bocagrande, Av. San Martín",
              (WasteCategory.PLASTICO, WasteCategory.PAPEL_CARTON), "100kg Reciclables", 100, Unit.KG, 800,
              "5h", 10.4080, -75.5550, True),
        _seed("3", "Recuperadora del Caribe SAS", SiteRole.PROCESSOR, "Zona Industrial Mamonal",
              (WasteCategory.ACEITES, WasteCategory.GRASAS), "Planta de Procesamiento", 0, Unit.LITERS, 0,
              "1d", 10.3850, -75.5000, True),
        _seed("4", "Café del Mar", SiteRole.GENERATOR, "Baluarte Santo Domingo",
              (WasteCategory.VIDRIO,), "45 botellas", 45, Unit.UNITS, 200, "30m", 10.4245, -75.5520, True),
        _seed("5", "EPA Cartagena (Autoridad)", SiteRole.AUTHORITY, "Pie de la Popa",
              (), "Supervisión", 0, Unit.KG, 0, "En línea", 10.4180, -75.5350, True),
        _seed("7", "Fritos & Más", SiteRole.GENERATOR, "Av. Pedro de Heredia",
              (WasteCategory.GRASAS,), "Trampa de Grasa (20L)", 20, Unit.LITERS, 5000, "4h", 10.4050, -75.5250, False),
        _seed("8", "Mercado Bazurto Co.", SiteRole.GENERATOR, "Av. del Lago",
              (WasteCategory.ORGANICOS,), "500kg Orgánicos", 500, Unit.KG, 0, "10m", 10.4130, -75.5300, False),
    )


def _load_sites_from_file(path: Path) -> tuple[Site, ...]:
    if not path.exists():
        raise FileNotFoundError(f"Catalog file not found: {path}")
    with path.open(mode="r", encoding="utf-8") as handle:
        try:
            payload = json.load(handle)
        except json.JSONDecodeError as exc:
            raise CatalogError(f"Catalog file '{path}' is not valid JSON: {exc}") from exc

    records = payload.get("sites") if isinstance(payload, dict) else payload
    if not isinstance(records, list):
        raise CatalogError(f"Catalog file '{path}' must contain a list of sites.")

    sites: list[Site] = []
    for index, record in enumerate(records):
        try:
            model = SiteModel.model_validate(record)
        except ValidationError as exc:
            raise CatalogError(f"Invalid site record #{index} in '{path}': {exc}") from exc
        sites.append(model.to_domain(generate_trace_token()))
    return tuple(sites)


@functools.lru_cache(maxsize=4)
def load_catalog(source: Optional[Path] = None) -> SiteCatalog:
    """Load the site catalog from the configured file, or the built-in seed."""

    path = source or settings.catalog_file
    if path is None:
        sites = seed_sites()
        logger.info("Loaded %d seed sites", len(sites))
    else:
        sites = _load_sites_from_file(path)
        logger.info("Loaded %d sites from %s", len(sites), path)
    return SiteCatalog(sites)
