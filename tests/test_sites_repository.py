import json
from pathlib import Path

import pytest

from ecoruta.data.sites_repository import (
    SiteCatalog,
    generate_trace_token,
    load_catalog,
    mark_verified,
    seed_sites,
)
from ecoruta.exceptions import CatalogError, SiteNotFoundError
from ecoruta.models.domain import SiteRole, Unit, WasteCategory
from ecoruta.services.routing.service import compute_route_for_selection


@pytest.fixture(autouse=True)
def clear_catalog_cache():
    load_catalog.cache_clear()
    yield
    load_catalog.cache_clear()


def _record(sid: str, **overrides) -> dict:
    record = {
        "id": sid,
        "name": f"Site {sid}",
        "role": "GENERADOR",
        "address": "Centro",
        "wasteTypes": ["VIDRIO"],
        "quantityDescription": "10 botellas",
        "availableQuantity": 10,
        "unit": "unidades",
        "pricePerUnit": 200,
        "lastUpdate": "1h",
        "lat": 10.42,
        "lng": -75.55,
        "verified": False,
    }
    record.update(overrides)
    return record


def _write(tmp_path: Path, records) -> Path:
    path = tmp_path / "sites.json"
    path.write_text(json.dumps(records), encoding="utf-8")
    return path


def test_seed_catalog_matches_cartagena_dataset():
    catalog = load_catalog()

    assert len(catalog) == 7
    assert catalog.get("7").waste_types == (WasteCategory.GRASAS,)
    assert catalog.get("5").role == SiteRole.AUTHORITY
    assert catalog.get("5").primary_category is None
    assert catalog.get("4").unit == Unit.UNITS
    assert "6" not in catalog


def test_trace_token_shape():
    token = generate_trace_token()
    assert token.startswith("0x")
    assert "..." in token
    assert len(token) == len("0x") + 8 + 3 + 4


def test_get_unknown_site_raises():
    catalog = SiteCatalog(seed_sites())
    with pytest.raises(SiteNotFoundError):
        catalog.get("missing")
    assert catalog.find("missing") is None


def test_duplicate_ids_are_rejected():
    sites = seed_sites()
    with pytest.raises(CatalogError):
        SiteCatalog([*sites, sites[0]])


def test_load_catalog_from_json_file(tmp_path: Path):
    path = _write(tmp_path, [_record("a"), _record("b", wasteTypes=["GRASAS", "ACEITES"], traceabilityHash="0xabc")])

    catalog = load_catalog(path)

    assert [site.site_id for site in catalog] == ["a", "b"]
    assert catalog.get("b").primary_category == WasteCategory.GRASAS
    assert catalog.get("b").traceability_hash == "0xabc"
    assert catalog.get("a").traceability_hash.startswith("0x")


def test_load_catalog_accepts_wrapped_payload(tmp_path: Path):
    path = tmp_path / "wrapped.json"
    path.write_text(json.dumps({"sites": [_record("a")]}), encoding="utf-8")

    assert len(load_catalog(path)) == 1


@pytest.mark.parametrize(
    "bad_record",
    [
        _record("neg", availableQuantity=-1),
        _record("price", pricePerUnit=-5),
        _record("cat", wasteTypes=["METAL"]),
        _record("empty", wasteTypes=[]),
        _record("lat", lat=123.0),
    ],
)
def test_invalid_records_raise_catalog_error(tmp_path: Path, bad_record):
    path = _write(tmp_path, [bad_record])
    with pytest.raises(CatalogError):
        load_catalog(path)


def test_non_generator_without_categories_is_allowed(tmp_path: Path):
    path = _write(tmp_path, [_record("epa", role="AUTORIDAD", wasteTypes=[])])
    assert load_catalog(path).get("epa").waste_types == ()


def test_missing_file_raises(tmp_path: Path):
    with pytest.raises(FileNotFoundError):
        load_catalog(tmp_path / "nope.json")


def test_mark_verified_returns_new_catalog():
    catalog = SiteCatalog(seed_sites())
    original = catalog.get("7")

    updated = mark_verified(catalog, "7")

    assert updated.get("7").verified
    assert updated.version == catalog.version + 1
    assert not catalog.get("7").verified
    assert updated.get("7").traceability_hash != original.traceability_hash
    assert [site.site_id for site in updated] == [site.site_id for site in catalog]


def test_route_recomputed_against_updated_catalog():
    catalog = SiteCatalog(seed_sites())
    before = compute_route_for_selection(catalog, ["7", "4"])
    after = compute_route_for_selection(mark_verified(catalog, "7"), ["7", "4"])

    assert after.total_distance_km == before.total_distance_km
    assert after.material_balance == before.material_balance
