import pytest

from ecoruta.config import DEFAULT_ECONOMIC_MODELS, DEFAULT_EMISSION_FACTORS
from ecoruta.exceptions import UnknownCategoryError
from ecoruta.models.domain import EconomicKind, Site, SiteRole, Unit, WasteCategory
from ecoruta.services.calibration import MetricsConfig
from ecoruta.services.economics import material_amount, parse_category, quote_site, resolve_economic_model


def _site(sid: str, categories, quantity: float, price: float, role: SiteRole = SiteRole.GENERATOR) -> Site:
    return Site(
        site_id=sid,
        name=f"Site {sid}",
        role=role,
        address="Cartagena",
        waste_types=tuple(categories),
        quantity_description=f"{quantity}",
        available_quantity=quantity,
        unit=Unit.KG,
        price_per_unit=price,
        last_update="1h",
        latitude=10.42,
        longitude=-75.54,
        verified=True,
        traceability_hash="0xdeadbeef...beef",
    )


def test_default_tables_cover_every_category():
    assert set(DEFAULT_ECONOMIC_MODELS) == set(WasteCategory)
    assert set(DEFAULT_EMISSION_FACTORS) == set(WasteCategory)
    assert all(factor > 0 for factor in DEFAULT_EMISSION_FACTORS.values())


@pytest.mark.parametrize("category", list(WasteCategory))
def test_every_category_resolves_to_one_kind(category):
    first = resolve_economic_model(category)
    second = resolve_economic_model(category)
    assert first.kind in set(EconomicKind)
    assert first == second


def test_reference_regimes():
    assert resolve_economic_model(WasteCategory.GRASAS).kind == EconomicKind.COST
    assert resolve_economic_model(WasteCategory.ORGANICOS).kind == EconomicKind.FREE
    assert resolve_economic_model(WasteCategory.VIDRIO).kind == EconomicKind.REVENUE
    assert resolve_economic_model("aceites").sign == "+"


def test_unknown_category_is_rejected():
    with pytest.raises(UnknownCategoryError):
        resolve_economic_model("METAL")
    with pytest.raises(UnknownCategoryError):
        parse_category(None)


def test_category_missing_from_custom_table_is_rejected():
    config = MetricsConfig(economic_models={WasteCategory.VIDRIO: EconomicKind.REVENUE})
    assert resolve_economic_model(WasteCategory.VIDRIO, config).kind == EconomicKind.REVENUE
    with pytest.raises(UnknownCategoryError):
        resolve_economic_model(WasteCategory.GRASAS, config)


def test_material_amount_sign_follows_primary_category():
    assert material_amount(_site("a", [WasteCategory.VIDRIO], 45, 200)) == 9000
    assert material_amount(_site("b", [WasteCategory.GRASAS], 20, 5000)) == -100000
    assert material_amount(_site("c", [WasteCategory.ORGANICOS], 500, 10)) == 0
    # secondary categories never change the regime
    assert material_amount(_site("d", [WasteCategory.ORGANICOS, WasteCategory.VIDRIO], 10, 10)) == 0
    assert material_amount(_site("e", [], 0, 0, role=SiteRole.AUTHORITY)) == 0


def test_quote_site_cost_regime():
    quote = quote_site(_site("7", [WasteCategory.GRASAS], 20, 5000))

    assert quote.model.kind == EconomicKind.COST
    assert quote.total_amount == 100000
    assert quote.direction == "pay"
    assert quote.action_label == "Solicitar Recolección"
    assert quote.avoided_co2_kg == pytest.approx(24.0)


def test_quote_site_free_regime_has_zero_total():
    quote = quote_site(_site("8", [WasteCategory.ORGANICOS], 500, 100))

    assert quote.total_amount == 0
    assert quote.direction == "none"
    assert quote.avoided_co2_kg == pytest.approx(250.0)


def test_quote_site_without_categories():
    quote = quote_site(_site("5", [], 0, 0, role=SiteRole.AUTHORITY))

    assert quote.category is None
    assert quote.model.kind == EconomicKind.FREE
    assert quote.avoided_co2_kg == 0
