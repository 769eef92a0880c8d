import pytest

from ecoruta.exceptions import UnknownCategoryError
from ecoruta.models.domain import WasteCategory
from ecoruta.services.calibration import MetricsConfig
from ecoruta.services.emissions import avoided_co2, emission_factor, transport_emissions


@pytest.mark.parametrize("category", list(WasteCategory))
def test_every_category_has_positive_factor(category):
    assert emission_factor(category) > 0


def test_avoided_co2_uses_category_factor():
    assert avoided_co2(WasteCategory.GRASAS, 20) == pytest.approx(24.0)
    assert avoided_co2(WasteCategory.VIDRIO, 45) == pytest.approx(13.5)
    assert avoided_co2("ACEITES", 50) == pytest.approx(140.0)


def test_unknown_category_fails_loudly():
    with pytest.raises(UnknownCategoryError):
        avoided_co2("METAL", 10)


def test_category_missing_from_calibration_fails_loudly():
    config = MetricsConfig(emission_factors={WasteCategory.VIDRIO: 0.3})
    with pytest.raises(UnknownCategoryError):
        avoided_co2(WasteCategory.PLASTICO, 10, config)


def test_transport_emissions_scale_with_distance():
    assert transport_emissions(0) == 0
    assert transport_emissions(10, MetricsConfig(truck_emission_per_km=0.25)) == pytest.approx(2.5)
    assert transport_emissions(10, MetricsConfig(truck_emission_per_km=0.4)) == pytest.approx(4.0)
