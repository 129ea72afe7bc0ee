# tests/test_units.py

import pytest

from core.units import CENTIMETERS, FEET, LENGTH, METERS, MILLIMETERS, Unit, UnitRegistry


def test_length_registry_order_and_base():
    assert LENGTH.symbols() == ("M", "CM", "MM", "FT")
    assert [u.name for u in LENGTH] == ["Meters", "Centimeters", "Millimeters", "Feet"]
    assert LENGTH.base is METERS
    assert METERS.factor == 1.0
    assert len(LENGTH) == 4


@pytest.mark.parametrize("key, unit", [
    ("m", METERS),
    ("Meters", METERS),
    ("cm", CENTIMETERS),
    (" MILLIMETER ", MILLIMETERS),
    ("feet", FEET),
    ("Foot", FEET),
])
def test_normalize_accepts_symbols_and_aliases(key, unit):
    assert LENGTH.normalize(key) is unit
    assert key in LENGTH


def test_normalize_passes_units_through():
    assert LENGTH.normalize(FEET) is FEET


def test_normalize_unknown_unit_lists_options():
    with pytest.raises(ValueError, match="Unknown unit 'parsec'"):
        LENGTH.normalize("parsec")
    assert "parsec" not in LENGTH


def test_registry_convert_is_unrounded():
    assert LENGTH.convert(1.0, "FT", "M") == pytest.approx(0.3048)
    assert LENGTH.convert(1.0, "M", "FT") == pytest.approx(3.280839895, rel=1e-9)
    assert LENGTH.convert(2.0, MILLIMETERS, MILLIMETERS) == 2.0


@pytest.mark.parametrize("factor", [0.0, -1.0, float("nan"), float("inf")])
def test_unit_rejects_bad_factor(factor):
    with pytest.raises(ValueError):
        Unit("X", "Bad", factor)


def test_registry_rejects_duplicate_keys():
    with pytest.raises(ValueError, match="Duplicate unit key"):
        UnitRegistry(
            units=(Unit("M", "Meters", 1.0), Unit("M2", "Other", 2.0, aliases=("m",))),
            base_symbol="M",
        )


def test_registry_requires_base_unit():
    with pytest.raises(ValueError, match="Base unit"):
        UnitRegistry(units=(Unit("CM", "Centimeters", 0.01),), base_symbol="M")
