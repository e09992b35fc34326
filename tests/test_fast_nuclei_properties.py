import pytest

from fermibreakup.datatypes import NucleiData
from fermibreakup.fast_nuclei_properties import FastNucleiProperties
from fermibreakup.nuclei_base import nuclear_mass


def test_default_table_values():
    props = FastNucleiProperties()
    assert props.nuclear_mass(12, 6) == 11174.9
    assert props.nuclear_mass(1, 0) == 939.565


def test_default_table_nuclei_are_stable():
    props = FastNucleiProperties()
    assert props.is_stable(12, 6)
    assert props.is_stable(4, 2)


def test_unknown_nucleus_uses_formula_and_is_not_stable():
    props = FastNucleiProperties()
    assert not props.is_stable(40, 20)
    assert props.nuclear_mass(40, 20) == pytest.approx(nuclear_mass(40, 20))
    assert props.nuclear_mass(40, 20) == props.nuclear_mass(40, 20)
    assert not props.is_stable(40, 20)


def test_charge_above_mass_raises():
    props = FastNucleiProperties()
    with pytest.raises(ValueError):
        props.nuclear_mass(3, 5)


def test_invalid_nucleus_is_not_stable():
    props = FastNucleiProperties()
    assert props.is_stable(0, 0) is False
    assert props.is_stable(2, 3) is False


def test_add_mass_registers_stable_nucleus():
    props = FastNucleiProperties([])
    assert not props.is_stable(30, 14)
    props.add_mass(30, 14, 27000.5)
    assert props.is_stable(30, 14)
    assert props.nuclear_mass(30, 14) == 27000.5


def test_add_mass_overrides_cached_formula_value():
    props = FastNucleiProperties([])
    props.nuclear_mass(25, 12)
    props.add_mass(25, 12, 23000.25)
    assert props.nuclear_mass(25, 12) == 23000.25
    assert props.is_stable(25, 12)


def test_custom_data_source():
    props = FastNucleiProperties([(NucleiData(2, 1), 1800.0), (NucleiData(5, 2), 4600.0)])
    assert props.nuclear_mass(2, 1) == 1800.0
    assert props.nuclear_mass(5, 2) == 4600.0
    assert not props.is_stable(12, 6)