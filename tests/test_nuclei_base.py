import logging

import pytest

from fermibreakup.default_nuclear_mass import default_nuclear_masses
from fermibreakup.nuclei_base import (
    NucleiProperties,
    atomic_mass,
    binding_energy,
    is_invalid_nuclei,
    nuclear_mass,
)


@pytest.mark.parametrize(
    "a, z, expected",
    [
        (0, 0, True),
        (1, 0, False),
        (1, 1, False),
        (1, 2, True),
        (12, 6, False),
        (5, -1, True),
        (12, 13, True),
    ],
)
def test_is_invalid_nuclei(a, z, expected):
    assert is_invalid_nuclei(a, z) is expected


def test_binding_energy_positive_for_bound_nucleus():
    assert binding_energy(12, 6) > 0
    assert binding_energy(16, 8) > binding_energy(12, 6)


def test_neutral_nucleus_nuclear_equals_atomic_mass():
    assert nuclear_mass(4, 0) == pytest.approx(atomic_mass(4, 0))


def test_nuclear_mass_lighter_than_atomic_mass_with_electrons():
    assert nuclear_mass(12, 6) < atomic_mass(12, 6)


def test_formula_close_to_tabulated_masses():
    table = dict(default_nuclear_masses())
    for key, mass in table.items():
        if key.mass_number >= 12:
            assert nuclear_mass(key.mass_number, key.charge_number) == pytest.approx(
                mass, rel=0.01
            )


def test_base_class_is_abstract():
    with pytest.raises(TypeError):
        NucleiProperties()


class _Formula(NucleiProperties):
    def nuclear_mass(self, mass_number, charge_number):
        return nuclear_mass(mass_number, charge_number)

    def is_stable(self, mass_number, charge_number):
        return not is_invalid_nuclei(mass_number, charge_number)


def test_inherited_report_invalid_logs_nucleus(caplog):
    assert is_invalid_nuclei(3, 7) is True
    props = _Formula()
    with caplog.at_level(logging.WARNING):
        props._report_invalid(3, 7)
    assert "A = 3" in caplog.text
    assert "Z = 7" in caplog.text


def test_subclass_uses_package_formulas():
    props = _Formula()
    assert nuclear_mass(12, 6) == pytest.approx(11174.9, rel=0.01)
    assert props.nuclear_mass(12, 6) == pytest.approx(nuclear_mass(12, 6))
    assert is_invalid_nuclei(3, 7) is True
    assert is_invalid_nuclei(7, 3) is False
    assert props.is_stable(3, 7) is False
    assert props.is_stable(7, 3) is True