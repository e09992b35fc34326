import math

import pytest

from fermibreakup.datatypes import NucleiData, Vector3, nuclei_slot


def test_nuclei_data_orders_by_mass_then_charge():
    items = [NucleiData(12, 6), NucleiData(4, 2), NucleiData(12, 5), NucleiData(1, 1)]
    assert sorted(items) == [
        NucleiData(1, 1),
        NucleiData(4, 2),
        NucleiData(12, 5),
        NucleiData(12, 6),
    ]


def test_nuclei_data_equality_and_hashing():
    masses = {NucleiData(4, 2): 3727.38}
    assert masses[NucleiData(4, 2)] == 3727.38
    assert NucleiData(4, 2) == NucleiData(4, 2)
    assert NucleiData(4, 2) not in {NucleiData(4, 1)}


def test_nuclei_data_rejects_negative_numbers():
    with pytest.raises(ValueError):
        NucleiData(-1, 0)
    with pytest.raises(ValueError):
        NucleiData(3, -2)


def test_nuclei_slot_origin():
    assert nuclei_slot(0, 0) == 0


def test_nuclei_slot_is_dense_and_injective():
    slots = [nuclei_slot(a, z) for a in range(0, 40) for z in range(0, a + 1)]
    assert len(set(slots)) == len(slots)
    assert sorted(slots) == list(range(len(slots)))


def test_nuclei_slot_increases_with_charge():
    for a in range(1, 20):
        assert nuclei_slot(a, a) > nuclei_slot(a, 0)
        assert nuclei_slot(a + 1, 0) == nuclei_slot(a, a) + 1


def test_vector_magnitude():
    v = Vector3(3.0, 4.0, 0.0)
    assert v.mag() == pytest.approx(5.0)
    assert v.mag2() == pytest.approx(v.mag() ** 2)


def test_vector_addition_is_componentwise():
    a = Vector3(1.0, 2.0, 3.0)
    b = Vector3(4.0, -5.0, 0.5)
    assert a + b == Vector3(1.0 + 4.0, 2.0 - 5.0, 3.0 + 0.5)
    assert (a + b) - b == a


def test_vector_scalar_multiplication():
    v = Vector3(1.0, -2.0, 0.5)
    assert v * 2 == Vector3(2.0, -4.0, 1.0)
    assert 2 * v == v * 2
    assert (v * 3.0) / 3.0 == v
    assert (v * 2.0).mag() == pytest.approx(2.0 * v.mag())


def test_vector_iteration_and_negation():
    v = Vector3(1.0, 2.0, 3.0)
    assert list(v) == [1.0, 2.0, 3.0]
    assert list(-v) == [-1.0, -2.0, -3.0]
    assert math.isclose((v + -v).mag(), 0.0)