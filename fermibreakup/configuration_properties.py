"""Statistical weight of a break-up channel in the Fermi break-up model."""

from __future__ import annotations

import math
from collections import Counter
from collections.abc import Sequence
from dataclasses import dataclass

KAPPA = 1.0
"""Ratio V/V0 of the break-up volume to the normal nuclear volume."""

R0 = 1.3
"""Nuclear radius parameter, fm."""

HBARC = 197.3269804
"""hbar * c, MeV * fm."""

FINE_STRUCTURE_CONST = 1.0 / 137.035999084

ELM_COUPLING = FINE_STRUCTURE_CONST * HBARC
"""e^2 / (4 pi epsilon0), MeV * fm."""

_COULOMB_COEFFICIENT = (3.0 / 5.0) * (ELM_COUPLING / R0) * (1.0 / (1.0 + KAPPA)) ** (1.0 / 3.0)
_CONSTANT_PART = (R0 / HBARC) ** 3 * KAPPA * math.sqrt(2.0 / math.pi) / 3.0


@dataclass(frozen=True)
class SplitFragment:
    """A fragment of a break-up channel.

    ``polarization`` is the spin multiplicity, ``fragment_mass`` and
    ``excitation_energy`` are in MeV.
    """

    mass_number: int
    charge_number: int
    polarization: float
    fragment_mass: float
    excitation_energy: float = 0.0


def _require_fragments(split: Sequence[SplitFragment]) -> None:
    if not split:
        raise ValueError("split must contain at least one fragment")


def coulomb_barrier(split: Sequence[SplitFragment]) -> float:
    """Return the Coulomb barrier (MeV) of the channel."""
    _require_fragments(split)
    mass_sum = 0.0
    charge_sum = 0.0
    coulomb_energy = 0.0
    for fragment in split:
        mass = float(fragment.mass_number)
        charge = float(fragment.charge_number)
        coulomb_energy += charge**2 / mass ** (1.0 / 3.0)
        mass_sum += mass
        charge_sum += charge
    coulomb_energy -= charge_sum**2 / mass_sum ** (1.0 / 3.0)
    return -_COULOMB_COEFFICIENT * coulomb_energy


def spin_factor(split: Sequence[SplitFragment]) -> float:
    """Return the product of the fragments' spin multiplicities."""
    return math.prod((fragment.polarization for fragment in split), start=1.0)


def kinetic_energy(split: Sequence[SplitFragment], total_energy: float) -> float:
    """Return the kinetic energy (MeV) left to the fragments, never negative."""
    _require_fragments(split)
    for fragment in split:
        total_energy -= fragment.fragment_mass + fragment.excitation_energy
    if total_energy > 0:
        total_energy -= coulomb_barrier(split)
    return max(total_energy, 0.0)


def mass_factor(split: Sequence[SplitFragment]) -> float:
    """Return (prod m_i / sum m_i) ** 1.5 over the fragment masses."""
    _require_fragments(split)
    masses = [fragment.fragment_mass for fragment in split]
    factor = math.prod(masses) / math.fsum(masses)
    return factor * math.sqrt(factor)


def configuration_factor(split: Sequence[SplitFragment]) -> float:
    """Return the permutation factor for fragments sharing a mass number."""
    _require_fragments(split)
    repeats = Counter(fragment.mass_number for fragment in split)
    return float(math.prod(math.factorial(count - 1) for count in repeats.values()))


def _const_factor(atomic_weight: int, fragments_count: int) -> float:
    return (_CONSTANT_PART * atomic_weight) ** (fragments_count - 1)


def _gamma_factor(fragments_count: int) -> float:
    gamma = 1.0
    arg = 3.0 * (fragments_count - 1) / 2.0 - 1.0
    while arg > 1.1:
        gamma *= arg
        arg -= 1.0
    if fragments_count % 2 == 0:
        gamma *= math.sqrt(math.pi)
    return gamma


def decay_probability(
    split: Sequence[SplitFragment], atomic_weight: int, total_energy: float
) -> float:
    """Return the unnormalised statistical weight of breaking into ``split``."""
    _require_fragments(split)
    kinetic = kinetic_energy(split, total_energy)
    if kinetic <= 0:
        return 0.0

    count = len(split)
    weight = (
        _const_factor(atomic_weight, count)
        * mass_factor(split)
        * (spin_factor(split) / configuration_factor(split))
        / _gamma_factor(count)
    )
    return weight * kinetic ** (3.0 * (count - 1) / 2.0 - 1.0)