"""Common interface and liquid-drop mass formulae for nuclei property tables."""

from __future__ import annotations

import logging
import math
from abc import ABC, abstractmethod

_logger = logging.getLogger(__name__)

MEV = 1.0
EV = 1.0e-6 * MEV
AMU_C2 = 931.49410242 * MEV
ELECTRON_MASS_C2 = 0.51099895 * MEV

HYDROGEN_MASS_EXCESS = 7.28897
NEUTRON_MASS_EXCESS = 8.07132


def binding_energy(mass_number: int, charge_number: int) -> float:
    """Return the binding energy (MeV) of nucleus (A, Z) from Weizsaecker's formula."""
    a = float(mass_number)
    z = float(charge_number)
    n_pairing = (mass_number - charge_number) % 2
    z_pairing = charge_number % 2

    binding = (
        -15.67 * a
        + 17.23 * a ** (2.0 / 3.0)
        + 93.15 * (a / 2.0 - z) ** 2 / a
        + 0.6984523 * z**2 * a ** (-1.0 / 3.0)
    )
    if n_pairing == z_pairing:
        binding += (n_pairing + z_pairing - 1) * 12.0 / math.sqrt(a)

    return -binding * MEV


def atomic_mass(mass_number: int, charge_number: int) -> float:
    """Return the atomic mass (MeV) of nucleus (A, Z) estimated from mass excesses."""
    return (
        float(mass_number - charge_number) * NEUTRON_MASS_EXCESS
        + float(charge_number) * HYDROGEN_MASS_EXCESS
        - binding_energy(mass_number, charge_number)
        + float(mass_number) * AMU_C2
    )


def nuclear_mass(mass_number: int, charge_number: int) -> float:
    """Return the nuclear mass (MeV): atomic mass without electrons and their binding."""
    z = float(charge_number)
    mass = atomic_mass(mass_number, charge_number)
    mass -= z * ELECTRON_MASS_C2
    mass += (14.4381 * z**2.39 + 1.55468e-6 * z**5.35) * EV
    return mass


def is_invalid_nuclei(mass_number: int, charge_number: int) -> bool:
    """Return True when (A, Z) cannot describe a nucleus."""
    return mass_number < 1 or charge_number < 0 or charge_number > mass_number


class NucleiProperties(ABC):
    """Source of nuclear masses and stability information."""

    @abstractmethod
    def nuclear_mass(self, mass_number: int, charge_number: int) -> float:
        """Return the nuclear mass (MeV) of nucleus (A, Z)."""

    @abstractmethod
    def is_stable(self, mass_number: int, charge_number: int) -> bool:
        """Return True when nucleus (A, Z) is known to the table."""

    @staticmethod
    def _report_invalid(mass_number: int, charge_number: int) -> None:
        _logger.warning(
            "Unsupported values for A = %s and Z = %s", mass_number, charge_number
        )