"""Nuclear mass table backed by a mapping from nucleus to mass."""

from __future__ import annotations

from collections.abc import Iterable

from fermibreakup.datatypes import NucleiData
from fermibreakup.default_nuclear_mass import default_nuclear_masses
from fermibreakup.nuclei_base import NucleiProperties, is_invalid_nuclei, nuclear_mass


class FermiNucleiProperties(NucleiProperties):
    """Nuclear masses stored in a dictionary; unknown nuclei fall back to the formula."""

    def __init__(self, data_source: Iterable[tuple[NucleiData, float]] | None = None) -> None:
        self._masses: dict[NucleiData, float] = {}
        if data_source is None:
            data_source = default_nuclear_masses()
        for nucleus, mass in data_source:
            self.add_mass(nucleus.mass_number, nucleus.charge_number, mass)

    def nuclear_mass(self, mass_number: int, charge_number: int) -> float:
        """Return the tabulated nuclear mass (MeV) of (A, Z), or the formula estimate."""
        mass = self._masses.get(NucleiData(mass_number, charge_number))
        if mass is not None:
            return mass
        return nuclear_mass(mass_number, charge_number)

    def is_stable(self, mass_number: int, charge_number: int) -> bool:
        """Return True when (A, Z) is present in the table."""
        if is_invalid_nuclei(mass_number, charge_number):
            self._report_invalid(mass_number, charge_number)
            return False
        return NucleiData(mass_number, charge_number) in self._masses

    def add_mass(self, mass_number: int, charge_number: int, mass: float) -> None:
        """Register or replace the nuclear mass (MeV) of nucleus (A, Z)."""
        self._masses[NucleiData(mass_number, charge_number)] = mass