"""Nuclear mass table backed by a dense list indexed by (A, Z)."""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass

from fermibreakup.datatypes import NucleiData, nuclei_slot
from fermibreakup.default_nuclear_mass import default_nuclear_masses
from fermibreakup.nuclei_base import NucleiProperties, is_invalid_nuclei, nuclear_mass


@dataclass
class _MassData:
    mass: float
    is_valid: bool


class FastNucleiProperties(NucleiProperties):
    """Nuclear masses stored in a flat table for constant time lookup.

    Masses of nuclei absent from the table are computed from the liquid-drop
    formula on first request and remembered, but such nuclei are not stable.
    """

    def __init__(self, data_source: Iterable[tuple[NucleiData, float]] | None = None) -> None:
        self._masses: list[_MassData | None] = []
        if data_source is None:
            data_source = default_nuclear_masses()
        for nucleus, mass in data_source:
            self.add_mass(nucleus.mass_number, nucleus.charge_number, mass)

    def _store(self, slot: int, entry: _MassData) -> None:
        if slot >= len(self._masses):
            self._masses.extend([None] * (slot + 1 - len(self._masses)))
        self._masses[slot] = entry

    def _lookup(self, mass_number: int, charge_number: int) -> _MassData | None:
        slot = nuclei_slot(mass_number, charge_number)
        if slot < len(self._masses):
            return self._masses[slot]
        return None

    def nuclear_mass(self, mass_number: int, charge_number: int) -> float:
        """Return the nuclear mass (MeV) of (A, Z), computing and caching unknown ones."""
        if is_invalid_nuclei(mass_number, charge_number):
            raise ValueError(f"invalid nuclei A = {mass_number}, Z = {charge_number}")

        entry = self._lookup(mass_number, charge_number)
        if entry is not None:
            return entry.mass

        mass = nuclear_mass(mass_number, charge_number)
        self._store(nuclei_slot(mass_number, charge_number), _MassData(mass, is_valid=False))
        return mass

    def is_stable(self, mass_number: int, charge_number: int) -> bool:
        """Return True when (A, Z) was supplied as a known nucleus."""
        if is_invalid_nuclei(mass_number, charge_number):
            self._report_invalid(mass_number, charge_number)
            return False
        entry = self._lookup(mass_number, charge_number)
        return entry is not None and entry.is_valid

    def add_mass(self, mass_number: int, charge_number: int, mass: float) -> None:
        """Register the nuclear mass (MeV) of a known nucleus (A, Z)."""
        if is_invalid_nuclei(mass_number, charge_number):
            raise ValueError(f"invalid nuclei A = {mass_number}, Z = {charge_number}")
        self._store(nuclei_slot(mass_number, charge_number), _MassData(mass, is_valid=True))