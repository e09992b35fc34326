"""Nuclear mass table loaded from a comma separated file."""

from __future__ import annotations

import os
from collections.abc import Iterator

from fermibreakup.datatypes import NucleiData


class CSVNuclearMass:
    """Nuclear masses read from a CSV file, iterated as (nucleus, mass) pairs ordered by (A, Z).

    Rows are whitespace separated; each row is a comma separated list of values.
    The first row names the columns. When a nucleus appears twice, the first row wins.
    """

    def __init__(
        self,
        csv_filename: str | os.PathLike[str],
        mass_number_name: str = "A",
        charge_number_name: str = "Z",
        mass_name: str = "mass",
    ) -> None:
        with open(csv_filename, encoding="utf-8") as stream:
            rows = stream.read().split()

        header = rows[0].split(",") if rows else [""]
        mass_number_idx = _column_index(header, mass_number_name, "no mass number found")
        charge_number_idx = _column_index(header, charge_number_name, "no charge number found")
        mass_idx = _column_index(header, mass_name, "no nuclei mass found")

        masses: dict[NucleiData, float] = {}
        for row in rows[1:]:
            cells = row.split(",")
            if len(cells) != len(header):
                raise ValueError(f"invalid row format: {row}")
            key = NucleiData(int(cells[mass_number_idx]), int(cells[charge_number_idx]))
            masses.setdefault(key, float(cells[mass_idx]))

        self._masses = dict(sorted(masses.items()))

    def __iter__(self) -> Iterator[tuple[NucleiData, float]]:
        return iter(self._masses.items())

    def __len__(self) -> int:
        return len(self._masses)


def _column_index(header: list[str], name: str, message: str) -> int:
    matches = [idx for idx, column in enumerate(header) if column == name]
    if not matches:
        raise ValueError(message)
    return matches[-1]