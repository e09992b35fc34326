"""Built-in table of nuclear masses (MeV) for light nuclei."""

from __future__ import annotations

from fermibreakup.datatypes import NucleiData

_TABLE: tuple[tuple[int, int, float], ...] = (
    (1, 0, 939.565), (1, 1, 938.272),
    (2, 1, 1875.61),
    (3, 1, 2808.92), (3, 2, 2808.39), (3, 3, 2821.62),
    (4, 1, 3750.09), (4, 2, 3727.38), (4, 3, 3749.77),
    (5, 1, 4689.85), (5, 2, 4667.68), (5, 3, 4667.62), (5, 4, 4692.57),
    (6, 1, 5630.33), (6, 2, 5605.53), (6, 3, 5601.52), (6, 4, 5605.3), (6, 5, 5633.73),
    (7, 1, 6569.08), (7, 2, 6545.51), (7, 3, 6533.83), (7, 4, 6534.18), (7, 5, 6545.58),
    (8, 2, 7482.54), (8, 3, 7471.37), (8, 4, 7454.85), (8, 5, 7472.32), (8, 6, 7483.95),
    (9, 2, 8423.36), (9, 3, 8406.87), (9, 4, 8392.75), (9, 5, 8393.31), (9, 6, 8409.29),
    (10, 2, 9363.09), (10, 3, 9346.46), (10, 4, 9325.5), (10, 5, 9324.44),
    (10, 6, 9327.57), (10, 7, 9350.16),
    (11, 3, 10285.6), (11, 4, 10264.6), (11, 5, 10252.5), (11, 6, 10254.0),
    (11, 7, 10267.2),
    (12, 3, 11225.3), (12, 4, 11201.0), (12, 5, 11188.7), (12, 6, 11174.9),
    (12, 7, 11191.7), (12, 8, 11205.8),
    (13, 3, 12166.2), (13, 4, 12141.0), (13, 5, 12123.4), (13, 6, 12109.5),
    (13, 7, 12111.2), (13, 8, 12128.5),
    (14, 4, 13078.8), (14, 5, 13062.0), (14, 6, 13040.9), (14, 7, 13040.2),
    (14, 8, 13044.8), (14, 9, 13068.3),
    (15, 4, 14020.1), (15, 5, 13998.8), (15, 6, 13979.2), (15, 7, 13968.9),
    (15, 8, 13971.2), (15, 9, 13984.6),
    (16, 4, 14959.3), (16, 5, 14938.5), (16, 6, 14914.5), (16, 7, 14906.0),
    (16, 8, 14895.1), (16, 9, 14910.0), (16, 10, 14922.8),
    (17, 5, 15876.6), (17, 6, 15853.4), (17, 7, 15839.7), (17, 8, 15830.5),
    (17, 9, 15832.8), (17, 10, 15846.8),
    (18, 5, 16816.2), (18, 6, 16788.7), (18, 7, 16776.4), (18, 8, 16762.0),
    (18, 9, 16763.2), (18, 10, 16767.1), (18, 11, 16786.3),
    (19, 5, 17754.6), (19, 6, 17727.7), (19, 7, 17710.7), (19, 8, 17697.6),
    (19, 9, 17692.3), (19, 10, 17695.0), (19, 11, 17705.7), (19, 12, 17724.1),
    (20, 5, 18694.5), (20, 6, 18664.4), (20, 7, 18648.1), (20, 8, 18629.6),
    (20, 9, 18625.3), (20, 10, 18617.7), (20, 11, 18631.1), (20, 12, 18641.3),
)


def default_nuclear_masses() -> list[tuple[NucleiData, float]]:
    """Return a fresh list of (nucleus, nuclear mass in MeV) pairs, ordered by (A, Z)."""
    return [(NucleiData(a, z), mass) for a, z, mass in _TABLE]