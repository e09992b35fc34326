# fermibreakup

Building blocks for the Fermi break-up model of light excited nuclei. All energies
and masses are in MeV. The package has no dependencies beyond the standard library.

It provides:

- nuclear masses from a built-in table of light nuclei (A up to 20), from a CSV file,
  or from the Weizsäcker mass formula when a nucleus is not in a table;
- enumeration of integer partitions, used to split a nucleus into fragments;
- random sampling helpers: uniform and normal samples, isotropic vectors and sorted
  uniform points;
- the statistical weight of a break-up channel: Coulomb barrier, kinetic energy, spin,
  mass and permutation factors.

## Installation

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## Basic types

`fermibreakup.datatypes` holds:

- `NucleiData(mass_number, charge_number)`: a frozen, hashable nucleus identifier,
  ordered by A and then Z. Negative numbers raise `ValueError`.
- `Vector3(x, y, z)`: an immutable three-vector with `mag()`, `mag2()`, addition,
  subtraction, negation, multiplication and division by a number, and iteration over
  its components.
- `nuclei_slot(mass_number, charge_number)`: the dense table index
  `A * (A + 1) // 2 + Z`.

## Nuclear masses

The mass formulae live in `fermibreakup.nuclei_base`: `binding_energy`, `atomic_mass`,
`nuclear_mass` and `is_invalid_nuclei` (true when `A < 1`, `Z < 0` or `Z > A`). The
abstract class `NucleiProperties` declares `nuclear_mass(A, Z)` and `is_stable(A, Z)`.

`default_nuclear_masses()` in `fermibreakup.default_nuclear_mass` returns a fresh list
of `(NucleiData, mass)` pairs for the built-in table.

Two tables implement `NucleiProperties`. Both take any iterable of `(NucleiData, mass)`
pairs and load the built-in table when given none.

```python
from fermibreakup.fast_nuclei_properties import FastNucleiProperties

props = FastNucleiProperties()
props.nuclear_mass(12, 6)   # 11174.9, taken from the table
props.is_stable(12, 6)      # True
props.nuclear_mass(40, 20)  # not in the table: computed by the mass formula and cached
props.is_stable(40, 20)     # False, a computed mass does not make a nucleus known
props.add_mass(21, 10, 19550.5)
```

`FastNucleiProperties` keeps masses in a flat list indexed by `nuclei_slot`.
`nuclear_mass` and `add_mass` raise `ValueError` for an invalid nucleus.

`FermiNucleiProperties` in `fermibreakup.fermi_nuclei_properties` keeps masses in a
dictionary; `nuclear_mass` falls back to the formula for unknown nuclei without
caching the result, and `add_mass` replaces an existing entry.

For both, `is_stable` logs a warning and returns `False` for an invalid nucleus.

### Masses from a CSV file

```python
from fermibreakup.csv_nuclear_mass import CSVNuclearMass
from fermibreakup.fermi_nuclei_properties import FermiNucleiProperties

table = CSVNuclearMass("masses.csv", "A", "Z", "mass")
len(table)                      # number of distinct nuclei
props = FermiNucleiProperties(table)
```

The first row names the columns; every later row is a comma separated list of values.
Rows are separated by whitespace, so values must not contain spaces. Iteration yields
`(NucleiData, mass)` pairs ordered by (A, Z); when a nucleus appears twice the first
row wins. A missing column, or a row with a different number of values than the
header, raises `ValueError`.

### Shared table

`fermibreakup.nuclei_properties` holds one process-wide table:

```python
from fermibreakup import nuclei_properties

nuclei_properties.instance().nuclear_mass(4, 2)  # a FastNucleiProperties on first use
nuclei_properties.reset(props)                   # install another table
nuclei_properties.reset()                        # back to a fresh default table
```

## Integer partitions

```python
from fermibreakup.integer_partition import IntegerPartition, integer_partitions

list(integer_partitions(5, 2, 1))   # [[4, 1], [3, 2]]
list(IntegerPartition(6, 3, 2))     # [[2, 2, 2]], re-iterable
```

Each partition has exactly `terms_count` terms, each at least `base`, in
non-increasing order. Nothing is yielded when no partition exists or when the number
or the term count is zero.

## Random sampling

```python
from fermibreakup import randomizer

randomizer.seed(42)
randomizer.uniform()                    # in [0, 1)
randomizer.normal(0.0, 1.0)
randomizer.isotropic_vector(1.0)        # a Vector3 of length 1
randomizer.probability_distribution(5)  # 5 sorted points, first 0.0, last 1.0
```

`probability_distribution` raises `ValueError` for fewer than two points.

## Break-up channel weights

`fermibreakup.configuration_properties` works on sequences of `SplitFragment`
(`mass_number`, `charge_number`, `polarization`, `fragment_mass`,
`excitation_energy`):

```python
from fermibreakup.configuration_properties import SplitFragment, decay_probability

alpha = SplitFragment(4, 2, polarization=1.0, fragment_mass=3727.38)
split = [alpha, alpha, alpha]
decay_probability(split, 12, 11174.9 + 20.0)
```

`decay_probability(split, atomic_weight, total_energy)` returns the unnormalised
weight of the split; it is zero when the energy does not cover the fragment masses,
their excitation energies and the Coulomb barrier. The parts are available on their
own as `coulomb_barrier`, `kinetic_energy`, `spin_factor`, `mass_factor` and
`configuration_factor`. An empty split raises `ValueError` (except for `spin_factor`,
which returns 1).

## What this package does not do

It does not sample break-up events. There is no enumeration of a nucleus's possible
splits into fragments, no choice among them by weight, no phase-space decay into
momenta, no de-excitation chain (evaporation, multifragmentation, photon emission) and
no command-line program. It supplies the masses, partitions, random helpers and
channel weights on which such a model is built.