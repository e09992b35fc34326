"""Nuclear masses, integer partitions, sampling helpers and channel weights for the Fermi break-up model."""

__version__ = "0.1.0"