"""Process-wide nuclear properties table used by the break-up model."""

from __future__ import annotations

from fermibreakup.fast_nuclei_properties import FastNucleiProperties
from fermibreakup.nuclei_base import NucleiProperties

_instance: NucleiProperties | None = None


def instance() -> NucleiProperties:
    """Return the shared properties table, creating the default one on first use."""
    global _instance
    if _instance is None:
        _instance = FastNucleiProperties()
    return _instance


def reset(properties: NucleiProperties | None = None) -> None:
    """Replace the shared table; with no argument a fresh default table is installed."""
    global _instance
    _instance = properties if properties is not None else FastNucleiProperties()