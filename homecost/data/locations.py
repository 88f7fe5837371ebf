"""Service-area locations and their cost multipliers.

Multipliers are relative to the Bradenton base (1.00) and are applied to
every whole-house unit cost. Barrier-island locations carry higher labor,
access and staging costs.
"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class Location:
    """A priced service-area location."""

    id: str
    name: str
    multiplier: float


LOCATIONS: list[Location] = [
    Location("bradenton", "Bradenton", 1.00),
    Location("sarasota", "Sarasota", 1.02),
    Location("lakewood_ranch", "Lakewood Ranch", 1.03),
    Location("palmetto", "Palmetto", 1.00),
    Location("siesta_key", "Siesta Key", 1.05),
    Location("longboat_key", "Longboat Key", 1.06),
    Location("bird_key", "Bird Key / St. Armands", 1.06),
    Location("anna_maria", "Anna Maria Island", 1.08),
]


def location_multipliers() -> dict[str, float]:
    return {loc.id: loc.multiplier for loc in LOCATIONS}


def location_names() -> dict[str, str]:
    return {loc.id: loc.name for loc in LOCATIONS}
