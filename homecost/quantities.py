"""Quantity take-off helpers for the whole-house estimator.

Derives the geometric quantities the line-item catalog prices against
(footprint, roof area, perimeter, wall area) and the count-based
quantities (doors, fixtures, counter runs) from a WholeHouseInput.
The footprint is assumed roughly square.
"""

from __future__ import annotations

import math
from typing import TYPE_CHECKING

from homecost.numeric import round_half_up

if TYPE_CHECKING:
    from homecost.models.house import WholeHouseInput

ROOF_PITCH_FACTOR = 1.15
SQFT_PER_GARAGE_SPACE = 280
SQFT_PER_WINDOW = 150
MIN_WINDOWS = 8


def footprint(house: WholeHouseInput) -> float:
    """Ground-floor area: total square footage over stories."""
    return round_half_up(house.sqft / house.stories)


def roof_area(house: WholeHouseInput) -> float:
    return round_half_up(footprint(house) * ROOF_PITCH_FACTOR)


def perimeter(house: WholeHouseInput) -> float:
    """Linear feet around a square footprint."""
    return round_half_up(math.sqrt(footprint(house)) * 4)


def story_height(house: WholeHouseInput) -> float:
    return 9.5 if house.stories >= 2 else 10.0


def wall_area(house: WholeHouseInput) -> float:
    """Exterior wall area: perimeter x story height x stories."""
    return round_half_up(perimeter(house) * story_height(house) * house.stories)


def interior_door_count(house: WholeHouseInput) -> int:
    # bedrooms + baths + kitchen, great room, dining; plus closets
    rooms = house.bedrooms + house.bathrooms + 3
    closets = house.bedrooms + 2
    return rooms + closets


def plumbing_fixture_count(house: WholeHouseInput) -> int:
    # toilet, sink, shower per bath; kitchen sink, dishwasher, washer hookup
    return house.bathrooms * 3 + 3


def kitchen_counter_lf(house: WholeHouseInput) -> float:
    if house.sqft > 3500:
        return 35
    if house.sqft > 2500:
        return 28
    return 20


def bath_counter_lf(house: WholeHouseInput) -> float:
    """Double vanity in the primary bath, single vanities elsewhere."""
    if house.bathrooms <= 0:
        return 0
    return 8 + (house.bathrooms - 1) * 4


def garage_sqft(house: WholeHouseInput) -> float:
    return house.garage_spaces * SQFT_PER_GARAGE_SPACE


def garage_door_count(house: WholeHouseInput) -> int:
    """One door per two cars."""
    return math.ceil(house.garage_spaces / 2)


def window_count(house: WholeHouseInput) -> int:
    return max(int(round_half_up(house.sqft / SQFT_PER_WINDOW)), MIN_WINDOWS)


def exterior_door_count(house: WholeHouseInput) -> int:
    # front, back and slider; larger homes get a fourth
    return 4 if house.sqft > 3000 else 3


def driveway_sqft(house: WholeHouseInput) -> float:
    return 400 + house.garage_spaces * 150
