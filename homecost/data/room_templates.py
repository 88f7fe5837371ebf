"""Room templates for the room-by-room estimator.

Each template gives a room type's nominal share of total conditioned area
for a SINGLE instance and the material categories a homeowner can select
finishes for in that room. Core rooms of a typical home sum to roughly
100%; upgrade rooms are added on top.
"""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field


class RoomTemplate(BaseModel):
    """Static definition of a room type."""

    model_config = ConfigDict(frozen=True)

    id: str
    display_name: str
    default_area_share_percent: float = Field(ge=0, le=100)
    categories: tuple[str, ...]
    default_count: int = 1
    is_upgrade: bool = False
    upgrade_description: str | None = None


ROOM_TEMPLATES: list[RoomTemplate] = [
    # --- Core rooms ---
    RoomTemplate(
        id="kitchen",
        display_name="Kitchen",
        default_area_share_percent=10.0,
        categories=(
            "cabinets", "countertops", "backsplash", "appliances", "flooring",
            "lighting", "hardware", "plumbing", "fixtures", "tile", "paint",
            "trim", "baseboard", "doors", "windows", "ceiling", "electrical",
            "drywall",
        ),
    ),
    RoomTemplate(
        id="master_bedroom",
        display_name="Master Bedroom",
        default_area_share_percent=12.0,
        categories=(
            "flooring", "lighting", "paint", "closets", "ceiling", "trim",
            "baseboard", "doors", "windows", "hardware", "electrical",
            "drywall", "smart_home", "hvac",
        ),
    ),
    RoomTemplate(
        id="master_bath",
        display_name="Master Bath",
        default_area_share_percent=5.0,
        categories=(
            "plumbing", "fixtures", "tile", "flooring", "lighting", "hardware",
            "toilets", "shower_enclosure", "vanity", "paint", "trim",
            "baseboard", "doors", "ceiling", "electrical", "windows",
        ),
    ),
    RoomTemplate(
        id="guest_bedroom",
        display_name="Guest Bedroom",
        default_area_share_percent=8.0,
        categories=(
            "flooring", "lighting", "paint", "closets", "doors", "trim",
            "baseboard", "windows", "hardware", "ceiling", "electrical",
            "drywall",
        ),
        default_count=3,
    ),
    RoomTemplate(
        id="guest_bath",
        display_name="Guest Bath",
        default_area_share_percent=2.0,
        categories=(
            "plumbing", "fixtures", "tile", "flooring", "hardware", "toilets",
            "shower_enclosure", "vanity", "paint", "trim", "baseboard",
            "doors", "lighting",
        ),
        default_count=2,
    ),
    RoomTemplate(
        id="great_room",
        display_name="Great Room",
        default_area_share_percent=18.0,
        categories=(
            "flooring", "lighting", "windows", "paint", "fireplace", "ceiling",
            "trim", "baseboard", "doors", "hardware", "electrical", "drywall",
            "insulation", "smart_home", "hvac",
        ),
    ),
    RoomTemplate(
        id="dining_room",
        display_name="Dining Room",
        default_area_share_percent=6.0,
        categories=(
            "flooring", "lighting", "paint", "ceiling", "trim", "baseboard",
            "windows", "doors", "hardware", "electrical", "drywall",
        ),
    ),
    RoomTemplate(
        id="laundry",
        display_name="Laundry",
        default_area_share_percent=3.0,
        categories=(
            "cabinets", "countertops", "plumbing", "flooring", "lighting",
            "tile", "doors", "hardware", "electrical", "baseboard",
        ),
    ),
    RoomTemplate(
        id="garage",
        display_name="Garage",
        default_area_share_percent=10.0,
        categories=(
            "flooring", "paint", "garage_door", "lighting", "electrical",
            "doors", "drywall", "smart_home",
        ),
    ),
    RoomTemplate(
        id="exterior",
        display_name="Exterior & Structure",
        default_area_share_percent=8.0,
        categories=(
            "roofing", "windows", "siding", "front_door", "driveway",
            "landscaping", "smart_home", "exterior_paint", "structural_framing",
            "foundation", "insulation", "electrical", "hvac", "outdoor_lighting",
        ),
    ),
    # --- Upgrade rooms ---
    RoomTemplate(
        id="pool_bath",
        display_name="Pool Bath",
        default_area_share_percent=2.0,
        categories=(
            "plumbing", "fixtures", "tile", "flooring", "hardware", "toilets",
            "shower_enclosure", "vanity", "paint", "lighting", "doors",
        ),
        is_upgrade=True,
        upgrade_description="Dedicated bathroom for the pool area",
    ),
    RoomTemplate(
        id="media_room",
        display_name="Media Room",
        default_area_share_percent=6.0,
        categories=(
            "flooring", "lighting", "paint", "ceiling", "trim", "baseboard",
            "doors", "windows", "hardware", "electrical", "drywall",
            "smart_home",
        ),
        is_upgrade=True,
        upgrade_description="Home theater & entertainment space",
    ),
    RoomTemplate(
        id="wine_cellar",
        display_name="Wine Cellar",
        default_area_share_percent=2.0,
        categories=(
            "flooring", "lighting", "paint", "doors", "ceiling", "trim",
            "baseboard", "hardware", "electrical", "hvac",
        ),
        is_upgrade=True,
        upgrade_description="Climate-controlled wine storage",
    ),
    RoomTemplate(
        id="spa_room",
        display_name="Spa / Wellness",
        default_area_share_percent=4.0,
        categories=(
            "plumbing", "fixtures", "tile", "flooring", "lighting", "hardware",
            "paint", "ceiling", "doors", "electrical", "hvac", "smart_home",
        ),
        is_upgrade=True,
        upgrade_description="Steam room, sauna, or wellness suite",
    ),
    RoomTemplate(
        id="home_gym",
        display_name="Home Gym",
        default_area_share_percent=5.0,
        categories=(
            "flooring", "lighting", "paint", "ceiling", "doors", "windows",
            "electrical", "hvac", "drywall", "smart_home",
        ),
        is_upgrade=True,
        upgrade_description="Dedicated fitness & exercise room",
    ),
    RoomTemplate(
        id="outdoor_kitchen",
        display_name="Outdoor Kitchen",
        default_area_share_percent=3.0,
        categories=(
            "cabinets", "countertops", "appliances", "plumbing", "flooring",
            "lighting", "electrical", "outdoor_lighting", "hardware",
            "landscaping",
        ),
        is_upgrade=True,
        upgrade_description="Full outdoor cooking & dining area",
    ),
    RoomTemplate(
        id="pool",
        display_name="Swimming Pool",
        default_area_share_percent=5.0,
        categories=(
            "pool", "landscaping", "lighting", "outdoor_lighting", "electrical",
            "plumbing",
        ),
        is_upgrade=True,
        upgrade_description="In-ground pool with equipment",
    ),
]


def templates_by_id(
    templates: list[RoomTemplate] | None = None,
) -> dict[str, RoomTemplate]:
    """Index templates by id, defaulting to the built-in catalog."""
    return {t.id: t for t in (templates if templates is not None else ROOM_TEMPLATES)}


def room_categories() -> list[str]:
    """Every category referenced by the built-in catalog, first-seen order."""
    seen: dict[str, None] = {}
    for template in ROOM_TEMPLATES:
        for category in template.categories:
            seen.setdefault(category, None)
    return list(seen)
