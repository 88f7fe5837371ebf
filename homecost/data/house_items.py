"""Line-item catalog for the whole-house estimator.

Each item names its division, unit basis, how its quantity is taken off
the house description, and which selection decides its finish tier.
Unit prices are not defined here: they come from the injected cost
configuration table, keyed by the item id.
"""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass
from typing import TYPE_CHECKING

from homecost import quantities as q
from homecost.models.enums import (
    CLADDING_TIERS,
    COUNTERTOP_TIERS,
    FLOORING_TIERS,
    ROOF_TIERS,
    WINDOW_TIERS,
    CostUnit,
    Division,
    ElevatorType,
    FinishTier,
    FireplaceType,
    PoolType,
    SmartHomeLevel,
)
from homecost.numeric import round_half_up

if TYPE_CHECKING:
    from homecost.models.house import WholeHouseInput


def _global_tier(house: WholeHouseInput) -> FinishTier:
    return house.finish_level


def _kitchen_tier(house: WholeHouseInput) -> FinishTier:
    return house.effective_kitchen_tier


def _bath_tier(house: WholeHouseInput) -> FinishTier:
    return house.effective_bathroom_tier


def _flag(selected: bool) -> float:
    return 1.0 if selected else 0.0


@dataclass(frozen=True)
class HouseItem:
    """A priced line of the whole-house estimate."""

    id: str
    display_name: str
    division: Division
    unit: CostUnit
    quantity: Callable[[WholeHouseInput], float]
    tier: Callable[[WholeHouseInput], FinishTier] = _global_tier
    tags: tuple[str, ...] = ()


HOUSE_ITEMS: list[HouseItem] = [
    # --- Site work ---
    HouseItem(
        "site_prep", "Site Preparation & Clearing", Division.SITEWORK, CostUnit.SQFT,
        quantity=lambda h: q.footprint(h) * 1.5,
        tags=("site",),
    ),
    HouseItem(
        "driveway", "Driveway & Walkways", Division.SITEWORK, CostUnit.SQFT,
        quantity=q.driveway_sqft,
        tags=("site", "hardscape"),
    ),
    HouseItem(
        "landscaping", "Landscaping & Irrigation", Division.SITEWORK, CostUnit.SQFT,
        quantity=lambda h: q.footprint(h) * 2,
        tags=("site", "landscape"),
    ),
    HouseItem(
        "outdoor_lighting", "Outdoor & Landscape Lighting", Division.SITEWORK,
        CostUnit.SQFT,
        quantity=q.footprint,
        tags=("site", "lighting"),
    ),
    # --- Foundation ---
    HouseItem(
        "foundation", "Foundation", Division.FOUNDATION, CostUnit.SQFT,
        quantity=q.footprint,
        tags=("structure",),
    ),
    HouseItem(
        "elevated_foundation", "Elevated Construction / Pilings", Division.FOUNDATION,
        CostUnit.SQFT,
        quantity=lambda h: q.footprint(h) if h.elevated_construction else 0.0,
        tags=("structure", "coastal"),
    ),
    # --- Framing & structure ---
    HouseItem(
        "framing", "Structural Framing", Division.FRAMING, CostUnit.SQFT,
        quantity=lambda h: h.sqft,
        tags=("structure",),
    ),
    HouseItem(
        "roof_framing", "Roof Framing & Trusses", Division.FRAMING, CostUnit.SQFT,
        quantity=q.roof_area,
        tags=("structure", "roof"),
    ),
    HouseItem(
        "staircase", "Staircase", Division.FRAMING, CostUnit.EACH,
        quantity=lambda h: max(0, h.stories - 1),
        tags=("structure", "interior"),
    ),
    # --- Roofing ---
    HouseItem(
        "roofing", "Roofing Material & Install", Division.ROOFING, CostUnit.SQFT,
        quantity=q.roof_area,
        tier=lambda h: ROOF_TIERS[h.roof_type],
        tags=("exterior", "roof"),
    ),
    HouseItem(
        "insulation", "Insulation", Division.ROOFING, CostUnit.SQFT,
        quantity=lambda h: h.sqft,
        tags=("envelope",),
    ),
    HouseItem(
        "waterproofing", "Waterproofing & Moisture Barrier", Division.ROOFING,
        CostUnit.SQFT,
        quantity=lambda h: h.sqft,
        tags=("envelope",),
    ),
    # --- Exterior envelope ---
    HouseItem(
        "exterior_cladding", "Exterior Cladding / Siding", Division.EXTERIOR,
        CostUnit.SQFT,
        quantity=q.wall_area,
        tier=lambda h: CLADDING_TIERS[h.cladding_type],
        tags=("exterior",),
    ),
    HouseItem(
        "exterior_paint", "Exterior Paint / Finish", Division.EXTERIOR, CostUnit.SQFT,
        quantity=q.wall_area,
        tags=("exterior", "paint"),
    ),
    HouseItem(
        "soffit_fascia", "Soffit, Fascia & Gutters", Division.EXTERIOR, CostUnit.LF,
        quantity=q.perimeter,
        tags=("exterior",),
    ),
    # --- Doors & windows ---
    HouseItem(
        "windows", "Windows", Division.DOORS_WINDOWS, CostUnit.EACH,
        quantity=q.window_count,
        tier=lambda h: WINDOW_TIERS[h.window_grade],
        tags=("exterior", "window"),
    ),
    HouseItem(
        "exterior_doors", "Exterior Doors (Entry + Sliders)", Division.DOORS_WINDOWS,
        CostUnit.EACH,
        quantity=q.exterior_door_count,
        tags=("exterior", "door"),
    ),
    HouseItem(
        "interior_doors", "Interior Doors", Division.DOORS_WINDOWS, CostUnit.EACH,
        quantity=q.interior_door_count,
        tags=("interior", "door"),
    ),
    HouseItem(
        "garage_doors", "Garage Doors", Division.DOORS_WINDOWS, CostUnit.EACH,
        quantity=q.garage_door_count,
        tags=("exterior", "garage"),
    ),
    # --- Interior finishes ---
    HouseItem(
        "drywall", "Drywall & Interior Walls", Division.INTERIOR_FINISHES, CostUnit.SQFT,
        quantity=lambda h: h.sqft,
        tags=("interior", "walls"),
    ),
    HouseItem(
        "interior_paint", "Interior Paint", Division.INTERIOR_FINISHES, CostUnit.SQFT,
        quantity=lambda h: h.sqft,
        tags=("interior", "paint"),
    ),
    HouseItem(
        "flooring", "Flooring", Division.INTERIOR_FINISHES, CostUnit.SQFT,
        # remaining quarter is tile and garage
        quantity=lambda h: round_half_up(h.sqft * 0.75),
        tier=lambda h: FLOORING_TIERS[h.flooring_type],
        tags=("interior", "flooring"),
    ),
    HouseItem(
        "tile", "Tile (Bathrooms & Kitchen)", Division.INTERIOR_FINISHES, CostUnit.SQFT,
        quantity=lambda h: h.bathrooms * 60 + 40,
        tags=("interior", "tile"),
    ),
    HouseItem(
        "kitchen_countertops", "Kitchen Countertops", Division.INTERIOR_FINISHES,
        CostUnit.LF,
        quantity=q.kitchen_counter_lf,
        tier=lambda h: COUNTERTOP_TIERS[h.countertop_material],
        tags=("interior", "kitchen", "countertop"),
    ),
    HouseItem(
        "bath_countertops", "Bathroom Countertops", Division.INTERIOR_FINISHES,
        CostUnit.LF,
        quantity=q.bath_counter_lf,
        tier=_bath_tier,
        tags=("interior", "bath", "countertop"),
    ),
    HouseItem(
        "kitchen_cabinets", "Kitchen Cabinetry", Division.INTERIOR_FINISHES, CostUnit.LF,
        quantity=lambda h: q.kitchen_counter_lf(h) + 5,
        tier=_kitchen_tier,
        tags=("interior", "kitchen", "cabinets"),
    ),
    HouseItem(
        "bath_vanities", "Bathroom Vanities", Division.INTERIOR_FINISHES, CostUnit.EACH,
        quantity=lambda h: h.bathrooms,
        tier=_bath_tier,
        tags=("interior", "bath", "cabinets"),
    ),
    HouseItem(
        "trim_baseboard", "Trim, Baseboards & Crown Molding", Division.INTERIOR_FINISHES,
        CostUnit.SQFT,
        quantity=lambda h: h.sqft,
        tags=("interior", "trim"),
    ),
    HouseItem(
        "closets", "Closet Systems", Division.INTERIOR_FINISHES, CostUnit.EACH,
        quantity=lambda h: h.bedrooms + 2,
        tags=("interior", "closet"),
    ),
    HouseItem(
        "ceiling_treatments", "Ceiling Treatments", Division.INTERIOR_FINISHES,
        CostUnit.SQFT,
        quantity=lambda h: round_half_up(h.sqft * 0.4),
        tags=("interior", "ceiling"),
    ),
    HouseItem(
        "kitchen_appliances", "Kitchen Appliance Package", Division.INTERIOR_FINISHES,
        CostUnit.EACH,
        quantity=lambda h: 1,
        tier=_kitchen_tier,
        tags=("kitchen", "appliances"),
    ),
    HouseItem(
        "laundry_appliances", "Laundry Appliances", Division.INTERIOR_FINISHES,
        CostUnit.EACH,
        quantity=lambda h: 1,
        tags=("appliances",),
    ),
    HouseItem(
        "garage_interior", "Garage Interior (Floor Coating, Drywall)",
        Division.INTERIOR_FINISHES, CostUnit.SQFT,
        quantity=q.garage_sqft,
        tags=("garage",),
    ),
    # --- Mechanical ---
    HouseItem(
        "plumbing_rough", "Plumbing Rough-In", Division.MECHANICAL, CostUnit.SQFT,
        quantity=lambda h: h.sqft,
        tags=("mechanical", "plumbing"),
    ),
    HouseItem(
        "plumbing_fixtures", "Plumbing Fixtures (Faucets, Toilets, Showers)",
        Division.MECHANICAL, CostUnit.EACH,
        quantity=q.plumbing_fixture_count,
        tier=_bath_tier,
        tags=("mechanical", "plumbing", "fixtures"),
    ),
    HouseItem(
        "water_heater", "Water Heater System", Division.MECHANICAL, CostUnit.EACH,
        quantity=lambda h: 2 if h.sqft > 4000 else 1,
        tags=("mechanical", "plumbing"),
    ),
    HouseItem(
        "hvac", "HVAC System", Division.MECHANICAL, CostUnit.SQFT,
        quantity=lambda h: h.sqft,
        tags=("mechanical", "hvac"),
    ),
    # --- Electrical ---
    HouseItem(
        "electrical", "Electrical Rough-In & Panel", Division.ELECTRICAL, CostUnit.SQFT,
        quantity=lambda h: h.sqft,
        tags=("electrical",),
    ),
    HouseItem(
        "lighting_fixtures", "Lighting Fixtures", Division.ELECTRICAL, CostUnit.SQFT,
        quantity=lambda h: h.sqft,
        tags=("electrical", "lighting"),
    ),
    # --- Specialties: one item per optional feature ---
    HouseItem(
        "pool_standard", "Swimming Pool (Gunite)", Division.SPECIALTIES, CostUnit.FIXED,
        quantity=lambda h: _flag(h.pool == PoolType.STANDARD),
        tags=("specialty", "pool"),
    ),
    HouseItem(
        "pool_infinity", "Infinity Edge Pool", Division.SPECIALTIES, CostUnit.FIXED,
        quantity=lambda h: _flag(h.pool == PoolType.INFINITY),
        tags=("specialty", "pool"),
    ),
    HouseItem(
        "elevator_2stop", "Residential Elevator (2-Stop)", Division.SPECIALTIES,
        CostUnit.FIXED,
        quantity=lambda h: _flag(h.elevator == ElevatorType.TWO_STOP),
        tags=("specialty", "elevator"),
    ),
    HouseItem(
        "elevator_3stop", "Residential Elevator (3-Stop)", Division.SPECIALTIES,
        CostUnit.FIXED,
        quantity=lambda h: _flag(h.elevator == ElevatorType.THREE_STOP),
        tags=("specialty", "elevator"),
    ),
    HouseItem(
        "outdoor_kitchen", "Outdoor Kitchen", Division.SPECIALTIES, CostUnit.FIXED,
        quantity=lambda h: _flag(h.outdoor_kitchen),
        tags=("specialty", "outdoor"),
    ),
    HouseItem(
        "fireplace_linear", "Linear Gas Fireplace", Division.SPECIALTIES, CostUnit.FIXED,
        quantity=lambda h: _flag(h.fireplace == FireplaceType.LINEAR),
        tags=("specialty", "fireplace"),
    ),
    HouseItem(
        "fireplace_custom", "Custom Masonry Fireplace", Division.SPECIALTIES,
        CostUnit.FIXED,
        quantity=lambda h: _flag(h.fireplace == FireplaceType.CUSTOM),
        tags=("specialty", "fireplace"),
    ),
    HouseItem(
        "smart_home_basic", "Smart Home (Basic)", Division.SPECIALTIES, CostUnit.FIXED,
        quantity=lambda h: _flag(h.smart_home == SmartHomeLevel.BASIC),
        tags=("specialty", "smart_home"),
    ),
    HouseItem(
        "smart_home_standard", "Smart Home (Full System)", Division.SPECIALTIES,
        CostUnit.FIXED,
        quantity=lambda h: _flag(h.smart_home == SmartHomeLevel.STANDARD),
        tags=("specialty", "smart_home"),
    ),
    HouseItem(
        "smart_home_full", "Smart Home (Integrated Automation)", Division.SPECIALTIES,
        CostUnit.FIXED,
        quantity=lambda h: _flag(h.smart_home == SmartHomeLevel.FULL),
        tags=("specialty", "smart_home"),
    ),
    HouseItem(
        "generator", "Whole-Home Generator", Division.SPECIALTIES, CostUnit.FIXED,
        quantity=lambda h: _flag(h.generator),
        tags=("specialty", "generator"),
    ),
    HouseItem(
        "seawall", "Seawall / Bulkhead", Division.SPECIALTIES, CostUnit.FIXED,
        quantity=lambda h: _flag(h.seawall),
        tags=("specialty", "coastal"),
    ),
    HouseItem(
        "deck", "Deck / Patio", Division.SPECIALTIES, CostUnit.SQFT,
        quantity=lambda h: h.deck_sqft,
        tags=("specialty", "outdoor"),
    ),
    HouseItem(
        "screened_porch", "Screened Porch / Lanai", Division.SPECIALTIES, CostUnit.SQFT,
        # about a tenth of the conditioned area
        quantity=lambda h: round_half_up(h.sqft * 0.1) if h.screened_porch else 0.0,
        tags=("specialty", "outdoor"),
    ),
    # --- Overhead (permits are priced in the out-the-door pass) ---
    HouseItem(
        "architecture", "Architecture & Engineering", Division.OVERHEAD, CostUnit.SQFT,
        quantity=lambda h: h.sqft,
        tags=("overhead",),
    ),
    HouseItem(
        "survey_geotech", "Survey & Geotechnical", Division.OVERHEAD, CostUnit.FIXED,
        quantity=lambda h: 1,
        tags=("overhead",),
    ),
]


def house_item_ids() -> list[str]:
    return [item.id for item in HOUSE_ITEMS]
