"""Seed cost configuration for the homecost estimation engine.

Unit costs are 2025 Southwest Florida (Manatee/Sarasota) custom-home
figures, one range per finish tier. In production the table is fed from
the admin-editable estimator configuration store; this seed is what the
default engine and the tests price against.

Whole-house line items and room-wizard categories share one table.
Where a room category means the same work as a whole-house item
(``flooring``, ``tile``, ``windows``) it is priced by that item's entry.
"""

from __future__ import annotations

from homecost.data.cost_entries import CostConfigEntry
from homecost.data.house_items import HOUSE_ITEMS
from homecost.models.enums import FINISH_TIER_ORDER, CostUnit, FinishTier

# (low, high) per unit for builder, standard, premium, luxury.
HOUSE_ITEM_RATES: dict[str, tuple[tuple[float, float], ...]] = {
    # Site work
    "site_prep": ((5, 7), (8, 11), (12, 16), (18, 24)),
    "driveway": ((6, 8), (8, 12), (14, 20), (22, 32)),
    "landscaping": ((4, 6), (8, 12), (16, 24), (28, 40)),
    "outdoor_lighting": ((0.5, 1), (1, 2), (3, 5), (6, 10)),
    # Foundation
    "foundation": ((14, 18), (22, 30), (35, 48), (52, 72)),
    "elevated_foundation": ((25, 35), (35, 48), (48, 65), (65, 85)),
    # Framing
    "framing": ((30, 38), (48, 62), (68, 88), (95, 125)),
    "roof_framing": ((7, 10), (12, 16), (18, 24), (26, 36)),
    "staircase": ((3000, 5000), (6000, 10000), (12000, 20000), (25000, 45000)),
    # Roofing
    "roofing": ((6, 8), (10, 14), (18, 26), (30, 42)),
    "insulation": ((2.5, 3.5), (5, 7), (9, 13), (15, 22)),
    "waterproofing": ((1.5, 2), (2.5, 4), (5, 7), (8, 12)),
    # Exterior
    "exterior_cladding": ((10, 14), (18, 26), (32, 45), (52, 72)),
    "exterior_paint": ((2.5, 3.5), (4, 6), (7, 10), (12, 18)),
    "soffit_fascia": ((14, 18), (22, 30), (35, 48), (52, 72)),
    # Doors & windows
    "windows": ((500, 750), (1000, 1500), (1800, 2800), (3200, 5000)),
    "exterior_doors": ((1000, 1500), (2200, 3500), (4500, 7000), (8000, 15000)),
    "interior_doors": ((300, 450), (600, 900), (1000, 1600), (1800, 3000)),
    "garage_doors": ((1200, 1800), (2000, 3000), (3500, 5500), (6000, 10000)),
    # Interior finishes
    "drywall": ((7, 9), (12, 16), (19, 26), (30, 42)),
    "interior_paint": ((3.5, 5), (6, 9), (12, 18), (22, 32)),
    "flooring": ((6, 9), (14, 20), (24, 36), (40, 60)),
    "tile": ((10, 15), (20, 30), (35, 52), (58, 85)),
    "kitchen_countertops": ((50, 80), (120, 180), (220, 340), (400, 600)),
    "bath_countertops": ((35, 55), (65, 100), (120, 180), (220, 340)),
    "kitchen_cabinets": ((250, 380), (500, 750), (850, 1300), (1400, 2200)),
    "bath_vanities": ((800, 1200), (1800, 3000), (3500, 6000), (7000, 12000)),
    "trim_baseboard": ((4, 6), (8, 12), (15, 22), (26, 38)),
    "closets": ((600, 1000), (1800, 3000), (4000, 7000), (8000, 15000)),
    "ceiling_treatments": ((1, 2), (3, 5), (6, 10), (12, 20)),
    "kitchen_appliances": ((6000, 10000), (14000, 22000), (28000, 45000), (50000, 85000)),
    "laundry_appliances": ((1200, 1800), (2000, 3000), (3500, 5000), (5000, 8000)),
    "garage_interior": ((4, 6), (7, 10), (12, 18), (20, 30)),
    # Mechanical
    "plumbing_rough": ((9, 13), (16, 22), (26, 36), (40, 55)),
    "plumbing_fixtures": ((450, 700), (900, 1400), (1800, 2800), (3500, 6000)),
    "water_heater": ((1200, 1800), (2000, 3200), (3500, 5500), (6000, 10000)),
    "hvac": ((12, 16), (22, 30), (35, 48), (55, 75)),
    # Electrical
    "electrical": ((9, 13), (16, 22), (26, 36), (40, 55)),
    "lighting_fixtures": ((2.5, 4), (6, 9), (12, 18), (22, 35)),
    # Specialties
    "pool_standard": ((45000, 65000), (65000, 90000), (90000, 130000), (130000, 180000)),
    "pool_infinity": ((80000, 110000), (110000, 150000), (150000, 220000), (220000, 350000)),
    "elevator_2stop": ((30000, 40000), (40000, 55000), (55000, 75000), (75000, 110000)),
    "elevator_3stop": ((45000, 60000), (60000, 80000), (80000, 110000), (110000, 160000)),
    "outdoor_kitchen": ((15000, 25000), (25000, 40000), (40000, 70000), (70000, 120000)),
    "fireplace_linear": ((3000, 5000), (5000, 8000), (10000, 16000), (18000, 30000)),
    "fireplace_custom": ((8000, 12000), (12000, 18000), (20000, 35000), (40000, 65000)),
    "smart_home_basic": ((3000, 5000), (5000, 8000), (8000, 12000), (12000, 18000)),
    "smart_home_standard": ((8000, 12000), (12000, 20000), (22000, 35000), (35000, 55000)),
    "smart_home_full": ((18000, 25000), (28000, 40000), (45000, 70000), (75000, 120000)),
    "generator": ((8000, 12000), (12000, 18000), (18000, 28000), (28000, 45000)),
    "seawall": ((30000, 50000), (50000, 80000), (80000, 120000), (120000, 180000)),
    "deck": ((20, 30), (30, 45), (50, 75), (80, 120)),
    "screened_porch": ((25, 35), (40, 55), (60, 85), (90, 130)),
    # Overhead
    "architecture": ((4, 6), (8, 12), (16, 24), (28, 40)),
    "survey_geotech": ((3000, 5000), (5000, 8000), (8000, 12000), (12000, 18000)),
}

# Room-wizard categories with no whole-house counterpart: unit basis,
# display name and the standard-tier (low, high) per unit.
ROOM_CATEGORY_RATES: dict[str, tuple[CostUnit, str, float, float]] = {
    "appliances": (CostUnit.EACH, "Appliances", 8000, 14000),
    "backsplash": (CostUnit.SQFT, "Backsplash", 3, 6),
    "baseboard": (CostUnit.LF, "Baseboard", 6, 10),
    "cabinets": (CostUnit.LF, "Cabinetry", 250, 400),
    "ceiling": (CostUnit.SQFT, "Ceiling Treatment", 3, 5),
    "countertops": (CostUnit.LF, "Countertops", 60, 100),
    "doors": (CostUnit.EACH, "Interior Doors", 600, 900),
    "fireplace": (CostUnit.EACH, "Fireplace", 5000, 8000),
    "fixtures": (CostUnit.EACH, "Plumbing Fixtures", 900, 1400),
    "front_door": (CostUnit.EACH, "Front Entry Door", 2200, 3500),
    "garage_door": (CostUnit.EACH, "Garage Door", 2000, 3000),
    "hardware": (CostUnit.SQFT, "Hardware", 0.5, 1),
    "lighting": (CostUnit.SQFT, "Lighting", 6, 9),
    "paint": (CostUnit.SQFT, "Interior Paint", 6, 9),
    "plumbing": (CostUnit.SQFT, "Plumbing", 16, 22),
    "pool": (CostUnit.EACH, "Pool & Equipment", 65000, 90000),
    "shower_enclosure": (CostUnit.EACH, "Shower Enclosure", 1500, 3000),
    "siding": (CostUnit.SQFT, "Siding / Cladding", 18, 26),
    "smart_home": (CostUnit.SQFT, "Smart Home Wiring", 2, 4),
    "structural_framing": (CostUnit.SQFT, "Structural Framing", 48, 62),
    "toilets": (CostUnit.EACH, "Toilets", 400, 800),
    "trim": (CostUnit.LF, "Trim & Crown", 8, 14),
    "vanity": (CostUnit.EACH, "Vanity", 1800, 3000),
}

# Applied to the standard-tier room rates to derive the other tiers.
ROOM_TIER_MULTIPLIERS: dict[FinishTier, float] = {
    FinishTier.BUILDER: 0.6,
    FinishTier.STANDARD: 1.0,
    FinishTier.PREMIUM: 1.6,
    FinishTier.LUXURY: 2.6,
}


def _house_entries() -> list[CostConfigEntry]:
    entries: list[CostConfigEntry] = []
    for item in HOUSE_ITEMS:
        for tier, (low, high) in zip(
            FINISH_TIER_ORDER, HOUSE_ITEM_RATES[item.id], strict=True,
        ):
            entries.append(
                CostConfigEntry(
                    category=item.id,
                    finish_level=tier,
                    cost_per_unit_low=low,
                    cost_per_unit_high=high,
                    unit=item.unit,
                    display_name=item.display_name,
                )
            )
    return entries


def _room_entries() -> list[CostConfigEntry]:
    entries: list[CostConfigEntry] = []
    for category, (unit, display_name, low, high) in ROOM_CATEGORY_RATES.items():
        for tier in FINISH_TIER_ORDER:
            factor = ROOM_TIER_MULTIPLIERS[tier]
            entries.append(
                CostConfigEntry(
                    category=category,
                    finish_level=tier,
                    cost_per_unit_low=round(low * factor, 2),
                    cost_per_unit_high=round(high * factor, 2),
                    unit=unit,
                    display_name=display_name,
                )
            )
    return entries


SEED_COST_ENTRIES: list[CostConfigEntry] = _house_entries() + _room_entries()
