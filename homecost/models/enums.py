"""Enums for the homecost domain models.

These enums mirror the selections a homeowner makes in the estimator
wizard: finish tiers, exterior and interior material choices, and the
optional features priced as additive line items.
"""

from enum import StrEnum


class FinishTier(StrEnum):
    """Ordered quality grade applied per category."""

    BUILDER = "builder"
    STANDARD = "standard"
    PREMIUM = "premium"
    LUXURY = "luxury"


FINISH_TIER_ORDER: list[FinishTier] = [
    FinishTier.BUILDER,
    FinishTier.STANDARD,
    FinishTier.PREMIUM,
    FinishTier.LUXURY,
]

FINISH_TIER_LABELS: dict[FinishTier, str] = {
    FinishTier.BUILDER: "Builder Grade",
    FinishTier.STANDARD: "Standard",
    FinishTier.PREMIUM: "Premium",
    FinishTier.LUXURY: "Luxury",
}


def next_tier(tier: FinishTier) -> FinishTier | None:
    """Return the tier above *tier*, or None at the top of the scale."""
    position = FINISH_TIER_ORDER.index(tier)
    if position + 1 >= len(FINISH_TIER_ORDER):
        return None
    return FINISH_TIER_ORDER[position + 1]


class CostUnit(StrEnum):
    """Unit basis a cost entry is priced in."""

    SQFT = "sqft"
    LF = "lf"
    EACH = "each"
    FIXED = "fixed"


class Division(StrEnum):
    """Construction divisions used to decompose a total.

    Declaration order is the fixed reporting order.
    """

    SITEWORK = "sitework"
    FOUNDATION = "foundation"
    FRAMING = "framing"
    EXTERIOR = "exterior"
    ROOFING = "roofing"
    DOORS_WINDOWS = "doors_windows"
    INTERIOR_FINISHES = "interior_finishes"
    MECHANICAL = "mechanical"
    ELECTRICAL = "electrical"
    SPECIALTIES = "specialties"
    OVERHEAD = "overhead"


class ArchStyle(StrEnum):
    COASTAL = "coastal"
    MEDITERRANEAN = "mediterranean"
    MODERN = "modern"
    CRAFTSMAN = "craftsman"
    COLONIAL = "colonial"
    FARMHOUSE = "farmhouse"
    TROPICAL = "tropical"


class CladdingType(StrEnum):
    VINYL = "vinyl"
    FIBER_CEMENT = "fiber_cement"
    STUCCO = "stucco"
    STUCCO_STONE = "stucco_stone"
    NATURAL_STONE = "natural_stone"
    CEDAR_STONE = "cedar_stone"


class RoofType(StrEnum):
    SHINGLE_ARCH = "shingle_arch"
    SHINGLE_PREMIUM = "shingle_premium"
    METAL_STANDING = "metal_standing"
    CONCRETE_TILE = "concrete_tile"
    CLAY_TILE = "clay_tile"


class WindowGrade(StrEnum):
    STANDARD = "standard"
    IMPACT = "impact"
    HURRICANE = "hurricane"
    FULL_WALL = "full_wall"


class FlooringType(StrEnum):
    LVP = "lvp"
    ENGINEERED = "engineered"
    SOLID_HARDWOOD = "solid_hardwood"
    EUROPEAN_OAK = "european_oak"


class CountertopMaterial(StrEnum):
    LAMINATE = "laminate"
    GRANITE = "granite"
    QUARTZ = "quartz"
    MARBLE = "marble"


class AppliancePackage(StrEnum):
    BUILDER = "builder"
    MID = "mid"
    PRO = "pro"


class PoolType(StrEnum):
    NONE = "none"
    STANDARD = "standard"
    INFINITY = "infinity"


class ElevatorType(StrEnum):
    NONE = "none"
    TWO_STOP = "2stop"
    THREE_STOP = "3stop"


class FireplaceType(StrEnum):
    NONE = "none"
    LINEAR = "linear"
    CUSTOM = "custom"


class SmartHomeLevel(StrEnum):
    NONE = "none"
    BASIC = "basic"
    STANDARD = "standard"
    FULL = "full"


class SolarOption(StrEnum):
    NONE = "none"
    PARTIAL = "partial"
    FULL = "full"


class DrivewayType(StrEnum):
    CONCRETE = "concrete"
    PAVERS = "pavers"
    SHELL = "shell"


class LandscapingTier(StrEnum):
    SOD = "sod"
    BASIC = "basic"
    FULL = "full"


class FenceType(StrEnum):
    NONE = "none"
    VINYL = "vinyl"
    ALUMINUM = "aluminum"
    WOOD = "wood"


class SewerType(StrEnum):
    CITY = "city"
    SEPTIC = "septic"


class WaterSource(StrEnum):
    CITY = "city"
    WELL = "well"


class WarningCode(StrEnum):
    """Recoverable conditions surfaced on an estimate instead of raised."""

    MISSING_CONFIG_ENTRY = "missing_config_entry"
    FALLBACK_TO_STANDARD = "fallback_to_standard"
    ROOM_WITHOUT_TEMPLATE = "room_without_template"
    CATEGORY_NOT_IN_TEMPLATE = "category_not_in_template"
    AREA_SHARE_MISMATCH = "area_share_mismatch"
    UNKNOWN_LOCATION = "unknown_location"
    UNIT_MISMATCH = "unit_mismatch"


# Tier implied by each material selection. Line items driven by one of
# these selections are priced at the implied tier, not the global one.

CLADDING_TIERS: dict[CladdingType, FinishTier] = {
    CladdingType.VINYL: FinishTier.BUILDER,
    CladdingType.FIBER_CEMENT: FinishTier.STANDARD,
    CladdingType.STUCCO: FinishTier.STANDARD,
    CladdingType.STUCCO_STONE: FinishTier.PREMIUM,
    CladdingType.NATURAL_STONE: FinishTier.LUXURY,
    CladdingType.CEDAR_STONE: FinishTier.LUXURY,
}

ROOF_TIERS: dict[RoofType, FinishTier] = {
    RoofType.SHINGLE_ARCH: FinishTier.BUILDER,
    RoofType.SHINGLE_PREMIUM: FinishTier.STANDARD,
    RoofType.METAL_STANDING: FinishTier.PREMIUM,
    RoofType.CONCRETE_TILE: FinishTier.PREMIUM,
    RoofType.CLAY_TILE: FinishTier.LUXURY,
}

WINDOW_TIERS: dict[WindowGrade, FinishTier] = {
    WindowGrade.STANDARD: FinishTier.BUILDER,
    WindowGrade.IMPACT: FinishTier.STANDARD,
    WindowGrade.HURRICANE: FinishTier.PREMIUM,
    WindowGrade.FULL_WALL: FinishTier.LUXURY,
}

FLOORING_TIERS: dict[FlooringType, FinishTier] = {
    FlooringType.LVP: FinishTier.BUILDER,
    FlooringType.ENGINEERED: FinishTier.STANDARD,
    FlooringType.SOLID_HARDWOOD: FinishTier.PREMIUM,
    FlooringType.EUROPEAN_OAK: FinishTier.LUXURY,
}

COUNTERTOP_TIERS: dict[CountertopMaterial, FinishTier] = {
    CountertopMaterial.LAMINATE: FinishTier.BUILDER,
    CountertopMaterial.GRANITE: FinishTier.STANDARD,
    CountertopMaterial.QUARTZ: FinishTier.PREMIUM,
    CountertopMaterial.MARBLE: FinishTier.LUXURY,
}
