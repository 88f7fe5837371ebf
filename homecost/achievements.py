"""Achievement badges unlocked by a homeowner's selections.

Badges are recomputed from the current input (and, for budget badges,
the current estimate) on every call; nothing is remembered between
calculations.
"""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass
from typing import TYPE_CHECKING

from homecost.config import PricingSettings
from homecost.models.derived import Achievement
from homecost.models.enums import (
    CountertopMaterial,
    ElevatorType,
    FinishTier,
    FireplaceType,
    PoolType,
    SmartHomeLevel,
    SolarOption,
    WindowGrade,
)

if TYPE_CHECKING:
    from homecost.models.estimate import EstimateResult
    from homecost.models.house import WholeHouseInput

_STORM_WINDOWS = (WindowGrade.HURRICANE, WindowGrade.FULL_WALL)
_TOP_TIERS = (FinishTier.PREMIUM, FinishTier.LUXURY)


@dataclass(frozen=True)
class _Context:
    house: WholeHouseInput
    result: EstimateResult | None
    settings: PricingSettings


@dataclass(frozen=True)
class AchievementRule:
    """A badge and the predicate that unlocks it."""

    id: str
    label: str
    icon: str
    description: str
    predicate: Callable[[_Context], bool]

    def to_achievement(self) -> Achievement:
        return Achievement(
            id=self.id, icon=self.icon, label=self.label, description=self.description,
        )


def _over_budget_threshold(ctx: _Context) -> bool:
    if ctx.result is None:
        return False
    return ctx.result.customer_total.midpoint >= ctx.settings.budget_badge_threshold


ACHIEVEMENT_RULES: list[AchievementRule] = [
    AchievementRule(
        "island_ready", "Island Ready", "🏝️",
        "Elevated construction with hurricane-grade windows, ready for waterfront living",
        lambda c: c.house.elevated_construction and c.house.window_grade in _STORM_WINDOWS,
    ),
    AchievementRule(
        "eco_warrior", "Eco Warrior", "🌿",
        "Solar power plus premium construction for a minimal carbon footprint",
        lambda c: (
            c.house.solar_panels != SolarOption.NONE
            and c.house.finish_level in _TOP_TIERS
        ),
    ),
    AchievementRule(
        "chefs_paradise", "Chef's Paradise", "👨‍🍳",
        "Premium kitchen with top-tier appliances and stone countertops",
        lambda c: (
            c.house.effective_kitchen_tier in _TOP_TIERS
            and c.house.countertop_material
            in (CountertopMaterial.QUARTZ, CountertopMaterial.MARBLE)
        ),
    ),
    AchievementRule(
        "resort_living", "Resort Living", "🌴",
        "Pool and outdoor kitchen: a permanent vacation at home",
        lambda c: c.house.pool != PoolType.NONE and c.house.outdoor_kitchen,
    ),
    AchievementRule(
        "smart_estate", "Smart Estate", "🤖",
        "Whole-home smart integration with automated everything",
        lambda c: c.house.smart_home in (SmartHomeLevel.STANDARD, SmartHomeLevel.FULL),
    ),
    AchievementRule(
        "hurricane_proof", "Hurricane Proof", "🛡️",
        "Impact-rated glazing and a standby generator: storm ready",
        lambda c: c.house.window_grade in _STORM_WINDOWS and c.house.generator,
    ),
    AchievementRule(
        "entertainer", "The Entertainer", "🎉",
        "Outdoor kitchen, fireplace and a generous deck",
        lambda c: (
            c.house.outdoor_kitchen
            and c.house.fireplace != FireplaceType.NONE
            and c.house.deck_sqft >= 200
        ),
    ),
    AchievementRule(
        "sky_high", "Sky High", "🏗️",
        "Multi-story home with elevator access",
        lambda c: c.house.stories >= 2 and c.house.elevator != ElevatorType.NONE,
    ),
    AchievementRule(
        "luxury_living", "Luxury Living", "✨",
        "Luxury finishes selected throughout",
        lambda c: c.house.finish_level == FinishTier.LUXURY,
    ),
    AchievementRule(
        "million_dollar_build", "Seven Figures", "💎",
        "Out-the-door estimate at or above the budget milestone",
        _over_budget_threshold,
    ),
]


def evaluate_achievements(
    house: WholeHouseInput,
    result: EstimateResult | None = None,
    settings: PricingSettings | None = None,
) -> list[Achievement]:
    """Return the badges whose predicate holds, in catalog order.

    Budget badges need *result*; without it they stay locked.
    """
    ctx = _Context(house=house, result=result, settings=settings or PricingSettings())
    return [rule.to_achievement() for rule in ACHIEVEMENT_RULES if rule.predicate(ctx)]


def all_achievements() -> list[Achievement]:
    """Every badge, for previews of what can be unlocked."""
    return [rule.to_achievement() for rule in ACHIEVEMENT_RULES]
