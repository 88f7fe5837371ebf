"""Upsell suggestions priced by re-running the whole-house estimator.

Each candidate is a single change to the homeowner's input. The changed
input is a fresh copy; the estimator prices it from scratch and the
suggestion's cost is the difference in out-the-door midpoints. Candidates
are offered in a fixed relevance order, not by price.
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from dataclasses import dataclass
from enum import Enum
from typing import TYPE_CHECKING, Any

from homecost.exceptions import HomeCostError, UpsellEvaluationError
from homecost.financing import monthly_impact
from homecost.models.derived import UpsellSuggestion
from homecost.models.enums import (
    FINISH_TIER_LABELS,
    PoolType,
    SmartHomeLevel,
    next_tier,
)

if TYPE_CHECKING:
    from homecost.engine import EstimationEngine
    from homecost.models.estimate import EstimateResult
    from homecost.models.house import WholeHouseInput

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class UpsellCandidate:
    """A proposed single change, offered when ``build`` returns an update."""

    id: str
    title: str
    description: str
    build: Callable[[WholeHouseInput], dict[str, Any] | None]


def _finish_upgrade(house: WholeHouseInput) -> dict[str, Any] | None:
    upgraded = next_tier(house.finish_level)
    return {"finish_level": upgraded} if upgraded is not None else None


def _finish_upgrade_candidate(house: WholeHouseInput) -> UpsellCandidate:
    upgraded = next_tier(house.finish_level)
    label = FINISH_TIER_LABELS[upgraded] if upgraded is not None else ""
    return UpsellCandidate(
        "finish_upgrade",
        f"Upgrade to {label}",
        f"Elevate all finishes to {label.lower()} grade for a more refined result.",
        _finish_upgrade,
    )


FEATURE_CANDIDATES: list[UpsellCandidate] = [
    UpsellCandidate(
        "add_pool",
        "Add a Pool",
        "A gunite pool with custom finishes, the centerpiece of Florida outdoor living.",
        lambda h: {"pool": PoolType.STANDARD} if h.pool == PoolType.NONE else None,
    ),
    UpsellCandidate(
        "outdoor_kitchen",
        "Outdoor Kitchen",
        "Built-in grill, countertops and refrigeration for entertaining outdoors.",
        lambda h: None if h.outdoor_kitchen else {"outdoor_kitchen": True},
    ),
    UpsellCandidate(
        "full_smart_home",
        "Full Smart Home",
        "Automated lighting, climate, security and whole-home audio.",
        lambda h: (
            {"smart_home": SmartHomeLevel.FULL}
            if h.smart_home in (SmartHomeLevel.NONE, SmartHomeLevel.BASIC)
            else None
        ),
    ),
    UpsellCandidate(
        "generator",
        "Whole-Home Generator",
        "Automatic standby power through storm season.",
        lambda h: None if h.generator else {"generator": True},
    ),
    UpsellCandidate(
        "screened_porch",
        "Screened Lanai",
        "A screened porch for bug-free evenings outdoors.",
        lambda h: None if h.screened_porch else {"screened_porch": True},
    ),
]


def candidates_for(house: WholeHouseInput) -> list[UpsellCandidate]:
    """All candidates in relevance order; the finish upgrade comes first."""
    return [_finish_upgrade_candidate(house), *FEATURE_CANDIDATES]


def _price_change(
    engine: EstimationEngine,
    house: WholeHouseInput,
    update: dict[str, Any],
    baseline: float,
) -> float:
    try:
        modified = engine.estimate_house(house.model_copy(update=update))
    except (HomeCostError, ValueError) as exc:
        msg = f"Could not price change {update}: {exc}"
        raise UpsellEvaluationError(msg) from exc
    return modified.customer_total.midpoint - baseline


def generate_upsells(
    engine: EstimationEngine,
    house: WholeHouseInput,
    result: EstimateResult | None = None,
    limit: int | None = None,
) -> list[UpsellSuggestion]:
    """Suggest up to *limit* single-change upgrades with positive cost.

    Args:
        engine: Engine used to price each modified input.
        house: The homeowner's current input; never modified.
        result: The estimate of *house*, if already computed.
        limit: Maximum suggestions; defaults to ``settings.max_upsells``.
    """
    if limit is None:
        limit = engine.settings.max_upsells
    if result is None:
        result = engine.estimate_house(house)
    baseline = result.customer_total.midpoint

    suggestions: list[UpsellSuggestion] = []
    for candidate in candidates_for(house):
        if len(suggestions) >= limit:
            break
        update = candidate.build(house)
        if update is None:
            continue

        try:
            delta = _price_change(engine, house, update, baseline)
        except UpsellEvaluationError:
            logger.warning("Upsell '%s' skipped", candidate.id, exc_info=True)
            continue
        if delta <= 0:
            continue

        suggestions.append(
            UpsellSuggestion(
                id=candidate.id,
                title=candidate.title,
                description=candidate.description,
                changes={
                    k: v.value if isinstance(v, Enum) else v for k, v in update.items()
                },
                additional_cost=delta,
                monthly_impact=monthly_impact(delta, engine.settings),
            )
        )
    return suggestions
