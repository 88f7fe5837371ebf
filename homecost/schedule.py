"""Construction schedule estimator.

Twelve phases in fixed build order. Each phase has a base duration that
grows with square footage above 2,000 SF and with the finish tier;
multi-story homes, elevated or flood-zone foundations and 12-ft ceilings
add time to the phases they affect. The specialty phase is the sum of the
selected features' install times and is zero for a home without any.
Zero-duration phases stay in the output so phases can be indexed
positionally.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING

from homecost.exceptions import InvalidInputError
from homecost.models.derived import SchedulePhase, ScheduleResult
from homecost.models.enums import (
    ElevatorType,
    FinishTier,
    PoolType,
    SewerType,
    SmartHomeLevel,
    SolarOption,
    WaterSource,
)
from homecost.numeric import round_half_up, round_to_half

if TYPE_CHECKING:
    from homecost.models.house import WholeHouseInput

WEEKS_PER_MONTH = 4.33
BASELINE_SQFT = 2000

_MULTI_STORY_PHASES = frozenset({"framing", "mep_rough", "insulation_drywall"})
_TALL_CEILING_PHASES = frozenset({"framing", "insulation_drywall", "interior_finishes"})
_WEEKS_PER_EXTRA_STORY = 1.5
_ELEVATED_FOUNDATION_WEEKS = 3.0
_TALL_CEILING_WEEKS = 0.5


def _finish(builder: float, standard: float, premium: float, luxury: float) -> dict:
    return {
        FinishTier.BUILDER: builder,
        FinishTier.STANDARD: standard,
        FinishTier.PREMIUM: premium,
        FinishTier.LUXURY: luxury,
    }


@dataclass(frozen=True)
class PhaseTemplate:
    """Duration rule for one construction phase."""

    id: str
    name: str
    base_weeks: float
    # extra weeks per 1,000 SF above the baseline
    size_scale: float
    finish_scale: dict[FinishTier, float] = field(
        default_factory=lambda: _finish(0, 0, 0, 0),
    )
    description: str = ""


PHASE_TEMPLATES: list[PhaseTemplate] = [
    PhaseTemplate(
        "permitting", "Permitting & Approvals", 4, 0, _finish(0, 0, 1, 2),
        "Building permits, HOA approvals, utility coordination",
    ),
    PhaseTemplate(
        "site_prep", "Site Preparation", 2, 0.3, _finish(0, 0, 0.5, 1),
        "Clearing, grading, erosion control, temporary utilities",
    ),
    PhaseTemplate(
        "foundation", "Foundation", 3, 0.5, _finish(0, 0, 1, 2),
        "Footings, slab or pilings, waterproofing, backfill",
    ),
    PhaseTemplate(
        "framing", "Framing & Structure", 4, 0.8, _finish(0, 0, 1, 2),
        "Wall framing, roof trusses, sheathing, window rough openings",
    ),
    PhaseTemplate(
        "roofing", "Roofing & Dry-In", 2, 0.3, _finish(0, 0, 0.5, 1),
        "Underlayment, roofing material, flashing, dry-in inspection",
    ),
    PhaseTemplate(
        "mep_rough", "MEP Rough-In", 3, 0.5, _finish(0, 0.5, 1, 2),
        "Plumbing, HVAC ductwork, electrical wiring, low-voltage",
    ),
    PhaseTemplate(
        "exterior", "Exterior Finishes", 3, 0.5, _finish(0, 0.5, 1, 2),
        "Siding or stucco, windows, exterior doors, paint",
    ),
    PhaseTemplate(
        "insulation_drywall", "Insulation & Drywall", 3, 0.5, _finish(0, 0, 0.5, 1),
        "Insulation, drywall hang, tape, mud and texture",
    ),
    PhaseTemplate(
        "interior_finishes", "Interior Finishes", 5, 1.0, _finish(0, 1, 2, 4),
        "Cabinets, countertops, tile, flooring, trim, paint, closets",
    ),
    PhaseTemplate(
        "mep_trim", "MEP Trim & Fixtures", 2, 0.3, _finish(0, 0, 0.5, 1),
        "Fixture install, panel termination, HVAC startup, appliances",
    ),
    PhaseTemplate(
        "specialty", "Specialty Features", 0, 0,
        description="Pool, elevator, outdoor kitchen, smart home integration",
    ),
    PhaseTemplate(
        "final", "Final Inspections & Punch List", 2, 0.3, _finish(0, 0.5, 1, 2),
        "CO inspection, punch list, final clean, landscaping, walkthrough",
    ),
]

PHASE_IDS: tuple[str, ...] = tuple(t.id for t in PHASE_TEMPLATES)


def specialty_weeks(house: WholeHouseInput) -> float:
    """Install time of the selected optional features."""
    weeks = 0.0
    if house.pool != PoolType.NONE:
        weeks += 10 if house.pool == PoolType.INFINITY else 6
    if house.elevator != ElevatorType.NONE:
        weeks += 4
    if house.outdoor_kitchen:
        weeks += 2
    if house.seawall:
        weeks += 4
    if house.smart_home == SmartHomeLevel.FULL:
        weeks += 2
    elif house.smart_home == SmartHomeLevel.STANDARD:
        weeks += 1
    if house.solar_panels != SolarOption.NONE:
        weeks += 2 if house.solar_panels == SolarOption.FULL else 1
    if house.sewer_type == SewerType.SEPTIC:
        weeks += 1
    if house.water_source == WaterSource.WELL:
        weeks += 1
    return weeks


def _phase_weeks(template: PhaseTemplate, house: WholeHouseInput) -> float:
    if template.id == "specialty":
        return round_to_half(specialty_weeks(house))

    extra_thousands = max(0.0, (house.sqft - BASELINE_SQFT) / 1000)
    weeks = template.base_weeks
    weeks += template.size_scale * extra_thousands
    weeks += template.finish_scale.get(house.finish_level, 0)

    if house.stories > 1 and template.id in _MULTI_STORY_PHASES:
        weeks += (house.stories - 1) * _WEEKS_PER_EXTRA_STORY
    if template.id == "foundation" and (house.elevated_construction or house.flood_zone):
        weeks += _ELEVATED_FOUNDATION_WEEKS
    if house.ceiling_height_ft == 12 and template.id in _TALL_CEILING_PHASES:
        weeks += _TALL_CEILING_WEEKS

    return round_to_half(weeks)


def calculate_schedule(house: WholeHouseInput) -> ScheduleResult:
    """Build the phase-by-phase schedule for a whole-house specification.

    Raises:
        InvalidInputError: If square footage is not positive or stories is
            below one.
    """
    if not house.sqft > 0 or house.stories < 1:
        msg = (
            f"Cannot schedule a home with sqft={house.sqft!r} "
            f"and stories={house.stories!r}"
        )
        raise InvalidInputError(msg)

    phases = tuple(
        SchedulePhase(
            id=template.id,
            name=template.name,
            duration_weeks=_phase_weeks(template, house),
            description=template.description,
        )
        for template in PHASE_TEMPLATES
    )
    total_weeks = sum(p.duration_weeks for p in phases)
    return ScheduleResult(
        phases=phases,
        total_weeks=total_weeks,
        total_months=round_half_up(total_weeks / WEEKS_PER_MONTH, 1),
    )
