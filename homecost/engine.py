"""Core estimation engine for the homecost library.

The EstimationEngine prices a custom home in one of two modes:

1. **Room-based** (``estimate_rooms``): each selected room gets a share of
   the total conditioned area from its template; every category the
   homeowner picked a finish for is priced at that tier against the
   room's area, perimeter or a single unit, per the cost entry's unit.
2. **Whole-house** (``estimate_house``): the line-item catalog is taken
   off the house description (footprint, roof area, wall area, door and
   fixture counts), each item is priced at the tier its selection implies
   and regionalized by the location multiplier.

In both modes line items roll up into construction divisions, and the
division totals are the source of truth: the grand total is their sum in
division order. Whole-house estimates then get an out-the-door pass that
adds builder fee, sales tax on materials, permits and builder's risk
insurance, each computed off the base total and reported on its own line.

Missing pricing never aborts a calculation: the cost table falls back to
the standard tier, then to zero, and the result carries a warning and the
``confidence_degraded`` flag. Invalid structural input raises
InvalidInputError so no fabricated total is ever produced.
"""

from __future__ import annotations

import logging
import math
from dataclasses import dataclass, field
from typing import TYPE_CHECKING

from homecost.config import PricingSettings
from homecost.data.divisions import division_for_category
from homecost.data.house_items import HOUSE_ITEMS
from homecost.data.repository import CostConfigTable, CostTableProvider
from homecost.data.room_templates import ROOM_TEMPLATES, templates_by_id
from homecost.exceptions import InvalidInputError
from homecost.financing import monthly_payment
from homecost.models.enums import CostUnit, Division, FinishTier, WarningCode
from homecost.models.estimate import (
    ZERO,
    CostRange,
    EstimateResult,
    EstimateWarning,
    LineItem,
    OutTheDoor,
    RoomBreakdown,
    SurchargeLine,
)
from homecost.numeric import round_half_up

if TYPE_CHECKING:
    from collections.abc import Iterable, Sequence

    from homecost.data.repository import PriceResolution
    from homecost.data.room_templates import RoomTemplate
    from homecost.models.house import RoomSelection, WholeHouseInput

logger = logging.getLogger(__name__)

# Share sums within this many percentage points of 100 are not flagged.
_AREA_SHARE_TOLERANCE = 0.01


class EstimationEngine:
    """Prices homes against an injected cost configuration table.

    Args:
        costs: A CostConfigTable, or a CostTableProvider when the table is
            refreshed at runtime. The table is read once per calculation.
        settings: Surcharge rates, location multipliers and financing
            defaults. Defaults to ``PricingSettings()``.
        templates: Room template catalog for room-based estimates.
            Defaults to the built-in catalog.

    Example::

        from homecost.data.repository import CostConfigTable
        from homecost.data.seed import SEED_COST_ENTRIES

        engine = EstimationEngine(CostConfigTable(SEED_COST_ENTRIES))
        result = engine.estimate_house(WholeHouseInput(sqft=2500))
    """

    def __init__(
        self,
        costs: CostConfigTable | CostTableProvider,
        settings: PricingSettings | None = None,
        templates: list[RoomTemplate] | None = None,
    ) -> None:
        if isinstance(costs, CostConfigTable):
            costs = CostTableProvider(costs)
        self._provider = costs
        self._settings = settings or PricingSettings()
        self._templates = list(templates) if templates is not None else ROOM_TEMPLATES

    @property
    def settings(self) -> PricingSettings:
        return self._settings

    @property
    def provider(self) -> CostTableProvider:
        return self._provider

    # ------------------------------------------------------------------
    # Room-based mode
    # ------------------------------------------------------------------

    def estimate_rooms(
        self,
        selections: Sequence[RoomSelection],
        total_sqft: float,
        templates: list[RoomTemplate] | None = None,
    ) -> EstimateResult:
        """Price room-by-room finish selections.

        Args:
            selections: One entry per room instance, in display order.
            total_sqft: Total conditioned area the room shares apply to.
            templates: Overrides the engine's room template catalog.

        Raises:
            InvalidInputError: If *total_sqft* is not a positive number.
        """
        _require_positive("total_sqft", total_sqft)
        table = self._provider.current()
        catalog = templates_by_id(templates if templates is not None else self._templates)

        warnings: list[EstimateWarning] = []
        degraded = False
        share_total = 0.0
        breakdowns: list[RoomBreakdown] = []
        # one flat line per category and unit basis
        flat: dict[tuple[str, CostUnit], _CategoryTotal] = {}

        for selection in selections:
            template = catalog.get(selection.room_id)
            if template is None:
                warning = EstimateWarning(
                    code=WarningCode.ROOM_WITHOUT_TEMPLATE,
                    message=f"Unknown room '{selection.room_id}' skipped",
                    room_id=selection.room_id,
                )
                logger.warning(warning.message)
                warnings.append(warning)
                continue

            share_total += template.default_area_share_percent
            if selection.area_sqft is not None:
                area = selection.area_sqft
            else:
                area = round_half_up(
                    total_sqft * template.default_area_share_percent / 100
                )

            items: list[LineItem] = []
            for category, tier in selection.category_selections.items():
                if category not in template.categories:
                    warning = EstimateWarning(
                        code=WarningCode.CATEGORY_NOT_IN_TEMPLATE,
                        message=(
                            f"Category '{category}' is not offered in "
                            f"'{template.id}'; selection ignored"
                        ),
                        category=category,
                        room_id=selection.room_id,
                    )
                    logger.warning(warning.message)
                    warnings.append(warning)
                    continue

                resolution = table.resolve(category, tier)
                if resolution.warning is not None:
                    warnings.append(
                        resolution.warning.model_copy(
                            update={"room_id": selection.room_id},
                        )
                    )
                    degraded = True

                unit = resolution.unit or CostUnit.SQFT
                quantity = _room_quantity(unit, area)
                item = LineItem(
                    id=category,
                    display_name=resolution.display_name,
                    division=division_for_category(category),
                    quantity=quantity,
                    unit=unit,
                    finish_level=tier,
                    unit_cost=resolution.unit_cost,
                    total=resolution.unit_cost.scaled(quantity),
                    fallback_pricing=resolution.warning is not None,
                )
                items.append(item)

                flat.setdefault(
                    (category, unit),
                    _CategoryTotal(item.display_name, item.division, unit),
                ).add(item)

            breakdowns.append(
                RoomBreakdown(
                    room_id=selection.room_id,
                    name=selection.name or template.display_name,
                    area_sqft=area,
                    items=tuple(items),
                    total=_sum_ranges(item.total for item in items),
                )
            )

        if selections and abs(share_total - 100) > _AREA_SHARE_TOLERANCE:
            warning = EstimateWarning(
                code=WarningCode.AREA_SHARE_MISMATCH,
                message=(
                    f"Selected rooms cover {share_total:g}% of the home "
                    "instead of 100%"
                ),
            )
            logger.warning(warning.message)
            warnings.append(warning)

        line_items = tuple(acc.line_item(category) for (category, _), acc in flat.items())
        division_totals = _division_totals(line_items)
        return EstimateResult(
            mode="rooms",
            total=_total_of(division_totals),
            line_items=line_items,
            division_totals=division_totals,
            room_breakdowns=tuple(breakdowns),
            gross_sqft=total_sqft,
            confidence_degraded=degraded,
            warnings=tuple(warnings),
        )

    # ------------------------------------------------------------------
    # Whole-house mode
    # ------------------------------------------------------------------

    def estimate_house(self, house: WholeHouseInput) -> EstimateResult:
        """Price a whole-house specification, including the out-the-door pass.

        Raises:
            InvalidInputError: If square footage is not positive or stories
                is below one.
        """
        _require_positive("sqft", house.sqft)
        if house.stories < 1:
            msg = f"stories must be at least 1, got {house.stories}"
            raise InvalidInputError(msg)

        table = self._provider.current()
        settings = self._settings
        warnings: list[EstimateWarning] = []
        degraded = False

        location = house.location or settings.default_location
        multiplier = settings.location_multipliers.get(location)
        if multiplier is None:
            warning = EstimateWarning(
                code=WarningCode.UNKNOWN_LOCATION,
                message=f"Unknown location '{location}'; no regional adjustment",
            )
            logger.warning(warning.message)
            warnings.append(warning)
            multiplier = 1.0
        location_name = settings.location_names.get(location, location)

        line_items: list[LineItem] = []
        for item in HOUSE_ITEMS:
            quantity = float(item.quantity(house))
            if quantity <= 0:
                continue

            tier = item.tier(house)
            resolution = table.resolve(item.id, tier)
            unit_cost = resolution.unit_cost
            item_warning = resolution.warning
            if resolution.unit is not None and resolution.unit != item.unit:
                item_warning = _unit_mismatch(item.id, item.unit, resolution)
                unit_cost = ZERO
            if item_warning is not None:
                warnings.append(item_warning)
                degraded = True

            unit_cost = unit_cost.scaled(multiplier)
            line_items.append(
                LineItem(
                    id=item.id,
                    display_name=item.display_name,
                    division=item.division,
                    quantity=quantity,
                    unit=item.unit,
                    finish_level=tier,
                    unit_cost=unit_cost,
                    total=unit_cost.scaled(quantity),
                    tags=item.tags,
                    fallback_pricing=item_warning is not None,
                )
            )

        division_totals = _division_totals(line_items)
        base = _total_of(division_totals)
        return EstimateResult(
            mode="house",
            total=base,
            line_items=tuple(line_items),
            division_totals=division_totals,
            out_the_door=self._out_the_door(base, house),
            location_multiplier=multiplier,
            location_name=location_name,
            gross_sqft=house.sqft,
            confidence_degraded=degraded,
            warnings=tuple(warnings),
        )

    def _out_the_door(self, base: CostRange, house: WholeHouseInput) -> OutTheDoor:
        """Apply the surcharges, each off the base, in fixed order."""
        settings = self._settings
        fee_rate = settings.builder_fee_rate(house.finish_level)
        schedule = [
            (
                "builder_fee",
                "Builder Fee",
                fee_rate,
                f"{fee_rate * 100:.0f}% at {house.finish_level.value} finish",
            ),
            (
                "sales_tax",
                "Sales Tax",
                settings.effective_tax_rate,
                f"{settings.tax_rate * 100:.0f}% on materials "
                f"({settings.material_ratio * 100:.0f}% of base)",
            ),
            (
                "permits",
                "Permits & Impact Fees",
                settings.permit_rate,
                f"{settings.permit_rate * 100:.1f}% of base",
            ),
            (
                "insurance",
                "Builder's Risk Insurance",
                settings.insurance_rate,
                f"{settings.insurance_rate * 100:.1f}% of base",
            ),
        ]

        surcharges: list[SurchargeLine] = []
        low, high = base.low, base.high
        for surcharge_id, label, rate, explanation in schedule:
            amount = CostRange(low=base.low * rate, high=base.high * rate)
            surcharges.append(
                SurchargeLine(
                    id=surcharge_id,
                    display_name=label,
                    rate=rate,
                    amount=amount,
                    explanation=explanation,
                )
            )
            low += amount.low
            high += amount.high

        total = CostRange(low=low, high=high)
        rate_percent = settings.mortgage_rate_percent
        term = settings.mortgage_term_years
        return OutTheDoor(
            base=base,
            surcharges=tuple(surcharges),
            total=total,
            per_sqft=CostRange(low=low / house.sqft, high=high / house.sqft),
            monthly_payment=CostRange(
                low=monthly_payment(low, rate_percent, term),
                high=monthly_payment(high, rate_percent, term),
            ),
        )


def _require_positive(name: str, value: float | None) -> None:
    if value is None or not math.isfinite(value) or value <= 0:
        msg = f"{name} must be a positive number, got {value!r}"
        raise InvalidInputError(msg)


def _room_quantity(unit: CostUnit, area: float) -> float:
    """Quantity a room contributes for a category priced in *unit*."""
    if unit == CostUnit.SQFT:
        return area
    if unit == CostUnit.LF:
        # perimeter of a square room of that area
        return 4 * math.sqrt(area)
    return 1.0


def _unit_mismatch(
    item_id: str, expected: CostUnit, resolution: PriceResolution,
) -> EstimateWarning:
    warning = EstimateWarning(
        code=WarningCode.UNIT_MISMATCH,
        message=(
            f"Cost entry for '{item_id}' is priced per {resolution.unit}, "
            f"expected per {expected}; contributed zero"
        ),
        category=item_id,
    )
    logger.warning(warning.message)
    return warning


@dataclass
class _CategoryTotal:
    """Running total of one category across rooms."""

    display_name: str
    division: Division
    unit: CostUnit
    quantity: float = 0.0
    low: float = 0.0
    high: float = 0.0
    tiers: set[FinishTier] = field(default_factory=set)
    fallback: bool = False

    def add(self, item: LineItem) -> None:
        self.quantity += item.quantity
        self.low += item.total.low
        self.high += item.total.high
        if item.finish_level is not None:
            self.tiers.add(item.finish_level)
        self.fallback = self.fallback or item.fallback_pricing

    def line_item(self, category: str) -> LineItem:
        # blended unit cost; the tier is reported only when all rooms agree
        tier = next(iter(self.tiers)) if len(self.tiers) == 1 else None
        return LineItem(
            id=category,
            display_name=self.display_name,
            division=self.division,
            quantity=self.quantity,
            unit=self.unit,
            finish_level=tier,
            unit_cost=CostRange(
                low=self.low / self.quantity if self.quantity else 0.0,
                high=self.high / self.quantity if self.quantity else 0.0,
            ),
            total=CostRange(low=self.low, high=self.high),
            fallback_pricing=self.fallback,
        )


def _sum_ranges(ranges: Iterable[CostRange]) -> CostRange:
    low = 0.0
    high = 0.0
    for r in ranges:
        low += r.low
        high += r.high
    return CostRange(low=low, high=high)


def _division_totals(items: Sequence[LineItem]) -> dict[Division, CostRange]:
    """Roll line items into every division, in division order."""
    return {
        division: _sum_ranges(item.total for item in items if item.division == division)
        for division in Division
    }


def _total_of(division_totals: dict[Division, CostRange]) -> CostRange:
    ordered = [division_totals[d] for d in Division if d in division_totals]
    return CostRange(
        low=sum(r.low for r in ordered),
        high=sum(r.high for r in ordered),
    )
