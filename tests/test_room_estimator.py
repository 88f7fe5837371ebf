"""Tests for the room-based estimator."""

from __future__ import annotations

import math

import pytest

from homecost.config import PricingSettings
from homecost.data.cost_entries import CostConfigEntry
from homecost.data.repository import CostConfigTable
from homecost.data.room_templates import ROOM_TEMPLATES, RoomTemplate
from homecost.data.seed import SEED_COST_ENTRIES
from homecost.engine import EstimationEngine
from homecost.exceptions import InvalidInputError
from homecost.models.enums import (
    FINISH_TIER_ORDER,
    CostUnit,
    Division,
    FinishTier,
    WarningCode,
)
from homecost.models.estimate import CostRange, EstimateResult
from homecost.models.house import RoomSelection

# ---------------------------------------------------------------------------
# Helper builders
# ---------------------------------------------------------------------------


def _entry(
    category: str, tier: FinishTier, low: float, high: float, unit: CostUnit,
) -> CostConfigEntry:
    return CostConfigEntry(
        category=category,
        finish_level=tier,
        cost_per_unit_low=low,
        cost_per_unit_high=high,
        unit=unit,
    )


_TEMPLATES = [
    RoomTemplate(
        id="kitchen",
        display_name="Kitchen",
        default_area_share_percent=40,
        categories=("flooring", "cabinets", "appliances", "backsplash"),
    ),
    RoomTemplate(
        id="bedroom",
        display_name="Bedroom",
        default_area_share_percent=60,
        categories=("flooring", "paint"),
    ),
]


def _small_table() -> CostConfigTable:
    return CostConfigTable(
        [
            _entry("flooring", FinishTier.BUILDER, 5, 10, CostUnit.SQFT),
            _entry("flooring", FinishTier.STANDARD, 10, 20, CostUnit.SQFT),
            _entry("flooring", FinishTier.PREMIUM, 20, 30, CostUnit.SQFT),
            _entry("flooring", FinishTier.LUXURY, 30, 50, CostUnit.SQFT),
            _entry("cabinets", FinishTier.STANDARD, 100, 200, CostUnit.LF),
            _entry("appliances", FinishTier.STANDARD, 5000, 8000, CostUnit.EACH),
            _entry("paint", FinishTier.STANDARD, 2, 3, CostUnit.SQFT),
        ]
    )


def _default_selections(tier: FinishTier = FinishTier.STANDARD) -> list[RoomSelection]:
    """Every core room with every offered category at *tier*."""
    return [
        RoomSelection(
            room_id=template.id,
            category_selections={category: tier for category in template.categories},
        )
        for template in ROOM_TEMPLATES
        if not template.is_upgrade
    ]


# ---------------------------------------------------------------------------
# Fixtures
# ---------------------------------------------------------------------------


@pytest.fixture()
def engine() -> EstimationEngine:
    """Engine over a small hand-priced table and two room templates."""
    return EstimationEngine(_small_table(), PricingSettings(), templates=_TEMPLATES)


@pytest.fixture()
def seed_engine() -> EstimationEngine:
    """Engine over the seed table and the built-in room catalog."""
    return EstimationEngine(CostConfigTable(SEED_COST_ENTRIES), PricingSettings())


@pytest.fixture()
def kitchen_and_bedroom() -> list[RoomSelection]:
    return [
        RoomSelection(
            room_id="kitchen",
            category_selections={
                "flooring": FinishTier.STANDARD,
                "appliances": FinishTier.STANDARD,
            },
        ),
        RoomSelection(
            room_id="bedroom",
            category_selections={"flooring": FinishTier.STANDARD},
        ),
    ]


# ---------------------------------------------------------------------------
# Area allocation and quantities
# ---------------------------------------------------------------------------


class TestAreaAllocation:
    def test_rooms_get_their_share_of_total(
        self, engine: EstimationEngine, kitchen_and_bedroom: list[RoomSelection],
    ) -> None:
        result = engine.estimate_rooms(kitchen_and_bedroom, 2000)
        assert result.room_breakdowns is not None
        areas = {b.room_id: b.area_sqft for b in result.room_breakdowns}
        assert areas == {"kitchen": 800, "bedroom": 1200}

    def test_area_rounds_half_up(self, engine: EstimationEngine) -> None:
        # 40% of 2001.25 is 800.5
        result = engine.estimate_rooms([RoomSelection(room_id="kitchen")], 2001.25)
        assert result.room_breakdowns is not None
        assert result.room_breakdowns[0].area_sqft == 801

    def test_explicit_area_overrides_share(self, engine: EstimationEngine) -> None:
        selection = RoomSelection(
            room_id="kitchen",
            area_sqft=250,
            category_selections={"flooring": FinishTier.STANDARD},
        )
        result = engine.estimate_rooms([selection], 2000)
        assert result.room_breakdowns is not None
        assert result.room_breakdowns[0].area_sqft == 250
        assert result.total == CostRange(low=2500, high=5000)

    def test_custom_name_kept(self, engine: EstimationEngine) -> None:
        selection = RoomSelection(room_id="bedroom", name="Guest Suite")
        result = engine.estimate_rooms([selection], 2000)
        assert result.room_breakdowns is not None
        assert result.room_breakdowns[0].name == "Guest Suite"


class TestQuantities:
    def test_sqft_categories_priced_on_area(
        self, engine: EstimationEngine, kitchen_and_bedroom: list[RoomSelection],
    ) -> None:
        result = engine.estimate_rooms(kitchen_and_bedroom, 2000)
        assert result.room_breakdowns is not None
        kitchen = result.room_breakdowns[0]
        flooring = next(item for item in kitchen.items if item.id == "flooring")
        assert flooring.quantity == 800
        assert flooring.total == CostRange(low=8000, high=16000)

    def test_lf_categories_priced_on_perimeter(self, engine: EstimationEngine) -> None:
        selection = RoomSelection(
            room_id="kitchen",
            category_selections={"cabinets": FinishTier.STANDARD},
        )
        result = engine.estimate_rooms([selection], 2000)
        cabinets = result.line_items[0]
        assert cabinets.unit == CostUnit.LF
        assert cabinets.quantity == pytest.approx(4 * math.sqrt(800))
        assert cabinets.total.low == pytest.approx(100 * 4 * math.sqrt(800))

    def test_each_categories_priced_once(self, engine: EstimationEngine) -> None:
        selection = RoomSelection(
            room_id="kitchen",
            category_selections={"appliances": FinishTier.STANDARD},
        )
        result = engine.estimate_rooms([selection], 5000)
        assert result.line_items[0].quantity == 1
        assert result.total == CostRange(low=5000, high=8000)


# ---------------------------------------------------------------------------
# Totals and reconciliation
# ---------------------------------------------------------------------------


class TestTotals:
    def test_hand_computed_total(
        self, engine: EstimationEngine, kitchen_and_bedroom: list[RoomSelection],
    ) -> None:
        result = engine.estimate_rooms(kitchen_and_bedroom, 2000)
        # flooring 2,000 SF x $10-20 + appliances $5,000-8,000
        assert result.total == CostRange(low=25000, high=48000)
        assert result.mode == "rooms"
        assert result.out_the_door is None

    def test_flat_items_aggregate_across_rooms(
        self, engine: EstimationEngine, kitchen_and_bedroom: list[RoomSelection],
    ) -> None:
        result = engine.estimate_rooms(kitchen_and_bedroom, 2000)
        ids = [item.id for item in result.line_items]
        assert ids == ["flooring", "appliances"]
        flooring = result.line_items[0]
        assert flooring.quantity == 2000
        assert flooring.total == CostRange(low=20000, high=40000)
        assert flooring.unit_cost == CostRange(low=10, high=20)
        assert flooring.finish_level == FinishTier.STANDARD

    def test_mixed_tiers_blend_unit_cost(self, engine: EstimationEngine) -> None:
        selections = [
            RoomSelection(
                room_id="kitchen", category_selections={"flooring": FinishTier.PREMIUM},
            ),
            RoomSelection(
                room_id="bedroom", category_selections={"flooring": FinishTier.BUILDER},
            ),
        ]
        result = engine.estimate_rooms(selections, 2000)
        flooring = result.line_items[0]
        assert flooring.finish_level is None
        # 800 x 20 + 1,200 x 5
        assert flooring.total.low == 22000
        assert flooring.unit_cost.low == 11

    def test_category_priced_in_two_units_keeps_separate_lines(self) -> None:
        table = CostConfigTable(
            [
                _entry("cabinets", FinishTier.STANDARD, 100, 200, CostUnit.LF),
                _entry("cabinets", FinishTier.LUXURY, 9000, 15000, CostUnit.EACH),
            ]
        )
        engine = EstimationEngine(table, PricingSettings(), templates=_TEMPLATES)
        selections = [
            RoomSelection(
                room_id="kitchen", category_selections={"cabinets": FinishTier.STANDARD},
            ),
            RoomSelection(
                room_id="kitchen", category_selections={"cabinets": FinishTier.LUXURY},
            ),
        ]

        result = engine.estimate_rooms(selections, 2000)

        assert [(item.id, item.unit) for item in result.line_items] == [
            ("cabinets", CostUnit.LF),
            ("cabinets", CostUnit.EACH),
        ]
        lf_line, each_line = result.line_items
        assert lf_line.quantity == pytest.approx(4 * math.sqrt(800))
        assert lf_line.unit_cost.low == pytest.approx(100)
        assert lf_line.unit_cost.high == pytest.approx(200)
        assert each_line.quantity == 1
        assert each_line.total == CostRange(low=9000, high=15000)
        assert result.total.low == pytest.approx(lf_line.total.low + 9000)

    def test_division_totals_reconcile_exactly(
        self, seed_engine: EstimationEngine,
    ) -> None:
        result = seed_engine.estimate_rooms(_default_selections(), 2800)
        assert list(result.division_totals) == list(Division)
        assert result.total.low == sum(r.low for r in result.division_totals.values())
        assert result.total.high == sum(r.high for r in result.division_totals.values())

    def test_room_totals_match_overall(self, seed_engine: EstimationEngine) -> None:
        result = seed_engine.estimate_rooms(_default_selections(), 2800)
        assert result.room_breakdowns is not None
        rooms_low = sum(b.total.low for b in result.room_breakdowns)
        rooms_high = sum(b.total.high for b in result.room_breakdowns)
        assert rooms_low == pytest.approx(result.total.low)
        assert rooms_high == pytest.approx(result.total.high)

    def test_every_range_is_ordered(self, seed_engine: EstimationEngine) -> None:
        result = seed_engine.estimate_rooms(_default_selections(FinishTier.LUXURY), 3500)
        assert result.total.low <= result.total.high
        for item in result.line_items:
            assert 0 <= item.total.low <= item.total.high

    def test_empty_selection_prices_to_zero(self, engine: EstimationEngine) -> None:
        result = engine.estimate_rooms([], 2000)
        assert result.total == CostRange(low=0, high=0)
        assert result.warnings == ()

    def test_survives_json_round_trip(self, seed_engine: EstimationEngine) -> None:
        result = seed_engine.estimate_rooms(_default_selections(), 2400)
        restored = EstimateResult.model_validate_json(result.model_dump_json())
        assert restored == result


class TestMonotonicity:
    def test_upgrading_a_category_never_lowers_total(
        self, seed_engine: EstimationEngine,
    ) -> None:
        baseline = _default_selections()
        for index, selection in enumerate(baseline):
            for category in selection.category_selections:
                totals = []
                for tier in FINISH_TIER_ORDER:
                    changed = {**selection.category_selections, category: tier}
                    rooms = list(baseline)
                    rooms[index] = selection.model_copy(
                        update={"category_selections": changed},
                    )
                    totals.append(seed_engine.estimate_rooms(rooms, 2500).total)
                for lower, upper in zip(totals, totals[1:]):
                    assert upper.low >= lower.low, (selection.room_id, category)
                    assert upper.high >= lower.high, (selection.room_id, category)


# ---------------------------------------------------------------------------
# Warnings and degraded pricing
# ---------------------------------------------------------------------------


class TestWarnings:
    def test_unknown_room_skipped_with_warning(
        self, engine: EstimationEngine, kitchen_and_bedroom: list[RoomSelection],
    ) -> None:
        rooms = [*kitchen_and_bedroom, RoomSelection(room_id="bowling_alley")]
        result = engine.estimate_rooms(rooms, 2000)
        assert result.total == CostRange(low=25000, high=48000)
        codes = [w.code for w in result.warnings]
        assert codes == [WarningCode.ROOM_WITHOUT_TEMPLATE]
        assert result.warnings[0].room_id == "bowling_alley"
        assert not result.confidence_degraded

    def test_category_outside_template_ignored(self, engine: EstimationEngine) -> None:
        rooms = [
            RoomSelection(
                room_id="kitchen",
                category_selections={"paint": FinishTier.STANDARD},
            ),
            RoomSelection(room_id="bedroom"),
        ]
        result = engine.estimate_rooms(rooms, 2000)
        assert result.line_items == ()
        assert result.warnings[0].code == WarningCode.CATEGORY_NOT_IN_TEMPLATE
        assert result.warnings[0].category == "paint"

    def test_share_mismatch_flagged(self, engine: EstimationEngine) -> None:
        result = engine.estimate_rooms([RoomSelection(room_id="kitchen")], 2000)
        codes = [w.code for w in result.warnings]
        assert codes == [WarningCode.AREA_SHARE_MISMATCH]

    def test_full_share_not_flagged(
        self, engine: EstimationEngine, kitchen_and_bedroom: list[RoomSelection],
    ) -> None:
        result = engine.estimate_rooms(kitchen_and_bedroom, 2000)
        assert result.warnings == ()

    def test_missing_tier_falls_back_and_degrades(
        self, engine: EstimationEngine,
    ) -> None:
        rooms = [
            RoomSelection(room_id="kitchen"),
            RoomSelection(
                room_id="bedroom", category_selections={"paint": FinishTier.LUXURY},
            ),
        ]
        result = engine.estimate_rooms(rooms, 2000)
        assert result.confidence_degraded
        assert result.warnings[0].code == WarningCode.FALLBACK_TO_STANDARD
        assert result.warnings[0].room_id == "bedroom"
        # priced at standard: 1,200 SF x $2-3
        assert result.total == CostRange(low=2400, high=3600)
        assert result.line_items[0].fallback_pricing

    def test_unpriced_category_contributes_zero(self, engine: EstimationEngine) -> None:
        rooms = [
            RoomSelection(
                room_id="kitchen",
                category_selections={"backsplash": FinishTier.PREMIUM},
            ),
            RoomSelection(room_id="bedroom"),
        ]
        result = engine.estimate_rooms(rooms, 2000)
        assert result.confidence_degraded
        assert result.total == CostRange(low=0, high=0)
        assert result.warnings[0].code == WarningCode.MISSING_CONFIG_ENTRY


# ---------------------------------------------------------------------------
# Invalid input
# ---------------------------------------------------------------------------


class TestInvalidInput:
    @pytest.mark.parametrize("total_sqft", [0, -100, float("nan"), float("inf")])
    def test_non_positive_total_rejected(
        self,
        engine: EstimationEngine,
        kitchen_and_bedroom: list[RoomSelection],
        total_sqft: float,
    ) -> None:
        with pytest.raises(InvalidInputError, match="total_sqft"):
            engine.estimate_rooms(kitchen_and_bedroom, total_sqft)
