"""Tests for the cost configuration table, provider and feed loader."""

from __future__ import annotations

import json
import threading
from typing import TYPE_CHECKING

import pytest
from pydantic import ValidationError

from homecost.data.cost_entries import CostConfigEntry
from homecost.data.house_items import HOUSE_ITEMS, house_item_ids
from homecost.data.repository import (
    CostConfigTable,
    CostTableProvider,
    load_cost_table,
    parse_cost_entries,
)
from homecost.data.room_templates import room_categories
from homecost.data.seed import SEED_COST_ENTRIES
from homecost.exceptions import CostConfigError
from homecost.models.enums import FINISH_TIER_ORDER, CostUnit, FinishTier, WarningCode
from homecost.models.estimate import ZERO, CostRange

if TYPE_CHECKING:
    from pathlib import Path


def _entry(
    category: str,
    tier: FinishTier,
    low: float,
    high: float,
    unit: CostUnit = CostUnit.SQFT,
) -> CostConfigEntry:
    return CostConfigEntry(
        category=category,
        finish_level=tier,
        cost_per_unit_low=low,
        cost_per_unit_high=high,
        unit=unit,
    )


@pytest.fixture()
def small_table() -> CostConfigTable:
    return CostConfigTable(
        [
            _entry("flooring", FinishTier.STANDARD, 10, 20),
            _entry("flooring", FinishTier.PREMIUM, 20, 30),
            _entry("paint", FinishTier.STANDARD, 2, 3),
        ]
    )


# ---------------------------------------------------------------------------
# Seed data integrity
# ---------------------------------------------------------------------------


class TestSeedData:
    def test_seed_indexes_without_duplicates(self) -> None:
        table = CostConfigTable(SEED_COST_ENTRIES)
        assert len(table) == len(SEED_COST_ENTRIES)

    def test_every_house_item_priced_at_every_tier(self) -> None:
        table = CostConfigTable(SEED_COST_ENTRIES)
        assert table.missing_pairs(house_item_ids()) == []

    def test_every_room_category_priced_at_every_tier(self) -> None:
        table = CostConfigTable(SEED_COST_ENTRIES)
        assert table.missing_pairs(room_categories()) == []

    def test_house_entries_use_item_units(self) -> None:
        table = CostConfigTable(SEED_COST_ENTRIES)
        for item in HOUSE_ITEMS:
            entry = table.get_entry(item.id, FinishTier.STANDARD)
            assert entry is not None
            assert entry.unit == item.unit, item.id

    def test_prices_never_drop_with_tier(self) -> None:
        """Upgrading a tier never makes a category cheaper."""
        table = CostConfigTable(SEED_COST_ENTRIES)
        for category in table.categories():
            ranges = [table.lookup(category, tier) for tier in FINISH_TIER_ORDER]
            for lower, upper in zip(ranges, ranges[1:]):
                assert lower is not None and upper is not None
                assert upper.low >= lower.low, category
                assert upper.high >= lower.high, category


# ---------------------------------------------------------------------------
# Entry validation
# ---------------------------------------------------------------------------


class TestCostConfigEntry:
    def test_low_above_high_rejected(self) -> None:
        with pytest.raises(ValidationError, match="exceeds"):
            _entry("flooring", FinishTier.STANDARD, 30, 20)

    def test_negative_cost_rejected(self) -> None:
        with pytest.raises(ValidationError):
            _entry("flooring", FinishTier.STANDARD, -1, 20)

    def test_accepts_admin_store_column_names(self) -> None:
        entry = CostConfigEntry.model_validate(
            {
                "category": "flooring",
                "finish_level": "premium",
                "cost_per_sqft_low": 20,
                "cost_per_sqft_high": 30,
                "display_name": "Flooring",
            }
        )
        assert entry.cost_per_unit == CostRange(low=20, high=30)
        assert entry.unit == CostUnit.SQFT

    def test_key(self) -> None:
        entry = _entry("paint", FinishTier.LUXURY, 5, 9)
        assert entry.key == ("paint", FinishTier.LUXURY)


# ---------------------------------------------------------------------------
# Lookup and fallback policy
# ---------------------------------------------------------------------------


class TestLookup:
    def test_lookup_hit(self, small_table: CostConfigTable) -> None:
        assert small_table.lookup("flooring", FinishTier.PREMIUM) == CostRange(
            low=20, high=30
        )

    def test_lookup_miss_returns_none(self, small_table: CostConfigTable) -> None:
        assert small_table.lookup("flooring", FinishTier.LUXURY) is None
        assert small_table.lookup("roofing", FinishTier.STANDARD) is None

    def test_duplicate_pair_rejected(self) -> None:
        with pytest.raises(CostConfigError, match="Duplicate"):
            CostConfigTable(
                [
                    _entry("paint", FinishTier.STANDARD, 2, 3),
                    _entry("paint", FinishTier.STANDARD, 3, 4),
                ]
            )

    def test_categories_in_first_seen_order(self, small_table: CostConfigTable) -> None:
        assert small_table.categories() == ["flooring", "paint"]


class TestResolve:
    def test_exact_match(self, small_table: CostConfigTable) -> None:
        resolution = small_table.resolve("flooring", FinishTier.PREMIUM)
        assert resolution.unit_cost == CostRange(low=20, high=30)
        assert resolution.tier_used == FinishTier.PREMIUM
        assert resolution.warning is None
        assert not resolution.is_fallback

    def test_falls_back_to_standard(self, small_table: CostConfigTable) -> None:
        resolution = small_table.resolve("paint", FinishTier.LUXURY)
        assert resolution.unit_cost == CostRange(low=2, high=3)
        assert resolution.tier_used == FinishTier.STANDARD
        assert resolution.is_fallback
        assert resolution.warning is not None
        assert resolution.warning.code == WarningCode.FALLBACK_TO_STANDARD
        assert resolution.warning.category == "paint"

    def test_missing_everywhere_contributes_zero(
        self, small_table: CostConfigTable
    ) -> None:
        resolution = small_table.resolve("roofing", FinishTier.PREMIUM)
        assert resolution.unit_cost == ZERO
        assert resolution.is_missing
        assert resolution.unit is None
        assert resolution.warning is not None
        assert resolution.warning.code == WarningCode.MISSING_CONFIG_ENTRY

    def test_missing_standard_does_not_fall_back(self) -> None:
        table = CostConfigTable([_entry("tile", FinishTier.LUXURY, 50, 80)])
        resolution = table.resolve("tile", FinishTier.STANDARD)
        assert resolution.is_missing

    def test_missing_pairs(self, small_table: CostConfigTable) -> None:
        missing = small_table.missing_pairs(["paint"], [FinishTier.STANDARD, FinishTier.LUXURY])
        assert missing == [("paint", FinishTier.LUXURY)]


# ---------------------------------------------------------------------------
# Provider
# ---------------------------------------------------------------------------


class TestCostTableProvider:
    def test_swap_replaces_and_returns_previous(
        self, small_table: CostConfigTable
    ) -> None:
        provider = CostTableProvider(small_table)
        replacement = CostConfigTable(SEED_COST_ENTRIES, version="v2")

        previous = provider.swap(replacement)

        assert previous is small_table
        assert provider.current() is replacement

    def test_readers_see_whole_tables(self, small_table: CostConfigTable) -> None:
        """Concurrent readers only ever observe one of the installed tables."""
        tables = [small_table, CostConfigTable(SEED_COST_ENTRIES)]
        provider = CostTableProvider(tables[0])
        seen: list[CostConfigTable] = []

        def read() -> None:
            for _ in range(200):
                seen.append(provider.current())

        readers = [threading.Thread(target=read) for _ in range(4)]
        for reader in readers:
            reader.start()
        for i in range(50):
            provider.swap(tables[i % 2])
        for reader in readers:
            reader.join()

        assert seen
        assert all(any(t is table for table in tables) for t in seen)


# ---------------------------------------------------------------------------
# Feed loading
# ---------------------------------------------------------------------------


class TestLoadCostTable:
    def test_loads_list_export(self, tmp_path: Path) -> None:
        feed = tmp_path / "config.json"
        feed.write_text(
            json.dumps(
                [
                    {
                        "category": "flooring",
                        "finish_level": "standard",
                        "cost_per_unit_low": 10,
                        "cost_per_unit_high": 20,
                    },
                    {
                        "category": "cabinets",
                        "finish_level": "standard",
                        "cost_per_sqft_low": 100,
                        "cost_per_sqft_high": 200,
                        "unit": "lf",
                    },
                ]
            )
        )
        table = load_cost_table(feed)
        assert len(table) == 2
        assert table.version is None
        entry = table.get_entry("cabinets", FinishTier.STANDARD)
        assert entry is not None
        assert entry.unit == CostUnit.LF

    def test_loads_versioned_export(self, tmp_path: Path) -> None:
        feed = tmp_path / "config.json"
        feed.write_text(
            json.dumps(
                {
                    "version": "2025-06-01",
                    "entries": [
                        {
                            "category": "paint",
                            "finish_level": "builder",
                            "cost_per_unit_low": 1,
                            "cost_per_unit_high": 2,
                        }
                    ],
                }
            )
        )
        table = load_cost_table(str(feed))
        assert table.version == "2025-06-01"
        assert table.lookup("paint", FinishTier.BUILDER) == CostRange(low=1, high=2)

    def test_malformed_entry_raises_config_error(self) -> None:
        with pytest.raises(CostConfigError, match="Malformed"):
            parse_cost_entries([{"category": "paint", "finish_level": "gold"}])

    def test_unreadable_file_raises_config_error(self, tmp_path: Path) -> None:
        with pytest.raises(CostConfigError):
            load_cost_table(tmp_path / "missing.json")

    def test_invalid_json_raises_config_error(self, tmp_path: Path) -> None:
        feed = tmp_path / "config.json"
        feed.write_text("{not json")
        with pytest.raises(CostConfigError):
            load_cost_table(feed)
