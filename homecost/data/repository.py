"""Cost configuration table: indexed, read-only pricing lookups."""

from __future__ import annotations

import json
import logging
import threading
from dataclasses import dataclass
from pathlib import Path
from types import MappingProxyType
from typing import TYPE_CHECKING

from pydantic import TypeAdapter, ValidationError

from homecost.data.cost_entries import CostConfigEntry
from homecost.exceptions import CostConfigError
from homecost.models.enums import CostUnit, FinishTier, WarningCode
from homecost.models.estimate import ZERO, CostRange, EstimateWarning

if TYPE_CHECKING:
    from collections.abc import Iterable

logger = logging.getLogger(__name__)

_ENTRY_LIST = TypeAdapter(list[CostConfigEntry])


@dataclass(frozen=True)
class PriceResolution:
    """Outcome of resolving a (category, tier) pair under the fallback policy.

    ``tier_used`` is the tier whose entry priced the request, or None when
    nothing was found and the price is zero.
    """

    category: str
    requested_tier: FinishTier
    tier_used: FinishTier | None
    unit_cost: CostRange
    unit: CostUnit | None
    display_name: str
    warning: EstimateWarning | None = None

    @property
    def is_fallback(self) -> bool:
        return self.tier_used != self.requested_tier

    @property
    def is_missing(self) -> bool:
        return self.tier_used is None


class CostConfigTable:
    """Immutable unit-cost lookup keyed by (category, finish level).

    Entries are indexed once at construction; lookups are dictionary
    reads. Two entries for the same pair raise CostConfigError.
    """

    def __init__(
        self, entries: Iterable[CostConfigEntry], version: str | None = None,
    ) -> None:
        index: dict[tuple[str, FinishTier], CostConfigEntry] = {}
        for entry in entries:
            if entry.key in index:
                msg = (
                    f"Duplicate cost entry for category '{entry.category}' "
                    f"at finish level '{entry.finish_level}'"
                )
                raise CostConfigError(msg)
            index[entry.key] = entry
        self._index = MappingProxyType(index)
        self.version = version

    def __len__(self) -> int:
        return len(self._index)

    def __contains__(self, key: object) -> bool:
        return key in self._index

    @property
    def entries(self) -> list[CostConfigEntry]:
        return list(self._index.values())

    def categories(self) -> list[str]:
        """Distinct categories in first-seen order."""
        return list(dict.fromkeys(category for category, _ in self._index))

    def get_entry(self, category: str, tier: FinishTier) -> CostConfigEntry | None:
        return self._index.get((category, tier))

    def lookup(self, category: str, tier: FinishTier) -> CostRange | None:
        """Return the unit cost range for the pair, or None if it is missing."""
        entry = self._index.get((category, tier))
        return entry.cost_per_unit if entry is not None else None

    def resolve(self, category: str, tier: FinishTier) -> PriceResolution:
        """Resolve a unit cost, falling back to standard tier, then to zero.

        Never raises for a missing pair: the returned resolution carries
        the warning the caller should surface on its result.
        """
        entry = self._index.get((category, tier))
        if entry is not None:
            return self._resolution(category, tier, entry)

        if tier != FinishTier.STANDARD:
            standard = self._index.get((category, FinishTier.STANDARD))
            if standard is not None:
                warning = EstimateWarning(
                    code=WarningCode.FALLBACK_TO_STANDARD,
                    message=(
                        f"No '{tier}' pricing for '{category}'; "
                        "priced at standard finish"
                    ),
                    category=category,
                )
                logger.warning(warning.message)
                return self._resolution(category, tier, standard, warning)

        warning = EstimateWarning(
            code=WarningCode.MISSING_CONFIG_ENTRY,
            message=f"No pricing for '{category}' at '{tier}'; contributed zero",
            category=category,
        )
        logger.warning(warning.message)
        return PriceResolution(
            category=category,
            requested_tier=tier,
            tier_used=None,
            unit_cost=ZERO,
            unit=None,
            display_name=category.replace("_", " ").title(),
            warning=warning,
        )

    def missing_pairs(
        self,
        categories: Iterable[str],
        tiers: Iterable[FinishTier] = tuple(FinishTier),
    ) -> list[tuple[str, FinishTier]]:
        """List the (category, tier) pairs the table has no entry for."""
        tier_list = list(tiers)
        return [
            (category, tier)
            for category in categories
            for tier in tier_list
            if (category, tier) not in self._index
        ]

    @staticmethod
    def _resolution(
        category: str,
        requested: FinishTier,
        entry: CostConfigEntry,
        warning: EstimateWarning | None = None,
    ) -> PriceResolution:
        return PriceResolution(
            category=category,
            requested_tier=requested,
            tier_used=entry.finish_level,
            unit_cost=entry.cost_per_unit,
            unit=entry.unit,
            display_name=entry.display_name or category.replace("_", " ").title(),
            warning=warning,
        )


class CostTableProvider:
    """Holds the current cost table and swaps it atomically.

    Readers call ``current()`` once per calculation and use that table
    for the whole calculation, so a refresh is observed either entirely
    or not at all.
    """

    def __init__(self, table: CostConfigTable) -> None:
        self._lock = threading.Lock()
        self._table = table

    def current(self) -> CostConfigTable:
        with self._lock:
            return self._table

    def swap(self, table: CostConfigTable) -> CostConfigTable:
        """Install *table* and return the one it replaced."""
        with self._lock:
            previous, self._table = self._table, table
        logger.info(
            "Cost table swapped: %d entries (version %s) -> %d entries (version %s)",
            len(previous), previous.version, len(table), table.version,
        )
        return previous


def parse_cost_entries(raw: object) -> list[CostConfigEntry]:
    """Validate a configuration feed payload into entries.

    Accepts either a bare list of entry objects or an object with an
    ``entries`` list.
    """
    if isinstance(raw, dict):
        raw = raw.get("entries", [])
    try:
        return _ENTRY_LIST.validate_python(raw)
    except ValidationError as exc:
        msg = f"Malformed cost configuration feed: {exc.error_count()} invalid field(s)"
        raise CostConfigError(msg) from exc


def load_cost_table(path: str | Path) -> CostConfigTable:
    """Load a JSON export of the cost configuration store."""
    path = Path(path)
    try:
        raw = json.loads(path.read_text(encoding="utf-8"))
    except (OSError, json.JSONDecodeError) as exc:
        msg = f"Could not read cost configuration from {path}: {exc}"
        raise CostConfigError(msg) from exc

    version = raw.get("version") if isinstance(raw, dict) else None
    table = CostConfigTable(parse_cost_entries(raw), version=version)
    logger.info("Loaded %d cost entries from %s", len(table), path)
    return table
