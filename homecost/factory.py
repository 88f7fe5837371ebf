"""Factory functions for creating pre-configured EstimationEngine instances."""

from __future__ import annotations

from typing import TYPE_CHECKING

from homecost.config import load_settings
from homecost.data.repository import CostConfigTable, load_cost_table
from homecost.data.seed import SEED_COST_ENTRIES
from homecost.engine import EstimationEngine

if TYPE_CHECKING:
    from pathlib import Path

    from homecost.config import PricingSettings

SEED_TABLE_VERSION = "seed-2025.1"


def create_default_engine(
    settings: PricingSettings | None = None,
    cost_table_path: str | Path | None = None,
) -> EstimationEngine:
    """Create an EstimationEngine wired up with the default seed cost data.

    This is the recommended way to create an engine for typical usage. It
    indexes the built-in seed table (or a JSON export of the cost
    configuration store, when *cost_table_path* is given) and applies
    settings from the environment unless *settings* is passed.

    Returns:
        An EstimationEngine ready to produce estimates.

    Example::

        from homecost import WholeHouseInput, create_default_engine

        engine = create_default_engine()
        result = engine.estimate_house(WholeHouseInput(sqft=2800, stories=2))
    """
    if cost_table_path is not None:
        table = load_cost_table(cost_table_path)
    else:
        table = CostConfigTable(SEED_COST_ENTRIES, version=SEED_TABLE_VERSION)
    return EstimationEngine(table, settings if settings is not None else load_settings())
