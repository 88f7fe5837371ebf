"""Cost data layer for the homecost estimation engine."""

from homecost.data.cost_entries import CostConfigEntry
from homecost.data.repository import (
    CostConfigTable,
    CostTableProvider,
    PriceResolution,
    load_cost_table,
)
from homecost.data.room_templates import ROOM_TEMPLATES, RoomTemplate

__all__ = [
    "ROOM_TEMPLATES",
    "CostConfigEntry",
    "CostConfigTable",
    "CostTableProvider",
    "PriceResolution",
    "RoomTemplate",
    "load_cost_table",
]
