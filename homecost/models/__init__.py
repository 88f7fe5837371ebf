"""Domain models for the homecost estimation engine."""

from homecost.models.derived import (
    Achievement,
    FinancingResult,
    SchedulePhase,
    ScheduleResult,
    UpsellSuggestion,
)
from homecost.models.enums import (
    CostUnit,
    Division,
    FinishTier,
    PoolType,
    SmartHomeLevel,
    WarningCode,
)
from homecost.models.estimate import (
    CostRange,
    EstimateResult,
    EstimateWarning,
    LineItem,
    OutTheDoor,
    RoomBreakdown,
    SurchargeLine,
)
from homecost.models.house import RoomSelection, WholeHouseInput

__all__ = [
    "Achievement",
    "CostRange",
    "CostUnit",
    "Division",
    "EstimateResult",
    "EstimateWarning",
    "FinancingResult",
    "FinishTier",
    "LineItem",
    "OutTheDoor",
    "PoolType",
    "RoomBreakdown",
    "RoomSelection",
    "SchedulePhase",
    "ScheduleResult",
    "SmartHomeLevel",
    "SurchargeLine",
    "UpsellSuggestion",
    "WarningCode",
    "WholeHouseInput",
]
