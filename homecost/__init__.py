"""homecost construction cost estimation engine.

Usage::

    from homecost import WholeHouseInput, create_default_engine

    engine = create_default_engine()
    result = engine.estimate_house(WholeHouseInput(sqft=2800, stories=2))
"""

from homecost.achievements import evaluate_achievements
from homecost.config import PricingSettings, load_settings
from homecost.engine import EstimationEngine
from homecost.factory import create_default_engine
from homecost.financing import calculate_financing
from homecost.models.enums import Division, FinishTier
from homecost.models.estimate import CostRange, EstimateResult
from homecost.models.house import RoomSelection, WholeHouseInput
from homecost.schedule import calculate_schedule
from homecost.upsells import generate_upsells

__all__ = [
    "CostRange",
    "Division",
    "EstimateResult",
    "EstimationEngine",
    "FinishTier",
    "PricingSettings",
    "RoomSelection",
    "WholeHouseInput",
    "calculate_financing",
    "calculate_schedule",
    "create_default_engine",
    "evaluate_achievements",
    "generate_upsells",
    "load_settings",
]
