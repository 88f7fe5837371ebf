"""Smoke tests for the homecost package surface."""

import importlib

import pytest

import homecost

_CALCULATORS = [
    "calculate_financing",
    "calculate_schedule",
    "create_default_engine",
    "evaluate_achievements",
    "generate_upsells",
    "load_settings",
]

_SUBMODULES = [
    "homecost.achievements",
    "homecost.config",
    "homecost.data.repository",
    "homecost.data.seed",
    "homecost.engine",
    "homecost.financing",
    "homecost.formatting",
    "homecost.records",
    "homecost.schedule",
    "homecost.upsells",
]


def test_docstring_shows_usage() -> None:
    assert homecost.__doc__ is not None
    assert "create_default_engine" in homecost.__doc__


def test_all_names_resolve() -> None:
    missing = [name for name in homecost.__all__ if not hasattr(homecost, name)]
    assert missing == []
    assert len(homecost.__all__) == len(set(homecost.__all__))


@pytest.mark.parametrize("name", _CALCULATORS)
def test_calculators_exported(name: str) -> None:
    assert name in homecost.__all__
    assert callable(getattr(homecost, name))


@pytest.mark.parametrize("module", _SUBMODULES)
def test_submodules_import(module: str) -> None:
    assert importlib.import_module(module) is not None


def test_default_engine_prices_a_house() -> None:
    engine = homecost.create_default_engine(settings=homecost.PricingSettings())
    result = engine.estimate_house(homecost.WholeHouseInput(sqft=2400))
    assert result.customer_total.low > 0
    assert set(result.division_totals) == set(homecost.Division)
