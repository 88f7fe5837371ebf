"""Pricing settings for the out-the-door pass, financing and upsells.

Defaults are the Manatee/Sarasota County figures the estimator ships
with. Deployments override them through ``HOMECOST_*`` environment
variables, optionally loaded from a ``.env`` file.
"""

from __future__ import annotations

import logging
import os
from typing import TYPE_CHECKING

from dotenv import load_dotenv
from pydantic import BaseModel, ConfigDict, Field, model_validator

from homecost.data import locations
from homecost.models.enums import FinishTier

if TYPE_CHECKING:
    from collections.abc import Mapping
    from pathlib import Path

logger = logging.getLogger(__name__)

ENV_PREFIX = "HOMECOST_"

# Settings that can be overridden from the environment.
_ENV_FIELDS = (
    "tax_rate",
    "material_ratio",
    "permit_rate",
    "insurance_rate",
    "mortgage_rate_percent",
    "mortgage_term_years",
    "max_upsells",
    "budget_badge_threshold",
    "default_location",
)


def _default_builder_fees() -> dict[FinishTier, float]:
    return {
        FinishTier.BUILDER: 0.15,
        FinishTier.STANDARD: 0.18,
        FinishTier.PREMIUM: 0.20,
        FinishTier.LUXURY: 0.22,
    }


class PricingSettings(BaseModel):
    """Rates and defaults applied on top of the cost table."""

    model_config = ConfigDict(frozen=True)

    # Florida 6% state + 1% Manatee County surtax
    tax_rate: float = Field(ge=0, le=1, default=0.07)
    # share of the base cost that is taxable materials
    material_ratio: float = Field(ge=0, le=1, default=0.50)
    permit_rate: float = Field(ge=0, le=1, default=0.015)
    insurance_rate: float = Field(ge=0, le=1, default=0.025)
    builder_fee_by_tier: dict[FinishTier, float] = Field(
        default_factory=_default_builder_fees,
    )
    location_multipliers: dict[str, float] = Field(
        default_factory=locations.location_multipliers,
    )
    location_names: dict[str, str] = Field(default_factory=locations.location_names)
    default_location: str = "bradenton"

    mortgage_rate_percent: float = Field(ge=0, default=6.99)
    mortgage_term_years: int = Field(gt=0, default=30)
    max_upsells: int = Field(ge=0, default=3)
    budget_badge_threshold: float = Field(gt=0, default=1_000_000)

    @model_validator(mode="after")
    def every_tier_has_builder_fee(self) -> PricingSettings:
        missing = [t.value for t in FinishTier if t not in self.builder_fee_by_tier]
        if missing:
            msg = f"builder_fee_by_tier is missing tiers: {', '.join(missing)}"
            raise ValueError(msg)
        return self

    @model_validator(mode="after")
    def default_location_is_priced(self) -> PricingSettings:
        if self.default_location not in self.location_multipliers:
            msg = f"default_location '{self.default_location}' has no cost multiplier"
            raise ValueError(msg)
        return self

    @property
    def effective_tax_rate(self) -> float:
        """Sales tax as a rate on the whole base (tax on materials only)."""
        return self.tax_rate * self.material_ratio

    def builder_fee_rate(self, tier: FinishTier) -> float:
        return self.builder_fee_by_tier[tier]


def load_settings(
    env_file: str | Path | None = None,
    environ: Mapping[str, str] | None = None,
) -> PricingSettings:
    """Build settings from defaults plus ``HOMECOST_*`` overrides.

    Args:
        env_file: Optional ``.env`` file loaded into the process
            environment first (existing variables win).
        environ: Mapping to read overrides from; defaults to ``os.environ``.
    """
    if env_file is not None:
        load_dotenv(env_file)
    source = os.environ if environ is None else environ

    overrides: dict[str, str] = {}
    for name in _ENV_FIELDS:
        value = source.get(f"{ENV_PREFIX}{name.upper()}")
        if value is not None:
            overrides[name] = value

    if overrides:
        logger.info("Pricing settings overridden from environment: %s", sorted(overrides))
    return PricingSettings.model_validate(overrides)
