"""Schema for cost configuration entries."""

from __future__ import annotations

from pydantic import AliasChoices, BaseModel, ConfigDict, Field, model_validator

from homecost.models.enums import CostUnit, FinishTier
from homecost.models.estimate import CostRange


class CostConfigEntry(BaseModel):
    """Unit cost range for one (category, finish level) pair.

    Categories cover both room-wizard material categories (``flooring``,
    ``cabinets``) and whole-house line items (``framing``, ``pool_standard``).
    The unit basis is declared here and respected by the calculators.
    """

    model_config = ConfigDict(frozen=True)

    category: str
    finish_level: FinishTier
    # the admin store exports per-square-foot column names
    cost_per_unit_low: float = Field(
        ge=0, validation_alias=AliasChoices("cost_per_unit_low", "cost_per_sqft_low"),
    )
    cost_per_unit_high: float = Field(
        ge=0, validation_alias=AliasChoices("cost_per_unit_high", "cost_per_sqft_high"),
    )
    unit: CostUnit = CostUnit.SQFT
    display_name: str | None = None

    @model_validator(mode="after")
    def low_le_high(self) -> CostConfigEntry:
        if self.cost_per_unit_low > self.cost_per_unit_high:
            msg = (
                f"{self.category}/{self.finish_level}: cost_per_unit_low "
                f"{self.cost_per_unit_low} exceeds cost_per_unit_high "
                f"{self.cost_per_unit_high}"
            )
            raise ValueError(msg)
        return self

    @property
    def key(self) -> tuple[str, FinishTier]:
        return (self.category, self.finish_level)

    @property
    def cost_per_unit(self) -> CostRange:
        return CostRange(low=self.cost_per_unit_low, high=self.cost_per_unit_high)
