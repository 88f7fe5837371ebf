"""Estimate output models for the homecost estimation engine."""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator

from homecost.models.enums import CostUnit, Division, FinishTier, WarningCode


class CostRange(BaseModel):
    """A low/high cost range.

    Every cost the engine reports is a range; a single figure is only
    ever derived for display (``midpoint``).
    """

    model_config = ConfigDict(frozen=True)

    low: float
    high: float

    @model_validator(mode="after")
    def low_le_high(self) -> CostRange:
        if self.low > self.high:
            msg = f"Must satisfy low <= high, got {self.low} > {self.high}"
            raise ValueError(msg)
        return self

    @property
    def midpoint(self) -> float:
        return (self.low + self.high) / 2

    def scaled(self, factor: float) -> CostRange:
        return CostRange(low=self.low * factor, high=self.high * factor)

    def __add__(self, other: CostRange) -> CostRange:
        return CostRange(low=self.low + other.low, high=self.high + other.high)

    def __format__(self, format_spec: str) -> str:
        if format_spec:
            return format(self.midpoint, format_spec)
        return f"{self.low:,.0f} – {self.high:,.0f}"


ZERO = CostRange(low=0.0, high=0.0)


class EstimateWarning(BaseModel):
    """A recoverable condition encountered while pricing."""

    model_config = ConfigDict(frozen=True)

    code: WarningCode
    message: str
    category: str | None = None
    room_id: str | None = None


class LineItem(BaseModel):
    """A single priced line of an estimate."""

    model_config = ConfigDict(frozen=True)

    id: str
    display_name: str
    division: Division
    quantity: float
    unit: CostUnit
    finish_level: FinishTier | None = None
    unit_cost: CostRange
    total: CostRange
    tags: tuple[str, ...] = ()
    fallback_pricing: bool = False


class RoomBreakdown(BaseModel):
    """Per-room detail for a room-based estimate."""

    model_config = ConfigDict(frozen=True)

    room_id: str
    name: str
    area_sqft: float
    items: tuple[LineItem, ...]
    total: CostRange


class SurchargeLine(BaseModel):
    """One percentage-based surcharge of the out-the-door pass.

    ``rate`` is the effective rate applied to the base total; for sales tax
    it is the nominal tax rate times the taxable materials share.
    """

    model_config = ConfigDict(frozen=True)

    id: str
    display_name: str
    rate: float
    amount: CostRange
    explanation: str


class OutTheDoor(BaseModel):
    """Base construction cost plus fixed-order surcharges."""

    model_config = ConfigDict(frozen=True)

    base: CostRange
    surcharges: tuple[SurchargeLine, ...]
    total: CostRange
    per_sqft: CostRange
    monthly_payment: CostRange

    def surcharge(self, surcharge_id: str) -> SurchargeLine:
        for line in self.surcharges:
            if line.id == surcharge_id:
                return line
        msg = f"No surcharge '{surcharge_id}' in out-the-door pass"
        raise KeyError(msg)


class EstimateResult(BaseModel):
    """Canonical output of one calculation.

    ``division_totals`` are the source of truth: ``total`` is their sum
    taken in division order. Derived views (schedule, achievements,
    upsells) are computed from a result, never folded back into it.
    """

    model_config = ConfigDict(frozen=True)

    mode: str
    total: CostRange
    line_items: tuple[LineItem, ...]
    division_totals: dict[Division, CostRange]
    room_breakdowns: tuple[RoomBreakdown, ...] | None = None
    out_the_door: OutTheDoor | None = None
    location_multiplier: float = 1.0
    location_name: str | None = None
    gross_sqft: float
    confidence_degraded: bool = False
    warnings: tuple[EstimateWarning, ...] = Field(default_factory=tuple)

    @field_validator("division_totals", mode="after")
    @classmethod
    def divisions_in_order(
        cls, v: dict[Division, CostRange],
    ) -> dict[Division, CostRange]:
        # canonical division order regardless of stored key order
        return {d: v[d] for d in Division if d in v}

    @model_validator(mode="after")
    def total_matches_divisions(self) -> EstimateResult:
        low = sum(r.low for r in self.division_totals.values())
        high = sum(r.high for r in self.division_totals.values())
        if low != self.total.low or high != self.total.high:
            msg = (
                f"Total {self.total.low}/{self.total.high} does not reconcile "
                f"with division totals {low}/{high}"
            )
            raise ValueError(msg)
        return self

    @property
    def customer_total(self) -> CostRange:
        """Out-the-door total when available, else the base total."""
        if self.out_the_door is not None:
            return self.out_the_door.total
        return self.total

    @property
    def per_sqft(self) -> CostRange:
        total = self.customer_total
        return CostRange(low=total.low / self.gross_sqft, high=total.high / self.gross_sqft)

    def to_summary_dict(self) -> dict[str, Any]:
        """Produce a flat summary dict for frontend consumption."""
        from homecost.data.divisions import DIVISION_LABELS
        from homecost.formatting import format_compact, format_cost_range

        top_divisions = sorted(
            self.division_totals.items(), key=lambda kv: kv[1].midpoint, reverse=True,
        )[:3]

        return {
            "mode": self.mode,
            "gross_sqft_formatted": f"{self.gross_sqft:,.0f} SF",
            "total_range_formatted": format_cost_range(self.total),
            "customer_total_formatted": format_cost_range(self.customer_total),
            "customer_midpoint_compact": format_compact(self.customer_total.midpoint),
            "location_name": self.location_name,
            "num_line_items": len(self.line_items),
            "top_divisions": [
                {
                    "division": division.value,
                    "label": DIVISION_LABELS[division],
                    "cost_formatted": format_cost_range(cost),
                }
                for division, cost in top_divisions
            ],
            "confidence_degraded": self.confidence_degraded,
            "num_warnings": len(self.warnings),
        }
