"""Models for views derived from an estimate: schedule, badges, financing, upsells."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field, model_validator


class SchedulePhase(BaseModel):
    """One construction phase with its duration."""

    model_config = ConfigDict(frozen=True)

    id: str
    name: str
    duration_weeks: float = Field(ge=0)
    description: str


class ScheduleResult(BaseModel):
    """Ordered construction phases and their totals."""

    model_config = ConfigDict(frozen=True)

    phases: tuple[SchedulePhase, ...]
    total_weeks: float
    total_months: float

    @model_validator(mode="after")
    def total_is_sum_of_phases(self) -> ScheduleResult:
        expected = sum(p.duration_weeks for p in self.phases)
        if expected != self.total_weeks:
            msg = f"total_weeks {self.total_weeks} != sum of phases {expected}"
            raise ValueError(msg)
        return self

    def phase(self, phase_id: str) -> SchedulePhase:
        for p in self.phases:
            if p.id == phase_id:
                return p
        msg = f"No schedule phase '{phase_id}'"
        raise KeyError(msg)


class Achievement(BaseModel):
    """A badge unlocked by the current selections."""

    model_config = ConfigDict(frozen=True)

    id: str
    icon: str
    label: str
    description: str


class FinancingResult(BaseModel):
    """Fixed-rate amortization figures for a home price."""

    model_config = ConfigDict(frozen=True)

    home_price: float
    down_payment: float
    loan_amount: float
    num_payments: int
    monthly_payment: float
    total_interest: float


class UpsellSuggestion(BaseModel):
    """A single-change upgrade and its marginal cost."""

    model_config = ConfigDict(frozen=True)

    id: str
    title: str
    description: str
    changes: dict[str, str | bool]
    additional_cost: float
    monthly_impact: float
