"""Versioned lead snapshots, shared estimates and side-by-side comparison.

Lead records embed the homeowner's input tagged with a schema version so
leads captured by the earlier four-step wizard (v1) stay readable next
to whole-house leads (v2). The stored form of a v2 snapshot is the input
itself plus a ``_version`` marker; a payload without any marker is a v1
wizard payload. ``migrate_to_current`` turns either version into a
WholeHouseInput.
"""

from __future__ import annotations

import logging
import uuid
from typing import TYPE_CHECKING, Annotated, Any, Literal

from pydantic import BaseModel, ConfigDict, Field, TypeAdapter, ValidationError

from homecost.exceptions import InvalidInputError, RecordVersionError
from homecost.models.enums import (
    ArchStyle,
    ElevatorType,
    FinishTier,
    PoolType,
    RoofType,
    SmartHomeLevel,
    WindowGrade,
)
from homecost.models.estimate import CostRange, EstimateResult
from homecost.models.house import WholeHouseInput
from homecost.numeric import round_half_up

if TYPE_CHECKING:
    from collections.abc import Mapping, Sequence

    from homecost.engine import EstimationEngine

logger = logging.getLogger(__name__)

CURRENT_SCHEMA_VERSION = "v2"
VERSION_MARKER = "_version"

# Legacy wizard tiers expressed in the current finish scale. ``standard``
# follows the home's overall finish level.
_LEGACY_KITCHEN_TIERS: dict[str, FinishTier | None] = {
    "standard": None,
    "chefs": FinishTier.PREMIUM,
    "gourmet": FinishTier.LUXURY,
}
_LEGACY_BATH_TIERS: dict[str, FinishTier | None] = {
    "standard": None,
    "spa": FinishTier.PREMIUM,
    "resort": FinishTier.LUXURY,
}
_LEGACY_ROOFS: dict[str, RoofType] = {
    "shingle": RoofType.SHINGLE_PREMIUM,
    "metal": RoofType.METAL_STANDING,
    "tile": RoofType.CONCRETE_TILE,
}
_LEGACY_WINDOWS: dict[str, WindowGrade] = {
    "standard": WindowGrade.STANDARD,
    "impact": WindowGrade.IMPACT,
    "hurricane": WindowGrade.HURRICANE,
}


class LegacyEstimateParams(BaseModel):
    """Input shape of the legacy four-step estimator wizard."""

    model_config = ConfigDict(frozen=True)

    square_footage: float = Field(gt=0)
    stories: int = Field(ge=1, le=3, default=1)
    bedrooms: int = Field(ge=0, default=3)
    bathrooms: float = Field(ge=0, default=2)
    style: str = "coastal"
    finish_level: FinishTier = FinishTier.STANDARD
    special_features: list[str] = Field(default_factory=list)
    kitchen_tier: Literal["standard", "chefs", "gourmet"] = "standard"
    bath_tier: Literal["standard", "spa", "resort"] = "standard"
    roofing_type: Literal["shingle", "metal", "tile"] = "shingle"
    window_grade: Literal["standard", "impact", "hurricane"] = "standard"


class LeadSnapshotV1(BaseModel):
    model_config = ConfigDict(frozen=True)

    schema_version: Literal["v1"] = "v1"
    params: LegacyEstimateParams


class LeadSnapshotV2(BaseModel):
    model_config = ConfigDict(frozen=True)

    schema_version: Literal["v2"] = "v2"
    input: WholeHouseInput


LeadSnapshot = Annotated[
    LeadSnapshotV1 | LeadSnapshotV2, Field(discriminator="schema_version"),
]

_SNAPSHOT_ADAPTER = TypeAdapter(LeadSnapshot)


def parse_lead_snapshot(raw: Mapping[str, Any]) -> LeadSnapshotV1 | LeadSnapshotV2:
    """Interpret a stored ``estimate_params`` payload.

    Accepts the tagged form (``schema_version``), the stored form with a
    ``_version`` marker, and unmarked legacy wizard payloads.

    Raises:
        RecordVersionError: If the payload names an unknown version.
        InvalidInputError: If the payload does not fit its version's shape.
    """
    try:
        if "schema_version" in raw:
            version = raw["schema_version"]
            if version not in ("v1", "v2"):
                msg = f"Unknown lead snapshot version {version!r}"
                raise RecordVersionError(msg)
            return _SNAPSHOT_ADAPTER.validate_python(dict(raw))

        if VERSION_MARKER in raw:
            version = raw[VERSION_MARKER]
            if version != CURRENT_SCHEMA_VERSION:
                msg = f"Unknown lead snapshot version {version!r}"
                raise RecordVersionError(msg)
            fields = {k: v for k, v in raw.items() if k != VERSION_MARKER}
            return LeadSnapshotV2(input=WholeHouseInput.model_validate(fields))

        return LeadSnapshotV1(params=LegacyEstimateParams.model_validate(dict(raw)))
    except ValidationError as exc:
        msg = f"Lead snapshot does not match its schema: {exc.error_count()} error(s)"
        raise InvalidInputError(msg) from exc


def snapshot_storage_dict(snapshot: LeadSnapshotV1 | LeadSnapshotV2) -> dict[str, Any]:
    """Stored ``estimate_params`` form of a snapshot."""
    if isinstance(snapshot, LeadSnapshotV2):
        stored: dict[str, Any] = {VERSION_MARKER: snapshot.schema_version}
        stored.update(snapshot.input.model_dump(mode="json"))
        return stored
    return snapshot.params.model_dump(mode="json")


def _legacy_style(style: str) -> ArchStyle:
    try:
        return ArchStyle(style.strip().lower())
    except ValueError:
        logger.warning("Legacy style %r has no current equivalent; using coastal", style)
        return ArchStyle.COASTAL


def migrate_to_current(snapshot: LeadSnapshotV1 | LeadSnapshotV2) -> WholeHouseInput:
    """Express any snapshot version as a current WholeHouseInput."""
    if isinstance(snapshot, LeadSnapshotV2):
        return snapshot.input

    params = snapshot.params
    features = set(params.special_features)
    elevator = ElevatorType.NONE
    if "elevator" in features:
        elevator = ElevatorType.THREE_STOP if params.stories >= 3 else ElevatorType.TWO_STOP

    return WholeHouseInput(
        sqft=params.square_footage,
        stories=params.stories,
        bedrooms=params.bedrooms,
        bathrooms=int(round_half_up(params.bathrooms)),
        arch_style=_legacy_style(params.style),
        finish_level=params.finish_level,
        kitchen_tier=_LEGACY_KITCHEN_TIERS[params.kitchen_tier],
        bathroom_tier=_LEGACY_BATH_TIERS[params.bath_tier],
        roof_type=_LEGACY_ROOFS[params.roofing_type],
        window_grade=_LEGACY_WINDOWS[params.window_grade],
        pool=PoolType.STANDARD if "pool" in features else PoolType.NONE,
        outdoor_kitchen="outdoor_kitchen" in features,
        smart_home=(
            SmartHomeLevel.STANDARD if "smart_home" in features else SmartHomeLevel.NONE
        ),
        generator="generator" in features,
        elevator=elevator,
    )


class LeadEstimateRecord(BaseModel):
    """Lead-capture record: contact details plus the priced snapshot."""

    model_config = ConfigDict(frozen=True)

    contact_name: str
    contact_email: str
    contact_phone: str | None = None
    contact_message: str | None = None
    snapshot: LeadSnapshot
    estimate_low: float
    estimate_high: float
    division_totals: dict[str, CostRange] = Field(default_factory=dict)
    status: str = "new"

    @classmethod
    def from_estimate(
        cls,
        house: WholeHouseInput,
        result: EstimateResult,
        contact_name: str,
        contact_email: str,
        contact_phone: str | None = None,
        contact_message: str | None = None,
    ) -> LeadEstimateRecord:
        """Capture a lead for a whole-house estimate (current schema)."""
        total = result.customer_total
        return cls(
            contact_name=contact_name,
            contact_email=contact_email,
            contact_phone=contact_phone,
            contact_message=contact_message,
            snapshot=LeadSnapshotV2(input=house),
            estimate_low=total.low,
            estimate_high=total.high,
            division_totals={d.value: r for d, r in result.division_totals.items()},
        )

    def current_input(self) -> WholeHouseInput:
        return migrate_to_current(self.snapshot)

    def to_storage_dict(self) -> dict[str, Any]:
        """Row for the lead store, with the snapshot in its stored form."""
        return {
            "contact_name": self.contact_name,
            "contact_email": self.contact_email,
            "contact_phone": self.contact_phone,
            "contact_message": self.contact_message,
            "estimate_params": snapshot_storage_dict(self.snapshot),
            "estimate_low": self.estimate_low,
            "estimate_high": self.estimate_high,
            "estimate_breakdown": [
                {"division": division, "low": cost.low, "high": cost.high}
                for division, cost in self.division_totals.items()
            ],
            "status": self.status,
        }


class SharedEstimate(BaseModel):
    """An estimate shared by link: the input and its totals at share time."""

    model_config = ConfigDict(frozen=True)

    id: str = Field(default_factory=lambda: uuid.uuid4().hex)
    input: WholeHouseInput
    estimate_low: float
    estimate_high: float

    @classmethod
    def from_estimate(
        cls, house: WholeHouseInput, result: EstimateResult,
    ) -> SharedEstimate:
        total = result.customer_total
        return cls(input=house, estimate_low=total.low, estimate_high=total.high)

    @classmethod
    def from_storage(cls, row: Mapping[str, Any]) -> SharedEstimate:
        return cls(
            id=str(row["id"]),
            input=WholeHouseInput.model_validate(row["estimate_params"]),
            estimate_low=row["estimate_low"],
            estimate_high=row["estimate_high"],
        )

    def to_storage_dict(self) -> dict[str, Any]:
        return {
            "id": self.id,
            "estimate_params": self.input.model_dump(mode="json"),
            "estimate_low": self.estimate_low,
            "estimate_high": self.estimate_high,
        }


class ComparedEstimate(BaseModel):
    """One shared estimate re-priced against the current cost table."""

    model_config = ConfigDict(frozen=True)

    share_id: str
    result: EstimateResult
    shared_total: CostRange
    # current pricing differs from the totals stored at share time
    repriced: bool


class EstimateComparison(BaseModel):
    model_config = ConfigDict(frozen=True)

    estimates: tuple[ComparedEstimate, ...]
    differing_fields: tuple[str, ...]

    @property
    def cheapest(self) -> ComparedEstimate:
        return min(self.estimates, key=lambda e: e.result.customer_total.midpoint)


def compare_estimates(
    engine: EstimationEngine,
    shared: Sequence[SharedEstimate],
    tolerance: float = 0.5,
) -> EstimateComparison:
    """Re-price shared estimates side by side.

    Each estimate is recomputed from its stored input, so the comparison
    reflects current pricing; ``repriced`` marks those whose totals moved
    by more than *tolerance* dollars since they were shared.
    """
    if not shared:
        msg = "compare_estimates needs at least one shared estimate"
        raise InvalidInputError(msg)

    compared: list[ComparedEstimate] = []
    for item in shared:
        result = engine.estimate_house(item.input)
        total = result.customer_total
        compared.append(
            ComparedEstimate(
                share_id=item.id,
                result=result,
                shared_total=CostRange(low=item.estimate_low, high=item.estimate_high),
                repriced=(
                    abs(total.low - item.estimate_low) > tolerance
                    or abs(total.high - item.estimate_high) > tolerance
                ),
            )
        )

    dumps = [item.input.model_dump() for item in shared]
    differing = tuple(
        name
        for name in WholeHouseInput.model_fields
        if any(d[name] != dumps[0][name] for d in dumps[1:])
    )
    return EstimateComparison(estimates=tuple(compared), differing_fields=differing)
