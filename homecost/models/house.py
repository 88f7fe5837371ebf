"""Input models for the homecost estimation engine."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field, field_validator

from homecost.models.enums import (
    AppliancePackage,
    ArchStyle,
    CladdingType,
    CountertopMaterial,
    DrivewayType,
    ElevatorType,
    FenceType,
    FinishTier,
    FireplaceType,
    FlooringType,
    LandscapingTier,
    PoolType,
    RoofType,
    SewerType,
    SmartHomeLevel,
    SolarOption,
    WaterSource,
    WindowGrade,
)


class WholeHouseInput(BaseModel):
    """Flat specification of a custom home for the whole-house estimator.

    Frozen: every what-if scenario is a new value built with
    ``model_copy(update=...)``, never an in-place edit.
    """

    model_config = ConfigDict(frozen=True)

    # Home basics
    sqft: float = Field(gt=0)
    stories: int = Field(ge=1, le=3, default=1)
    bedrooms: int = Field(ge=0, default=3)
    bathrooms: int = Field(ge=0, default=2)
    garage_spaces: int = Field(ge=0, le=3, default=2)
    lot_size_acres: float = Field(ge=0, default=0.25)
    ceiling_height_ft: int = Field(default=10)
    sewer_type: SewerType = SewerType.CITY
    water_source: WaterSource = WaterSource.CITY
    flood_zone: bool = False
    # empty resolves to the configured default location
    location: str = ""
    lot_address: str = ""

    # Style & exterior
    arch_style: ArchStyle = ArchStyle.COASTAL
    cladding_type: CladdingType = CladdingType.STUCCO
    roof_type: RoofType = RoofType.SHINGLE_PREMIUM
    window_grade: WindowGrade = WindowGrade.IMPACT
    elevated_construction: bool = False

    # Interior
    finish_level: FinishTier = FinishTier.STANDARD
    kitchen_tier: FinishTier | None = None
    bathroom_tier: FinishTier | None = None
    flooring_type: FlooringType = FlooringType.ENGINEERED
    countertop_material: CountertopMaterial = CountertopMaterial.GRANITE
    appliance_package: AppliancePackage = AppliancePackage.MID

    # Special features
    pool: PoolType = PoolType.NONE
    elevator: ElevatorType = ElevatorType.NONE
    outdoor_kitchen: bool = False
    fireplace: FireplaceType = FireplaceType.NONE
    smart_home: SmartHomeLevel = SmartHomeLevel.NONE
    generator: bool = False
    seawall: bool = False
    deck_sqft: float = Field(ge=0, default=0.0)
    screened_porch: bool = False
    solar_panels: SolarOption = SolarOption.NONE
    driveway_type: DrivewayType = DrivewayType.CONCRETE
    landscaping_tier: LandscapingTier = LandscapingTier.BASIC
    fence_type: FenceType = FenceType.NONE
    water_filtration: bool = False

    @field_validator("ceiling_height_ft")
    @classmethod
    def ceiling_height_is_offered(cls, v: int) -> int:
        if v not in (9, 10, 12):
            msg = f"ceiling_height_ft must be 9, 10 or 12, got {v}"
            raise ValueError(msg)
        return v

    @property
    def effective_kitchen_tier(self) -> FinishTier:
        return self.kitchen_tier or self.finish_level

    @property
    def effective_bathroom_tier(self) -> FinishTier:
        return self.bathroom_tier or self.finish_level


class RoomSelection(BaseModel):
    """Finish selections for one room instance in the room-by-room wizard."""

    model_config = ConfigDict(frozen=True)

    room_id: str
    name: str | None = None
    category_selections: dict[str, FinishTier] = Field(default_factory=dict)
    area_sqft: float | None = Field(default=None, ge=0)
