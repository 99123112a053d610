from typing import Annotated, Literal

from pydantic import BaseModel, ConfigDict, Field, ValidationInfo, field_validator


class LogModel(BaseModel):
    model_config = ConfigDict(extra="forbid")
    level: Literal["DEBUG", "INFO", "WARNING", "ERROR"] = "INFO"
    debug: bool = False
    sample_every: int = 1


class ViewportModel(BaseModel):
    model_config = ConfigDict(extra="forbid")
    scale: float = 10.0
    center_long: float = -123.153946
    center_lat: float = 49.257828
    zoom_base: float = 1.003  # per unit of scroll delta

    @field_validator("scale", "zoom_base")
    @classmethod
    def _positive(cls, v: float, info: ValidationInfo) -> float:
        if v <= 0:
            raise ValueError(f"{info.field_name} must be > 0")
        return v

    @field_validator("center_lat")
    @classmethod
    def _lat_range(cls, v: float) -> float:
        # cos(lat) divides the horizontal axis
        if not -90.0 < v < 90.0:
            raise ValueError("center_lat must be strictly between -90 and 90")
        return v


class PickerModel(BaseModel):
    model_config = ConfigDict(extra="forbid")
    resolution: int = 11
    scale_multiplier: float = 50.0
    min_scale: float = 50.0
    samples_per_segment: int = 10

    @field_validator("resolution")
    @classmethod
    def _odd(cls, v: int) -> int:
        # the ring scan needs a single center cell
        if v < 1 or v % 2 == 0:
            raise ValueError("resolution must be a positive odd number")
        return v

    @field_validator("scale_multiplier", "min_scale", "samples_per_segment")
    @classmethod
    def _positive(cls, v, info: ValidationInfo):
        if v <= 0:
            raise ValueError(f"{info.field_name} must be > 0")
        return v


# ---------------- PLANNERS --------------------


class PlannerAStarModel(BaseModel):
    model_config = ConfigDict(extra="forbid")
    kind: Literal["astar"] = "astar"
    max_iterations: int = 10_000_000

    @field_validator("max_iterations")
    @classmethod
    def _positive(cls, v: int) -> int:
        if v <= 0:
            raise ValueError("max_iterations must be > 0")
        return v


PlannerUnion = Annotated[PlannerAStarModel, Field(discriminator="kind")]


# ---------------- RASTERIZERS --------------------


class RasterizerBucketedModel(BaseModel):
    model_config = ConfigDict(extra="forbid")
    kind: Literal["bucketed"] = "bucketed"
    cell_size_deg: float = 0.01

    @field_validator("cell_size_deg")
    @classmethod
    def _positive(cls, v: float) -> float:
        if v <= 0:
            raise ValueError("cell_size_deg must be > 0")
        return v


class RasterizerScanModel(BaseModel):
    model_config = ConfigDict(extra="forbid")
    kind: Literal["scan"] = "scan"


RasterizerUnion = Annotated[
    RasterizerBucketedModel | RasterizerScanModel, Field(discriminator="kind")
]


# ------------------------------------------------------------------


class HighlightModel(BaseModel):
    model_config = ConfigDict(extra="forbid")
    pattern: str
    color: tuple[float, float, float] = (0.0, 0.0, 0.0)

    @field_validator("color")
    @classmethod
    def _unit_range(cls, v: tuple[float, float, float]) -> tuple[float, float, float]:
        if any(c < 0.0 or c > 1.0 for c in v):
            raise ValueError("color channels must be within [0, 1]")
        return v


class MechanicsModel(BaseModel):
    model_config = ConfigDict(extra="forbid")
    picker: PickerModel = Field(default_factory=PickerModel)
    planner: PlannerUnion = Field(default_factory=PlannerAStarModel)
    rasterizer: RasterizerUnion = Field(default_factory=RasterizerBucketedModel)


class AppModel(BaseModel):
    model_config = ConfigDict(extra="forbid")
    name: str = "path-planner"
    run_id: str = "local"
    log: LogModel = LogModel()
    viewport: ViewportModel = ViewportModel()
    mechanics: MechanicsModel = Field(default_factory=MechanicsModel)
    highlights: list[HighlightModel] = Field(default_factory=list)
    debug: bool = False  # start with the explored-set path view
