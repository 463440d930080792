from __future__ import annotations

from typing import Literal, Optional

from pydantic import BaseModel, ConfigDict, Field, model_validator

# Shared literals
IntensityName = Literal["subtle", "medium", "bold"]
LogLevel = Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]

INTENSITY_ORDER = ("subtle", "medium", "bold")


class IntensityStep(BaseModel):
    """One row of an intensity table: opacity multiplier and stroke offset."""

    model_config = ConfigDict(extra="allow", frozen=True)

    opacity: float = Field(1.0, ge=0.0, le=10.0)
    stroke: float = Field(0.0, ge=0.0, le=10.0)


class IntensityTable(BaseModel):
    model_config = ConfigDict(extra="allow", frozen=True)

    subtle: IntensityStep = IntensityStep(opacity=1.0, stroke=0.0)
    medium: IntensityStep = IntensityStep(opacity=1.5, stroke=0.25)
    bold: IntensityStep = IntensityStep(opacity=2.25, stroke=0.5)

    @model_validator(mode="after")
    def _check_monotone(self) -> "IntensityTable":
        steps = [getattr(self, name) for name in INTENSITY_ORDER]
        for lower, upper in zip(steps, steps[1:]):
            if upper.opacity < lower.opacity or upper.stroke < lower.stroke:
                raise ValueError(
                    "intensity table must be non-decreasing from subtle to bold"
                )
        return self


DEFAULT_BACKGROUND_TABLE = IntensityTable()
DEFAULT_TILE_TABLE = IntensityTable(
    subtle=IntensityStep(opacity=0.6, stroke=0.0),
    medium=IntensityStep(opacity=1.0, stroke=0.0),
    bold=IntensityStep(opacity=1.4, stroke=0.0),
)


class IntensityConfig(BaseModel):
    model_config = ConfigDict(extra="allow")

    background: IntensityTable = DEFAULT_BACKGROUND_TABLE
    tile: IntensityTable = DEFAULT_TILE_TABLE


class MotionConfig(BaseModel):
    model_config = ConfigDict(extra="allow")

    # Treat an unresolved reduced-motion preference as "reduce"
    pending_as_static: bool = True
    default_intensity: IntensityName = "medium"


class CacheConfig(BaseModel):
    model_config = ConfigDict(extra="allow")

    enabled: bool = True
    max_entries: int = Field(64, ge=1, le=4096)


class LoggingConfig(BaseModel):
    model_config = ConfigDict(extra="allow")

    level: LogLevel = "INFO"
    log_file: Optional[str] = None


class EngineConfig(BaseModel):
    model_config = ConfigDict(extra="allow")

    intensity: IntensityConfig = IntensityConfig()
    motion: MotionConfig = MotionConfig()
    cache: CacheConfig = CacheConfig()
    logging: LoggingConfig = LoggingConfig()
    profile: Optional[str] = None
