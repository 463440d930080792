"""Intensity presets: opacity multipliers and stroke offsets per family."""

from typing import Iterable, Optional, Union

from heroviz.config.schemas import (
    DEFAULT_BACKGROUND_TABLE,
    DEFAULT_TILE_TABLE,
    EngineConfig,
    IntensityTable,
)
from heroviz.core import get_logger

from .sdk import Family, IntensityLevel, Track

log = get_logger("heroviz.intensity")

DEFAULT_INTENSITY = IntensityLevel.MEDIUM


def coerce_intensity(value: Union[IntensityLevel, str, None]) -> IntensityLevel:
    """Resolve a level name; anything unrecognised degrades to medium."""
    if isinstance(value, IntensityLevel):
        return value
    if isinstance(value, str):
        try:
            return IntensityLevel(value.strip().lower())
        except ValueError:
            pass
    if value is not None:
        log.warning(f"[intensity] Unknown intensity {value!r}, using {DEFAULT_INTENSITY.value}")
    return DEFAULT_INTENSITY


class IntensityScaler:
    """Maps base opacity/stroke values through one family's intensity table."""

    def __init__(self, table: IntensityTable = DEFAULT_BACKGROUND_TABLE):
        self.table = table

    @classmethod
    def for_family(cls, family: Family, config: Optional[EngineConfig] = None) -> "IntensityScaler":
        if config is not None:
            tables = config.intensity
            return cls(tables.tile if family == Family.TILE else tables.background)
        return cls(DEFAULT_TILE_TABLE if family == Family.TILE else DEFAULT_BACKGROUND_TABLE)

    def _step(self, level):
        return getattr(self.table, coerce_intensity(level).value)

    def scale_opacity(self, base: float, level) -> float:
        return min(1.0, max(0.0, base * self._step(level).opacity))

    def scale_stroke(self, base: float, level) -> float:
        return max(0.0, base + self._step(level).stroke)


_BACKGROUND_SCALER = IntensityScaler(DEFAULT_BACKGROUND_TABLE)


def scale_opacity(base: float, level) -> float:
    return _BACKGROUND_SCALER.scale_opacity(base, level)


def scale_stroke(base: float, level) -> float:
    return _BACKGROUND_SCALER.scale_stroke(base, level)


class Paint:
    """An IntensityScaler bound to one level, used by variant layouts."""

    def __init__(self, scaler: IntensityScaler, level: IntensityLevel):
        self.scaler = scaler
        self.level = level

    def opacity(self, base: float) -> float:
        return self.scaler.scale_opacity(base, self.level)

    def stroke(self, base: float) -> float:
        return self.scaler.scale_stroke(base, self.level)

    def fade(self, values: Iterable[float], rest: float, initial: Optional[float] = None) -> Track:
        """Opacity track with every value scaled for this level."""
        return motion(
            "opacity",
            [self.opacity(v) for v in values],
            self.opacity(rest),
            None if initial is None else self.opacity(initial),
        )


def motion(
    prop: str,
    values: Iterable[float],
    rest: float,
    initial: Optional[float] = None,
    clamp: bool = True,
) -> Track:
    """
    Build a track; a keyframed track's rest value is clamped into its envelope
    so the static snapshot sits inside the animated range. ``clamp=False``
    keeps an explicit resting state such as a fully drawn path.
    """
    values = tuple(float(v) for v in values)
    if clamp and len(values) > 1:
        rest = min(max(rest, min(values)), max(values))
    return Track(prop=prop, values=values, rest=float(rest), initial=initial)


__all__ = [
    "DEFAULT_INTENSITY",
    "IntensityScaler",
    "Paint",
    "coerce_intensity",
    "motion",
    "scale_opacity",
    "scale_stroke",
]
