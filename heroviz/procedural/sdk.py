#!/usr/bin/env python3
"""
Core SDK for procedural hero visuals

This module provides the single source of truth for enums, canvas constants and
the immutable models every variant generator produces. Generators, the motion
adapter, the registry and the SVG preview all import from here.
"""

import hashlib
from enum import Enum
from typing import Annotated, Dict, Optional, Tuple, Union

from pydantic import AfterValidator, BaseModel, ConfigDict, Field, SerializeAsAny


# ============================================================================
# CONSTANTS
# ============================================================================

BACKGROUND_W = 1200
BACKGROUND_H = 800
TILE_W = 600
TILE_H = 420

# Default loop length for background layers (seconds)
BACKGROUND_BASE_DURATION = 18.0


class Family(str, Enum):
    BACKGROUND = "background"
    TILE = "tile"


class IntensityLevel(str, Enum):
    SUBTLE = "subtle"
    MEDIUM = "medium"
    BOLD = "bold"


class MotionMode(str, Enum):
    ANIMATED = "animated"
    STATIC = "static"


class Ease(str, Enum):
    EASE_IN_OUT = "easeInOut"
    LINEAR = "linear"


class RepeatType(str, Enum):
    LOOP = "loop"
    MIRROR = "mirror"


class ShapeTag(str, Enum):
    GROUP = "g"
    PATH = "path"
    CIRCLE = "circle"
    RECT = "rect"
    LINE = "line"
    POLYGON = "polygon"
    TEXT = "text"


VIEWBOXES: Dict[Family, Tuple[int, int]] = {
    Family.BACKGROUND: (BACKGROUND_W, BACKGROUND_H),
    Family.TILE: (TILE_W, TILE_H),
}

INTENSITY_LEVELS = (IntensityLevel.SUBTLE, IntensityLevel.MEDIUM, IntensityLevel.BOLD)


# ============================================================================
# SCENE MODELS
# ============================================================================

AttrValue = Union[float, str]


class FrozenAttrs(dict):
    """Read-only SVG attribute mapping; copy with ``dict(attrs)`` to edit."""

    def _readonly(self, *args, **kwargs):
        raise TypeError("shape attributes are read-only")

    __setitem__ = __delitem__ = __ior__ = _readonly
    clear = pop = popitem = setdefault = update = _readonly

    def __reduce__(self):
        return (FrozenAttrs, (dict(self),))


Attrs = Annotated[Dict[str, AttrValue], AfterValidator(FrozenAttrs)]


class Timing(BaseModel):
    """Loop timing handed to the external animation runtime."""

    model_config = ConfigDict(frozen=True)

    duration: float = Field(..., gt=0)
    delay: float = Field(0.0, ge=0)
    ease: Ease = Ease.EASE_IN_OUT
    repeat: RepeatType = RepeatType.LOOP


class Track(BaseModel):
    """
    One animated property of a shape.

    ``values`` are the keyframe targets for the animated form; ``rest`` is the
    value the static snapshot shows; ``initial`` is the pre-animation value.
    """

    model_config = ConfigDict(frozen=True)

    prop: str
    values: Tuple[float, ...] = Field(..., min_length=1)
    rest: float
    initial: Optional[float] = None

    @property
    def is_constant(self) -> bool:
        return len(self.values) == 1


class Shape(BaseModel):
    model_config = ConfigDict(frozen=True)

    tag: ShapeTag
    attrs: Attrs = Field(default_factory=FrozenAttrs)
    tracks: Tuple[Track, ...] = ()
    timing: Optional[Timing] = None
    children: Tuple["Shape", ...] = ()
    text: Optional[str] = None

    def track(self, prop: str) -> Optional[Track]:
        for t in self.tracks:
            if t.prop == prop:
                return t
        return None

    def walk(self):
        """Yield this shape and all descendants depth-first."""
        yield self
        for child in self.children:
            yield from child.walk()


class GradientStop(BaseModel):
    model_config = ConfigDict(frozen=True)

    offset: float = Field(..., ge=0, le=100)
    color: str
    opacity: float = Field(1.0, ge=0, le=1)


class Gradient(BaseModel):
    model_config = ConfigDict(frozen=True)

    id: str
    kind: str = "linear"
    stops: Tuple[GradientStop, ...]
    attrs: Attrs = Field(default_factory=FrozenAttrs)


class Scene(BaseModel):
    """Shapes derived from one geometry model with intensity applied."""

    model_config = ConfigDict(frozen=True)

    variant: str
    family: Family
    viewbox: Tuple[int, int]
    defs: Tuple[Gradient, ...] = ()
    shapes: Tuple[Shape, ...] = ()

    def walk(self):
        for shape in self.shapes:
            yield from shape.walk()


class GeometryDescriptor(BaseModel):
    """
    Immutable output of one variant for one (seed, intensity).

    ``geometry`` holds the drawn values (counts, positions, timings) and is
    independent of intensity and motion mode; ``scene`` is the shape tree built
    from it with intensity-scaled paint.
    """

    model_config = ConfigDict(frozen=True)

    variant: str
    family: Family
    seed: str
    intensity: IntensityLevel
    geometry: SerializeAsAny[BaseModel]
    scene: Scene

    def canonical_json(self) -> str:
        return self.model_dump_json()

    def fingerprint(self) -> str:
        return hashlib.sha1(self.canonical_json().encode("utf-8")).hexdigest()


Shape.model_rebuild()


# ============================================================================
# HELPER FUNCTIONS
# ============================================================================


def fmt_num(value: float) -> str:
    """Compact, stable number formatting for path data."""
    text = f"{float(value):.2f}".rstrip("0").rstrip(".")
    return "0" if text in ("", "-0") else text


def transition(duration: float, delay: float = 0.0, family: Family = Family.BACKGROUND,
               ease: Ease = Ease.EASE_IN_OUT) -> Timing:
    repeat = RepeatType.MIRROR if family == Family.BACKGROUND else RepeatType.LOOP
    return Timing(duration=duration, delay=max(0.0, delay), ease=ease, repeat=repeat)


# ============================================================================
# EXPORTS
# ============================================================================

__all__ = [
    # Constants
    'BACKGROUND_W', 'BACKGROUND_H', 'TILE_W', 'TILE_H', 'BACKGROUND_BASE_DURATION',
    'VIEWBOXES', 'INTENSITY_LEVELS',

    # Enums
    'Family', 'IntensityLevel', 'MotionMode', 'Ease', 'RepeatType', 'ShapeTag',

    # Models
    'AttrValue', 'Attrs', 'FrozenAttrs',
    'Timing', 'Track', 'Shape', 'GradientStop', 'Gradient', 'Scene', 'GeometryDescriptor',

    # Helper functions
    'fmt_num', 'transition',
]
