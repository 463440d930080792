"""
Motion-mode presentation of a geometry descriptor.

``AnimatedPresentation`` and ``StaticPresentation`` wrap the very same
descriptor; only what a renderer reads from it differs. Animated consumers
iterate ``keyframe_targets()``; static consumers read ``snapshot()``, which
resolves every track to its rest value.
"""

from typing import Annotated, List, Literal, Optional, Tuple, Union

from pydantic import BaseModel, ConfigDict, Field

from heroviz.core import get_logger

from .sdk import Attrs, FrozenAttrs, GeometryDescriptor, MotionMode, Shape, ShapeTag, Timing

log = get_logger("heroviz.presentation")


class AnimationTarget(BaseModel):
    """One track flattened for an external animation runtime."""

    model_config = ConfigDict(frozen=True)

    path: Tuple[int, ...]
    prop: str
    values: Tuple[float, ...]
    initial: Optional[float] = None
    timing: Optional[Timing] = None


class ResolvedShape(BaseModel):
    """A shape with all tracks collapsed to their rest values."""

    model_config = ConfigDict(frozen=True)

    tag: ShapeTag
    attrs: Attrs = Field(default_factory=FrozenAttrs)
    children: Tuple["ResolvedShape", ...] = ()
    text: Optional[str] = None


ResolvedShape.model_rebuild()


def resolve_static(shape: Shape) -> ResolvedShape:
    attrs = dict(shape.attrs)
    for track in shape.tracks:
        attrs[track.prop] = track.rest
    return ResolvedShape(
        tag=shape.tag,
        attrs=attrs,
        children=tuple(resolve_static(c) for c in shape.children),
        text=shape.text,
    )


def _collect_targets(shape: Shape, path: Tuple[int, ...], out: List[AnimationTarget]) -> None:
    for track in shape.tracks:
        out.append(
            AnimationTarget(
                path=path,
                prop=track.prop,
                values=track.values,
                initial=track.initial,
                timing=None if track.is_constant else shape.timing,
            )
        )
    for idx, child in enumerate(shape.children):
        _collect_targets(child, path + (idx,), out)


class AnimatedPresentation(BaseModel):
    model_config = ConfigDict(frozen=True)

    mode: Literal["animated"] = "animated"
    descriptor: GeometryDescriptor

    @property
    def scene(self):
        return self.descriptor.scene

    def keyframe_targets(self) -> List[AnimationTarget]:
        out: List[AnimationTarget] = []
        for idx, shape in enumerate(self.descriptor.scene.shapes):
            _collect_targets(shape, (idx,), out)
        return out


class StaticPresentation(BaseModel):
    model_config = ConfigDict(frozen=True)

    mode: Literal["static"] = "static"
    descriptor: GeometryDescriptor

    @property
    def scene(self):
        return self.descriptor.scene

    def snapshot(self) -> Tuple[ResolvedShape, ...]:
        return tuple(resolve_static(s) for s in self.descriptor.scene.shapes)


Presentation = Annotated[
    Union[AnimatedPresentation, StaticPresentation], Field(discriminator="mode")
]


def geometry_of(presentation) -> BaseModel:
    return presentation.descriptor.geometry


class MotionModeAdapter:
    """
    Chooses animated or static form once per render pass.

    ``reduced_motion`` is tri-state: True/False once the host knows the user's
    preference, None while it does not (e.g. before mount). Pending is treated
    as static unless ``pending_as_static`` is False.
    """

    def __init__(self, pending_as_static: bool = True):
        self.pending_as_static = pending_as_static

    @classmethod
    def from_config(cls, cfg) -> "MotionModeAdapter":
        return cls(pending_as_static=cfg.motion.pending_as_static)

    def mode_for(self, reduced_motion: Optional[bool]) -> MotionMode:
        if reduced_motion is None:
            return MotionMode.STATIC if self.pending_as_static else MotionMode.ANIMATED
        return MotionMode.STATIC if reduced_motion else MotionMode.ANIMATED

    def present(
        self, descriptor: GeometryDescriptor, reduced_motion: Optional[bool]
    ) -> Union[AnimatedPresentation, StaticPresentation]:
        mode = self.mode_for(reduced_motion)
        log.debug(f"[motion] {descriptor.family.value}.{descriptor.variant} -> {mode.value}")
        if mode == MotionMode.STATIC:
            return StaticPresentation(descriptor=descriptor)
        return AnimatedPresentation(descriptor=descriptor)


__all__ = [
    "AnimatedPresentation",
    "AnimationTarget",
    "MotionModeAdapter",
    "Presentation",
    "ResolvedShape",
    "StaticPresentation",
    "geometry_of",
    "resolve_static",
]
