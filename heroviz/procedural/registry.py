"""Variant registry and dispatch by (family, variant id)."""

from dataclasses import dataclass
from typing import Callable, Dict, List, Optional, Union

from pydantic import BaseModel

from heroviz.config.schemas import EngineConfig
from heroviz.core import get_logger

from . import backgrounds, tiles
from .intensity import IntensityScaler, Paint, coerce_intensity
from .presentation import MotionModeAdapter
from .prng import SeedContext
from .sdk import Family, GeometryDescriptor, IntensityLevel, Scene

log = get_logger("heroviz.registry")


@dataclass(frozen=True)
class VariantSpec:
    """A generator/renderer pair for one named style."""

    name: str
    family: Family
    draw: Callable[[SeedContext], BaseModel]
    layout: Callable[[BaseModel, Paint], Scene]

    @property
    def key(self) -> str:
        return f"{self.family.value}.{self.name}"

    def seeds(self, seed: str) -> SeedContext:
        return SeedContext(self.key, seed)

    def generate(
        self,
        seed: Optional[str] = "",
        intensity: Union[IntensityLevel, str] = IntensityLevel.MEDIUM,
        scaler: Optional[IntensityScaler] = None,
    ) -> GeometryDescriptor:
        seed = seed or ""
        level = coerce_intensity(intensity)
        scaler = scaler or IntensityScaler.for_family(self.family)
        geometry = self.draw(self.seeds(seed))
        scene = self.layout(geometry, Paint(scaler, level))
        return GeometryDescriptor(
            variant=self.name,
            family=self.family,
            seed=seed,
            intensity=level,
            geometry=geometry,
            scene=scene,
        )


def _build(family: Family, table) -> Dict[str, VariantSpec]:
    return {
        name: VariantSpec(name=name, family=family, draw=draw, layout=layout)
        for name, (draw, layout) in table.items()
    }


REGISTRY: Dict[Family, Dict[str, VariantSpec]] = {
    Family.BACKGROUND: _build(Family.BACKGROUND, backgrounds.VARIANTS),
    Family.TILE: _build(Family.TILE, tiles.VARIANTS),
}


def _coerce_family(family) -> Optional[Family]:
    if isinstance(family, Family):
        return family
    try:
        return Family(str(family).strip().lower())
    except ValueError:
        return None


def dispatch(variant_id: str, family: Union[Family, str] = Family.BACKGROUND) -> Optional[VariantSpec]:
    """Return the VariantSpec for ``variant_id`` or None when the id is not registered."""
    fam = _coerce_family(family)
    if fam is None:
        log.debug(f"[dispatch] Unknown family {family!r}")
        return None
    spec = REGISTRY[fam].get(variant_id)
    if spec is None:
        log.debug(f"[dispatch] Unknown {fam.value} variant {variant_id!r}")
    return spec


def available_variants(family: Union[Family, str] = Family.BACKGROUND) -> List[str]:
    fam = _coerce_family(family)
    if fam is None:
        return []
    return list(REGISTRY[fam])


def render_visual(
    variant_id: str,
    seed: Optional[str] = "",
    intensity: Union[IntensityLevel, str, None] = None,
    reduced_motion: Optional[bool] = None,
    family: Union[Family, str] = Family.BACKGROUND,
    config: Optional[EngineConfig] = None,
    adapter: Optional[MotionModeAdapter] = None,
):
    """
    One-shot pipeline: dispatch, generate, then pick the motion form.

    Returns None for an unknown variant. ``intensity`` defaults to the
    configured default (medium).
    """
    spec = dispatch(variant_id, family)
    if spec is None:
        return None
    if intensity is None:
        intensity = config.motion.default_intensity if config else IntensityLevel.MEDIUM
    scaler = IntensityScaler.for_family(spec.family, config)
    descriptor = spec.generate(seed, intensity, scaler)
    if adapter is None:
        adapter = MotionModeAdapter.from_config(config) if config else MotionModeAdapter()
    return adapter.present(descriptor, reduced_motion)


__all__ = [
    "REGISTRY",
    "VariantSpec",
    "available_variants",
    "dispatch",
    "render_visual",
]
