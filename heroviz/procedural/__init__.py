"""
Hero Visuals - Procedural Package

Seeded, deterministic generators for hero backgrounds and service tiles, plus
the motion-mode adapter that decides how a descriptor is presented.
"""

from .descriptor_cache import DescriptorCache
from .intensity import IntensityScaler, Paint, coerce_intensity, scale_opacity, scale_stroke
from .presentation import (
    AnimatedPresentation,
    MotionModeAdapter,
    StaticPresentation,
    geometry_of,
)
from .presets import (
    background_variant_for_route,
    default_intensity_for_route,
    tile_variant_for_path,
    tile_variant_for_slug,
)
from .prng import SeedContext, SeededRandom, compose_seed, create_seeded_random
from .registry import VariantSpec, available_variants, dispatch, render_visual
from .sdk import (  # Constants; Enums; Models
    BACKGROUND_H,
    BACKGROUND_W,
    TILE_H,
    TILE_W,
    Family,
    GeometryDescriptor,
    IntensityLevel,
    MotionMode,
    Scene,
    Shape,
    Track,
)
from .svg_preview import render_svg
from .visual import HeroVisual

__version__ = "0.1.0"
__all__ = [
    "BACKGROUND_W",
    "BACKGROUND_H",
    "TILE_W",
    "TILE_H",
    "Family",
    "IntensityLevel",
    "MotionMode",
    "Track",
    "Shape",
    "Scene",
    "GeometryDescriptor",
    "SeededRandom",
    "SeedContext",
    "create_seeded_random",
    "compose_seed",
    "IntensityScaler",
    "Paint",
    "coerce_intensity",
    "scale_opacity",
    "scale_stroke",
    "VariantSpec",
    "dispatch",
    "available_variants",
    "render_visual",
    "MotionModeAdapter",
    "AnimatedPresentation",
    "StaticPresentation",
    "geometry_of",
    "DescriptorCache",
    "HeroVisual",
    "background_variant_for_route",
    "tile_variant_for_slug",
    "tile_variant_for_path",
    "default_intensity_for_route",
    "render_svg",
]
