"""Owner object for one hero visual: memoized descriptor, per-pass presentation."""

from typing import Optional, Union

from heroviz.config.schemas import EngineConfig
from heroviz.core import get_logger

from .descriptor_cache import DescriptorCache
from .intensity import IntensityScaler, coerce_intensity
from .presentation import MotionModeAdapter
from .registry import dispatch
from .sdk import Family, GeometryDescriptor, IntensityLevel

log = get_logger("heroviz.visual")


class HeroVisual:
    """
    Holds one (family, variant, seed, intensity) selection.

    The descriptor is generated on first use and kept in this instance's own
    cache; ``render`` can then be called on every pass with the current
    reduced-motion flag without regenerating geometry.
    """

    def __init__(
        self,
        variant: str,
        seed: Optional[str] = "",
        intensity: Union[IntensityLevel, str, None] = None,
        family: Union[Family, str] = Family.BACKGROUND,
        config: Optional[EngineConfig] = None,
    ):
        self.config = config or EngineConfig()
        self.spec = dispatch(variant, family)
        self.variant = variant
        self.seed = seed or ""
        self.intensity = coerce_intensity(
            intensity if intensity is not None else self.config.motion.default_intensity
        )
        self.adapter = MotionModeAdapter.from_config(self.config)
        self._cache = DescriptorCache.from_config(self.config) if self.config.cache.enabled else None
        self._descriptor: Optional[GeometryDescriptor] = None

    @property
    def known(self) -> bool:
        return self.spec is not None

    def _generate(self) -> GeometryDescriptor:
        scaler = IntensityScaler.for_family(self.spec.family, self.config)
        return self.spec.generate(self.seed, self.intensity, scaler)

    @property
    def descriptor(self) -> Optional[GeometryDescriptor]:
        if self.spec is None:
            return None
        if self._cache is None:
            if self._descriptor is None:
                self._descriptor = self._generate()
            return self._descriptor
        return self._cache.get_or_compute(
            self.spec.family, self.spec.name, self.seed, self.intensity, self._generate
        )

    def set_intensity(self, intensity: Union[IntensityLevel, str]) -> None:
        """Switch level; a previously seen level is served from the cache."""
        level = coerce_intensity(intensity)
        if level != self.intensity:
            self.intensity = level
            self._descriptor = None

    def render(self, reduced_motion: Optional[bool] = None):
        descriptor = self.descriptor
        if descriptor is None:
            return None
        return self.adapter.present(descriptor, reduced_motion)

    def cache_stats(self):
        return self._cache.stats() if self._cache is not None else {}

    def dispose(self) -> None:
        if self._cache is not None:
            self._cache.clear()
        self._descriptor = None
        log.debug(f"[visual] Disposed {self.variant!r}")
