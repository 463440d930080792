from .schemas import (
    DEFAULT_BACKGROUND_TABLE,
    DEFAULT_TILE_TABLE,
    CacheConfig,
    EngineConfig,
    IntensityConfig,
    IntensityStep,
    IntensityTable,
    LoggingConfig,
    MotionConfig,
)

__all__ = [
    "CacheConfig",
    "DEFAULT_BACKGROUND_TABLE",
    "DEFAULT_TILE_TABLE",
    "EngineConfig",
    "IntensityConfig",
    "IntensityStep",
    "IntensityTable",
    "LoggingConfig",
    "MotionConfig",
]
