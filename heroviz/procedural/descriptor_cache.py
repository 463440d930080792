#!/usr/bin/env python3
"""
Descriptor Cache

In-memory LRU cache for generated geometry descriptors. Each owner creates its
own instance; there is no module-level cache.
"""

import hashlib
from collections import OrderedDict
from typing import Callable, Dict, Optional

from heroviz.core import get_logger

from .sdk import GeometryDescriptor

log = get_logger("heroviz.descriptor_cache")


def _text(value) -> str:
    return getattr(value, "value", value)


def _get_cache_key(family: str, variant: str, seed: str, intensity: str) -> str:
    """
    Generate cache key from the full composite identity of a descriptor.

    Args:
        family: Style family ("background" or "tile")
        variant: Variant id within the family
        seed: Caller seed
        intensity: Intensity level name

    Returns:
        Cache key string
    """
    key_data = "\x1f".join([family, variant, seed or "", intensity])
    return hashlib.sha1(key_data.encode("utf-8")).hexdigest()


class DescriptorCache:
    def __init__(self, max_entries: int = 64):
        if max_entries < 1:
            raise ValueError("max_entries must be >= 1")
        self.max_entries = max_entries
        self._entries: "OrderedDict[str, GeometryDescriptor]" = OrderedDict()
        self.hits = 0
        self.misses = 0

    @classmethod
    def from_config(cls, cfg) -> "DescriptorCache":
        return cls(max_entries=cfg.cache.max_entries)

    def __len__(self) -> int:
        return len(self._entries)

    def get(self, family, variant, seed, intensity) -> Optional[GeometryDescriptor]:
        key = _get_cache_key(_text(family), variant, seed, _text(intensity))
        found = self._entries.get(key)
        if found is None:
            self.misses += 1
            log.debug(f"Cache miss for {family}.{variant} seed={seed!r} {intensity}")
            return None
        self.hits += 1
        self._entries.move_to_end(key)
        return found

    def put(self, descriptor: GeometryDescriptor) -> None:
        key = _get_cache_key(
            descriptor.family.value,
            descriptor.variant,
            descriptor.seed,
            descriptor.intensity.value,
        )
        self._entries[key] = descriptor
        self._entries.move_to_end(key)
        while len(self._entries) > self.max_entries:
            self._entries.popitem(last=False)

    def get_or_compute(
        self, family, variant, seed, intensity, compute: Callable[[], GeometryDescriptor]
    ) -> GeometryDescriptor:
        found = self.get(family, variant, seed, intensity)
        if found is not None:
            return found
        descriptor = compute()
        self.put(descriptor)
        return descriptor

    def clear(self) -> int:
        """Drop all entries and return how many were removed."""
        count = len(self._entries)
        self._entries.clear()
        log.debug(f"Cleared {count} cached descriptors")
        return count

    def stats(self) -> Dict[str, int]:
        return {
            "hits": self.hits,
            "misses": self.misses,
            "size": len(self._entries),
            "max_entries": self.max_entries,
        }
