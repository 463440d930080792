"""
Unit tests for the descriptor cache.

Tests key generation, hits/misses, LRU eviction and clearing.
"""

import pytest

from heroviz.config.schemas import EngineConfig
from heroviz.procedural.descriptor_cache import DescriptorCache, _get_cache_key
from heroviz.procedural.registry import dispatch
from heroviz.procedural.sdk import Family, IntensityLevel


def _make(name="contentFlow", seed="s", level=IntensityLevel.MEDIUM, family=Family.BACKGROUND):
    return dispatch(name, family).generate(seed, level)


class TestCacheKeyGeneration:
    def test_cache_key_uniqueness(self):
        keys = {
            _get_cache_key("background", "contentFlow", "s", "medium"),
            _get_cache_key("tile", "contentFlow", "s", "medium"),
            _get_cache_key("background", "contentFlow", "t", "medium"),
            _get_cache_key("background", "contentFlow", "s", "bold"),
        }
        assert len(keys) == 4

    def test_cache_key_consistency(self):
        assert _get_cache_key("tile", "seoUplift", "seo", "subtle") == _get_cache_key(
            "tile", "seoUplift", "seo", "subtle"
        )

    def test_separator_prevents_collisions(self):
        assert _get_cache_key("background", "a", "b|c", "medium") != _get_cache_key(
            "background", "a|b", "c", "medium"
        )


class TestCacheBehaviour:
    def test_miss_then_hit(self):
        cache = DescriptorCache()
        assert cache.get(Family.BACKGROUND, "contentFlow", "s", IntensityLevel.MEDIUM) is None
        descriptor = _make()
        cache.put(descriptor)
        assert cache.get(Family.BACKGROUND, "contentFlow", "s", IntensityLevel.MEDIUM) is descriptor
        assert cache.get("background", "contentFlow", "s", "medium") is descriptor
        stats = cache.stats()
        assert stats["hits"] == 2
        assert stats["misses"] == 1
        assert stats["size"] == 1

    def test_get_or_compute_calls_once(self):
        cache = DescriptorCache()
        calls = []

        def compute():
            calls.append(1)
            return _make()

        first = cache.get_or_compute(Family.BACKGROUND, "contentFlow", "s", IntensityLevel.MEDIUM, compute)
        second = cache.get_or_compute(Family.BACKGROUND, "contentFlow", "s", IntensityLevel.MEDIUM, compute)
        assert first is second
        assert len(calls) == 1

    def test_lru_eviction(self):
        cache = DescriptorCache(max_entries=2)
        a = _make(seed="a")
        b = _make(seed="b")
        c = _make(seed="c")
        cache.put(a)
        cache.put(b)
        cache.get(Family.BACKGROUND, "contentFlow", "a", IntensityLevel.MEDIUM)
        cache.put(c)
        assert len(cache) == 2
        assert cache.get(Family.BACKGROUND, "contentFlow", "b", IntensityLevel.MEDIUM) is None
        assert cache.get(Family.BACKGROUND, "contentFlow", "a", IntensityLevel.MEDIUM) is a

    def test_clear_returns_count(self):
        cache = DescriptorCache()
        cache.put(_make(seed="a"))
        cache.put(_make(seed="b"))
        assert cache.clear() == 2
        assert len(cache) == 0

    def test_invalid_size(self):
        with pytest.raises(ValueError):
            DescriptorCache(max_entries=0)

    def test_from_config(self):
        cfg = EngineConfig(cache={"max_entries": 3})
        assert DescriptorCache.from_config(cfg).max_entries == 3
