import pytest

from heroviz.config.schemas import EngineConfig
from heroviz.procedural.presentation import AnimatedPresentation, StaticPresentation
from heroviz.procedural.registry import (
    REGISTRY,
    available_variants,
    dispatch,
    render_visual,
)
from heroviz.procedural.sdk import Family, IntensityLevel


class TestDispatch:
    def test_unknown_variant_is_none(self):
        assert dispatch("doesNotExist") is None
        assert dispatch("doesNotExist", Family.TILE) is None

    def test_unknown_family_is_none(self):
        assert dispatch("contentFlow", "hero") is None

    def test_family_accepts_strings(self):
        assert dispatch("seoUplift", "tile").family == Family.TILE
        assert dispatch("seoUplift", "background") is None

    def test_counts_per_family(self):
        assert len(available_variants(Family.BACKGROUND)) == 8
        assert len(available_variants("tile")) == 10
        assert available_variants("nope") == []

    def test_spec_key_namespaced(self):
        assert dispatch("contentFlow").key == "background.contentFlow"
        assert dispatch("contentFlow", Family.TILE).key == "tile.contentFlow"

    def test_registry_keys_match_names(self):
        for family, table in REGISTRY.items():
            for name, spec in table.items():
                assert spec.name == name
                assert spec.family == family


class TestRenderVisual:
    def test_unknown_renders_nothing(self):
        assert render_visual("doesNotExist", seed="x", reduced_motion=False) is None

    def test_home_hero_scenario(self):
        first = render_visual("contentFlow", seed="home-hero", intensity="medium", reduced_motion=False)
        second = render_visual("contentFlow", seed="home-hero", intensity="medium", reduced_motion=False)
        assert isinstance(first, AnimatedPresentation)
        streams = first.descriptor.geometry.streams
        assert 3 <= len(streams) <= 5
        assert first.descriptor.fingerprint() == second.descriptor.fingerprint()
        for shape in first.descriptor.scene.walk():
            track = shape.track("opacity")
            if track is not None:
                assert all(0.0 <= v <= 1.0 for v in track.values)

    def test_default_intensity_is_medium(self):
        presentation = render_visual("neuralFlow", seed="s")
        assert presentation.descriptor.intensity == IntensityLevel.MEDIUM

    def test_pending_is_static_by_default(self):
        assert isinstance(render_visual("growthCurve", seed="/"), StaticPresentation)

    def test_config_drives_defaults(self):
        cfg = EngineConfig(motion={"pending_as_static": False, "default_intensity": "bold"})
        presentation = render_visual("growthCurve", seed="/", config=cfg)
        assert isinstance(presentation, AnimatedPresentation)
        assert presentation.descriptor.intensity == IntensityLevel.BOLD

    def test_unknown_intensity_degrades(self):
        presentation = render_visual("orbitingNodes", seed="s", intensity="loud")
        assert presentation.descriptor.intensity == IntensityLevel.MEDIUM

    @pytest.mark.parametrize("name", ["contentFlow", "socialOrbit", "paidRoasFlow"])
    def test_tile_family(self, name):
        presentation = render_visual(name, seed="slug", family=Family.TILE, reduced_motion=True)
        assert presentation.descriptor.family == Family.TILE
