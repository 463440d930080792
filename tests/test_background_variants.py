import pytest

from heroviz.procedural.backgrounds import (
    VARIANTS,
    MetricPoint,
    draw_content_flow,
    draw_funnel_stages,
    draw_growth_curve,
    draw_network_sync,
    smooth_path,
)
from heroviz.procedural.prng import SeedContext
from heroviz.procedural.registry import dispatch
from heroviz.procedural.sdk import (
    BACKGROUND_H,
    BACKGROUND_W,
    Family,
    IntensityLevel,
    RepeatType,
)

SEEDS = ["", "home-hero", "/about", "/services/seo", "alpha", "beta", "gamma"]


def _seeds(name, seed):
    return SeedContext(f"background.{name}", seed)


def test_background_registry_order():
    assert list(VARIANTS) == [
        "contentFlow",
        "branchingPaths",
        "orbitingNodes",
        "funnelStages",
        "dashboardPulse",
        "growthCurve",
        "networkSync",
        "neuralFlow",
    ]


class TestContentFlow:
    def test_home_hero_scenario(self):
        spec = dispatch("contentFlow")
        first = spec.generate("home-hero", "medium")
        second = spec.generate("home-hero", "medium")
        streams = first.geometry.streams
        assert 3 <= len(streams) <= 5
        assert len(streams) == len(second.geometry.streams)
        assert [(s.offset, s.duration) for s in streams] == [
            (s.offset, s.duration) for s in second.geometry.streams
        ]

    @pytest.mark.parametrize("seed", SEEDS)
    def test_first_stream_has_no_offset(self, seed):
        geo = draw_content_flow(_seeds("contentFlow", seed))
        assert geo.streams[0].offset == 0

    def test_one_path_per_stream(self):
        descriptor = dispatch("contentFlow").generate("home-hero")
        group = descriptor.scene.shapes[0]
        assert len(group.children) == len(descriptor.geometry.streams)


class TestFunnelStages:
    @pytest.mark.parametrize("seed", SEEDS)
    def test_widths_narrow_downwards(self, seed):
        stages = draw_funnel_stages(_seeds("funnelStages", seed)).stages
        widths = [s.width for s in stages]
        assert widths == sorted(widths, reverse=True)
        assert 700 <= widths[0] <= 780

    @pytest.mark.parametrize("seed", SEEDS)
    def test_stages_stack_downwards(self, seed):
        ys = [s.y for s in draw_funnel_stages(_seeds("funnelStages", seed)).stages]
        assert ys[0] == 160
        assert ys == sorted(ys)


class TestGrowthCurve:
    @pytest.mark.parametrize("seed", SEEDS)
    def test_segments_rise(self, seed):
        geo = draw_growth_curve(_seeds("growthCurve", seed))
        xs = [seg.x for seg in geo.segments]
        assert xs == sorted(xs)

    @pytest.mark.parametrize("seed", SEEDS)
    def test_first_tick_anchored(self, seed):
        ticks = draw_growth_curve(_seeds("growthCurve", seed)).ticks
        assert ticks[0].x == 90
        assert 5 <= len(ticks) <= 8


class TestNetworkSync:
    @pytest.mark.parametrize("seed", SEEDS)
    def test_links_reference_nodes(self, seed):
        geo = draw_network_sync(_seeds("networkSync", seed))
        count = len(geo.nodes)
        assert 5 <= count <= 9
        for a, b in geo.links:
            assert 0 <= a < count
            assert 0 <= b < count
            assert a != b


class TestCanvas:
    @pytest.mark.parametrize("name", list(VARIANTS))
    def test_viewbox_and_mirrored_timing(self, name):
        descriptor = dispatch(name, Family.BACKGROUND).generate("home-hero", IntensityLevel.BOLD)
        assert descriptor.scene.viewbox == (BACKGROUND_W, BACKGROUND_H)
        timings = [s.timing for s in descriptor.scene.walk() if s.timing is not None]
        assert timings
        assert all(t.repeat == RepeatType.MIRROR for t in timings)


def test_smooth_path_through_points():
    points = [MetricPoint(x=40, y=300), MetricPoint(x=140, y=250), MetricPoint(x=250, y=320)]
    d = smooth_path(points)
    assert d.startswith("M40 300")
    assert d.count(" C ") == 2
    assert d.endswith("250 320")


class TestBranchingPaths:
    def test_static_branches_fully_drawn(self):
        descriptor = dispatch("branchingPaths").generate("/about")
        branches = [s for s in descriptor.scene.walk() if s.track("pathLength") is not None]
        assert branches
        for shape in branches:
            track = shape.track("pathLength")
            assert track.rest == 1.0
            assert max(track.values) == 0.95
