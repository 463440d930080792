"""
Tile hero styles on the 600x420 canvas.

Same draw/layout split as the background family. Tile loops restart rather
than mirror, and tile strokes use fixed widths; only opacities follow the
tile intensity table.
"""

import math
from typing import Tuple

from pydantic import BaseModel, ConfigDict, Field

from .backgrounds import smooth_path
from .intensity import Paint, motion
from .prng import SeedContext
from .sdk import (
    VIEWBOXES,
    Ease,
    Family,
    Gradient,
    GradientStop,
    Scene,
    Shape,
    ShapeTag,
    fmt_num,
    transition,
)

FAMILY = Family.TILE
CENTER_X = 300
CENTER_Y = 210

_frozen = ConfigDict(frozen=True)


def _loop(duration, delay=0.0, ease=Ease.EASE_IN_OUT):
    return transition(duration, delay, family=FAMILY, ease=ease)


def _scene(variant, defs, shapes) -> Scene:
    return Scene(
        variant=variant,
        family=FAMILY,
        viewbox=VIEWBOXES[FAMILY],
        defs=tuple(defs),
        shapes=tuple(shapes),
    )


def _gradient(gid, stops, kind="linear", **attrs) -> Gradient:
    return Gradient(
        id=gid,
        kind=kind,
        stops=tuple(GradientStop(offset=o, color=c, opacity=a) for o, c, a in stops),
        attrs=attrs,
    )


def _reveal(rest_opacity: float, paint: Paint):
    """pathLength draw-on with the element otherwise fully opaque."""
    return (
        motion("pathLength", (0, 1), rest=1, initial=0),
        motion("opacity", (1.0,), rest=paint.opacity(rest_opacity)),
    )


# ---------------------------------------------------------------------------
# contentFlow
# ---------------------------------------------------------------------------


class TileStream(BaseModel):
    model_config = _frozen

    y: int = Field(..., ge=60, le=420)
    width: int = Field(..., ge=40, le=60)
    duration: float = Field(..., ge=10, lt=16)
    delay: float = Field(..., ge=0, lt=2)


class TileArrow(BaseModel):
    model_config = _frozen

    start_x: int = Field(..., ge=80, le=120)
    end_x: int = Field(..., ge=480, le=540)
    duration: float = Field(..., ge=3, lt=5)
    delay: float = Field(..., ge=0, le=2)


class TileContentFlowGeometry(BaseModel):
    model_config = _frozen

    streams: Tuple[TileStream, ...] = Field(..., min_length=3, max_length=5)
    arrows: Tuple[TileArrow, ...] = Field(..., min_length=3, max_length=5)


def draw_content_flow(seeds: SeedContext) -> TileContentFlowGeometry:
    rng = seeds.rng("streams")
    count = rng.rand_int(3, 5)
    streams = []
    for i in range(count):
        streams.append(
            TileStream(
                y=60 + i * rng.rand_int(70, 90),
                width=rng.rand_int(40, 60),
                duration=rng.rand_float(10, 16),
                delay=rng.rand_float(0, 2),
            )
        )

    rng = seeds.rng("arrows")
    arrows = []
    for i in range(count):
        arrows.append(
            TileArrow(
                start_x=rng.rand_int(80, 120),
                end_x=rng.rand_int(480, 540),
                duration=rng.rand_float(3, 5),
                delay=i * 0.5,
            )
        )
    return TileContentFlowGeometry(streams=tuple(streams), arrows=tuple(arrows))


def layout_content_flow(geo: TileContentFlowGeometry, paint: Paint) -> Scene:
    shapes = []
    for stream, arrow in zip(geo.streams, geo.arrows):
        arrow_y = stream.y + 15
        source = Shape(
            tag=ShapeTag.RECT,
            attrs={"x": 60, "y": stream.y, "width": stream.width, "height": 30, "rx": 6,
                   "fill": "url(#tileContentGrad)"},
            tracks=(paint.fade((0.3, 0.7, 0.3), rest=0.5, initial=0.3),),
            timing=_loop(stream.duration, stream.delay),
        )
        link = Shape(
            tag=ShapeTag.PATH,
            attrs={"d": f"M{arrow.start_x + 60} {arrow_y} L{arrow.end_x} {arrow_y}",
                   "stroke": "#38bdf8", "stroke-width": 2, "stroke-dasharray": "8 4", "fill": "none"},
            tracks=(
                motion("pathLength", (0, 1, 1), rest=1, initial=0),
                motion("opacity", (0, paint.opacity(0.6), 0), rest=paint.opacity(0.4), initial=0),
            ),
            timing=_loop(arrow.duration, arrow.delay),
        )
        target = Shape(
            tag=ShapeTag.RECT,
            attrs={"x": arrow.end_x + 20, "y": stream.y, "width": 50, "height": 30, "rx": 6,
                   "stroke": "#6366f1", "stroke-width": 2, "fill": "none"},
            tracks=(paint.fade((0.2, 0.8, 0.2), rest=0.4, initial=0.2),),
            timing=_loop(stream.duration + 2, stream.delay + 1),
        )
        shapes.append(Shape(tag=ShapeTag.GROUP, children=(source, link, target)))
    defs = [
        _gradient(
            "tileContentGrad",
            [(0, "#6366f1", paint.opacity(0.8)), (100, "#38bdf8", paint.opacity(0.6))],
            x1="0%", y1="0%", x2="100%", y2="0%",
        )
    ]
    return _scene("contentFlow", defs, shapes)


# ---------------------------------------------------------------------------
# emailBranching
# ---------------------------------------------------------------------------


class EmailBranch(BaseModel):
    model_config = _frozen

    end_y: int = Field(..., ge=80, le=400)
    curve: float = Field(..., ge=0.3, lt=0.7)
    duration: float = Field(..., ge=12, lt=18)
    delay: float = Field(..., ge=0, lt=2.4)


class EmailBranchingGeometry(BaseModel):
    model_config = _frozen

    branches: Tuple[EmailBranch, ...] = Field(..., min_length=3, max_length=5)


def draw_email_branching(seeds: SeedContext) -> EmailBranchingGeometry:
    rng = seeds.rng("branches")
    count = rng.rand_int(3, 5)
    branches = []
    for i in range(count):
        branches.append(
            EmailBranch(
                end_y=80 + i * rng.rand_int(65, 80),
                curve=rng.rand_float(0.3, 0.7),
                duration=rng.rand_float(12, 18),
                delay=i * rng.rand_float(0.3, 0.6),
            )
        )
    return EmailBranchingGeometry(branches=tuple(branches))


def layout_email_branching(geo: EmailBranchingGeometry, paint: Paint) -> Scene:
    shapes = [
        Shape(
            tag=ShapeTag.RECT,
            attrs={"x": 40, "y": 180, "width": 70, "height": 50, "rx": 8,
                   "fill": "url(#tileEmailGrad)", "opacity": paint.opacity(0.6)},
        ),
        Shape(
            tag=ShapeTag.TEXT,
            attrs={"x": 75, "y": 210, "fill": "white", "font-size": 12,
                   "text-anchor": "middle", "opacity": 0.8},
            text="@",
        ),
    ]
    for branch in geo.branches:
        mid_x = fmt_num(200 + branch.curve * 100)
        end_y = branch.end_y + 25
        path = Shape(
            tag=ShapeTag.PATH,
            attrs={"d": f"M110 205 Q{mid_x} 205 {mid_x} {end_y} T500 {end_y}",
                   "stroke": "url(#tileEmailGrad)", "stroke-width": 2, "fill": "none"},
            tracks=_reveal(0.5, paint),
            timing=_loop(branch.duration, branch.delay),
        )
        inbox = Shape(
            tag=ShapeTag.CIRCLE,
            attrs={"cx": 500, "cy": end_y, "r": 12, "fill": "#38bdf8"},
            tracks=(motion("opacity", (0, paint.opacity(0.8), paint.opacity(0.4)),
                           rest=paint.opacity(0.5), initial=0),),
            timing=_loop(4, branch.delay + 2),
        )
        shapes.append(Shape(tag=ShapeTag.GROUP, children=(path, inbox)))
    defs = [
        _gradient(
            "tileEmailGrad",
            [(0, "#a855f7", paint.opacity(0.7)), (100, "#38bdf8", paint.opacity(0.5))],
            x1="0%", y1="50%", x2="100%", y2="50%",
        )
    ]
    return _scene("emailBranching", defs, shapes)


# ---------------------------------------------------------------------------
# omnichannelNodes
# ---------------------------------------------------------------------------


class ChannelNode(BaseModel):
    model_config = _frozen

    angle: float = Field(..., ge=0, lt=2 * math.pi)
    radius: int = Field(..., ge=100, le=140)
    x: float = Field(..., ge=160, le=440)
    y: float = Field(..., ge=70, le=350)
    size: int = Field(..., ge=14, le=22)
    duration: float = Field(..., ge=8, lt=14)
    delay: float = Field(..., ge=0, le=2.1)


class OmnichannelNodesGeometry(BaseModel):
    model_config = _frozen

    nodes: Tuple[ChannelNode, ...] = Field(..., min_length=5, max_length=8)


def draw_omnichannel_nodes(seeds: SeedContext) -> OmnichannelNodesGeometry:
    rng = seeds.rng("nodes")
    count = rng.rand_int(5, 8)
    nodes = []
    for i in range(count):
        angle = (i / count) * math.pi * 2
        radius = rng.rand_int(100, 140)
        nodes.append(
            ChannelNode(
                angle=angle,
                radius=radius,
                x=round(CENTER_X + math.cos(angle) * radius, 3),
                y=round(CENTER_Y + math.sin(angle) * radius, 3),
                size=rng.rand_int(14, 22),
                duration=rng.rand_float(8, 14),
                delay=round(i * 0.3, 4),
            )
        )
    return OmnichannelNodesGeometry(nodes=tuple(nodes))


def layout_omnichannel_nodes(geo: OmnichannelNodesGeometry, paint: Paint) -> Scene:
    shapes = [
        Shape(tag=ShapeTag.CIRCLE,
              attrs={"cx": CENTER_X, "cy": CENTER_Y, "r": 40, "fill": "url(#tileCenterGlow)"}),
        Shape(tag=ShapeTag.CIRCLE,
              attrs={"cx": CENTER_X, "cy": CENTER_Y, "r": 20, "fill": "#6366f1",
                     "opacity": paint.opacity(0.9)}),
    ]
    for node in geo.nodes:
        timing = _loop(node.duration, node.delay)
        spoke = Shape(
            tag=ShapeTag.LINE,
            attrs={"x1": CENTER_X, "y1": CENTER_Y, "x2": node.x, "y2": node.y,
                   "stroke": "#38bdf8", "stroke-width": 1.5},
            tracks=(paint.fade((0.2, 0.6, 0.2), rest=0.3, initial=0.2),),
            timing=timing,
        )
        dot = Shape(
            tag=ShapeTag.CIRCLE,
            attrs={"cx": node.x, "cy": node.y, "r": node.size, "fill": "#38bdf8"},
            tracks=(paint.fade((0.4, 0.9, 0.4), rest=0.5, initial=0.4),),
            timing=timing,
        )
        shapes.append(Shape(tag=ShapeTag.GROUP, children=(spoke, dot)))
    defs = [
        _gradient(
            "tileCenterGlow",
            [(0, "#6366f1", paint.opacity(0.8)), (100, "#6366f1", 0.0)],
            kind="radial", cx="50%", cy="50%", r="50%",
        )
    ]
    return _scene("omnichannelNodes", defs, shapes)


# ---------------------------------------------------------------------------
# socialOrbit
# ---------------------------------------------------------------------------


class SocialRing(BaseModel):
    model_config = _frozen

    radius: int = Field(..., ge=60, le=180)
    nodes: int = Field(..., ge=3, le=8)
    duration: float = Field(..., ge=20, lt=55)


class SocialOrbitGeometry(BaseModel):
    """Inner, middle and outer rings, always three."""

    model_config = _frozen

    rings: Tuple[SocialRing, ...] = Field(..., min_length=3, max_length=3)


# (radius range, node range, duration range) per ring, inner to outer
SOCIAL_RINGS = (
    ((60, 80), (3, 5), (20, 30)),
    ((110, 140), (4, 6), (30, 40)),
    ((160, 180), (5, 8), (40, 55)),
)


def draw_social_orbit(seeds: SeedContext) -> SocialOrbitGeometry:
    rng = seeds.rng("orbits")
    rings = []
    for radius, nodes, duration in SOCIAL_RINGS:
        rings.append(
            SocialRing(
                radius=rng.rand_int(*radius),
                nodes=rng.rand_int(*nodes),
                duration=rng.rand_float(*duration),
            )
        )
    return SocialOrbitGeometry(rings=tuple(rings))


def layout_social_orbit(geo: SocialOrbitGeometry, paint: Paint) -> Scene:
    shapes = [
        Shape(tag=ShapeTag.CIRCLE,
              attrs={"cx": CENTER_X, "cy": CENTER_Y, "r": 25, "fill": "url(#tileSocialCenter)"}),
    ]
    for oi, ring in enumerate(geo.rings):
        children = [
            Shape(
                tag=ShapeTag.CIRCLE,
                attrs={"cx": CENTER_X, "cy": CENTER_Y, "r": ring.radius, "fill": "none",
                       "stroke": "#6366f1", "stroke-width": 1, "stroke-dasharray": "4 4",
                       "opacity": paint.opacity(0.3)},
            )
        ]
        for ni in range(ring.nodes):
            angle = (ni / ring.nodes) * math.pi * 2
            dot = Shape(
                tag=ShapeTag.CIRCLE,
                attrs={
                    "cx": round(CENTER_X + math.cos(angle) * ring.radius, 3),
                    "cy": round(CENTER_Y + math.sin(angle) * ring.radius, 3),
                    "r": 8 + oi * 2,
                    "fill": "#38bdf8",
                },
                tracks=(paint.fade((0.5, 1, 0.5), rest=0.6, initial=0.5),),
                timing=_loop(4, ni * 0.5),
            )
            children.append(
                Shape(
                    tag=ShapeTag.GROUP,
                    attrs={"transform-origin": f"{CENTER_X}px {CENTER_Y}px"},
                    tracks=(motion("rotate", (0, 360), rest=0),),
                    timing=_loop(ring.duration, ease=Ease.LINEAR),
                    children=(dot,),
                )
            )
        shapes.append(Shape(tag=ShapeTag.GROUP, children=tuple(children)))
    defs = [
        _gradient(
            "tileSocialCenter",
            [(0, "#a855f7", paint.opacity(0.9)), (100, "#6366f1", paint.opacity(0.4))],
            kind="radial", cx="50%", cy="50%", r="50%",
        )
    ]
    return _scene("socialOrbit", defs, shapes)


# ---------------------------------------------------------------------------
# videoHeatmap
# ---------------------------------------------------------------------------


class HeatZone(BaseModel):
    model_config = _frozen

    x: int = Field(..., ge=80, le=560)
    width: int = Field(..., ge=40, le=70)
    height: int = Field(..., ge=80, le=160)
    heat: float = Field(..., ge=0.3, lt=1)
    duration: float = Field(..., ge=6, lt=12)
    delay: float = Field(..., ge=0, le=2.4)


class VideoHeatmapGeometry(BaseModel):
    model_config = _frozen

    zones: Tuple[HeatZone, ...] = Field(..., min_length=4, max_length=7)


def draw_video_heatmap(seeds: SeedContext) -> VideoHeatmapGeometry:
    rng = seeds.rng("zones")
    count = rng.rand_int(4, 7)
    zones = []
    for i in range(count):
        zones.append(
            HeatZone(
                x=80 + i * rng.rand_int(60, 80),
                width=rng.rand_int(40, 70),
                height=rng.rand_int(80, 160),
                heat=rng.rand_float(0.3, 1),
                duration=rng.rand_float(6, 12),
                delay=round(i * 0.4, 4),
            )
        )
    return VideoHeatmapGeometry(zones=tuple(zones))


def layout_video_heatmap(geo: VideoHeatmapGeometry, paint: Paint) -> Scene:
    shapes = [
        Shape(tag=ShapeTag.RECT,
              attrs={"x": 60, "y": 80, "width": 480, "height": 260, "rx": 12, "fill": "#1e293b",
                     "opacity": paint.opacity(0.6)}),
        Shape(tag=ShapeTag.POLYGON,
              attrs={"points": "250,180 350,240 250,300", "fill": "#6366f1",
                     "opacity": paint.opacity(0.8)}),
    ]
    for zone in geo.zones:
        shapes.append(
            Shape(
                tag=ShapeTag.RECT,
                attrs={"x": zone.x, "y": 340 - zone.height, "width": zone.width,
                       "height": zone.height, "rx": 4, "fill": "url(#tileHeatGrad)",
                       "transform-origin": f"{fmt_num(zone.x + zone.width / 2)}px 340px"},
                tracks=(
                    paint.fade((0.2, zone.heat * 0.8, 0.3), rest=zone.heat * 0.6, initial=0.2),
                    motion("scaleY", (0.5, 1, 0.7), rest=1, initial=0.5),
                ),
                timing=_loop(zone.duration, zone.delay),
            )
        )
    defs = [
        _gradient(
            "tileHeatGrad",
            [(0, "#ef4444", paint.opacity(0.9)), (50, "#f59e0b", paint.opacity(0.7)),
             (100, "#22c55e", paint.opacity(0.5))],
            x1="0%", y1="0%", x2="0%", y2="100%",
        )
    ]
    return _scene("videoHeatmap", defs, shapes)


# ---------------------------------------------------------------------------
# funnelStages
# ---------------------------------------------------------------------------


class TileFunnelStage(BaseModel):
    model_config = _frozen

    width: int = Field(..., ge=50, le=400)
    y: int = Field(..., ge=60, le=410)
    duration: float = Field(..., ge=10, lt=16)
    delay: float = Field(..., ge=0, le=2)


class TileFunnelStagesGeometry(BaseModel):
    model_config = _frozen

    stages: Tuple[TileFunnelStage, ...] = Field(..., min_length=4, max_length=6)


def draw_funnel_stages(seeds: SeedContext) -> TileFunnelStagesGeometry:
    rng = seeds.rng("stages")
    count = rng.rand_int(4, 6)
    stages = []
    for i in range(count):
        stages.append(
            TileFunnelStage(
                width=400 - i * rng.rand_int(50, 70),
                y=60 + i * rng.rand_int(55, 70),
                duration=rng.rand_float(10, 16),
                delay=round(i * 0.4, 4),
            )
        )
    return TileFunnelStagesGeometry(stages=tuple(stages))


def layout_funnel_stages(geo: TileFunnelStagesGeometry, paint: Paint) -> Scene:
    shapes = []
    last = len(geo.stages) - 1
    for i, stage in enumerate(geo.stages):
        children = [
            Shape(
                tag=ShapeTag.RECT,
                attrs={"x": (600 - stage.width) / 2, "y": stage.y, "width": stage.width,
                       "height": 40, "rx": 8, "fill": "url(#tileFunnelGrad)"},
                tracks=(paint.fade((0.3, 0.7 - i * 0.08, 0.3), rest=0.5 - i * 0.05, initial=0.3),),
                timing=_loop(stage.duration, stage.delay),
            )
        ]
        if i < last:
            children.append(
                Shape(
                    tag=ShapeTag.PATH,
                    attrs={"d": f"M300 {stage.y + 40} L300 {geo.stages[i + 1].y}",
                           "stroke": "#38bdf8", "stroke-width": 2, "stroke-dasharray": "4 4"},
                    tracks=(motion("opacity", (0, paint.opacity(0.5), 0),
                                   rest=paint.opacity(0.3), initial=0),),
                    timing=_loop(3, stage.delay + 1),
                )
            )
        shapes.append(Shape(tag=ShapeTag.GROUP, children=tuple(children)))
    defs = [
        _gradient(
            "tileFunnelGrad",
            [(0, "#6366f1", paint.opacity(0.7)), (100, "#38bdf8", paint.opacity(0.5))],
            x1="0%", y1="0%", x2="100%", y2="0%",
        )
    ]
    return _scene("funnelStages", defs, shapes)


# ---------------------------------------------------------------------------
# seoUplift
# ---------------------------------------------------------------------------


class RankBar(BaseModel):
    model_config = _frozen

    x: int = Field(..., ge=80, le=570)
    height: int = Field(..., ge=60, le=285)
    duration: float = Field(..., ge=8, lt=14)
    delay: float = Field(..., ge=0, le=2.1)


class TrendPoint(BaseModel):
    model_config = _frozen

    x: int = Field(..., ge=100, le=590)
    y: int = Field(..., ge=15, le=280)


class SeoUpliftGeometry(BaseModel):
    model_config = _frozen

    bars: Tuple[RankBar, ...] = Field(..., min_length=5, max_length=8)
    trend: Tuple[TrendPoint, ...] = Field(..., min_length=5, max_length=8)


def draw_seo_uplift(seeds: SeedContext) -> SeoUpliftGeometry:
    rng = seeds.rng("bars")
    count = rng.rand_int(5, 8)
    bars = []
    for i in range(count):
        bars.append(
            RankBar(
                x=80 + i * rng.rand_int(55, 70),
                height=rng.rand_int(60, 180) + i * 15,
                duration=rng.rand_float(8, 14),
                delay=round(i * 0.3, 4),
            )
        )

    rng = seeds.rng("curve")
    trend = tuple(
        TrendPoint(x=bar.x + 20, y=320 - bar.height - rng.rand_int(-20, 20)) for bar in bars
    )
    return SeoUpliftGeometry(bars=tuple(bars), trend=trend)


def layout_seo_uplift(geo: SeoUpliftGeometry, paint: Paint) -> Scene:
    shapes = []
    for bar in geo.bars:
        shapes.append(
            Shape(
                tag=ShapeTag.RECT,
                attrs={"x": bar.x, "y": 320 - bar.height, "width": 40, "height": bar.height,
                       "rx": 6, "fill": "url(#tileSeoGrad)",
                       "transform-origin": f"{bar.x + 20}px 320px"},
                tracks=(
                    motion("scaleY", (0, 1, 0.9), rest=1, initial=0),
                    paint.fade((0.3, 0.8, 0.5), rest=0.6, initial=0.3),
                ),
                timing=_loop(bar.duration, bar.delay),
            )
        )
    shapes.append(
        Shape(
            tag=ShapeTag.PATH,
            attrs={"d": smooth_path(geo.trend), "stroke": "#a855f7", "stroke-width": 3,
                   "fill": "none"},
            tracks=_reveal(0.6, paint),
            timing=_loop(6, 1),
        )
    )
    defs = [
        _gradient(
            "tileSeoGrad",
            [(0, "#22c55e", paint.opacity(0.6)), (100, "#38bdf8", paint.opacity(0.8))],
            x1="0%", y1="100%", x2="0%", y2="0%",
        )
    ]
    return _scene("seoUplift", defs, shapes)


# ---------------------------------------------------------------------------
# growthExperiments
# ---------------------------------------------------------------------------


class ExperimentNode(BaseModel):
    model_config = _frozen

    x: int = Field(..., ge=100, le=640)
    y: int = Field(..., ge=120, le=300)
    size: int = Field(..., ge=12, le=20)
    winner: bool
    duration: float = Field(..., ge=8, lt=14)
    delay: float = Field(..., ge=0, le=3)


class GrowthStep(BaseModel):
    model_config = _frozen

    x: int = Field(..., ge=145, le=570)
    y: int = Field(..., ge=145, le=320)


class GrowthExperimentsGeometry(BaseModel):
    model_config = _frozen

    tests: Tuple[ExperimentNode, ...] = Field(..., min_length=4, max_length=7)
    start_y: int = Field(..., ge=300, le=340)
    steps: Tuple[GrowthStep, ...] = Field(..., min_length=6, max_length=6)


def draw_growth_experiments(seeds: SeedContext) -> GrowthExperimentsGeometry:
    rng = seeds.rng("tests")
    count = rng.rand_int(4, 7)
    tests = []
    for i in range(count):
        tests.append(
            ExperimentNode(
                x=100 + i * rng.rand_int(70, 90),
                y=rng.rand_int(120, 300),
                size=rng.rand_int(12, 20),
                winner=rng.chance(0.7),
                duration=rng.rand_float(8, 14),
                delay=i * 0.5,
            )
        )

    rng = seeds.rng("growth")
    start_y = rng.rand_int(300, 340)
    steps = tuple(
        GrowthStep(x=60 + (i + 1) * 85, y=rng.rand_int(300 - i * 30, 320 - i * 35))
        for i in range(6)
    )
    return GrowthExperimentsGeometry(tests=tuple(tests), start_y=start_y, steps=steps)


def layout_growth_experiments(geo: GrowthExperimentsGeometry, paint: Paint) -> Scene:
    d = f"M60 {geo.start_y}"
    for step in geo.steps:
        d += f" Q{step.x - 30} {step.y + 20}, {step.x} {step.y}"
    shapes = [
        Shape(
            tag=ShapeTag.PATH,
            attrs={"d": d, "stroke": "#6366f1", "stroke-width": 3, "fill": "none"},
            tracks=_reveal(0.5, paint),
            timing=_loop(8),
        )
    ]
    for node in geo.tests:
        children = [
            Shape(
                tag=ShapeTag.CIRCLE,
                attrs={"cx": node.x, "cy": node.y, "r": node.size,
                       "fill": "#22c55e" if node.winner else "#38bdf8",
                       "stroke": "#16a34a" if node.winner else "#0284c7",
                       "stroke-width": 2},
                tracks=(
                    motion("opacity", (0, paint.opacity(0.9), paint.opacity(0.6)),
                           rest=paint.opacity(0.6), initial=0),
                    motion("scale", (0, 1.2, 1), rest=1, initial=0),
                ),
                timing=_loop(node.duration, node.delay),
            )
        ]
        if node.winner:
            children.append(
                Shape(
                    tag=ShapeTag.TEXT,
                    attrs={"x": node.x, "y": node.y + 4, "fill": "white", "font-size": 10,
                           "text-anchor": "middle", "opacity": 0.9},
                    text="✓",
                )
            )
        shapes.append(Shape(tag=ShapeTag.GROUP, children=tuple(children)))
    return _scene("growthExperiments", [], shapes)


# ---------------------------------------------------------------------------
# paidRoasFlow
# ---------------------------------------------------------------------------


class AdChannel(BaseModel):
    model_config = _frozen

    y: int = Field(..., ge=80, le=400)
    width: int = Field(..., ge=50, le=80)
    roas: float = Field(..., ge=1.5, lt=4.5)
    duration: float = Field(..., ge=10, lt=16)
    delay: float = Field(..., ge=0, le=2)


class PaidRoasFlowGeometry(BaseModel):
    model_config = _frozen

    channels: Tuple[AdChannel, ...] = Field(..., min_length=3, max_length=5)


def draw_paid_roas_flow(seeds: SeedContext) -> PaidRoasFlowGeometry:
    rng = seeds.rng("channels")
    count = rng.rand_int(3, 5)
    channels = []
    for i in range(count):
        channels.append(
            AdChannel(
                y=80 + i * rng.rand_int(65, 80),
                width=rng.rand_int(50, 80),
                roas=rng.rand_float(1.5, 4.5),
                duration=rng.rand_float(10, 16),
                delay=i * 0.5,
            )
        )
    return PaidRoasFlowGeometry(channels=tuple(channels))


def layout_paid_roas_flow(geo: PaidRoasFlowGeometry, paint: Paint) -> Scene:
    shapes = [
        Shape(tag=ShapeTag.TEXT,
              attrs={"x": 80, "y": 50, "fill": "#6366f1", "font-size": 14,
                     "opacity": paint.opacity(0.8)},
              text="Budget"),
        Shape(tag=ShapeTag.TEXT,
              attrs={"x": 480, "y": 50, "fill": "#22c55e", "font-size": 14,
                     "opacity": paint.opacity(0.8)},
              text="ROAS"),
    ]
    for ch in geo.channels:
        mid_y = ch.y + 17
        bar_w = round(ch.roas * 25, 3)
        budget = Shape(
            tag=ShapeTag.RECT,
            attrs={"x": 60, "y": ch.y, "width": ch.width, "height": 35, "rx": 6, "fill": "#6366f1"},
            tracks=(paint.fade((0.4, 0.8, 0.4), rest=0.5, initial=0.4),),
            timing=_loop(ch.duration, ch.delay),
        )
        spend = Shape(
            tag=ShapeTag.PATH,
            attrs={"d": f"M{60 + ch.width + 10} {mid_y} L420 {mid_y}",
                   "stroke": "url(#tilePaidGrad)", "stroke-width": 2, "stroke-dasharray": "6 4"},
            tracks=_reveal(0.4, paint),
            timing=_loop(4, ch.delay + 1),
        )
        ret = Shape(
            tag=ShapeTag.RECT,
            attrs={"x": 440, "y": ch.y, "width": bar_w, "height": 35, "rx": 6, "fill": "#22c55e",
                   "transform-origin": "440px center"},
            tracks=(
                motion("opacity", (0, paint.opacity(0.8)), rest=paint.opacity(0.6), initial=0),
                motion("scaleX", (0, 1), rest=1, initial=0),
            ),
            timing=_loop(3, ch.delay + 2),
        )
        marker = Shape(
            tag=ShapeTag.CIRCLE,
            attrs={"cx": round(450 + ch.roas * 25, 3), "cy": mid_y, "r": 8, "fill": "#16a34a"},
            tracks=(motion("opacity", (0, paint.opacity(1), paint.opacity(0.6)),
                           rest=paint.opacity(0.7), initial=0),),
            timing=_loop(4, ch.delay + 3),
        )
        shapes.append(Shape(tag=ShapeTag.GROUP, children=(budget, spend, ret, marker)))
    defs = [
        _gradient(
            "tilePaidGrad",
            [(0, "#f59e0b", paint.opacity(0.7)), (100, "#22c55e", paint.opacity(0.8))],
            x1="0%", y1="0%", x2="100%", y2="0%",
        )
    ]
    return _scene("paidRoasFlow", defs, shapes)


# ---------------------------------------------------------------------------
# martechSync
# ---------------------------------------------------------------------------


class StackNode(BaseModel):
    model_config = _frozen

    row: int = Field(..., ge=0, le=2)
    col: int = Field(..., ge=0, le=4)
    x: int = Field(..., ge=100, le=620)
    y: int = Field(..., ge=120, le=380)
    size: int = Field(..., ge=50, le=70)
    duration: float = Field(..., ge=8, lt=14)
    delay: float = Field(..., ge=0, le=4.2)


class StackLink(BaseModel):
    model_config = _frozen

    source: int = Field(..., ge=0)
    target: int = Field(..., ge=1)
    delay: float = Field(..., ge=0)


class MartechSyncGeometry(BaseModel):
    model_config = _frozen

    rows: int = Field(..., ge=2, le=3)
    cols: int = Field(..., ge=3, le=5)
    nodes: Tuple[StackNode, ...] = Field(..., min_length=6, max_length=15)
    links: Tuple[StackLink, ...] = Field(..., max_length=14)


def draw_martech_sync(seeds: SeedContext) -> MartechSyncGeometry:
    rng = seeds.rng("stack")
    rows = rng.rand_int(2, 3)
    cols = rng.rand_int(3, 5)
    nodes = []
    for r in range(rows):
        for c in range(cols):
            x = 100 + c * rng.rand_int(100, 130)
            y = 120 + r * rng.rand_int(100, 130)
            size = rng.rand_int(50, 70)
            nodes.append(
                StackNode(
                    row=r,
                    col=c,
                    x=x,
                    y=y,
                    size=size,
                    duration=rng.rand_float(8, 14),
                    delay=round((r * cols + c) * 0.3, 4),
                )
            )

    rng = seeds.rng("connections")
    links = []
    for i in range(len(nodes) - 1):
        if rng.chance(0.3):
            links.append(StackLink(source=i, target=i + 1, delay=round(i * 0.2, 4)))
    return MartechSyncGeometry(rows=rows, cols=cols, nodes=tuple(nodes), links=tuple(links))


def layout_martech_sync(geo: MartechSyncGeometry, paint: Paint) -> Scene:
    shapes = []
    for link in geo.links:
        a, b = geo.nodes[link.source], geo.nodes[link.target]
        shapes.append(
            Shape(
                tag=ShapeTag.LINE,
                attrs={"x1": a.x + a.size / 2, "y1": a.y + a.size / 2,
                       "x2": b.x + b.size / 2, "y2": b.y + b.size / 2,
                       "stroke": "#38bdf8", "stroke-width": 2},
                tracks=(motion("opacity", (0, paint.opacity(0.6), paint.opacity(0.3)),
                               rest=paint.opacity(0.3), initial=0),),
                timing=_loop(6, link.delay + 1),
            )
        )
    for node in geo.nodes:
        shapes.append(
            Shape(
                tag=ShapeTag.RECT,
                attrs={"x": node.x, "y": node.y, "width": node.size, "height": node.size,
                       "rx": 12, "fill": "url(#tileMartechGrad)", "stroke": "#6366f1",
                       "stroke-width": 2},
                tracks=(paint.fade((0.2, 0.8, 0.4), rest=0.5, initial=0.2),),
                timing=_loop(node.duration, node.delay),
            )
        )
    defs = [
        _gradient(
            "tileMartechGrad",
            [(0, "#6366f1", paint.opacity(0.6)), (100, "#38bdf8", paint.opacity(0.4))],
            x1="0%", y1="0%", x2="100%", y2="100%",
        )
    ]
    return _scene("martechSync", defs, shapes)


VARIANTS = {
    "contentFlow": (draw_content_flow, layout_content_flow),
    "emailBranching": (draw_email_branching, layout_email_branching),
    "omnichannelNodes": (draw_omnichannel_nodes, layout_omnichannel_nodes),
    "socialOrbit": (draw_social_orbit, layout_social_orbit),
    "videoHeatmap": (draw_video_heatmap, layout_video_heatmap),
    "funnelStages": (draw_funnel_stages, layout_funnel_stages),
    "seoUplift": (draw_seo_uplift, layout_seo_uplift),
    "growthExperiments": (draw_growth_experiments, layout_growth_experiments),
    "paidRoasFlow": (draw_paid_roas_flow, layout_paid_roas_flow),
    "martechSync": (draw_martech_sync, layout_martech_sync),
}
