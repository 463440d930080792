"""
Background hero styles.

Each style is a ``draw_*`` step that consumes seeded streams (one per purpose)
into a bounded geometry model, and a ``layout_*`` step that turns that model
into a scene on the 1200x800 canvas with intensity-scaled paint. Background
loops are mirrored ease-in-out transitions.
"""

import math
from typing import Tuple

from pydantic import BaseModel, ConfigDict, Field

from .intensity import Paint, motion
from .prng import SeedContext
from .sdk import (
    BACKGROUND_BASE_DURATION,
    VIEWBOXES,
    Family,
    Gradient,
    GradientStop,
    Scene,
    Shape,
    ShapeTag,
    fmt_num,
    transition,
)

FAMILY = Family.BACKGROUND

_frozen = ConfigDict(frozen=True)


def _scene(variant, defs, shapes) -> Scene:
    return Scene(
        variant=variant,
        family=FAMILY,
        viewbox=VIEWBOXES[FAMILY],
        defs=tuple(defs),
        shapes=tuple(shapes),
    )


def _linear(gid, stops, **attrs) -> Gradient:
    return Gradient(
        id=gid,
        kind="linear",
        stops=tuple(GradientStop(offset=o, color=c, opacity=a) for o, c, a in stops),
        attrs=attrs,
    )


def _radial(gid, stops) -> Gradient:
    return Gradient(
        id=gid,
        kind="radial",
        stops=tuple(GradientStop(offset=o, color=c, opacity=a) for o, c, a in stops),
        attrs={"cx": "50%", "cy": "50%", "r": "50%"},
    )


# ---------------------------------------------------------------------------
# contentFlow
# ---------------------------------------------------------------------------


class FlowStream(BaseModel):
    model_config = _frozen

    offset: int = Field(..., ge=0, le=400)
    cp1y: int = Field(..., ge=100, le=180)
    cp2y: int = Field(..., ge=280, le=360)
    end_y: int = Field(..., ge=220, le=300)
    duration: float = Field(..., ge=14, lt=20)
    delay: float = Field(..., ge=0, lt=2)


class ContentFlowGeometry(BaseModel):
    model_config = _frozen

    streams: Tuple[FlowStream, ...] = Field(..., min_length=3, max_length=5)


def draw_content_flow(seeds: SeedContext) -> ContentFlowGeometry:
    rng = seeds.rng("streams")
    count = rng.rand_int(3, 5)
    streams = []
    for i in range(count):
        streams.append(
            FlowStream(
                offset=rng.rand_int(60, 100) * i,
                cp1y=rng.rand_int(100, 180),
                cp2y=rng.rand_int(280, 360),
                end_y=rng.rand_int(220, 300),
                duration=rng.rand_float(14, 20),
                delay=rng.rand_float(0, 2),
            )
        )
    return ContentFlowGeometry(streams=tuple(streams))


def layout_content_flow(geo: ContentFlowGeometry, paint: Paint) -> Scene:
    paths = []
    for s in geo.streams:
        d = (
            f"M-100 {220 + s.offset} C 250 {s.cp1y + s.offset}, "
            f"550 {s.cp2y + s.offset}, 1300 {s.end_y + s.offset}"
        )
        paths.append(
            Shape(
                tag=ShapeTag.PATH,
                attrs={"d": d},
                tracks=(
                    paint.fade((0.06, 0.18, 0.08), rest=0.14, initial=0.1),
                    motion("pathLength", (0.7, 1, 0.7), rest=1.0, initial=0.8),
                ),
                timing=transition(s.duration, s.delay),
            )
        )
    group = Shape(
        tag=ShapeTag.GROUP,
        attrs={
            "fill": "none",
            "stroke": "url(#contentFlowStroke)",
            "stroke-width": paint.stroke(1.4),
        },
        children=tuple(paths),
    )
    defs = [
        _linear(
            "contentFlowStroke",
            [(0, "#38bdf8", 0.0), (40, "#6366f1", paint.opacity(0.35)), (100, "#ec4899", 0.0)],
            x1="0%", y1="0%", x2="100%", y2="100%",
        )
    ]
    return _scene("contentFlow", defs, [group])


# ---------------------------------------------------------------------------
# branchingPaths
# ---------------------------------------------------------------------------


class Branch(BaseModel):
    model_config = _frozen

    offset: int = Field(..., ge=0, le=150)
    curvature: float = Field(..., ge=0.8, lt=1.2)
    duration: float = Field(..., ge=12, lt=18)
    delay: float = Field(..., ge=0, lt=1.5)


class MainCurve(BaseModel):
    model_config = _frozen

    start_y: int = Field(..., ge=680, le=720)
    cp1_x: int = Field(..., ge=330, le=370)
    cp1_y: int = Field(..., ge=520, le=560)
    cp2_x: int = Field(..., ge=400, le=440)
    cp2_y: int = Field(..., ge=460, le=500)
    mid_x: int = Field(..., ge=580, le=620)
    mid_y: int = Field(..., ge=400, le=440)
    cp3_x: int = Field(..., ge=760, le=800)
    cp3_y: int = Field(..., ge=340, le=380)
    cp4_x: int = Field(..., ge=840, le=880)
    cp4_y: int = Field(..., ge=300, le=340)
    end_y: int = Field(..., ge=200, le=240)
    duration: float = Field(..., ge=18, lt=22)


class BranchingPathsGeometry(BaseModel):
    model_config = _frozen

    branches: Tuple[Branch, ...] = Field(..., min_length=2, max_length=4)
    main_curve: MainCurve


def draw_branching_paths(seeds: SeedContext) -> BranchingPathsGeometry:
    rng = seeds.rng("branches")
    count = rng.rand_int(2, 4)
    branches = []
    for i in range(count):
        branches.append(
            Branch(
                offset=rng.rand_int(30, 50) * i,
                curvature=rng.rand_float(0.8, 1.2),
                duration=rng.rand_float(12, 18),
                delay=rng.rand_float(0, 1.5),
            )
        )

    rng = seeds.rng("mainCurve")
    main = MainCurve(
        start_y=rng.rand_int(680, 720),
        cp1_x=rng.rand_int(330, 370),
        cp1_y=rng.rand_int(520, 560),
        cp2_x=rng.rand_int(400, 440),
        cp2_y=rng.rand_int(460, 500),
        mid_x=rng.rand_int(580, 620),
        mid_y=rng.rand_int(400, 440),
        cp3_x=rng.rand_int(760, 800),
        cp3_y=rng.rand_int(340, 380),
        cp4_x=rng.rand_int(840, 880),
        cp4_y=rng.rand_int(300, 340),
        end_y=rng.rand_int(200, 240),
        duration=rng.rand_float(18, 22),
    )
    return BranchingPathsGeometry(branches=tuple(branches), main_curve=main)


def layout_branching_paths(geo: BranchingPathsGeometry, paint: Paint) -> Scene:
    m = geo.main_curve
    main_d = (
        f"M200 {m.start_y} C {m.cp1_x} {m.cp1_y}, {m.cp2_x} {m.cp2_y}, {m.mid_x} {m.mid_y} "
        f"C {m.cp3_x} {m.cp3_y}, {m.cp4_x} {m.cp4_y}, 1000 {m.end_y}"
    )
    children = [
        Shape(
            tag=ShapeTag.PATH,
            attrs={"d": main_d},
            tracks=(paint.fade((0.06, 0.2, 0.1), rest=0.16, initial=0.12),),
            timing=transition(m.duration),
        )
    ]
    for i, b in enumerate(geo.branches):
        d = (
            f"M{fmt_num(480 + b.offset * 0.5)} {520 - b.offset} "
            f"C {620 + b.offset} {fmt_num((480 - b.offset) * b.curvature)}, "
            f"{730 + b.offset} {fmt_num((430 - b.offset) * b.curvature)}, "
            f"{950 + i * 15} {340 - b.offset}"
        )
        children.append(
            Shape(
                tag=ShapeTag.PATH,
                attrs={"d": d},
                tracks=(
                    paint.fade((0.04, 0.18, 0.08), rest=0.12, initial=0.08),
                    motion("pathLength", (0.5, 0.95, 0.6), rest=1.0, initial=0.6, clamp=False),
                ),
                timing=transition(b.duration, b.delay),
            )
        )
    group = Shape(
        tag=ShapeTag.GROUP,
        attrs={
            "fill": "none",
            "stroke": "url(#branchingStroke)",
            "stroke-width": paint.stroke(1.3),
            "stroke-linecap": "round",
        },
        children=tuple(children),
    )
    defs = [
        _linear(
            "branchingStroke",
            [(0, "#22c55e", 0.0), (40, "#22c55e", paint.opacity(0.35)), (100, "#38bdf8", 0.0)],
            x1="0%", y1="0%", x2="100%", y2="0%",
        )
    ]
    return _scene("branchingPaths", defs, [group])


# ---------------------------------------------------------------------------
# orbitingNodes
# ---------------------------------------------------------------------------


class Orbit(BaseModel):
    model_config = _frozen

    radius: int = Field(..., ge=160, le=470)
    node_count: int = Field(..., ge=4, le=8)
    angular_offset: float = Field(..., ge=0, lt=2 * math.pi)
    duration: float = Field(..., ge=14, lt=31)


class OrbitingNodesGeometry(BaseModel):
    model_config = _frozen

    orbits: Tuple[Orbit, ...] = Field(..., min_length=2, max_length=4)
    center_x: int = Field(..., ge=750, le=850)
    center_y: int = Field(..., ge=340, le=380)


def draw_orbiting_nodes(seeds: SeedContext) -> OrbitingNodesGeometry:
    rng = seeds.rng("orbits")
    count = rng.rand_int(2, 4)
    orbits = []
    for i in range(count):
        base = rng.rand_int(160, 200)
        radius = base + i * rng.rand_int(70, 90)
        orbits.append(
            Orbit(
                radius=radius,
                node_count=rng.rand_int(4, 8),
                angular_offset=rng.rand_float(0, math.pi * 2),
                duration=rng.rand_float(14, 22) + i * 3,
            )
        )

    rng = seeds.rng("center")
    return OrbitingNodesGeometry(
        orbits=tuple(orbits),
        center_x=rng.rand_int(750, 850),
        center_y=rng.rand_int(340, 380),
    )


def layout_orbiting_nodes(geo: OrbitingNodesGeometry, paint: Paint) -> Scene:
    shapes = [
        Shape(
            tag=ShapeTag.CIRCLE,
            attrs={"cx": geo.center_x, "cy": geo.center_y, "r": 260, "fill": "url(#orbitGlow)"},
            tracks=(motion("opacity", (paint.opacity(0.25),), rest=paint.opacity(0.18)),),
        )
    ]
    for i, orbit in enumerate(geo.orbits):
        start = math.degrees(orbit.angular_offset)
        nodes = []
        for j in range(orbit.node_count):
            angle = (j / orbit.node_count) * math.pi * 2
            nodes.append(
                Shape(
                    tag=ShapeTag.CIRCLE,
                    attrs={
                        "cx": round(math.cos(angle) * orbit.radius, 3),
                        "cy": round(math.sin(angle) * orbit.radius, 3),
                        "r": 5,
                        "fill": "#e5e7eb",
                        "opacity": paint.opacity(0.18 + j * 0.03),
                    },
                )
            )
        ring = Shape(
            tag=ShapeTag.CIRCLE,
            attrs={
                "r": orbit.radius,
                "fill": "none",
                "stroke": "#38bdf8",
                "stroke-opacity": paint.opacity(0.08 + i * 0.02),
                "stroke-width": paint.stroke(1),
            },
        )
        spinner = Shape(
            tag=ShapeTag.GROUP,
            tracks=(motion("rotate", (start, start + 360), rest=start, initial=start),),
            timing=transition(orbit.duration),
            children=tuple(nodes),
        )
        shapes.append(
            Shape(
                tag=ShapeTag.GROUP,
                attrs={"transform": f"translate({geo.center_x}, {geo.center_y})"},
                children=(ring, spinner),
            )
        )
    defs = [
        _radial(
            "orbitGlow",
            [(0, "#38bdf8", paint.opacity(0.4)), (60, "#6366f1", 0.0), (100, "#0f172a", 0.0)],
        )
    ]
    return _scene("orbitingNodes", defs, shapes)


# ---------------------------------------------------------------------------
# funnelStages
# ---------------------------------------------------------------------------


class FunnelStage(BaseModel):
    model_config = _frozen

    width: float = Field(..., ge=180, le=780)
    y: int = Field(..., ge=160, le=600)
    opacity: float = Field(..., ge=0.14, le=0.22)
    duration: float = Field(..., ge=12, lt=16)
    delay: float = Field(..., ge=0, lt=4)


class FunnelStagesGeometry(BaseModel):
    model_config = _frozen

    stages: Tuple[FunnelStage, ...] = Field(..., min_length=3, max_length=5)


def draw_funnel_stages(seeds: SeedContext) -> FunnelStagesGeometry:
    """Stage widths shrink by a jittered ratio per step, so they always narrow."""
    rng = seeds.rng("stages")
    count = rng.rand_int(3, 5)
    width = float(rng.rand_int(700, 780))
    stages = []
    for i in range(count):
        if i:
            width = round(width * rng.rand_float(0.72, 0.86), 2)
        stages.append(
            FunnelStage(
                width=width,
                y=160 + i * rng.rand_int(90, 110),
                opacity=round(0.14 + i * 0.02, 4),
                duration=rng.rand_float(12, 16),
                delay=rng.rand_float(0, 1) * i,
            )
        )
    return FunnelStagesGeometry(stages=tuple(stages))


def layout_funnel_stages(geo: FunnelStagesGeometry, paint: Paint) -> Scene:
    rects = []
    for stage in geo.stages:
        rects.append(
            Shape(
                tag=ShapeTag.RECT,
                attrs={
                    "x": round((760 - stage.width) / 2, 2),
                    "y": stage.y,
                    "width": stage.width,
                    "height": 80,
                    "rx": 24,
                    "fill": "url(#funnelFill)",
                    "stroke": "#38bdf8",
                    "stroke-opacity": paint.opacity(0.12),
                    "stroke-width": paint.stroke(1),
                },
                tracks=(
                    paint.fade(
                        (stage.opacity * 0.6, stage.opacity * 1.4, stage.opacity),
                        rest=stage.opacity,
                        initial=stage.opacity,
                    ),
                    motion("y", (stage.y - 6, stage.y + 4, stage.y), rest=stage.y, initial=stage.y),
                ),
                timing=transition(stage.duration, stage.delay),
            )
        )
    group = Shape(tag=ShapeTag.GROUP, attrs={"transform": "translate(220, 60)"}, children=tuple(rects))
    defs = [
        _linear(
            "funnelFill",
            [
                (0, "#38bdf8", 0.0),
                (30, "#38bdf8", paint.opacity(0.4)),
                (70, "#6366f1", paint.opacity(0.4)),
                (100, "#ec4899", 0.0),
            ],
            x1="0%", y1="0%", x2="100%", y2="0%",
        )
    ]
    return _scene("funnelStages", defs, [group])


# ---------------------------------------------------------------------------
# dashboardPulse
# ---------------------------------------------------------------------------


class MetricPoint(BaseModel):
    model_config = _frozen

    x: int = Field(..., ge=40, le=880)
    y: int = Field(..., ge=200, le=340)


class DashboardPulseGeometry(BaseModel):
    model_config = _frozen

    rows: int = Field(..., ge=2, le=4)
    cols: int = Field(..., ge=4, le=6)
    col_spacing: int = Field(..., ge=100, le=120)
    row_spacing: int = Field(..., ge=80, le=100)
    points: Tuple[MetricPoint, ...] = Field(..., min_length=5, max_length=8)


def draw_dashboard_pulse(seeds: SeedContext) -> DashboardPulseGeometry:
    grid = seeds.rng("grid")
    rows = grid.rand_int(2, 4)
    cols = grid.rand_int(4, 6)
    col_spacing = grid.rand_int(100, 120)
    row_spacing = grid.rand_int(80, 100)

    rng = seeds.rng("curve")
    count = rng.rand_int(5, 8)
    points = []
    for i in range(count):
        x = 40 + i * rng.rand_int(90, 120)
        points.append(MetricPoint(x=x, y=rng.rand_int(200, 340)))
    return DashboardPulseGeometry(
        rows=rows,
        cols=cols,
        col_spacing=col_spacing,
        row_spacing=row_spacing,
        points=tuple(points),
    )


def smooth_path(points) -> str:
    """Cubic path through points with horizontal tangents at each point."""
    d = ""
    for i, p in enumerate(points):
        if i == 0:
            d = f"M{fmt_num(p.x)} {fmt_num(p.y)}"
            continue
        prev = points[i - 1]
        cp_x = fmt_num((prev.x + p.x) / 2)
        d += f" C {cp_x} {fmt_num(prev.y)}, {cp_x} {fmt_num(p.y)}, {fmt_num(p.x)} {fmt_num(p.y)}"
    return d


def layout_dashboard_pulse(geo: DashboardPulseGeometry, paint: Paint) -> Scene:
    children = [
        Shape(
            tag=ShapeTag.RECT,
            attrs={
                "x": 0,
                "y": 0,
                "width": 800,
                "height": 380,
                "rx": 32,
                "fill": "#020617",
                "fill-opacity": paint.opacity(0.55),
                "stroke": "#1e293b",
                "stroke-opacity": paint.opacity(0.9),
            },
        )
    ]
    for row in range(geo.rows):
        cells = []
        for col in range(geo.cols):
            settle = 0.18 + col * 0.02
            cells.append(
                Shape(
                    tag=ShapeTag.RECT,
                    attrs={
                        "x": col * geo.col_spacing,
                        "y": 0,
                        "width": 60,
                        "height": 18 + col * 4,
                        "rx": 6,
                        "fill": "#0f172a",
                        "stroke": "#38bdf8",
                        "stroke-opacity": paint.opacity(0.18),
                    },
                    tracks=(
                        paint.fade((0.12, 0.35, settle), rest=0.22, initial=settle),
                        motion("scaleY", (1, 1.2 + col * 0.03, 1), rest=1, initial=1),
                    ),
                    timing=transition(14 + row * 2, (row * 0.6 + col * 0.25) % 3),
                )
            )
        children.append(
            Shape(
                tag=ShapeTag.GROUP,
                attrs={"transform": f"translate(40, {70 + row * geo.row_spacing})"},
                children=tuple(cells),
            )
        )
    children.append(
        Shape(
            tag=ShapeTag.PATH,
            attrs={
                "d": smooth_path(geo.points),
                "fill": "none",
                "stroke": "url(#metricLine)",
                "stroke-width": paint.stroke(2),
                "stroke-linecap": "round",
                "stroke-linejoin": "round",
                "opacity": paint.opacity(0.85),
            },
        )
    )
    group = Shape(tag=ShapeTag.GROUP, attrs={"transform": "translate(200, 200)"}, children=tuple(children))
    defs = [
        _linear(
            "metricLine",
            [(0, "#22c55e", 0.0), (40, "#22c55e", paint.opacity(0.85)), (100, "#22c55e", 0.0)],
            x1="0%", y1="0%", x2="100%", y2="0%",
        )
    ]
    return _scene("dashboardPulse", defs, [group])


# ---------------------------------------------------------------------------
# growthCurve
# ---------------------------------------------------------------------------


class CurveSegment(BaseModel):
    model_config = _frozen

    x: float = Field(..., ge=120, le=960)
    y: int = Field(..., ge=35, le=420)
    cp_x: float = Field(..., ge=40, le=920)
    cp_y: int = Field(..., ge=55, le=470)
    cp2_x: float = Field(..., ge=60, le=960)


class Tick(BaseModel):
    model_config = _frozen

    x: int = Field(..., ge=90, le=1210)
    height: int = Field(..., ge=80, le=315)
    duration: float = Field(..., ge=14, lt=18)
    delay: float = Field(..., ge=0, lt=4.2)


class GrowthCurveGeometry(BaseModel):
    model_config = _frozen

    start_y: int = Field(..., ge=400, le=440)
    segments: Tuple[CurveSegment, ...] = Field(..., min_length=5, max_length=8)
    ticks: Tuple[Tick, ...] = Field(..., min_length=5, max_length=8)


def draw_growth_curve(seeds: SeedContext) -> GrowthCurveGeometry:
    """
    Rising curve plus dashed ticks. Segment ``i`` draws its height from
    [400 - 50i, 420 - 55i]; past the fourth segment those bounds cross and the
    draw covers the swapped interval.
    """
    rng = seeds.rng("curve")
    count = rng.rand_int(5, 8)
    start_y = rng.rand_int(400, 440)
    segments = []
    for i in range(count):
        x = round((i + 1) * (960 / count), 4)
        y = rng.rand_int(400 - i * 50, 420 - i * 55)
        cp_x = x - rng.rand_int(40, 80)
        cp_y = y + rng.rand_int(20, 50)
        cp2_x = cp_x + rng.rand_int(20, 40)
        segments.append(CurveSegment(x=x, y=y, cp_x=cp_x, cp_y=cp_y, cp2_x=cp2_x))

    rng = seeds.rng("ticks")
    count = rng.rand_int(5, 8)
    ticks = []
    for i in range(count):
        x = 90 + i * rng.rand_int(120, 160)
        height = rng.rand_int(80, 140) + i * rng.rand_int(15, 25)
        ticks.append(
            Tick(
                x=x,
                height=height,
                duration=rng.rand_float(14, 18),
                delay=rng.rand_float(0, 0.6) * i,
            )
        )
    return GrowthCurveGeometry(start_y=start_y, segments=tuple(segments), ticks=tuple(ticks))


def layout_growth_curve(geo: GrowthCurveGeometry, paint: Paint) -> Scene:
    d = f"M0 {geo.start_y}"
    for seg in geo.segments:
        d += (
            f" C {fmt_num(seg.cp_x)} {seg.cp_y}, {fmt_num(seg.cp2_x)} {seg.y}, "
            f"{fmt_num(seg.x)} {seg.y}"
        )
    children = [
        Shape(
            tag=ShapeTag.PATH,
            attrs={
                "d": d,
                "stroke": "url(#growthStroke)",
                "stroke-width": paint.stroke(2),
                "stroke-linecap": "round",
                "stroke-linejoin": "round",
            },
            tracks=(
                paint.fade((0.25, 0.75, 0.4), rest=0.5, initial=0.4),
                motion("pathLength", (0.7, 1, 0.85), rest=1.0, initial=0.8),
            ),
            timing=transition(BACKGROUND_BASE_DURATION),
        )
    ]
    for tick in geo.ticks:
        children.append(
            Shape(
                tag=ShapeTag.PATH,
                attrs={
                    "d": f"M{tick.x} 440 L {tick.x} {440 - tick.height}",
                    "stroke": "#22c55e",
                    "stroke-width": paint.stroke(1),
                    "stroke-opacity": paint.opacity(0.25),
                    "stroke-dasharray": "4 6",
                },
                tracks=(paint.fade((0.06, 0.22, 0.12), rest=0.16, initial=0.1),),
                timing=transition(tick.duration, tick.delay),
            )
        )
    group = Shape(
        tag=ShapeTag.GROUP,
        attrs={"transform": "translate(160, 140)", "fill": "none"},
        children=tuple(children),
    )
    defs = [
        _linear(
            "growthStroke",
            [
                (0, "#22c55e", 0.0),
                (30, "#22c55e", paint.opacity(0.6)),
                (80, "#38bdf8", paint.opacity(0.9)),
                (100, "#e5e7eb", 0.0),
            ],
            x1="0%", y1="100%", x2="100%", y2="0%",
        )
    ]
    return _scene("growthCurve", defs, [group])


# ---------------------------------------------------------------------------
# networkSync
# ---------------------------------------------------------------------------


class NetworkNode(BaseModel):
    model_config = _frozen

    x: int = Field(..., ge=220, le=1120)
    y: int = Field(..., ge=180, le=440)
    pulse_delay: float = Field(..., ge=0, lt=2)
    duration: float = Field(..., ge=12, lt=18)


class NetworkSyncGeometry(BaseModel):
    model_config = _frozen

    nodes: Tuple[NetworkNode, ...] = Field(..., min_length=5, max_length=9)
    links: Tuple[Tuple[int, int], ...]


def draw_network_sync(seeds: SeedContext) -> NetworkSyncGeometry:
    rng = seeds.rng("nodes")
    count = rng.rand_int(5, 9)
    nodes = []
    for i in range(count):
        x = rng.rand_int(220, 320) + i * rng.rand_int(80, 100)
        base_y = rng.rand_int(180, 280)
        lift = rng.rand_int(80, 160)
        nodes.append(
            NetworkNode(
                x=x,
                y=base_y + (i % 2) * lift,
                pulse_delay=rng.rand_float(0, 2),
                duration=rng.rand_float(12, 18),
            )
        )

    rng = seeds.rng("connections")
    links = []
    for i in range(count - 1):
        links.append((i, i + 1))
        if i + 2 < count and rng.chance(0.5):
            links.append((i, i + 2))
    return NetworkSyncGeometry(nodes=tuple(nodes), links=tuple(links))


def layout_network_sync(geo: NetworkSyncGeometry, paint: Paint) -> Scene:
    lines = []
    for i, (a_idx, b_idx) in enumerate(geo.links):
        a, b = geo.nodes[a_idx], geo.nodes[b_idx]
        lines.append(
            Shape(
                tag=ShapeTag.LINE,
                attrs={"x1": a.x, "y1": a.y, "x2": b.x, "y2": b.y},
                tracks=(paint.fade((0.06, 0.45, 0.2), rest=0.18, initial=0.1),),
                timing=transition(16 + i * 1.5, i * 0.5),
            )
        )
    shapes = [
        Shape(
            tag=ShapeTag.GROUP,
            attrs={
                "stroke": "url(#networkLine)",
                "stroke-width": paint.stroke(1.4),
                "stroke-opacity": paint.opacity(0.5),
            },
            children=tuple(lines),
        )
    ]
    for node in geo.nodes:
        shapes.append(
            Shape(
                tag=ShapeTag.CIRCLE,
                attrs={
                    "cx": node.x,
                    "cy": node.y,
                    "r": 10,
                    "fill": "url(#networkNode)",
                    "stroke": "#38bdf8",
                    "stroke-width": paint.stroke(1),
                    "stroke-opacity": paint.opacity(0.5),
                },
                tracks=(paint.fade((0.28, 0.9, 0.5), rest=0.55, initial=0.4),),
                timing=transition(node.duration, node.pulse_delay),
            )
        )
    defs = [
        _linear(
            "networkLine",
            [(0, "#38bdf8", paint.opacity(0.8)), (100, "#6366f1", paint.opacity(0.6))],
            x1="0%", y1="0%", x2="100%", y2="100%",
        ),
        _radial(
            "networkNode",
            [(0, "#e5e7eb", paint.opacity(0.9)), (60, "#38bdf8", 0.0), (100, "#020617", 0.0)],
        ),
    ]
    return _scene("networkSync", defs, shapes)


# ---------------------------------------------------------------------------
# neuralFlow
# ---------------------------------------------------------------------------


class NeuralLayer(BaseModel):
    model_config = _frozen

    y: int = Field(..., ge=200, le=630)
    node_count: int = Field(..., ge=7, le=11)
    node_spacing: int = Field(..., ge=80, le=100)
    duration: float = Field(..., ge=16, lt=22)
    delay: float = Field(..., ge=0, lt=3)


class NeuralFlowGeometry(BaseModel):
    model_config = _frozen

    layers: Tuple[NeuralLayer, ...] = Field(..., min_length=2, max_length=4)


def draw_neural_flow(seeds: SeedContext) -> NeuralFlowGeometry:
    rng = seeds.rng("layers")
    count = rng.rand_int(2, 4)
    layers = []
    for i in range(count):
        y = rng.rand_int(200, 240) + i * rng.rand_int(100, 130)
        layers.append(
            NeuralLayer(
                y=y,
                node_count=rng.rand_int(7, 11),
                node_spacing=rng.rand_int(80, 100),
                duration=rng.rand_float(16, 22),
                delay=rng.rand_float(0, 1) * i,
            )
        )
    return NeuralFlowGeometry(layers=tuple(layers))


def layout_neural_flow(geo: NeuralFlowGeometry, paint: Paint) -> Scene:
    shapes = []
    for i, layer in enumerate(geo.layers):
        children = [
            Shape(
                tag=ShapeTag.PATH,
                attrs={
                    "d": f"M160 {layer.y} H 1040",
                    "stroke": "url(#neuralStroke)",
                    "stroke-width": paint.stroke(1.4),
                    "stroke-linecap": "round",
                },
                tracks=(paint.fade((0.06, 0.32, 0.14), rest=0.16, initial=0.12),),
                timing=transition(layer.duration, layer.delay),
            )
        ]
        for j in range(layer.node_count):
            children.append(
                Shape(
                    tag=ShapeTag.CIRCLE,
                    attrs={
                        "cx": 190 + j * layer.node_spacing,
                        "cy": layer.y,
                        "r": 6,
                        "fill": "#e5e7eb",
                        "fill-opacity": paint.opacity(0.8),
                        "stroke": "#38bdf8",
                        "stroke-width": paint.stroke(1),
                        "stroke-opacity": paint.opacity(0.7),
                    },
                    tracks=(paint.fade((0.18, 0.85, 0.4), rest=0.6, initial=0.35),),
                    timing=transition(12 + i * 2, (j * 0.25 + i * 0.6) % 4),
                )
            )
        shapes.append(Shape(tag=ShapeTag.GROUP, children=tuple(children)))
    defs = [
        _linear(
            "neuralStroke",
            [
                (0, "#a855f7", 0.0),
                (30, "#38bdf8", paint.opacity(0.8)),
                (70, "#6366f1", paint.opacity(0.7)),
                (100, "#10b981", 0.0),
            ],
            x1="0%", y1="0%", x2="100%", y2="0%",
        )
    ]
    return _scene("neuralFlow", defs, shapes)


# Registration order is the public variant order.
VARIANTS = {
    "contentFlow": (draw_content_flow, layout_content_flow),
    "branchingPaths": (draw_branching_paths, layout_branching_paths),
    "orbitingNodes": (draw_orbiting_nodes, layout_orbiting_nodes),
    "funnelStages": (draw_funnel_stages, layout_funnel_stages),
    "dashboardPulse": (draw_dashboard_pulse, layout_dashboard_pulse),
    "growthCurve": (draw_growth_curve, layout_growth_curve),
    "networkSync": (draw_network_sync, layout_network_sync),
    "neuralFlow": (draw_neural_flow, layout_neural_flow),
}
