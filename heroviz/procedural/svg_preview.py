#!/usr/bin/env python3
"""
SVG preview of a presentation.

Serializes a static snapshot, or an animated scene with SMIL animation
children, to an SVG document string with svgwrite. Nothing is written to disk.
Only opacity, y and rotate tracks are expressible as SMIL here; other tracks
(pathLength, scale*) keep the shape's base geometry in the markup.
"""

from typing import List, Optional, Tuple

import svgwrite

from heroviz.core import get_logger

from .presentation import AnimatedPresentation, ResolvedShape, StaticPresentation
from .sdk import RepeatType, Scene, Shape, ShapeTag, Track, fmt_num

log = get_logger("heroviz.svg_preview")

SMIL_PROPS = ("opacity", "y")


def _fmt(value):
    if isinstance(value, float):
        return fmt_num(value)
    return value


def _points(spec: str) -> List[Tuple[float, float]]:
    out = []
    for pair in spec.split():
        x, y = pair.split(",")
        out.append((float(x), float(y)))
    return out


def _origin(attrs) -> str:
    origin = attrs.get("transform-origin")
    if not isinstance(origin, str):
        return "0 0"
    parts = [p.replace("px", "") for p in origin.split()]
    if len(parts) != 2 or not all(p.replace(".", "", 1).lstrip("-").isdigit() for p in parts):
        return "0 0"
    return " ".join(parts)


def _make_element(dwg, tag: ShapeTag, attrs, text: Optional[str]):
    attrs = {k: v for k, v in attrs.items() if k != "transform-origin"}
    if tag == ShapeTag.GROUP:
        el = dwg.g()
    elif tag == ShapeTag.PATH:
        el = dwg.path(d=attrs.pop("d", ""))
    elif tag == ShapeTag.CIRCLE:
        el = dwg.circle()
    elif tag == ShapeTag.RECT:
        el = dwg.rect()
    elif tag == ShapeTag.LINE:
        el = dwg.line()
    elif tag == ShapeTag.POLYGON:
        el = dwg.polygon(points=_points(str(attrs.pop("points", ""))))
    elif tag == ShapeTag.TEXT:
        el = dwg.text(text or "")
    else:
        raise ValueError(f"Unsupported shape tag: {tag}")
    el.update({k: _fmt(v) for k, v in attrs.items()})
    return el


def _loop_values(track: Track, mirror: bool) -> Tuple[float, ...]:
    values = track.values
    if mirror and len(values) > 1:
        values = values + tuple(reversed(values[:-1]))
    return values


def _animate(dwg, el, shape: Shape, track: Track, attrs) -> None:
    if track.is_constant or shape.timing is None:
        if track.prop in SMIL_PROPS:
            el[track.prop] = _fmt(track.values[0])
        return
    timing = shape.timing
    mirror = timing.repeat == RepeatType.MIRROR
    values = _loop_values(track, mirror)
    dur = f"{fmt_num(timing.duration * (2 if mirror else 1))}s"
    begin = f"{fmt_num(timing.delay)}s"
    if track.prop in SMIL_PROPS:
        el.add(
            dwg.animate(
                attributeName=track.prop,
                values=";".join(fmt_num(v) for v in values),
                dur=dur,
                begin=begin,
                repeatCount="indefinite",
            )
        )
    elif track.prop == "rotate":
        origin = _origin(attrs)
        anim = dwg.animateTransform(
            "rotate",
            values=";".join(f"{fmt_num(v)} {origin}" for v in values),
            dur=dur,
            begin=begin,
            repeatCount="indefinite",
        )
        anim["attributeName"] = "transform"
        el.add(anim)
    else:
        log.debug(f"[svg] Skipping {track.prop} track in preview")


def _add_animated(dwg, parent, shape: Shape) -> None:
    el = _make_element(dwg, shape.tag, shape.attrs, shape.text)
    for track in shape.tracks:
        _animate(dwg, el, shape, track, shape.attrs)
    for child in shape.children:
        _add_animated(dwg, el, child)
    parent.add(el)


def _add_static(dwg, parent, shape: ResolvedShape) -> None:
    attrs = dict(shape.attrs)
    for prop in ("pathLength", "scale", "scaleX", "scaleY"):
        attrs.pop(prop, None)
    rotate = attrs.pop("rotate", None)
    if rotate is not None:
        attrs["transform"] = f"rotate({fmt_num(rotate)} {_origin(shape.attrs)})"
    el = _make_element(dwg, shape.tag, attrs, shape.text)
    for child in shape.children:
        _add_static(dwg, el, child)
    parent.add(el)


def _drawing(scene: Scene):
    width, height = scene.viewbox
    dwg = svgwrite.Drawing(size=("100%", "100%"), debug=False)
    dwg["viewBox"] = f"0 0 {width} {height}"
    dwg["aria-hidden"] = "true"
    for grad in scene.defs:
        if grad.kind == "radial":
            g = dwg.radialGradient(id=grad.id)
        else:
            g = dwg.linearGradient(id=grad.id)
        g.update(dict(grad.attrs))
        for stop in grad.stops:
            g.add_stop_color(offset=f"{fmt_num(stop.offset)}%", color=stop.color,
                             opacity=fmt_num(stop.opacity))
        dwg.defs.add(g)
    return dwg


def render_svg(presentation) -> str:
    """Return SVG markup for a presentation, or "" for None."""
    if presentation is None:
        return ""
    if not isinstance(presentation, (StaticPresentation, AnimatedPresentation)):
        raise TypeError(f"Not a presentation: {type(presentation).__name__}")
    scene = presentation.descriptor.scene
    dwg = _drawing(scene)
    if isinstance(presentation, StaticPresentation):
        for shape in presentation.snapshot():
            _add_static(dwg, dwg, shape)
    else:
        for shape in scene.shapes:
            _add_animated(dwg, dwg, shape)
    return dwg.tostring()
