import pytest

from heroviz.procedural.presentation import MotionModeAdapter
from heroviz.procedural.registry import dispatch, render_visual
from heroviz.procedural.sdk import Family
from heroviz.procedural.svg_preview import render_svg

from conftest import all_variant_specs, variant_ids


def test_none_renders_empty():
    assert render_svg(None) == ""


def test_rejects_non_presentation():
    with pytest.raises(TypeError):
        render_svg(dispatch("contentFlow").generate("x"))
    with pytest.raises(TypeError):
        render_svg("<svg/>")


def test_viewbox_is_space_separated():
    svg = render_svg(render_visual("dashboardPulse", seed="/projects", reduced_motion=True))
    assert 'viewBox="0 0 1200 800"' in svg
    assert "0,0,1200,800" not in svg


def test_static_has_no_animation_elements():
    svg = render_svg(render_visual("contentFlow", seed="home-hero", reduced_motion=True))
    assert svg.startswith("<svg")
    assert 'viewBox="0 0 1200 800"' in svg
    assert "contentFlowStroke" in svg
    assert "<animate" not in svg


def test_animated_adds_smil():
    svg = render_svg(render_visual("contentFlow", seed="home-hero", reduced_motion=False))
    assert "<animate" in svg
    assert 'repeatCount="indefinite"' in svg


def test_rotation_uses_transform_animation():
    svg = render_svg(render_visual("socialOrbit", seed="s", family=Family.TILE, reduced_motion=False))
    assert "animateTransform" in svg
    assert 'viewBox="0 0 600 420"' in svg


def test_static_rotation_becomes_transform():
    svg = render_svg(render_visual("socialOrbit", seed="s", family=Family.TILE, reduced_motion=True))
    assert "rotate(0 300 210)" in svg


@pytest.mark.parametrize("spec", all_variant_specs(), ids=variant_ids)
@pytest.mark.parametrize("reduced", [True, False])
def test_every_variant_renders(spec, reduced):
    presentation = MotionModeAdapter().present(spec.generate("preview"), reduced)
    svg = render_svg(presentation)
    assert svg.startswith("<svg")
    assert svg.endswith("</svg>")


def test_preview_is_deterministic():
    a = render_svg(render_visual("martechSync", seed="m", family="tile", reduced_motion=False))
    b = render_svg(render_visual("martechSync", seed="m", family="tile", reduced_motion=False))
    assert a == b
