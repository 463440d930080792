import json

import pytest

from heroviz.cli.args import build_common_parser, reduced_motion_flag
from heroviz.describe import main


def test_cli_flags_present():
    ap = build_common_parser()
    args = ap.parse_args(
        [
            "--variant",
            "seoUplift",
            "--family",
            "tile",
            "--seed",
            "seo",
            "--intensity",
            "bold",
            "--reduced-motion",
            "false",
            "--profile",
            "calm",
        ]
    )
    assert args.variant == "seoUplift"
    assert args.family == "tile"
    assert args.intensity == "bold"
    assert reduced_motion_flag(args.reduced_motion) is False
    assert args.profile == "calm"


def test_reduced_motion_tri_state():
    assert reduced_motion_flag("true") is True
    assert reduced_motion_flag("false") is False
    assert reduced_motion_flag("pending") is None


def test_json_output(capsys):
    assert main(["--variant", "contentFlow", "--seed", "home-hero", "--reduced-motion", "false"]) == 0
    data = json.loads(capsys.readouterr().out)
    assert data["mode"] == "animated"
    assert data["descriptor"]["variant"] == "contentFlow"
    assert data["descriptor"]["intensity"] == "medium"
    assert 3 <= len(data["descriptor"]["geometry"]["streams"]) <= 5


def test_route_resolves_preset(capsys):
    assert main(["--route", "/services/seo"]) == 0
    data = json.loads(capsys.readouterr().out)
    assert data["mode"] == "static"
    assert data["descriptor"]["variant"] == "growthCurve"
    assert data["descriptor"]["seed"] == "/services/seo"


def test_tile_route_uses_slug(capsys):
    assert main(["--route", "/services/martech", "--family", "tile"]) == 0
    data = json.loads(capsys.readouterr().out)
    assert data["descriptor"]["variant"] == "martechSync"
    assert data["descriptor"]["family"] == "tile"


def test_svg_output(capsys):
    assert main(["--variant", "neuralFlow", "--seed", "x", "--format", "svg"]) == 0
    out = capsys.readouterr().out
    assert out.startswith("<svg")


def test_unknown_variant_prints_nothing(capsys):
    assert main(["--variant", "doesNotExist"]) == 0
    assert capsys.readouterr().out == ""


def test_requires_variant_or_route():
    with pytest.raises(SystemExit) as exc:
        main([])
    assert exc.value.code == 2


def test_bad_choice_exits_2():
    with pytest.raises(SystemExit) as exc:
        main(["--variant", "contentFlow", "--format", "png"])
    assert exc.value.code == 2
