#!/usr/bin/env python3
"""
Describe one hero visual from the command line.

Prints the chosen presentation as JSON (descriptor plus motion mode) or as an
SVG preview. An unknown variant prints nothing, the same silent fallback the
engine gives its callers.
"""

import argparse
import sys
from typing import List, Optional

from heroviz.cli.args import build_common_parser, reduced_motion_flag
from heroviz.core import configure_logging, get_logger, load_config
from heroviz.procedural.presets import (
    background_variant_for_route,
    default_intensity_for_route,
    tile_variant_for_path,
)
from heroviz.procedural.registry import render_visual
from heroviz.procedural.sdk import Family
from heroviz.procedural.svg_preview import render_svg

log = get_logger("heroviz.describe")


def _resolve(args) -> tuple:
    """Return (variant, seed, intensity) after applying route presets."""
    variant = args.variant
    seed = args.seed
    intensity = args.intensity
    if args.route is not None:
        if variant is None:
            if args.family == Family.TILE.value:
                variant = tile_variant_for_path(args.route)
            else:
                variant = background_variant_for_route(args.route)
        if seed is None:
            seed = args.route
        if intensity is None:
            intensity = default_intensity_for_route(args.route)
    return variant, seed or "", intensity


def main(argv: Optional[List[str]] = None) -> int:
    """Main CLI entry point."""
    parser = argparse.ArgumentParser(
        description="Describe a seeded procedural hero visual",
        parents=[build_common_parser()],
    )
    parser.add_argument("--format", choices=["json", "svg"], default="json", help="Output format")

    args = parser.parse_args(argv)
    if args.variant is None and args.route is None:
        parser.error("one of --variant or --route is required")

    cfg = load_config(args.config, profile=args.profile)
    configure_logging(cfg)

    variant, seed, intensity = _resolve(args)
    presentation = render_visual(
        variant,
        seed=seed,
        intensity=intensity,
        reduced_motion=reduced_motion_flag(args.reduced_motion),
        family=args.family,
        config=cfg,
    )
    if presentation is None:
        log.debug(f"[describe] Nothing to render for {args.family}.{variant}")
        return 0

    if args.format == "svg":
        sys.stdout.write(render_svg(presentation) + "\n")
    else:
        sys.stdout.write(presentation.model_dump_json(indent=2) + "\n")
    return 0


if __name__ == "__main__":
    sys.exit(main())
