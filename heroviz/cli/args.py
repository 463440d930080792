import argparse


def build_common_parser() -> argparse.ArgumentParser:
    ap = argparse.ArgumentParser(add_help=False)
    ap.add_argument("--variant", default=None, help="Variant id (e.g. contentFlow)")
    ap.add_argument("--family", choices=["background", "tile"], default="background", help="Style family")
    ap.add_argument("--seed", default=None, help="Seed string (defaults to the route, else empty)")
    ap.add_argument("--route", default=None, help="Route path or slug; resolves variant and seed via presets")
    ap.add_argument("--intensity", choices=["subtle", "medium", "bold"], default=None, help="Intensity level")
    ap.add_argument(
        "--reduced-motion",
        choices=["true", "false", "pending"],
        default="pending",
        help="User reduced-motion preference as known to the host",
    )
    ap.add_argument("--profile", default=None, help="Config profile overlay (conf/profiles/<name>.yaml)")
    ap.add_argument("--config", default=None, help="Explicit engine config YAML path")
    return ap


def reduced_motion_flag(value: str):
    """Map the CLI tri-state onto True / False / None (pending)."""
    return {"true": True, "false": False}.get(value)
