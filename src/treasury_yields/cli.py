from __future__ import annotations

import argparse
import json
import logging

from treasury_yields import __version__
from treasury_yields.config.loader import load_config
from treasury_yields.config.models import ServiceConfig
from treasury_yields.data.ingestion.treasury import curve_to_frame
from treasury_yields.service import build_service


# ============================================================
# Command: curve
# ============================================================


def cmd_curve(args):
    cfg = load_config(args.config) if args.config else ServiceConfig()
    level = "DEBUG" if args.verbose else cfg.log_level
    logging.basicConfig(
        level=getattr(logging, level),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    service = build_service(cfg)
    curve = service.get_current_curve_sync()

    if args.json:
        print(json.dumps(curve.to_records()))
        return

    if curve.is_empty:
        print("[treasury-yields] No yield curve available.")
        return
    print(curve_to_frame(curve))


# ============================================================
# Command: version
# ============================================================


def cmd_version(args):
    print(__version__)


# ============================================================
# Main CLI
# ============================================================


def main(argv=None):
    parser = argparse.ArgumentParser(prog="treasury-yields")
    sub = parser.add_subparsers(dest="command", required=True)

    p_curve = sub.add_parser("curve", help="Print the current Treasury par curve")
    p_curve.add_argument("--config", default=None, help="Path to config YAML/JSON")
    p_curve.add_argument("--json", action="store_true", help="Emit JSON records")
    p_curve.add_argument("-v", "--verbose", action="store_true", help="Debug logging")
    p_curve.set_defaults(func=cmd_curve)

    p_ver = sub.add_parser("version", help="Show version")
    p_ver.set_defaults(func=cmd_version)

    args = parser.parse_args(argv)
    args.func(args)


if __name__ == "__main__":
    main()
