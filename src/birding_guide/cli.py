"""
Command-line interface for the application.

This module provides the main entry point for the CLI.
"""

from __future__ import annotations

import argparse
import sys
from pathlib import Path

from birding_guide import __version__
from birding_guide.config import get_settings
from birding_guide.datasources.ebird import ExportFormatError, MissingExportError
from birding_guide.flows import build
from birding_guide.flows.build import build_all
from birding_guide.schemas import Season


def create_parser() -> argparse.ArgumentParser:
    """Create the argument parser for the CLI."""
    parser = argparse.ArgumentParser(
        prog="birding-guide",
        description="Seasonal birding hotspot rankings from eBird Basic Dataset exports",
    )
    parser.add_argument(
        "-v",
        "--version",
        action="version",
        version=f"%(prog)s {__version__}",
    )
    parser.add_argument(
        "--debug",
        action="store_true",
        help="Enable debug mode",
    )

    subparsers = parser.add_subparsers(dest="command", help="Available commands")

    # 'build' command - run both passes and publish site data
    build_parser = subparsers.add_parser("build", help="Build site data from EBD exports")
    build_parser.add_argument(
        "--sampling",
        type=Path,
        default=None,
        help="Sampling export (default: from settings)",
    )
    build_parser.add_argument(
        "--observations",
        type=Path,
        default=None,
        help="Observation export (default: from settings)",
    )

    # 'show' command - print a season's ranking from built data
    show_parser = subparsers.add_parser("show", help="Show a season's top hotspots")
    show_parser.add_argument(
        "--season",
        type=Season,
        choices=list(Season),
        required=True,
        help="Season to show",
    )
    show_parser.add_argument(
        "--limit",
        type=int,
        default=None,
        help="Show at most this many hotspots",
    )

    subparsers.add_parser("info", help="Show application info")

    return parser


def cmd_build(args: argparse.Namespace) -> int:
    """Handle the 'build' command."""
    settings = get_settings()
    if args.debug:
        print(f"Debug mode enabled. Settings: {settings}")

    try:
        result = build_all(sampling_path=args.sampling, observation_path=args.observations)
    except (MissingExportError, ExportFormatError) as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    print(
        f"Built {sum(result['seasons'].values())} seasonal rankings from "
        f"{result['checklists']:,} checklists at {result['hotspots']:,} hotspots."
    )
    return 0


def cmd_show(args: argparse.Namespace) -> int:
    """Handle the 'show' command."""
    data = build.store.read(build.SEASONAL_HOTSPOTS_PATH)
    if data is None:
        print("No seasonal data found. Run 'birding-guide build' first.", file=sys.stderr)
        return 1

    hotspots = data.get(args.season.value, [])
    if args.limit is not None:
        hotspots = hotspots[: args.limit]

    if not hotspots:
        print(f"No ranked hotspots for {args.season.value}.")
        return 0

    print(f"Top hotspots for {args.season.value}:")
    for rank, hotspot in enumerate(hotspots, start=1):
        print(f"{rank:>2}. {hotspot['hotspotName']} ({hotspot['hotspotId']})")
        notable = ", ".join(f"{s['name']} ({s['score']})" for s in hotspot["notableSpecies"])
        if notable:
            print(f"    notable: {notable}")
        rare = ", ".join(s["name"] for s in hotspot["rareSpecies"])
        if rare:
            print(f"    rare: {rare}")
    return 0


def cmd_info(_args: argparse.Namespace) -> int:
    """Handle the 'info' command."""
    settings = get_settings()
    print(f"Application: {settings.app_name}")
    print(f"Version: {__version__}")
    print(f"Environment: {settings.app_env}")
    print(f"Debug: {settings.debug}")
    print(f"Region: {settings.region_code}")
    print(f"Sampling export: {settings.sampling_path}")
    print(f"Observation export: {settings.observation_path}")
    print(f"Output directory: {build.store.derived}")
    return 0


def main() -> int:
    """Main entry point for the CLI."""
    parser = create_parser()
    args = parser.parse_args()

    if args.command is None:
        parser.print_help()
        return 0

    commands = {
        "build": cmd_build,
        "show": cmd_show,
        "info": cmd_info,
    }

    handler = commands.get(args.command)
    if handler:
        return handler(args)
    else:
        parser.print_help()
        return 1


if __name__ == "__main__":
    sys.exit(main())
