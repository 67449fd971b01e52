# =============================================================================
# src/cli/status.py - World Status Lookup CLI
# =============================================================================
#
# One-shot command-line front end for StatusService.  Each invocation fetches
# the status page once (the cache only lives as long as the process) and
# answers a single query:
#
#   world   : status of one world ("Excalibur", case-insensitive)
#   group   : one data center and its worlds
#   region  : every data center in a region (na, eu, jp, oc)
#   list    : everything, grouped by data center or flat with --flat
#
# Logs go to stderr so stdout only carries the answer; --json prints the
# pydantic models as JSON for scripting.
#
# Exit codes: 0 on success, 1 when the world/data center is not found or the
# status page could not be fetched/parsed.
# =============================================================================

"""Command-line lookups against the world-status page.

Usage::

    python -m src.cli world Excalibur
    python -m src.cli group aether --json
    python -m src.cli region eu
    python -m src.cli list --flat
"""

from __future__ import annotations

import argparse
import asyncio
import json
import sys
from collections.abc import Sequence

from pydantic import BaseModel

from src.config.loader import load_settings
from src.config.settings import Settings
from src.main import build_status_service
from src.models.world import RecordGroup, Region, WorldRecord
from src.services.status_service import StatusService
from src.utils.errors import ConfigurationError, StatusUnavailableError
from src.utils.logging import LOG_LEVELS, configure_logging


# ---------------------------------------------------------------------------
# Formatting helpers
# ---------------------------------------------------------------------------


def _format_world(world: WorldRecord) -> str:
    creation = "open" if world.character_creation_open else "closed"
    return (
        f"{world.name:<16} {world.availability.value:<12} "
        f"{world.population.value:<11} creation {creation}"
    )


def _format_group(group: RecordGroup) -> str:
    lines = [f"{group.name} ({group.region.value.upper()}) - {len(group.members)} worlds"]
    lines.extend(f"  {_format_world(world)}" for world in group.members)
    return "\n".join(lines)


def _to_json(payload: BaseModel | Sequence[BaseModel]) -> str:
    if isinstance(payload, BaseModel):
        data = payload.model_dump(mode="json")
    else:
        data = [item.model_dump(mode="json") for item in payload]
    return json.dumps(data, indent=2, ensure_ascii=False)


# ---------------------------------------------------------------------------
# Subcommand handlers
# ---------------------------------------------------------------------------


async def _handle_world(args: argparse.Namespace, service: StatusService) -> int:
    world = await service.check_status(args.name)
    if world is None:
        print(f"World not found: {args.name}", file=sys.stderr)
        return 1
    print(_to_json(world) if args.json else _format_world(world))
    return 0


async def _handle_group(args: argparse.Namespace, service: StatusService) -> int:
    group = await service.get_group(args.name)
    if group is None:
        print(f"Data center not found: {args.name}", file=sys.stderr)
        return 1
    print(_to_json(group) if args.json else _format_group(group))
    return 0


async def _handle_region(args: argparse.Namespace, service: StatusService) -> int:
    groups = await service.list_by_region(Region(args.region))
    if args.json:
        print(_to_json(groups))
    elif not groups:
        print(f"No data centers in region {args.region.upper()}")
    else:
        print("\n\n".join(_format_group(group) for group in groups))
    return 0


async def _handle_list(args: argparse.Namespace, service: StatusService) -> int:
    if args.flat:
        worlds = await service.list_flat()
        print(_to_json(worlds) if args.json else "\n".join(_format_world(w) for w in worlds))
        return 0
    groups = await service.list_all()
    print(_to_json(groups) if args.json else "\n\n".join(_format_group(g) for g in groups))
    return 0


_HANDLERS = {
    "world": _handle_world,
    "group": _handle_group,
    "region": _handle_region,
    "list": _handle_list,
}


async def _run(args: argparse.Namespace, app_settings: Settings) -> int:
    async with build_status_service(app_settings) as service:
        try:
            return await _HANDLERS[args.command](args, service)
        except StatusUnavailableError as exc:
            print(f"Error: {exc}", file=sys.stderr)
            return 1


# ---------------------------------------------------------------------------
# Argument parser
# ---------------------------------------------------------------------------


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="world-status",
        description="Look up world and data center status from the Lodestone status page.",
    )
    parser.add_argument(
        "--config",
        default="config/config.yaml",
        help="YAML config file (default: config/config.yaml; missing file is fine)",
    )
    parser.add_argument(
        "--log-level",
        default=None,
        type=str.upper,
        choices=LOG_LEVELS,
        help="Override the configured log level",
    )

    output = argparse.ArgumentParser(add_help=False)
    output.add_argument("--json", action="store_true", help="Print results as JSON")

    subparsers = parser.add_subparsers(dest="command")

    world = subparsers.add_parser("world", help="Show one world's status", parents=[output])
    world.add_argument("name", help="World name (case-insensitive)")

    group = subparsers.add_parser(
        "group", help="Show one data center and its worlds", parents=[output]
    )
    group.add_argument("name", help="Data center name (case-insensitive)")

    region = subparsers.add_parser(
        "region", help="Show every data center in a region", parents=[output]
    )
    region.add_argument("region", choices=[r.value for r in Region], type=str.lower)

    listing = subparsers.add_parser("list", help="Show all data centers", parents=[output])
    listing.add_argument("--flat", action="store_true", help="List worlds without grouping")

    return parser


def main(argv: Sequence[str] | None = None) -> None:
    """CLI entry point: parse arguments, configure logging, run one query."""
    parser = _build_parser()
    args = parser.parse_args(argv)

    if args.command is None:
        parser.print_help()
        sys.exit(1)

    try:
        app_settings = load_settings(args.config)
    except ConfigurationError as exc:
        print(f"Error: {exc}", file=sys.stderr)
        sys.exit(1)

    configure_logging(
        log_level=args.log_level or app_settings.log_level,
        json_output=(app_settings.app_env == "production"),
        stream=sys.stderr,
    )

    sys.exit(asyncio.run(_run(args, app_settings)))


if __name__ == "__main__":
    main()
