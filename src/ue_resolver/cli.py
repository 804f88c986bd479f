"""Command line interface for the Unreal Engine resolver."""

from __future__ import annotations

import argparse
import logging
import sys
from typing import Sequence

from ue_resolver import __version__
from ue_resolver.engine.resolver import find_engine_installations, rank_installations, resolve_engine
from ue_resolver.logging_config import setup_logging
from ue_resolver.probe.base import ProbeContext
from ue_resolver.report.common import ConsoleTheme
from ue_resolver.report.console import render_installations, render_resolution
from ue_resolver.report.json_report import write_installations_json, write_resolution_json
from ue_resolver.settings import Settings, load_settings

logger = logging.getLogger(__name__)

EXIT_RESOLVED = 0
EXIT_NOT_FOUND = 1
EXIT_ERROR = 2


def _add_global_flags(parser: argparse.ArgumentParser) -> None:
    parser.add_argument("--json", metavar="PATH", help="write machine-readable JSON output")
    parser.add_argument("--verbose", action="store_true", help="show version details and debug logging")
    parser.add_argument("--no-color", action="store_true", help="disable ANSI colors")
    parser.add_argument("--timeout", type=float, help="per-probe timeout in seconds (default 20, or UERESOLVE_TIMEOUT)")
    parser.add_argument("--log-level", help="logging level (default WARNING, or UERESOLVE_LOG_LEVEL)")
    parser.add_argument("--log-file", help="also write debug logs to this file")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="ueresolve", description="Locate Unreal Engine installations")
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    subparsers = parser.add_subparsers(dest="command", required=True)

    resolve_parser = subparsers.add_parser("resolve", help="Resolve the engine a project should use")
    _add_global_flags(resolve_parser)
    resolve_parser.add_argument("--project", help="Project directory or .uproject file")
    resolve_parser.add_argument("--engine-path", help="Use this engine root instead of discovering engines")

    list_parser = subparsers.add_parser("list", help="List discovered engine installations")
    _add_global_flags(list_parser)
    return parser


def _settings_from_args(args: argparse.Namespace) -> Settings:
    log_level = "DEBUG" if args.verbose and not args.log_level else args.log_level
    return load_settings(timeout=args.timeout, log_level=log_level, log_file=args.log_file)


def handle_resolve(args: argparse.Namespace, settings: Settings) -> int:
    ctx = ProbeContext.from_settings(settings)
    result = resolve_engine(args.project, ctx=ctx, engine_path=args.engine_path)
    render_resolution(result, theme=ConsoleTheme(no_color=args.no_color), verbose=args.verbose)
    if args.json:
        write_resolution_json(result, args.json)
    if result.error:
        return EXIT_ERROR
    return EXIT_RESOLVED if result.engine else EXIT_NOT_FOUND


def handle_list(args: argparse.Namespace, settings: Settings) -> int:
    ctx = ProbeContext.from_settings(settings)
    try:
        discovery = find_engine_installations(ctx)
    except Exception as exc:
        print(f"[list] Engine discovery failed: {exc}")
        return EXIT_ERROR
    installations = rank_installations(discovery.installations)
    render_installations(installations, theme=ConsoleTheme(no_color=args.no_color), warnings=discovery.warnings)
    if args.json:
        write_installations_json(installations, args.json, warnings=discovery.warnings)
    return EXIT_RESOLVED if installations else EXIT_NOT_FOUND


def main(argv: Sequence[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    settings = _settings_from_args(args)
    setup_logging(settings.log_level, settings.log_file)
    logger.debug("ueresolve %s: %s", __version__, args.command)
    if args.command == "resolve":
        return handle_resolve(args, settings)
    if args.command == "list":
        return handle_list(args, settings)
    parser.error("Unknown command")
    return EXIT_ERROR


if __name__ == "__main__":
    sys.exit(main())
