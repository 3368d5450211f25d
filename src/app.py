"""Application entry point for the blockscope CLI."""

from __future__ import annotations

import argparse
import json
import logging
import os
import sys
from logging.handlers import RotatingFileHandler
from typing import Any, Optional

from art import tprint
from rich.console import Console

import settings
from adapters.provider_registry import StaticProviderRegistry
from adapters.report_formatting import (
    build_draft_rows,
    build_resolution_rows,
    render_provider_table,
    render_resolution_table,
    rows_to_json,
)
from resolution import build_resolver

NAME = "BLOCKSCOPE"
FONT = "tarty-1"

LOGGER = logging.getLogger(__name__)


def _print_banner() -> None:
    tprint(NAME, FONT, space=1)


def _configure_logging(config: Optional[dict[str, Any]]) -> None:
    log_cfg = settings.logging_config(config)
    if not log_cfg.get("enabled", False):
        return

    level_name = str(log_cfg.get("level", "INFO")).upper()
    level = getattr(logging, level_name, logging.INFO)

    formatter = logging.Formatter(
        fmt="%(asctime)s %(levelname)s %(name)s: %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )

    handlers: list[logging.Handler] = []

    if log_cfg.get("console", True):
        console_handler = logging.StreamHandler()
        console_handler.setLevel(level)
        console_handler.setFormatter(formatter)
        handlers.append(console_handler)

    file_cfg = log_cfg.get("file", {})
    if isinstance(file_cfg, dict) and file_cfg.get("enabled", False):
        path = file_cfg.get("path", "logs/blockscope.log")
        if not os.path.isabs(path):
            path = os.path.join(settings.PROJECT_ROOT, path)
        directory = os.path.dirname(path)
        if directory:
            os.makedirs(directory, exist_ok=True)

        file_handler = RotatingFileHandler(
            path,
            maxBytes=int(file_cfg.get("max_bytes", 5 * 1024 * 1024)),
            backupCount=int(file_cfg.get("backup_count", 5)),
            encoding="utf-8",
        )
        file_handler.setLevel(level)
        file_handler.setFormatter(formatter)
        handlers.append(file_handler)

    if not handlers:
        return

    logging.basicConfig(level=level, handlers=handlers)


def _load(parser: argparse.ArgumentParser, path: Optional[str]) -> Optional[dict[str, Any]]:
    try:
        config = settings.load_config(path)
    except (OSError, ValueError) as exc:
        LOGGER.error("Failed to load config: %s", exc)
        parser.exit(2, f"blockscope: {exc}\n")
    _configure_logging(config)
    if config is None:
        LOGGER.info("No config file found; using built-in defaults")
    return config


def _show(args: argparse.Namespace, config: Optional[dict[str, Any]], console: Console) -> None:
    resolver = build_resolver()
    providers = [args.provider] if args.provider else None
    rows = build_resolution_rows(config, resolver, providers=providers, account=args.account)
    if not rows:
        print(f"Unknown provider: {args.provider}", file=sys.stderr)
    if args.json:
        print(json.dumps(rows_to_json(rows), indent=2))
        return
    if rows:
        console.print(render_resolution_table(rows))


def _draft(args: argparse.Namespace, config: Optional[dict[str, Any]], console: Console) -> None:
    rows = build_draft_rows(config, build_resolver(), account=args.account)
    if args.json:
        print(json.dumps(rows_to_json(rows), indent=2))
        return
    console.print(render_resolution_table(rows, title="Telegram draft streaming"))


def _inspect(config_file: Optional[str]) -> None:
    from frontend.app import InspectorApp

    InspectorApp(config_file=config_file).run()


def main(argv: Optional[list[str]] = None) -> None:
    parser = argparse.ArgumentParser(prog="blockscope")
    parser.add_argument("--config", help="Path to config.json (default: $BLOCKSCOPE_CONFIG)")
    # Running without a subcommand behaves like a bare `show`.
    parser.set_defaults(provider=None, account=None, json=False)
    # Subcommands accept --config too; SUPPRESS keeps the top-level value when omitted.
    config_parent = argparse.ArgumentParser(add_help=False)
    config_parent.add_argument("--config", default=argparse.SUPPRESS, help="Path to config.json")
    subparsers = parser.add_subparsers(dest="command")

    show_parser = subparsers.add_parser("show", parents=[config_parent], help="Print resolved chunking and coalescing")
    show_parser.add_argument("--provider", help="Only this provider")
    show_parser.add_argument("--account", help="Only this account id")
    show_parser.add_argument("--json", action="store_true", help="Emit JSON instead of a table")

    draft_parser = subparsers.add_parser("draft", parents=[config_parent], help="Print resolved Telegram draft chunking")
    draft_parser.add_argument("--account", help="Only this account id")
    draft_parser.add_argument("--json", action="store_true", help="Emit JSON instead of a table")

    subparsers.add_parser("providers", parents=[config_parent], help="List built-in provider capabilities")
    subparsers.add_parser("inspect", parents=[config_parent], help="Launch the inspector TUI")

    args = parser.parse_args(argv)
    console = Console()
    as_json = args.json

    if args.command == "inspect":
        _print_banner()
        _inspect(args.config)
        return
    if args.command == "providers":
        _print_banner()
        console.print(render_provider_table(StaticProviderRegistry()))
        return

    config = _load(parser, args.config)
    if not as_json:
        _print_banner()
    if args.command == "draft":
        _draft(args, config, console)
        return
    _show(args, config, console)


if __name__ == "__main__":
    main()
