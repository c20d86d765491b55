#!/usr/bin/env python3
"""
CLI tool for checking name templates and resolving names offline.

Usage:
    audio-names resolve snapshot.yaml --config names.yaml
    audio-names resolve snapshot.yaml --id 51 --id 88 --json
    audio-names check names.yaml
    audio-names tags
"""

from __future__ import annotations

import argparse
import json
import logging
import sys
from typing import Any

import yaml
from colorama import Fore, Style, init as colorama_init

from .config import Config
from .naming.names import Names
from .naming.resolver import NameSource
from .naming.tag import all_tags, is_tag
from .naming.template import NameTemplate
from .service import NamingError, NamingService
from .state.loader import SnapshotLoader


logger = logging.getLogger(__name__)

COLOR_ENABLED = True

UNNAMED = "(unnamed)"

SOURCE_COLORS = {
    NameSource.OVERRIDE: Fore.MAGENTA,
    NameSource.TEMPLATE: Fore.GREEN,
    NameSource.FALLBACK: Fore.YELLOW,
    NameSource.NONE: Fore.RED,
}


def colorize(text: str, color: str) -> str:
    """Apply color if enabled."""
    if COLOR_ENABLED:
        return f"{color}{text}{Style.RESET_ALL}"
    return text


def format_template(template: NameTemplate) -> str:
    """Format a template with placeholders highlighted."""
    parts = []
    for segment in template:
        if is_tag(segment):
            parts.append(colorize(f"{{{segment.value}}}", Fore.CYAN))
        else:
            parts.append(segment.replace("{", "{{").replace("}", "}}"))
    return "".join(parts) or colorize('""', Style.DIM)


def print_json(data: Any, indent: int = 2) -> None:
    output = json.dumps(data, indent=indent, default=str)
    print(output)


def print_template_list(label: str, templates: tuple[NameTemplate, ...], indent: str = "  ") -> None:
    print(f"{indent}{colorize(label + ':', Style.BRIGHT)}")
    if not templates:
        print(f"{indent}  {colorize('(none - fallback only)', Style.DIM)}")
    for i, template in enumerate(templates, start=1):
        print(f"{indent}  {i}. {format_template(template)}")


def print_names(names: Names) -> None:
    """Pretty print a names configuration."""
    print(colorize("\nTemplates:", Style.BRIGHT))
    print_template_list("stream", names.stream)
    print_template_list("endpoint", names.endpoint)
    print_template_list("device", names.device)

    print(colorize("\nOverrides:", Style.BRIGHT))
    if not names.overrides:
        print(colorize("  (none)", Style.DIM))
    for i, name_override in enumerate(names.overrides):
        types = ", ".join(sorted(t.value for t in name_override.types))
        print(
            f"  [{i}] {colorize(name_override.property.value, Fore.CYAN)} == "
            f"{name_override.value!r} {colorize(f'({types})', Style.DIM)}"
        )
        print_template_list("templates", name_override.templates, indent="    ")


def _load_config(path: str | None, log_level: str | None) -> Config:
    if path is None:
        return Config()
    config = Config.from_file(path)
    # --log-level wins over the config file
    if log_level is None:
        config.logging.apply()
    return config


def cmd_resolve(args) -> int:
    """Resolve names for the objects in a snapshot."""
    config = _load_config(args.config, args.log_level)
    registry = SnapshotLoader().load_file(args.snapshot)
    service = NamingService(config, registry)

    if args.ids:
        results = [service.describe(object_id) for object_id in args.ids]
    else:
        results = service.describe_all()

    if args.json:
        print_json([r.to_dict() for r in results])
        return 0

    for r in results:
        name = r.name if r.name is not None else UNNAMED
        color = SOURCE_COLORS[r.source]
        print(
            f"{r.object_id:>6}  {r.kind:<6}  {r.category:<8}  "
            f"{colorize(name, color)}"
            + (f"  {colorize('<- ' + str(r.resolution.template), Style.DIM)}" if args.verbose and r.resolution.template else "")
        )

    if not results:
        print(colorize("(no devices or nodes)", Style.DIM))

    return 0


def cmd_check(args) -> int:
    """Validate a names configuration."""
    config = _load_config(args.config, args.log_level)
    print(colorize("OK", Fore.GREEN), args.config)
    print_names(config.names)
    return 0


def cmd_tags(args) -> int:
    """List every placeholder tag."""
    for tag in all_tags():
        print(f"  {{{colorize(tag.value, Fore.CYAN)}}}")
    return 0


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="audio-names",
        description="Check name templates and resolve audio object names",
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )

    parser.add_argument(
        "--log-level",
        default=None,
        help="Log level (overrides the config file)",
    )
    parser.add_argument(
        "--no-color",
        action="store_true",
        help="Disable colored output",
    )

    subparsers = parser.add_subparsers(dest="command", help="Command to run")

    # resolve command
    resolve_parser = subparsers.add_parser("resolve", help="Resolve names for a snapshot")
    resolve_parser.add_argument("snapshot", help="Snapshot file (YAML or JSON)")
    resolve_parser.add_argument("--config", help="Config file with a 'names' section")
    resolve_parser.add_argument(
        "--id", dest="ids", type=int, action="append", help="Only resolve this object id (repeatable)"
    )
    resolve_parser.add_argument("--json", action="store_true", help="Print JSON")
    resolve_parser.add_argument("-v", "--verbose", action="store_true", help="Show the template used")

    # check command
    check_parser = subparsers.add_parser("check", help="Validate a names configuration")
    check_parser.add_argument("config", help="Config file (YAML or JSON)")

    # tags command
    subparsers.add_parser("tags", help="List placeholder tags")

    return parser


def main(argv: list[str] | None = None) -> int:
    global COLOR_ENABLED

    parser = build_parser()
    args = parser.parse_args(argv)

    COLOR_ENABLED = not args.no_color and sys.stdout.isatty()
    if COLOR_ENABLED:
        colorama_init()

    level = logging.getLevelName((args.log_level or "WARNING").upper())
    if not isinstance(level, int):
        print(colorize(f"Error: Unknown log level: {args.log_level}", Fore.RED), file=sys.stderr)
        return 1
    logging.basicConfig(level=level, format="%(levelname)s %(name)s: %(message)s")

    if not args.command:
        parser.print_help()
        return 1

    commands = {
        "resolve": cmd_resolve,
        "check": cmd_check,
        "tags": cmd_tags,
    }

    try:
        return commands[args.command](args)
    except (OSError, ValueError, yaml.YAMLError, NamingError) as e:
        logger.debug("Command failed", exc_info=True)
        print(colorize(f"Error: {e}", Fore.RED), file=sys.stderr)
        return 1


if __name__ == "__main__":
    sys.exit(main() or 0)
