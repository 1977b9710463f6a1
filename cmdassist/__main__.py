"""Entry point: python -m cmdassist [--config PATH] [--json] [--verbose] [COMMAND ARG...]"""
from __future__ import annotations

import argparse
import json
import sys
from dataclasses import replace
from pathlib import Path

import colorama

from . import __version__, actions
from .config import AssistantConfig, load_config
from .console import Console
from .core.errors import CmdAssistError, ConfigError
from .logs import configure_logging
from .report import render
from .shell import AssistantShell

_COMMANDS = ("fix", "validate", "suggest", "check", "autofix", "shell")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="cmdassist",
        description="Command typo fixing and text-file format checking",
    )
    parser.add_argument("--config", type=Path, help="Path to a YAML config file")
    parser.add_argument("--json", action="store_true", dest="json_output", help="Output the result as JSON")
    parser.add_argument("--verbose", action="store_true", help="Show debug output")
    parser.add_argument("--version", action="version", version=f"cmdassist {__version__}")
    parser.add_argument(
        "command",
        nargs="?",
        choices=_COMMANDS,
        default="shell",
        help="Command to run once (default: interactive shell)",
    )
    parser.add_argument("args", nargs=argparse.REMAINDER, help="Command line or file path to inspect")
    return parser


def main(argv: list[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    try:
        config = load_config(args.config)
    except ConfigError as e:
        print(f"error: {e}", file=sys.stderr)
        return 2
    if args.verbose:
        config = replace(config, verbose=True)

    configure_logging(config)
    colorama.just_fix_windows_console()
    console = Console(verbose=config.verbose)

    if args.command == "shell":
        AssistantShell(config, console=console).cmdloop()
        return 0

    target = " ".join(args.args)
    if not target:
        print(f"error: '{args.command}' needs an argument", file=sys.stderr)
        return 2

    try:
        result = _dispatch(args.command, target, config)
    except CmdAssistError as e:
        if args.json_output:
            _print_json(args.command, {"error": str(e)})
        else:
            console.error(str(e))
        return 1

    if args.json_output:
        _print_json(result.command, result.data)
    else:
        render(console, result)

    return 0 if result.ok else 1


def _dispatch(command: str, target: str, config: AssistantConfig) -> actions.ActionResult:
    if command == "fix":
        return actions.fix(target)
    if command == "validate":
        return actions.validate_command(target)
    if command == "suggest":
        return actions.suggest(target)
    if command == "check":
        return actions.check(target, config)
    return actions.autofix(target, config)


def _print_json(command: str, result: dict) -> None:
    output = {
        "meta": {"schema_version": "0.1", "tool_version": __version__, "command": command},
        "result": result,
    }
    print(json.dumps(output, indent=2, default=str))


if __name__ == "__main__":
    sys.exit(main())
