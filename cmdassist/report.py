from __future__ import annotations

from .actions import ActionResult
from .console import Console
from .core.format_checker import MAX_LINE_LENGTH


def render(console: Console, result: ActionResult) -> None:
    _RENDERERS[result.command](console, result.data)


def _render_fix(console: Console, data: dict) -> None:
    if data["fixed"] is None:
        console.info(f"No known fixes for: {data['original']}")
        return
    console.info(f"Original: {data['original']}")
    console.success(f"Fixed: {data['fixed']}")


def _render_validate(console: Console, data: dict) -> None:
    if data["valid"]:
        console.success("Command syntax is valid")
        return
    for finding in data["findings"]:
        console.error(f"{finding['message']} [{finding['kind']}]")
    console.error("Command has syntax errors")


def _render_suggest(console: Console, data: dict) -> None:
    if not data["changed"]:
        console.info("No improvements suggested")
        return
    console.info(f"Original:  {data['original']}")
    console.success(f"Suggested: {data['suggested']}")


def _render_check(console: Console, data: dict) -> None:
    for finding in data["command_findings"]:
        console.warning(finding["message"])

    report = data["file"]
    if report is None:
        return

    console.info(f"File: {report['path']}")
    console.info(f"Total lines: {report['total_lines']}")

    if report["long_lines"]:
        console.warning(f"Found {report['long_lines']} lines exceeding {MAX_LINE_LENGTH} characters")
        console.debug(f"Long lines: {_join_numbers(report['long_line_numbers'])}")
    else:
        console.success(f"All lines within {MAX_LINE_LENGTH} character limit")

    if report["trailing_ws"]:
        console.warning(f"Found {report['trailing_ws']} lines with trailing whitespace")
        console.debug(f"Trailing whitespace: {_join_numbers(report['trailing_ws_line_numbers'])}")

    if report["mixed_indentation"]:
        console.warning("File contains both tabs and spaces for indentation")


def _render_autofix(console: Console, data: dict) -> None:
    console.info(f"Backup created: {data['backup']}")
    if data["changed"]:
        console.success(f"File format fixed: {data['path']}")
    else:
        console.success(f"File already well formatted: {data['path']}")


_NUMBERS_SHOWN = 20


def _join_numbers(numbers: list[int]) -> str:
    """Join line numbers, capping at _NUMBERS_SHOWN with a count suffix."""
    shown = ", ".join(str(n) for n in numbers[:_NUMBERS_SHOWN])
    if len(numbers) <= _NUMBERS_SHOWN:
        return shown
    return f"{shown} (+{len(numbers) - _NUMBERS_SHOWN} more)"


_RENDERERS = {
    "fix": _render_fix,
    "validate": _render_validate,
    "suggest": _render_suggest,
    "check": _render_check,
    "autofix": _render_autofix,
}
