"""Format checker: line length, trailing whitespace and tab/space mixing.

The mixed-indentation flag is an approximation: it is raised when any line
starts with a space and any line contains a tab anywhere, so a tab-indented
file with one space-led comment is flagged too.
"""
from __future__ import annotations

import logging
import os
import re
from pathlib import Path
from typing import Iterable

from .errors import NotFoundError
from .models import FileReport, Finding, FindingKind, Severity

logger = logging.getLogger(__name__)

MAX_LINE_LENGTH = 120
MAX_COMMAND_LENGTH = 1000

# POSIX [[:space:]]
WHITESPACE = " \t\r\f\v"

_VALID_START = re.compile(r"[A-Za-z0-9_/.~-]")
_SUBSTITUTION_OR = re.compile(r"\$\(.*\)\|\|")


def check_format(lines: Iterable[str], path: Path | None = None) -> FileReport:
    """Build a report from already-read lines (a trailing "\\n" per line is ignored)."""
    total = 0
    long_numbers: list[int] = []
    trailing_numbers: list[int] = []
    has_tab = False
    has_space_led = False

    for number, raw in enumerate(lines, start=1):
        line = raw[:-1] if raw.endswith("\n") else raw
        total = number
        if len(line) > MAX_LINE_LENGTH:
            long_numbers.append(number)
        if line and line[-1] in WHITESPACE:
            trailing_numbers.append(number)
        if "\t" in line:
            has_tab = True
        if line.startswith(" "):
            has_space_led = True

    return FileReport(
        path=path,
        total_lines=total,
        long_lines=len(long_numbers),
        trailing_ws=len(trailing_numbers),
        mixed_indentation=has_tab and has_space_led,
        long_line_numbers=long_numbers,
        trailing_ws_line_numbers=trailing_numbers,
    )


def check_file(path: Path) -> FileReport:
    """Read ``path`` and check its format. Raises NotFoundError for anything but a readable file."""
    path = Path(path)
    text = read_text(path)
    report = check_format(split_lines(text), path=path)
    logger.debug(
        "checked %s: %d lines, %d long, %d trailing-ws, mixed=%s",
        path, report.total_lines, report.long_lines, report.trailing_ws, report.mixed_indentation,
    )
    return report


def check_command_format(cmd: str) -> list[Finding]:
    """Shape checks for a single command line.

    The substitution-into-``||`` finding is a non-blocking warning.
    """
    findings: list[Finding] = []

    if not _VALID_START.match(cmd):
        findings.append(Finding(
            kind=FindingKind.STARTS_WITH_INVALID_CHAR,
            message="Command should start with alphanumeric character or path",
        ))

    if len(cmd) > MAX_COMMAND_LENGTH:
        findings.append(Finding(
            kind=FindingKind.EXCESSIVE_LENGTH,
            message=f"Command is unusually long ({len(cmd)} characters)",
        ))

    if _SUBSTITUTION_OR.search(cmd):
        findings.append(Finding(
            kind=FindingKind.SUSPICIOUS_SUBSTITUTION,
            message="Detected command substitution with pipe - verify this is intentional",
            severity=Severity.WARNING,
        ))

    return findings


def ensure_readable_file(path: Path) -> None:
    if not path.is_file() or not os.access(path, os.R_OK):
        raise NotFoundError(path)


def read_text(path: Path) -> str:
    """Read ``path`` as UTF-8 without newline translation."""
    ensure_readable_file(path)
    try:
        return path.read_bytes().decode("utf-8", errors="replace")
    except OSError as e:
        raise NotFoundError(path) from e


def split_lines(text: str) -> list[str]:
    """Split on "\\n" only, so a CRLF line keeps its "\\r"."""
    if not text:
        return []
    lines = text.split("\n")
    if lines[-1] == "":
        lines.pop()
    return lines
