"""Command validator: balance and safety heuristics over the raw command text.

Counting only. Quote characters inside escapes or other quotes are not told
apart, and a quoted or commented ``rm -rf /`` is reported like a real one.
"""
from __future__ import annotations

import logging
from typing import Callable

from .models import Finding, FindingKind, Severity

logger = logging.getLogger(__name__)

_DANGEROUS_PATTERN = "rm -rf /"


def _odd(ch: str) -> Callable[[str], bool]:
    return lambda cmd: cmd.count(ch) % 2 != 0


def _unbalanced(open_ch: str, close_ch: str) -> Callable[[str], bool]:
    return lambda cmd: cmd.count(open_ch) != cmd.count(close_ch)


# Evaluated in order, every check runs.
_CHECKS: list[tuple[FindingKind, Severity, str, Callable[[str], bool]]] = [
    (FindingKind.UNMATCHED_DOUBLE_QUOTES, Severity.ERROR,
     "Unmatched double quotes detected", _odd('"')),
    (FindingKind.UNMATCHED_SINGLE_QUOTES, Severity.ERROR,
     "Unmatched single quotes detected", _odd("'")),
    (FindingKind.UNMATCHED_PARENTHESES, Severity.ERROR,
     "Unmatched parentheses detected", _unbalanced("(", ")")),
    (FindingKind.UNMATCHED_BRACES, Severity.ERROR,
     "Unmatched braces detected", _unbalanced("{", "}")),
    (FindingKind.DANGEROUS_PATTERN, Severity.CRITICAL,
     "DANGEROUS: rm -rf / detected - this will destroy your system!",
     lambda cmd: _DANGEROUS_PATTERN in cmd),
]


def validate(cmd: str) -> list[Finding]:
    """Return every finding for ``cmd``; an empty list means the command passes."""
    findings = [
        Finding(kind=kind, message=message, severity=severity)
        for kind, severity, message, check in _CHECKS
        if check(cmd)
    ]
    logger.debug("validated %r: %d finding(s)", cmd, len(findings))
    return findings


def is_valid(findings: list[Finding]) -> bool:
    return not findings
