from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from pathlib import Path


class FindingKind(str, Enum):
    UNMATCHED_DOUBLE_QUOTES = "unmatched-double-quotes"
    UNMATCHED_SINGLE_QUOTES = "unmatched-single-quotes"
    UNMATCHED_PARENTHESES = "unmatched-parentheses"
    UNMATCHED_BRACES = "unmatched-braces"
    DANGEROUS_PATTERN = "dangerous-pattern"
    SUSPICIOUS_SUBSTITUTION = "suspicious-substitution"
    STARTS_WITH_INVALID_CHAR = "starts-with-invalid-char"
    EXCESSIVE_LENGTH = "excessive-length"


class Severity(str, Enum):
    WARNING = "warning"
    ERROR = "error"
    CRITICAL = "critical"

    @property
    def blocking(self) -> bool:
        return self is not Severity.WARNING


@dataclass(frozen=True)
class Finding:
    kind: FindingKind
    message: str
    severity: Severity = Severity.ERROR

    @property
    def blocking(self) -> bool:
        return self.severity.blocking


@dataclass(frozen=True)
class FixRule:
    id: str
    pattern: str
    replacement: str
    regex: bool = False


@dataclass
class FileReport:
    """Summary counts for one text file, plus the line numbers behind them."""
    path: Path | None
    total_lines: int
    long_lines: int
    trailing_ws: int
    mixed_indentation: bool
    long_line_numbers: list[int] = field(default_factory=list)
    trailing_ws_line_numbers: list[int] = field(default_factory=list)

    @property
    def clean(self) -> bool:
        return not (self.long_lines or self.trailing_ws or self.mixed_indentation)


@dataclass
class FixResult:
    path: Path
    backup_path: Path
    changed: bool
