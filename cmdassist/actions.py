"""User-facing operations shared by the REPL and the one-shot CLI.

Each action composes core calls, applies the configuration gates, and returns
an ActionResult whose ``data`` is JSON-serializable. Rendering lives in
``report``.
"""
from __future__ import annotations

import logging
import os
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

from .config import AssistantConfig
from .core.errors import CmdAssistError
from .core.fixer import suggest_fix
from .core.format_checker import check_command_format, check_file
from .core.format_fixer import fix_format
from .core.models import FileReport, Finding
from .core.normalizer import normalize
from .core.validator import is_valid, validate

logger = logging.getLogger(__name__)


class FeatureDisabledError(CmdAssistError):
    """Raised when the configuration turns off the requested feature."""


@dataclass
class ActionResult:
    command: str
    ok: bool
    data: dict[str, Any] = field(default_factory=dict)


def fix(cmd: str) -> ActionResult:
    fixed = suggest_fix(cmd)
    logger.info("fix %r -> %r", cmd, fixed)
    return ActionResult("fix", ok=True, data={"original": cmd, "fixed": fixed})


def validate_command(cmd: str) -> ActionResult:
    findings = validate(cmd)
    valid = is_valid(findings)
    return ActionResult("validate", ok=valid, data={
        "command": cmd,
        "valid": valid,
        "findings": [finding_to_dict(f) for f in findings],
    })


def suggest(cmd: str) -> ActionResult:
    suggested = normalize(cmd)
    return ActionResult("suggest", ok=True, data={
        "original": cmd,
        "suggested": suggested,
        "changed": suggested != cmd,
    })


def check(target: str, config: AssistantConfig) -> ActionResult:
    """Check ``target`` as a command line and, when it names a file, the file too."""
    if not config.format_check:
        raise FeatureDisabledError("Format checking is disabled (set format_check=true)")

    findings = check_command_format(target)
    report = check_file(Path(target)) if os.path.isfile(target) else None

    ok = not any(f.blocking for f in findings) and (report is None or report.clean)
    return ActionResult("check", ok=ok, data={
        "command": target,
        "command_findings": [finding_to_dict(f) for f in findings],
        "file": report_to_dict(report) if report is not None else None,
    })


def autofix(target: str, config: AssistantConfig) -> ActionResult:
    if not config.auto_fix:
        raise FeatureDisabledError("Auto-fix is disabled (set auto_fix=true)")

    result = fix_format(Path(target))
    return ActionResult("autofix", ok=True, data={
        "path": str(result.path),
        "backup": str(result.backup_path),
        "changed": result.changed,
    })


def finding_to_dict(finding: Finding) -> dict[str, Any]:
    return {
        "kind": finding.kind.value,
        "severity": finding.severity.value,
        "message": finding.message,
    }


def report_to_dict(report: FileReport) -> dict[str, Any]:
    return {
        "path": str(report.path) if report.path is not None else None,
        "total_lines": report.total_lines,
        "long_lines": report.long_lines,
        "trailing_ws": report.trailing_ws,
        "mixed_indentation": report.mixed_indentation,
        "long_line_numbers": report.long_line_numbers,
        "trailing_ws_line_numbers": report.trailing_ws_line_numbers,
    }
