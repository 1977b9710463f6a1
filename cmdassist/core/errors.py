from __future__ import annotations

from pathlib import Path


class CmdAssistError(Exception):
    """Base class for errors raised by a single assistant operation."""


class NotFoundError(CmdAssistError):
    """Raised when a path does not resolve to a readable regular file."""

    def __init__(self, path: Path) -> None:
        super().__init__(f"File not found: {path}")
        self.path = path


class FixFailedError(CmdAssistError):
    """Raised when the backup or the in-place rewrite of a file fails.

    The backup is always written before the original is touched, so the
    original content can be restored from ``backup_path``.
    """

    def __init__(self, path: Path, backup_path: Path, reason: str) -> None:
        super().__init__(f"Failed to fix {path}: {reason} (backup: {backup_path})")
        self.path = path
        self.backup_path = backup_path


class RuleLoadError(CmdAssistError):
    """Raised when a fix-rule file is malformed."""


class ConfigError(CmdAssistError):
    """Raised when a configuration file or setting is invalid."""
