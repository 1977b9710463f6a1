"""In-place format fixer.

Steps, in order: back up the original bytes to ``<path>.backup``, strip
trailing whitespace from every line, expand tabs to four spaces, and append a
final newline when missing. Running it on its own output changes nothing.
"""
from __future__ import annotations

import logging
import os
import shutil
import tempfile
from pathlib import Path

from .errors import FixFailedError
from .format_checker import WHITESPACE, ensure_readable_file
from .models import FixResult

logger = logging.getLogger(__name__)

BACKUP_SUFFIX = ".backup"
TAB_WIDTH = 4


def backup_path_for(path: Path) -> Path:
    return path.with_name(path.name + BACKUP_SUFFIX)


def fix_text(text: str) -> str:
    lines = [line.rstrip(WHITESPACE).replace("\t", " " * TAB_WIDTH) for line in text.split("\n")]
    fixed = "\n".join(lines)
    if fixed and not fixed.endswith("\n"):
        fixed += "\n"
    return fixed


def fix_format(path: Path) -> FixResult:
    """Fix ``path`` in place after writing a byte-exact backup next to it."""
    path = Path(path)
    ensure_readable_file(path)
    backup = backup_path_for(path)

    try:
        original = path.read_bytes()
    except OSError as e:
        raise FixFailedError(path, backup, f"read failed: {e}") from e

    try:
        backup.write_bytes(original)
    except OSError as e:
        raise FixFailedError(path, backup, f"backup failed: {e}") from e
    logger.info("Backup created: %s", backup)

    # surrogateescape keeps undecodable bytes intact through the rewrite
    fixed = fix_text(original.decode("utf-8", errors="surrogateescape"))
    data = fixed.encode("utf-8", errors="surrogateescape")
    try:
        _replace_contents(path, data)
    except OSError as e:
        raise FixFailedError(path, backup, str(e)) from e

    changed = data != original
    logger.info("File format fixed: %s (changed=%s)", path, changed)
    return FixResult(path=path, backup_path=backup, changed=changed)


def _replace_contents(path: Path, data: bytes) -> None:
    """Write ``data`` to a sibling temp file, then swap it over ``path``."""
    fd, tmp_name = tempfile.mkstemp(dir=path.parent, prefix=f".{path.name}.", suffix=".tmp")
    tmp = Path(tmp_name)
    try:
        with os.fdopen(fd, "wb") as f:
            f.write(data)
        shutil.copymode(path, tmp)
        os.replace(tmp, path)
    except OSError:
        tmp.unlink(missing_ok=True)
        raise
