from __future__ import annotations

import logging
from datetime import datetime
from pathlib import Path

logger = logging.getLogger(__name__)

TIMESTAMP_FORMAT = "%Y-%m-%d %H:%M:%S"


class History:
    """Append-only command history, one ``<timestamp> | <input>`` line per entry."""

    def __init__(self, path: Path, enabled: bool = True) -> None:
        self.path = path
        self.enabled = enabled

    def append(self, line: str) -> None:
        if not self.enabled:
            return
        stamp = datetime.now().strftime(TIMESTAMP_FORMAT)
        try:
            self.path.parent.mkdir(parents=True, exist_ok=True)
            with open(self.path, "a", encoding="utf-8") as f:
                f.write(f"{stamp} | {line}\n")
        except OSError as e:
            logger.warning("cannot write history file %s: %s", self.path, e)

    def entries(self) -> list[str]:
        try:
            text = self.path.read_text(encoding="utf-8", errors="replace")
        except FileNotFoundError:
            return []
        except OSError as e:
            logger.warning("cannot read history file %s: %s", self.path, e)
            return []
        return text.splitlines()
