from __future__ import annotations

import logging
import sys
from typing import TextIO

from colorama import Fore, Style

logger = logging.getLogger(__name__)

_TAGS = {
    "error": (Fore.RED, "[ERROR]", logging.ERROR),
    "success": (Fore.GREEN, "[OK]", logging.INFO),
    "warning": (Fore.YELLOW, "[WARN]", logging.WARNING),
    "info": (Fore.BLUE, "[INFO]", logging.INFO),
    "debug": (Fore.MAGENTA, "[DEBUG]", logging.DEBUG),
}


class Console:
    """Tagged, colorized messages; every message is mirrored to the log."""

    def __init__(self, verbose: bool = False, color: bool | None = None, stream: TextIO | None = None) -> None:
        self.verbose = verbose
        self._stream = stream
        self._color = color

    @property
    def stream(self) -> TextIO:
        # Resolved late so pytest's capsys sees the output
        return self._stream or sys.stdout

    def error(self, message: str) -> None:
        self._emit("error", message)

    def success(self, message: str) -> None:
        self._emit("success", message)

    def warning(self, message: str) -> None:
        self._emit("warning", message)

    def info(self, message: str) -> None:
        self._emit("info", message)

    def debug(self, message: str) -> None:
        if self.verbose:
            self._emit("debug", message)
        else:
            logger.debug(message)

    def plain(self, message: str = "") -> None:
        print(message, file=self.stream)

    def _emit(self, level: str, message: str) -> None:
        color, tag, log_level = _TAGS[level]
        use_color = self._color if self._color is not None else self.stream.isatty()
        if use_color:
            print(f"{color}{tag}{Style.RESET_ALL} {message}", file=self.stream)
        else:
            print(f"{tag} {message}", file=self.stream)
        logger.log(log_level, message)
