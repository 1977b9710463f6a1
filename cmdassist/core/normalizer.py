from __future__ import annotations

import re

_SPACE_RUN = re.compile(r" {2,}")


def normalize(cmd: str) -> str:
    """Collapse space runs and trim the command.

    Once runs are collapsed, a space following ``|``, ``>`` or ``<`` is
    exactly one space. No space is inserted after an operator that has none:
    without tokenizing, ``grep 'a|b'`` cannot be told apart from a pipe.
    """
    return _SPACE_RUN.sub(" ", cmd).strip()
