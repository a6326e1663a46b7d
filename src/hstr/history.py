from __future__ import annotations

import os
import re
from pathlib import Path
from typing import Mapping

from hstr.constants import DEFAULT_HISTORY_FILE

# bash with HISTTIMEFORMAT set writes "#1700012345" before each command
_BASH_TIMESTAMP_RE = re.compile(r"^#\d+$")
# zsh extended history: ": 1700012345:0;command"
_ZSH_EXTENDED_RE = re.compile(r"^: \d+:\d+;")


class SourceUnavailable(Exception):
    """The history file cannot be opened or read."""

    def __init__(self, path: str | Path, reason: str = ""):
        self.path = Path(path)
        self.reason = reason
        msg = f"History file not found: {self.path}"
        if reason:
            msg += f" ({reason})"
        super().__init__(msg)


def default_history_path(env: Mapping[str, str] | None = None) -> Path:
    """$HISTFILE if set, otherwise ~/.bash_history."""
    env = os.environ if env is None else env
    histfile = env.get("HISTFILE")
    if histfile:
        return Path(histfile).expanduser()
    home = env.get("HOME")
    base = Path(home) if home else Path.home()
    return base / DEFAULT_HISTORY_FILE


def split_history(text: str, skip_timestamps: bool = True) -> list[str]:
    """Split history file content into lines, in file order.

    Lines are split on LF only and kept verbatim; the empty element after
    the final newline is dropped.
    """
    lines = text.split("\n")
    if lines and lines[-1] == "":
        lines.pop()
    if not skip_timestamps:
        return lines
    result = []
    for line in lines:
        if _BASH_TIMESTAMP_RE.match(line):
            continue
        m = _ZSH_EXTENDED_RE.match(line)
        if m:
            line = line[m.end():]
        result.append(line)
    return result


def load_history(path: str | Path, skip_timestamps: bool = True) -> list[str]:
    """Read a history file. Raises SourceUnavailable if it cannot be read."""
    path = Path(path).expanduser()
    if not path.is_file():
        raise SourceUnavailable(path)
    try:
        with open(path, "rb") as f:
            raw = f.read()
    except OSError as e:
        raise SourceUnavailable(path, e.strerror or str(e)) from e
    return split_history(raw.decode("utf-8", errors="replace"), skip_timestamps)


def most_recent_first(lines: list[str]) -> list[str]:
    """Newest command first; the canonical order for filtering."""
    return lines[::-1]
