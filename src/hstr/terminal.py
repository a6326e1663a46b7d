"""Push the selected command back into the shell's input queue."""

from __future__ import annotations

import fcntl
import sys
import termios
from typing import TextIO


class InjectionUnavailable(Exception):
    """The terminal refused TIOCSTI (not a TTY, or disabled by the kernel)."""


def inject(text: str, fd: int = 0):
    """Simulate typing ``text`` on the terminal behind ``fd``."""
    if not text:
        return
    for b in text.encode("utf-8"):
        try:
            fcntl.ioctl(fd, termios.TIOCSTI, bytes([b]))
        except OSError as e:
            raise InjectionUnavailable(f"TIOCSTI failed: {e.strerror or e}") from e


def fill_terminal_input(text: str, fd: int = 0, out: TextIO | None = None):
    """Inject ``text`` then end the picker's own output line."""
    out = sys.stdout if out is None else out
    inject(text, fd)
    out.write("\n")
    out.flush()
