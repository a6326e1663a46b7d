from __future__ import annotations

import curses
import getpass
import os
import socket
from typing import Callable, Mapping

from hstr.constants import (
    BOTTOM_MARGIN,
    HIGHLIGHT_MARKER,
    KEY_CR,
    KEY_CTRL_C,
    KEY_CTRL_G,
    KEY_CTRL_H,
    KEY_DEL,
    KEY_ESC,
    KEY_LF,
    LABEL_HELP,
    LABEL_HISTORY,
    Y_OFFSET_HELP,
    Y_OFFSET_HISTORY,
    Y_OFFSET_ITEMS,
    Y_OFFSET_PROMPT,
)
from hstr.selection import match_offset
from hstr.types import PROMPT, InputEvent, RenderRequest

_BACKSPACE_KEYS = (curses.KEY_BACKSPACE, KEY_DEL, KEY_CTRL_H)
_ACCEPT_KEYS = (curses.KEY_ENTER, KEY_LF, KEY_CR)
_ABORT_KEYS = (KEY_ESC, KEY_CTRL_C, KEY_CTRL_G)

_COLOR_PAIR_BASE = 1


def build_prompt(env: Mapping[str, str] | None = None, hostname: str | None = None) -> str:
    """Shell-like "user@host$ " shown in front of the fragment."""
    env = os.environ if env is None else env
    user = env.get("USER") or getpass.getuser()
    host = hostname if hostname is not None else socket.gethostname()
    return f"{user}@{host}$ "


def max_visible_for(height: int) -> int:
    """Number of match rows that fit on a screen ``height`` rows tall."""
    return max(0, height - (Y_OFFSET_ITEMS + BOTTOM_MARGIN))


def decode_key(ch: int | str | None, max_visible_fn: Callable[[], int]) -> InputEvent | None:
    """Map a raw key from get_wch()/getch() to a logical event.

    Returns None for anything that should be ignored (Ctrl+A/Ctrl+E,
    function keys, timeouts, control characters).
    """
    if ch is None:
        return None
    if isinstance(ch, str):
        if len(ch) != 1:
            return None
        if ch.isprintable():
            return InputEvent.char_typed(ch)
        code = ord(ch)
    else:
        code = ch

    if code < 0:
        return None
    if code == curses.KEY_RESIZE:
        return InputEvent.resize(max_visible_fn())
    if code in _BACKSPACE_KEYS:
        return InputEvent.backspace()
    if code in _ACCEPT_KEYS:
        return InputEvent.accept()
    if code in _ABORT_KEYS:
        return InputEvent.abort()
    if code == curses.KEY_UP:
        return InputEvent.up()
    if code == curses.KEY_DOWN:
        return InputEvent.down()
    # getch() delivers single-byte printables as ints
    if 32 <= code < 127:
        return InputEvent.char_typed(chr(code))
    return None


def _display_text(line: str) -> str:
    # Same length as the original so fragment offsets stay aligned
    return "".join(c if c.isprintable() else "?" for c in line)


class PickerUI:
    """Curses renderer for the picker screen.

    Rows: prompt (1), help (2), reversed history label (3), then one row
    per match starting at row 4. Column 0 of a match row holds the
    highlight marker.
    """

    def __init__(self, stdscr, color: bool = True, prompt: str | None = None):
        self.stdscr = stdscr
        self.prompt = prompt if prompt is not None else build_prompt()
        self.color_enabled = False
        if color and curses.has_colors():
            curses.start_color()
            curses.init_pair(_COLOR_PAIR_BASE, curses.COLOR_WHITE, curses.COLOR_BLACK)
            self.color_enabled = True
        self.stdscr.keypad(True)

    @property
    def base_attr(self) -> int:
        return curses.color_pair(_COLOR_PAIR_BASE) if self.color_enabled else 0

    def max_visible(self) -> int:
        h, _ = self.stdscr.getmaxyx()
        return max_visible_for(h)

    def read_key(self) -> int | str | None:
        """Block for the next key; None if curses reports no input."""
        try:
            return self.stdscr.get_wch()
        except curses.error:
            return None

    def decode(self, ch: int | str | None) -> InputEvent | None:
        return decode_key(ch, self.max_visible)

    def _put(self, y: int, x: int, text: str, attr: int = 0):
        _, w = self.stdscr.getmaxyx()
        room = w - 1 - x
        if room <= 0 or not text:
            return
        try:
            self.stdscr.addnstr(y, x, text, room, attr)
        except curses.error:
            pass

    def _draw_labels(self):
        _, w = self.stdscr.getmaxyx()
        self._put(Y_OFFSET_HELP, 0, LABEL_HELP, self.base_attr)
        label = LABEL_HISTORY.ljust(max(len(LABEL_HISTORY), w - 1))
        self._put(Y_OFFSET_HISTORY, 0, label, self.base_attr | curses.A_REVERSE)

    def _draw_matches(self, request: RenderRequest):
        h, _ = self.stdscr.getmaxyx()
        rows = min(request.max_visible, max(0, h - Y_OFFSET_ITEMS))
        for i, line in enumerate(request.matches[:rows]):
            y = Y_OFFSET_ITEMS + i
            self._put(y, 1, _display_text(line), self.base_attr)
            offset = match_offset(line, request.fragment)
            if offset >= 0:
                self._put(y, 1 + offset, _display_text(request.fragment),
                          self.base_attr | curses.A_BOLD)

    def _draw_marker(self, cursor: int, text: str):
        if cursor == PROMPT:
            return
        try:
            self.stdscr.addstr(Y_OFFSET_ITEMS + cursor, 0, text)
        except curses.error:
            pass

    def _place_cursor(self, fragment: str):
        _, w = self.stdscr.getmaxyx()
        x = min(len(self.prompt) + len(fragment), max(0, w - 1))
        try:
            self.stdscr.move(Y_OFFSET_PROMPT, x)
        except curses.error:
            pass

    def draw(self, request: RenderRequest | None):
        if request is None:
            return
        if request.full:
            self.stdscr.erase()
            self._draw_labels()
            self._draw_matches(request)
            self._put(Y_OFFSET_PROMPT, 0, self.prompt, self.base_attr)
            self._put(Y_OFFSET_PROMPT, len(self.prompt), _display_text(request.fragment),
                      self.base_attr | curses.A_BOLD)
        else:
            self._draw_marker(request.previous_cursor, " ")
        self._draw_marker(request.cursor, HIGHLIGHT_MARKER)
        self._place_cursor(request.fragment)
        self.stdscr.refresh()
