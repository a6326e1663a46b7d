from __future__ import annotations

import os
import time
from typing import TYPE_CHECKING

from hstr.types import InputEvent, ts_str

if TYPE_CHECKING:
    from hstr.session import SelectionSession


class DebugLogger:
    """Manages optional debug log files for raw keys and session transitions."""

    def __init__(self):
        self.enabled = False
        self._keys_fh = None
        self._session_fh = None

    def start(self, directory: str = "."):
        self._keys_fh = open(os.path.join(directory, "hstr_keys.log"), "a", encoding="utf-8")
        self._session_fh = open(os.path.join(directory, "hstr_session.log"), "a", encoding="utf-8")
        self.enabled = True
        sep = f"\n{'='*60}\n  Session started: {time.strftime('%Y-%m-%d %H:%M:%S')}\n{'='*60}\n"
        for fh in (self._keys_fh, self._session_fh):
            fh.write(sep)
            fh.flush()

    def stop(self):
        self.enabled = False
        for fh in (self._keys_fh, self._session_fh):
            if fh:
                fh.close()
        self._keys_fh = self._session_fh = None

    def log_key(self, ch: int | str):
        if not self.enabled or not self._keys_fh:
            return
        if isinstance(ch, str):
            code = ord(ch) if len(ch) == 1 else -1
            shown = ch if ch.isprintable() else repr(ch)
        else:
            code = ch
            shown = chr(ch) if 0 <= ch < 0x110000 and chr(ch).isprintable() else ""
        self._keys_fh.write(f"{ts_str(time.time())} | Key number: '{code:3d}' / Char: '{shown}'\n")
        self._keys_fh.flush()

    def log_event(self, event: InputEvent, session: SelectionSession):
        if not self.enabled or not self._session_fh:
            return
        detail = ""
        if event.char:
            detail = f" {event.char!r}"
        elif event.max_visible:
            detail = f" rows={event.max_visible}"
        self._session_fh.write(
            f"{ts_str(time.time())} | {event.kind.name}{detail}"
            f" -> {session.state.name} cursor={session.cursor}"
            f" fragment={session.fragment!r} matches={len(session.matches)}\n"
        )
        self._session_fh.flush()

    def log_message(self, text: str):
        if not self.enabled or not self._session_fh:
            return
        self._session_fh.write(f"{ts_str(time.time())} | -- {text} --\n")
        self._session_fh.flush()
