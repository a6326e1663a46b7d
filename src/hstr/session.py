"""UI-agnostic selection state machine.

No curses imports: the session consumes logical InputEvents and returns
RenderRequests, so it can be driven and tested without a terminal.
"""

from __future__ import annotations

from typing import Sequence

from hstr.fragment import Fragment
from hstr.selection import make_selection
from hstr.types import PROMPT, EventKind, InputEvent, RenderRequest, SessionState


class SelectionSession:
    def __init__(self, history: Sequence[str], max_visible: int):
        self._history = history
        self._max_visible = max(0, max_visible)
        self._fragment = Fragment()
        self._matches: list[str] = make_selection(history, None, self._max_visible)
        self._cursor = PROMPT
        self._done = False
        self._result = ""

    @property
    def state(self) -> SessionState:
        if self._done:
            return SessionState.DONE
        if self._cursor == PROMPT:
            return SessionState.EDITING
        return SessionState.BROWSING

    @property
    def cursor(self) -> int:
        return self._cursor

    @property
    def fragment(self) -> str:
        return self._fragment.text

    @property
    def matches(self) -> list[str]:
        return list(self._matches)

    @property
    def max_visible(self) -> int:
        return self._max_visible

    @property
    def done(self) -> bool:
        return self._done

    @property
    def result(self) -> str:
        return self._result

    # --- Public API ---

    def render(self) -> RenderRequest:
        """Full render request for the current state."""
        return RenderRequest(
            fragment=self._fragment.text,
            matches=list(self._matches),
            cursor=self._cursor,
            max_visible=self._max_visible,
            previous_cursor=self._cursor,
            full=True,
        )

    def handle(self, event: InputEvent) -> RenderRequest | None:
        """Process one event to completion.

        Returns what the display needs to repaint, or None when nothing
        changed on screen (ignored events, no-op moves, termination).
        """
        if self._done:
            return None
        kind = event.kind
        if kind == EventKind.CHAR:
            self._fragment.append(event.char)
            return self._refilter()
        if kind == EventKind.BACKSPACE:
            self._fragment.backspace()
            return self._refilter()
        if kind == EventKind.DOWN:
            return self._move_down()
        if kind == EventKind.UP:
            return self._move_up()
        if kind == EventKind.ACCEPT:
            self._accept()
            return None
        if kind == EventKind.ABORT:
            self._finish("")
            return None
        if kind == EventKind.RESIZE:
            self._max_visible = max(0, event.max_visible)
            return self._refilter()
        return None

    # --- Internal ---

    def _refilter(self) -> RenderRequest:
        self._matches = make_selection(
            self._history, self._fragment.text or None, self._max_visible
        )
        # No row left under the cursor: drop back to the prompt before rendering
        if self._cursor >= len(self._matches):
            self._cursor = PROMPT
        return self.render()

    def _highlight(self, previous: int) -> RenderRequest:
        request = self.render()
        request.previous_cursor = previous
        request.full = False
        return request

    def _move_down(self) -> RenderRequest | None:
        if not self._matches:
            return None
        previous = self._cursor
        if self._cursor == PROMPT:
            self._cursor = 0
        else:
            self._cursor = (self._cursor + 1) % len(self._matches)
        return self._highlight(previous)

    def _move_up(self) -> RenderRequest | None:
        if self._cursor == PROMPT:
            return None
        previous = self._cursor
        self._cursor -= 1  # from row 0 this lands on PROMPT
        return self._highlight(previous)

    def _accept(self):
        # Accepting from the prompt picks the best current match, not the typed text
        if self._cursor != PROMPT:
            self._finish(self._matches[self._cursor])
        elif self._matches:
            self._finish(self._matches[0])
        else:
            self._finish("")

    def _finish(self, result: str):
        self._result = result
        self._done = True
