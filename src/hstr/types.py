from __future__ import annotations

import time
from dataclasses import dataclass, field
from enum import Enum, auto

PROMPT = -1  # cursor sentinel: editing the prompt, no match highlighted


class EventKind(Enum):
    CHAR = auto()
    BACKSPACE = auto()
    UP = auto()
    DOWN = auto()
    ACCEPT = auto()
    ABORT = auto()
    RESIZE = auto()


class SessionState(Enum):
    EDITING = auto()
    BROWSING = auto()
    DONE = auto()


@dataclass(frozen=True)
class InputEvent:
    """A logical key event, already decoded from raw terminal input."""

    kind: EventKind
    char: str = ""
    max_visible: int = 0

    @classmethod
    def char_typed(cls, ch: str) -> InputEvent:
        if len(ch) != 1 or not ch.isprintable():
            raise ValueError(f"not a single printable character: {ch!r}")
        return cls(EventKind.CHAR, char=ch)

    @classmethod
    def backspace(cls) -> InputEvent:
        return cls(EventKind.BACKSPACE)

    @classmethod
    def up(cls) -> InputEvent:
        return cls(EventKind.UP)

    @classmethod
    def down(cls) -> InputEvent:
        return cls(EventKind.DOWN)

    @classmethod
    def accept(cls) -> InputEvent:
        return cls(EventKind.ACCEPT)

    @classmethod
    def abort(cls) -> InputEvent:
        return cls(EventKind.ABORT)

    @classmethod
    def resize(cls, max_visible: int) -> InputEvent:
        return cls(EventKind.RESIZE, max_visible=max_visible)


@dataclass
class RenderRequest:
    fragment: str
    matches: list[str] = field(default_factory=list)
    cursor: int = PROMPT
    max_visible: int = 0
    previous_cursor: int = PROMPT
    full: bool = True  # False: only the highlight marker moved


def ts_str(t: float) -> str:
    lt = time.localtime(t)
    return time.strftime("%H:%M:%S", lt)
