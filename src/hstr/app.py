from __future__ import annotations

from typing import Sequence

from hstr.config import Config, get_default_config
from hstr.debug_log import DebugLogger
from hstr.session import SelectionSession
from hstr.types import InputEvent
from hstr.ui import PickerUI


def run_picker(
    stdscr,
    history: Sequence[str],
    config: Config | None = None,
    logger: DebugLogger | None = None,
    prompt: str | None = None,
) -> str:
    """Run one interactive selection and return the chosen command.

    ``history`` must already be most-recent-first. Returns "" on abort or
    when there is nothing to select.
    """
    config = config or get_default_config()
    logger = logger or DebugLogger()

    ui = PickerUI(stdscr, color=config.ui.color, prompt=prompt)
    session = SelectionSession(history, ui.max_visible())
    logger.log_message(f"{len(history)} history lines, {session.max_visible} rows")
    ui.draw(session.render())

    try:
        while not session.done:
            ch = ui.read_key()
            logger.log_key(ch if ch is not None else -1)
            event = ui.decode(ch)
            if event is None:
                continue
            request = session.handle(event)
            logger.log_event(event, session)
            ui.draw(request)
    except KeyboardInterrupt:
        event = InputEvent.abort()
        session.handle(event)
        logger.log_event(event, session)

    logger.log_message(f"Result: {session.result!r}")
    return session.result
