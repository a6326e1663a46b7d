"""History filtering: prefix matches first, then substring matches.

Pure functions over an in-memory history list, no curses or I/O, so the
matching rules can be tested on their own.
"""

from __future__ import annotations

from typing import Sequence


def make_selection(history: Sequence[str], fragment: str | None, limit: int) -> list[str]:
    """Select at most ``limit`` unique lines from ``history`` matching ``fragment``.

    ``history`` is expected most-recent-first. Lines starting with the
    fragment come first, in history order, followed by lines containing it
    further in. Duplicate text is kept only at its first accepted position.
    An empty or missing fragment selects every unique line.
    """
    selection: list[str] = []
    if limit <= 0:
        return selection
    seen: set[str] = set()

    for line in history:
        if len(selection) >= limit:
            break
        if line in seen:
            continue
        if not fragment or line.startswith(fragment):
            selection.append(line)
            seen.add(line)

    if fragment and len(selection) < limit:
        for line in history:
            if len(selection) >= limit:
                break
            if line in seen:
                continue
            # offset 0 was already taken (or rejected) by the prefix pass
            if line.find(fragment) > 0:
                selection.append(line)
                seen.add(line)

    return selection


def match_offset(line: str, fragment: str | None) -> int:
    """Column where ``fragment`` first appears in ``line``, or -1."""
    if not fragment:
        return -1
    return line.find(fragment)
