from __future__ import annotations
import logging
from dataclasses import dataclass, replace
from enum import Enum
from typing import Callable, List, Optional, Tuple

from . import selection as SEL

log = logging.getLogger(__name__)

Ranker = Callable[[str], List[str]]


class EventKind(Enum):
    APPEND = "append"
    BACKSPACE = "backspace"
    ADVANCE = "advance"
    RETREAT = "retreat"
    COMMIT = "commit"
    CANCEL = "cancel"
    EXPOSE = "expose"


@dataclass(frozen=True)
class Event:
    kind: EventKind
    char: str = ""            # APPEND only
    shift: bool = False       # reverses ADVANCE / RETREAT

    @classmethod
    def append(cls, char: str) -> "Event":
        return cls(EventKind.APPEND, char=char)

    @classmethod
    def backspace(cls) -> "Event":
        return cls(EventKind.BACKSPACE)

    @classmethod
    def advance(cls, shift: bool = False) -> "Event":
        return cls(EventKind.ADVANCE, shift=shift)

    @classmethod
    def retreat(cls, shift: bool = False) -> "Event":
        return cls(EventKind.RETREAT, shift=shift)

    @classmethod
    def commit(cls) -> "Event":
        return cls(EventKind.COMMIT)

    @classmethod
    def cancel(cls) -> "Event":
        return cls(EventKind.CANCEL)

    @classmethod
    def expose(cls) -> "Event":
        return cls(EventKind.EXPOSE)


@dataclass(frozen=True)
class PickerState:
    query: str = ""
    matches: Tuple[str, ...] = ()
    selection: Optional[int] = None
    done: bool = False
    output: Optional[str] = None    # resolved string on commit, None on cancel


def _edit(state: PickerState, query: str, ranker: Ranker) -> PickerState:
    # every query mutation re-ranks in full and drops the highlight
    return replace(state, query=query, matches=tuple(ranker(query)), selection=None)


def apply(state: PickerState, event: Event, ranker: Ranker) -> tuple[PickerState, bool]:
    """
    Single transition function of the picker.
    Returns (new_state, render_needed).
    """
    if state.done:
        return state, False

    kind = event.kind
    if kind is EventKind.APPEND:
        if not event.char:
            return state, False
        return _edit(state, state.query + event.char, ranker), True

    if kind is EventKind.BACKSPACE:
        if not state.query:
            return state, False
        return _edit(state, state.query[:-1], ranker), True

    if kind in (EventKind.ADVANCE, EventKind.RETREAT):
        forward = (kind is EventKind.ADVANCE) != event.shift
        step = SEL.advance if forward else SEL.retreat
        new_sel = step(state.selection, len(state.matches))
        if new_sel == state.selection:
            return state, False
        log.debug("selection %s -> %s", state.selection, new_sel)
        return replace(state, selection=new_sel), True

    if kind is EventKind.COMMIT:
        out = SEL.resolve(state.query, state.matches, state.selection)
        return replace(state, done=True, output=out), False

    if kind is EventKind.CANCEL:
        return replace(state, done=True, output=None), False

    # EXPOSE: repaint only
    return state, True
