from __future__ import annotations
from typing import Optional

from dmitri.state import Event

SHIFT_MASK = 0x0001      # Tk event.state bit for Shift

_COMMIT = {"Return", "KP_Enter"}
_FORWARD = {"Tab", "Right", "Down"}
_BACKWARD = {"ISO_Left_Tab", "Left", "Up"}


def translate(keysym: str, char: str, state: int = 0) -> Optional[Event]:
    """Map one Tk key press (keysym, char, modifier mask) to a picker Event."""
    shift = bool(state & SHIFT_MASK)
    if keysym == "Escape":
        return Event.cancel()
    if keysym in _COMMIT:
        return Event.commit()
    if keysym == "BackSpace":
        return Event.backspace()
    if keysym in _FORWARD:
        return Event.advance(shift=shift)
    if keysym in _BACKWARD:
        # X11 reports Shift+Tab as ISO_Left_Tab with Shift still held
        return Event.retreat(shift=shift and keysym != "ISO_Left_Tab")
    if len(char) == 1 and char.isprintable():
        return Event.append(char)
    return None
