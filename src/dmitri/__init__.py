"""
dmitri: type-to-filter-and-launch picker

A one-line bar at the bottom of the screen: type a few characters, the
executables on $PATH are re-ranked on every keystroke, Tab cycles through the
best matches and Enter prints the chosen one so the calling shell can run it.

The package is split along the interaction pipeline:
- loader:    candidate provider ($PATH scan or stdin lines)
- search:    fuzzy ranking with a literal-substring boost
- selection: highlight cycling over the match list
- state:     PickerState and the apply(state, event) transition function
- compose:   query + matches -> colored segments
- raster:    glyph coverage masks blended into an RGB buffer
- render:    RenderContext owning font, rasterizer and buffer
- engine:    orchestration used by the CLI and the window

Example Usage:
    from dmitri import Engine, Event

    eng = Engine()
    eng.build(candidates=["firefox", "find", "fish"])
    eng.handle(Event.append("f"))
    eng.handle(Event.append("i"))
    eng.handle(Event.advance())
    eng.handle(Event.commit())
    print(eng.output)   # "firefox"
"""

# src/dmitri/__init__.py
from .engine import Engine
from .models import Match, RunOptions, Segment
from .search import rank, rank_matches
from .state import Event, EventKind, PickerState, apply

__version__ = "1.0.0"
__all__ = [
    "Engine", "Event", "EventKind", "Match", "PickerState", "RunOptions",
    "Segment", "apply", "rank", "rank_matches",
]
