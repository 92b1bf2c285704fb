from __future__ import annotations
from typing import Callable, Iterable, List, Optional, Sequence

from .models import Color, Segment
from .config import PLACEHOLDER

# draw(x, text, color) -> next x
DrawFn = Callable[[int, str, Color], int]


def compose(query: str,
            matches: Sequence[str],
            selection: Optional[int],
            primary: Color,
            secondary: Color,
            placeholder: str = PLACEHOLDER) -> List[Segment]:
    """
    Lay out one bar line as colored segments:
      [query] (" " [match])*
    The query is primary while nothing is highlighted; once a match is
    highlighted that match is primary and everything else secondary.
    """
    if not query:
        return [Segment(placeholder, primary)]

    segs = [Segment(query, primary if selection is None else secondary)]
    for i, m in enumerate(matches):
        segs.append(Segment(" ", secondary))
        segs.append(Segment(m, primary if i == selection else secondary))
    return segs


def layout(segments: Iterable[Segment], draw: DrawFn, limit: int) -> int:
    """Feed segments to draw() until the running offset reaches limit; return the final offset."""
    x = 0
    for seg in segments:
        x = draw(x, seg.text, seg.color)
        if x >= limit:
            break
    return x
