from __future__ import annotations
import re
from dataclasses import dataclass
from typing import Optional, Tuple

from . import config as CFG

Color = Tuple[int, int, int]

_HEX = re.compile(r"#?([0-9a-fA-F]{6})")


@dataclass(frozen=True)
class Match:
    candidate: str
    score: float              # boosted score, valid for one ranking pass only


@dataclass(frozen=True)
class Segment:
    text: str
    color: Color


@dataclass(frozen=True)
class RunOptions:
    """Configuration supplied once at start; immutable afterwards."""
    fontname: Optional[str] = CFG.FONT_NAME
    fontsize: int = CFG.FONT_SIZE
    color: Color = CFG.COLOR
    margin: int = CFG.MARGIN
    precise_weight: float = CFG.PRECISE_WEIGHT
    top_k: int = CFG.TOP_K

    @property
    def color_secondary(self) -> Color:
        return dim(self.color)

    @property
    def bar_height(self) -> int:
        return self.fontsize + 2 * self.margin


def dim(color: Color) -> Color:
    """De-emphasized variant: every channel halved."""
    r, g, b = color
    return (r // 2, g // 2, b // 2)


def parse_color(text: str) -> Color:
    """
    Parse '#rrggbb', 'rrggbb' or 'r,g,b' into an RGB tuple.
    Raises ValueError on anything else.
    """
    text = text.strip()
    m = _HEX.fullmatch(text)
    if m:
        raw = m.group(1)
        return (int(raw[0:2], 16), int(raw[2:4], 16), int(raw[4:6], 16))
    parts = [p.strip() for p in text.split(",")]
    if len(parts) != 3:
        raise ValueError(f"not a color: {text!r}")
    channels = tuple(int(p) for p in parts)
    if any(c < 0 or c > 255 for c in channels):
        raise ValueError(f"color channel out of range: {text!r}")
    return channels  # type: ignore[return-value]
