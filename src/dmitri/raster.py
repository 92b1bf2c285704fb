"""
Glyph rasterizer.

Turns a string into per-glyph coverage masks (via Pillow's FreeType binding)
positioned on a fixed baseline and blends them into an RGB pixel buffer:

    for each covered pixel:  buffer[x, y] = color * coverage

The horizontal cursor is threaded through successive draw() calls by the
caller, so one bar line is drawn as a sequence of colored segments.
"""
from __future__ import annotations
import logging
import math
import shutil
import subprocess
from dataclasses import dataclass
from typing import Callable, Dict, Iterator, List, Optional, Tuple

from PIL import Image, ImageDraw, ImageFont

from .models import Color
from .config import FONT_FALLBACKS

log = logging.getLogger(__name__)

# visitor shape: fn(x, y, coverage) for every pixel of a glyph mask
PixelFn = Callable[[int, int, float], None]


class FontLoadError(RuntimeError):
    """No usable font could be loaded; fatal at startup."""


# ------------- font selection -------------

def _fc_match(name: str) -> Optional[str]:
    """Resolve a family name to a font file through fontconfig, if installed."""
    exe = shutil.which("fc-match")
    if exe is None:
        return None
    try:
        proc = subprocess.run(
            [exe, "--format=%{file}", name],
            capture_output=True, text=True, timeout=5, check=True,
        )
    except (OSError, subprocess.SubprocessError):
        log.debug("fc-match failed for %r", name, exc_info=True)
        return None
    path = proc.stdout.strip()
    return path or None


def load_font(name: Optional[str], size: int) -> ImageFont.FreeTypeFont:
    """
    Load a scalable font at `size` pixels.
    Order: `name` as a path/file name, `name` through fontconfig, then the
    configured monospace fallbacks. Raises FontLoadError if nothing loads.
    """
    sources: List[str] = []
    if name:
        sources.append(name)
        resolved = _fc_match(name)
        if resolved:
            sources.append(resolved)
    sources.extend(FONT_FALLBACKS)

    tried: List[str] = []
    for src in sources:
        try:
            font = ImageFont.truetype(src, size)
        except OSError:
            tried.append(src)
            continue
        if tried:
            log.info("Could not load font %r, fell back", tried[0])
        log.info("Selected font: %s (%s)", " ".join(font.getname()), src)
        return font
    raise FontLoadError(f"no usable font for {name!r} (tried: {', '.join(tried)})")


# ------------- pixel buffer -------------

def new_buffer(width: int, height: int) -> Image.Image:
    return Image.new("RGB", (width, height), (0, 0, 0))


def clear(buffer: Image.Image) -> None:
    """Zero the whole buffer; every render pass starts from black."""
    buffer.paste((0, 0, 0), (0, 0, buffer.width, buffer.height))


# ------------- glyphs -------------

@dataclass(frozen=True)
class Glyph:
    char: str
    pen_x: int                                        # cursor position before this glyph
    bbox: Optional[Tuple[int, int, int, int]]         # ink box (x0, y0, x1, y1), baseline applied
    mask: Optional[Image.Image]                       # "L" coverage, same size as bbox


def visit(mask: Image.Image, fn: PixelFn) -> None:
    """Call fn(x, y, v) for every pixel of the mask, v in [0, 1]."""
    w, h = mask.size
    data = mask.load()
    for y in range(h):
        for x in range(w):
            fn(x, y, data[x, y] / 255.0)


class GlyphRasterizer:
    def __init__(self, font: ImageFont.FreeTypeFont, margin: int) -> None:
        self.font = font
        self.margin = margin
        ascent, _descent = font.getmetrics()
        self.baseline = ascent
        self._masks: Dict[str, Optional[Tuple[int, int, Image.Image]]] = {}

    def limit(self, buffer: Image.Image) -> int:
        """First x coordinate that is never drawn."""
        return buffer.width - 2 * self.margin

    def _mask(self, ch: str) -> Optional[Tuple[int, int, Image.Image]]:
        """(dx, dy, mask) of ch's ink relative to (pen, baseline); None for blank glyphs."""
        if ch in self._masks:
            return self._masks[ch]
        left, top, right, bottom = self.font.getbbox(ch, anchor="ls")
        found = None
        if right > left and bottom > top:
            img = Image.new("L", (right - left, bottom - top), 0)
            ImageDraw.Draw(img).text((-left, -top), ch, font=self.font, fill=255, anchor="ls")
            ink = img.getbbox()
            if ink is not None:
                found = (left + ink[0], top + ink[1], img.crop(ink))
        self._masks[ch] = found
        return found

    def layout(self, text: str) -> Iterator[Glyph]:
        """Position each glyph of text on the baseline, starting at pen x = 0."""
        pen = 0.0
        for ch in text:
            x = math.floor(pen)
            found = self._mask(ch)
            if found is None:
                yield Glyph(ch, x, None, None)
            else:
                dx, dy, mask = found
                x0 = x + dx
                y0 = self.baseline + dy
                yield Glyph(ch, x, (x0, y0, x0 + mask.width, y0 + mask.height), mask)
            pen += self.font.getlength(ch)

    def draw(self, buffer: Image.Image, offset_x: int, text: str, color: Color) -> int:
        """
        Draw text (plus one trailing space) at offset_x; return the next offset.
        Pixels at x >= limit(buffer) are clipped; once a glyph is clipped the
        rest of the text is skipped and limit(buffer) is returned so callers
        stop emitting segments.
        """
        limit = self.limit(buffer)
        width, height = buffer.size
        px = buffer.load()
        next_x = offset_x

        for glyph in self.layout(text + " "):
            if glyph.bbox is None:
                next_x = offset_x + glyph.pen_x
                continue

            dst_x = self.margin + offset_x + glyph.bbox[0]
            dst_y = self.margin + glyph.bbox[1]
            outside = False

            def put(gx: int, gy: int, v: float) -> None:
                nonlocal outside
                x = dst_x + gx
                y = dst_y + gy
                if x >= limit:
                    outside = True
                    return
                if x < 0 or y < 0 or y >= height or x >= width:
                    return
                px[x, y] = (round(color[0] * v), round(color[1] * v), round(color[2] * v))

            visit(glyph.mask, put)
            if outside:
                return limit
            next_x = offset_x + glyph.bbox[2]
        return next_x
