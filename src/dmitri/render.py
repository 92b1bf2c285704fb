from __future__ import annotations
import logging
from typing import Optional

from PIL import Image, ImageFont

from .models import RunOptions
from .state import PickerState
from .compose import compose, layout
from .raster import GlyphRasterizer, load_font, new_buffer, clear

log = logging.getLogger(__name__)


class RenderContext:
    """
    Owns everything one surface needs to draw the bar:
      - the loaded font and its GlyphRasterizer,
      - the RGB pixel buffer (released on close()).

    Use as a context manager:

        with RenderContext(opts, width) as ctx:
            image = ctx.render(state)
    """

    def __init__(self,
                 options: RunOptions,
                 width: int,
                 height: Optional[int] = None,
                 *,
                 font: Optional[ImageFont.FreeTypeFont] = None) -> None:
        self.options = options
        self.width = width
        self.height = height if height is not None else options.bar_height
        # font errors surface here, before any window is shown
        self.font = font if font is not None else load_font(options.fontname, options.fontsize)
        self.rasterizer = GlyphRasterizer(self.font, options.margin)
        self._buffer: Optional[Image.Image] = new_buffer(self.width, self.height)
        log.info("Render context ready: %dx%d", self.width, self.height)

    @property
    def buffer(self) -> Image.Image:
        if self._buffer is None:
            raise RuntimeError("RenderContext is closed")
        return self._buffer

    def render(self, state: PickerState) -> Image.Image:
        """Clear the buffer and draw query + matches; returns the buffer."""
        buf = self.buffer
        clear(buf)
        opts = self.options
        segments = compose(state.query, state.matches, state.selection,
                           opts.color, opts.color_secondary)

        def draw(x, text, color):
            return self.rasterizer.draw(buf, x, text, color)

        layout(segments, draw, self.rasterizer.limit(buf))
        return buf

    # ------------- lifecycle -------------

    def close(self) -> None:
        if self._buffer is not None:
            self._buffer.close()
            self._buffer = None

    def __enter__(self) -> "RenderContext":
        return self

    def __exit__(self, *exc) -> None:
        self.close()
