# window.py
# customtkinter surface for the picker bar.
# - Borderless, full screen width, docked at the bottom edge.
# - Every key press goes through Engine.handle(); the bar is re-rendered into
#   the RenderContext buffer and shown in a single image label.
# - Focus is grabbed back whenever it leaves the window.

from __future__ import annotations
import logging
from typing import Optional

import customtkinter as ctk
from PIL import ImageFont

from dmitri.engine import Engine
from dmitri.models import RunOptions
from dmitri.render import RenderContext
from dmitri.state import Event
from .keys import translate

log = logging.getLogger(__name__)


class PickerWindow(ctk.CTk):
    """One-line bar that owns the RenderContext for its lifetime."""

    def __init__(self, engine: Engine, options: RunOptions,
                 font: Optional[ImageFont.FreeTypeFont] = None) -> None:
        # pixel-exact: the buffer is already laid out in screen pixels
        ctk.deactivate_automatic_dpi_awareness()
        super().__init__()
        ctk.set_appearance_mode("dark")

        self.engine = engine
        width = self.winfo_screenwidth()
        self.context = RenderContext(options, width, font=font)
        height = self.context.height

        # Window
        self.title("dmitri")
        self.overrideredirect(True)
        self.geometry(f"{width}x{height}+0+{self.winfo_screenheight() - height}")
        self.configure(fg_color="black")

        self.lbl_bar = ctk.CTkLabel(self, text="", fg_color="black", corner_radius=0)
        self.lbl_bar.pack(fill="both", expand=True)

        self.bind("<Key>", self._on_key)
        self.bind("<FocusOut>", self._on_focus_out)
        self.bind("<Map>", self._on_map)
        self.protocol("WM_DELETE_WINDOW", lambda: self._dispatch(Event.cancel()))

        self.after(0, self._grab_focus)
        self._repaint()

    # --------- events ---------

    def _on_key(self, ev) -> None:
        event = translate(ev.keysym, ev.char, ev.state)
        if event is None:
            return
        self._dispatch(event)

    def _on_map(self, ev) -> None:
        # Tk redraws the label itself; only a fresh mapping needs a new frame
        if ev.widget is self:
            self._dispatch(Event.expose())

    def _on_focus_out(self, _ev=None) -> None:
        if not self.engine.done:
            self.after(10, self._grab_focus)

    def _grab_focus(self) -> None:
        self.focus_force()

    def _dispatch(self, event: Event) -> None:
        if self.engine.handle(event):
            self._repaint()
        if self.engine.done:
            self._finish()

    # --------- drawing ---------

    def _repaint(self) -> None:
        buf = self.context.render(self.engine.state)
        # CTkImage keeps its own scaled copy, so hand it a snapshot per frame
        frame = buf.copy()
        image = ctk.CTkImage(light_image=frame, dark_image=frame, size=frame.size)
        self.lbl_bar.configure(image=image)

    # --------- lifecycle ---------

    def _finish(self) -> None:
        self.context.close()
        self.destroy()


def run(engine: Engine, options: RunOptions,
        font: Optional[ImageFont.FreeTypeFont] = None) -> Optional[str]:
    """Show the bar until commit/cancel; return the committed string or None."""
    window = PickerWindow(engine, options, font=font)
    try:
        window.mainloop()
    finally:
        window.context.close()
    return engine.output
