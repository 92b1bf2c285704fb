from __future__ import annotations
import os

# ranking
TOP_K: int = 20                  # matches kept per ranking pass
PRECISE_WEIGHT: float = 5.0      # substring boost: weight / (start + weight)

# font / rendering
FONT_NAME: str = "monospace"
FONT_SIZE: int = 32              # uniform scale in pixels
COLOR: tuple[int, int, int] = (0, 200, 50)
MARGIN: int = 5
PLACEHOLDER: str = "_"           # drawn in place of an empty query

# tried in order when FONT_NAME cannot be resolved
FONT_FALLBACKS = [
    "DejaVuSansMono.ttf",
    "LiberationMono-Regular.ttf",
    "NotoSansMono-Regular.ttf",
    "UbuntuMono-R.ttf",
    "FreeMono.ttf",
    "Menlo.ttc",
    "consola.ttf",
]

# candidate provider
PATH_ENV: str = "PATH"

# Progress logging (set DMITRI_VERBOSE=1 to enable)
VERBOSE: bool = os.environ.get("DMITRI_VERBOSE") == "1"
