# dmitri/engine.py
from __future__ import annotations

import logging
from typing import Iterable, List, Optional, Sequence

from .models import Match, RunOptions
from .loader import load_candidates
from .search import rank, rank_matches
from .state import Event, PickerState, apply

log = logging.getLogger(__name__)


class Engine:
    """
    Thin orchestration layer that glues together:
      - the candidate set (scanned once at startup),
      - the ranking pipeline (search.rank),
      - the interaction state machine (state.apply).

    Public API (used by the CLI and the window):
      * build(dirs, candidates=...): acquire candidates
      * complete(query) / score(query): one-shot ranking
      * handle(event): feed one input event, returns render_needed
      * done / output: outcome once committed or cancelled
      * shutdown(): drop state
    """

    # ------------- lifecycle -------------

    def __init__(self, options: Optional[RunOptions] = None) -> None:
        self.options = options or RunOptions()
        self._candidates: Optional[List[str]] = None
        self._state = PickerState()

    # /* ~~~ Acquire candidates: explicit list wins, else scan dirs ($PATH by default) ~~~ */
    def build(self,
              dirs: Optional[Iterable[str]] = None,
              *,
              candidates: Optional[Sequence[str]] = None) -> None:
        if candidates is not None:
            self._candidates = list(candidates)
        else:
            self._candidates = load_candidates(dirs)
        self._state = PickerState()
        log.info("Engine build() complete: candidates=%d", len(self._candidates))

    @property
    def candidates(self) -> List[str]:
        if self._candidates is None:
            raise RuntimeError("Engine not initialized. Call build() first.")
        return self._candidates

    # ------------- query -------------

    def complete(self, query: str) -> List[str]:
        opts = self.options
        return rank(query, self.candidates, opts.precise_weight, opts.top_k)

    def score(self, query: str) -> List[Match]:
        opts = self.options
        return rank_matches(query, self.candidates, opts.precise_weight, opts.top_k)

    # ------------- interaction -------------

    def handle(self, event: Event) -> bool:
        """Apply one input event; True when the bar must be redrawn."""
        if self._candidates is None:
            raise RuntimeError("Engine not initialized. Call build() first.")
        self._state, render_needed = apply(self._state, event, self.complete)
        if self._state.done:
            log.info("Picker finished: output=%r", self._state.output)
        return render_needed

    @property
    def state(self) -> PickerState:
        return self._state

    @property
    def done(self) -> bool:
        return self._state.done

    @property
    def output(self) -> Optional[str]:
        return self._state.output

    # ------------- teardown -------------

    def shutdown(self) -> None:
        self._candidates = None
        self._state = PickerState()
        log.info("Engine shutdown complete")
