from __future__ import annotations
from typing import Optional, Sequence

# Selection Index: None (nothing highlighted) or an index into the match list.
# Cycling passes through None in both directions so the user can get back
# to the free-typed query.


def advance(selection: Optional[int], count: int) -> Optional[int]:
    """None -> 0 -> 1 -> ... -> count-1 -> None. No-op with fewer than two matches."""
    if count <= 1:
        return selection
    if selection is None:
        return 0
    nxt = selection + 1
    return nxt if nxt < count else None


def retreat(selection: Optional[int], count: int) -> Optional[int]:
    """None -> count-1 -> ... -> 0 -> None. No-op with fewer than two matches."""
    if count <= 1:
        return selection
    if selection is None:
        return count - 1
    if selection > 0:
        return selection - 1
    return None


def resolve(query: str, matches: Sequence[str], selection: Optional[int]) -> str:
    """The string a commit hands to the launcher: the highlighted match, else the raw query."""
    if selection is None:
        return query
    return matches[selection]
