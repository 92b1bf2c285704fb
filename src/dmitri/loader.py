from __future__ import annotations
import logging
import os
from typing import Iterable, List, Optional, Mapping, TextIO

from . import config as CFG
from .config import PATH_ENV

log = logging.getLogger(__name__)

# Progress logging (DMITRI_VERBOSE=1 or --verbose)
PROGRESS_EVERY_DIRS = 50


def path_dirs(env: Optional[Mapping[str, str]] = None) -> List[str]:
    """Directories listed in $PATH, empty entries dropped, first occurrence wins."""
    env = os.environ if env is None else env
    seen = set()
    out: List[str] = []
    for d in env.get(PATH_ENV, "").split(os.pathsep):
        if not d or d in seen:
            continue
        seen.add(d)
        out.append(d)
    return out


def _is_executable(path: str) -> bool:
    return os.path.isfile(path) and os.access(path, os.X_OK)


def iter_executables(dirs: Iterable[str]) -> Iterable[str]:
    """Yield the names of executable files directly under each directory."""
    for n, d in enumerate(dirs, start=1):
        try:
            names = os.listdir(d)
        except OSError:
            log.debug("skipping unreadable directory %s", d)
            continue
        for fn in names:
            if _is_executable(os.path.join(d, fn)):
                yield fn
        if CFG.VERBOSE and n % PROGRESS_EVERY_DIRS == 0:
            print(f"[load] scanned {n} directories")


def load_candidates(dirs: Optional[Iterable[str]] = None) -> List[str]:
    """Sorted, deduplicated executable names found in dirs (default: $PATH)."""
    dirs = path_dirs() if dirs is None else list(dirs)
    names = sorted(set(iter_executables(dirs)))
    log.info("Loaded %d candidates from %d directories", len(names), len(dirs))
    return names


def read_candidates(stream: TextIO) -> List[str]:
    """One candidate per line; blank lines and repeats dropped, order kept."""
    seen = set()
    out: List[str] = []
    for raw in stream:
        line = raw.rstrip("\r\n")
        if not line.strip() or line in seen:
            continue
        seen.add(line)
        out.append(line)
    log.info("Read %d candidates from stream", len(out))
    return out
