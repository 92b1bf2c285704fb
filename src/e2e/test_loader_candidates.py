import io
import os
from pathlib import Path

import pytest

from dmitri.loader import path_dirs, iter_executables, load_candidates, read_candidates


def _seed(tmp: Path) -> tuple[str, str]:
    a = tmp / "bin"; a.mkdir()
    b = tmp / "usr_bin"; b.mkdir()
    for d, names in ((a, ["firefox", "fish"]), (b, ["find", "fish"])):
        for n in names:
            p = d / n
            p.write_text("#!/bin/sh\n", encoding="utf-8")
            p.chmod(0o755)
    (a / "README").write_text("not a program\n", encoding="utf-8")
    (a / "README").chmod(0o644)
    (b / "subdir").mkdir()
    return str(a), str(b)


@pytest.mark.e2e
def test_load_candidates_sorted_and_deduplicated(tmp_path: Path):
    a, b = _seed(tmp_path)
    assert load_candidates([a, b]) == ["find", "firefox", "fish"]


def test_missing_directory_is_skipped(tmp_path: Path):
    a, _ = _seed(tmp_path)
    names = list(iter_executables([str(tmp_path / "nope"), a]))
    assert sorted(names) == ["firefox", "fish"]


def test_path_dirs_splits_and_dedupes():
    env = {"PATH": os.pathsep.join(["/a", "", "/b", "/a"])}
    assert path_dirs(env) == ["/a", "/b"]
    assert path_dirs({}) == []


def test_load_candidates_defaults_to_path(tmp_path: Path, monkeypatch):
    a, b = _seed(tmp_path)
    monkeypatch.setenv("PATH", os.pathsep.join([a, b]))
    assert load_candidates() == ["find", "firefox", "fish"]


def test_read_candidates_keeps_order_drops_blanks_and_repeats():
    stream = io.StringIO("zsh\n\nbash\nzsh\n  \nfish\r\n")
    assert read_candidates(stream) == ["zsh", "bash", "fish"]
