import pytest
from dmitri.search import rank

CANDS = [f"tool{i:02d}" for i in range(40)] + ["other", "thing"]

@pytest.mark.e2e
def test_empty_query_returns_nothing():
    assert rank("", CANDS) == []
    assert rank("", ["a"], weight=1.0) == []

@pytest.mark.e2e
def test_result_capped_at_twenty_and_drawn_from_candidates():
    rows = rank("t", CANDS)
    assert len(rows) == 20
    assert all(r in CANDS for r in rows)
    assert len(set(rows)) == len(rows)

@pytest.mark.e2e
def test_custom_top_k_is_honoured():
    assert len(rank("tool", CANDS, top_k=3)) == 3

@pytest.mark.e2e
def test_non_subsequence_candidates_are_dropped():
    rows = rank("zz", ["fizz", "buzz", "foo"])
    assert set(rows) == {"fizz", "buzz"}

@pytest.mark.e2e
def test_rank_is_deterministic_and_pure():
    cands = ["grep", "egrep", "git", "gimp", "pgrep", "ag"]
    snapshot = list(cands)
    first = rank("gp", cands)
    for _ in range(5):
        assert rank("gp", cands) == first
    assert cands == snapshot
