import pytest

from dmitri import Engine, Event, RunOptions


@pytest.mark.e2e
def test_type_cycle_commit():
    eng = Engine()
    try:
        eng.build(candidates=["firefox", "find", "fish"])
        assert eng.handle(Event.append("f")) is True
        assert eng.handle(Event.append("i")) is True
        assert len(eng.state.matches) == 3
        assert eng.handle(Event.advance()) is True
        chosen = eng.state.matches[0]
        eng.handle(Event.commit())
        assert eng.done and eng.output == chosen
    finally:
        eng.shutdown()


@pytest.mark.e2e
def test_commit_without_selection_returns_raw_query():
    eng = Engine()
    eng.build(candidates=["ls"])
    for ch in "echo hi":
        eng.handle(Event.append(ch))
    eng.handle(Event.commit())
    assert eng.output == "echo hi"


def test_cancel_yields_none():
    eng = Engine()
    eng.build(candidates=["ls"])
    eng.handle(Event.append("l"))
    eng.handle(Event.cancel())
    assert eng.done and eng.output is None


def test_options_flow_into_ranking():
    eng = Engine(RunOptions(top_k=2))
    eng.build(candidates=["tool1", "tool2", "tool3"])
    assert len(eng.complete("tool")) == 2
    assert [m.candidate for m in eng.score("tool")] == eng.complete("tool")


def test_use_before_build_raises():
    eng = Engine()
    with pytest.raises(RuntimeError):
        eng.complete("x")
    with pytest.raises(RuntimeError):
        eng.handle(Event.append("x"))
