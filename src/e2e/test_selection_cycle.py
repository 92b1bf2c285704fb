from dmitri.selection import advance, retreat, resolve


def test_advance_cycles_through_none():
    sel = None
    seen = []
    for _ in range(4):
        sel = advance(sel, 3)
        seen.append(sel)
    assert seen == [0, 1, 2, None]


def test_retreat_from_none_lands_on_last():
    assert retreat(None, 3) == 2
    assert retreat(2, 3) == 1
    assert retreat(0, 3) is None


def test_short_lists_are_noops():
    assert advance(None, 1) is None
    assert retreat(None, 1) is None
    assert advance(0, 1) == 0
    assert advance(None, 0) is None


def test_resolve():
    assert resolve("fi", ["firefox", "find"], None) == "fi"
    assert resolve("fi", ["firefox", "find"], 1) == "find"
    assert resolve("", [], None) == ""
