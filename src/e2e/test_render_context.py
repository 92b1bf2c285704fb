import pytest

from dmitri.models import RunOptions
from dmitri.render import RenderContext
from dmitri.state import PickerState


def _lit(buf):
    w, h = buf.size
    px = buf.load()
    return [(x, y) for y in range(h) for x in range(w) if px[x, y] != (0, 0, 0)]


@pytest.mark.e2e
def test_render_clips_matches_past_boundary(font):
    opts = RunOptions(fontsize=20, margin=5)
    with RenderContext(opts, 100, font=font) as ctx:
        assert ctx.height == 30
        state = PickerState(query="q", matches=("aaaaaaaa", "bbbbbbbb", "cccccccc"))
        buf = ctx.render(state)
        lit = _lit(buf)
        assert lit
        assert all(x < 90 for x, _ in lit)


@pytest.mark.e2e
def test_each_render_starts_from_clear_buffer(font):
    opts = RunOptions(fontsize=20, margin=5)
    with RenderContext(opts, 300, font=font) as ctx:
        full = set(_lit(ctx.render(PickerState(query="wwwwww"))))
        placeholder = set(_lit(ctx.render(PickerState())))
        assert placeholder and placeholder != full
        assert not (full - placeholder) & set(_lit(ctx.buffer))


def test_selected_match_uses_primary_color(font):
    opts = RunOptions(fontsize=20, margin=5, color=(0, 200, 50))
    with RenderContext(opts, 400, font=font) as ctx:
        buf = ctx.render(PickerState(query="f", matches=("find",), selection=None))
        greens = [buf.getpixel(p)[1] for p in _lit(buf)]
        assert max(greens) > 100

        buf = ctx.render(PickerState(query="f", matches=("find", "fish"), selection=0))
        assert max(buf.getpixel(p)[1] for p in _lit(buf)) > 100


def test_closed_context_refuses_to_render(font):
    ctx = RenderContext(RunOptions(fontsize=20), 100, font=font)
    ctx.close()
    with pytest.raises(RuntimeError):
        ctx.render(PickerState())
    ctx.close()  # idempotent
