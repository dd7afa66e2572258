from flappy.data_models import GameState
from flappy.ground import GroundStrip


class StateOnly:
    def __init__(self, state):
        self.state = state


def test_scrolls_only_while_playing():
    ground = GroundStrip()
    for state in (GameState.READY, GameState.OVER):
        ground.update(StateOnly(state))
    assert ground.x == 0

    ground.update(StateOnly(GameState.PLAYING))
    assert ground.scrolled == 2
    assert ground.x == -2


def test_offset_wraps_into_non_negative_range():
    ground = GroundStrip()
    playing = StateOnly(GameState.PLAYING)
    for _ in range(79):
        ground.update(playing)
        assert 0 <= ground.scrolled < 160
    assert ground.scrolled == 158
    ground.update(playing)
    assert ground.scrolled == 0


def test_zero_width_viewport_is_guarded():
    ground = GroundStrip(scrolled=5, viewport_width=0)
    assert ground.update(StateOnly(GameState.PLAYING)) is False
    assert ground.scrolled == 0


def test_ground_plane_top():
    assert GroundStrip().top == 368


def test_draws_two_tiles(canvas, sprites):
    ground = GroundStrip(scrolled=30)
    ground.draw(canvas, sprites)
    assert canvas.calls == [
        ("draw_image", "ground", -30, 368, 320, 112),
        ("draw_image", "ground", 290, 368, 320, 112),
    ]
