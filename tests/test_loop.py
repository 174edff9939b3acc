import pytest

from falling_blocks.visualization.loop import FrameLoop
from tests.helpers import place_piece


class SpyRenderer:
    def __init__(self, events):
        self.events = events

    def draw(self, surface, game):
        self.events.append(("draw", game.current_piece.row))


class FakeClock:
    def __init__(self):
        self.ticks = []

    def tick(self, fps):
        self.ticks.append(fps)
        return 1000 // fps


def test_tick_advances_gravity_before_repaint(game):
    events = []
    place_piece(game, "T", row=0)
    loop = FrameLoop(game, SpyRenderer(events), surface=None, present=lambda: None)
    result = loop.tick()
    assert result is not None and result.moved
    assert events == [("draw", 1)]


def test_gravity_frames_decouples_fall_rate(game):
    events = []
    place_piece(game, "T", row=0)
    loop = FrameLoop(game, SpyRenderer(events), surface=None, gravity_frames=3, present=lambda: None)
    results = [loop.tick() for _ in range(6)]
    assert [r is not None for r in results] == [False, False, True, False, False, True]
    assert [row for _, row in events] == [0, 0, 1, 1, 1, 2]


def test_run_pumps_events_between_ticks(game):
    events = []
    presented = []
    clock = FakeClock()
    remaining = [3]

    def pump():
        events.append("pump")
        remaining[0] -= 1
        return remaining[0] >= 0

    loop = FrameLoop(game, SpyRenderer(events), surface=None, fps=30, clock=clock,
                     present=lambda: presented.append(True))
    loop.run(pump)

    assert [e if isinstance(e, str) else e[0] for e in events] == ["pump", "draw"] * 3 + ["pump"]
    assert len(presented) == 3
    assert clock.ticks == [30, 30, 30]


def test_run_honours_max_frames(game):
    clock = FakeClock()
    loop = FrameLoop(game, SpyRenderer([]), surface=None, clock=clock, present=lambda: None)
    loop.run(lambda: True, max_frames=5)
    assert loop.frame == 5


@pytest.mark.parametrize("kwargs", [{"fps": 0}, {"gravity_frames": 0}])
def test_invalid_loop_options(game, kwargs):
    with pytest.raises(ValueError):
        FrameLoop(game, SpyRenderer([]), surface=None, **kwargs)
