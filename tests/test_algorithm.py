import random

from rsort.algorithm import Algorithm, generate_array
from rsort.globals import Globals


class FakeDisplay:
    def __init__(self, pressed=(), close_after=None):
        self.pressed = set(pressed)
        self.close_after = close_after
        self.frames = 0
        self.fps_calls = []
        self.clears = []
        self.rects = []

    def window_should_close(self):
        return self.close_after is not None and self.frames >= self.close_after

    def is_key_pressed(self, key):
        return key in self.pressed

    def set_target_fps(self, fps):
        self.fps_calls.append(fps)

    def clear(self, color):
        self.clears.append(color)
        self.rects = []

    def draw_rect(self, rect, color):
        self.rects.append((tuple(rect), color))

    def present(self):
        self.frames += 1


def test_generate_array_start():
    assert generate_array(5) == [0, 1, 1, 2, 2]


def test_generate_array_invariants():
    values = generate_array(101)
    assert len(values) == 101
    assert values == sorted(values)
    assert all(b - a in (0, 1) for a, b in zip(values, values[1:]))
    assert generate_array(0) == []


def test_new_algorithm_is_sorted():
    alg = Algorithm(20, random.Random(0))
    assert alg.nums == generate_array(20)
    assert alg.length == 20


def test_shuffle_keeps_values_and_draws_every_step():
    alg = Algorithm(50, random.Random(3))
    display = FakeDisplay()
    alg.shuffle(Globals(), display)
    assert sorted(alg.nums) == generate_array(50)
    assert display.frames == 50


def test_shuffle_is_deterministic_for_seed():
    a = Algorithm(40, random.Random(7))
    b = Algorithm(40, random.Random(7))
    a.shuffle(Globals(), FakeDisplay())
    b.shuffle(Globals(), FakeDisplay())
    assert a.nums == b.nums


def test_shuffle_stops_when_window_closes():
    alg = Algorithm(30, random.Random(1))
    display = FakeDisplay(close_after=3)
    alg.shuffle(Globals(), display)
    assert display.frames == 3
    assert sorted(alg.nums) == generate_array(30)


def test_shuffle_stops_when_quit_requested():
    alg = Algorithm(30, random.Random(1))
    globals_ = Globals(acted_to_close=True)
    display = FakeDisplay()
    alg.shuffle(globals_, display)
    assert display.frames == 0
    assert alg.nums == generate_array(30)


def test_left_key_slows_down():
    globals_ = Globals(fps_update=False)
    Algorithm(3).manage_speeds(globals_, FakeDisplay(pressed={"left"}))
    assert globals_.fps < 60
    assert globals_.fps_update is True


def test_right_key_speeds_up():
    globals_ = Globals(fps_update=False)
    Algorithm(3).manage_speeds(globals_, FakeDisplay(pressed={"right"}))
    assert globals_.fps > 60
    assert globals_.fps_update is True


def test_left_key_ignored_when_change_too_large():
    globals_ = Globals(fps=5, fps_update=False)
    Algorithm(3).manage_speeds(globals_, FakeDisplay(pressed={"left"}))
    assert globals_.fps == 5
    assert globals_.fps_update is False


def test_fps_clamped_to_one():
    globals_ = Globals(fps=0, fps_update=False)
    Algorithm(3).manage_speeds(globals_, FakeDisplay())
    assert globals_.fps == 1
    assert globals_.fps_update is True


def test_graphics_applies_fps_once():
    globals_ = Globals()
    display = FakeDisplay()
    alg = Algorithm(4)
    alg.algorithm_graphics(globals_, display)
    alg.algorithm_graphics(globals_, display)
    assert display.fps_calls == [60]
    assert globals_.fps_update is False
    assert display.frames == 2
    assert display.clears == [(0, 0, 0), (0, 0, 0)]


def test_paint_self_draws_bars_to_the_floor():
    globals_ = Globals()
    alg = Algorithm(600)
    display = FakeDisplay()
    alg.paint_self(display, globals_)
    assert len(display.rects) == 600
    first = display.rects[0][0]
    assert first[0] == 0.0
    for (x, y, w, h), color in display.rects:
        assert color == (255, 255, 255)
        assert w == float(globals_.single_size)
        assert y + h == float(globals_.height)
    xs = [rect[0] for rect, _ in display.rects]
    assert all(b - a == globals_.single_size for a, b in zip(xs, xs[1:]))


def test_paint_self_heights_follow_values():
    globals_ = Globals(single_size=2)
    alg = Algorithm(10)
    display = FakeDisplay()
    alg.paint_self(display, globals_)
    heights = [rect[3] for rect, _ in display.rects]
    assert heights == [float(v * 2) for v in alg.nums]