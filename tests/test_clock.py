from saffron2d import clock
from saffron2d.clock import Clock


class FakeTimer:
    def __init__(self):
        self.now = 0.0

    def __call__(self):
        return self.now


def test_new_clock_has_zero_frame_time():
    timer = FakeTimer()
    c = Clock(timer)
    assert c.frame_time() == 0.0
    assert c.since_start() == 0.0


def test_elapsed_time_follows_timer():
    timer = FakeTimer()
    c = Clock(timer)
    timer.now = 2.5
    assert c.elapsed_time() == 2.5
    assert c.frame_time() == 0.0


def test_restart_returns_and_stores_frame_time():
    timer = FakeTimer()
    c = Clock(timer)
    timer.now = 0.25
    dt = c.restart()
    assert dt == 0.25
    assert c.frame_time() == dt
    assert c.elapsed_time() == 0.0


def test_since_start_accumulates_frames():
    timer = FakeTimer()
    c = Clock(timer)
    steps = [0.5, 0.25, 1.0]
    total = 0.0
    for step in steps:
        timer.now += step
        total += c.restart()
    assert c.since_start() == total
    timer.now += 0.125
    assert c.since_start() == total + c.elapsed_time()


def test_global_functions_are_consistent():
    dt = clock.restart()
    assert dt >= 0.0
    assert clock.frame_time() == dt
    assert clock.elapsed_time() >= 0.0
    assert clock.since_start() >= clock.frame_time()