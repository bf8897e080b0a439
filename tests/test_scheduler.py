import threading

from clockface.display.scheduler import FrameScheduler


class FakeClock:
    def __init__(self):
        self.now = 100.0

    def __call__(self):
        return self.now


def test_earliest_request_wins():
    clock = FakeClock()
    scheduler = FrameScheduler(lambda: None, clock=clock)

    scheduler.post_invalidate_delayed(1000)
    assert scheduler.pending_deadline == 101.0

    scheduler.post_invalidate_delayed(5000)
    assert scheduler.pending_deadline == 101.0

    scheduler.invalidate()
    assert scheduler.pending_deadline == 100.0


def test_negative_delay_is_immediate():
    clock = FakeClock()
    scheduler = FrameScheduler(lambda: None, clock=clock)
    scheduler.post_invalidate_delayed(-50)
    assert scheduler.pending_deadline == 100.0


def test_renders_first_frame_on_start_and_stops():
    rendered = threading.Event()
    scheduler = FrameScheduler(rendered.set)

    scheduler.start()
    assert scheduler.is_running
    assert rendered.wait(2)

    scheduler.stop()
    assert not scheduler.is_running
    assert scheduler.frames_rendered >= 1


def test_self_scheduling_frames():
    done = threading.Event()
    count = []

    def render():
        count.append(1)
        if len(count) >= 3:
            done.set()
        else:
            scheduler.post_invalidate_delayed(10)

    scheduler = FrameScheduler(render)
    scheduler.start()
    assert done.wait(2)
    scheduler.stop()
    assert len(count) == 3


def test_failed_frame_is_followed_by_next(caplog):
    done = threading.Event()
    calls = []

    def render():
        calls.append(1)
        if len(calls) == 1:
            raise RuntimeError("boom")
        done.set()

    scheduler = FrameScheduler(render, retry_delay_ms=10)
    scheduler.start()
    assert done.wait(2)
    scheduler.stop()
    assert "Frame render failed: boom" in caplog.text
    assert scheduler.frames_failed == 1
    assert scheduler.frames_rendered == 1


def test_stop_without_start_is_noop():
    FrameScheduler(lambda: None).stop()
