import pytest

from clockface.clock_time import TimeSample


class RecordingCanvas:
    """Stands in for PillowCanvas and keeps every primitive it is asked to draw."""

    def __init__(self, width, height):
        self.width = width
        self.height = height
        self.calls = []

    def draw_circle(self, cx, cy, radius, paint):
        self.calls.append(("circle", (cx, cy, radius), paint.snapshot()))

    def draw_line(self, x0, y0, x1, y1, paint):
        self.calls.append(("line", (x0, y0, x1, y1), paint.snapshot()))


class RecordingHost:
    def __init__(self):
        self.requests = []

    def post_invalidate_delayed(self, delay_ms):
        self.requests.append(("delayed", delay_ms))

    def invalidate(self):
        self.requests.append(("now", None))


def fixed_time(hour, minute, second):
    sample = TimeSample(hour, minute, second)
    return lambda: sample


@pytest.fixture
def canvas():
    return RecordingCanvas(400, 400)


@pytest.fixture
def host():
    return RecordingHost()


@pytest.fixture
def midnight():
    return fixed_time(0, 0, 0)
