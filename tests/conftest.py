import itertools

import pytest

from wearface.core.clock_service import ClockService
from wearface.core.logging_service import LoggingService


class FakeHost:
    """Records delayed callbacks instead of running an event loop"""

    def __init__(self):
        self.pending = {}
        self.posted = []
        self.removed = []
        self.invalidations = 0
        self._ids = itertools.count(1)

    def post_delayed(self, delay_ms, callback):
        handle = next(self._ids)
        self.pending[handle] = (delay_ms, callback)
        self.posted.append(delay_ms)
        return handle

    def remove(self, handle):
        self.removed.append(handle)
        self.pending.pop(handle, None)

    def invalidate(self):
        self.invalidations += 1

    def fire_next(self):
        handle = min(self.pending)
        _, callback = self.pending.pop(handle)
        callback()


class FakeRenderer:
    def __init__(self):
        self.frames = []
        self.loaded_icons = []
        self.antialias = True
        self.is_round = None

    def apply_shape(self, is_round):
        self.is_round = is_round

    def set_antialias(self, enabled):
        self.antialias = enabled

    def load_icon(self, icon):
        self.loaded_icons.append(icon)

    def render(self, frame):
        self.frames.append(frame)
        return frame


class FakeTime:
    """Settable epoch seconds"""

    def __init__(self, value=1_700_000_000.250):
        self.value = value

    def __call__(self):
        return self.value


@pytest.fixture
def host():
    return FakeHost()


@pytest.fixture
def renderer():
    return FakeRenderer()


@pytest.fixture
def fake_time():
    return FakeTime()


@pytest.fixture
def clock(fake_time):
    return ClockService('UTC', time_source=fake_time)


@pytest.fixture
def logger():
    return LoggingService('wear-face-test', 'DEBUG')
