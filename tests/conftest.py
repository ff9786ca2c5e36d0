"""Shared fakes for termtimer tests."""

from datetime import timedelta

import pytest


class FakeTime:
    """Monotonic clock that only moves when something sleeps."""

    def __init__(self, start=100.0):
        self.now = start
        self.sleeps = []

    def clock(self):
        return self.now

    def sleep(self, seconds):
        self.sleeps.append(seconds)
        self.now += seconds


class FakeScreen:
    """Records show/bell calls in order, stamped with the fake time."""

    def __init__(self, time_source):
        self._time = time_source
        self.events = []

    def show(self, remaining: timedelta):
        self.events.append(("show", remaining, self._time.now))

    def bell(self):
        self.events.append(("bell", None, self._time.now))

    @property
    def shown(self):
        return [value for kind, value, _ in self.events if kind == "show"]

    @property
    def bells(self):
        return [e for e in self.events if e[0] == "bell"]


@pytest.fixture
def fake_time():
    return FakeTime()


@pytest.fixture
def fake_screen(fake_time):
    return FakeScreen(fake_time)
