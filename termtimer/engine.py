"""Countdown engine - tick pacing, display updates, and the expiry alert."""

from __future__ import annotations

import logging
import time
from datetime import timedelta
from typing import TYPE_CHECKING, Callable

from termtimer.config import DEFAULT_CONFIG, TimerConfig
from termtimer.durations import format_duration

if TYPE_CHECKING:
    from termtimer.terminal import TerminalScreen

logger = logging.getLogger(__name__)


class Ticker:
    """Fixed-rate tick source.

    Boundaries sit on a grid anchored at construction time: the n-th tick
    falls at ``start + n * interval`` no matter how long the caller spends
    between waits. A caller that falls more than one interval behind gets
    one immediate tick and the missed boundaries are dropped.
    """

    def __init__(
        self,
        interval: float,
        clock: Callable[[], float] = time.monotonic,
        sleep: Callable[[float], None] = time.sleep,
    ) -> None:
        if interval <= 0:
            raise ValueError("interval must be positive")
        self._interval = interval
        self._clock = clock
        self._sleep = sleep
        self._start = clock()
        self._ticks = 0

    @property
    def ticks(self) -> int:
        return self._ticks

    def wait(self) -> int:
        """Block until the next boundary and return its tick number."""
        target = self._ticks + 1
        now = self._clock()
        deadline = self._start + target * self._interval
        if now < deadline:
            self._sleep(deadline - now)
        else:
            passed = int((now - self._start) // self._interval)
            if passed > target:
                logger.debug("ticker fell behind, dropped %d tick(s)", passed - target)
                target = passed
        self._ticks = target
        return target


class CountdownEngine:
    """Counts a duration down to zero, one display per step, then alerts.

    ``screen`` needs ``show(remaining)`` and ``bell()``. ``clock`` and
    ``sleep`` are the time source and are replaced by fakes in tests.
    """

    def __init__(
        self,
        screen: TerminalScreen,
        config: TimerConfig = DEFAULT_CONFIG,
        clock: Callable[[], float] = time.monotonic,
        sleep: Callable[[float], None] = time.sleep,
    ) -> None:
        self._screen = screen
        self._config = config
        self._clock = clock
        self._sleep = sleep

    def run(self, total: timedelta) -> None:
        """Count down from ``total``, then fire the alert burst.

        Totals shorter than one step skip the tick loop entirely. An exact
        multiple of the step ends with a zero-length final wait.
        """
        if total < timedelta(0):
            raise ValueError(f"total must not be negative, got {format_duration(total)}")

        step = self._config.step
        remaining = total
        logger.debug("countdown started: %s", format_duration(total))

        if remaining >= step:
            ticker = Ticker(step.total_seconds(), self._clock, self._sleep)
            while remaining >= step:
                self.display(remaining)
                ticker.wait()
                remaining -= step

        self.display(remaining)
        self._sleep(remaining.total_seconds())
        logger.debug("countdown expired after %s", format_duration(total))
        self.alert()

    def display(self, remaining: timedelta) -> None:
        """Hand ``remaining`` to the screen, which redraws it in place."""
        self._screen.show(remaining)

    def alert(self) -> None:
        """Emit the alert burst: one bell and one pause per repetition."""
        pause = self._config.alert_spacing.total_seconds()
        for _ in range(self._config.alert_count):
            self._screen.bell()
            self._sleep(pause)
