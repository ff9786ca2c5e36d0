"""Countdown timer configuration dataclass."""
from __future__ import annotations

from dataclasses import dataclass
from datetime import timedelta


@dataclass(frozen=True)
class TimerConfig:
    """Immutable constants for a countdown run.

    Attributes:
        step: Tick interval; the display is refreshed once per step.
        alert_count: Number of audible signals emitted at expiry.
        alert_spacing: Pause after each audible signal.
        default_duration: Countdown length when no duration is given.
    """

    step: timedelta = timedelta(seconds=1)
    alert_count: int = 5
    alert_spacing: timedelta = timedelta(milliseconds=300)
    default_duration: timedelta = timedelta(minutes=25)

    def __post_init__(self) -> None:
        if self.step <= timedelta(0):
            raise ValueError("step must be positive")
        if self.alert_count < 0:
            raise ValueError("alert_count must not be negative")
        if self.alert_spacing < timedelta(0):
            raise ValueError("alert_spacing must not be negative")
        if self.default_duration < timedelta(0):
            raise ValueError("default_duration must not be negative")


DEFAULT_CONFIG = TimerConfig()
