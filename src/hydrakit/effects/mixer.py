"""
Time-driven parameter functions: fades and pulses.

Each helper returns a zero-argument function. The engine calls it once per
frame, so the value follows the clock without the composition being rebuilt.
"""

import logging
from dataclasses import dataclass
from typing import Callable, Optional

logger = logging.getLogger(__name__)


@dataclass
class Clock:
    """Engine time in seconds and tempo in beats per minute."""
    time: float = 0.0
    bpm: float = 30.0

    def tick(self, dt: float) -> float:
        self.time += dt
        return self.time


default_clock = Clock()


def _check_positive(name: str, value: float):
    if value <= 0:
        raise ValueError(f"{name} must be positive, got {value}")


def fade_in(duration: float, maximum: float = 1.0, clock: Optional[Clock] = None) -> Callable[[], float]:
    """
    Ramp from 0 to ``maximum`` over ``duration`` seconds, starting now.

    Args:
        duration: Fade length in seconds.
        maximum: Value held once the fade completes.
        clock: Time source; the module clock by default.
    """
    _check_positive("duration", duration)
    clk = clock or default_clock
    start = clk.time
    logger.debug("fade_in over %.2fs from t=%.2f", duration, start)

    def fader() -> float:
        return min((clk.time - start) / duration, 1.0) * maximum

    return fader


def fade_out(duration: float, minimum: float = 0.0, clock: Optional[Clock] = None) -> Callable[[], float]:
    """Ramp from 1 down to ``minimum`` over ``duration`` seconds, starting now."""
    _check_positive("duration", duration)
    clk = clock or default_clock
    end = clk.time + duration
    logger.debug("fade_out over %.2fs until t=%.2f", duration, end)

    def fader() -> float:
        return max((end - clk.time) / duration, 0.0) * (1 - minimum) + minimum

    return fader


def pulse(period_ms: float = 1000.0, duration_ms: float = 100.0, clock: Optional[Clock] = None) -> Callable[[], int]:
    """1 for the first ``duration_ms`` of every ``period_ms``, 0 otherwise."""
    _check_positive("period_ms", period_ms)
    clk = clock or default_clock

    def pulser() -> int:
        return int(clk.time * 1000 % period_ms < duration_ms)

    return pulser


def pulse_bpm(speed: float = 1.0, duration_ms: float = 100.0, clock: Optional[Clock] = None) -> Callable[[], int]:
    """
    Like ``pulse`` but locked to the clock's tempo.

    The period is one beat divided by ``speed`` and is recomputed each call,
    so tempo changes take effect immediately.
    """
    _check_positive("speed", speed)
    clk = clock or default_clock

    def pulser() -> int:
        period_ms = 60 * 1000 / (clk.bpm * speed)
        return int(clk.time * 1000 % period_ms < duration_ms)

    return pulser
