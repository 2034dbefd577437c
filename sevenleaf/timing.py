"""Monotonic nanosecond clock and sleeping helpers."""

from __future__ import annotations

import time

_NS_PER_SECOND = 1_000_000_000
_NS_PER_MS = 1_000_000


def _check_non_negative(name: str, value: int) -> None:
    if value < 0:
        raise ValueError(f"{name} must not be negative, got {value}")


def gettime_ns() -> int:
    """Return the current value of the monotonic clock in nanoseconds."""
    return time.monotonic_ns()


def sleep_seconds(seconds: int) -> None:
    """Sleep for a whole number of seconds."""
    _check_non_negative("seconds", seconds)
    time.sleep(seconds)


def sleep_ms(milliseconds: int) -> None:
    """Sleep for the given number of milliseconds."""
    _check_non_negative("milliseconds", milliseconds)
    time.sleep(milliseconds / 1000)


def _sleep_until(target: int) -> None:
    current = gettime_ns()
    remaining = target - current
    if remaining >= _NS_PER_MS:
        time.sleep((remaining // _NS_PER_MS) / 1000)
    while gettime_ns() < target:
        time.sleep(0)


def sleep_ns(nanoseconds: int) -> None:
    """Sleep for at least the given number of nanoseconds, resuming if woken early."""
    _check_non_negative("nanoseconds", nanoseconds)
    if nanoseconds:
        _sleep_until(gettime_ns() + nanoseconds)


def wait_until_ns(target: int) -> bool:
    """Wait until the clock reaches ``target``.

    Returns True if the target had already passed when called (no waiting
    took place), and False after waiting for it.
    """
    if gettime_ns() >= target:
        return True
    _sleep_until(target)
    return False