"""Millisecond clock and a precise sleep built on it."""

import time

_POLL_SECONDS = 0.00015


def now_ms():
    """Return the wall-clock time in whole milliseconds."""
    return time.time_ns() // 1_000_000


def sleep_ms(duration):
    """Block for at least ``duration`` milliseconds, polling in short steps."""
    start = now_ms()
    while now_ms() - start < duration:
        time.sleep(_POLL_SECONDS)