"""Tick-derived random numbers, optionally split into evens and odds."""

from __future__ import annotations

import queue
import random
import threading
import time
from datetime import timedelta

BUFFER_LIMIT = 100_000
_CLOSED = object()


def _seconds(value) -> float:
    return value.total_seconds() if isinstance(value, timedelta) else float(value)


def random_n_seconds(precision, lifetime):
    """Yield one number every ``precision`` until ``lifetime`` has elapsed.

    Each is the tick's Unix time in milliseconds times a random 63-bit
    integer, wrapped to signed 64 bits. Durations are seconds or timedeltas.
    """
    period = _seconds(precision)
    if period <= 0:
        raise ValueError("precision must be positive")
    start = time.monotonic()
    return _ticks(period, start + period, start + _seconds(lifetime))


def _ticks(period, next_tick, deadline):
    while next_tick < deadline:
        time.sleep(max(0.0, next_tick - time.monotonic()))
        n = (time.time_ns() // 1_000_000 * random.getrandbits(63)) % (1 << 64)
        yield n - (1 << 64) if n >= 1 << 63 else n
        # Ticks missed by a slow reader are dropped.
        next_tick = max(next_tick + period, time.monotonic())


def even_odds(precision, lifetime):
    """Split random_n_seconds into even and odd streams, ending on zero or at the end."""
    numbers = random_n_seconds(precision, lifetime)
    evens: queue.Queue = queue.Queue(BUFFER_LIMIT)
    odds: queue.Queue = queue.Queue(BUFFER_LIMIT)

    def split():
        try:
            for number in numbers:
                (odds if number % 2 else evens).put(number)
                if number == 0:
                    break
        finally:
            evens.put(_CLOSED)
            odds.put(_CLOSED)

    threading.Thread(target=split, daemon=True).start()
    return _drain(evens), _drain(odds)


def _drain(source):
    while (item := source.get()) is not _CLOSED:
        yield item