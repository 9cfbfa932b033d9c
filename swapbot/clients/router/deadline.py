"""Swap deadline helpers."""

from __future__ import annotations

import time
from typing import Callable, Final

from swapbot.clients.router.errors import ClockError, InvalidInput

DEFAULT_HORIZON_SECONDS: Final[int] = 300

Clock = Callable[[], float]


def current_timestamp(clock: Clock = time.time) -> int:
    """Return whole seconds since the Unix epoch."""
    try:
        now = clock()
        seconds = int(now)
    except Exception as exc:
        raise ClockError(f"System clock unavailable: {exc}") from exc
    if now < 0:
        raise ClockError(f"System clock precedes the Unix epoch: {now}")
    return seconds


def compute_deadline(now: int, horizon_seconds: int = DEFAULT_HORIZON_SECONDS) -> int:
    if now < 0:
        raise ClockError(f"Timestamp precedes the Unix epoch: {now}")
    if horizon_seconds <= 0:
        raise InvalidInput(f"horizon_seconds must be positive, got {horizon_seconds}")
    return int(now) + int(horizon_seconds)
