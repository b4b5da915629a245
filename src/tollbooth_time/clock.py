"""Injectable wall-clock capability.

Defines the Clock Protocol that the expiration calculator and satisfier
depend on. Hosts pass their own implementation; tests use FixedClock.
"""

from __future__ import annotations

import time
from typing import Protocol, runtime_checkable


@runtime_checkable
class Clock(Protocol):
    """Source of the current instant in milliseconds since the Unix epoch."""

    def now_ms(self) -> int: ...


class SystemClock:
    """Wall-clock time, truncated to whole milliseconds."""

    def now_ms(self) -> int:
        return int(time.time() * 1000)


class FixedClock:
    """Clock frozen at a chosen instant until explicitly advanced."""

    def __init__(self, now_ms: int) -> None:
        self._now_ms = now_ms

    def now_ms(self) -> int:
        return self._now_ms

    def advance(self, ms: int) -> None:
        """Move the clock forward by ``ms`` milliseconds."""
        self._now_ms += ms


# Module-level default, shared by the bundled getters and satisfier.
SYSTEM_CLOCK = SystemClock()
