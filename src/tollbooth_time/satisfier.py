"""Satisfier strategy for ``expiration`` caveats.

The host's caveat engine walks a credential's caveats and asks the
satisfier registered for each condition whether it holds. This module
defines that contract and a default, clock-injected implementation.
"""

from __future__ import annotations

import logging
from typing import Protocol, runtime_checkable

from tollbooth_time.caveat import Caveat
from tollbooth_time.clock import SYSTEM_CLOCK, Clock
from tollbooth_time.constants import Condition

logger = logging.getLogger(__name__)


@runtime_checkable
class Satisfier(Protocol):
    """Checks caveats of one condition kind."""

    condition: Condition

    def satisfy_previous(self, prev: Caveat, curr: Caveat) -> bool: ...

    def satisfy_final(self, caveat: Caveat) -> bool: ...


def _expiry_ms(caveat: Caveat) -> int | None:
    try:
        return int(caveat.value)
    except ValueError:
        logger.warning("Expiration caveat has non-integer value %r.", caveat.value)
        return None


class ExpirationSatisfier:
    """Holds until the clock passes the caveat's expiration instant.

    The expiration millisecond itself still counts as valid; only a clock
    strictly later than the value fails ``satisfy_final``.

    Caveats appended later may only narrow access: an expiration that
    extends past an earlier one fails ``satisfy_previous``.
    """

    condition = Condition.EXPIRATION

    def __init__(self, clock: Clock = SYSTEM_CLOCK) -> None:
        self._clock = clock

    def satisfy_previous(self, prev: Caveat, curr: Caveat) -> bool:
        if prev.condition is not Condition.EXPIRATION or curr.condition is not Condition.EXPIRATION:
            return False
        prev_ms = _expiry_ms(prev)
        curr_ms = _expiry_ms(curr)
        if prev_ms is None or curr_ms is None:
            return False
        return curr_ms <= prev_ms

    def satisfy_final(self, caveat: Caveat) -> bool:
        if caveat.condition is not Condition.EXPIRATION:
            return False
        expires_at = _expiry_ms(caveat)
        if expires_at is None:
            return False
        return self._clock.now_ms() <= expires_at
