"""Amount → expiration conversion for time-based access."""

from __future__ import annotations

import logging
import math
from typing import Any

from tollbooth_time.caveat import Caveat, InvalidRateError, MalformedAmountError, expiration_caveat
from tollbooth_time.clock import SYSTEM_CLOCK, Clock
from tollbooth_time.constants import EXPIRATION_BUFFER_MS, MILLIS_PER_SECOND

logger = logging.getLogger(__name__)


def validate_rate(rate: Any) -> float:
    """Return ``rate`` as a float, or raise InvalidRateError.

    A rate is payment units per second and must be positive and finite.
    """
    if isinstance(rate, bool) or not isinstance(rate, (int, float)):
        raise InvalidRateError(f"Rate must be numeric, got {rate!r}")
    try:
        value = float(rate)
    except OverflowError as e:
        raise InvalidRateError(f"Rate {rate!r} is too large to represent") from e
    if not math.isfinite(value) or value <= 0:
        raise InvalidRateError(f"Rate must be a positive finite number, got {rate!r}")
    return value


def compute_expiration(
    amount_paid: int,
    rate: float | None = None,
    *,
    clock: Clock = SYSTEM_CLOCK,
) -> int:
    """Return the absolute expiration instant, in ms since epoch, for a payment.

    With a ``rate`` (units per second) the paid time is
    ``floor(amount_paid / rate * 1000)`` ms; without one each unit buys one
    second. ``EXPIRATION_BUFFER_MS`` is always added on top.

    ``amount_paid`` must already be an int (see ``parse_amount``).

    Raises:
        MalformedAmountError: amount is not a non-negative int, or buys more
            time than a timestamp can hold at the given rate.
        InvalidRateError: rate is zero, negative, or not finite.
    """
    if isinstance(amount_paid, bool) or not isinstance(amount_paid, int):
        raise MalformedAmountError(
            f"amount_paid must be an int, got {type(amount_paid).__name__}"
        )
    if amount_paid < 0:
        raise MalformedAmountError(f"amount_paid must be non-negative, got {amount_paid}")

    if rate is not None:
        valid_rate = validate_rate(rate)
        try:
            delta_ms = math.floor(amount_paid / valid_rate * MILLIS_PER_SECOND)
        except OverflowError as e:
            raise MalformedAmountError(
                f"amount_paid at rate {rate!r} buys more time than can be represented"
            ) from e
    else:
        delta_ms = amount_paid * MILLIS_PER_SECOND

    expiration = clock.now_ms() + delta_ms + EXPIRATION_BUFFER_MS
    logger.debug(
        "Granting %d ms for %d units (rate=%s); expires at %d.",
        delta_ms, amount_paid, rate, expiration,
    )
    return expiration


def time_caveat(
    amount_paid: int,
    rate: float | None = None,
    *,
    clock: Clock = SYSTEM_CLOCK,
) -> Caveat:
    """Build the ``expiration`` caveat for a payment."""
    return expiration_caveat(compute_expiration(amount_paid, rate, clock=clock))
