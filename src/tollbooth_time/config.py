"""Deployment-wide pricing for time-based access.

Holds the default rate and the minimum payment. Both are checked when the
object is built, so a bad rate stops the paywall at startup instead of
surfacing on the first paid request.
"""

from __future__ import annotations

from dataclasses import dataclass

from tollbooth_time.caveat import MalformedAmountError
from tollbooth_time.constants import MIN_AMOUNT
from tollbooth_time.expiration import validate_rate


@dataclass(frozen=True)
class TimeCaveatConfig:
    rate: float | None = None  # units per second; None means 1 unit = 1 second
    min_amount: int = MIN_AMOUNT

    def __post_init__(self) -> None:
        if self.rate is not None:
            validate_rate(self.rate)
        if isinstance(self.min_amount, bool) or not isinstance(self.min_amount, int):
            raise MalformedAmountError(f"min_amount must be an int, got {self.min_amount!r}")
        if self.min_amount < MIN_AMOUNT:
            raise MalformedAmountError(
                f"min_amount must be at least {MIN_AMOUNT}, got {self.min_amount}"
            )
