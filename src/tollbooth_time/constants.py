"""Constants for time-based access caveats."""

from enum import Enum


EXPIRATION_BUFFER_MS = 200  # free time added to every expiration
MIN_AMOUNT = 1  # smallest payment (in payment units) that may create an invoice
MILLIS_PER_SECOND = 1000


class Condition(str, Enum):
    """Caveat conditions this package knows how to construct."""

    EXPIRATION = "expiration"
