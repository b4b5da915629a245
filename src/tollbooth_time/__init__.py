"""Tollbooth Time: pay-per-second access caveats.

Converts a Lightning payment into an ``expiration`` caveat and describes
the purchase for the invoice.
"""

__version__ = "0.1.0"

from tollbooth_time.caveat import (
    Caveat,
    CaveatError,
    InvalidRateError,
    MalformedAmountError,
    MalformedCaveatError,
    expiration_caveat,
)
from tollbooth_time.clock import Clock, FixedClock, SystemClock, SYSTEM_CLOCK
from tollbooth_time.config import TimeCaveatConfig
from tollbooth_time.constants import Condition, EXPIRATION_BUFFER_MS, MIN_AMOUNT
from tollbooth_time.invoice import Invoice, parse_amount
from tollbooth_time.request import RequestContext
from tollbooth_time.expiration import compute_expiration, time_caveat
from tollbooth_time.description import describe_purchase
from tollbooth_time.satisfier import ExpirationSatisfier, Satisfier
from tollbooth_time.bundle import (
    CaveatConfig,
    TIME_CAVEAT_CONFIGS,
    build_time_caveat_config,
    get_time_caveat,
    get_timed_invoice_description,
)

__all__ = [
    "Caveat",
    "CaveatError",
    "InvalidRateError",
    "MalformedAmountError",
    "MalformedCaveatError",
    "expiration_caveat",
    "Clock",
    "FixedClock",
    "SystemClock",
    "SYSTEM_CLOCK",
    "TimeCaveatConfig",
    "Condition",
    "EXPIRATION_BUFFER_MS",
    "MIN_AMOUNT",
    "Invoice",
    "parse_amount",
    "RequestContext",
    "compute_expiration",
    "time_caveat",
    "describe_purchase",
    "ExpirationSatisfier",
    "Satisfier",
    "CaveatConfig",
    "TIME_CAVEAT_CONFIGS",
    "build_time_caveat_config",
    "get_time_caveat",
    "get_timed_invoice_description",
]
