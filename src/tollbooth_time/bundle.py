"""Paywall configuration bundle for time-based access.

A host authorization middleware calls ``get_invoice_description`` when it
creates an invoice, rejects payments below ``min_amount``, calls
``get_caveats`` once the invoice is paid, and registers
``caveat_satisfiers`` with its caveat engine for later verification.
"""

from __future__ import annotations

import functools
from dataclasses import dataclass
from typing import Callable

from tollbooth_time.clock import SYSTEM_CLOCK, Clock
from tollbooth_time.config import TimeCaveatConfig
from tollbooth_time.description import describe_purchase
from tollbooth_time.expiration import time_caveat
from tollbooth_time.invoice import Invoice
from tollbooth_time.request import RequestContext
from tollbooth_time.satisfier import ExpirationSatisfier, Satisfier

CaveatGetter = Callable[[RequestContext, Invoice], str]
DescriptionGetter = Callable[[RequestContext], str]


@dataclass(frozen=True)
class CaveatConfig:
    """Everything a host middleware needs to gate access by time paid for."""

    get_caveats: CaveatGetter
    caveat_satisfiers: Satisfier
    get_invoice_description: DescriptionGetter
    min_amount: int


def get_time_caveat(
    context: RequestContext,
    invoice: Invoice,
    *,
    config: TimeCaveatConfig | None = None,
    clock: Clock = SYSTEM_CLOCK,
) -> str:
    """Return the encoded expiration caveat for a paid invoice.

    A rate on the request overrides the configured one.
    """
    rate = context.rate
    if rate is None and config is not None:
        rate = config.rate
    return time_caveat(invoice.amount, rate, clock=clock).encode()


def get_timed_invoice_description(context: RequestContext) -> str:
    """Invoice line item naming the resource and the seconds being bought."""
    return describe_purchase(context)


def build_time_caveat_config(
    config: TimeCaveatConfig | None = None,
    *,
    clock: Clock = SYSTEM_CLOCK,
    satisfier: Satisfier | None = None,
) -> CaveatConfig:
    """Bind ``config`` and ``clock`` into a ready-to-use bundle."""
    config = config or TimeCaveatConfig()
    return CaveatConfig(
        get_caveats=functools.partial(get_time_caveat, config=config, clock=clock),
        caveat_satisfiers=satisfier if satisfier is not None else ExpirationSatisfier(clock),
        get_invoice_description=get_timed_invoice_description,
        min_amount=config.min_amount,
    )


TIME_CAVEAT_CONFIGS = build_time_caveat_config()
