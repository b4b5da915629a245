"""Per-request metadata consumed by caveat and description getters."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from tollbooth_time.invoice import parse_amount


@dataclass(frozen=True)
class RequestContext:
    """Snapshot of the incoming request that triggered a payment.

    ``rate`` is payment units per second; ``time`` is seconds of access
    the client asked for. Both are optional.
    """

    method: str = "GET"
    original_url: str = "/"
    ip: str = ""
    rate: float | None = None
    time: int | None = None
    title: str | None = None
    app_name: str | None = None
    amount: int | None = None

    @classmethod
    def from_dict(
        cls,
        body: dict[str, Any],
        *,
        method: str = "GET",
        original_url: str = "/",
        ip: str = "",
        rate: float | None = None,
    ) -> RequestContext:
        """Build a context from a decoded JSON request body plus request line info."""
        raw_amount = body.get("amount")
        raw_time = body.get("time")
        return cls(
            method=method,
            original_url=original_url,
            ip=ip,
            rate=rate,
            time=parse_amount(raw_time) if raw_time is not None else None,
            title=body.get("title") or None,
            app_name=body.get("appName", body.get("app_name")) or None,
            amount=parse_amount(raw_amount) if raw_amount is not None else None,
        )
