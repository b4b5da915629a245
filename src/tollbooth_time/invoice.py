"""Invoice snapshot and ingress parsing of payment amounts.

Amounts may arrive as numbers or numeric strings depending on how the
invoice subsystem serialized them. They are normalised to ``int`` here,
once, so the expiration formula only ever sees integers.
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Any

from tollbooth_time.caveat import MalformedAmountError

# ASCII digits only, optional minus; no "+", underscores or other scripts
_DECIMAL_INT = re.compile(r"-?[0-9]+", re.ASCII)


def parse_amount(value: Any) -> int:
    """Normalise an amount in payment units to a non-negative ``int``.

    Accepts an int, an integral float, or a base-10 integer string.
    Raises MalformedAmountError for anything else.
    """
    if isinstance(value, bool):
        raise MalformedAmountError(f"Amount must be an integer, got {value!r}")

    if isinstance(value, int):
        amount = value
    elif isinstance(value, float):
        if not value.is_integer():
            raise MalformedAmountError(f"Amount must be a whole number, got {value!r}")
        amount = int(value)
    elif isinstance(value, str):
        text = value.strip()
        if not _DECIMAL_INT.fullmatch(text):
            raise MalformedAmountError(f"Amount {value!r} is not a base-10 integer")
        try:
            amount = int(text, 10)
        except ValueError as e:
            raise MalformedAmountError(f"Amount {value!r} has too many digits") from e
    else:
        raise MalformedAmountError(f"Amount must be numeric, got {type(value).__name__}")

    if amount < 0:
        raise MalformedAmountError(f"Amount must be non-negative, got {amount}")
    return amount


@dataclass(frozen=True)
class Invoice:
    """Read-only view of a paid invoice from the invoice subsystem."""

    amount: int  # payment units, e.g. satoshis
    payment_request: str | None = None
    invoice_id: str | None = None

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> Invoice:
        if "amount" not in data:
            raise MalformedAmountError("Invoice has no amount")
        return cls(
            amount=parse_amount(data["amount"]),
            payment_request=data.get("payment_request", data.get("paymentRequest")),
            invoice_id=data.get("id"),
        )
