"""Expiration caveat model and its compact ``condition=value`` encoding."""

from __future__ import annotations

from dataclasses import dataclass

from tollbooth_time.constants import Condition


# ---------------------------------------------------------------------------
# Exception hierarchy
# ---------------------------------------------------------------------------


class CaveatError(Exception):
    """Base exception for caveat issuance and decoding."""


class MalformedAmountError(CaveatError):
    """Amount is not a non-negative base-10 integer."""


class InvalidRateError(CaveatError):
    """Rate is zero, negative, or not a finite number."""


class MalformedCaveatError(CaveatError):
    """Encoded caveat cannot be decoded into a supported condition."""


# ---------------------------------------------------------------------------
# Caveat
# ---------------------------------------------------------------------------

_SEPARATOR = "="


@dataclass(frozen=True)
class Caveat:
    """A single first-party condition restricting a credential.

    ``condition`` is a ``Condition`` member, so only supported kinds can be
    built. ``value`` is kept as the string that goes on the wire.
    """

    condition: Condition
    value: str

    def encode(self) -> str:
        """Return the wire form, e.g. ``expiration=1718000000200``."""
        return f"{self.condition.value}{_SEPARATOR}{self.value}"

    @classmethod
    def decode(cls, raw: str) -> Caveat:
        """Parse ``condition=value``. Raises MalformedCaveatError on bad input."""
        name, sep, value = raw.strip().partition(_SEPARATOR)
        name = name.strip()
        value = value.strip()
        if not sep or not name:
            raise MalformedCaveatError(f"Caveat {raw!r} is not of the form condition=value")
        if not value:
            raise MalformedCaveatError(f"Caveat {raw!r} has an empty value")
        try:
            condition = Condition(name)
        except ValueError as e:
            raise MalformedCaveatError(f"Unsupported caveat condition {name!r}") from e
        return cls(condition=condition, value=value)


def expiration_caveat(expires_at_ms: int) -> Caveat:
    """Build an ``expiration`` caveat for an absolute millisecond timestamp."""
    return Caveat(condition=Condition.EXPIRATION, value=str(expires_at_ms))
