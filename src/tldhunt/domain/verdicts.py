"""Verdict types produced by classifying a lookup response.

Only ``available``, ``taken`` and ``error`` are terminal. ``rate_limited``
and ``empty`` are transient and always lead to another attempt or to an
``error`` once attempts run out.
"""

from __future__ import annotations

from enum import StrEnum

from pydantic import BaseModel


class VerdictKind(StrEnum):
    """Classification outcome of a single lookup response."""

    AVAILABLE = "available"
    TAKEN = "taken"
    RATE_LIMITED = "rate_limited"
    EMPTY = "empty"
    ERROR = "error"


class ErrorReason(StrEnum):
    """Tags recorded in the output log for terminal errors."""

    RETRIES_EXCEEDED = "retries-exceeded"
    FETCH_FAILURE = "fetch-failure"


TERMINAL_KINDS = frozenset({VerdictKind.AVAILABLE, VerdictKind.TAKEN, VerdictKind.ERROR})


class Verdict(BaseModel):
    """Tagged verdict. ``expiry`` is set only for taken, ``reason`` only for error."""

    model_config = {"frozen": True}

    kind: VerdictKind
    expiry: str | None = None
    reason: str | None = None

    @classmethod
    def available(cls) -> Verdict:
        return cls(kind=VerdictKind.AVAILABLE)

    @classmethod
    def taken(cls, expiry: str | None = None) -> Verdict:
        return cls(kind=VerdictKind.TAKEN, expiry=expiry or None)

    @classmethod
    def rate_limited(cls) -> Verdict:
        return cls(kind=VerdictKind.RATE_LIMITED)

    @classmethod
    def empty(cls) -> Verdict:
        return cls(kind=VerdictKind.EMPTY)

    @classmethod
    def error(cls, reason: str) -> Verdict:
        return cls(kind=VerdictKind.ERROR, reason=reason)

    @property
    def is_terminal(self) -> bool:
        return self.kind in TERMINAL_KINDS
