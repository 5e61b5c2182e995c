"""ResultRecord — one line of the append-only output log.

Line format: ``domain|status|detail`` where status is ``avail``, ``taken``
or ``error``. Detail holds the expiry for taken, the error tag for error,
and is empty for avail.
"""

from __future__ import annotations

from enum import StrEnum

from pydantic import BaseModel

from tldhunt.domain.verdicts import Verdict, VerdictKind

SEPARATOR = "|"

# Characters that would corrupt the domain column or the whois argument.
FORBIDDEN_DOMAIN_CHARS = frozenset(SEPARATOR + "/")


class RecordStatus(StrEnum):
    """Status column values of the output log."""

    AVAIL = "avail"
    TAKEN = "taken"
    ERROR = "error"


def domain_part_problem(value: str) -> str | None:
    """Return why *value* cannot be part of a logged domain, or None if it can.

    Examples:
        >>> domain_part_problem(".com") is None
        True
        >>> domain_part_problem(".com|x")
        "contains a forbidden character: '.com|x'"
    """
    if any(ch.isspace() for ch in value):
        return f"must not contain whitespace: {value!r}"
    if FORBIDDEN_DOMAIN_CHARS & set(value):
        return f"contains a forbidden character: {value!r}"
    return None


_STATUS_FOR_KIND: dict[VerdictKind, RecordStatus] = {
    VerdictKind.AVAILABLE: RecordStatus.AVAIL,
    VerdictKind.TAKEN: RecordStatus.TAKEN,
    VerdictKind.ERROR: RecordStatus.ERROR,
}


class ResultRecord(BaseModel):
    """Immutable ``(domain, status, detail)`` triple."""

    model_config = {"frozen": True}

    domain: str
    status: RecordStatus
    detail: str = ""

    @classmethod
    def from_verdict(cls, domain: str, verdict: Verdict) -> ResultRecord:
        """Build a record from a terminal verdict.

        Raises:
            ValueError: If *verdict* is transient (rate_limited or empty).
        """
        status = _STATUS_FOR_KIND.get(verdict.kind)
        if status is None:
            msg = f"Cannot record non-terminal verdict {verdict.kind!r} for {domain}"
            raise ValueError(msg)
        if status is RecordStatus.TAKEN:
            detail = verdict.expiry or ""
        elif status is RecordStatus.ERROR:
            detail = verdict.reason or ""
        else:
            detail = ""
        return cls(domain=domain, status=status, detail=detail)

    def to_line(self) -> str:
        return SEPARATOR.join((self.domain, self.status.value, self.detail))

    @classmethod
    def from_line(cls, line: str) -> ResultRecord:
        """Parse a log line. Raises ValueError on malformed input."""
        parts = line.rstrip("\r\n").split(SEPARATOR, 2)
        if len(parts) != 3:
            msg = f"Malformed result line: {line!r}"
            raise ValueError(msg)
        domain, status, detail = parts
        return cls(domain=domain, status=RecordStatus(status), detail=detail)
