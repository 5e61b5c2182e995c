"""Phrase sets used to classify free-text lookup responses.

Registries phrase the same answer in many ways, so every set here is an
alternation of known phrasings. Entries are regular-expression fragments
matched case-insensitively anywhere in the response. The lists are plain
data: ``[patterns]`` in ``tldhunt.toml`` replaces them wholesale.

Matching is heuristic. A registry that words a throttling notice or a
"free" answer differently will be misreported as taken.
"""

from __future__ import annotations

import re
from collections.abc import Iterable
from dataclasses import dataclass

RATE_LIMIT_PHRASES: tuple[str, ...] = (
    "limit exceeded",
    "exceeded port 43",
    "quota exceeded",
    "try again later",
    "too many requests",
    "please wait",
    "please try again",
    "temporarily unavailable",
)

AVAILABLE_PHRASES: tuple[str, ...] = (
    "no match",
    "not found",
    "no data found",
    "no entries found",
    "domain not found",
    r"status:\s*free",
    "not registered",
    "available",
)

EXPIRY_LABELS: tuple[str, ...] = (
    "Expiry Date",
    "Expiration Date",
    "Registry Expiry Date",
    "Expiration Time",
    "paid-till",
    "renewal date",
    "expire date",
    "expires on",
    "valid until",
)

# YYYY, separator, MM, separator, DD. Returned verbatim.
DATE_PATTERN = re.compile(r"[0-9]{4}[-/.][0-9]{2}[-/.][0-9]{2}")


def compile_phrases(phrases: Iterable[str]) -> re.Pattern[str] | None:
    """Join *phrases* into one case-insensitive alternation.

    Returns None for an empty set so callers can treat it as "never matches".

    Examples:
        >>> compile_phrases(["no match", "not found"]).search("NO MATCH for x") is not None
        True
        >>> compile_phrases([]) is None
        True
    """
    parts = [p for p in phrases if p]
    if not parts:
        return None
    return re.compile("|".join(f"(?:{p})" for p in parts), re.IGNORECASE)


@dataclass(frozen=True)
class PhraseSet:
    """Compiled rate-limit, availability and expiry-label matchers."""

    rate_limit: re.Pattern[str] | None
    available: re.Pattern[str] | None
    expiry_labels: re.Pattern[str] | None

    @classmethod
    def from_lists(
        cls,
        *,
        rate_limit: Iterable[str] = RATE_LIMIT_PHRASES,
        available: Iterable[str] = AVAILABLE_PHRASES,
        expiry_labels: Iterable[str] = EXPIRY_LABELS,
    ) -> PhraseSet:
        return cls(
            rate_limit=compile_phrases(rate_limit),
            available=compile_phrases(available),
            expiry_labels=compile_phrases(expiry_labels),
        )


DEFAULT_PHRASES = PhraseSet.from_lists()
