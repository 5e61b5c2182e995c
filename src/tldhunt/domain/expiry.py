"""Best-effort expiry date extraction from a taken-domain response."""

from __future__ import annotations

from tldhunt.domain.patterns import DATE_PATTERN, DEFAULT_PHRASES, PhraseSet


class ExpiryExtractor:
    """Find the first date on any line carrying an expiry label.

    A taken verdict without an extractable expiry is still a valid
    taken verdict, so every failure path here returns None.
    """

    def __init__(self, phrases: PhraseSet = DEFAULT_PHRASES) -> None:
        self._labels = phrases.expiry_labels

    def extract(self, raw: str) -> str | None:
        if self._labels is None:
            return None
        for line in raw.splitlines():
            if not self._labels.search(line):
                continue
            match = DATE_PATTERN.search(line)
            if match:
                return match.group(0)
        return None


def extract_expiry(raw: str) -> str | None:
    """Extract an expiry date using the default label set."""
    return ExpiryExtractor().extract(raw)
