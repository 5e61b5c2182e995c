"""Response classification — raw lookup text to Verdict.

Order of checks:
  1. empty or whitespace-only  -> empty
  2. any rate-limit phrase     -> rate_limited
  3. any availability phrase   -> available
  4. anything else             -> taken (expiry best-effort)

Rate-limit detection runs before availability because some registries
embed throttling notices inside otherwise generic bodies, and a throttled
lookup must never be reported as an available domain.
"""

from __future__ import annotations

from tldhunt.domain.expiry import ExpiryExtractor
from tldhunt.domain.patterns import DEFAULT_PHRASES, PhraseSet
from tldhunt.domain.verdicts import Verdict


def normalize(raw: str) -> str:
    """Strip carriage returns from a raw response."""
    return raw.replace("\r", "")


class TextClassifier:
    """Pure classifier over a fixed :class:`PhraseSet`."""

    def __init__(self, phrases: PhraseSet = DEFAULT_PHRASES) -> None:
        self._phrases = phrases
        self._expiry = ExpiryExtractor(phrases)

    def classify(self, raw: str) -> Verdict:
        text = normalize(raw)
        if not text.strip():
            return Verdict.empty()

        rate_limit = self._phrases.rate_limit
        if rate_limit is not None and rate_limit.search(text):
            return Verdict.rate_limited()

        available = self._phrases.available
        if available is not None and available.search(text):
            return Verdict.available()

        return Verdict.taken(self._expiry.extract(text))


_DEFAULT_CLASSIFIER = TextClassifier()


def classify(raw: str) -> Verdict:
    """Classify *raw* with the default phrase sets."""
    return _DEFAULT_CLASSIFIER.classify(raw)
