"""RetryScheduler — bounded attempts with deterministic exponential backoff.

Wraps one probe of one domain. Transient verdicts (``empty``,
``rate_limited``) are absorbed here; only terminal verdicts leave.

Backoff before attempt ``n + 1`` is ``2 ** n`` units with no jitter and
no cap. With the default three attempts that is 2 then 4 units. Serial
probing already bounds the request rate, so jitter buys nothing here.
"""

from __future__ import annotations

import time
from collections.abc import Callable
from dataclasses import dataclass

import structlog

from tldhunt.domain.classifier import TextClassifier
from tldhunt.domain.verdicts import ErrorReason, Verdict, VerdictKind

log = structlog.get_logger(__name__)

DEFAULT_MAX_ATTEMPTS = 3

Probe = Callable[[], str]


@dataclass(frozen=True)
class BackoffNotice:
    """Emitted before each backoff sleep so callers can report progress."""

    domain: str
    attempt: int
    delay: float
    verdict: Verdict


@dataclass(frozen=True)
class Resolution:
    """Terminal verdict of one domain and the number of attempts it took."""

    domain: str
    verdict: Verdict
    attempts: int


def backoff_delay(attempt: int, unit: float = 1.0) -> float:
    """Delay after a failed *attempt* (1-based).

    Examples:
        >>> backoff_delay(1), backoff_delay(2), backoff_delay(3)
        (2.0, 4.0, 8.0)
        >>> backoff_delay(2, unit=0.5)
        2.0
    """
    return float(2**attempt) * unit


class RetryScheduler:
    """Drive probe -> classify until a terminal verdict or attempts run out.

    Args:
        classifier: Classifier applied to every probe response.
        sleep: Blocking wait, injectable for tests.
        backoff_unit: Seconds per backoff unit.
        on_backoff: Called with a :class:`BackoffNotice` before every sleep.
    """

    def __init__(
        self,
        classifier: TextClassifier | None = None,
        *,
        sleep: Callable[[float], None] = time.sleep,
        backoff_unit: float = 1.0,
        on_backoff: Callable[[BackoffNotice], None] | None = None,
    ) -> None:
        self._classifier = classifier or TextClassifier()
        self._sleep = sleep
        self._backoff_unit = backoff_unit
        self._on_backoff = on_backoff

    def resolve(
        self,
        domain: str,
        probe: Probe,
        max_attempts: int = DEFAULT_MAX_ATTEMPTS,
    ) -> Resolution:
        """Resolve *domain* to a terminal verdict.

        A probe raising ``OSError`` counts as an empty response. If the last
        attempt failed that way the error reason is ``fetch-failure``
        rather than ``retries-exceeded``.
        """
        if max_attempts < 1:
            msg = f"max_attempts must be >= 1, got {max_attempts}"
            raise ValueError(msg)

        attempt = 1
        while True:
            fetch_failed = False
            try:
                raw = probe()
            except OSError as exc:
                log.debug("probe.fetch_failed", domain=domain, attempt=attempt, error=str(exc))
                fetch_failed = True
                verdict = Verdict.empty()
            else:
                verdict = self._classifier.classify(raw)

            if verdict.is_terminal:
                return Resolution(domain=domain, verdict=verdict, attempts=attempt)

            if attempt == max_attempts:
                reason = ErrorReason.FETCH_FAILURE if fetch_failed else ErrorReason.RETRIES_EXCEEDED
                log.info("probe.exhausted", domain=domain, attempts=attempt, reason=str(reason))
                return Resolution(
                    domain=domain,
                    verdict=Verdict.error(reason.value),
                    attempts=attempt,
                )

            delay = backoff_delay(attempt, self._backoff_unit)
            log.debug(
                "probe.backoff",
                domain=domain,
                attempt=attempt,
                delay=delay,
                rate_limited=verdict.kind is VerdictKind.RATE_LIMITED,
            )
            if self._on_backoff is not None:
                self._on_backoff(
                    BackoffNotice(domain=domain, attempt=attempt, delay=delay, verdict=verdict)
                )
            self._sleep(delay)
            attempt += 1
