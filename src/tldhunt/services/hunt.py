"""HuntService — per-domain orchestration over a list of TLDs.

Each domain goes Pending -> Probing -> (retry ...) -> one terminal verdict,
exactly once. Domains run strictly one after another with a fixed delay
between probed domains. A domain ending in error is recorded and reported,
never fatal to the run.
"""

from __future__ import annotations

import logging
import time
from collections.abc import Callable, Sequence
from pathlib import Path
from typing import TYPE_CHECKING, Any

from tldhunt.domain.classifier import TextClassifier
from tldhunt.domain.records import RecordStatus, ResultRecord, domain_part_problem
from tldhunt.infrastructure.result_log import ResultLog
from tldhunt.infrastructure.whois import WhoisClient
from tldhunt.services.base import BaseService
from tldhunt.services.result import ServiceResult
from tldhunt.services.retry import BackoffNotice, Resolution, RetryScheduler

if TYPE_CHECKING:
    from tldhunt.config.settings import TldhuntSettings

logger = logging.getLogger(__name__)


class HuntListener:
    """Progress callbacks for a hunt. Every hook is a no-op by default."""

    def on_skip(self, domain: str, index: int, total: int) -> None:
        pass

    def on_start(self, domain: str, index: int, total: int) -> None:
        pass

    def on_backoff(self, notice: BackoffNotice) -> None:
        pass

    def on_result(self, resolution: Resolution) -> None:
        pass


def build_domains(keyword: str, tlds: Sequence[str]) -> list[str]:
    """Combine *keyword* with every TLD, keeping order and dropping repeats.

    Examples:
        >>> build_domains("acme", [".com", ".io", ".com"])
        ['acme.com', 'acme.io']
    """
    seen: set[str] = set()
    domains: list[str] = []
    for tld in tlds:
        domain = f"{keyword}{tld}"
        if domain in seen:
            continue
        seen.add(domain)
        domains.append(domain)
    return domains


def _validate_keyword(keyword: str) -> str | None:
    if not keyword or not keyword.strip():
        return "Keyword is required."
    problem = domain_part_problem(keyword)
    return f"Keyword {problem}" if problem else None


class HuntService(BaseService):
    """Resolve ``keyword + tld`` for every TLD and append results to a log.

    Args:
        settings: Frozen CLI settings.
        client: Probe collaborator; defaults to a :class:`WhoisClient`
            built from ``[whois]``.
        listener: Progress receiver (presentation layer).
        sleep: Blocking wait used for backoff and the inter-domain delay.
    """

    def __init__(
        self,
        settings: TldhuntSettings,
        *,
        client: WhoisClient | None = None,
        listener: HuntListener | None = None,
        sleep: Callable[[float], None] = time.sleep,
    ) -> None:
        super().__init__(settings)
        self._client = client or WhoisClient(
            command=settings.whois.command, timeout=settings.whois.timeout
        )
        self._listener = listener or HuntListener()
        self._sleep = sleep
        self._classifier = TextClassifier(settings.patterns.to_phrase_set())

    def run(
        self,
        keyword: str,
        tlds: Sequence[str],
        *,
        output_path: Path,
        resume: bool = False,
        delay: float | None = None,
        max_attempts: int | None = None,
    ) -> ServiceResult:
        """Check every ``keyword + tld`` domain in order."""
        op = "hunt"
        cfg = self._settings.hunt
        delay = cfg.delay if delay is None else delay
        max_attempts = cfg.max_attempts if max_attempts is None else max_attempts

        problem = _validate_keyword(keyword)
        if problem:
            return ServiceResult.failure(op, "INVALID_ARGS", problem)
        if max_attempts < 1:
            return ServiceResult.failure(op, "INVALID_ARGS", "--max-attempts must be at least 1.")
        if delay < 0:
            return ServiceResult.failure(op, "INVALID_ARGS", "--delay must not be negative.")
        if not tlds:
            return ServiceResult.failure(op, "NO_TLDS", "No TLDs to check.")
        if not self._client.is_installed():
            return ServiceResult.failure(
                op,
                "WHOIS_NOT_FOUND",
                f"{self._client.command} not installed. Please install it first.",
            )

        result_log = ResultLog(output_path)
        result_log.touch()
        processed = result_log.processed_domains() if resume else set()

        scheduler = RetryScheduler(
            self._classifier,
            sleep=self._sleep,
            backoff_unit=cfg.backoff_unit,
            on_backoff=self._listener.on_backoff,
        )

        domains = build_domains(keyword, tlds)
        total = len(domains)
        counts = {status: 0 for status in RecordStatus}
        results: list[dict[str, Any]] = []
        warnings: list[str] = []
        skipped = 0
        pending_delay = False

        for index, domain in enumerate(domains, start=1):
            if domain in processed:
                skipped += 1
                self._listener.on_skip(domain, index, total)
                continue

            if pending_delay and delay > 0:
                self._sleep(delay)

            self._listener.on_start(domain, index, total)
            resolution = scheduler.resolve(domain, self._probe_for(domain), max_attempts)
            record = ResultRecord.from_verdict(domain, resolution.verdict)
            result_log.append(record.to_line())
            self._listener.on_result(resolution)
            pending_delay = True

            counts[record.status] += 1
            results.append(
                {
                    "domain": domain,
                    "status": record.status.value,
                    "detail": record.detail,
                    "attempts": resolution.attempts,
                }
            )
            if record.status is RecordStatus.ERROR:
                warnings.append(f"{domain}: {record.detail} after {resolution.attempts} attempts")

        logger.debug(
            "Hunt finished: %d checked, %d skipped, %d errors",
            len(results),
            skipped,
            counts[RecordStatus.ERROR],
        )
        return ServiceResult(
            ok=True,
            op=op,
            data={
                "keyword": keyword,
                "output": str(output_path),
                "total": total,
                "checked": len(results),
                "available": counts[RecordStatus.AVAIL],
                "taken": counts[RecordStatus.TAKEN],
                "errors": counts[RecordStatus.ERROR],
                "skipped": skipped,
                "available_domains": [
                    r["domain"] for r in results if r["status"] == RecordStatus.AVAIL.value
                ],
                "results": results,
            },
            warnings=warnings,
        )

    def _probe_for(self, domain: str) -> Callable[[], str]:
        return lambda: self._client.fetch(domain)
