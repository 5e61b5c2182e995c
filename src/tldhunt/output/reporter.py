"""ConsoleReporter — live progress lines for a running hunt."""

from __future__ import annotations

from typing import TYPE_CHECKING

from rich.text import Text

from tldhunt.domain.verdicts import VerdictKind
from tldhunt.output.formatters import verdict_line
from tldhunt.services.hunt import HuntListener

if TYPE_CHECKING:
    from rich.console import Console

    from tldhunt.services.retry import BackoffNotice, Resolution


class ConsoleReporter(HuntListener):
    """Print progress, backoff notices and verdict lines to a Console.

    With *only_available* set, taken domains are not printed (they are
    still written to the output log).
    """

    def __init__(self, console: Console, *, output_path: str, only_available: bool = False) -> None:
        self._console = console
        self._output_path = output_path
        self._only_available = only_available

    def on_skip(self, domain: str, index: int, total: int) -> None:
        self._console.print(
            Text(f"[skip] {domain} (already in {self._output_path})", style="hunt.skip")
        )

    def on_start(self, domain: str, index: int, total: int) -> None:
        self._console.print(Text(f"[{index}/{total}] Checking {domain}...", style="hunt.progress"))

    def on_backoff(self, notice: BackoffNotice) -> None:
        cause = "rate limited" if notice.verdict.kind is VerdictKind.RATE_LIMITED else "no response"
        self._console.print(
            Text(f"    {cause}; retrying in {notice.delay:g}s...", style="hunt.retry")
        )

    def on_result(self, resolution: Resolution) -> None:
        if self._only_available and resolution.verdict.kind is VerdictKind.TAKEN:
            return
        self._console.print(verdict_line(resolution))
