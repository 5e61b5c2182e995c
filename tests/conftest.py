"""Shared pytest fixtures for tldhunt tests."""

from __future__ import annotations

from collections.abc import Iterable
from pathlib import Path

import pytest
from click.testing import CliRunner

from tldhunt.config.settings import TldhuntSettings
from tldhunt.infrastructure.whois import WhoisClient

# --- Canned whois responses ---

AVAILABLE_TEXT = 'No match for domain "ACME.COM".\n>>> Last update of whois database <<<\n'
RATE_LIMITED_TEXT = "%% Query rate limit exceeded. Please try again later.\r\n"
TAKEN_TEXT = """\
Domain Name: ACME.IO\r
Registrar: Example Registrar, Inc.\r
Updated Date: 2024-01-10T08:00:00Z\r
Registry Expiry Date: 2026-03-15T04:00:00Z\r
Name Server: NS1.EXAMPLE.NET\r
"""
TAKEN_NO_EXPIRY_TEXT = "Domain Name: acme.dev\nRegistrar: Example Registrar\nStatus: active\n"

SCRIPTED_RESPONSES: dict[str, str] = {
    "acme.com": AVAILABLE_TEXT,
    "acme.io": TAKEN_TEXT,
    "acme.dev": TAKEN_NO_EXPIRY_TEXT,
    "acme.xyz": RATE_LIMITED_TEXT,
}


class FakeWhoisClient(WhoisClient):
    """WhoisClient with scripted per-domain responses.

    Each domain maps to a sequence of responses consumed one per fetch; the
    last one repeats once the sequence runs out. An exception instance in
    the sequence is raised instead of returned. Unknown domains get ``""``.
    """

    def __init__(
        self,
        responses: dict[str, Iterable[str | Exception]] | None = None,
        *,
        installed: bool = True,
    ) -> None:
        super().__init__(command="whois", timeout=1.0)
        self._responses = {domain: list(seq) for domain, seq in (responses or {}).items()}
        self._installed = installed
        self.calls: list[str] = []

    def is_installed(self) -> bool:
        return self._installed

    def fetch(self, domain: str) -> str:
        self.calls.append(domain)
        seq = self._responses.get(domain) or [""]
        value = seq.pop(0) if len(seq) > 1 else seq[0]
        if isinstance(value, Exception):
            raise value
        return value


class SleepRecorder:
    """Stand-in for time.sleep that records requested delays."""

    def __init__(self) -> None:
        self.calls: list[float] = []

    def __call__(self, seconds: float) -> None:
        self.calls.append(seconds)


@pytest.fixture
def cli_runner() -> CliRunner:
    """Provide a Click CLI test runner."""
    return CliRunner()


@pytest.fixture(autouse=True)
def _clean_env(monkeypatch: pytest.MonkeyPatch) -> None:
    """Keep a developer's TLDHUNT_* environment out of the tests."""
    for name in (
        "TLDHUNT_CONFIG",
        "TLDHUNT_HUNT__DELAY",
        "TLDHUNT_HUNT__MAX_ATTEMPTS",
        "TLDHUNT_HUNT__BACKOFF_UNIT",
        "TLDHUNT_WHOIS__COMMAND",
        "TLDHUNT_WHOIS__TIMEOUT",
        "TLDHUNT_QUIET",
        "TLDHUNT_VERBOSE",
    ):
        monkeypatch.delenv(name, raising=False)


@pytest.fixture
def settings(tmp_path: Path) -> TldhuntSettings:
    """Default settings with config discovery rooted in a temp directory."""
    return TldhuntSettings.from_cli(start_dir=tmp_path)


@pytest.fixture
def sleep() -> SleepRecorder:
    return SleepRecorder()


@pytest.fixture
def make_whois() -> type[FakeWhoisClient]:
    """Factory for scripted whois clients: ``make_whois({domain: [responses]})``."""
    return FakeWhoisClient


@pytest.fixture
def whois_client() -> FakeWhoisClient:
    """Scripted client answering for acme.com, acme.io, acme.dev and acme.xyz."""
    return FakeWhoisClient({domain: [text] for domain, text in SCRIPTED_RESPONSES.items()})


@pytest.fixture
def _isolated_workdir(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    """Run CLI commands in a temp directory with zero delays and a fake whois.

    Writes a ``tldhunt.toml`` that disables waiting and patches
    :class:`WhoisClient` so no real whois process is launched. Responses
    come from :data:`SCRIPTED_RESPONSES`; unknown domains get ``""``.
    """
    (tmp_path / "tldhunt.toml").write_text(
        "[hunt]\ndelay = 0\nbackoff_unit = 0\n", encoding="utf-8"
    )
    monkeypatch.chdir(tmp_path)

    def fake_fetch(self: WhoisClient, domain: str) -> str:
        return SCRIPTED_RESPONSES.get(domain, "")

    monkeypatch.setattr(WhoisClient, "fetch", fake_fetch)
    monkeypatch.setattr(WhoisClient, "is_installed", lambda self: True)
