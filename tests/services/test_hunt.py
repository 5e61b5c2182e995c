"""Tests for HuntService — serial per-domain orchestration."""

from __future__ import annotations

from pathlib import Path
from typing import TYPE_CHECKING

import pytest

from tldhunt.config.settings import TldhuntSettings
from tldhunt.services.hunt import HuntListener, HuntService, build_domains
from tldhunt.services.retry import BackoffNotice, Resolution

if TYPE_CHECKING:
    from tests.conftest import FakeWhoisClient, SleepRecorder


class RecordingListener(HuntListener):
    def __init__(self) -> None:
        self.events: list[tuple[str, str]] = []

    def on_skip(self, domain: str, index: int, total: int) -> None:
        self.events.append(("skip", domain))

    def on_start(self, domain: str, index: int, total: int) -> None:
        self.events.append(("start", f"{domain} {index}/{total}"))

    def on_backoff(self, notice: BackoffNotice) -> None:
        self.events.append(("backoff", f"{notice.domain} {notice.delay:g}"))

    def on_result(self, resolution: Resolution) -> None:
        self.events.append(("result", f"{resolution.domain} {resolution.verdict.kind}"))


def _service(
    settings: TldhuntSettings,
    client: FakeWhoisClient,
    sleep: SleepRecorder,
    listener: HuntListener | None = None,
) -> HuntService:
    return HuntService(settings, client=client, listener=listener, sleep=sleep)


class TestBuildDomains:
    def test_concatenates_in_order(self) -> None:
        assert build_domains("acme", [".io", ".com"]) == ["acme.io", "acme.com"]

    def test_drops_duplicates(self) -> None:
        assert build_domains("acme", [".com", ".com"]) == ["acme.com"]


class TestHuntRun:
    def test_writes_one_line_per_domain(
        self,
        settings: TldhuntSettings,
        whois_client: FakeWhoisClient,
        sleep: SleepRecorder,
        tmp_path: Path,
    ) -> None:
        out = tmp_path / "results.txt"
        result = _service(settings, whois_client, sleep).run(
            "acme", [".com", ".io", ".dev", ".xyz"], output_path=out
        )
        assert result.ok
        assert out.read_text(encoding="utf-8").splitlines() == [
            "acme.com|avail|",
            "acme.io|taken|2026-03-15",
            "acme.dev|taken|",
            "acme.xyz|error|retries-exceeded",
        ]

    def test_summary_counts(
        self,
        settings: TldhuntSettings,
        whois_client: FakeWhoisClient,
        sleep: SleepRecorder,
        tmp_path: Path,
    ) -> None:
        result = _service(settings, whois_client, sleep).run(
            "acme", [".com", ".io", ".xyz"], output_path=tmp_path / "r.txt"
        )
        data = result.data
        assert data["total"] == 3
        assert data["checked"] == 3
        assert data["available"] == 1
        assert data["taken"] == 1
        assert data["errors"] == 1
        assert data["skipped"] == 0
        assert data["available_domains"] == ["acme.com"]
        assert result.warnings == ["acme.xyz: retries-exceeded after 3 attempts"]

    def test_error_does_not_stop_later_domains(
        self,
        settings: TldhuntSettings,
        whois_client: FakeWhoisClient,
        sleep: SleepRecorder,
        tmp_path: Path,
    ) -> None:
        result = _service(settings, whois_client, sleep).run(
            "acme", [".xyz", ".com"], output_path=tmp_path / "r.txt"
        )
        assert [r["status"] for r in result.data["results"]] == ["error", "avail"]

    def test_sleeps_backoff_and_inter_domain_delay(
        self,
        settings: TldhuntSettings,
        whois_client: FakeWhoisClient,
        sleep: SleepRecorder,
        tmp_path: Path,
    ) -> None:
        _service(settings, whois_client, sleep).run(
            "acme", [".com", ".xyz", ".io"], output_path=tmp_path / "r.txt", delay=1.5
        )
        # delay after acme.com, backoff 2 and 4 for acme.xyz, delay before acme.io
        assert sleep.calls == [1.5, 2.0, 4.0, 1.5]

    def test_no_delay_after_last_domain(
        self,
        settings: TldhuntSettings,
        whois_client: FakeWhoisClient,
        sleep: SleepRecorder,
        tmp_path: Path,
    ) -> None:
        _service(settings, whois_client, sleep).run(
            "acme", [".com"], output_path=tmp_path / "r.txt"
        )
        assert sleep.calls == []

    def test_max_attempts_override(
        self,
        settings: TldhuntSettings,
        whois_client: FakeWhoisClient,
        sleep: SleepRecorder,
        tmp_path: Path,
    ) -> None:
        result = _service(settings, whois_client, sleep).run(
            "acme", [".xyz"], output_path=tmp_path / "r.txt", max_attempts=1
        )
        assert result.data["results"][0]["attempts"] == 1
        assert whois_client.calls == ["acme.xyz"]

    def test_listener_events(
        self,
        settings: TldhuntSettings,
        whois_client: FakeWhoisClient,
        sleep: SleepRecorder,
        tmp_path: Path,
    ) -> None:
        listener = RecordingListener()
        _service(settings, whois_client, sleep, listener).run(
            "acme", [".com", ".xyz"], output_path=tmp_path / "r.txt", max_attempts=2
        )
        assert listener.events == [
            ("start", "acme.com 1/2"),
            ("result", "acme.com available"),
            ("start", "acme.xyz 2/2"),
            ("backoff", "acme.xyz 2"),
            ("result", "acme.xyz error"),
        ]

    def test_fetch_failure_recorded(
        self,
        settings: TldhuntSettings,
        make_whois: type[FakeWhoisClient],
        sleep: SleepRecorder,
        tmp_path: Path,
    ) -> None:
        client = make_whois({"acme.com": [OSError("unreachable")]})
        out = tmp_path / "r.txt"
        _service(settings, client, sleep).run("acme", [".com"], output_path=out)
        assert out.read_text(encoding="utf-8") == "acme.com|error|fetch-failure\n"

    def test_creates_output_file(
        self,
        settings: TldhuntSettings,
        whois_client: FakeWhoisClient,
        sleep: SleepRecorder,
        tmp_path: Path,
    ) -> None:
        out = tmp_path / "nested" / "r.txt"
        _service(settings, whois_client, sleep).run("acme", [".com"], output_path=out)
        assert out.is_file()


class TestResume:
    def test_skips_processed_domains(
        self,
        settings: TldhuntSettings,
        whois_client: FakeWhoisClient,
        sleep: SleepRecorder,
        tmp_path: Path,
    ) -> None:
        out = tmp_path / "r.txt"
        out.write_text("acme.com|avail|\n", encoding="utf-8")
        listener = RecordingListener()
        result = _service(settings, whois_client, sleep, listener).run(
            "acme", [".com", ".io"], output_path=out, resume=True
        )
        assert whois_client.calls == ["acme.io"]
        assert ("skip", "acme.com") in listener.events
        assert result.data["skipped"] == 1
        assert out.read_text(encoding="utf-8").splitlines() == [
            "acme.com|avail|",
            "acme.io|taken|2026-03-15",
        ]

    def test_prefix_match_is_exact(
        self,
        settings: TldhuntSettings,
        whois_client: FakeWhoisClient,
        sleep: SleepRecorder,
        tmp_path: Path,
    ) -> None:
        out = tmp_path / "r.txt"
        out.write_text("myacme.com|avail|\n", encoding="utf-8")
        _service(settings, whois_client, sleep).run("acme", [".com"], output_path=out, resume=True)
        assert whois_client.calls == ["acme.com"]

    def test_without_resume_reprobes(
        self,
        settings: TldhuntSettings,
        whois_client: FakeWhoisClient,
        sleep: SleepRecorder,
        tmp_path: Path,
    ) -> None:
        out = tmp_path / "r.txt"
        out.write_text("acme.com|avail|\n", encoding="utf-8")
        _service(settings, whois_client, sleep).run("acme", [".com"], output_path=out)
        assert whois_client.calls == ["acme.com"]
        assert out.read_text(encoding="utf-8").count("acme.com|") == 2


class TestHuntValidation:
    @pytest.mark.parametrize("keyword", ["", "   ", "my brand", "a|b"])
    def test_bad_keyword(
        self,
        settings: TldhuntSettings,
        whois_client: FakeWhoisClient,
        sleep: SleepRecorder,
        tmp_path: Path,
        keyword: str,
    ) -> None:
        result = _service(settings, whois_client, sleep).run(
            keyword, [".com"], output_path=tmp_path / "r.txt"
        )
        assert not result.ok
        assert result.error is not None
        assert result.error.code == "INVALID_ARGS"
        assert whois_client.calls == []

    def test_no_tlds(
        self,
        settings: TldhuntSettings,
        whois_client: FakeWhoisClient,
        sleep: SleepRecorder,
        tmp_path: Path,
    ) -> None:
        result = _service(settings, whois_client, sleep).run(
            "acme", [], output_path=tmp_path / "r.txt"
        )
        assert result.error is not None
        assert result.error.code == "NO_TLDS"

    def test_invalid_attempts(
        self,
        settings: TldhuntSettings,
        whois_client: FakeWhoisClient,
        sleep: SleepRecorder,
        tmp_path: Path,
    ) -> None:
        result = _service(settings, whois_client, sleep).run(
            "acme", [".com"], output_path=tmp_path / "r.txt", max_attempts=0
        )
        assert result.error is not None
        assert result.error.code == "INVALID_ARGS"

    def test_whois_missing(
        self,
        settings: TldhuntSettings,
        make_whois: type[FakeWhoisClient],
        sleep: SleepRecorder,
        tmp_path: Path,
    ) -> None:
        client = make_whois(installed=False)
        out = tmp_path / "r.txt"
        result = _service(settings, client, sleep).run("acme", [".com"], output_path=out)
        assert result.error is not None
        assert result.error.code == "WHOIS_NOT_FOUND"
        assert not out.exists()


class TestHuntConfig:
    def test_custom_patterns_from_settings(
        self, make_whois: type[FakeWhoisClient], sleep: SleepRecorder, tmp_path: Path
    ) -> None:
        (tmp_path / "tldhunt.toml").write_text(
            '[patterns]\navailable = ["up for grabs"]\n', encoding="utf-8"
        )
        settings = TldhuntSettings.from_cli(start_dir=tmp_path)
        client = make_whois({"acme.tld": ["acme.tld is up for grabs"]})
        result = _service(settings, client, sleep).run(
            "acme", [".tld"], output_path=tmp_path / "r.txt"
        )
        assert result.data["available_domains"] == ["acme.tld"]

    def test_settings_delay_used_by_default(
        self, whois_client: FakeWhoisClient, sleep: SleepRecorder, tmp_path: Path
    ) -> None:
        (tmp_path / "tldhunt.toml").write_text("[hunt]\ndelay = 0.25\n", encoding="utf-8")
        settings = TldhuntSettings.from_cli(start_dir=tmp_path)
        _service(settings, whois_client, sleep).run(
            "acme", [".com", ".io"], output_path=tmp_path / "r.txt"
        )
        assert sleep.calls == [0.25]
