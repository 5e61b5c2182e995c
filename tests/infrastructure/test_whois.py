"""Tests for WhoisClient — subprocess-backed whois fetch."""

from __future__ import annotations

import subprocess
from unittest.mock import patch

import pytest

from tldhunt.infrastructure.whois import WhoisClient

RUN = "tldhunt.infrastructure.whois.subprocess.run"


def _completed(stdout: str, returncode: int = 0) -> subprocess.CompletedProcess[str]:
    return subprocess.CompletedProcess(
        args=["whois"], returncode=returncode, stdout=stdout, stderr=""
    )


class TestFetch:
    def test_returns_stdout(self) -> None:
        with patch(RUN, return_value=_completed("data")) as run:
            assert WhoisClient(timeout=5).fetch("acme.com") == "data"
        args, kwargs = run.call_args
        assert args[0] == ["whois", "acme.com"]
        assert kwargs["timeout"] == 5
        assert kwargs["check"] is False

    def test_nonzero_exit_still_returns_output(self) -> None:
        with patch(
            RUN,
            return_value=_completed("No match for ACME.COM", returncode=1),
        ):
            assert WhoisClient().fetch("acme.com") == "No match for ACME.COM"

    def test_timeout_returns_empty(self) -> None:
        with patch(
            RUN,
            side_effect=subprocess.TimeoutExpired(cmd="whois", timeout=1),
        ):
            assert WhoisClient(timeout=1).fetch("acme.com") == ""

    def test_missing_binary_raises_os_error(self) -> None:
        client = WhoisClient(command="definitely-not-a-whois-binary-xyz")
        with pytest.raises(OSError):
            client.fetch("acme.com")

    def test_custom_command(self) -> None:
        with patch(RUN, return_value=_completed("")) as run:
            WhoisClient(command="jwhois").fetch("acme.com")
        assert run.call_args.args[0] == ["jwhois", "acme.com"]


class TestIsInstalled:
    def test_missing(self) -> None:
        assert WhoisClient(command="definitely-not-a-whois-binary-xyz").is_installed() is False

    def test_present(self) -> None:
        with patch("tldhunt.infrastructure.whois.shutil.which", return_value="/usr/bin/whois"):
            assert WhoisClient().is_installed() is True
