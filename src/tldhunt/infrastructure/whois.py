"""WhoisClient — runs the system ``whois`` binary as a text fetch.

The client is the probe collaborator of the retry engine. Timeouts and
non-zero exits are normal for whois (many clients exit 1 on "no match"),
so they never raise: stdout is returned as-is, or ``""`` on timeout.
Only a failure to launch the binary propagates, as ``OSError``.
"""

from __future__ import annotations

import logging
import shutil
import subprocess

logger = logging.getLogger(__name__)

DEFAULT_TIMEOUT = 15.0


class WhoisClient:
    """Fetch raw whois text for a domain."""

    def __init__(self, command: str = "whois", timeout: float = DEFAULT_TIMEOUT) -> None:
        self._command = command
        self._timeout = timeout

    @property
    def command(self) -> str:
        return self._command

    def is_installed(self) -> bool:
        """Whether the whois command resolves on PATH."""
        return shutil.which(self._command) is not None

    def fetch(self, domain: str) -> str:
        """Return whois output for *domain*, ``""`` on timeout.

        Raises:
            OSError: If the whois command cannot be executed.
        """
        try:
            result = subprocess.run(
                [self._command, domain],
                capture_output=True,
                text=True,
                encoding="utf-8",
                errors="replace",
                timeout=self._timeout,
                check=False,
            )
        except subprocess.TimeoutExpired:
            logger.debug("whois timed out after %.1fs for %s", self._timeout, domain)
            return ""
        if result.returncode != 0:
            logger.debug("whois exited %d for %s", result.returncode, domain)
        return result.stdout or ""
