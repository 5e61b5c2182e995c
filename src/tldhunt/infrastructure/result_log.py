"""Append-only result log (``domain|status|detail`` lines).

INVARIANT: Lines are only ever appended. Resume logic reads the log once,
before any probing starts, to find domains that already have a record.
"""

from __future__ import annotations

import logging
import threading
from pathlib import Path

logger = logging.getLogger(__name__)

SEPARATOR = "|"


class ResultLog:
    """Line-oriented append-only log file.

    Appends are serialized with a lock so a single instance can be shared
    by more than one writer.
    """

    def __init__(self, path: Path) -> None:
        self._path = path
        self._lock = threading.Lock()

    @property
    def path(self) -> Path:
        return self._path

    def touch(self) -> None:
        """Create the log (and parent directories) if missing."""
        self._path.parent.mkdir(parents=True, exist_ok=True)
        self._path.touch(exist_ok=True)

    def append(self, line: str) -> None:
        """Append one line. Embedded newlines are rejected."""
        if "\n" in line or "\r" in line:
            msg = f"Result line must not contain newlines: {line!r}"
            raise ValueError(msg)
        with self._lock:
            with self._path.open("a", encoding="utf-8") as fh:
                fh.write(line + "\n")

    def lines(self) -> list[str]:
        """All non-empty lines currently in the log."""
        if not self._path.is_file():
            return []
        text = self._path.read_text(encoding="utf-8")
        return [line for line in text.splitlines() if line.strip()]

    def processed_domains(self) -> set[str]:
        """Domains that already have a line of the form ``domain|...``."""
        domains: set[str] = set()
        for line in self.lines():
            domain, sep, _rest = line.partition(SEPARATOR)
            if sep and domain:
                domains.add(domain)
        logger.debug("Found %d processed domains in %s", len(domains), self._path)
        return domains
