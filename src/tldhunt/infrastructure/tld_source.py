"""TLD list I/O — read a local TLD file, download the IANA list.

The IANA file is one upper-case TLD per line with a ``#`` header line.
Local files hold one dot-prefixed TLD per line; blank lines and ``#``
comments are ignored.
"""

from __future__ import annotations

import logging
from pathlib import Path

import requests

logger = logging.getLogger(__name__)

IANA_TLD_URL = "https://data.iana.org/TLD/tlds-alpha-by-domain.txt"


def normalize_tld(tld: str) -> str:
    """Lowercase and ensure a leading dot.

    Examples:
        >>> normalize_tld("COM")
        '.com'
        >>> normalize_tld(".co.uk")
        '.co.uk'
    """
    value = tld.strip().lower()
    if not value.startswith("."):
        value = f".{value}"
    return value


def parse_tld_lines(text: str) -> list[str]:
    """Parse TLD file content, skipping blank and comment lines."""
    tlds: list[str] = []
    for line in text.splitlines():
        stripped = line.strip()
        if not stripped or stripped.startswith("#"):
            continue
        tlds.append(stripped)
    return tlds


def read_tld_file(path: Path) -> list[str]:
    """Read TLD entries from *path* verbatim (order preserved)."""
    return parse_tld_lines(path.read_text(encoding="utf-8"))


def fetch_iana_tlds(url: str = IANA_TLD_URL, *, timeout: float = 30.0) -> list[str]:
    """Download the IANA TLD list and return dot-prefixed lowercase TLDs.

    Raises:
        requests.RequestException: On network failure or a non-2xx response.
    """
    logger.debug("Fetching TLD list from %s", url)
    response = requests.get(url, timeout=timeout)
    response.raise_for_status()
    return [normalize_tld(tld) for tld in parse_tld_lines(response.text)]


def write_tld_file(path: Path, tlds: list[str]) -> None:
    """Write one TLD per line, creating parent directories as needed."""
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text("".join(f"{tld}\n" for tld in tlds), encoding="utf-8")
