"""TldService — resolve the TLD list for a hunt and refresh it from IANA."""

from __future__ import annotations

import logging
from pathlib import Path

import requests

from tldhunt.domain.records import domain_part_problem
from tldhunt.infrastructure.tld_source import (
    fetch_iana_tlds,
    normalize_tld,
    read_tld_file,
    write_tld_file,
)
from tldhunt.services.base import BaseService
from tldhunt.services.result import ServiceResult

logger = logging.getLogger(__name__)


class TldService(BaseService):
    """Load TLDs from a single value or a file; download the IANA list."""

    def load(self, *, tld: str | None = None, tld_file: str | Path | None = None) -> ServiceResult:
        """Return ``data["tlds"]`` from exactly one of *tld* or *tld_file*."""
        op = "load_tlds"
        if tld and tld_file:
            return ServiceResult.failure(
                op, "INVALID_ARGS", "You can only specify one of -e or -E options."
            )
        if not tld and not tld_file:
            return ServiceResult.failure(op, "INVALID_ARGS", "Either -e or -E option is required.")

        if tld:
            tlds = [normalize_tld(tld)]
            return _checked(op, tlds) or ServiceResult(
                ok=True, op=op, data={"tlds": tlds, "source": "argument"}
            )

        path = Path(tld_file)  # type: ignore[arg-type]
        if not path.is_file():
            return ServiceResult.failure(
                op, "TLD_FILE_NOT_FOUND", f"TLD file {path} not found.", path=str(path)
            )
        tlds = [normalize_tld(t) for t in read_tld_file(path)]
        if not tlds:
            return ServiceResult.failure(op, "NO_TLDS", f"TLD file {path} has no entries.")
        invalid = _checked(op, tlds, source=path)
        if invalid:
            return invalid
        logger.debug("Loaded %d TLDs from %s", len(tlds), path)
        return ServiceResult(ok=True, op=op, data={"tlds": tlds, "source": str(path)})

    def update(self, *, output: str | Path | None = None, url: str | None = None) -> ServiceResult:
        """Download the IANA TLD list and write it to *output*."""
        op = "update_tlds"
        cfg = self._settings.tlds
        target = Path(output or cfg.file)
        source = url or cfg.url
        try:
            tlds = fetch_iana_tlds(source, timeout=cfg.timeout)
        except requests.RequestException as exc:
            logger.debug("TLD download failed", exc_info=True)
            return ServiceResult.failure(
                op, "FETCH_FAILED", f"Could not fetch TLD list from {source}: {exc}", url=source
            )
        if not tlds:
            return ServiceResult.failure(op, "NO_TLDS", f"TLD list at {source} was empty.")
        write_tld_file(target, tlds)
        return ServiceResult(
            ok=True,
            op=op,
            data={"path": str(target), "count": len(tlds), "url": source},
        )


def _checked(op: str, tlds: list[str], *, source: Path | None = None) -> ServiceResult | None:
    """Fail on the first TLD that would corrupt the output log or the whois call."""
    for tld in tlds:
        problem = domain_part_problem(tld)
        if problem:
            where = f" in {source}" if source else ""
            return ServiceResult.failure(op, "INVALID_ARGS", f"TLD{where} {problem}", tld=tld)
    return None
