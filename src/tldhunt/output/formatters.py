"""ServiceResult formatting for humans (Rich) or machines (--json).

Per-domain verdict lines are built here too, so the hunt reporter and
any other caller print them identically.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from pydantic import BaseModel
from rich.text import Text

from tldhunt.domain.records import RecordStatus, ResultRecord
from tldhunt.output.console import create_console, get_output, style_for_status

if TYPE_CHECKING:
    from rich.console import Console

    from tldhunt.services.result import ServiceResult
    from tldhunt.services.retry import Resolution


class OutputSettings(BaseModel):
    """Output mode flags, frozen."""

    model_config = {"frozen": True}

    json_output: bool = False
    quiet: bool = False
    verbose: bool = False


# ── Verdict lines ─────────────────────────────────────────────────────


def verdict_line(resolution: Resolution) -> Text:
    """``[avail] x.com``, ``[taken] x.com - Exp Date: ...`` or ``[error] ...``."""
    record = ResultRecord.from_verdict(resolution.domain, resolution.verdict)
    status = record.status.value
    line = Text()
    line.append("[")
    line.append(status, style=style_for_status(status))
    line.append(f"] {record.domain}")
    if record.status is RecordStatus.TAKEN and record.detail:
        line.append(" - Exp Date: ")
        line.append(record.detail, style="hunt.expiry")
    elif record.status is RecordStatus.ERROR:
        line.append(f" - failed after {resolution.attempts} attempts ({record.detail})")
    return line


# ── ServiceResult ─────────────────────────────────────────────────────


def format_result(
    result: ServiceResult,
    *,
    settings: OutputSettings | None = None,
    json_output: bool = False,
) -> str:
    """Format a ServiceResult for display.

    Args:
        result: The service result to format.
        settings: Output mode; when given, *json_output* is ignored.
        json_output: Shorthand for ``OutputSettings(json_output=True)``.
    """
    if settings is None:
        settings = OutputSettings(json_output=json_output)
    if settings.json_output:
        return result.model_dump_json(indent=2)
    if settings.quiet:
        return _render_quiet(result)
    return _render_human(result, verbose=settings.verbose)


def _render_quiet(result: ServiceResult) -> str:
    if not result.ok:
        msg = result.error.message if result.error else "Unknown error"
        return f"ERROR: {result.op} — {msg}"
    if result.op == "hunt":
        return "\n".join(result.data.get("available_domains", []))
    if result.op == "update_tlds":
        return str(result.data.get("path", ""))
    return f"OK: {result.op}"


def _render_human(result: ServiceResult, *, verbose: bool) -> str:
    console = create_console()
    if not result.ok:
        msg = result.error.message if result.error else "Unknown error"
        console.print(Text("ERROR", style="hunt.fail"), Text(f"{result.op} — {msg}"))
        if verbose and result.error and result.error.detail:
            for key, value in result.error.detail.items():
                _field(console, key, value)
        return get_output(console).rstrip("\n")

    console.print(Text("OK", style="hunt.ok"), Text(f"  {result.op}", style="hunt.op"))
    if result.op == "hunt":
        _render_hunt(console, result.data, verbose=verbose)
    else:
        for key, value in result.data.items():
            _field(console, key, value)
    return get_output(console).rstrip("\n")


def _render_hunt(console: Console, data: dict[str, Any], *, verbose: bool) -> None:
    for key in ("checked", "available", "taken", "errors", "skipped", "output"):
        _field(console, key, data.get(key, ""))
    available = data.get("available_domains") or []
    if available:
        console.print(Text("  available domains:", style="hunt.key"))
        for domain in available:
            console.print(Text(f"    {domain}", style="hunt.avail"))
    if verbose:
        for item in data.get("results", []):
            console.print(
                f"    {item['domain']}|{item['status']}|{item['detail']}"
                f"  (attempts: {item['attempts']})"
            )


def _field(console: Console, key: str, value: Any) -> None:
    console.print(Text(f"  {key}: ", style="hunt.key"), Text(str(value)), sep="")
