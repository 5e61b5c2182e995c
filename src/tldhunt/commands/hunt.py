"""Command: check keyword + TLD combinations for availability."""

from __future__ import annotations

from datetime import datetime
from pathlib import Path
from typing import TYPE_CHECKING

import click

from tldhunt.commands._base import ExampleCommand

if TYPE_CHECKING:
    from tldhunt.commands._context import AppContext


def default_output_name() -> str:
    """``tldhunt-YYYYmmdd-HHMMSS.txt`` in local time."""
    return f"tldhunt-{datetime.now().strftime('%Y%m%d-%H%M%S')}.txt"


@click.command(
    cls=ExampleCommand,
    examples="""\
  tldhunt hunt -k linuxsec -E tlds.txt
  tldhunt hunt -k mybrand -e .com -d 2.0 -o results.txt
  tldhunt hunt -k mybrand -E tlds.txt -x -o results.txt --resume
  tldhunt --json hunt -k mybrand -e .io""",
)
@click.option("-k", "--keyword", required=True, help="Base keyword for domains.")
@click.option("-e", "--tld", default=None, help="Single TLD to check (e.g. .com).")
@click.option(
    "-E",
    "--tld-file",
    default=None,
    type=click.Path(dir_okay=False),
    help="File containing list of TLDs, one per line.",
)
@click.option(
    "-x", "--not-registered", "only_available", is_flag=True, help="Show only available domains."
)
@click.option("-d", "--delay", type=float, default=None, help="Delay between queries in seconds.")
@click.option(
    "-o",
    "--output",
    default=None,
    type=click.Path(dir_okay=False),
    help="Result file (default: tldhunt-<timestamp>.txt).",
)
@click.option("-r", "--resume", is_flag=True, help="Skip domains already present in output file.")
@click.option("--max-attempts", type=int, default=None, help="Attempts per domain.")
@click.option("--timeout", type=float, default=None, help="Per-lookup whois timeout in seconds.")
@click.pass_obj
def hunt(
    app: AppContext,
    keyword: str,
    tld: str | None,
    tld_file: str | None,
    only_available: bool,
    delay: float | None,
    output: str | None,
    resume: bool,
    max_attempts: int | None,
    timeout: float | None,
) -> None:
    """Check which keyword + TLD domains are still unregistered."""
    from tldhunt.infrastructure.whois import WhoisClient
    from tldhunt.services.hunt import HuntListener, HuntService
    from tldhunt.services.tlds import TldService

    settings = app.settings
    loaded = TldService(settings).load(tld=tld, tld_file=tld_file)
    if not loaded.ok:
        app.emit(loaded)
        return

    output_path = Path(output or default_output_name())
    client = WhoisClient(
        command=settings.whois.command,
        timeout=timeout if timeout is not None else settings.whois.timeout,
    )

    listener: HuntListener
    if app.interactive_output:
        from tldhunt.output.console import BANNER
        from tldhunt.output.reporter import ConsoleReporter

        console = app.console()
        console.print(BANNER, style="hunt.op", highlight=False)
        listener = ConsoleReporter(
            console, output_path=str(output_path), only_available=only_available
        )
    else:
        listener = HuntListener()

    result = HuntService(settings, client=client, listener=listener).run(
        keyword,
        loaded.data["tlds"],
        output_path=output_path,
        resume=resume,
        delay=delay,
        max_attempts=max_attempts,
    )
    app.emit(result)
