"""Command: refresh the local TLD list from IANA."""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from tldhunt.commands._base import ExampleCommand

if TYPE_CHECKING:
    from tldhunt.commands._context import AppContext


@click.command(
    "update-tlds",
    cls=ExampleCommand,
    examples="""\
  tldhunt update-tlds
  tldhunt update-tlds -o lists/tlds.txt
  tldhunt update-tlds --url https://example.org/tlds.txt""",
)
@click.option("-o", "--output", default=None, help="TLD file to write (default: [tlds] file).")
@click.option("--url", default=None, help="Source URL (default: IANA list).")
@click.pass_obj
def update_tlds(app: AppContext, output: str | None, url: str | None) -> None:
    """Fetch the IANA TLD list and save it as dot-prefixed lowercase TLDs."""
    from tldhunt.services.tlds import TldService

    if app.interactive_output:
        click.echo(f"Fetching TLD data from {url or app.settings.tlds.url}...")
    app.emit(TldService(app.settings).update(output=output, url=url))
