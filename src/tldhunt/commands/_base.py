"""Shared click command class for tldhunt subcommands.

``tldhunt hunt --examples`` prints worked invocations (TLD file, single
TLD, resume, JSON) and exits before any option validation, so the
required ``--keyword`` does not get in the way.
"""

from __future__ import annotations

from typing import Any

import click


class ExampleCommand(click.Command):
    """A :class:`click.Command` with an eager ``--examples`` flag."""

    def __init__(self, *args: Any, examples: str | None = None, **kwargs: Any) -> None:
        super().__init__(*args, **kwargs)
        self.examples = examples
        if examples:
            self.params.append(
                click.Option(
                    ["--examples"],
                    is_flag=True,
                    expose_value=False,
                    is_eager=True,
                    callback=self._show_examples,
                    help="Show usage examples and exit.",
                )
            )

    def _show_examples(self, ctx: click.Context, _param: click.Parameter, value: bool) -> None:
        if not value or ctx.resilient_parsing:
            return
        click.echo(f"Examples for '{ctx.command_path}':\n")
        click.echo(self.examples)
        ctx.exit(0)
