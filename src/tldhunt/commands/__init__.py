"""Subcommand modules for tldhunt.

Provides register_commands() which uses deferred imports to keep
``tldhunt --help`` fast.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    import click


def register_commands(cli: click.Group) -> None:
    """Register all standalone commands on the root CLI group."""
    from tldhunt.commands.hunt import hunt
    from tldhunt.commands.update_tlds import update_tlds

    cli.add_command(hunt)
    cli.add_command(update_tlds)
