"""Rich Console factory and theme for tldhunt output.

Progress and per-domain lines go to a live Console on stdout. Summaries
are rendered into a StringIO-backed Console so ``format_result`` keeps
returning a plain string. In non-TTY environments (tests, pipes) Rich
disables color codes automatically.
"""

from __future__ import annotations

from io import StringIO
from typing import IO

from rich.console import Console
from rich.theme import Theme

TLDHUNT_THEME = Theme(
    {
        "hunt.avail": "bold green",
        "hunt.taken": "bold red",
        "hunt.error": "bold yellow",
        "hunt.retry": "bold yellow",
        "hunt.expiry": "yellow",
        "hunt.progress": "cyan",
        "hunt.skip": "dim",
        "hunt.op": "bold cyan",
        "hunt.key": "dim",
        "hunt.ok": "bold green",
        "hunt.fail": "bold red",
    }
)

_STATUS_STYLES: dict[str, str] = {
    "avail": "hunt.avail",
    "taken": "hunt.taken",
    "error": "hunt.error",
}

BANNER = r"""
 _____ _    ___  _  _          _
|_   _| |  |   \| || |_  _ _ _| |_
  | | | |__| |) | __ | || | ' \  _|
  |_| |____|___/|_||_|\_,_|_||_\__|
        Domain Availability Checker
"""


def create_console(*, no_color: bool = False, width: int | None = None) -> Console:
    """Create a Console that renders to a StringIO buffer."""
    return Console(
        file=StringIO(),
        theme=TLDHUNT_THEME,
        no_color=no_color,
        highlight=False,
        width=width or 120,
    )


def create_live_console(file: IO[str] | None = None) -> Console:
    """Create a Console writing straight to *file* (default: stdout)."""
    return Console(file=file, theme=TLDHUNT_THEME, highlight=False, soft_wrap=True)


def get_output(console: Console) -> str:
    """Extract rendered text from a StringIO-backed Console."""
    assert isinstance(console.file, StringIO)
    return console.file.getvalue()


def style_for_status(status: str) -> str:
    """Return the Rich style name for a result status."""
    return _STATUS_STYLES.get(status, "")
