"""Off-screen Rich consoles.

Renderers draw onto a console backed by a string buffer and return the
text, which keeps :func:`fdm.output.formatters.format_result` a plain
``ServiceResult -> str`` function. Rich leaves out ANSI codes whenever
the buffer is not a terminal (pipes, CliRunner).
"""

from __future__ import annotations

from io import StringIO

from rich.console import Console
from rich.theme import Theme

RENDER_WIDTH = 120

FDM_THEME = Theme(
    {
        "fdm.ok": "green",
        "fdm.error": "bold red",
        "fdm.op": "cyan",
        "fdm.key": "bright_black",
        "fdm.tag": "bold blue",
        "fdm.variant": "bold magenta",
        "fdm.rule": "yellow",
        "fdm.mark": "green",
    }
)


def create_console(*, width: int = RENDER_WIDTH) -> Console:
    """A themed console that writes into a fresh buffer."""
    return Console(file=StringIO(), theme=FDM_THEME, width=width, highlight=False)


def get_output(console: Console) -> str:
    buffer = console.file
    if not isinstance(buffer, StringIO):
        raise TypeError("console was not created by create_console()")
    return buffer.getvalue()
