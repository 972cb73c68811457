"""Rich integration for terminal output.

This module is the single place where the setup code touches Rich. It owns
the shared ``Console`` and re-exports the Rich primitives the UI helpers
need, so the rest of the package imports them from here.

Boundaries
----------
- No code outside this module and ``ui/`` should import Rich directly.
- The shared console resolves ``sys.stdout`` at print time, so output can
  be captured by tests with ``capsys``. When stdout is not a terminal Rich
  drops styling and prints plain text.
- Text lines are soft-wrapped: a long result line or path is printed on
  one line whatever the console width. Panels and tables still fit the
  width.

Canonical Usage
---------------
>>> from gildsmith_init.setup.console_helpers import rprint
>>> rprint("Hello Rich!")
Hello Rich!

"""

from __future__ import annotations

from typing import IO, Any

from rich.console import Console
from rich.markup import escape
from rich.panel import Panel
from rich.table import Table

_RICH_CONSOLE: Console = Console(highlight=False, soft_wrap=True)


def get_console() -> Console:
    """Return the shared console used by all UI helpers."""
    return _RICH_CONSOLE


def rprint(
    *objects: Any,
    sep: str = " ",
    end: str = "\n",
    file: IO[str] | None = None,
    flush: bool = False,
) -> None:
    r"""Print objects to the terminal using Rich markup.

    All parameters mirror Python's builtin print. Output goes through the
    shared console unless ``file`` is given, in which case a throwaway
    console bound to that file is used.

    Parameters
    ----------
    *objects : Any
        Objects to be printed, separated by sep.
    sep : str, optional
        Separator between objects, default ' '.
    end : str, optional
        Line ending, default newline.
    file : IO[str], optional
        File-like object to print to, default sys.stdout.
    flush : bool, optional
        Flush the target file after printing.

    Examples
    --------
    >>> import io
    >>> buf = io.StringIO()
    >>> rprint("FileOut", file=buf)
    >>> "FileOut" in buf.getvalue()
    True
    """
    console = (
        _RICH_CONSOLE
        if file is None
        else Console(file=file, highlight=False, soft_wrap=True)
    )
    console.print(*objects, sep=sep, end=end)
    if flush:
        console.file.flush()


__all__ = [
    "_RICH_CONSOLE",
    "Console",
    "Panel",
    "Table",
    "escape",
    "get_console",
    "rprint",
]
