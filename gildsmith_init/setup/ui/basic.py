"""Minimal UI output primitives for the setup command.

This module renders headers, step titles and the informational,
success, warning and error lines printed by the setup steps. It contains
no logic beyond rendering: steps decide what happened, these helpers only
decide how it looks.

Message text passed in is escaped before being wrapped in Rich markup, so
paths and globs such as ``packages/composer/*/*`` or ``[dev]`` extras are
printed literally.
"""

from __future__ import annotations

from gildsmith_init.setup.console_helpers import (
    _RICH_CONSOLE,
    Panel,
    escape,
    rprint,
)


def ui_header(title: str) -> None:
    r"""Render a prominent banner.

    Used for the opening line of the command and for the completion
    banner.

    Parameters
    ----------
    title : str
        Banner text to display.
    """
    _RICH_CONSOLE.print(
        Panel.fit(escape(title), style="bold white on blue", border_style="blue")
    )


def ui_step(index: int, total: int, title: str) -> None:
    r"""Render the progress line printed before a step runs.

    Parameters
    ----------
    index : int
        One-based position of the step.
    total : int
        Number of steps in the run.
    title : str
        Human-readable step title.

    Examples
    --------
    >>> ui_step(1, 6, "Pulling project")  # doctest: +SKIP
    (1/6) Pulling project...
    """
    rprint()
    rprint(f"[bold]({index}/{total}) {escape(title)}...[/bold]")


def ui_info(message: str) -> None:
    r"""Display an informational message.

    Parameters
    ----------
    message : str
        Text of the informational message to display.
    """
    rprint(f"[cyan]{escape(message)}[/cyan]")


def ui_success(message: str) -> None:
    r"""Display a success message with a checkmark.

    Parameters
    ----------
    message : str
        Text of the success message to display.
    """
    rprint(f"[green]✔ {escape(message)}[/green]")


def ui_warning(message: str) -> None:
    r"""Display a warning message.

    Skipped steps are reported through this helper; a warning never
    counts as a failure.

    Parameters
    ----------
    message : str
        Text of the warning.
    """
    rprint(f"[yellow]⚠ {escape(message)}[/yellow]")


def ui_error(message: str) -> None:
    r"""Display an error message.

    Parameters
    ----------
    message : str
        Error text.
    """
    rprint(f"[bold red]✗ {escape(message)}[/bold red]")


__all__ = [
    "ui_error",
    "ui_header",
    "ui_info",
    "ui_step",
    "ui_success",
    "ui_warning",
]
