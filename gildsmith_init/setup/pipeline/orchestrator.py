"""Orchestrator for setup step sequencing.

Runs the setup steps strictly one after another, printing a ``(i/N)``
progress line before each step, letting the step print its own result,
and finishing with a summary table and a completion banner.

The orchestrator is display-only sequencing, not a transaction: a failing
step never stops the run and nothing is rolled back. Every step is
idempotent, so running the command again is the recovery path.

Typical usage::

    from gildsmith_init.setup.pipeline import orchestrator
    from gildsmith_init.setup.pipeline.steps import SetupContext
    exit_code = orchestrator.run_setup(SetupContext(verbose=True))

"""

from __future__ import annotations

import logging
from collections.abc import Sequence

from gildsmith_init.setup import i18n
from gildsmith_init.setup.console_helpers import get_console, rprint
from gildsmith_init.setup.i18n import _
from gildsmith_init.setup.ui.basic import ui_error, ui_header, ui_step, ui_success, ui_warning

from .status import StepOutcome, StepReport, _render_summary_table
from .steps import SetupContext, Step, default_steps

logger = logging.getLogger(__name__)

EXIT_OK = 0
EXIT_STEP_FAILED = 1


def _run_step(step: Step, context: SetupContext) -> StepOutcome:
    """Run one step, turning an unexpected exception into a failed outcome."""
    try:
        return step.run(context)
    except Exception as error:
        logger.exception(f"Step {step!r} raised unexpectedly")
        ui_error(_("step_crashed", error=error))
        return StepOutcome.FAILED


def run_steps(context: SetupContext, steps: Sequence[Step]) -> list[StepReport]:
    r"""Execute ``steps`` in order and collect one report per step.

    Parameters
    ----------
    context : SetupContext
        Root directory and verbosity shared by all steps.
    steps : Sequence[Step]
        Steps in execution order.

    Returns
    -------
    list[StepReport]
        One report per step, in execution order. Every step is attempted
        regardless of earlier failures.
    """
    total = len(steps)
    reports: list[StepReport] = []
    for index, step in enumerate(steps, start=1):
        title = step.title
        ui_step(index, total, title)
        logger.info(f"Step {index}/{total}: {title}")
        outcome = _run_step(step, context)
        logger.info(f"Step {index}/{total} finished: {outcome.value}")
        reports.append(StepReport(title=title, outcome=outcome))
    return reports


def exit_code_for(reports: Sequence[StepReport]) -> int:
    """Return 1 when any step failed, 0 otherwise."""
    return EXIT_STEP_FAILED if any(report.failed for report in reports) else EXIT_OK


def run_setup(
    context: SetupContext,
    steps: Sequence[Step] | None = None,
    core_only: bool = False,
) -> int:
    r"""Run the full setup and return the process exit status.

    Parameters
    ----------
    context : SetupContext
        Root directory and verbosity.
    steps : Sequence[Step] | None, optional
        Steps to run. Defaults to :func:`default_steps`.
    core_only : bool, optional
        When ``steps`` is not given, leave out the optional steps.

    Returns
    -------
    int
        ``0`` when every step succeeded or was skipped, ``1`` when any step
        reported an error.

    Examples
    --------
    >>> from pathlib import Path
    >>> run_setup(SetupContext(root=Path("/tmp/workspace")))  # doctest: +SKIP
    0
    """
    if steps is None:
        steps = default_steps(core_only=core_only)

    ui_header(_("welcome"))
    logger.info(f"Starting setup in {context.root} ({len(steps)} steps)")
    reports = run_steps(context, steps)

    rprint()
    get_console().print(_render_summary_table(_, i18n.LANG, reports))
    rprint()

    failures = sum(1 for report in reports if report.failed)
    if failures:
        logger.warning(f"Setup finished with {failures} failed step(s)")
        ui_warning(_("setup_complete_with_errors", count=failures))
    else:
        logger.info("Setup complete")
        ui_success(_("setup_complete"))
    return exit_code_for(reports)


__all__ = [
    "EXIT_OK",
    "EXIT_STEP_FAILED",
    "exit_code_for",
    "run_setup",
    "run_steps",
]
