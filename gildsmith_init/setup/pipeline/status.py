"""Step outcomes and the end-of-run summary table.

Provides the outcome type every step returns, localized status labels and
a Rich table summarising one run.
"""

from __future__ import annotations

import enum
from collections.abc import Callable, Iterable
from dataclasses import dataclass

from gildsmith_init.setup.console_helpers import Table


class StepOutcome(enum.Enum):
    """Result of running one step."""

    OK = "ok"
    SKIPPED = "skipped"
    FAILED = "fail"


@dataclass(frozen=True)
class StepReport:
    """Outcome of one executed step, kept for the summary and exit status."""

    title: str
    outcome: StepOutcome

    @property
    def failed(self) -> bool:
        return self.outcome is StepOutcome.FAILED


def combine_outcomes(outcomes: Iterable[StepOutcome]) -> StepOutcome:
    r"""Fold the per-target outcomes of a multi-target step into one.

    Any failure makes the step fail; otherwise the step is OK when at least
    one target was acted on, and skipped when every target was already in
    place (or there were no targets).

    Examples
    --------
    >>> combine_outcomes([StepOutcome.SKIPPED, StepOutcome.OK])
    <StepOutcome.OK: 'ok'>
    >>> combine_outcomes([StepOutcome.OK, StepOutcome.FAILED])
    <StepOutcome.FAILED: 'fail'>
    >>> combine_outcomes([])
    <StepOutcome.SKIPPED: 'skipped'>
    """
    seen = set(outcomes)
    if StepOutcome.FAILED in seen:
        return StepOutcome.FAILED
    if StepOutcome.OK in seen:
        return StepOutcome.OK
    return StepOutcome.SKIPPED


def _status_label(lang: str, base: str) -> str:
    """Return a localized status label for a given outcome key.

    Parameters
    ----------
    lang : str
        Language code (e.g., ``'en'`` or ``'sv'``).
    base : str
        Outcome key such as ``'ok'``, ``'skipped'`` or ``'fail'``.

    Returns
    -------
    str
        Localized status label.

    Examples
    --------
    >>> _status_label("sv", "ok")
    '✅ Klart'
    """
    if lang == "sv":
        labels = {
            "ok": "✅ Klart",
            "skipped": "⏭  Hoppades över",
            "fail": "❌ Misslyckades",
        }
    else:
        labels = {
            "ok": "✅ Done",
            "skipped": "⏭  Skipped",
            "fail": "❌ Failed",
        }
    return labels.get(base, base)


_OUTCOME_STYLES = {
    StepOutcome.OK: "green",
    StepOutcome.SKIPPED: "yellow",
    StepOutcome.FAILED: "bold red",
}


def _render_summary_table(
    translate: Callable[[str], str], lang: str, reports: Iterable[StepReport]
) -> Table:
    """Construct a table summarising the outcome of every executed step.

    Parameters
    ----------
    translate : Callable[[str], str]
        Translation function for i18n keys.
    lang : str
        Language used for the status labels.
    reports : Iterable[StepReport]
        Reports in execution order.

    Returns
    -------
    Table
        A Rich table with one row per step.
    """
    table = Table(
        title=translate("summary_title"),
        show_header=True,
        header_style="bold blue",
    )
    table.add_column("#", justify="right")
    table.add_column(translate("summary_step"), style="bold")
    table.add_column(translate("summary_status"))
    for index, report in enumerate(reports, start=1):
        table.add_row(
            str(index),
            report.title,
            _status_label(lang, report.outcome.value),
            style=_OUTCOME_STYLES[report.outcome],
        )
    return table


__all__ = [
    "StepOutcome",
    "StepReport",
    "_render_summary_table",
    "_status_label",
    "combine_outcomes",
]
