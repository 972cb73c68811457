"""UI package for the setup command.

Re-exports the output primitives from :mod:`gildsmith_init.setup.ui.basic`
so callers can write ``from gildsmith_init.setup.ui import ui_info``.
"""

from __future__ import annotations

from .basic import (
    ui_error,
    ui_header,
    ui_info,
    ui_step,
    ui_success,
    ui_warning,
)

__all__ = [
    "ui_error",
    "ui_header",
    "ui_info",
    "ui_step",
    "ui_success",
    "ui_warning",
]
