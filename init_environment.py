"""Minimal runner for the Gildsmith environment setup.

This file's single responsibility is to provide a tiny entrypoint that
delegates execution to ``gildsmith_init.setup.app_runner``, so the setup can
be started from a checkout without installing the package.

Usage:
    python init_environment.py [-v] [--lang en|sv] [--core-only]

"""

from __future__ import annotations


def entry_point(argv: list[str] | None = None) -> None:
    """Run the setup command.

    Import is performed inside the function to avoid importing the whole
    application at module import time.
    """
    from gildsmith_init.setup.app_runner import entry_point as app_entry_point

    app_entry_point(argv)


if __name__ == "__main__":
    entry_point()
