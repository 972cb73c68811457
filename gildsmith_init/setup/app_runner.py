"""Entrypoint and CLI helpers for the setup command.

This module parses the command line, configures logging and the UI
language, and hands over to the step orchestrator. It exposes each stage
as a separate function so tests can drive them individually.

Examples
--------
>>> import gildsmith_init.setup.app_runner as runner
>>> args = runner.parse_cli_args(['--verbose'])
>>> runner.run(args)  # doctest: +SKIP
0
>>> runner.entry_point()  # doctest: +SKIP

"""

from __future__ import annotations

import argparse
import logging
import os
import sys
from pathlib import Path

from gildsmith_init import __version__, config
from gildsmith_init.setup import i18n
from gildsmith_init.setup.pipeline.orchestrator import run_setup
from gildsmith_init.setup.pipeline.steps import SetupContext
from gildsmith_init.setup.ui.basic import ui_error

logger = logging.getLogger(__name__)

EXIT_INTERRUPTED = 130


def configure_logging(log_level: str | None = None, enable_file: bool = True) -> None:
    r"""Configure logging for a setup run.

    Sets up a stderr stream handler at ``log_level`` and, unless disabled, a
    DEBUG file handler under ``config.LOG_DIR``. File handler creation
    errors are logged to the console handler and otherwise ignored, so a
    read-only home directory never stops the setup.

    Parameters
    ----------
    log_level : str | None, optional
        Console level name (e.g. "INFO", "DEBUG"). Defaults to
        ``config.DEFAULT_CONSOLE_LOG_LEVEL``.
    enable_file : bool, optional
        Whether to also write the log file. Ignored (treated as False) when
        the ``DISABLE_FILE_LOGS`` environment variable is set.

    Notes
    -----
    Existing root handlers are removed first, so calling this repeatedly is
    safe.

    Examples
    --------
    >>> configure_logging(log_level="DEBUG", enable_file=False)
    """
    for handler in logging.root.handlers[:]:
        logging.root.removeHandler(handler)

    level_name = (log_level or config.DEFAULT_CONSOLE_LOG_LEVEL).upper()
    console = logging.StreamHandler(sys.stderr)
    console.setLevel(getattr(logging, level_name, logging.WARNING))
    handlers: list[logging.Handler] = [console]

    file_error: OSError | None = None
    if enable_file and not os.environ.get("DISABLE_FILE_LOGS"):
        try:
            config.LOG_DIR.mkdir(parents=True, exist_ok=True)
            file_handler = logging.FileHandler(
                config.LOG_DIR / config.LOG_FILENAME, mode="a", encoding="utf-8"
            )
        except OSError as error:
            file_error = error
        else:
            file_handler.setLevel(logging.DEBUG)
            handlers.insert(0, file_handler)

    logging.basicConfig(level=logging.DEBUG, format=config.LOG_FORMAT, handlers=handlers)
    if file_error is not None:
        logger.warning(f"File logging disabled: {file_error}")


def parse_cli_args(argv: list[str] | None = None) -> argparse.Namespace:
    r"""Parse command-line arguments for the setup command.

    Parameters
    ----------
    argv : list of str or None, optional
        Argument strings to parse (as from ``sys.argv[1:]``). If None,
        defaults to ``sys.argv``.

    Returns
    -------
    argparse.Namespace
        Namespace with ``verbose``, ``lang``, ``core_only``, ``log_level``
        and ``root``.

    Examples
    --------
    >>> ns = parse_cli_args(['-v', '--lang', 'sv'])
    >>> ns.verbose, ns.lang
    (True, 'sv')
    """
    parser = argparse.ArgumentParser(
        prog="gildsmith-init",
        description="Set up the Gildsmith development environment in the current directory.",
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Show the output of git, php, composer and npm as they run",
    )
    parser.add_argument(
        "--lang",
        choices=config.SUPPORTED_LANGUAGES,
        default=i18n.LANG,
        help="Language of the progress messages",
    )
    parser.add_argument(
        "--core-only",
        action="store_true",
        help="Skip the .env, application key and default package steps",
    )
    parser.add_argument(
        "--log-level",
        type=str.upper,
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        default=None,
        help="Console log level (default: WARNING, INFO with --verbose)",
    )
    parser.add_argument(
        "--root",
        type=Path,
        default=None,
        help="Directory to set up (default: the current directory)",
    )
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    return parser.parse_args(argv)


def run(args: argparse.Namespace) -> int:
    r"""Run the setup using parsed CLI arguments.

    Parameters
    ----------
    args : argparse.Namespace
        Parsed arguments, see :func:`parse_cli_args`.

    Returns
    -------
    int
        Process exit status: 0 when every step succeeded or was skipped,
        1 when a step failed, 130 when interrupted.
    """
    i18n.set_language(args.lang)
    context = SetupContext(
        root=(args.root or Path.cwd()).resolve(),
        verbose=bool(args.verbose),
    )
    try:
        return run_setup(context, core_only=bool(args.core_only))
    except KeyboardInterrupt:
        logger.warning("Setup interrupted by user")
        ui_error(i18n.translate("setup_interrupted"))
        return EXIT_INTERRUPTED


def entry_point(argv: list[str] | None = None) -> None:
    """Run the setup command from the command line and exit with its status."""
    args = parse_cli_args(argv)
    configure_logging(args.log_level or ("INFO" if args.verbose else None))
    sys.exit(run(args))


__all__ = [
    "EXIT_INTERRUPTED",
    "configure_logging",
    "entry_point",
    "parse_cli_args",
    "run",
]
