"""Controlled subprocess runner for the setup steps.

This module's sole responsibility is to launch external tools (``git``,
``php``, ``composer``, ``npm``) as child processes in an explicit working
directory and to report whether they succeeded.

Output handling
---------------
- Quiet (default): stdout and stderr are captured. They are logged at
  DEBUG, and at ERROR when the command fails, so the log file keeps the
  details while the console only shows the step's own result line.
- Verbose: stdout and stderr are merged and echoed line by line to the
  console as the child produces them.

Error & Result Branches
-----------------------
- Success is decided by the exit code alone; output text is never parsed.
- A binary that cannot be found or a working directory that does not exist
  is a failed run, logged and returned as ``False``.
- Output bytes that are not valid in the locale encoding are replaced,
  never raised.
- No timeout: a child that never exits blocks the run.

"""

from __future__ import annotations

import logging
import subprocess
import sys
from collections.abc import Sequence
from pathlib import Path

logger = logging.getLogger(__name__)


def _stream_output(proc: subprocess.Popen[str]) -> None:
    """Echo child output to stdout as it arrives."""
    assert proc.stdout is not None
    for line in proc.stdout:
        sys.stdout.write(line)
        sys.stdout.flush()


def run_command(
    argv: Sequence[str],
    cwd: Path,
    verbose: bool = False,
) -> bool:
    r"""Run an external command and report whether it exited with status 0.

    Parameters
    ----------
    argv : Sequence[str]
        Program and arguments, e.g. ``("composer", "install")``.
    cwd : Path
        Working directory of the child process.
    verbose : bool, optional
        Stream the child's output to the console. Defaults to False, in
        which case output is captured and only logged.

    Returns
    -------
    bool
        True if the child exited with status 0, False otherwise.

    Examples
    --------
    >>> from pathlib import Path
    >>> run_command(["git", "--version"], Path("."))  # doctest: +SKIP
    True
    """
    command = [str(part) for part in argv]
    display = " ".join(command)
    logger.info(f"Running '{display}' in {cwd}")

    try:
        if verbose:
            with subprocess.Popen(
                command,
                cwd=cwd,
                text=True,
                errors="replace",
                stdout=subprocess.PIPE,
                stderr=subprocess.STDOUT,
                bufsize=1,
            ) as proc:
                _stream_output(proc)
                return_code = proc.wait()
            output = ""
        else:
            result = subprocess.run(
                command,
                cwd=cwd,
                check=False,
                capture_output=True,
                text=True,
                errors="replace",
            )
            return_code = result.returncode
            output = (result.stdout or "") + (result.stderr or "")
            if output:
                logger.debug(f"Output of '{display}':\n{output}")
    except OSError as error:
        logger.error(f"Could not run '{display}' in {cwd}: {error}")
        return False

    if return_code == 0:
        logger.info(f"'{display}' finished successfully")
        return True

    logger.error(f"'{display}' failed (Return code: {return_code})")
    if output:
        logger.error("Subprocess output:\n" + output)
    return False


__all__ = ["run_command"]
