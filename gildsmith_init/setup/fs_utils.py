"""Filesystem helpers for the setup steps.

This module wraps the few filesystem mutations the setup performs, so that
each one is logged the same way. Callers decide whether a mutation is
needed; these helpers only perform it.

Functions
---------
- ``ensure_directory``: Create a directory tree unless it already exists.
- ``copy_template``: Copy a template file to its target.
"""

from __future__ import annotations

import logging
import shutil
from pathlib import Path

from gildsmith_init import config as _config

logger = logging.getLogger(__name__)


def ensure_directory(path: Path, mode: int | None = None) -> bool:
    r"""Create ``path`` and any missing parents.

    Every directory created along the way gets the same permission bits,
    not only the leaf.

    Parameters
    ----------
    path : Path
        Directory to create.
    mode : int | None, optional
        Permission bits for each created directory. Defaults to
        ``config.DIRECTORY_MODE``. The process umask still applies.

    Returns
    -------
    bool
        True when the directory was created, False when it already existed.

    Raises
    ------
    OSError
        If the directory cannot be created, including when a regular file
        already occupies ``path`` or one of its parents.

    Examples
    --------
    >>> from pathlib import Path
    >>> import tempfile
    >>> root = Path(tempfile.mkdtemp())
    >>> ensure_directory(root / "packages" / "composer")
    True
    >>> ensure_directory(root / "packages" / "composer")
    False
    """
    if path.is_dir():
        logger.debug(f"Directory already present: {path}")
        return False

    mode = _config.DIRECTORY_MODE if mode is None else mode
    missing_parents = []
    parent = path.parent
    while not parent.exists():
        missing_parents.append(parent)
        parent = parent.parent
    for directory in reversed(missing_parents):
        directory.mkdir(mode=mode)
    path.mkdir(mode=mode)
    logger.info(f"Created directory: {path}")
    return True


def copy_template(template: Path, target: Path) -> None:
    r"""Copy ``template`` to ``target``.

    Parameters
    ----------
    template : Path
        Source file, for example ``.env.example``.
    target : Path
        Destination file, for example ``.env``.

    Raises
    ------
    OSError
        If the template cannot be read or the target cannot be written.
    """
    shutil.copyfile(template, target)
    logger.info(f"Copied {template} to {target}")


__all__ = ["copy_template", "ensure_directory"]
