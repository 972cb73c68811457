"""JSON manifest read-merge-write helpers.

The setup owns exactly one entry in each of two manifests inside the
project: a path repository in ``composer.json`` and a workspace glob in
``package.json``. Both merges share one shape, implemented by
:func:`merge_list_entry`:

1. read and parse the whole file as a JSON object,
2. make sure the target field exists (an empty list when absent or null),
3. look for an entry equal to the new one under the manifest's equality rule,
4. append and write the full document back only when no match was found.

Everything else in the document is preserved as parsed, in its original
key order. A manifest that already holds the entry is never rewritten, so
its bytes and modification time stay the same.

Examples
--------
>>> from pathlib import Path
>>> import tempfile
>>> manifest = Path(tempfile.mkdtemp()) / "package.json"
>>> _ = manifest.write_text('{"name": "app"}')
>>> ensure_workspace(manifest, "../packages/npm/*/*")
True
>>> ensure_workspace(manifest, "../packages/npm/*/*")
False
"""

from __future__ import annotations

import json
import logging
import os
import shutil
import tempfile
from collections.abc import Callable, Mapping
from pathlib import Path
from typing import Any

from gildsmith_init import config as _config
from gildsmith_init.exceptions import (
    ManifestFormatError,
    ManifestNotFoundError,
    ManifestWriteError,
)

logger = logging.getLogger(__name__)


def load_manifest(path: Path) -> dict[str, Any]:
    r"""Read and parse a JSON manifest.

    Parameters
    ----------
    path : Path
        Manifest file location.

    Returns
    -------
    dict[str, Any]
        The parsed top-level JSON object.

    Raises
    ------
    ManifestNotFoundError
        If ``path`` is not an existing file.
    ManifestFormatError
        If the file cannot be read, is not valid JSON, or its top level is
        not a JSON object.
    """
    if not path.is_file():
        raise ManifestNotFoundError(
            f"{path.name} not found at {path}", context={"path": str(path)}
        )
    try:
        text = path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as exc:
        raise ManifestFormatError(
            f"cannot read {path.name}: {exc}", context={"path": str(path)}
        ) from exc
    try:
        document = json.loads(text)
    except json.JSONDecodeError as exc:
        raise ManifestFormatError(
            f"invalid JSON in {path.name} (line {exc.lineno}, column {exc.colno}): {exc.msg}",
            context={"path": str(path), "line": exc.lineno, "column": exc.colno},
        ) from exc
    if not isinstance(document, dict):
        raise ManifestFormatError(
            f"{path.name} must contain a JSON object at the top level",
            context={"path": str(path), "type": type(document).__name__},
        )
    return document


def dump_manifest(document: Mapping[str, Any]) -> str:
    """Serialise a manifest with pretty indentation and unescaped slashes and unicode."""
    return (
        json.dumps(document, indent=_config.MANIFEST_JSON_INDENT, ensure_ascii=False)
        + "\n"
    )


def write_manifest(path: Path, document: Mapping[str, Any]) -> None:
    r"""Write a manifest document back to ``path``.

    The text goes to a temporary file in the same directory, which then
    replaces ``path`` in one rename. A failed write leaves the original
    manifest byte-for-byte intact. The original file's permission bits are
    kept.

    Raises
    ------
    ManifestWriteError
        If the file cannot be written.
    """
    text = dump_manifest(document)
    temp_path: Path | None = None
    try:
        with tempfile.NamedTemporaryFile(
            "w",
            encoding="utf-8",
            dir=path.parent,
            prefix=f".{path.name}.",
            suffix=".tmp",
            delete=False,
        ) as handle:
            temp_path = Path(handle.name)
            handle.write(text)
        if path.exists():
            shutil.copymode(path, temp_path)
        os.replace(temp_path, path)
    except OSError as exc:
        if temp_path is not None:
            temp_path.unlink(missing_ok=True)
        raise ManifestWriteError(
            f"cannot write {path.name}: {exc}", context={"path": str(path)}
        ) from exc
    logger.info(f"Wrote {path}")


def merge_list_entry(
    path: Path,
    key: str,
    entry: Any,
    matches: Callable[[Any], bool],
) -> bool:
    r"""Append ``entry`` to the list field ``key`` of a manifest unless present.

    Parameters
    ----------
    path : Path
        Manifest file location.
    key : str
        Top-level field holding the list (``repositories``, ``workspaces``).
    entry : Any
        Value to append.
    matches : Callable[[Any], bool]
        Equality rule; called on each existing list item, True means the
        entry is already present.

    Returns
    -------
    bool
        True when the entry was appended and the file rewritten, False when
        an equal entry already existed and nothing was written.

    Raises
    ------
    ManifestNotFoundError
        If the manifest is missing. Nothing is written.
    ManifestFormatError
        If the manifest cannot be parsed or ``key`` is not a list. Nothing
        is written.
    ManifestWriteError
        If the merged document cannot be written.
    """
    document = load_manifest(path)
    items = document.get(key)
    if items is None:
        items = document[key] = []
    elif not isinstance(items, list):
        raise ManifestFormatError(
            f"'{key}' in {path.name} must be a list, found {type(items).__name__}",
            context={"path": str(path), "key": key},
        )

    if any(matches(item) for item in items):
        logger.debug(f"Entry already present in {path} under '{key}'")
        return False

    items.append(entry)
    write_manifest(path, document)
    return True


def ensure_path_repository(
    path: Path, repository: Mapping[str, Any] | None = None
) -> bool:
    r"""Make sure ``composer.json`` declares the local path repository.

    Two descriptors are equal when both their ``type`` and ``url`` match;
    other descriptor fields such as ``symlink`` do not take part.

    Parameters
    ----------
    path : Path
        Location of ``composer.json``.
    repository : Mapping[str, Any] | None, optional
        Descriptor to ensure. Defaults to ``config.COMPOSER_PATH_REPOSITORY``.

    Returns
    -------
    bool
        True when the descriptor was appended, False when already present.
    """
    descriptor = dict(repository or _config.COMPOSER_PATH_REPOSITORY)

    def _same_repository(item: Any) -> bool:
        return (
            isinstance(item, dict)
            and item.get("type") == descriptor.get("type")
            and item.get("url") == descriptor.get("url")
        )

    return merge_list_entry(
        path, _config.COMPOSER_REPOSITORIES_KEY, descriptor, _same_repository
    )


def ensure_workspace(path: Path, workspace: str | None = None) -> bool:
    r"""Make sure ``package.json`` lists the local workspace glob.

    Parameters
    ----------
    path : Path
        Location of ``package.json``.
    workspace : str | None, optional
        Glob to ensure. Defaults to ``config.NPM_WORKSPACE_GLOB``.

    Returns
    -------
    bool
        True when the glob was appended, False when already present.
    """
    glob = workspace or _config.NPM_WORKSPACE_GLOB
    return merge_list_entry(
        path, _config.NPM_WORKSPACES_KEY, glob, lambda item: item == glob
    )


__all__ = [
    "dump_manifest",
    "ensure_path_repository",
    "ensure_workspace",
    "load_manifest",
    "merge_list_entry",
    "write_manifest",
]
