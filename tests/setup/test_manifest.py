"""Tests for `gildsmith_init.setup.manifest`."""

import json
import os
import tempfile
from pathlib import Path

import pytest

from gildsmith_init.exceptions import (
    ManifestFormatError,
    ManifestNotFoundError,
    ManifestWriteError,
)
from gildsmith_init.setup import manifest

REPOSITORY = {"type": "path", "url": "../packages/composer/*/*", "symlink": True}


def _write(path: Path, document) -> Path:
    path.write_text(json.dumps(document, indent=4))
    return path


def test_ensure_path_repository_appends_and_preserves_fields(tmp_path: Path):
    path = _write(
        tmp_path / "composer.json",
        {
            "name": "gildsmith/gildsmith",
            "require": {"php": "^8.2"},
            "repositories": [{"type": "vcs", "url": "https://example.test/x"}],
            "extra": {"laravel": {"dont-discover": []}},
        },
    )

    assert manifest.ensure_path_repository(path) is True

    document = json.loads(path.read_text())
    assert list(document) == ["name", "require", "repositories", "extra"]
    assert document["require"] == {"php": "^8.2"}
    assert document["extra"] == {"laravel": {"dont-discover": []}}
    assert document["repositories"] == [
        {"type": "vcs", "url": "https://example.test/x"},
        REPOSITORY,
    ]


def test_ensure_path_repository_creates_missing_field(tmp_path: Path):
    path = _write(tmp_path / "composer.json", {"name": "app"})
    assert manifest.ensure_path_repository(path) is True
    assert json.loads(path.read_text())["repositories"] == [REPOSITORY]


def test_ensure_path_repository_treats_null_field_as_missing(tmp_path: Path):
    path = _write(tmp_path / "composer.json", {"repositories": None})
    assert manifest.ensure_path_repository(path) is True
    assert json.loads(path.read_text())["repositories"] == [REPOSITORY]


def test_ensure_path_repository_matches_on_type_and_url_only(tmp_path: Path):
    existing = {"type": "path", "url": "../packages/composer/*/*", "symlink": False}
    path = _write(tmp_path / "composer.json", {"repositories": [existing]})
    before = path.read_bytes()

    assert manifest.ensure_path_repository(path) is False
    assert path.read_bytes() == before


def test_ensure_path_repository_different_url_is_not_a_match(tmp_path: Path):
    path = _write(
        tmp_path / "composer.json",
        {"repositories": [{"type": "path", "url": "../elsewhere/*"}, "junk"]},
    )
    assert manifest.ensure_path_repository(path) is True
    repositories = json.loads(path.read_text())["repositories"]
    assert repositories[-1] == REPOSITORY
    assert len(repositories) == 3


def test_repeated_merges_keep_a_single_entry(tmp_path: Path):
    path = _write(tmp_path / "composer.json", {"name": "app"})
    for _ in range(5):
        manifest.ensure_path_repository(path)
    repositories = json.loads(path.read_text())["repositories"]
    assert repositories.count(REPOSITORY) == 1


def test_ensure_workspace_appends_once(tmp_path: Path):
    path = _write(tmp_path / "package.json", {"private": True, "workspaces": ["apps/*"]})

    assert manifest.ensure_workspace(path) is True
    first = path.read_bytes()
    assert manifest.ensure_workspace(path) is False
    assert path.read_bytes() == first
    assert json.loads(first)["workspaces"] == ["apps/*", "../packages/npm/*/*"]


def test_ensure_workspace_existing_glob_leaves_file_untouched(tmp_path: Path):
    path = tmp_path / "package.json"
    path.write_text('{"workspaces": ["../packages/npm/*/*"]}')
    mtime = path.stat().st_mtime_ns

    assert manifest.ensure_workspace(path) is False
    assert path.read_text() == '{"workspaces": ["../packages/npm/*/*"]}'
    assert path.stat().st_mtime_ns == mtime


def test_written_manifest_is_pretty_with_unescaped_slashes(tmp_path: Path):
    path = _write(tmp_path / "package.json", {"name": "café"})
    manifest.ensure_workspace(path)
    text = path.read_text(encoding="utf-8")

    assert '    "workspaces": [' in text
    assert '"../packages/npm/*/*"' in text
    assert "\\/" not in text
    assert "café" in text
    assert text.endswith("}\n")


def test_missing_manifest_raises_and_writes_nothing(tmp_path: Path):
    path = tmp_path / "composer.json"
    with pytest.raises(ManifestNotFoundError) as excinfo:
        manifest.ensure_path_repository(path)
    assert excinfo.value.code == "MANIFEST_NOT_FOUND"
    assert not path.exists()


@pytest.mark.parametrize(
    "content",
    ['{"name": "app",', "[1, 2, 3]", '"just a string"'],
)
def test_malformed_manifest_raises_format_error(tmp_path: Path, content: str):
    path = tmp_path / "package.json"
    path.write_text(content)
    with pytest.raises(ManifestFormatError):
        manifest.ensure_workspace(path)
    assert path.read_text() == content


def test_non_list_target_field_is_rejected(tmp_path: Path):
    path = _write(tmp_path / "package.json", {"workspaces": {"packages": ["apps/*"]}})
    before = path.read_bytes()
    with pytest.raises(ManifestFormatError) as excinfo:
        manifest.ensure_workspace(path)
    assert "must be a list" in excinfo.value.message
    assert path.read_bytes() == before


def test_write_failure_is_wrapped(tmp_path: Path, monkeypatch):
    path = _write(tmp_path / "package.json", {})

    def fail_replace(src, dst):
        raise PermissionError("read-only")

    monkeypatch.setattr(manifest.os, "replace", fail_replace)
    with pytest.raises(ManifestWriteError) as excinfo:
        manifest.ensure_workspace(path)
    assert excinfo.value.to_dict()["context"]["path"] == str(path)


def test_failed_write_keeps_original_manifest_intact(tmp_path: Path, monkeypatch):
    path = _write(tmp_path / "composer.json", {"name": "gildsmith/gildsmith"})
    before = path.read_bytes()
    real_tempfile = tempfile.NamedTemporaryFile

    def disk_full_tempfile(*args, **kwargs):
        handle = real_tempfile(*args, **kwargs)

        def write(text):
            handle.file.write(text[:10])
            raise OSError(28, "No space left on device")

        handle.write = write
        return handle

    monkeypatch.setattr(tempfile, "NamedTemporaryFile", disk_full_tempfile)
    with pytest.raises(ManifestWriteError):
        manifest.ensure_path_repository(path)

    assert path.read_bytes() == before
    assert sorted(p.name for p in tmp_path.iterdir()) == ["composer.json"]


@pytest.mark.skipif(os.name == "nt", reason="POSIX permission bits")
def test_rewrite_keeps_file_permissions(tmp_path: Path):
    path = _write(tmp_path / "package.json", {"name": "app"})
    path.chmod(0o640)

    assert manifest.ensure_workspace(path) is True

    assert path.stat().st_mode & 0o777 == 0o640
    assert sorted(p.name for p in tmp_path.iterdir()) == ["package.json"]


def test_load_manifest_keeps_key_order(tmp_path: Path):
    path = tmp_path / "composer.json"
    path.write_text('{"z": 1, "a": 2, "m": {"y": 1, "b": 2}}')
    document = manifest.load_manifest(path)
    assert list(document) == ["z", "a", "m"]
    assert list(document["m"]) == ["y", "b"]
