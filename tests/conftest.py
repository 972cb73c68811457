"""Pytest configuration for the setup command tests.

- Forces ``DISABLE_FILE_LOGS=1`` so tests never write the log file.
- Widens the Rich console so captured summary tables are not squeezed.
- Ensures the project root is available on ``sys.path`` for imports.
- Provides a fake command runner so no real git/php/composer/npm runs.
"""

import json
import os
import sys
from pathlib import Path

os.environ["DISABLE_FILE_LOGS"] = "1"
os.environ["COLUMNS"] = "200"
os.environ.pop("FORCE_COLOR", None)

ROOT = Path(__file__).resolve().parents[1]
root_str = str(ROOT)
if root_str not in sys.path:
    sys.path.insert(0, root_str)

import pytest  # noqa: E402

from gildsmith_init.setup import i18n  # noqa: E402
from gildsmith_init.setup.pipeline import steps  # noqa: E402

COMPOSER_JSON = {
    "name": "gildsmith/gildsmith",
    "type": "project",
    "require": {"php": "^8.2", "laravel/framework": "^11.0"},
    "repositories": [{"type": "vcs", "url": "https://github.com/gildsmith/theme"}],
    "minimum-stability": "stable",
}

PACKAGE_JSON = {
    "private": True,
    "type": "module",
    "scripts": {"dev": "vite", "build": "vite build"},
    "devDependencies": {"vite": "^5.0"},
}


def write_project(project_dir: Path) -> None:
    """Populate ``project_dir`` the way a fresh clone of the project looks."""
    project_dir.mkdir(parents=True, exist_ok=True)
    (project_dir / "composer.json").write_text(json.dumps(COMPOSER_JSON, indent=4))
    (project_dir / "package.json").write_text(json.dumps(PACKAGE_JSON, indent=4))
    (project_dir / ".env.example").write_text("APP_NAME=Gildsmith\nAPP_KEY=\n")


class FakeRunner:
    """Stand-in for ``run_command`` that records calls.

    ``git clone`` creates the destination directory (and, for the main
    project, its manifests). Commands whose program or subcommand is listed
    in ``failing`` return False without side effects.
    """

    def __init__(self) -> None:
        self.calls: list[tuple[list[str], Path, bool]] = []
        self.failing: set[str] = set()

    def __call__(self, argv, cwd, verbose=False):
        argv = list(argv)
        self.calls.append((argv, Path(cwd), verbose))
        if any(part in self.failing for part in argv[:2]):
            return False
        if argv[:2] == ["git", "clone"]:
            target = Path(cwd) / argv[3]
            if target.name == "gildsmith":
                write_project(target)
            else:
                target.mkdir(parents=True)
        return True

    def commands(self) -> list[str]:
        return [" ".join(argv) for argv, _, _ in self.calls]


@pytest.fixture
def fake_runner(monkeypatch):
    runner = FakeRunner()
    monkeypatch.setattr(steps, "run_command", runner)
    return runner


@pytest.fixture(autouse=True)
def _english_ui():
    previous = i18n.LANG
    i18n.set_language("en")
    yield
    i18n.LANG = previous


@pytest.fixture
def make_project():
    """Return a helper that lays out a freshly cloned project directory."""
    return write_project
