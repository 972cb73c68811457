"""Global configuration constants for the environment bootstrap.

Defines repository locations, directory layout, manifest fragments and
logging defaults used across the setup steps. Paths are relative to the
working root the command is started from.
"""

from __future__ import annotations

import os
from pathlib import Path

# Core project
PROJECT_DIR_NAME: str = "gildsmith"
PROJECT_REPOSITORY_URL: str = "git@github.com:gildsmith/gildsmith.git"

# Env file handling (relative to the project directory)
ENV_FILENAME: str = ".env"
ENV_EXAMPLE_FILENAME: str = ".env.example"

# Development environment layout (relative to the working root)
PACKAGES_DIR: Path = Path("packages")
COMPOSER_PACKAGES_DIR: Path = PACKAGES_DIR / "composer"
NPM_PACKAGES_DIR: Path = PACKAGES_DIR / "npm"
STAGING_DIRECTORIES: tuple[Path, ...] = (COMPOSER_PACKAGES_DIR, NPM_PACKAGES_DIR)
DIRECTORY_MODE: int = 0o755

# Packages cloned next to the project, keyed by package name
AUXILIARY_PACKAGES_VENDOR: str = "gildsmith"
AUXILIARY_PACKAGES: dict[str, str] = {
    "core-api": "git@github.com:gildsmith/core-api.git",
    "profile-api": "git@github.com:gildsmith/profile-api.git",
}

# Composer manifest
COMPOSER_MANIFEST_FILENAME: str = "composer.json"
COMPOSER_REPOSITORIES_KEY: str = "repositories"
COMPOSER_PATH_REPOSITORY: dict[str, object] = {
    "type": "path",
    "url": "../packages/composer/*/*",
    "symlink": True,
}

# NPM manifest
NPM_MANIFEST_FILENAME: str = "package.json"
NPM_WORKSPACES_KEY: str = "workspaces"
NPM_WORKSPACE_GLOB: str = "../packages/npm/*/*"

# JSON serialisation of rewritten manifests
MANIFEST_JSON_INDENT: int = 4

# External commands
GIT_CLONE_COMMAND: tuple[str, ...] = ("git", "clone")
KEY_GENERATE_COMMAND: tuple[str, ...] = ("php", "artisan", "key:generate")
COMPOSER_INSTALL_COMMAND: tuple[str, ...] = ("composer", "install")
NPM_INSTALL_COMMAND: tuple[str, ...] = ("npm", "install")

# Logging
LOG_DIR: Path = Path.home() / ".gildsmith-init" / "logs"
LOG_FILENAME: str = "gildsmith_init.log"
LOG_FORMAT: str = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
DEFAULT_CONSOLE_LOG_LEVEL: str = "WARNING"

# UI defaults
SUPPORTED_LANGUAGES: tuple[str, ...] = ("en", "sv")
LANG: str = os.environ.get("LANG_UI", "en")
