"""Internationalization helpers for the setup command.

Provide translation strings and utilities to select and apply the current
UI language. Every user-visible line printed by the steps and the
orchestrator is looked up here.

Typical usage::

    from gildsmith_init.setup.i18n import translate, set_language, LANG

"""

from __future__ import annotations

import logging

from gildsmith_init import config

logger = logging.getLogger(__name__)

LANG: str = config.LANG if config.LANG in config.SUPPORTED_LANGUAGES else "en"

TEXTS: dict[str, dict[str, str]] = {
    "en": {
        "welcome": "Setting up the Gildsmith environment...",
        "setup_complete": "Gildsmith environment setup complete.",
        "setup_complete_with_errors": "Gildsmith environment setup finished with {count} failed step(s). Fix the errors above and run the command again.",
        "setup_interrupted": "Setup interrupted.",
        "summary_title": "Setup summary",
        "summary_step": "Step",
        "summary_status": "Status",
        # Step titles
        "step_pull_project": "Pulling project",
        "step_copy_env": "Copying .env file",
        "step_regenerate_key": "Regenerating the application key",
        "step_create_directories": "Creating directories",
        "step_modify_composer": "Modifying composer.json",
        "step_modify_npm": "Modifying package.json",
        "step_pull_packages": "Pulling default packages",
        "step_install_composer": "Installing Composer dependencies",
        "step_install_npm": "Installing NPM dependencies",
        # Pull project
        "project_exists": "'{path}' directory already exists. Skipping.",
        "project_cloned": "Project cloned successfully.",
        "project_clone_failed": "Failed to clone the repository.",
        # Env file
        "env_exists": "{name} file already exists. Skipping.",
        "env_template_missing": "{name} file not found. Skipping.",
        "env_copied": "{target} file created successfully from {template}.",
        "env_copy_failed": "Failed to copy {template} to {target}.",
        # Application key
        "key_regenerated": "Application key regenerated successfully.",
        "key_failed": "Failed to regenerate the application key.",
        # Directories
        "directory_exists": "'{path}' directory already exists. Skipping.",
        "directory_created": "Created '{path}' directory.",
        "directory_failed": "Failed to create '{path}' directory.",
        # Manifests
        "manifest_missing": "{name} not found at {path}.",
        "manifest_invalid": "{name} could not be updated: {reason}",
        "composer_appended": "Appended the repository configuration to composer.json.",
        "composer_exists": "The repository configuration already exists in composer.json. Skipping.",
        "npm_appended": "Appended the workspace configuration to package.json.",
        "npm_exists": "The workspace configuration already exists in package.json. Skipping.",
        # Auxiliary packages
        "package_exists": "Directory '{path}' already exists. Skipping.",
        "package_cloning": "Cloning {name} into {path}...",
        "package_cloned": "Cloned {name} successfully.",
        "package_clone_failed": "Failed to clone {name}.",
        # Installs
        "composer_installed": "Composer dependencies installed successfully.",
        "composer_install_failed": "Failed to install Composer dependencies.",
        "npm_installed": "NPM dependencies installed successfully.",
        "npm_install_failed": "Failed to install NPM dependencies.",
        # Orchestrator
        "step_crashed": "Unexpected error: {error}",
    },
    "sv": {
        "welcome": "Förbereder Gildsmith-miljön...",
        "setup_complete": "Gildsmith-miljön är klar.",
        "setup_complete_with_errors": "Gildsmith-miljön avslutades med {count} misslyckade steg. Åtgärda felen ovan och kör kommandot igen.",
        "setup_interrupted": "Installationen avbröts.",
        "summary_title": "Sammanfattning",
        "summary_step": "Steg",
        "summary_status": "Status",
        "step_pull_project": "Hämtar projektet",
        "step_copy_env": "Kopierar .env-filen",
        "step_regenerate_key": "Genererar ny applikationsnyckel",
        "step_create_directories": "Skapar kataloger",
        "step_modify_composer": "Uppdaterar composer.json",
        "step_modify_npm": "Uppdaterar package.json",
        "step_pull_packages": "Hämtar standardpaket",
        "step_install_composer": "Installerar Composer-beroenden",
        "step_install_npm": "Installerar NPM-beroenden",
        "project_exists": "Katalogen '{path}' finns redan. Hoppar över.",
        "project_cloned": "Projektet klonades.",
        "project_clone_failed": "Kunde inte klona repot.",
        "env_exists": "Filen {name} finns redan. Hoppar över.",
        "env_template_missing": "Filen {name} hittades inte. Hoppar över.",
        "env_copied": "Filen {target} skapades från {template}.",
        "env_copy_failed": "Kunde inte kopiera {template} till {target}.",
        "key_regenerated": "Applikationsnyckeln genererades.",
        "key_failed": "Kunde inte generera applikationsnyckeln.",
        "directory_exists": "Katalogen '{path}' finns redan. Hoppar över.",
        "directory_created": "Skapade katalogen '{path}'.",
        "directory_failed": "Kunde inte skapa katalogen '{path}'.",
        "manifest_missing": "{name} hittades inte i {path}.",
        "manifest_invalid": "{name} kunde inte uppdateras: {reason}",
        "composer_appended": "Lade till repository-konfigurationen i composer.json.",
        "composer_exists": "Repository-konfigurationen finns redan i composer.json. Hoppar över.",
        "npm_appended": "Lade till workspace-konfigurationen i package.json.",
        "npm_exists": "Workspace-konfigurationen finns redan i package.json. Hoppar över.",
        "package_exists": "Katalogen '{path}' finns redan. Hoppar över.",
        "package_cloning": "Klonar {name} till {path}...",
        "package_cloned": "Klonade {name}.",
        "package_clone_failed": "Kunde inte klona {name}.",
        "composer_installed": "Composer-beroendena installerades.",
        "composer_install_failed": "Kunde inte installera Composer-beroenden.",
        "npm_installed": "NPM-beroendena installerades.",
        "npm_install_failed": "Kunde inte installera NPM-beroenden.",
        "step_crashed": "Oväntat fel: {error}",
    },
}


def translate(key: str, **kwargs: object) -> str:
    r"""Translate a UI key to the current language.

    Looks the key up for the current ``LANG``, falling back to English and
    finally to the key itself. Keyword arguments are substituted into the
    text with :meth:`str.format`.

    Parameters
    ----------
    key : str
        The string key for the UI message to be translated.
    **kwargs : object
        Values for the ``{placeholders}`` in the message.

    Returns
    -------
    str
        The translated string if available, or the key itself as fallback.

    Examples
    --------
    >>> translate("step_pull_project")
    'Pulling project'
    >>> translate("directory_created", path="packages/npm")
    "Created 'packages/npm' directory."
    >>> translate("UNKNOWN_KEY")
    'UNKNOWN_KEY'
    """
    text = TEXTS.get(LANG, {}).get(key) or TEXTS["en"].get(key, key)
    if not kwargs:
        return text
    try:
        return text.format(**kwargs)
    except (KeyError, IndexError):
        logger.warning("Missing placeholder values for message key %r", key)
        return text


_ = translate


def set_language(lang: str) -> str:
    r"""Select the UI language.

    Parameters
    ----------
    lang : str
        Language code, one of ``config.SUPPORTED_LANGUAGES``.

    Returns
    -------
    str
        The language now in effect. Unknown codes select English.

    Examples
    --------
    >>> set_language("sv")
    'sv'
    >>> set_language("xx")
    'en'
    """
    global LANG
    if lang not in TEXTS:
        logger.warning("Unsupported UI language %r, using English", lang)
        lang = "en"
    LANG = lang
    return LANG


__all__ = ["LANG", "TEXTS", "_", "set_language", "translate"]
