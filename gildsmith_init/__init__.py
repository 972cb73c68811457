"""Gildsmith development environment bootstrap.

This package provides the ``gildsmith-init`` command, which prepares a local
Gildsmith workspace: it clones the project repository, lays out the package
staging directories, merges the local package sources into the Composer and
NPM manifests and installs the project dependencies.

Package Structure
-----------------
- `setup/`:
    Console output, translations, manifest merging, subprocess running and
    the step orchestrator.
- `config.py`: All configuration constants (repositories, paths, commands), as UPPER_SNAKE_CASE.
- `exceptions.py`: Project-specific exception classes.

Every setup step is idempotent; re-running the command after a partial or
complete run only skips what is already in place.

Examples
--------
Basic import pattern:

>>> import gildsmith_init
>>> gildsmith_init.__version__
'0.1.0'

"""

__version__ = "0.1.0"
