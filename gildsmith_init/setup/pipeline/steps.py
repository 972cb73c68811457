"""Setup steps.

Each step is a small object with a translated title and a ``run`` method
that checks the current state, acts only when something is missing, prints
its own result line(s) and returns a :class:`StepOutcome`:

- ``SKIPPED`` with a warning when the state was already in place,
- ``OK`` with an info line when the step changed something,
- ``FAILED`` with an error line when a precondition is missing, a command
  exits non-zero or a manifest cannot be merged.

Steps never raise for expected failures. All paths are resolved against
``SetupContext.root``, so a run can target any directory.
"""

from __future__ import annotations

import logging
from collections.abc import Callable, Mapping, Sequence
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

from gildsmith_init import config
from gildsmith_init.exceptions import AppError
from gildsmith_init.setup import fs_utils, manifest
from gildsmith_init.setup.i18n import _
from gildsmith_init.setup.ui.basic import ui_error, ui_info, ui_warning

from .run import run_command
from .status import StepOutcome, combine_outcomes

logger = logging.getLogger(__name__)


@dataclass
class SetupContext:
    """Where and how a setup run operates.

    Attributes
    ----------
    root : Path
        Working root holding the project and ``packages/`` directories.
    verbose : bool
        Stream subprocess output to the console.
    """

    root: Path = field(default_factory=Path.cwd)
    verbose: bool = False

    @property
    def project_dir(self) -> Path:
        return self.root / config.PROJECT_DIR_NAME

    @property
    def env_file(self) -> Path:
        return self.project_dir / config.ENV_FILENAME

    @property
    def env_example_file(self) -> Path:
        return self.project_dir / config.ENV_EXAMPLE_FILENAME

    @property
    def composer_manifest(self) -> Path:
        return self.project_dir / config.COMPOSER_MANIFEST_FILENAME

    @property
    def npm_manifest(self) -> Path:
        return self.project_dir / config.NPM_MANIFEST_FILENAME

    def relative(self, path: Path) -> str:
        """Return ``path`` relative to the root for display, as POSIX text."""
        try:
            return path.relative_to(self.root).as_posix()
        except ValueError:
            return str(path)


class Step:
    """Base class for one idempotent unit of setup work."""

    key: str = ""
    optional: bool = False

    @property
    def title(self) -> str:
        return _(self.key)

    def run(self, context: SetupContext) -> StepOutcome:
        raise NotImplementedError

    def __repr__(self) -> str:
        return f"{type(self).__name__}()"


def _clone(url: str, target: Path, context: SetupContext) -> bool:
    argv = [*config.GIT_CLONE_COMMAND, url, context.relative(target)]
    return run_command(argv, cwd=context.root, verbose=context.verbose)


class PullProjectStep(Step):
    """Clone the project repository unless the project directory exists."""

    key = "step_pull_project"

    def __init__(self, url: str = config.PROJECT_REPOSITORY_URL) -> None:
        self.url = url

    def run(self, context: SetupContext) -> StepOutcome:
        if context.project_dir.is_dir():
            ui_warning(_("project_exists", path=context.relative(context.project_dir)))
            return StepOutcome.SKIPPED

        if _clone(self.url, context.project_dir, context):
            ui_info(_("project_cloned"))
            return StepOutcome.OK
        ui_error(_("project_clone_failed"))
        return StepOutcome.FAILED


class CopyEnvFileStep(Step):
    """Create the project's ``.env`` from ``.env.example``."""

    key = "step_copy_env"
    optional = True

    def run(self, context: SetupContext) -> StepOutcome:
        target, template = context.env_file, context.env_example_file

        if target.exists():
            ui_warning(_("env_exists", name=target.name))
            return StepOutcome.SKIPPED
        if not template.is_file():
            ui_error(_("env_template_missing", name=template.name))
            return StepOutcome.FAILED

        try:
            fs_utils.copy_template(template, target)
        except OSError as error:
            logger.error(f"Copying {template} to {target} failed: {error}")
            ui_error(_("env_copy_failed", template=template.name, target=target.name))
            return StepOutcome.FAILED
        ui_info(_("env_copied", target=target.name, template=template.name))
        return StepOutcome.OK


class CommandStep(Step):
    """Run one command inside the project directory, without a pre-check."""

    argv: Sequence[str] = ()
    success_key: str = ""
    failure_key: str = ""

    def run(self, context: SetupContext) -> StepOutcome:
        if run_command(self.argv, cwd=context.project_dir, verbose=context.verbose):
            ui_info(_(self.success_key))
            return StepOutcome.OK
        ui_error(_(self.failure_key))
        return StepOutcome.FAILED


class RegenerateAppKeyStep(CommandStep):
    key = "step_regenerate_key"
    optional = True
    argv = config.KEY_GENERATE_COMMAND
    success_key = "key_regenerated"
    failure_key = "key_failed"


class CreateDirectoriesStep(Step):
    """Create the package staging directories, one report per directory."""

    key = "step_create_directories"

    def __init__(self, directories: Sequence[Path] = config.STAGING_DIRECTORIES) -> None:
        self.directories = tuple(directories)

    def _ensure(self, path: Path, context: SetupContext) -> StepOutcome:
        display = context.relative(path)
        if path.is_dir():
            ui_warning(_("directory_exists", path=display))
            return StepOutcome.SKIPPED
        try:
            fs_utils.ensure_directory(path)
        except OSError as error:
            logger.error(f"Creating {path} failed: {error}")
            ui_error(_("directory_failed", path=display))
            return StepOutcome.FAILED
        ui_info(_("directory_created", path=display))
        return StepOutcome.OK

    def run(self, context: SetupContext) -> StepOutcome:
        return combine_outcomes(
            [self._ensure(context.root / directory, context) for directory in self.directories]
        )


class ManifestStep(Step):
    """Merge one entry into a JSON manifest inside the project."""

    appended_key: str = ""
    exists_key: str = ""

    def manifest_path(self, context: SetupContext) -> Path:
        raise NotImplementedError

    def merge(self, path: Path) -> bool:
        raise NotImplementedError

    def run(self, context: SetupContext) -> StepOutcome:
        path = self.manifest_path(context)
        if not path.is_file():
            ui_error(_("manifest_missing", name=path.name, path=context.relative(path)))
            return StepOutcome.FAILED

        try:
            appended = self.merge(path)
        except AppError as error:
            logger.error(f"Merging {path} failed: {error.to_dict()}")
            ui_error(_("manifest_invalid", name=path.name, reason=error.message))
            return StepOutcome.FAILED

        if appended:
            ui_info(_(self.appended_key))
            return StepOutcome.OK
        ui_warning(_(self.exists_key))
        return StepOutcome.SKIPPED


class ModifyComposerJsonStep(ManifestStep):
    """Register ``packages/composer`` as a symlinked path repository."""

    key = "step_modify_composer"
    appended_key = "composer_appended"
    exists_key = "composer_exists"

    def __init__(self, repository: Mapping[str, Any] | None = None) -> None:
        self.repository = dict(repository or config.COMPOSER_PATH_REPOSITORY)

    def manifest_path(self, context: SetupContext) -> Path:
        return context.composer_manifest

    def merge(self, path: Path) -> bool:
        return manifest.ensure_path_repository(path, self.repository)


class ModifyPackageJsonStep(ManifestStep):
    """Register ``packages/npm`` as an NPM workspace glob."""

    key = "step_modify_npm"
    appended_key = "npm_appended"
    exists_key = "npm_exists"

    def __init__(self, workspace: str = config.NPM_WORKSPACE_GLOB) -> None:
        self.workspace = workspace

    def manifest_path(self, context: SetupContext) -> Path:
        return context.npm_manifest

    def merge(self, path: Path) -> bool:
        return manifest.ensure_workspace(path, self.workspace)


class PullPackagesStep(Step):
    """Clone the default local packages into the Composer staging directory."""

    key = "step_pull_packages"
    optional = True

    def __init__(
        self,
        packages: Mapping[str, str] | None = None,
        vendor: str = config.AUXILIARY_PACKAGES_VENDOR,
    ) -> None:
        self.packages = dict(config.AUXILIARY_PACKAGES if packages is None else packages)
        self.vendor = vendor

    def _pull(self, name: str, url: str, context: SetupContext) -> StepOutcome:
        target = context.root / config.COMPOSER_PACKAGES_DIR / self.vendor / name
        display = context.relative(target)
        if target.is_dir():
            ui_warning(_("package_exists", path=display))
            return StepOutcome.SKIPPED

        ui_info(_("package_cloning", name=name, path=display))
        if _clone(url, target, context):
            ui_info(_("package_cloned", name=name))
            return StepOutcome.OK
        ui_error(_("package_clone_failed", name=name))
        return StepOutcome.FAILED

    def run(self, context: SetupContext) -> StepOutcome:
        return combine_outcomes(
            [self._pull(name, url, context) for name, url in self.packages.items()]
        )


class InstallComposerDependenciesStep(CommandStep):
    key = "step_install_composer"
    argv = config.COMPOSER_INSTALL_COMMAND
    success_key = "composer_installed"
    failure_key = "composer_install_failed"


class InstallNpmDependenciesStep(CommandStep):
    key = "step_install_npm"
    argv = config.NPM_INSTALL_COMMAND
    success_key = "npm_installed"
    failure_key = "npm_install_failed"


_DEFAULT_STEP_TYPES: tuple[Callable[[], Step], ...] = (
    PullProjectStep,
    CopyEnvFileStep,
    RegenerateAppKeyStep,
    CreateDirectoriesStep,
    ModifyComposerJsonStep,
    ModifyPackageJsonStep,
    PullPackagesStep,
    InstallComposerDependenciesStep,
    InstallNpmDependenciesStep,
)


def default_steps(core_only: bool = False) -> list[Step]:
    r"""Build the step list in execution order.

    The order is fixed: later steps rely on what earlier ones create (the
    project directory, its manifests, the staging directories).

    Parameters
    ----------
    core_only : bool, optional
        Leave out the optional steps (env file, application key, default
        packages).

    Returns
    -------
    list[Step]
        Fresh step instances.
    """
    steps = [factory() for factory in _DEFAULT_STEP_TYPES]
    if core_only:
        steps = [step for step in steps if not step.optional]
    return steps


__all__ = [
    "CommandStep",
    "CopyEnvFileStep",
    "CreateDirectoriesStep",
    "InstallComposerDependenciesStep",
    "InstallNpmDependenciesStep",
    "ManifestStep",
    "ModifyComposerJsonStep",
    "ModifyPackageJsonStep",
    "PullPackagesStep",
    "PullProjectStep",
    "RegenerateAppKeyStep",
    "SetupContext",
    "Step",
    "default_steps",
]
