"""Main scaffolding orchestrator.

Takes a ``ProjectConfig`` and materialises the MekScript project layout under
a base directory: the fixed directories, the templated marker files, and one
file per configured module.  Every step is create-if-missing, so running the
generator again over an existing tree changes nothing.
"""

from __future__ import annotations

import os
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

from mekbuilder.config import BuilderSettings, ModuleSpec, ProjectConfig
from mekbuilder.errors import UnsafeModuleName
from mekbuilder.utils import print_info, print_status, print_success

from .filesystem import Action, FileTask, Filesystem, LocalFilesystem, decide
from .templates import TemplateRenderer


@dataclass
class GenerationResult:
    """Paths the generator created or left alone, in processing order."""

    base_dir: Path
    created: list[Path] = field(default_factory=list)
    skipped: list[Path] = field(default_factory=list)

    def record(self, path: Path, action: Action) -> None:
        if action is Action.CREATE:
            self.created.append(path)
        else:
            self.skipped.append(path)


class ProjectGenerator:
    """Idempotent scaffolder for MekScript projects.

    Given a ``ProjectConfig``, ensures the following exist under a base
    directory:
    - ``Project/``, ``Libs/``, ``Modules/`` and ``Logs/``
    - ``project.mek`` with the static marker line
    - ``config.mson`` mirroring the project name and version
    - an empty ``Logs/project.log``
    - ``Modules/<name>.js`` for every module, holding its code verbatim

    Nothing that already exists is overwritten.  A filesystem failure aborts
    the run where it happens; earlier creations are kept.
    """

    def __init__(
        self,
        config: ProjectConfig,
        settings: BuilderSettings | None = None,
        fs: Filesystem | None = None,
        renderer: TemplateRenderer | None = None,
    ) -> None:
        self.config = config
        self.settings = settings or BuilderSettings()
        self.fs = fs or LocalFilesystem()
        self.renderer = renderer or TemplateRenderer()

    # -- Public API --------------------------------------------------------

    def generate(self, base_dir: str | Path) -> GenerationResult:
        """Generate the project structure under *base_dir*.

        Returns:
            A ``GenerationResult`` listing created and skipped paths.

        Raises:
            MissingConfigField: If ``projectName``, ``version`` or
                ``modules`` is needed but absent from the configuration.
            FilesystemFailure: If any check or create operation fails.
        """
        root = Path(base_dir)
        result = GenerationResult(base_dir=root)

        print_info("Generating project structure based on user configuration...")

        # 1. Fixed directories
        self._ensure_directories(root, result)

        # 2. Template files (marker, config mirror, empty log)
        for task in self._template_tasks(root):
            self._ensure_file(task, result)

        # 3. User-defined modules, in configuration order
        modules: list[ModuleSpec] = self.config.require("modules")
        for module in modules:
            self._ensure_file(self._module_task(root, module), result)

        print_success(
            f"Project structure generated successfully for '{self.config.require('project_name')}'."
        )
        return result

    # -- Directories -------------------------------------------------------

    def _ensure_directories(self, root: Path, result: GenerationResult) -> None:
        for name in self.settings.directories:
            path = root / name
            action = decide(self.fs, FileTask(path))
            if action is Action.CREATE:
                self.fs.make_dirs(path)
            print_status("directory", path, created=action is Action.CREATE)
            result.record(path, action)

    # -- Files -------------------------------------------------------------

    def _ensure_file(self, task: FileTask, result: GenerationResult) -> None:
        action = decide(self.fs, task)
        if action is Action.CREATE:
            self.fs.write_text(task.path, task.content)
        print_status("file", task.path, created=action is Action.CREATE)
        result.record(task.path, action)

    def _template_tasks(self, root: Path) -> list[FileTask]:
        """Build the three template file tasks.

        All content is rendered before anything is written, so a missing
        ``projectName`` or ``version`` is reported before ``project.mek``
        is created.
        """
        context = self._build_context()
        return [
            FileTask(
                root / self.settings.project_file,
                self.renderer.render("project.mek.j2", context),
            ),
            FileTask(
                root / self.settings.config_file,
                self.renderer.render("config.mson.j2", context),
            ),
            FileTask(root / self.settings.log_file, ""),
        ]

    def _build_context(self) -> dict[str, Any]:
        return {
            "project_name": self.config.require("project_name"),
            "version": self.config.require("version"),
        }

    def _module_task(self, root: Path, module: ModuleSpec) -> FileTask:
        if not _is_safe_module_name(module.name):
            raise UnsafeModuleName(module.name)
        filename = self.settings.module_filename(module.name)
        return FileTask(root / self.settings.modules_dir / filename, module.code)


# ---------------------------------------------------------------------------
# Helpers
# ---------------------------------------------------------------------------

_SEPARATORS = {"/", "\\", "\0"} | {s for s in (os.sep, os.altsep) if s}


def _is_safe_module_name(name: str) -> bool:
    """Return ``False`` for names that would not land directly in ``Modules/``.

    Examples::

        _is_safe_module_name("mathutil")   -> True
        _is_safe_module_name("../escape")  -> False
        _is_safe_module_name("..")         -> False
    """
    if name in ("", ".", ".."):
        return False
    return not any(sep in name for sep in _SEPARATORS)
