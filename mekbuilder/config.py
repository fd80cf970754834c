"""mekbuilder configuration.

Two kinds of configuration live here:

* ``ProjectConfig`` / ``ModuleSpec`` -- the user-supplied JSON document that
  describes what to scaffold.  Loaded with :func:`load_config`.
* ``BuilderSettings`` -- the fixed layout the scaffolder materialises
  (directory names, file names, module extension), optionally overridden
  from the environment.

All models are Pydantic v2 so the JSON document is mapped onto typed objects
without hand-written parsing.
"""

from __future__ import annotations

import json
import os
from pathlib import Path
from typing import Any, Optional

from pydantic import BaseModel, ConfigDict, Field, ValidationError

from mekbuilder.errors import (
    ConfigMalformed,
    ConfigNotFound,
    FilesystemFailure,
    MissingConfigField,
)
from mekbuilder.utils import load_json


# ---------------------------------------------------------------------------
# User configuration document
# ---------------------------------------------------------------------------


class ModuleSpec(BaseModel):
    """One user-defined module, written verbatim to ``Modules/<name>.<ext>``."""

    model_config = ConfigDict(frozen=True, coerce_numbers_to_str=True)

    name: str = Field(..., description="Filename stem of the module file")
    code: str = Field(..., description="Literal file content, never interpreted")


class ProjectConfig(BaseModel):
    """The parsed configuration document.

    Top-level fields are optional here: a document that omits one still
    loads, and the scaffolder reports the omission through :meth:`require`
    at the point it needs the value.
    """

    model_config = ConfigDict(frozen=True, populate_by_name=True, coerce_numbers_to_str=True)

    project_name: Optional[str] = Field(default=None, alias="projectName")
    version: Optional[str] = Field(default=None)
    modules: Optional[list[ModuleSpec]] = Field(default=None)

    def require(self, field: str) -> Any:
        """Return the value of *field* or raise ``MissingConfigField``.

        The error names the key as it appears in the JSON document
        (``projectName`` rather than ``project_name``).
        """
        value = getattr(self, field)
        if value is None:
            info = type(self).model_fields[field]
            raise MissingConfigField(info.alias or field)
        return value


def load_config(path: str | Path) -> ProjectConfig:
    """Read and parse a ``ProjectConfig`` from a JSON file.

    Args:
        path: Location of the configuration document.

    Returns:
        The parsed, immutable configuration.

    Raises:
        ConfigNotFound: If no file exists at *path*.
        ConfigMalformed: If the content is not valid JSON, is not a JSON
            object, or a present field has the wrong shape.
        FilesystemFailure: If the file exists but cannot be read.
    """
    config_path = Path(path)
    if not config_path.is_file():
        raise ConfigNotFound(path)

    try:
        data = load_json(config_path)
    except json.JSONDecodeError as exc:
        raise ConfigMalformed(path, str(exc)) from exc
    except UnicodeDecodeError as exc:
        raise ConfigMalformed(path, f"not UTF-8 text ({exc.reason})") from exc
    except OSError as exc:
        raise FilesystemFailure("read", path, exc.strerror or str(exc)) from exc

    if not isinstance(data, dict):
        raise ConfigMalformed(path, f"expected a JSON object, got {type(data).__name__}")

    try:
        return ProjectConfig.model_validate(data)
    except ValidationError as exc:
        raise ConfigMalformed(path, _summarise_validation_error(exc)) from exc


def _summarise_validation_error(exc: ValidationError) -> str:
    """Collapse a Pydantic error into one line, e.g. ``modules.0.code: Field required``."""
    parts = []
    for err in exc.errors():
        location = ".".join(str(p) for p in err["loc"]) or "<root>"
        parts.append(f"{location}: {err['msg']}")
    return "; ".join(parts)


# ---------------------------------------------------------------------------
# Scaffold layout settings
# ---------------------------------------------------------------------------


class BuilderSettings(BaseModel):
    """Layout of the generated project tree.

    The defaults reproduce the MekScript layout byte-for-byte; other tooling
    reads these files, so overrides are meant for experimentation only.
    """

    directories: list[str] = Field(default=["Project", "Libs", "Modules", "Logs"])
    modules_dir: str = Field(default="Modules")
    module_extension: str = Field(default="js", min_length=1)
    project_file: str = Field(default="project.mek")
    config_file: str = Field(default="config.mson")
    log_file: str = Field(default="Logs/project.log")

    def module_filename(self, name: str) -> str:
        """Return ``<name>.<module_extension>``."""
        return f"{name}.{self.module_extension}"

    @classmethod
    def from_env(cls) -> "BuilderSettings":
        """Build settings from environment variables.

        Recognised variables (all optional):
            MEKBUILDER_MODULE_EXTENSION, MEKBUILDER_PROJECT_FILE,
            MEKBUILDER_CONFIG_FILE.
        """
        kwargs: dict[str, Any] = {}
        if os.environ.get("MEKBUILDER_MODULE_EXTENSION"):
            kwargs["module_extension"] = os.environ["MEKBUILDER_MODULE_EXTENSION"].lstrip(".")
        if os.environ.get("MEKBUILDER_PROJECT_FILE"):
            kwargs["project_file"] = os.environ["MEKBUILDER_PROJECT_FILE"]
        if os.environ.get("MEKBUILDER_CONFIG_FILE"):
            kwargs["config_file"] = os.environ["MEKBUILDER_CONFIG_FILE"]
        return cls(**kwargs)
