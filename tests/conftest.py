"""Shared pytest fixtures for the mekbuilder test suite.

Provides reusable fixtures for:
- An in-memory ``Filesystem`` double
- Sample configuration documents (as dicts, models and files on disk)
- An empty target directory to scaffold into
"""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any

import pytest

from mekbuilder.config import ProjectConfig
from mekbuilder.errors import FilesystemFailure


# ---------------------------------------------------------------------------
# In-memory filesystem
# ---------------------------------------------------------------------------


class MemoryFilesystem:
    """``Filesystem`` double that keeps directories and files in dicts.

    ``fail_on`` maps a path to the operation name that should fail for it,
    to exercise error propagation without real permission problems.
    """

    def __init__(self) -> None:
        self.dirs: set[Path] = set()
        self.files: dict[Path, str] = {}
        self.writes: list[Path] = []
        self.fail_on: dict[Path, str] = {}

    def exists(self, path: Path) -> bool:
        return path in self.dirs or path in self.files

    def make_dirs(self, path: Path) -> None:
        if self.fail_on.get(path) == "create directory":
            raise FilesystemFailure("create directory", path, "Permission denied")
        self.dirs.add(path)
        self.dirs.update(path.parents)
        self.writes.append(path)

    def write_text(self, path: Path, content: str) -> None:
        if self.fail_on.get(path) == "create file":
            raise FilesystemFailure("create file", path, "Permission denied")
        self.files[path] = content
        self.writes.append(path)


@pytest.fixture
def memory_fs() -> MemoryFilesystem:
    return MemoryFilesystem()


# ---------------------------------------------------------------------------
# Paths & Directories
# ---------------------------------------------------------------------------


@pytest.fixture
def target_dir(tmp_path: Path) -> Path:
    """Empty directory that stands in for the user's working directory."""
    target = tmp_path / "workspace"
    target.mkdir()
    yield target


# ---------------------------------------------------------------------------
# Sample configuration
# ---------------------------------------------------------------------------


@pytest.fixture
def demo_config_data() -> dict[str, Any]:
    """The canonical single-module configuration document."""
    return {
        "projectName": "Demo",
        "version": "0.1",
        "modules": [{"name": "mathutil", "code": "// math helpers"}],
    }


@pytest.fixture
def demo_config(demo_config_data: dict[str, Any]) -> ProjectConfig:
    return ProjectConfig.model_validate(demo_config_data)


@pytest.fixture
def write_config(tmp_path: Path):
    """Factory fixture: write a config document and return its path.

    Strings are written as-is (for malformed-content tests); anything else is
    serialised as JSON.  Files live outside ``target_dir`` so they never
    count as scaffolded output.
    """
    config_dir = tmp_path / "configs"
    config_dir.mkdir()

    def _write(content: Any, name: str = "project.json") -> Path:
        path = config_dir / name
        if isinstance(content, str):
            path.write_text(content, encoding="utf-8")
        else:
            path.write_text(json.dumps(content), encoding="utf-8")
        return path

    return _write


def tree_snapshot(root: Path) -> dict[str, str | None]:
    """Map every path under *root* to its text content (``None`` for dirs)."""
    snapshot: dict[str, str | None] = {}
    for path in sorted(root.rglob("*")):
        rel = path.relative_to(root).as_posix()
        snapshot[rel] = None if path.is_dir() else path.read_text(encoding="utf-8")
    return snapshot


@pytest.fixture
def snapshot():
    return tree_snapshot
