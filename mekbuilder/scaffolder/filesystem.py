"""Filesystem seam for the scaffolder.

The create-if-missing rule is split in two: :func:`decide` looks at a
``FileTask`` and returns an ``Action`` without touching anything, and a
``Filesystem`` implementation performs the write.  ``LocalFilesystem`` is the
real one; tests substitute an in-memory double.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from pathlib import Path
from typing import Protocol

from mekbuilder.errors import FilesystemFailure


class Action(str, Enum):
    """What the scaffolder does with a target path."""

    CREATE = "create"
    SKIP = "skip"


@dataclass(frozen=True)
class FileTask:
    """A target path plus the content to write if it is absent."""

    path: Path
    content: str = ""


class Filesystem(Protocol):
    """Minimal filesystem surface the scaffolder needs."""

    def exists(self, path: Path) -> bool: ...

    def make_dirs(self, path: Path) -> None: ...

    def write_text(self, path: Path, content: str) -> None: ...


def decide(fs: Filesystem, task: FileTask) -> Action:
    """Return ``SKIP`` if the task's path already exists, ``CREATE`` otherwise.

    The desired content plays no part: existing paths are never rewritten,
    even when their content differs.
    """
    return Action.SKIP if fs.exists(task.path) else Action.CREATE


class LocalFilesystem:
    """``Filesystem`` backed by :mod:`pathlib`.

    Every ``OSError`` is re-raised as ``FilesystemFailure`` so callers deal
    with a single error type.
    """

    def exists(self, path: Path) -> bool:
        try:
            return path.exists()
        except OSError as exc:
            raise FilesystemFailure("check", path, _reason(exc)) from exc

    def make_dirs(self, path: Path) -> None:
        try:
            path.mkdir(parents=True, exist_ok=True)
        except OSError as exc:
            raise FilesystemFailure("create directory", path, _reason(exc)) from exc

    def write_text(self, path: Path, content: str) -> None:
        # newline="" keeps module code byte-for-byte on every platform
        try:
            with path.open("x", encoding="utf-8", newline="") as fh:
                fh.write(content)
        except OSError as exc:
            raise FilesystemFailure("create file", path, _reason(exc)) from exc


def _reason(exc: OSError) -> str:
    return exc.strerror or str(exc)
