"""Exception hierarchy for mekbuilder.

Every failure the entry point knows how to report derives from
``BuilderError`` so that ``cli.run`` can catch them in one place.
"""

from __future__ import annotations

from pathlib import Path


class BuilderError(Exception):
    """Base class for all errors reported to the user as a single line."""


# ---------------------------------------------------------------------------
# Configuration errors
# ---------------------------------------------------------------------------


class ConfigNotFound(BuilderError):
    """Raised when the configuration path does not point at a file."""

    def __init__(self, path: str | Path) -> None:
        self.path = Path(path)
        super().__init__(f"Configuration file not found: {path}")


class ConfigMalformed(BuilderError):
    """Raised when the configuration file cannot be parsed into a ``ProjectConfig``."""

    def __init__(self, path: str | Path, reason: str) -> None:
        self.path = Path(path)
        self.reason = reason
        super().__init__(f"Malformed configuration file {path}: {reason}")


class MissingConfigField(BuilderError):
    """Raised by the scaffolder when it needs a field the configuration omits."""

    def __init__(self, field: str) -> None:
        self.field = field
        super().__init__(f"Configuration is missing required field '{field}'")


# ---------------------------------------------------------------------------
# Filesystem errors
# ---------------------------------------------------------------------------


class FilesystemFailure(BuilderError):
    """Raised when a check or create operation fails for any reason other than
    the target already existing."""

    def __init__(self, operation: str, path: str | Path, reason: str) -> None:
        self.operation = operation
        self.path = Path(path)
        self.reason = reason
        super().__init__(f"Could not {operation} {path}: {reason}")


class UnsafeModuleName(FilesystemFailure):
    """Raised for module names that would resolve outside the modules directory."""

    def __init__(self, name: str) -> None:
        self.name = name
        super().__init__(
            "create module", name, "module names may not contain path separators or be '.'/'..'"
        )
