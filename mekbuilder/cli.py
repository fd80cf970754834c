"""mekbuilder command-line entry point.

Reads a JSON project description and scaffolds the MekScript layout into
the current directory.

Usage::

    mekbuilder --config=project.json
    python -m mekbuilder.cli --config=project.json
"""

from __future__ import annotations

import sys
from pathlib import Path
from typing import Optional, Sequence

from mekbuilder.config import BuilderSettings, load_config
from mekbuilder.errors import BuilderError
from mekbuilder.scaffolder import ProjectGenerator
from mekbuilder.utils import console, print_error

CONFIG_FLAG = "--config="
USAGE = "Usage: mekbuilder --config=<path_to_config.json>"


def find_config_arg(argv: Sequence[str]) -> Optional[str]:
    """Return the value of the first ``--config=<value>`` argument, if any.

    The value is everything after the first ``=``, so paths that themselves
    contain ``=`` survive intact.
    """
    for arg in argv:
        if arg.startswith(CONFIG_FLAG):
            return arg[len(CONFIG_FLAG):]
    return None


def run(
    argv: Sequence[str],
    cwd: Path,
    settings: BuilderSettings | None = None,
) -> None:
    """Load the configuration named by *argv* and scaffold into *cwd*.

    A missing ``--config`` flag prints usage and returns.  Any
    ``BuilderError`` is reported as one line on stderr; it is never
    re-raised.

    Args:
        argv: Command-line arguments, without the program name.
        cwd: Directory to scaffold into; relative config paths resolve
            against it too.
        settings: Layout overrides.  Defaults to ``BuilderSettings.from_env()``.
    """
    value = find_config_arg(argv)
    if value is None:
        console.print(USAGE, markup=False)
        return

    config_path = Path(value)
    if not config_path.is_absolute():
        config_path = cwd / config_path

    try:
        config = load_config(config_path)
        generator = ProjectGenerator(config, settings or BuilderSettings.from_env())
        generator.generate(cwd)
    except BuilderError as exc:
        print_error(str(exc))


def main() -> None:
    """CLI entry point for ``mekbuilder`` and ``python -m mekbuilder.cli``."""
    run(sys.argv[1:], Path.cwd())


if __name__ == "__main__":
    main()
