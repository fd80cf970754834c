"""mekbuilder scaffolder -- materialises the MekScript project layout.

Quick usage::

    from mekbuilder.config import load_config
    from mekbuilder.scaffolder import ProjectGenerator

    config = load_config("project.json")
    result = ProjectGenerator(config).generate(Path.cwd())
"""

from mekbuilder.scaffolder.filesystem import (
    Action,
    FileTask,
    Filesystem,
    LocalFilesystem,
    decide,
)
from mekbuilder.scaffolder.generator import GenerationResult, ProjectGenerator
from mekbuilder.scaffolder.templates import TemplateRenderer

__all__ = [
    "Action",
    "FileTask",
    "Filesystem",
    "GenerationResult",
    "LocalFilesystem",
    "ProjectGenerator",
    "TemplateRenderer",
    "decide",
]
