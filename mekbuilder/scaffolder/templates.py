"""Jinja2 template rendering for project scaffolding.

Provides the TemplateRenderer class which loads Jinja2 templates from the
``mekbuilder/scaffolder/templates/`` directory and renders them with the
project context.  Rendered output is returned as a string; writing it is the
generator's job so the create-if-missing rule stays in one place.
"""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any

from jinja2 import Environment, FileSystemLoader, StrictUndefined, select_autoescape


_DEFAULT_TEMPLATE_DIR = Path(__file__).parent / "templates"


class TemplateRenderer:
    """Renders the ``.j2`` templates that seed a new MekScript project.

    Templates are rendered byte-for-byte: trailing newlines are kept and
    nothing is autoescaped.  Undefined variables raise instead of rendering
    as empty strings.
    """

    def __init__(self, template_dir: str | Path | None = None) -> None:
        if template_dir is None:
            template_dir = _DEFAULT_TEMPLATE_DIR
        self.template_dir = Path(template_dir)
        self.env = Environment(
            loader=FileSystemLoader(str(self.template_dir)),
            autoescape=select_autoescape([]),
            keep_trailing_newline=True,
            undefined=StrictUndefined,
        )
        self.env.filters["json_string"] = _json_string_filter

    def render(self, template_path: str, context: dict[str, Any]) -> str:
        """Render a single template with the provided context.

        Args:
            template_path: Path relative to the template directory (e.g.
                ``"config.mson.j2"``).
            context: Dictionary of variables available inside the template.

        Returns:
            The rendered template content as a string.
        """
        template = self.env.get_template(template_path)
        return template.render(**context)


# ---------------------------------------------------------------------------
# Jinja2 custom filters
# ---------------------------------------------------------------------------

def _json_string_filter(value: Any) -> str:
    """Render *value* as a JSON string literal, quotes included.

    Plain text comes out exactly as ``"<value>"``; quotes, backslashes and
    control characters are escaped.  Non-ASCII text is left as-is.
    """
    return json.dumps(str(value), ensure_ascii=False)
