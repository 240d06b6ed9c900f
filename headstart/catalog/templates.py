"""Jinja2 template rendering for catalog actions.

Provides the TemplateRenderer class which loads the literal file bodies
shipped in ``headstart/catalog/templates/`` and renders command strings
with answer-specific context (app name, executables, selected plugins).
"""

from __future__ import annotations

import shlex
from pathlib import Path
from typing import Any

from jinja2 import Environment, FileSystemLoader, StrictUndefined


_DEFAULT_TEMPLATE_DIR = Path(__file__).parent / "templates"


class TemplateRenderer:
    """Renders Jinja2 templates for provisioning actions.

    File templates are rendered with ``keep_trailing_newline`` so the bytes
    written to the new project match the template file exactly.  Undefined
    variables raise instead of rendering as empty strings, which keeps a
    misspelt context key from producing a broken shell command.  Output is
    never HTML-escaped: command strings go to a shell, not a browser.
    """

    def __init__(self, template_dir: str | Path | None = None) -> None:
        if template_dir is None:
            template_dir = _DEFAULT_TEMPLATE_DIR
        self.template_dir = Path(template_dir)
        self.env = Environment(
            loader=FileSystemLoader(str(self.template_dir)),
            autoescape=False,
            keep_trailing_newline=True,
            trim_blocks=True,
            lstrip_blocks=True,
            undefined=StrictUndefined,
        )
        self.env.filters["shquote"] = shlex.quote

    def render(self, template_path: str, context: dict[str, Any]) -> str:
        """Render a template file relative to the template directory."""
        template = self.env.get_template(template_path)
        return template.render(**context)

    def render_string(self, template_string: str, context: dict[str, Any]) -> str:
        """Render an inline template string, e.g. a command line."""
        template = self.env.from_string(template_string)
        return template.render(**context)
