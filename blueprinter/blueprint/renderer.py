"""Jinja2 template rendering for blueprint text blocks.

Provides the TemplateRenderer class which loads ``.j2`` templates from the
``blueprinter/blueprint/templates/`` directory. The templates are plain-text
directory trees, one per platform class, with feature-gated subtrees.
"""

from __future__ import annotations

from functools import lru_cache
from pathlib import Path
from typing import Any

from jinja2 import Environment, FileSystemLoader, StrictUndefined, select_autoescape


_DEFAULT_TEMPLATE_DIR = Path(__file__).parent / "templates"


class TemplateRenderer:
    """Renders Jinja2 text templates with a context dictionary."""

    def __init__(self, template_dir: str | Path | None = None) -> None:
        if template_dir is None:
            template_dir = _DEFAULT_TEMPLATE_DIR
        self.template_dir = Path(template_dir)
        self.env = Environment(
            loader=FileSystemLoader(str(self.template_dir)),
            autoescape=select_autoescape([]),
            undefined=StrictUndefined,
            keep_trailing_newline=False,
            trim_blocks=True,
            lstrip_blocks=True,
        )
        self.env.filters["branch"] = _branch_filter

    def render(self, template_path: str, context: dict[str, Any]) -> str:
        """Render a single template with the provided context.

        Args:
            template_path: Path relative to the template directory (e.g.
                ``"web_tree.txt.j2"``).
            context: Variables available inside the template.

        Returns:
            The rendered text with trailing whitespace removed.
        """
        template = self.env.get_template(template_path)
        return template.render(**context).rstrip()


@lru_cache(maxsize=1)
def default_renderer() -> TemplateRenderer:
    """Shared renderer over the packaged templates."""
    return TemplateRenderer()


# ---------------------------------------------------------------------------
# Jinja2 custom filters
# ---------------------------------------------------------------------------

def _branch_filter(is_last: bool) -> str:
    """Tree connector for an entry: ``└──`` for the last sibling, ``├──`` otherwise."""
    return "└──" if is_last else "├──"
