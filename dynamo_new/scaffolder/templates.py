"""Jinja2 template rendering for project scaffolding.

Provides the TemplateRenderer class which loads Jinja2 templates from the
``dynamo_new/scaffolder/templates/`` directory and renders them with a
``RenderContext``.  Templates only interpolate plain values; any variable the
context does not define is an error rather than an empty string.
"""

from __future__ import annotations

from pathlib import Path
from typing import Any

from jinja2 import Environment, FileSystemLoader, StrictUndefined, select_autoescape

from .context import RenderContext


# ---------------------------------------------------------------------------
# Template directory discovery
# ---------------------------------------------------------------------------

_DEFAULT_TEMPLATE_DIR = Path(__file__).parent / "templates"


# ---------------------------------------------------------------------------
# TemplateRenderer
# ---------------------------------------------------------------------------


class TemplateRenderer:
    """Renders Jinja2 templates for project scaffolding.

    The renderer discovers ``.j2`` template files under a configurable
    template directory.  Output is never HTML-escaped: the bodies are Elixir
    sources and configuration, and quotes in the dependency descriptor must
    survive verbatim.
    """

    def __init__(self, template_dir: str | Path | None = None) -> None:
        if template_dir is None:
            template_dir = _DEFAULT_TEMPLATE_DIR
        self.template_dir = Path(template_dir)
        self.env = Environment(
            loader=FileSystemLoader(str(self.template_dir)),
            autoescape=select_autoescape([], default_for_string=False),
            undefined=StrictUndefined,
            keep_trailing_newline=True,
            trim_blocks=True,
            lstrip_blocks=True,
        )

    # -- Rendering ---------------------------------------------------------

    def render(
        self,
        template_path: str,
        context: RenderContext | dict[str, Any],
    ) -> str:
        """Render a single template with the provided context.

        Args:
            template_path: Path relative to the template directory (e.g.
                ``"config/app.ex.j2"``).
            context: A ``RenderContext`` or a plain mapping of variables.

        Returns:
            The rendered template content as a string.

        Raises:
            jinja2.TemplateNotFound: If the template does not exist.
            jinja2.UndefinedError: If the template references a variable the
                context does not provide.
        """
        template = self.env.get_template(template_path)
        return template.render(**_template_vars(context))

    # -- Utility -----------------------------------------------------------

    def list_templates(self, prefix: str = "") -> list[str]:
        """Return a sorted list of all ``.j2`` template paths under *prefix*.

        Paths are relative to the template root directory and use forward
        slashes, matching the names accepted by :meth:`render`.
        """
        search_dir = self.template_dir / prefix if prefix else self.template_dir
        if not search_dir.is_dir():
            return []
        return sorted(
            p.relative_to(self.template_dir).as_posix()
            for p in search_dir.rglob("*.j2")
        )


def _template_vars(context: RenderContext | dict[str, Any]) -> dict[str, Any]:
    if isinstance(context, RenderContext):
        return context.as_template_vars()
    return dict(context)
