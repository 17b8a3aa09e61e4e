"""Wrap a formatted fragment in a standalone preview page."""

from __future__ import annotations

from pathlib import Path

from jinja2 import Environment, FileSystemLoader
from markupsafe import Markup, escape

from .inline import character_entities, fraction


class PageRenderer:
    """Render an HTML fragment into the preview template.

    Templates get two extra filters: ``fraction`` for ``1/2`` style text and
    ``entities`` to write non-ASCII text as HTML character entities.
    """

    def __init__(self, template_path: Path | None = None) -> None:
        if template_path is None:
            template_path = Path(__file__).resolve().parent.parent / "template" / "preview.html"

        loader = FileSystemLoader(str(template_path.parent))
        self._env = Environment(loader=loader, autoescape=True, trim_blocks=True, lstrip_blocks=True)
        self._env.filters["fraction"] = _fraction_filter
        self._env.filters["entities"] = _entities_filter
        self._template_name = template_path.name

    def render(
        self,
        fragment: str,
        *,
        title: str = "Preview",
        mode: str = "story",
        contact: str | None = None,
    ) -> str:
        template = self._env.get_template(self._template_name)
        return template.render(
            page_title=title or "Preview",
            mode=mode,
            contact=contact,
            body=Markup(fragment),
        )


def _fraction_filter(value: object) -> Markup:
    return Markup(fraction(str(escape(value))))


def _entities_filter(value: object) -> Markup:
    # <, > and & are encoded along with non-ASCII text
    return Markup(character_entities(str(value)))
