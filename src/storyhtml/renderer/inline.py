"""Small inline HTML transformations."""

from __future__ import annotations

import re
from html.entities import codepoint2name

from storyhtml.parser.patterns import FOOTNOTE_MARKER, INDENT_MARKER

TAB = '<span class="tab"></span>'

_SLASH_NUMBERS = re.compile(r"(\d+)/(\d+)")
_ENTITY_CHARACTERS = re.compile(r"[\u00a0-\u2666<>&]")


def superscript_markers(text: str) -> str:
    """Wrap footnote superscript digits in ``<sup>``."""
    return FOOTNOTE_MARKER.sub(r"\1<sup>\2</sup>", text)


def indent(text: str) -> str:
    return INDENT_MARKER.sub(TAB, text)


def icon_tag(name: str, glyph: str | None = None) -> str:
    """Material icon element."""
    return f'<i class="material-icons {name}">{glyph or name}</i>'


def fraction(text: str) -> str:
    """Render ``1/2`` style fractions with a fraction slash."""
    return _SLASH_NUMBERS.sub(r"<sup>\1</sup>&frasl;<sub>\2</sub>", text)


def character_entities(text: str) -> str:
    """Obfuscate text as HTML character entities."""

    def encode(match: re.Match[str]) -> str:
        code = ord(match.group(0))
        name = codepoint2name.get(code)
        return f"&{name};" if name else f"&#{code};"

    return _ENTITY_CHARACTERS.sub(encode, text)
