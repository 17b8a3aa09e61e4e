"""Core intermediate representation (IR) for classified story text."""

from __future__ import annotations

import re
from collections.abc import Callable, Iterable
from dataclasses import dataclass, field


@dataclass(slots=True)
class Prose:
    """Ordinary text not yet split into paragraphs."""

    text: str


@dataclass(slots=True)
class Paragraph:
    text: str
    css_class: str | None = None


@dataclass(slots=True)
class Quip:
    text: str


@dataclass(slots=True)
class Verse:
    stanzas: list[list[str]] = field(default_factory=list)
    quoted: bool = False


@dataclass(slots=True)
class Blockquote:
    paragraphs: list[str] = field(default_factory=list)


@dataclass(slots=True)
class Haiku:
    lines: tuple[str, str, str]


@dataclass(slots=True)
class Poem:
    lines: list[str] = field(default_factory=list)


@dataclass(slots=True)
class FootnoteEntry:
    ordinal: int
    text: str
    credit: bool = False
    marker: int | None = None


@dataclass(slots=True)
class FootnoteBlock:
    entries: list[FootnoteEntry] = field(default_factory=list)

    @property
    def has_credit(self) -> bool:
        return any(entry.credit for entry in self.entries)

    @property
    def start(self) -> int:
        return 0 if self.has_credit else 1


Segment = Prose | Paragraph | Quip | Verse | Blockquote | Haiku | Poem


@dataclass(slots=True)
class Document:
    segments: list[Segment] = field(default_factory=list)
    footnotes: FootnoteBlock | None = None


def split_prose(
    segments: list[Segment],
    find: Callable[[str], Iterable[re.Match[str]]],
    build: Callable[[re.Match[str]], Segment | None],
    *,
    strip_following: bool = False,
) -> list[Segment]:
    """Cut every match of *find* out of each Prose segment.

    Text between matches stays Prose. A match that *build* rejects with
    ``None`` is left in the surrounding Prose. Non-Prose segments pass
    through untouched.
    """
    result: list[Segment] = []
    for segment in segments:
        if not isinstance(segment, Prose):
            result.append(segment)
            continue

        text = segment.text
        position = 0
        for match in find(text):
            built = build(match)
            if built is None:
                continue

            before = text[position:match.start()]
            if strip_following and position:
                before = before.lstrip()
            if before:
                result.append(Prose(before))
            result.append(built)
            position = match.end()

        rest = text[position:]
        if strip_following and position:
            rest = rest.lstrip()
        if rest:
            result.append(Prose(rest))

    return result
