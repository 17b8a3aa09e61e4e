"""Named recognizers shared by every extraction pass.

All patterns expect text whose line breaks have been normalized to ``\\n``
(see :func:`normalize_line_breaks`). Matching is stateless; each helper is a
pure function of its input.
"""

from __future__ import annotations

import re

SUPERSCRIPT_DIGITS = "⁰¹²³⁴⁵⁶⁷⁸⁹"
_SUPERSCRIPT_TO_DIGIT = str.maketrans(SUPERSCRIPT_DIGITS, "0123456789")
_SUP = f"[{SUPERSCRIPT_DIGITS}]"

LINE_BREAK = re.compile(r"\r\n|\r|\n")


# ---------------------------------------------------------------------------
# Poetry
# ---------------------------------------------------------------------------

# Whole poems are set off by a single dash line above and below.
WHOLE_VERSE = re.compile(r"\A-\n+(?:[^\n]{3,100}\n+){3,}-\n*\Z")
VERSE_DELIMITER_START = re.compile(r"\A-\n+")
VERSE_DELIMITER_END = re.compile(r"\n+-\n*\Z")

# Any character but a line break, unless it is followed by punctuation and a
# closing quote that is not itself footnoted. That shape is dialogue, not
# verse. False positives are possible.
EMBEDDED_VERSE = re.compile(
    r"(?:\A|\n+)"
    rf"(?P<body>(?:(?:[^\n](?![.,!?]”[^{SUPERSCRIPT_DIGITS}])){{4,80}}(?:\n+|\Z)){{3,}})"
)

# Spaces are collapsed by some providers so indents are written as dots.
INDENT_MARKER = re.compile("· · ")

VERSE_OPEN_QUOTE = re.compile(r"\A\s*“")
VERSE_CLOSE_QUOTE = re.compile(rf"”(?P<sup>{_SUP}*)\s*\Z")
LINE_OPEN_QUOTE = re.compile(r"^ *“", re.MULTILINE)


# ---------------------------------------------------------------------------
# Haiku
# ---------------------------------------------------------------------------

_HAIKU_LINES = r"\A([ \w]{5,100})\n+([ \w]{5,100})\n+([ \w]{5,100})"
HAIKU_WHOLE = re.compile(_HAIKU_LINES + r"\n*\Z")
HAIKU_PREFIX = re.compile(_HAIKU_LINES + r"(?:\n{2,}|\n*\Z)")


# ---------------------------------------------------------------------------
# Quotes
# ---------------------------------------------------------------------------

# Long quote on its own line, optionally footnoted.
BLOCK_QUOTE = re.compile(rf"(?:\n|\A)(?P<quote>“[^”]{{200,}}”{_SUP}*)\s*(?:\n|\Z)")
CURLY_DOUBLE_QUOTE = re.compile("[“”]")

# Short opening paragraph that contains a quote.
QUIP = re.compile(r"\A“(?=[^<]*”)[^<]{4,80}\Z")


# ---------------------------------------------------------------------------
# Footnotes
# ---------------------------------------------------------------------------

# Footnotes trail the text after a line of three underscores.
FOOTNOTE_BLOCK = re.compile(r"(?:\A|\n+)_{3}[ \t]*(?:\n+|\Z)(?P<notes>[\s\S]*)\Z")

# Footnoted word and superscript. The lookahead skips atomic numbers and
# markers that were already wrapped.
FOOTNOTE_MARKER = re.compile(rf"([^/\s])({_SUP}+)(?!\w|</sup>)")

FOOTNOTE_NOTE_MARKER = re.compile(rf"\A\s*(?P<digits>{_SUP}+)\s*")
CREDIT_NOTE_MARKER = re.compile(r"\A\s*\*\s*")


# ---------------------------------------------------------------------------
# Links
# ---------------------------------------------------------------------------

SELF_REFERENTIAL_LINK = re.compile(
    r"""<a href=["'](?P<protocol>https?://)?(?P<url>[^"']+)["'][^>]*>(?P=protocol)?(?P=url)</a>""",
    re.IGNORECASE,
)

# Flickr closes the tag early around URLs containing parentheses, e.g.
# <a href="http://x.org/PDF/Reports_">x.org/PDF/Reports_</a>(T)/TR-81-1.pdf
TRUNCATED_LINK = re.compile(
    r"""<a href=(?P<q>["'])(?P<href>[^"']+)(?P=q)(?P<attrs>[^>]*)>(?P<text>[^<]+)</a>(?P<tail>\([\w/.\-%()]+)""",
    re.IGNORECASE,
)

# Link text deliberately shortened with an ellipsis when it is a long URL.
ELLIPSIS_LINK = re.compile(
    r"""<a href=["'](?P<protocol>https?://)?(?P<domain>[^/"']+)(?P<path>[^"']+)["'][^>]*>"""
    r"""(?P=domain)[^<]*(?:\.{3}|…)</a>""",
    re.IGNORECASE,
)

QUERY_STRING = re.compile(r"\?.*$")
URL_FRAGMENT = re.compile(r"#.*$")
FILE_EXTENSION = re.compile(r"\.\w{2,4}$")


# ---------------------------------------------------------------------------
# Helpers
# ---------------------------------------------------------------------------

def normalize_line_breaks(text: str) -> str:
    """Convert ``\\r\\n`` and lone ``\\r`` to ``\\n``."""
    return LINE_BREAK.sub("\n", text)


def superscript_to_int(digits: str) -> int:
    """Read a run of superscript digits as an ordinary number."""
    return int(digits.translate(_SUPERSCRIPT_TO_DIGIT))


def is_whole_document_verse(text: str) -> bool:
    return WHOLE_VERSE.match(text) is not None


def strip_verse_delimiters(text: str) -> str:
    """Remove the leading and trailing dash lines of a whole poem."""
    text = VERSE_DELIMITER_START.sub("", text, count=1)
    return VERSE_DELIMITER_END.sub("", text, count=1)


def match_whole_haiku(text: str) -> re.Match[str] | None:
    return HAIKU_WHOLE.match(text)


def match_haiku_prefix(text: str) -> re.Match[str] | None:
    return HAIKU_PREFIX.match(text)


def find_embedded_verse(text: str) -> re.Match[str] | None:
    return EMBEDDED_VERSE.search(text)


def iter_embedded_verse(text: str):
    return EMBEDDED_VERSE.finditer(text)


def iter_block_quotes(text: str):
    return BLOCK_QUOTE.finditer(text)


def is_quip(paragraph: str) -> bool:
    return QUIP.match(paragraph) is not None


def find_footnote_block(text: str) -> re.Match[str] | None:
    return FOOTNOTE_BLOCK.search(text)
