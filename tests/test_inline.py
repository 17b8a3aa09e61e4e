from __future__ import annotations

from storyhtml.renderer.inline import TAB, character_entities, fraction, icon_tag, indent, superscript_markers


def test_superscript_markers() -> None:
    assert superscript_markers("word¹ and “quote.”²³") == "word<sup>¹</sup> and “quote.”<sup>²³</sup>"
    assert superscript_markers("already<sup>¹</sup>") == "already<sup>¹</sup>"


def test_indent() -> None:
    assert indent("· · · · deep") == TAB + TAB + "deep"
    assert indent("no indent · here") == "no indent · here"


def test_icon_tag() -> None:
    assert icon_tag("spa") == '<i class="material-icons spa">spa</i>'
    assert icon_tag("star", "*") == '<i class="material-icons star">*</i>'


def test_fraction() -> None:
    assert fraction("add 1/2 cup") == "add <sup>1</sup>&frasl;<sub>2</sub> cup"


def test_character_entities() -> None:
    assert character_entities("“Hi” & <b>") == "&ldquo;Hi&rdquo; &amp; &lt;b&gt;"
    assert character_entities("Ā") == "&#256;"
    assert character_entities("plain") == "plain"
