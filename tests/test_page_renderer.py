from __future__ import annotations

from pathlib import Path

from storyhtml.renderer.page_renderer import PageRenderer


def test_default_page_wraps_fragment() -> None:
    html = PageRenderer().render("<p>Body</p>", title="Notes", mode="caption")

    assert "<title>Notes</title>" in html
    assert '<article class="caption">' in html
    assert "<p>Body</p>" in html
    assert "<footer" not in html


def test_contact_footer_uses_character_entities() -> None:
    html = PageRenderer().render("<p>Body</p>", contact="Cheryl Reed · Troy & Co")
    assert '<footer class="contact">Cheryl Reed &middot; Troy &amp; Co</footer>' in html


def test_custom_template_filters(tmp_path: Path) -> None:
    template = tmp_path / "card.html"
    template.write_text("{{ body }}|{{ '1/2 cup'|fraction }}|{{ '<b> 3/4'|fraction }}\n", encoding="utf-8")

    html = PageRenderer(template).render("<p>Body</p>")

    assert html.strip() == (
        "<p>Body</p>|<sup>1</sup>&frasl;<sub>2</sub> cup|&lt;b&gt; <sup>3</sup>&frasl;<sub>4</sub>"
    )
