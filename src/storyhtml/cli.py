"""storyhtml CLI entrypoint."""

from __future__ import annotations

import logging
from pathlib import Path

import click

from storyhtml.config import ConfigError, IconConfig, load_config
from storyhtml.formatter import Formatter
from storyhtml.renderer.page_renderer import PageRenderer


@click.command(context_settings={"help_option_names": ["-h", "--help"]})
@click.argument("input_path", type=click.Path(exists=True, dir_okay=False, path_type=Path))
@click.option("--output", "-o", type=click.Path(path_type=Path), default=None, help="Output HTML path (stdout if omitted)")
@click.option(
    "--mode",
    type=click.Choice(["story", "caption"], case_sensitive=False),
    default="story",
    show_default=True,
    help="Formatting entry point",
)
@click.option("--page", is_flag=True, help="Wrap the fragment in a standalone preview page")
@click.option("--title", type=str, default=None, help="Preview page title (defaults to the file name)")
@click.option("--contact", type=str, default=None, help="Preview page footer text, written as character entities")
@click.option(
    "--config",
    "config_path",
    type=click.Path(exists=True, dir_okay=False, path_type=Path),
    default=None,
    help="TOML file with [icons] settings",
)
@click.option("--verbose", "-v", is_flag=True, help="Log each classification step")
def main(
    input_path: Path,
    output: Path | None,
    mode: str,
    page: bool,
    title: str | None,
    contact: str | None,
    config_path: Path | None,
    verbose: bool,
) -> None:
    """Format a plain-text story or caption as HTML."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    icons = _load_icons(config_path)
    try:
        text = input_path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as exc:
        raise click.ClickException(f"Cannot read {input_path.name}: {exc}") from exc

    formatter = Formatter(icons)
    mode = mode.lower()
    html = formatter.story(text) if mode == "story" else formatter.caption(text)

    if page:
        html = PageRenderer().render(html, title=title or input_path.stem, mode=mode, contact=contact)

    if output is None:
        click.echo(html)
        return

    output.parent.mkdir(parents=True, exist_ok=True)
    output.write_text(html, encoding="utf-8")
    click.echo(f"Rendered: {output}", err=True)


def _load_icons(config_path: Path | None) -> IconConfig:
    if config_path is None:
        return IconConfig()
    try:
        return load_config(config_path)
    except ConfigError as exc:
        raise click.ClickException(str(exc)) from exc


if __name__ == "__main__":  # pragma: no cover
    main()
