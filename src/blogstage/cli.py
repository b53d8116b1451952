"""CLI interface for Blogstage.

Command-line tool for rendering blog listing pages.
"""

import json
import logging
import sys
from pathlib import Path

import click

from blogstage.config import Config
from blogstage.core.loader import load_paginator
from blogstage.core.renderer import render_page
from blogstage.html import render_html


@click.group()
def cli() -> None:
    """Blogstage - Where posts take the stage."""


@cli.command()
@click.argument("page_file", type=click.Path(exists=True, dir_okay=False, path_type=Path))
@click.option(
    "--config",
    "-c",
    "config_path",
    type=click.Path(exists=True, path_type=Path),
    default=None,
    help="Path to configuration file (default: auto-discover blogstage.toml)",
)
@click.option(
    "--base-path",
    default=None,
    help="Site base path prefixed to all links (overrides config)",
)
@click.option(
    "--format",
    "-f",
    "output_format",
    type=click.Choice(["json", "html"]),
    default="json",
    help="Output format (default: json)",
)
@click.option(
    "--output",
    "-o",
    type=click.Path(dir_okay=False, path_type=Path),
    default=None,
    help="Write output to file instead of stdout",
)
@click.option(
    "--verbose",
    "-v",
    is_flag=True,
    help="Enable verbose output (log rendering details)",
)
def render(
    page_file: Path,
    config_path: Path | None,
    base_path: str | None,
    output_format: str,
    output: Path | None,
    verbose: bool,
) -> None:
    """Render a listing page from a page document."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    try:
        config = Config.load(config_path).with_overrides(base_path=base_path)
        paginator = load_paginator(page_file)
    except (FileNotFoundError, ValueError) as e:
        click.echo(click.style(f"Error: {e}", fg="red"), err=True)
        sys.exit(1)

    page = render_page(paginator, config.site)

    if output_format == "html":
        content = render_html(page)
    else:
        content = json.dumps(page.to_dict(), indent=2, ensure_ascii=False) + "\n"

    if output is None:
        click.echo(content, nl=False)
        return

    output.write_text(content, encoding="utf-8")
    click.echo(f"Rendered page {paginator.page} of {paginator.total_pages} to {output}")


if __name__ == "__main__":
    cli()
