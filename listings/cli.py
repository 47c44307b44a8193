"""Command line interface for listings."""

import json
import sys
from pathlib import Path
from typing import Optional

import click
from loguru import logger

from .core.config import Config
from .errors import ListingsError
from .parse import parse_page


def setup_logging(level: str) -> None:
    """Send listings diagnostics to stderr at ``level``."""
    logger.remove()
    logger.add(sys.stderr, level=level, format="{level: <8} | {message}")
    logger.enable("listings")


@click.group()
@click.version_option(package_name="wikivoyage-listings")
@click.option("--verbose", "-v", is_flag=True, help="Log debug diagnostics")
@click.pass_context
def cli(ctx: click.Context, verbose: bool) -> None:
    """Extract listing templates from Wikivoyage wikitext."""
    ctx.ensure_object(dict)
    ctx.obj["verbose"] = verbose


@cli.command()
@click.argument("wikitext_file", type=click.Path(exists=True, dir_okay=False))
@click.option("--config", "config_file", type=click.Path(exists=True), help="YAML config file")
@click.option("--out", type=click.Path(dir_okay=False), help="Output JSON file (default: stdout)")
@click.pass_context
def extract(
    ctx: click.Context, wikitext_file: str, config_file: Optional[str], out: Optional[str]
) -> None:
    """Extract listings from a wikitext file as JSON."""
    try:
        config = Config.from_file(Path(config_file)) if config_file else Config()
    except ListingsError as e:
        raise click.ClickException(str(e))

    setup_logging("DEBUG" if ctx.obj["verbose"] else config.log_level)

    with open(wikitext_file, "r", encoding="utf-8") as f:
        wikitext = f.read()

    page = parse_page(wikitext, config)
    data = json.dumps(
        [listing.to_dict() for listing in page.listings], indent=2, ensure_ascii=False
    )

    if out:
        with open(out, "w", encoding="utf-8") as f:
            f.write(data + "\n")
        click.echo(f"✓ {len(page.listings)} listings written to {out}", err=True)
    else:
        click.echo(data)

    if page.skipped:
        click.echo(f"⚠ Skipped {page.skipped} listings nested too deeply", err=True)


if __name__ == "__main__":  # pragma: no cover
    cli()
