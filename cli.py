"""Command-line surface for the SQL reference catalog.

Commands:
  - list-modules: module numbers, titles and entry counts
  - show: entries of one module (--module) or one category (--category)
  - render: the whole guide as text or markdown
  - categories: category tags with entry counts
"""

from __future__ import annotations

from pathlib import Path
from typing import Optional, Sequence

import structlog
import typer

from catalog import CatalogError, CategoryIndex, ContentStore, UnsupportedFormatError
from models import Entry
from render_formats import render
from settings import settings
from stores import get_catalog
from utils import configure_logging, module_label

logger = structlog.get_logger(__name__)
app = typer.Typer(help="Browse the SQL reference guide by module or category.", no_args_is_help=True)


@app.callback()
def main(
    ctx: typer.Context,
    source: Optional[Path] = typer.Option(
        None, "--source", "-s", help="Path to the commented SQL guide (overrides SQLREF_SOURCE)"
    ),
) -> None:
    """SQL reference guide browser."""
    configure_logging(settings.log_level)
    ctx.obj = {"source": source or settings.source_path}


def _load(ctx: typer.Context) -> tuple[ContentStore, CategoryIndex]:
    source = (ctx.obj or {}).get("source")
    try:
        return get_catalog(source)
    except CatalogError as e:
        typer.echo(f"✗ Error: {e}", err=True)
        raise typer.Exit(1)
    except OSError as e:
        typer.echo(f"✗ Error: cannot read guide: {e}", err=True)
        raise typer.Exit(1)


def _emit(entries: Sequence[Entry], fmt: str, store: ContentStore) -> None:
    try:
        output = render(entries, fmt, module_titles=store.module_titles())
    except UnsupportedFormatError as e:
        logger.warning("render_format_rejected", format=fmt)
        typer.echo(f"✗ Error: {e}", err=True)
        raise typer.Exit(1)
    typer.echo(output, nl=False)


@app.command()
def list_modules(ctx: typer.Context) -> None:
    """List the modules of the guide in document order."""
    store, _ = _load(ctx)
    if store.title:
        typer.echo(store.title)
        typer.echo()
    for info in store.modules():
        count = len(store.get_by_module(info.number))
        typer.echo(f"{info.number:>3}  {module_label(info.number, info.title)}  ({count} entries)")


@app.command()
def show(
    ctx: typer.Context,
    module: Optional[int] = typer.Option(None, "--module", "-m", help="Module number"),
    category: Optional[str] = typer.Option(None, "--category", "-c", help="Category tag, e.g. joins"),
    fmt: Optional[str] = typer.Option(None, "--format", "-f", help="text or markdown"),
) -> None:
    """Show the entries of one module or one category."""
    if (module is None) == (category is None):
        raise typer.BadParameter("pass exactly one of --module or --category")

    store, index = _load(ctx)
    if module is not None:
        entries = store.get_by_module(module)
        label = f"module {module}"
    else:
        entries = index.lookup(category)
        label = f"category {category!r}"

    if not entries:
        typer.echo(f"No entries found for {label}.")
        return
    _emit(entries, fmt or settings.default_format, store)


@app.command("render")
def render_cmd(
    ctx: typer.Context,
    fmt: Optional[str] = typer.Option(None, "--format", "-f", help="text or markdown"),
) -> None:
    """Render every entry of the guide."""
    store, _ = _load(ctx)
    _emit(store.all(), fmt or settings.default_format, store)


@app.command()
def categories(ctx: typer.Context) -> None:
    """List category tags with their entry counts."""
    _, index = _load(ctx)
    for tag, count in index.counts().items():
        typer.echo(f"{tag:<18} {count}")


if __name__ == "__main__":
    app()
