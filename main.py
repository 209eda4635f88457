#!/usr/bin/env python3
"""CLI entrypoint for generating and inspecting the locale data table."""

from __future__ import annotations

import tempfile
from pathlib import Path
from typing import Annotated

import typer

from localedata.io import DownloadError, ExtractionError, extract_archive, fetch_archive
from localedata.loaders import REQUIRED_PACKAGES, CldrDataError
from localedata.models import Locale
from localedata.processing import collect_locales
from localedata.registry import DATA_TABLE_PATH, DataTableError, load_registry
from localedata.writers import write_table

CLDR_RELEASE = "48.0.0"
CLDR_ARCHIVE_NAME = f"cldr-{CLDR_RELEASE}-json-full.zip"
CLDR_URL = (
    "https://github.com/unicode-org/cldr-json/releases/download/"
    f"{CLDR_RELEASE}/{CLDR_ARCHIVE_NAME}"
)

__SCRIPT_DIR = Path(__file__).resolve().parent
CACHE_DIR = __SCRIPT_DIR / "cldr"
CLDR_CACHE_PATH = CACHE_DIR / CLDR_ARCHIVE_NAME

app = typer.Typer(
    help="Generate and inspect the static locale data table.",
    add_completion=False,
)


def _fail(message: str) -> typer.Exit:
    typer.secho(f"Error: {message}", fg=typer.colors.RED, err=True)
    return typer.Exit(code=1)


@app.command()
def generate(
    output: Annotated[
        Path,
        typer.Option(
            "--output",
            "-o",
            help="Destination JSON data table.",
            writable=True,
            resolve_path=True,
        ),
    ] = DATA_TABLE_PATH,
    cldr_zip: Annotated[
        Path | None,
        typer.Option(
            "--cldr-zip",
            help="Path to an existing CLDR JSON archive. If missing, the archive is downloaded to the cache directory.",
            exists=True,
            file_okay=True,
            dir_okay=False,
            readable=True,
            resolve_path=True,
        ),
    ] = None,
    locales: Annotated[
        list[str] | None,
        typer.Option(
            "--locale",
            "-l",
            help="CLDR locale id to include (repeatable). Defaults to every available locale.",
        ),
    ] = None,
) -> None:
    """Rebuild the locale data table from CLDR data."""
    with tempfile.TemporaryDirectory() as tmp_dir:
        tmp_path = Path(tmp_dir)

        if cldr_zip:
            archive_path = cldr_zip
            typer.echo(f"Using existing CLDR archive: {archive_path}")
        else:
            try:
                archive_path, cached = fetch_archive(CLDR_URL, CLDR_CACHE_PATH)
            except DownloadError as e:
                raise _fail(str(e)) from e
            state = "cached" if cached else "downloaded"
            typer.echo(f"Using {state} CLDR archive: {archive_path}")

        extract_dir = tmp_path / "cldr"
        try:
            count = extract_archive(archive_path, extract_dir, packages=REQUIRED_PACKAGES)
        except ExtractionError as e:
            raise _fail(str(e)) from e
        typer.echo(f"Extracted {count} files from {archive_path.name}")

        typer.echo("Collecting locale symbols...")
        try:
            table = collect_locales(
                extract_dir, source=f"CLDR {CLDR_RELEASE}", locales=locales or None
            )
        except CldrDataError as e:
            raise _fail(str(e)) from e

        typer.echo(
            f"Writing {len(table.locales)} locales "
            f"({len(table.date_format_symbols)} date and "
            f"{len(table.decimal_format_symbols)} decimal symbol sets) to {output}..."
        )
        write_table(output, table)

    typer.secho(
        f"\nSuccessfully wrote {len(table.locales)} locales to {output}",
        fg=typer.colors.GREEN,
        bold=True,
    )


def _describe(locale: Locale) -> list[str]:
    tag = locale.language_tag
    dates = locale.date_format_symbols
    numbers = locale.decimal_format_symbols
    return [
        f"tag:       {tag.tag}",
        f"language:  {tag.language}",
        f"region:    {tag.region}",
        f"variant:   {tag.variant}",
        f"script:    {tag.script}",
        f"ampm:      {', '.join(dates.ampm)}",
        f"eras:      {', '.join(dates.eras)}",
        f"months:    {', '.join(dates.months[:12])}",
        f"weekdays:  {', '.join(dates.weekdays[1:])}",
        f"currency:  {numbers.currency} ({numbers.currency_symbol})",
        f"decimal:   {numbers.decimal_separator}",
        f"grouping:  {numbers.grouping_separator}",
        f"zero:      {numbers.zero_digit}",
    ]


@app.command()
def show(
    tag: Annotated[str, typer.Argument(help="Language tag, e.g. en-US or zh-Hans-CN.")],
    table: Annotated[
        Path,
        typer.Option(
            "--table",
            help="Data table to read.",
            exists=True,
            file_okay=True,
            dir_okay=False,
            readable=True,
            resolve_path=True,
        ),
    ] = DATA_TABLE_PATH,
) -> None:
    """Print the symbols registered for a language tag."""
    try:
        registry = load_registry(table)
    except DataTableError as e:
        raise _fail(str(e)) from e

    locale = registry.for_language_tag_string(tag)
    if locale is None:
        raise _fail(f"No locale registered for '{tag}'.")

    for line in _describe(locale):
        typer.echo(line)


if __name__ == "__main__":
    app()
