"""Word list CLI - Main entry point."""

import logging
import sys
from pathlib import Path
from typing import Any

import click
import yaml  # type: ignore[import-untyped]
from tqdm import tqdm

from wordlist.concordance.builder import ConcordanceBuilder
from wordlist.concordance.snippet import DEFAULT_CONTEXT
from wordlist.models import Scope, ScriptureReference
from wordlist.utils.io import read_concordance, read_json, read_text, write_concordance
from wordlist.utils.log import setup_logging
from wordlist.utils.schema import validate_concordance


# Root directory
ROOT_DIR = Path(__file__).parent.parent
SCHEMA_DIR = ROOT_DIR / "etc" / "schemas"

SCOPE_CHOICE = click.Choice([s.value for s in Scope], case_sensitive=False)


def load_settings(settings_path: Path) -> dict[str, Any]:
    """Load settings.yaml."""
    if not settings_path.exists():
        click.echo(f"Error: settings.yaml not found at {settings_path}", err=True)
        sys.exit(1)

    with settings_path.open(encoding="utf-8") as f:
        result: dict[str, Any] = yaml.safe_load(f) or {}
        return result


def load_books(books_path: Path) -> dict[str, Any]:
    """Load books.yaml."""
    if not books_path.exists():
        click.echo(f"Warning: {books_path.name} not found, nothing to build", err=True)
        return {"books": {}}

    with books_path.open(encoding="utf-8") as f:
        result: dict[str, Any] = yaml.safe_load(f) or {}
        return result


def make_builder(settings: dict[str, Any], logger: logging.Logger) -> ConcordanceBuilder:
    """Concordance builder configured from settings."""
    context = settings.get("concordance", {}).get("context_chars", DEFAULT_CONTEXT)
    return ConcordanceBuilder(context=int(context), logger=logger)


def derived_dir(settings: dict[str, Any]) -> Path:
    return ROOT_DIR / settings.get("paths", {}).get("derived", "data/derived")


@click.group()
@click.option("--verbose", "-v", is_flag=True, help="Enable verbose logging")
@click.option(
    "--settings",
    "settings_path",
    type=click.Path(dir_okay=False, path_type=Path),
    default=ROOT_DIR / "etc" / "settings.yaml",
    show_default=True,
    help="Settings file",
)
@click.pass_context
def cli(ctx: click.Context, verbose: bool, settings_path: Path) -> None:
    """Word list concordance CLI."""
    settings = load_settings(settings_path)

    log_settings = settings.get("logging", {})
    log_level = "DEBUG" if verbose else log_settings.get("level", "INFO")
    log_format = log_settings.get("format", "pretty")
    log_file = ROOT_DIR / log_settings["file"] if log_settings.get("file") else None

    logger = setup_logging(level=log_level, format_type=log_format, log_file=log_file)

    ctx.ensure_object(dict)
    ctx.obj["settings"] = settings
    ctx.obj["logger"] = logger


@cli.group()
def concordance() -> None:
    """Build and inspect concordances."""
    pass


@concordance.command()
@click.argument("path", type=click.Path(exists=True, dir_okay=False, path_type=Path))
@click.option("--book", "book_num", required=True, type=click.IntRange(min=1), help="Book number")
@click.option("--chapter", "chapter_num", default=1, type=click.IntRange(min=1), help="Reference chapter")
@click.option("--verse", "verse_num", default=1, type=click.IntRange(min=1), help="Reference verse")
@click.option("--scope", type=SCOPE_CHOICE, help="Book, Chapter or Verse (default from settings)")
@click.option("--filter", "word_filter", default="", help="Keep only words containing this text")
@click.option("--output", "-o", type=click.Path(dir_okay=False, path_type=Path), help="Output JSON path")
@click.pass_context
def build(
    ctx: click.Context,
    path: Path,
    book_num: int,
    chapter_num: int,
    verse_num: int,
    scope: str | None,
    word_filter: str,
    output: Path | None,
) -> None:
    """Build the concordance of a marked-up book file."""
    logger = ctx.obj["logger"]
    settings = ctx.obj["settings"]

    try:
        scope_value = Scope.parse(
            scope or settings.get("concordance", {}).get("default_scope", Scope.BOOK)
        )
        reference = ScriptureReference(book_num, chapter_num, verse_num)

        logger.info(f"Building {scope_value.value} concordance for {path} at {reference}")
        result = make_builder(settings, logger).build(read_text(path), reference, scope_value)
        result = result.filter(word_filter)

        output_path = output or derived_dir(settings) / f"{path.stem}.concordance.json"
        write_concordance(output_path, result)

        click.echo(
            f"Wrote {len(result)} words ({result.total_occurrences} occurrences) to {output_path}"
        )

    except Exception as e:
        logger.error(f"Build failed: {e}", exc_info=True)
        click.echo(f"Error: {e}", err=True)
        sys.exit(1)


@concordance.command()
@click.option(
    "--books",
    "books_path",
    type=click.Path(dir_okay=False, path_type=Path),
    default=ROOT_DIR / "etc" / "books.yaml",
    show_default=True,
    help="Book list",
)
@click.pass_context
def batch(ctx: click.Context, books_path: Path) -> None:
    """Build book concordances for every enabled book in books.yaml."""
    logger = ctx.obj["logger"]
    settings = ctx.obj["settings"]

    books_config = load_books(books_path)
    enabled = {
        name: cfg
        for name, cfg in (books_config.get("books") or {}).items()
        if cfg.get("enabled", False)
    }

    if not enabled:
        click.echo("WARNING: No enabled books found", err=True)
        return

    builder = make_builder(settings, logger)
    output_dir = derived_dir(settings)
    built = 0
    failed = 0

    for name, cfg in tqdm(enabled.items(), desc="Building concordances", unit="book"):
        try:
            source_path = Path(cfg["path"])
            if not source_path.is_absolute():
                source_path = ROOT_DIR / source_path

            reference = ScriptureReference(int(cfg["book_num"]), 1, 1)
            result = builder.build(read_text(source_path), reference, Scope.BOOK)

            write_concordance(output_dir / f"{name}.concordance.json", result)
            built += 1

        except Exception as e:
            logger.error(f"Failed to build {name}: {e}", exc_info=True)
            tqdm.write(f"  ERROR: {name}: {e}")
            failed += 1
            continue

    click.echo(f"Built {built} concordances in {output_dir}")
    if failed:
        click.echo(f"Failed: {failed} books", err=True)


@concordance.command()
@click.argument("path", type=click.Path(exists=True, dir_okay=False, path_type=Path))
@click.pass_context
def validate(ctx: click.Context, path: Path) -> None:
    """Validate a concordance JSON file against the schema."""
    logger = ctx.obj["logger"]

    try:
        errors = validate_concordance(read_json(path), SCHEMA_DIR)
    except Exception as e:
        logger.error(f"Validation failed: {e}", exc_info=True)
        click.echo(f"Error: {e}", err=True)
        sys.exit(1)

    if errors:
        click.echo(f"Validation failed for {path}:", err=True)
        for error in errors:
            click.echo(f"  ERROR: {error}", err=True)
        sys.exit(1)

    click.echo("All validations passed")


@concordance.command()
@click.argument("path", type=click.Path(exists=True, dir_okay=False, path_type=Path))
@click.argument("word")
@click.pass_context
def show(ctx: click.Context, path: Path, word: str) -> None:
    """Show every location and snippet of WORD."""
    logger = ctx.obj["logger"]

    try:
        entry = read_concordance(path).get(word)
    except Exception as e:
        logger.error(f"Show failed: {e}", exc_info=True)
        click.echo(f"Error: {e}", err=True)
        sys.exit(1)

    if entry is None:
        click.echo(f"No entry for {word!r}", err=True)
        sys.exit(1)

    click.echo(f"{entry.word}: {entry.count} occurrences")
    for location, snippet in entry.occurrences():
        click.echo(f"  {location}  {snippet}")


@cli.group()
def export() -> None:
    """Export tables for downstream tools."""
    pass


@export.command()
@click.argument("path", type=click.Path(exists=True, dir_okay=False, path_type=Path))
@click.option("--output", "-o", required=True, type=click.Path(dir_okay=False, path_type=Path))
@click.pass_context
def occurrences(ctx: click.Context, path: Path, output: Path) -> None:
    """Export one row per occurrence (.parquet or .csv)."""
    logger = ctx.obj["logger"]

    try:
        from wordlist.export.tables import export_occurrences

        output_path = export_occurrences(read_concordance(path), output, logger)
        click.echo(f"Occurrences written to {output_path}")

    except Exception as e:
        logger.error(f"Export failed: {e}", exc_info=True)
        click.echo(f"Error: {e}", err=True)
        sys.exit(1)


@export.command()
@click.argument("path", type=click.Path(exists=True, dir_okay=False, path_type=Path))
@click.option("--output", "-o", required=True, type=click.Path(dir_okay=False, path_type=Path))
@click.pass_context
def frequencies(ctx: click.Context, path: Path, output: Path) -> None:
    """Export word counts (.parquet or .csv)."""
    logger = ctx.obj["logger"]

    try:
        from wordlist.export.tables import export_frequencies

        output_path = export_frequencies(read_concordance(path), output, logger)
        click.echo(f"Frequencies written to {output_path}")

    except Exception as e:
        logger.error(f"Export failed: {e}", exc_info=True)
        click.echo(f"Error: {e}", err=True)
        sys.exit(1)


def main() -> None:
    """Entry point."""
    cli(obj={})


if __name__ == "__main__":
    main()
