"""Main CLI application entry point."""

from pathlib import Path

import typer

from lexdb.cli.commands import complete, lookup, status
from lexdb.cli.utils.console import print_error
from lexdb.config import settings
from lexdb.logging_config import setup_logging
from lexdb.services.wordnet import LexiconError, LookupService

app = typer.Typer(
    name="lexdb",
    help="WordNet dictionary lookups for editor tooling",
    no_args_is_help=True,
    rich_markup_mode="rich",
)


@app.callback()
def startup(
    ctx: typer.Context,
    wordnet_dir: Path | None = typer.Option(
        None,
        "--wordnet-dir",
        "-d",
        help="WordNet dict directory (defaults to WNSEARCHDIR)",
    ),
) -> None:
    """Load the dictionary before running a command."""
    setup_logging()

    config = settings
    if wordnet_dir is not None:
        config = settings.model_copy(update={"wordnet_dir": wordnet_dir.expanduser()})

    try:
        service = LookupService.from_settings(config)
    except LexiconError as e:
        print_error(f"Failed to load dictionary: {e}")
        raise typer.Exit(1) from None

    ctx.obj = service
    ctx.call_on_close(service.store.close)


app.command(name="hover", help="Show definitions and synonyms of a word")(lookup.hover)
app.command(name="define", help="Show every sense of a word with its relations")(lookup.define)
app.command(name="relations", help="List words related by one relation")(lookup.relations)
app.command(name="at", help="Look up the word under a cursor position")(lookup.at)
app.command(name="complete", help="List words starting with a prefix")(complete.complete)
app.command(name="status", help="Show dictionary statistics")(status.status)


if __name__ == "__main__":
    app()
