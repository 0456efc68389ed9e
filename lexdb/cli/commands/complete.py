"""Completion command."""

import typer

from lexdb.cli.utils.console import console, print_disabled
from lexdb.config import settings
from lexdb.services.wordnet import LookupService


def complete(
    ctx: typer.Context,
    prefix: str = typer.Argument(..., help="Prefix to complete"),
    limit: int | None = typer.Option(
        None, "--limit", "-n", min=1, help="Maximum completions (defaults to the configured cap)"
    ),
) -> None:
    """List dictionary words starting with a prefix, one per line."""
    if not settings.enable_completion:
        print_disabled("Completion")
        return

    service: LookupService = ctx.obj
    if limit is None:
        lemmas = service.complete(prefix)
    else:
        lemmas = service.store.completions_with_prefix(prefix, limit)

    for lemma in lemmas:
        console.print(lemma.text, markup=False, highlight=False)
