"""Word lookup commands: hover, define, relations and cursor lookups."""

from pathlib import Path

import typer
from rich.markdown import Markdown
from rich.table import Table

from lexdb.cli.utils.console import console, print_disabled, print_error
from lexdb.cli.utils.markdown import render_definitions, render_hover
from lexdb.config import settings
from lexdb.services.wordnet import LookupService


def _print_markdown(text: str, raw: bool) -> None:
    if raw:
        console.print(text, markup=False, highlight=False, soft_wrap=True)
    else:
        console.print(Markdown(text))


def hover(
    ctx: typer.Context,
    word: str = typer.Argument(..., help="Word to look up"),
    raw: bool = typer.Option(False, "--raw", help="Print markdown source"),
) -> None:
    """Show definitions and synonyms of a word."""
    if not settings.enable_hover:
        print_disabled("Hover")
        return

    service: LookupService = ctx.obj
    senses = service.hover(word)
    if not senses:
        console.print(f"[dim]No definition for '{word}'[/]")
        return

    _print_markdown(render_hover(senses), raw)


def define(
    ctx: typer.Context,
    word: str = typer.Argument(..., help="Word to define"),
    depth: int | None = typer.Option(None, "--depth", min=0, help="Relation hops to follow"),
    output: Path | None = typer.Option(
        None, "--output", "-o", help="Write the markdown to a file instead of printing it"
    ),
    raw: bool = typer.Option(False, "--raw", help="Print markdown source"),
) -> None:
    """Show every sense of a word with its relations."""
    if not settings.enable_goto_definition:
        print_disabled("Goto-definition")
        return

    service: LookupService = ctx.obj
    definitions = service.definition(word, depth)
    if not definitions:
        console.print(f"[dim]No definition for '{word}'[/]")
        return

    text = render_definitions(definitions)
    if output is not None:
        output.parent.mkdir(parents=True, exist_ok=True)
        output.write_text(text + "\n", encoding="utf-8")
        console.print(f"[success]Wrote {output}[/]")
        return

    _print_markdown(text, raw)


def relations(
    ctx: typer.Context,
    word: str = typer.Argument(..., help="Word to expand"),
    relation: str = typer.Argument(..., help="Relation name or pointer symbol, or 'all'"),
    depth: int = typer.Option(1, "--depth", min=0, help="Relation hops to follow"),
) -> None:
    """List words related to a word by one relation."""
    service: LookupService = ctx.obj
    try:
        related = service.related(word, relation, depth)
    except ValueError as e:
        print_error(str(e))
        raise typer.Exit(1) from None

    if not related:
        console.print(f"[dim]No {relation} relations for '{word}'[/]")
        return

    table = Table(title=f"{relation} of {word}")
    table.add_column("Word", style="word")
    table.add_column("POS", style="pos")
    table.add_column("Relation", style="relation")
    table.add_column("Hops", justify="right")
    table.add_column("Gloss", style="dim")
    for item in related:
        table.add_row(
            item.lemma.display,
            item.lemma.pos.label,
            item.relation.value,
            str(item.distance),
            item.sense.definition,
        )
    console.print(table)


def at(
    ctx: typer.Context,
    file_path: Path = typer.Argument(..., help="Text file to read"),
    line: int = typer.Argument(..., min=0, help="Zero-based line number"),
    character: int = typer.Argument(..., min=0, help="Zero-based character offset"),
) -> None:
    """Look up the word under a cursor position in a file."""
    if not file_path.exists():
        print_error(f"File not found: {file_path}")
        raise typer.Exit(1)

    service: LookupService = ctx.obj
    text = file_path.read_text(encoding="utf-8")

    if settings.enable_hover:
        senses = service.hover_at(text, line, character)
        if senses:
            console.print(Markdown(render_hover(senses)))
        else:
            console.print("[dim]No definition at cursor[/]")

    if settings.enable_code_actions:
        candidates = service.candidates_at(text, line, character)
        for lemma in service.code_actions(candidates):
            console.print(f"[info]Define[/] [word]{lemma.display}[/]")
