"""Status command for displaying dictionary statistics."""

import typer
from rich.panel import Panel
from rich.table import Table

from lexdb.cli.utils.console import console
from lexdb.config import settings
from lexdb.services.wordnet import LookupService, PartOfSpeech


def _enabled(flag: bool) -> str:
    return "[green]Enabled[/]" if flag else "[yellow]Disabled[/]"


def status(ctx: typer.Context) -> None:
    """Show dictionary location, lemma counts and enabled features."""
    service: LookupService = ctx.obj
    store = service.store

    # Build dictionary table
    dict_table = Table(show_header=False, box=None, padding=(0, 2))
    dict_table.add_column("Label", style="bold")
    dict_table.add_column("Value", justify="right")

    dict_table.add_row("Directory", str(store.directory))
    for pos in PartOfSpeech:
        dict_table.add_row(f"{pos.label.capitalize()} lemmas", str(store.lemma_count(pos)))
    dict_table.add_row("Total lemmas", f"[green]{store.lemma_count()}[/]")

    dict_panel = Panel(dict_table, title="[bold]Dictionary[/]", border_style="blue")

    # Build features table
    features_table = Table(show_header=False, box=None, padding=(0, 2))
    features_table.add_column("Label", style="bold")
    features_table.add_column("Value", justify="right")

    features_table.add_row("Hover", _enabled(settings.enable_hover))
    features_table.add_row("Goto definition", _enabled(settings.enable_goto_definition))
    features_table.add_row("Completion", _enabled(settings.enable_completion))
    features_table.add_row("Code actions", _enabled(settings.enable_code_actions))
    features_table.add_row("Completion limit", str(service.completion_limit))

    features_panel = Panel(features_table, title="[bold]Features[/]", border_style="blue")

    console.print()
    console.print(dict_panel)
    console.print(features_panel)
    console.print()
