"""Rich consoles shared by the lexdb commands."""

from rich.console import Console
from rich.theme import Theme

# Styles for lookup output; commands refer to them by name in markup
lexdb_theme = Theme(
    {
        "info": "cyan",
        "success": "green",
        "warning": "yellow",
        "error": "red bold",
        "word": "magenta",
        "pos": "blue",
        "relation": "green",
        "dim": "dim",
    }
)

# Command output (stdout)
console = Console(theme=lexdb_theme)

# Errors (stderr)
error_console = Console(theme=lexdb_theme, stderr=True)


def print_error(message: str) -> None:
    error_console.print(f"[error]{message}[/]")


def print_disabled(feature: str) -> None:
    """Tell the user a feature is switched off in settings."""
    console.print(f"[warning]{feature} is disabled[/]")
