"""CLI utility modules."""

from lexdb.cli.utils.console import console, error_console, print_disabled, print_error
from lexdb.cli.utils.markdown import render_definitions, render_hover, split_gloss

__all__ = [
    "console",
    "error_console",
    "print_disabled",
    "print_error",
    "render_definitions",
    "render_hover",
    "split_gloss",
]
