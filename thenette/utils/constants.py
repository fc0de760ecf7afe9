"""
Centralized UI constants for consistent styling across thenette.

This module defines standard symbols and styles used in Rich console output
by the CLI.
"""

# Colorblind-friendly symbols and styles
SYMBOLS = {
    "success": "[bold green]✓[/bold green] ",
    "error": "[bold red]![/bold red] ",
    "pending": "[bold yellow]…[/bold yellow] ",
    "created": "+ ",
    "settled": "→ ",
}

STYLE = {
    "header": "bold cyan",
    "dim": "dim",
    "fulfilled": "green",
    "rejected": "red",
    "pending": "yellow",
    "recovered": "magenta",
}
