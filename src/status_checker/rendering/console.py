"""
Shared Rich console and theme for the status checker's terminal output.
"""

from rich.console import Console
from rich.theme import Theme

custom_theme = Theme({
    "info": "bold cyan",
    "success": "bold green",
    "warning": "bold yellow",
    "error": "bold red",
    "highlight": "bold magenta",
    "muted": "blue",
    "url": "cyan",
    "count": "blue",
    "table.header": "bold green",
})

console = Console(theme=custom_theme, highlight=False)
