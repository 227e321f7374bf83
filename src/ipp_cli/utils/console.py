"""Console utility functions for formatting and output."""

from typing import Any, Optional

import click
from colorama import Fore, Style, init
from rich.console import Console
from rich.panel import Panel
from rich.table import Table

init(autoreset=True)


# Status symbols for consistent iconography
STATUS_SYMBOLS = {
    'success': '✨',
    'running': '🚀',
    'gear': '⚙️',
    'info': '💡',
    'warning': '⚠️',
    'error': '❌',
    'check': '✅',
    'list': '📋',
    'preview': '👀',
    'scissors': '✂️',
    'skip': '⏭️',
}

_COLOR_MAP = {
    'red': Fore.RED,
    'green': Fore.GREEN,
    'yellow': Fore.YELLOW,
    'blue': Fore.BLUE,
    'cyan': Fore.CYAN,
    'white': Fore.WHITE,
    'magenta': Fore.MAGENTA,
    'muted': Fore.WHITE,
}

# Rich has no "muted" style
_RICH_STYLE_MAP = {
    'muted': 'dim',
}


def _get_console() -> Optional[Console]:
    """Get Rich console instance, or None if one cannot be created."""
    try:
        return Console()
    except Exception:
        return None


def _rich_echo(message: str, color: str = "white", bold: bool = False, symbol: str = None):
    """Echo message with Rich formatting or colorama fallback."""
    if symbol and symbol in STATUS_SYMBOLS:
        message = f"{STATUS_SYMBOLS[symbol]} {message}"

    console = _get_console()
    if console:
        rich_color = _RICH_STYLE_MAP.get(color, color)
        style_str = f"bold {rich_color}" if bold else rich_color
        # Paths and markers contain brackets; keep them out of Rich markup.
        console.print(message, style=style_str, markup=False, highlight=False)
        return

    color_code = _COLOR_MAP.get(color, Fore.WHITE)
    style_code = Style.BRIGHT if bold else ""
    click.echo(f"{color_code}{style_code}{message}{Style.RESET_ALL}")


def _rich_success(message: str, symbol: str = None):
    """Display success message with green color and bold styling."""
    _rich_echo(message, color="green", symbol=symbol, bold=True)


def _rich_error(message: str, symbol: str = None):
    """Display error message with red color."""
    _rich_echo(message, color="red", symbol=symbol)


def _rich_warning(message: str, symbol: str = None):
    """Display warning message with yellow color."""
    _rich_echo(message, color="yellow", symbol=symbol)


def _rich_info(message: str, symbol: str = None):
    """Display info message with blue color."""
    _rich_echo(message, color="blue", symbol=symbol)


def _rich_panel(content: Any, title: str = None, style: str = "cyan"):
    """Display content in a Rich panel with fallback."""
    console = _get_console()
    if console:
        console.print(Panel(content, title=title, border_style=style, padding=(0, 1)))
        return

    if title:
        click.echo(f"\n--- {title} ---")
    click.echo(str(content))
    if title:
        click.echo("-" * (len(title) + 8))


def _create_fragments_table(rows: list, title: str = "Fragments") -> Table:
    """Create a Rich table listing fragments in pass order.

    Args:
        rows: Sequences of ``(name, marker, path, file_state, marker_state)``.
        title: Table title.
    """
    table = Table(title=f"📋 {title}", show_header=True, header_style="bold cyan")
    table.add_column("#", style="dim", justify="right")
    table.add_column("Fragment", style="bold white")
    table.add_column("Marker", style="white")
    table.add_column("Path", style="white")
    table.add_column("File", justify="center")
    table.add_column("Marker found", justify="center")

    for index, row in enumerate(rows, start=1):
        table.add_row(str(index), *[str(cell) for cell in row])
    return table
