"""Reusable UI helpers for interactive CLI prompts."""

from __future__ import annotations

from typing import Dict, Optional

import readchar
import typer
from rich.console import Console, Group
from rich.live import Live
from rich.panel import Panel
from rich.table import Table
from rich.text import Text

from typed_vite_cli.core.config import LicenseChoice


def get_key() -> str:
    """Read one keypress for the license selector and map it to a navigation action.

    Returns ``"up"``, ``"down"``, ``"enter"`` or ``"escape"``; any other key is
    returned unchanged. Ctrl+C is re-raised as ``KeyboardInterrupt``.
    """
    key = readchar.readkey()

    if key == readchar.key.UP or key == readchar.key.CTRL_P:
        return "up"
    if key == readchar.key.DOWN or key == readchar.key.CTRL_N:
        return "down"

    if key == readchar.key.ENTER:
        return "enter"

    if key == readchar.key.ESC or key == "\x1b":
        return "escape"

    if key == readchar.key.CTRL_C:
        raise KeyboardInterrupt

    return key


def _resolve_console(console: Optional[Console]) -> Console:
    """Selector output goes to the caller's console when one is injected."""
    return console or Console()


def select_with_arrows(
    options: Dict[str, LicenseChoice],
    prompt_text: str = "Select an option",
    default_key: str | None = None,
    console: Console | None = None,
) -> str:
    """
    Interactive selection using arrow keys with Rich Live display.

    The highlighted option's description is shown under the list. Esc or
    Ctrl+C aborts with ``typer.Abort``.
    """
    console = _resolve_console(console)
    option_keys = list(options.keys())
    if default_key and default_key in option_keys:
        selected_index = option_keys.index(default_key)
    else:
        selected_index = 0

    def create_selection_panel():
        table = Table.grid(padding=(0, 2))
        table.add_column(style="cyan", justify="left", width=3)
        table.add_column(style="white", justify="left")

        for i, key in enumerate(option_keys):
            pointer = "▶" if i == selected_index else " "
            table.add_row(pointer, f"[cyan]{options[key].display}[/cyan] [dim]({key})[/dim]")

        table.add_row("", "")
        table.add_row("", "[dim]Use ↑/↓ to navigate, Enter to select, Esc to cancel[/dim]")

        description = Text(options[option_keys[selected_index]].description, style="bright_black")
        return Panel(
            Group(table, Text(""), description),
            title=f"[bold]{prompt_text}[/bold]",
            border_style="cyan",
            padding=(1, 2),
        )

    console.print()

    with Live(create_selection_panel(), console=console, transient=True, auto_refresh=False) as live:
        while True:
            try:
                key = get_key()
            except KeyboardInterrupt:
                console.print("\n[yellow]Selection cancelled[/yellow]")
                raise typer.Abort()

            if key == "up":
                selected_index = (selected_index - 1) % len(option_keys)
            elif key == "down":
                selected_index = (selected_index + 1) % len(option_keys)
            elif key == "enter":
                return option_keys[selected_index]
            elif key == "escape":
                console.print("\n[yellow]Selection cancelled[/yellow]")
                raise typer.Abort()

            live.update(create_selection_panel(), refresh=True)


__all__ = ["get_key", "select_with_arrows"]
