#!/usr/bin/env python3
"""
create-typed-vite-react - scaffold a TypeScript React project with Vite.

Usage:
    create-typed-vite-react <project-directory>
    create-typed-vite-react .
"""

from __future__ import annotations

import typer
from rich import box
from rich.console import Console
from rich.panel import Panel

from typed_vite_cli.cli.commands.init import register_init_command
from typed_vite_cli.core.config import TAGLINE, TITLE

__version__ = "1.0.0"

console = Console()
err_console = Console(stderr=True)

app = typer.Typer(
    name="create-typed-vite-react",
    help="Scaffold a new project from the Typed Vite React template",
    add_completion=False,
)


def show_banner() -> None:
    """Display the framed intro banner."""
    console.print()
    console.print(
        Panel(
            f"[bold blue]{TITLE}[/bold blue]\n{TAGLINE}",
            box=box.DOUBLE,
            expand=False,
            padding=(1, 1),
        )
    )
    console.print()


register_init_command(app, console=console, err_console=err_console, show_banner=show_banner)


def main() -> None:
    app()


if __name__ == "__main__":
    main()
