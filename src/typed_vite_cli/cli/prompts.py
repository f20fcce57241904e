"""Interactive collection of the project answers."""

from __future__ import annotations

import sys

import typer
from rich.console import Console
from rich.markup import escape

from typed_vite_cli.core.config import (
    DEFAULT_DESCRIPTION,
    DEFAULT_LICENSE,
    DEFAULT_PROJECT_NAME,
    LICENSE_CHOICES,
)
from typed_vite_cli.core.context import Answers, validate_project_name

from .ui import select_with_arrows


def is_interactive() -> bool:
    """True when stdin is a terminal that can drive the arrow-key selector."""
    return sys.stdin.isatty()


def prompt_project_name(console: Console) -> str:
    """Ask for the project name until a valid one is given."""
    while True:
        value = typer.prompt("What is your project name?", default=DEFAULT_PROJECT_NAME)
        error = validate_project_name(value)
        if error is None:
            return value.strip()
        console.print(f"[red]{error}[/red]")


def prompt_description() -> str:
    return typer.prompt("What is your project description?", default=DEFAULT_DESCRIPTION)


def match_license(value: str) -> str | None:
    """Map a typed value or display label to a license id, case-insensitively."""
    needle = value.strip().lower()
    for key, choice in LICENSE_CHOICES.items():
        if needle in (key.lower(), choice.display.lower()):
            return key
    return None


def prompt_license(console: Console, *, interactive: bool) -> str:
    prompt_text = "Choose a license for your project:"
    if interactive:
        return select_with_arrows(
            LICENSE_CHOICES,
            prompt_text,
            default_key=DEFAULT_LICENSE,
            console=console,
        )

    console.print(f"[bold]{prompt_text}[/bold]")
    for key, choice in LICENSE_CHOICES.items():
        console.print(f"  [cyan]{key}[/cyan] [dim]- {choice.description}[/dim]")
    while True:
        value = typer.prompt("License", default=DEFAULT_LICENSE)
        selected = match_license(value)
        if selected is not None:
            return selected
        console.print(
            f"[red]Invalid license '{escape(value)}'. Choose from: {', '.join(LICENSE_CHOICES)}[/red]"
        )


def collect_answers(console: Console, *, interactive: bool | None = None) -> Answers:
    """Prompt for name, description and license in that order."""
    if interactive is None:
        interactive = is_interactive()
    name = prompt_project_name(console)
    description = prompt_description()
    license_key = prompt_license(console, interactive=interactive)
    return Answers(name=name, description=description, license=license_key)


__all__ = [
    "collect_answers",
    "is_interactive",
    "match_license",
    "prompt_description",
    "prompt_license",
    "prompt_project_name",
]
