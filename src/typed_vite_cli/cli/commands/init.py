"""Init command: the scaffolding pipeline and its reporting."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Callable, Optional

import typer
from rich import box
from rich.console import Console
from rich.markup import escape
from rich.panel import Panel

from typed_vite_cli.cli.prompts import collect_answers
from typed_vite_cli.core.config import ScaffoldSettings, load_settings
from typed_vite_cli.core.context import Answers, InvocationContext, resolve_invocation
from typed_vite_cli.core.errors import ScaffoldError
from typed_vite_cli.core.git import init_repository
from typed_vite_cli.core.logging_config import setup_logging
from typed_vite_cli.core.package_manager import install_dependencies
from typed_vite_cli.template import (
    ensure_target_available,
    fetch_template,
    update_manifest,
    write_readme,
)

from .init_help import INIT_COMMAND_DOC, USAGE_EXAMPLES

logger = logging.getLogger(__name__)


def run_pipeline(
    context: InvocationContext,
    answers: Answers,
    settings: ScaffoldSettings,
    *,
    console: Console,
    skip_install: bool = False,
) -> None:
    """Clone, rewrite, init and install, in that order. Stops at the first error."""
    project_path = fetch_template(context, repo_url=settings.template_repo, console=console)

    update_manifest(
        project_path,
        name=answers.name,
        description=answers.description,
        license=answers.license,
    )
    console.print("[green]✓ package.json updated successfully[/green]")

    write_readme(project_path, answers, package_manager=settings.package_manager)
    console.print("[green]✓ README.md created successfully[/green]")

    init_repository(project_path)
    console.print("[green]✓ Git repository initialized[/green]")

    if skip_install:
        console.print("[yellow]Skipping dependency installation (--skip-install)[/yellow]")
        return
    console.print("[blue]📦 Installing dependencies...[/blue]")
    install_dependencies(project_path, package_manager=settings.package_manager)
    console.print("[green]✓ Dependencies installed successfully[/green]")


def next_steps(context: InvocationContext, settings: ScaffoldSettings, *, installed: bool) -> list[str]:
    commands: list[str] = []
    if not context.is_current_dir:
        commands.append(f"cd {escape(context.raw_argument)}")
    if not installed:
        commands.append(f"{escape(settings.package_manager)} install")
    commands.append(f"{escape(settings.package_manager)} dev")
    return [f"{index}. {command}" for index, command in enumerate(commands, start=1)]


def build_summary_panel(
    context: InvocationContext,
    answers: Answers,
    settings: ScaffoldSettings,
    *,
    installed: bool = True,
) -> Panel:
    lines = [
        "[green]🎉 Project successfully created![/green]",
        f"📁 Location: [blue]{escape(str(context.target_path))}[/blue]",
        f"📦 Name: [blue]{escape(answers.name)}[/blue]",
        f"📝 Description: [blue]{escape(answers.description)}[/blue]",
        f"📄 License: [blue]{answers.license}[/blue]",
        "",
        "Next steps:",
        *next_steps(context, settings, installed=installed),
    ]
    return Panel("\n".join(lines), box=box.ASCII, padding=(1, 2))


def _report_failure(err_console: Console, error: ScaffoldError) -> None:
    err_console.print(f"[red]An error occurred during setup: {escape(str(error))}[/red]")
    if error.hint:
        err_console.print(f"[yellow]Hint:[/yellow] {error.hint}")


def register_init_command(
    app: typer.Typer,
    *,
    console: Console,
    err_console: Console,
    show_banner: Callable[[], None],
) -> None:
    """Attach the init command to ``app`` using the given consoles."""

    @app.command(help=INIT_COMMAND_DOC)
    def init(
        directory: Optional[str] = typer.Argument(
            None,
            help="Project directory to create, or '.' for the current directory",
        ),
        skip_install: bool = typer.Option(
            False, "--skip-install", help="Do not run the package manager's install step"
        ),
        debug: bool = typer.Option(False, "--debug", help="Show verbose diagnostic logging"),
    ) -> None:
        if not directory or not directory.strip():
            err_console.print("[red]Please provide a project directory[/red]")
            for example in USAGE_EXAMPLES:
                console.print(f"[blue]{example}[/blue]")
            raise typer.Exit(1)

        settings = load_settings()
        setup_logging("DEBUG" if debug else settings.log_level)

        show_banner()

        context = resolve_invocation(directory, Path.cwd())
        logger.debug("Target %s (current dir: %s)", context.target_path, context.is_current_dir)

        try:
            ensure_target_available(context)
            answers = collect_answers(console)
            run_pipeline(context, answers, settings, console=console, skip_install=skip_install)
        except ScaffoldError as e:
            logger.debug("Setup failed", exc_info=True)
            _report_failure(err_console, e)
            raise typer.Exit(1)
        except (typer.Abort, KeyboardInterrupt):
            err_console.print("[red]Setup cancelled[/red]")
            raise typer.Exit(1)

        console.print()
        console.print(build_summary_panel(context, answers, settings, installed=not skip_install))


__all__ = ["build_summary_panel", "next_steps", "register_init_command", "run_pipeline"]
