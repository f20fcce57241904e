"""Materialize the template repository into the target directory."""

from __future__ import annotations

import logging
import shutil
import tempfile
from pathlib import Path
from typing import Callable

from rich.console import Console

from typed_vite_cli.core import git
from typed_vite_cli.core.config import (
    ALLOWED_EXISTING_ENTRIES,
    DEPENDENCY_CACHE_DIR,
    README_FILENAME,
    VCS_DIR,
)
from typed_vite_cli.core.context import InvocationContext
from typed_vite_cli.core.errors import (
    DirectoryExistsError,
    DirectoryNotEmptyError,
    PreconditionError,
    ScaffoldError,
    TemplateCloneError,
)

logger = logging.getLogger(__name__)

CloneFn = Callable[[str, Path], None]

# Never merged from a temporary clone into the current directory.
_MERGE_EXCLUDES = frozenset({VCS_DIR, DEPENDENCY_CACHE_DIR})


def ensure_target_available(context: InvocationContext) -> None:
    """Fail unless the target can receive the template without overwriting anything."""
    target = context.target_path
    if not context.is_current_dir:
        if target.exists():
            raise DirectoryExistsError(target)
        return

    try:
        entries = list(target.iterdir())
    except OSError as e:
        raise PreconditionError(
            f"Error cloning template: cannot access current directory {target}: {e}"
        ) from e
    blocking = sorted(entry.name for entry in entries if entry.name not in ALLOWED_EXISTING_ENTRIES)
    if blocking:
        raise DirectoryNotEmptyError(target, blocking)


def _copy_entry(src: Path, dest: Path) -> None:
    if src.is_dir() and not src.is_symlink():
        shutil.copytree(src, dest, symlinks=True, dirs_exist_ok=True)
    else:
        shutil.copy2(src, dest, follow_symlinks=False)


def merge_clone(source: Path, target: Path) -> None:
    """Copy a cloned tree into an existing directory, skipping history and caches."""
    for entry in sorted(source.iterdir()):
        if entry.name in _MERGE_EXCLUDES:
            continue
        logger.debug("Merging %s into %s", entry.name, target)
        _copy_entry(entry, target / entry.name)


def _clone_into_current_dir(repo_url: str, target: Path, clone: CloneFn) -> None:
    staging_root = Path(tempfile.mkdtemp(prefix=".typed-vite-clone-", dir=target.parent))
    staging = staging_root / "template"
    try:
        clone(repo_url, staging)
        merge_clone(staging, target)
    finally:
        if staging_root.exists():
            shutil.rmtree(staging_root)


def strip_template_artifacts(target: Path) -> None:
    """Remove the template's git history and bundled README."""
    vcs_dir = target / VCS_DIR
    if vcs_dir.is_dir() and not vcs_dir.is_symlink():
        shutil.rmtree(vcs_dir)
    elif vcs_dir.exists() or vcs_dir.is_symlink():
        vcs_dir.unlink()

    readme = target / README_FILENAME
    if readme.exists() or readme.is_symlink():
        readme.unlink()


def fetch_template(
    context: InvocationContext,
    *,
    repo_url: str,
    clone: CloneFn | None = None,
    console: Console | None = None,
) -> Path:
    """Clone the template into the context's target and return the target path.

    The new-directory and current-directory paths leave the same content
    behind: the template's files minus ``.git``, ``README.md`` and any
    bundled ``node_modules``.
    """
    ensure_target_available(context)
    target = context.target_path

    if clone is None:
        git.ensure_git_available()
        clone = git.clone_repository

    if console is not None:
        console.print("[blue]📦 Cloning template repository...[/blue]")

    try:
        if context.is_current_dir:
            _clone_into_current_dir(repo_url, target, clone)
        else:
            clone(repo_url, target)
            cache_dir = target / DEPENDENCY_CACHE_DIR
            if cache_dir.is_dir():
                shutil.rmtree(cache_dir)
        strip_template_artifacts(target)
    except ScaffoldError:
        raise
    except OSError as e:
        raise TemplateCloneError(f"Error cloning template: {e}") from e

    logger.debug("Template materialized at %s", target)
    if console is not None:
        console.print("[green]✓ Template cloned successfully[/green]")
    return target


__all__ = [
    "ensure_target_available",
    "fetch_template",
    "merge_clone",
    "strip_template_artifacts",
]
