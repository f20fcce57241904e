"""Error hierarchy for the scaffolding pipeline.

Step functions wrap low-level failures in one of these classes; the init
command is the only place that reports them and exits.
"""

from __future__ import annotations

from pathlib import Path


class ScaffoldError(RuntimeError):
    """Base class for every failure the CLI reports to the user."""

    def __init__(self, message: str, *, hint: str | None = None):
        super().__init__(message)
        self.hint = hint


class PreconditionError(ScaffoldError):
    """Target directory cannot receive the template."""


class DirectoryExistsError(PreconditionError):
    def __init__(self, path: Path):
        super().__init__(
            f"Error cloning template: Directory {path} already exists. "
            "Please choose a different name or remove the existing directory."
        )
        self.path = path


class DirectoryNotEmptyError(PreconditionError):
    def __init__(self, path: Path, entries: list[str]):
        super().__init__(
            "Error cloning template: Current directory is not empty. Please use an empty directory."
        )
        self.path = path
        self.entries = entries


class GitNotInstalledError(ScaffoldError):
    def __init__(self, hint: str | None = None):
        super().__init__("Git is not installed. Please install Git and try again.", hint=hint)


class TemplateCloneError(ScaffoldError):
    pass


class ManifestError(ScaffoldError):
    pass


class ReadmeError(ScaffoldError):
    pass


class VCSInitError(ScaffoldError):
    pass


class DependencyInstallError(ScaffoldError):
    pass


__all__ = [
    "DependencyInstallError",
    "DirectoryExistsError",
    "DirectoryNotEmptyError",
    "GitNotInstalledError",
    "ManifestError",
    "PreconditionError",
    "ReadmeError",
    "ScaffoldError",
    "TemplateCloneError",
    "VCSInitError",
]
