"""Invocation context and collected answers."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path

from .config import LICENSE_CHOICES, PROJECT_NAME_PATTERN


@dataclass(frozen=True)
class InvocationContext:
    """Where the project goes, resolved once at startup."""

    raw_argument: str
    cwd: Path
    target_path: Path

    @property
    def is_current_dir(self) -> bool:
        return self.target_path == self.cwd


def resolve_invocation(raw_argument: str, cwd: Path) -> InvocationContext:
    """Resolve the directory argument against ``cwd``.

    Absolute arguments are used as-is; ``.`` resolves to ``cwd`` itself.
    """
    cwd = cwd.resolve()
    target = (cwd / raw_argument).resolve()
    return InvocationContext(raw_argument=raw_argument, cwd=cwd, target_path=target)


def validate_project_name(value: str) -> str | None:
    """Return an error message for an unusable project name, else None."""
    if not value.strip():
        return "Project name cannot be empty!"
    if not PROJECT_NAME_PATTERN.match(value.strip()):
        return "Project name can only contain letters, numbers, hyphens, and underscores!"
    return None


@dataclass(frozen=True)
class Answers:
    name: str
    description: str
    license: str

    def __post_init__(self) -> None:
        error = validate_project_name(self.name)
        if error:
            raise ValueError(error)
        if self.name != self.name.strip():
            raise ValueError("Project name must not contain surrounding whitespace")
        if self.license not in LICENSE_CHOICES:
            raise ValueError(
                f"Unknown license '{self.license}'. Choose from: {', '.join(LICENSE_CHOICES)}"
            )


__all__ = ["Answers", "InvocationContext", "resolve_invocation", "validate_project_name"]
