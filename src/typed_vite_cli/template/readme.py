"""README generation for the new project."""

from __future__ import annotations

import logging
from pathlib import Path

from typed_vite_cli.core.config import DEFAULT_TEMPLATE_REPO, README_FILENAME
from typed_vite_cli.core.context import Answers
from typed_vite_cli.core.errors import ReadmeError

logger = logging.getLogger(__name__)

README_TEMPLATE = """\
# {name}

{description}

## Getting Started

This project was bootstrapped with [Typed Vite React Template]({template_url}).

### Prerequisites

- Node.js (20.x or higher)
- {package_manager_title} package manager
  - Or anything else that supports pnpm, npm, or bun

### Installation

1. Install dependencies:
```bash
{package_manager} install
```

2. Start the development server:
```bash
{package_manager} dev
```

3. Build for production:
```bash
{package_manager} build
```

## License

This project is licensed under the {license} License.
"""


# Official spelling of each tool's name.
_PACKAGE_MANAGER_NAMES = {"yarn": "Yarn", "npm": "npm", "pnpm": "pnpm", "bun": "Bun"}


def render_readme(answers: Answers, *, package_manager: str = "yarn") -> str:
    return README_TEMPLATE.format(
        name=answers.name,
        description=answers.description,
        license=answers.license,
        template_url=DEFAULT_TEMPLATE_REPO,
        package_manager=package_manager,
        package_manager_title=_PACKAGE_MANAGER_NAMES.get(package_manager, package_manager),
    )


def write_readme(project_path: Path, answers: Answers, *, package_manager: str = "yarn") -> Path:
    """Write README.md, replacing any existing file."""
    readme_path = project_path / README_FILENAME
    try:
        readme_path.write_text(render_readme(answers, package_manager=package_manager), encoding="utf-8")
    except OSError as e:
        raise ReadmeError(f"Error creating {README_FILENAME}: {e}") from e
    logger.debug("Wrote %s", readme_path)
    return readme_path


__all__ = ["README_TEMPLATE", "render_readme", "write_readme"]
