from __future__ import annotations

from pathlib import Path

from typed_vite_cli.core.context import Answers
from typed_vite_cli.template.readme import render_readme, write_readme


def test_render_readme_structure():
    text = render_readme(Answers(name="my-app", description="demo", license="MIT"))

    assert text.startswith("# my-app\n\ndemo\n")
    assert "## Getting Started" in text
    assert "- Node.js (20.x or higher)" in text
    assert "- Yarn package manager" in text
    assert "```bash\nyarn install\n```" in text
    assert "```bash\nyarn dev\n```" in text
    assert "```bash\nyarn build\n```" in text
    assert text.endswith("## License\n\nThis project is licensed under the MIT License.\n")


def test_render_readme_uses_configured_package_manager():
    text = render_readme(Answers(name="app", description="", license="MIT"), package_manager="pnpm")
    assert "pnpm install" in text
    assert "- pnpm package manager" in text
    assert "yarn" not in text


def test_write_readme_overwrites_existing(tmp_path: Path):
    (tmp_path / "README.md").write_text("old", encoding="utf-8")
    answers = Answers(name="closed", description="secret", license="PROPRIETARY")

    path = write_readme(tmp_path, answers)

    text = path.read_text(encoding="utf-8")
    assert text.startswith("# closed")
    assert "licensed under the PROPRIETARY License" in text


def test_render_readme_package_manager_display_names():
    answers = Answers(name="app", description="", license="MIT")

    assert "- npm package manager" in render_readme(answers, package_manager="npm")
    assert "- Bun package manager" in render_readme(answers, package_manager="bun")
    assert "- custom-pm package manager" in render_readme(answers, package_manager="custom-pm")
