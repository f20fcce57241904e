from __future__ import annotations

import json
import shutil
from pathlib import Path

import pytest

TEMPLATE_MANIFEST = {
    "name": "typed-vite-react-template",
    "private": True,
    "version": "0.0.0",
    "type": "module",
    "description": "Template",
    "scripts": {"dev": "vite", "build": "tsc -b && vite build"},
    "license": "MIT",
    "dependencies": {"react": "^18.3.1", "react-dom": "^18.3.1"},
}

requires_git = pytest.mark.skipif(shutil.which("git") is None, reason="git is not installed")


def write_template_tree(root: Path) -> None:
    """Lay out the files a cloned template would contain."""
    root.mkdir(parents=True, exist_ok=True)
    (root / "package.json").write_text(json.dumps(TEMPLATE_MANIFEST, indent=2) + "\n", encoding="utf-8")
    (root / "README.md").write_text("# Template readme\n", encoding="utf-8")
    (root / ".gitignore").write_text("node_modules\ndist\n", encoding="utf-8")
    (root / "src").mkdir(exist_ok=True)
    (root / "src" / "main.tsx").write_text("console.log('hello')\n", encoding="utf-8")


def snapshot(root: Path) -> dict[str, bytes]:
    """Relative path -> content for every file under ``root``."""
    return {
        str(path.relative_to(root)): path.read_bytes()
        for path in sorted(root.rglob("*"))
        if path.is_file()
    }
