"""Locate files relative to the project root regardless of the working directory."""

from __future__ import annotations

from pathlib import Path


def find_repo_root(start: Path | None = None) -> Path:
    current = (start or Path(__file__).resolve()).resolve()
    if current.is_file():
        current = current.parent

    for candidate in [current, *current.parents]:
        if (candidate / "pyproject.toml").is_file() or (candidate / ".git").exists():
            return candidate
    raise RuntimeError(f"No project root (pyproject.toml or .git) above {current}")


def repo_file(*parts: str) -> Path:
    """Resolve parts against the project root, or the working directory for installed copies."""
    try:
        root = find_repo_root(Path(__file__).resolve())
    except RuntimeError:
        root = Path.cwd()
    return root.joinpath(*parts)
