"""Shared fixtures: small TypeScript projects written under tmp_path."""

from __future__ import annotations

from pathlib import Path

import pytest

from portal_bundler.models import BuildConfig


def write_tree(root: Path, files: dict[str, str]) -> Path:
    for relative, content in files.items():
        path = root / relative
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(content, encoding="utf-8")
    return root


@pytest.fixture
def make_project(tmp_path):
    """Write ``files`` into a fresh project root and return its config."""

    def _make(files: dict[str, str], entry: str = "src/a.ts", **overrides) -> BuildConfig:
        write_tree(tmp_path, files)
        return BuildConfig(
            entry_file=tmp_path / entry,
            output_dir=tmp_path / "dist",
            project_root=tmp_path,
            **overrides,
        )

    return _make
