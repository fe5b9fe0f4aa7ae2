"""Render and write the two build artifacts."""

from __future__ import annotations

import json
import os
from pathlib import Path
from typing import Iterable

from portal_bundler.errors import OutputWriteError
from portal_bundler.models import BuildConfig, BundleResult, MergedResource

BANNER = [
    "// --- BUNDLED TYPESCRIPT OUTPUT ---",
    "// @ts-nocheck",
    "",
]


def source_annotation(path: Path, project_root: Path) -> str:
    relative = Path(os.path.relpath(path, project_root)).as_posix()
    return f"// --- SOURCE: {relative} ---"


def render_bundle(blocks: Iterable[tuple[Path, str]], project_root: Path) -> str:
    """Join (path, stripped_text) blocks under the banner, in the given order."""
    lines = list(BANNER)
    for path, body in blocks:
        lines.append(source_annotation(path, project_root))
        lines.append(body)
        lines.append("")
    return "\n".join(lines)


def render_resources(resources: MergedResource) -> str:
    return json.dumps(resources.data, indent=4, ensure_ascii=False)


def _replace_all(targets: list[tuple[Path, str]]) -> None:
    """Stage every file as ``<name>.tmp``, then move them into place.

    If anything fails, staged files and already-replaced targets are removed.
    """
    staged: list[tuple[Path, Path]] = []
    placed: list[Path] = []
    try:
        for path, text in targets:
            tmp = path.with_name(path.name + ".tmp")
            staged.append((tmp, path))
            with open(tmp, "w", encoding="utf-8", newline="") as f:
                f.write(text)
        for tmp, path in staged:
            os.replace(tmp, path)
            placed.append(path)
    except OSError as e:
        for tmp, _ in staged:
            tmp.unlink(missing_ok=True)
        for path in placed:
            path.unlink(missing_ok=True)
        failed = e.filename2 or e.filename or targets[0][0]
        raise OutputWriteError(Path(failed), e.strerror or str(e)) from e


def write_artifacts(result: BundleResult, config: BuildConfig) -> list[Path]:
    """Write bundle and merged resources; either both land or neither does."""
    resource_text = render_resources(result.resources)
    try:
        config.output_dir.mkdir(parents=True, exist_ok=True)
    except OSError as e:
        raise OutputWriteError(config.output_dir, e.strerror or str(e)) from e

    _replace_all([
        (config.bundle_path, result.text),
        (config.resource_path, resource_text),
    ])
    result.files_created = [config.bundle_path, config.resource_path]
    return result.files_created
