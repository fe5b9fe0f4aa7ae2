"""Build orchestrator: walk -> merge resources -> strip -> render -> write."""

from __future__ import annotations

import logging
from typing import Callable

from portal_bundler.cleaner import strip_statements
from portal_bundler.errors import EntryNotFoundError
from portal_bundler.exporter import render_bundle, write_artifacts
from portal_bundler.graph import DependencyWalker
from portal_bundler.models import BuildConfig, BuildOrder, BundleResult
from portal_bundler.resources import merge

logger = logging.getLogger(__name__)

ProgressCallback = Callable[[str, int, int], None]


def run_walk(config: BuildConfig) -> BuildOrder:
    """Stage 1 only: the dependency-first build order."""
    if not config.entry_file.is_file():
        raise EntryNotFoundError(config.entry_file)
    return DependencyWalker(config).walk()


def assemble(config: BuildConfig, progress: ProgressCallback | None = None) -> BundleResult:
    """Produce the bundle text and merged resources in memory."""
    # Stage 1: Walk
    if progress:
        progress("Walking", 0, 1)
    order = run_walk(config)
    logger.info("Found %d files in dependency tree", len(order))
    if progress:
        progress("Walking", 1, 1)

    # Stage 2: Resources
    directories = order.directories()
    if progress:
        progress("Merging resources", 0, len(directories))
    resources = merge(directories, config.resource_suffix)
    if progress:
        progress("Merging resources", len(directories), len(directories))

    # Stage 3: Strip
    blocks = []
    for i, source in enumerate(order.files):
        if progress:
            progress("Stripping", i, len(order))
        body, removed = strip_statements(source.text, config.external_modules)
        logger.debug("Stripped %d statement(s) from %s", removed, source.path)
        blocks.append((source.path, body))
    if progress:
        progress("Stripping", len(order), len(order))

    text = render_bundle(blocks, config.project_root)
    warnings = [u.describe() for u in order.unresolved]
    warnings.extend(
        "Import cycle: " + " -> ".join(str(p) for p in cycle) for cycle in order.cycles
    )
    return BundleResult(text=text, resources=resources, order=order, warnings=warnings)


def run_build(config: BuildConfig, progress: ProgressCallback | None = None) -> BundleResult:
    """Assemble and write both artifacts. Nothing is written if any stage fails."""
    result = assemble(config, progress=progress)

    if progress:
        progress("Writing", 0, 1)
    write_artifacts(result, config)
    if progress:
        progress("Writing", 1, 1)
    return result
