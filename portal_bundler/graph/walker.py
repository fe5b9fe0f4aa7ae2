"""Depth-first dependency walker producing a dependency-first build order."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Iterator

from portal_bundler.errors import EntryNotFoundError, SourceReadError
from portal_bundler.graph.resolver import PathResolver, normalize
from portal_bundler.models import (
    BuildConfig,
    BuildOrder,
    ResolutionKind,
    SourceFile,
    UnresolvedImport,
)
from portal_bundler.scanner import find_specifiers

logger = logging.getLogger(__name__)


class DependencyWalker:
    """Walk the import graph from an entry file.

    State is per instance: create a new walker for every build. A file is
    marked visited *before* its imports are scanned, so cycles terminate and
    each file lands in the build order exactly once, after everything it
    imports (cycle back-edges excepted, which fall back to discovery order).
    """

    def __init__(self, config: BuildConfig, resolver: PathResolver | None = None):
        self.config = config
        self.resolver = resolver or PathResolver(config)
        self.visited: set[Path] = set()
        self.in_progress: set[Path] = set()
        self.order = BuildOrder()

    def walk(self, entry: Path | None = None) -> BuildOrder:
        entry_path = normalize(entry or self.config.entry_file)
        if not entry_path.is_file():
            raise EntryNotFoundError(entry_path)

        # Explicit stack of (file, pending specifiers); same order as recursion.
        stack: list[tuple[SourceFile, Iterator[str]]] = []
        self._enter(entry_path, stack)

        while stack:
            source, pending = stack[-1]
            specifier = next(pending, None)
            if specifier is None:
                stack.pop()
                self.in_progress.discard(source.path)
                self.order.files.append(source)
                logger.debug("Recorded %s (#%d)", source.path, len(self.order))
                continue

            resolution = self.resolver.resolve(specifier, source.directory)
            if resolution.kind is ResolutionKind.UNRESOLVED:
                self.order.unresolved.append(UnresolvedImport(specifier, source.path))
                continue
            if resolution.kind is not ResolutionKind.FILE:
                continue

            dependency = resolution.path
            self.order.edges.append((source.path, dependency))
            if dependency in self.in_progress:
                cycle = [s.path for s, _ in stack]
                cycle = cycle[cycle.index(dependency):] + [dependency]
                self.order.cycles.append(cycle)
                logger.warning(
                    "Import cycle: %s", " -> ".join(p.name for p in cycle)
                )
            if dependency not in self.visited:
                self._enter(dependency, stack)

        return self.order

    def _enter(self, path: Path, stack: list[tuple[SourceFile, Iterator[str]]]) -> None:
        self.visited.add(path)
        self.in_progress.add(path)
        try:
            # newline="" keeps CRLF line endings exactly as written.
            with open(path, encoding="utf-8", newline="") as f:
                text = f.read()
        except (OSError, UnicodeDecodeError) as e:
            raise SourceReadError(path, str(e)) from e
        source = SourceFile(path=path, text=text)
        stack.append((source, iter(find_specifiers(text))))
        logger.debug("Visiting %s", path)
