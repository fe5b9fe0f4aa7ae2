"""Merge resource documents (``*strings.json``) found next to bundled sources."""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Iterable

from portal_bundler.errors import ResourceConflictError, ResourceParseError
from portal_bundler.models import MergedResource, ResourceDocument

logger = logging.getLogger(__name__)


def discover_resources(directories: Iterable[Path], suffix: str) -> list[Path]:
    """Resource files in the given directories, each path once.

    Directories keep the order they are given in; files within a directory
    are sorted by name.
    """
    found: list[Path] = []
    seen: set[Path] = set()
    for directory in directories:
        for path in sorted(directory.iterdir()):
            if not path.name.endswith(suffix) or not path.is_file():
                continue
            if path in seen:
                continue
            seen.add(path)
            found.append(path)
    return found


def load_document(path: Path) -> ResourceDocument:
    try:
        data = json.loads(path.read_text(encoding="utf-8"))
    except (OSError, UnicodeDecodeError) as e:
        raise ResourceParseError(path, str(e)) from e
    except json.JSONDecodeError as e:
        raise ResourceParseError(path, f"line {e.lineno} column {e.colno}: {e.msg}") from e

    if not isinstance(data, dict):
        raise ResourceParseError(path, f"top level must be an object, got {type(data).__name__}")
    return ResourceDocument(path=path, data=data)


class ResourceMerger:
    """Accumulate resource documents; any shared top-level key is fatal."""

    def __init__(self):
        self.merged = MergedResource()

    def add(self, document: ResourceDocument) -> None:
        for key in document.data:
            if key in self.merged.data:
                raise ResourceConflictError(key, document.path, self.merged.origins[key])
        for key, value in document.data.items():
            self.merged.data[key] = value
            self.merged.origins[key] = document.path
        self.merged.documents.append(document.path)


def merge(directories: Iterable[Path], suffix: str = "strings.json") -> MergedResource:
    """Parse and merge every resource document in ``directories``."""
    merger = ResourceMerger()
    for path in discover_resources(directories, suffix):
        logger.info("Found resource %s", path)
        merger.add(load_document(path))
    return merger.merged
