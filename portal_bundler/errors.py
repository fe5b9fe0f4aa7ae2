"""Fatal build errors. Unresolved imports are warnings, not errors."""

from __future__ import annotations

from pathlib import Path


class BundleError(Exception):
    """Base class for conditions that abort the whole build."""


class ConfigError(BundleError):
    pass


class EntryNotFoundError(BundleError):
    def __init__(self, path: Path):
        self.path = path
        super().__init__(f"Entry file not found at {path}")


class ResourceParseError(BundleError):
    def __init__(self, path: Path, reason: str):
        self.path = path
        self.reason = reason
        super().__init__(f"Failed to parse JSON: {path} ({reason})")


class ResourceConflictError(BundleError):
    """Two resource documents define the same top-level key."""

    def __init__(self, key: str, path: Path, previous_path: Path | None = None):
        self.key = key
        self.path = path
        self.previous_path = previous_path
        message = f'Duplicate JSON key "{key}" in {path}'
        if previous_path is not None:
            message += f" (already defined in {previous_path})"
        super().__init__(message)


class SourceReadError(BundleError):
    def __init__(self, path: Path, reason: str):
        self.path = path
        self.reason = reason
        super().__init__(f"Failed to read source file: {path} ({reason})")


class OutputWriteError(BundleError):
    def __init__(self, path: Path, reason: str):
        self.path = path
        self.reason = reason
        super().__init__(f"Failed to write {path} ({reason})")
