"""Resolve import specifiers to files on disk."""

from __future__ import annotations

import logging
import os
from pathlib import Path

from portal_bundler.models import BuildConfig, Resolution, ResolutionKind

logger = logging.getLogger(__name__)


def normalize(path: Path) -> Path:
    """Absolute path with ``..`` collapsed; symlinks are left alone."""
    return Path(os.path.normpath(os.path.abspath(path)))


class PathResolver:
    """Map import specifiers to absolute paths for one build configuration."""

    def __init__(self, config: BuildConfig):
        self.config = config
        self.package_root = normalize(config.project_root) / config.package_dir

    def resolve(self, specifier: str, importing_dir: Path) -> Resolution:
        if specifier in self.config.external_modules:
            return Resolution(specifier, ResolutionKind.IGNORED)

        if specifier.startswith("."):
            base = importing_dir / specifier
        else:
            # Always the consumer's project, never this tool's install location.
            base = self.package_root / specifier

        for candidate in self.candidates(base):
            if candidate.is_file():
                path = normalize(candidate)
                if self.is_declaration(path):
                    return Resolution(specifier, ResolutionKind.DECLARATION, path)
                return Resolution(specifier, ResolutionKind.FILE, path)

        logger.warning('Could not resolve import "%s" from %s', specifier, importing_dir)
        return Resolution(specifier, ResolutionKind.UNRESOLVED)

    def candidates(self, base: Path) -> list[Path]:
        ext = self.config.source_extension
        raw = str(base)
        return [
            base,
            Path(raw + ext),
            Path(raw + "/index" + ext),
            Path(raw + self.config.declaration_extension),
        ]

    def is_declaration(self, path: Path) -> bool:
        return path.name.endswith(self.config.declaration_extension)
