"""Data models for the bundling pipeline."""

from __future__ import annotations

import enum
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any


class ResolutionKind(enum.Enum):
    FILE = "file"
    DECLARATION = "declaration"
    IGNORED = "ignored"
    UNRESOLVED = "unresolved"


class StatementKind(enum.Enum):
    IMPORT_FROM = "import_from"
    SIDE_EFFECT_IMPORT = "side_effect_import"
    REQUIRE_IMPORT = "require_import"
    REEXPORT = "reexport"


@dataclass
class BuildConfig:
    """Configuration for one build invocation."""
    entry_file: Path
    output_dir: Path
    project_root: Path = field(default_factory=Path.cwd)
    external_modules: list[str] = field(default_factory=lambda: ["mod"])
    source_extension: str = ".ts"
    declaration_extension: str = ".d.ts"
    package_dir: str = "node_modules"
    resource_suffix: str = "strings.json"
    bundle_filename: str = "bundle.ts"
    resource_filename: str = "bundle.strings.json"

    @property
    def bundle_path(self) -> Path:
        return self.output_dir / self.bundle_filename

    @property
    def resource_path(self) -> Path:
        return self.output_dir / self.resource_filename


@dataclass
class ModuleStatement:
    """A module-boundary statement found by the scanner."""
    kind: StatementKind
    specifier: str
    start: int
    end: int  # exclusive, includes a trailing ";" when present


@dataclass
class SourceFile:
    """A source file, read once when the walker first visits it."""
    path: Path
    text: str

    @property
    def directory(self) -> Path:
        return self.path.parent


@dataclass
class Resolution:
    """Result of resolving one import specifier."""
    specifier: str
    kind: ResolutionKind
    path: Path | None = None


@dataclass
class UnresolvedImport:
    specifier: str
    importer: Path

    def describe(self) -> str:
        return f'Could not resolve import "{self.specifier}" from {self.importer.parent}'


@dataclass
class BuildOrder:
    """Dependency-first ordering produced by the walker."""
    files: list[SourceFile] = field(default_factory=list)
    edges: list[tuple[Path, Path]] = field(default_factory=list)  # (importer, dependency)
    unresolved: list[UnresolvedImport] = field(default_factory=list)
    cycles: list[list[Path]] = field(default_factory=list)

    @property
    def paths(self) -> list[Path]:
        return [f.path for f in self.files]

    def directories(self) -> list[Path]:
        """Distinct directories, in order of first appearance."""
        seen: dict[Path, None] = {}
        for source in self.files:
            seen.setdefault(source.directory, None)
        return list(seen)

    def __len__(self) -> int:
        return len(self.files)


@dataclass
class ResourceDocument:
    """One parsed resource file."""
    path: Path
    data: dict[str, Any]


@dataclass
class MergedResource:
    data: dict[str, Any] = field(default_factory=dict)
    origins: dict[str, Path] = field(default_factory=dict)  # key -> contributing document
    documents: list[Path] = field(default_factory=list)

    def __len__(self) -> int:
        return len(self.data)


@dataclass
class BundleResult:
    """Everything the assembler produced, before or after writing."""
    text: str
    resources: MergedResource
    order: BuildOrder
    warnings: list[str] = field(default_factory=list)
    files_created: list[Path] = field(default_factory=list)
