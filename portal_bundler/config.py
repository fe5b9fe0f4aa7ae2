"""Build configuration: defaults, optional project file, CLI overrides."""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any, Iterable

from portal_bundler.errors import ConfigError
from portal_bundler.graph.resolver import normalize
from portal_bundler.models import BuildConfig

CONFIG_FILENAME = "portal-bundler.json"

# JSON key -> BuildConfig field
_FIELDS = {
    "externalModules": "external_modules",
    "resourceSuffix": "resource_suffix",
    "packageDir": "package_dir",
}


def load_project_config(project_root: Path) -> dict[str, Any]:
    """Read ``portal-bundler.json`` from the project root, if present."""
    path = project_root / CONFIG_FILENAME
    if not path.is_file():
        return {}
    try:
        raw = json.loads(path.read_text(encoding="utf-8"))
    except (OSError, json.JSONDecodeError) as e:
        raise ConfigError(f"Invalid {path}: {e}") from e
    if not isinstance(raw, dict):
        raise ConfigError(f"Invalid {path}: top level must be an object")

    options: dict[str, Any] = {}
    for key, value in raw.items():
        if key not in _FIELDS:
            raise ConfigError(f"Invalid {path}: unknown option {key!r}")
        if key == "externalModules":
            if not isinstance(value, list) or not all(isinstance(v, str) for v in value):
                raise ConfigError(f"Invalid {path}: externalModules must be a list of strings")
        elif not isinstance(value, str) or not value:
            raise ConfigError(f"Invalid {path}: {key} must be a non-empty string")
        options[_FIELDS[key]] = value
    return options


def build_config(
    entrypoint: Path,
    output_dir: Path,
    project_root: Path | None = None,
    external: Iterable[str] = (),
) -> BuildConfig:
    """Resolve paths against the cwd and layer the project file and CLI values."""
    root = normalize(project_root or Path.cwd())
    options = load_project_config(root)

    config = BuildConfig(
        entry_file=normalize(entrypoint),
        output_dir=normalize(output_dir),
        project_root=root,
        **options,
    )
    for name in external:
        if name not in config.external_modules:
            config.external_modules.append(name)
    return config
