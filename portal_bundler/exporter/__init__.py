"""Exporter layer."""

from portal_bundler.exporter.bundle_writer import (
    render_bundle,
    render_resources,
    source_annotation,
    write_artifacts,
)

__all__ = ["render_bundle", "render_resources", "source_annotation", "write_artifacts"]
