"""Flatten a TypeScript import graph into a single bundle plus merged strings."""

from portal_bundler.models import BuildConfig
from portal_bundler.pipeline import assemble, run_build

__version__ = "0.1.0"

__all__ = ["BuildConfig", "assemble", "run_build"]
