"""Import resolution and dependency graph traversal."""

from portal_bundler.graph.resolver import PathResolver, normalize
from portal_bundler.graph.walker import DependencyWalker

__all__ = ["DependencyWalker", "PathResolver", "normalize"]
