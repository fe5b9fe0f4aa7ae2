"""Resource document discovery and merging."""

from portal_bundler.resources.merger import ResourceMerger, discover_resources, load_document, merge

__all__ = ["ResourceMerger", "discover_resources", "load_document", "merge"]
