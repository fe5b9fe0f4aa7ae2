"""Cleaner orchestrator."""

from __future__ import annotations

from typing import Iterable

from portal_bundler.cleaner.statement_stripper import strip_statements


def strip(code: str, keep_specifiers: Iterable[str] = ()) -> str:
    """Strip module-boundary statements from one file's text."""
    stripped, _ = strip_statements(code, keep_specifiers)
    return stripped


__all__ = ["strip", "strip_statements"]
