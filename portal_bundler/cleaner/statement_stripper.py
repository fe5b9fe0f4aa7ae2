"""Remove import / re-export statements, leaving all other text untouched."""

from __future__ import annotations

from typing import Iterable

from portal_bundler.scanner import find_module_statements


def strip_statements(code: str, keep_specifiers: Iterable[str] = ()) -> tuple[str, int]:
    """Return (stripped_code, removed_count).

    Statements whose specifier is in ``keep_specifiers`` stay as written.
    Removal does not depend on whether the specifier resolved.
    """
    keep = set(keep_specifiers)
    parts: list[str] = []
    cursor = 0
    removed = 0
    for statement in find_module_statements(code):
        if statement.specifier in keep:
            continue
        parts.append(code[cursor:statement.start])
        cursor = statement.end
        removed += 1
    parts.append(code[cursor:])
    return "".join(parts), removed
