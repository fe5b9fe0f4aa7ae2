"""Locate import / re-export statements on top of the tokenizer."""

from __future__ import annotations

from portal_bundler.models import ModuleStatement, StatementKind
from portal_bundler.scanner.tokenizer import Token, tokenize

_BINDING_PUNCT = frozenset("{},*")


def find_module_statements(text: str) -> list[ModuleStatement]:
    """Return every module-boundary statement in file order.

    Recognised forms::

        import a, { b as c } from "x";   import * as ns from "x";
        import type { T } from "x";      import "x";
        import X = require("x");         export * from "x";
        export * as ns from "x";         export { a, type B } from "x";
        export import X = require("x");

    Dynamic ``import("x")``, ``import.meta`` and ``import A = Ns.B`` aliases
    are not module statements.
    """
    tokens = tokenize(text)
    statements: list[ModuleStatement] = []
    i = 0
    while i < len(tokens):
        tok = tokens[i]
        if (
            tok.kind == "name"
            and tok.value in ("import", "export")
            and not tok.nested
            and not _is_member_access(tokens, i)
        ):
            if tok.value == "import":
                found = _match_import(text, tokens, i)
            elif _is(_at(tokens, i + 1), "name", "import"):
                # export import X = require("x")
                found = _match_import(text, tokens, i + 1)
                if found is not None:
                    found[0].start = tok.start
            else:
                found = _match_reexport(text, tokens, i)
            if found is not None:
                statement, i = found
                statements.append(statement)
                continue
        i += 1
    return statements


def find_specifiers(text: str) -> list[str]:
    """Specifiers of every module statement, in file order (duplicates kept)."""
    return [s.specifier for s in find_module_statements(text)]


def _at(tokens: list[Token], index: int) -> Token | None:
    return tokens[index] if index < len(tokens) else None


def _is(tok: Token | None, kind: str, value: str | None = None) -> bool:
    return tok is not None and tok.kind == kind and (value is None or tok.value == value)


def _is_member_access(tokens: list[Token], index: int) -> bool:
    return index > 0 and _is(tokens[index - 1], "punct", ".")


def _match_import(text: str, tokens: list[Token], i: int):
    j = i + 1
    tok = _at(tokens, j)
    if _is(tok, "string"):
        return _finish(text, tokens, i, j, StatementKind.SIDE_EFFECT_IMPORT, tok.value)

    while tok is not None and (tok.kind == "name" or (tok.kind == "punct" and tok.value in _BINDING_PUNCT)):
        if tok.kind == "name" and tok.value == "from" and j > i + 1:
            source = _at(tokens, j + 1)
            if _is(source, "string"):
                return _finish(text, tokens, i, j + 1, StatementKind.IMPORT_FROM, source.value)
        j += 1
        tok = _at(tokens, j)

    if _is(tok, "punct", "=") and j > i + 1:
        call = tokens[j + 1:j + 5]
        if (
            len(call) == 4
            and _is(call[0], "name", "require")
            and _is(call[1], "punct", "(")
            and _is(call[2], "string")
            and _is(call[3], "punct", ")")
        ):
            return _finish(text, tokens, i, j + 4, StatementKind.REQUIRE_IMPORT, call[2].value)
    return None


def _match_reexport(text: str, tokens: list[Token], i: int):
    j = i + 1
    if _is(_at(tokens, j), "name", "type"):
        j += 1
    tok = _at(tokens, j)

    if _is(tok, "punct", "*"):
        j += 1
        if _is(_at(tokens, j), "name", "as"):
            j += 2
    elif _is(tok, "punct", "{"):
        j += 1
        while not _is(_at(tokens, j), "punct", "}"):
            inner = _at(tokens, j)
            if inner is None or not (inner.kind in ("name", "string") or _is(inner, "punct", ",")):
                return None
            j += 1
        j += 1
    else:
        return None

    if _is(_at(tokens, j), "name", "from") and _is(_at(tokens, j + 1), "string"):
        return _finish(text, tokens, i, j + 1, StatementKind.REEXPORT, tokens[j + 1].value)
    return None


def _finish(text: str, tokens: list[Token], first: int, last: int, kind: StatementKind, specifier: str):
    """Build the statement spanning tokens[first..last], plus a same-line ';'."""
    end = tokens[last].end
    following = last + 1
    semi = _at(tokens, following)
    if _is(semi, "punct", ";") and text[end:semi.start].strip(" \t") == "":
        end = semi.end
        following += 1
    statement = ModuleStatement(kind=kind, specifier=specifier, start=tokens[first].start, end=end)
    return statement, following
