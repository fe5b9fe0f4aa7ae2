"""Tests for the tokenizer and module statement scanner."""

from portal_bundler.models import StatementKind
from portal_bundler.scanner import find_module_statements, find_specifiers, tokenize


def _kinds(text):
    return [(s.kind, s.specifier) for s in find_module_statements(text)]


class TestTokenizer:
    def test_comments_are_dropped(self):
        tokens = tokenize("a // import x from 'y'\n/* import 'z' */ b")
        assert [t.value for t in tokens] == ["a", "b"]

    def test_string_value_excludes_quotes(self):
        tokens = tokenize("'it\\'s' \"two\"")
        assert [t.kind for t in tokens] == ["string", "string"]
        assert tokens[1].value == "two"

    def test_template_substitution_tokens_are_nested(self):
        tokens = tokenize("`a ${ b } c` d")
        by_value = {t.value: t for t in tokens}
        assert by_value["b"].nested
        assert not by_value["d"].nested
        assert [t.kind for t in tokens if t.kind == "template"] == ["template", "template"]

    def test_template_with_object_literal_in_substitution(self):
        tokens = tokenize("`${ {a: 1}.a }` import")
        assert tokens[-1].value == "import"
        assert not tokens[-1].nested

    def test_regex_literal_after_assignment(self):
        tokens = tokenize("const r = /import 'x'/g;")
        assert any(t.kind == "regex" and t.value == "/import 'x'/g" for t in tokens)

    def test_division_is_not_regex(self):
        tokens = tokenize("a = b / c / d")
        assert [t.kind for t in tokens].count("regex") == 0

    def test_spans_point_into_text(self):
        text = "  import  'x';"
        for tok in tokenize(text):
            assert text[tok.start:tok.end].strip("'") == tok.value


class TestStatements:
    def test_named_default_and_namespace_imports(self):
        text = (
            'import a from "./a";\n'
            "import { b, c as d } from './b';\n"
            'import * as ns from "./ns";\n'
            'import e, { f } from "./e";\n'
            'import type { T } from "./types";\n'
        )
        assert find_specifiers(text) == ["./a", "./b", "./ns", "./e", "./types"]
        assert {k for k, _ in _kinds(text)} == {StatementKind.IMPORT_FROM}

    def test_side_effect_import(self):
        assert _kinds('import "./polyfills";') == [(StatementKind.SIDE_EFFECT_IMPORT, "./polyfills")]

    def test_require_import(self):
        assert _kinds('import fs = require("./fs");') == [(StatementKind.REQUIRE_IMPORT, "./fs")]

    def test_export_import_require(self):
        text = 'export import X = require("./x");'
        statements = find_module_statements(text)
        assert len(statements) == 1
        assert statements[0].start == 0
        assert statements[0].end == len(text)

    def test_reexports(self):
        text = (
            'export * from "./all";\n'
            'export * as helpers from "./helpers";\n'
            'export { a, b as c } from "./named";\n'
            'export type { T } from "./types";\n'
        )
        assert _kinds(text) == [
            (StatementKind.REEXPORT, "./all"),
            (StatementKind.REEXPORT, "./helpers"),
            (StatementKind.REEXPORT, "./named"),
            (StatementKind.REEXPORT, "./types"),
        ]

    def test_multiline_import(self):
        text = 'import {\n    a,\n    b,\n} from "./multi";\nconst x = 1;'
        statements = find_module_statements(text)
        assert len(statements) == 1
        assert text[statements[0].end:] == "\nconst x = 1;"

    def test_not_statements(self):
        text = (
            "export { a, b };\n"
            "export const x = 1;\n"
            'const m = import("./dynamic");\n'
            "const u = import.meta.url;\n"
            "import Alias = Ns.Inner;\n"
            "const o = { import: 1 };\n"
            "obj.import('x');\n"
        )
        assert find_module_statements(text) == []

    def test_keywords_inside_strings_and_comments(self):
        text = (
            "const s = 'import x from \"./nope\"';\n"
            "// import y from './nope'\n"
            "/* export * from './nope' */\n"
            "const t = `import z from './nope'`;\n"
        )
        assert find_module_statements(text) == []

    def test_semicolon_on_next_line_is_kept(self):
        text = 'import a from "./a"\n;(run)()'
        statements = find_module_statements(text)
        assert text[statements[0].end:] == "\n;(run)()"

    def test_file_order_and_duplicates(self):
        text = 'import "./b";\nimport "./a";\nimport { x } from "./b";'
        assert find_specifiers(text) == ["./b", "./a", "./b"]


class TestRegexAfterParen:
    def test_regex_after_if_head(self):
        tokens = tokenize('if (ok) /import "x"/.test(s);')
        assert any(t.kind == "regex" and t.value == '/import "x"/' for t in tokens)

    def test_division_after_call(self):
        tokens = tokenize("total = f(a) / g(b) / 2;")
        assert [t.kind for t in tokens].count("regex") == 0

    def test_nested_parens_in_head(self):
        tokens = tokenize('while (f(x)) /import "y"/.exec(s);')
        assert [t.kind for t in tokens].count("regex") == 1

    def test_no_statement_inside_regex_after_head(self):
        assert find_module_statements('if (ok) /import "x"/.test(s);\n') == []
