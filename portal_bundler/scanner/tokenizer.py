"""Minimal TypeScript tokenizer.

Only precise enough to tell code apart from strings, template literals,
regular expression literals and comments, so that keywords appearing inside
any of those are never mistaken for statements. Comments and whitespace are
dropped; every other token keeps its span in the source text.
"""

from __future__ import annotations

from dataclasses import dataclass

# After these keywords a "/" starts a regular expression, not a division.
_REGEX_PREFIX_KEYWORDS = frozenset({
    "return", "typeof", "instanceof", "in", "of", "new", "delete", "void",
    "throw", "case", "do", "else", "yield", "await",
})

# A ")" closing the head of one of these is followed by a statement, so a
# "/" there starts a regular expression.
_STATEMENT_HEAD_KEYWORDS = frozenset({"if", "while", "for", "with"})


@dataclass
class Token:
    kind: str  # "name" | "string" | "template" | "regex" | "number" | "punct"
    value: str
    start: int
    end: int
    nested: bool = False  # inside a template literal substitution


def _is_name_start(ch: str) -> bool:
    return ch.isalpha() or ch in "_$"


def _is_name_part(ch: str) -> bool:
    return ch.isalnum() or ch in "_$"


class _Lexer:
    def __init__(self, text: str):
        self.text = text
        self.pos = 0
        self.tokens: list[Token] = []
        # One brace counter per open template substitution.
        self.template_stack: list[int] = []
        # One flag per open "(": whether it starts a statement head.
        self.paren_stack: list[bool] = []
        self.closed_head = False

    def run(self) -> list[Token]:
        text = self.text
        n = len(text)
        while self.pos < n:
            ch = text[self.pos]
            if ch.isspace():
                self.pos += 1
            elif text.startswith("//", self.pos):
                newline = text.find("\n", self.pos)
                self.pos = n if newline < 0 else newline
            elif text.startswith("/*", self.pos):
                close = text.find("*/", self.pos + 2)
                self.pos = n if close < 0 else close + 2
            elif ch in "'\"":
                self._string(ch)
            elif ch == "`":
                self._template(self.pos, self.pos + 1)
            elif ch == "/" and self._regex_allowed():
                self._regex()
            elif _is_name_start(ch):
                self._name()
            elif ch.isdigit() or (ch == "." and text[self.pos + 1:self.pos + 2].isdigit()):
                self._number()
            else:
                self._punct(ch)
        return self.tokens

    def _emit(self, kind: str, value: str, start: int, end: int) -> None:
        self.tokens.append(Token(kind, value, start, end, nested=bool(self.template_stack)))
        self.pos = end

    def _string(self, quote: str) -> None:
        text = self.text
        start = self.pos
        i = start + 1
        while i < len(text):
            ch = text[i]
            if ch == "\\":
                i += 2
                continue
            if ch == quote:
                self._emit("string", text[start + 1:i], start, i + 1)
                return
            if ch == "\n":
                break  # unterminated
            i += 1
        end = min(i, len(text))
        self._emit("string", text[start + 1:end], start, end)

    def _template(self, start: int, i: int) -> None:
        """Scan template text from i until the closing backtick or a substitution."""
        text = self.text
        while i < len(text):
            ch = text[i]
            if ch == "\\":
                i += 2
                continue
            if ch == "`":
                self._emit("template", text[start:i + 1], start, i + 1)
                return
            if text.startswith("${", i):
                self._emit("template", text[start:i + 2], start, i + 2)
                self.template_stack.append(0)
                return
            i += 1
        self._emit("template", text[start:], start, len(text))

    def _regex_allowed(self) -> bool:
        if not self.tokens:
            return True
        prev = self.tokens[-1]
        if prev.kind == "punct":
            if prev.value == ")":
                return self.closed_head
            return prev.value not in ")]}"
        if prev.kind == "name":
            return prev.value in _REGEX_PREFIX_KEYWORDS
        if prev.kind == "template":
            return prev.value.endswith("${")
        return False

    def _regex(self) -> None:
        text = self.text
        start = self.pos
        i = start + 1
        in_class = False
        while i < len(text):
            ch = text[i]
            if ch == "\n":
                # Not a regex after all; treat the slash as an operator.
                self._emit("punct", "/", start, start + 1)
                return
            if ch == "\\":
                i += 2
                continue
            if ch == "[":
                in_class = True
            elif ch == "]":
                in_class = False
            elif ch == "/" and not in_class:
                i += 1
                while i < len(text) and _is_name_part(text[i]):
                    i += 1
                self._emit("regex", text[start:i], start, i)
                return
            i += 1
        self._emit("punct", "/", start, start + 1)

    def _name(self) -> None:
        text = self.text
        start = self.pos
        i = start + 1
        while i < len(text) and _is_name_part(text[i]):
            i += 1
        self._emit("name", text[start:i], start, i)

    def _number(self) -> None:
        text = self.text
        start = self.pos
        i = start + 1
        while i < len(text) and (_is_name_part(text[i]) or text[i] == "."):
            i += 1
        self._emit("number", text[start:i], start, i)

    def _punct(self, ch: str) -> None:
        start = self.pos
        if self.template_stack:
            if ch == "{":
                self.template_stack[-1] += 1
            elif ch == "}":
                if self.template_stack[-1] == 0:
                    self.template_stack.pop()
                    self._template(start, start + 1)
                    return
                self.template_stack[-1] -= 1
        if ch == "(":
            prev = self.tokens[-1] if self.tokens else None
            self.paren_stack.append(
                prev is not None and prev.kind == "name" and prev.value in _STATEMENT_HEAD_KEYWORDS
            )
        elif ch == ")":
            self.closed_head = self.paren_stack.pop() if self.paren_stack else False
        self._emit("punct", ch, start, start + 1)


def tokenize(text: str) -> list[Token]:
    """Split TypeScript source into code tokens, skipping comments and whitespace."""
    return _Lexer(text).run()
