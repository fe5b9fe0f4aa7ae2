"""Statement scanner: tokenizer plus module statement matcher."""

from portal_bundler.scanner.statements import find_module_statements, find_specifiers
from portal_bundler.scanner.tokenizer import Token, tokenize

__all__ = ["Token", "find_module_statements", "find_specifiers", "tokenize"]
