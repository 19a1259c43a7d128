"""
lexparse Lexer Package

Regex-table lexical analyzer (tokenizer) for the lexparse language.

Key Features:
- Ordered pattern table: the first pattern matching at the cursor wins
- Reserved words recognized from identifier-shaped text
- Source location tracking on every token
- Diagnostics with suggestions for unrecognized input

Author: lexparse contributors
"""

from .tokens import Token, TokenKind, SourceLocation, RESERVED_WORDS, SYMBOLS
from .patterns import Pattern, PatternTableError, DEFAULT_PATTERNS, shadowed_symbols
from .lexer import Lexer, tokenize, tokenize_file
from .errors import LexerError, UnrecognizedInputError, StalledLexerError

__all__ = [
    "Lexer",
    "tokenize",
    "tokenize_file",
    "Token",
    "TokenKind",
    "SourceLocation",
    "RESERVED_WORDS",
    "SYMBOLS",
    "Pattern",
    "PatternTableError",
    "DEFAULT_PATTERNS",
    "shadowed_symbols",
    "LexerError",
    "UnrecognizedInputError",
    "StalledLexerError",
]
