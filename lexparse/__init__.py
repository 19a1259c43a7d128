"""
lexparse

Lexical analyzer for a small curly-brace scripting language, plus a
command line tool that prints the tokens of a source file.

Architecture:
    lexparse/
    ├── lexer/           # Tokens, pattern table, lexer, diagnostics
    ├── utils/           # Logging helpers
    └── cli.py           # File loader and token printer

License: MIT
"""

__version__ = "0.1.0"
__license__ = "MIT"

from .lexer import Lexer, Token, TokenKind, tokenize, tokenize_file
from .lexer import LexerError, UnrecognizedInputError

__all__ = [
    "Lexer",
    "Token",
    "TokenKind",
    "tokenize",
    "tokenize_file",
    "LexerError",
    "UnrecognizedInputError",

    # Version info
    "__version__",
    "__license__",
]
