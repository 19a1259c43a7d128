"""
Token definitions for the lexparse lexer.

This module defines every token kind the language knows about:
- Literals (numbers, strings) and identifiers
- Reserved words (recognized from identifier-shaped text)
- Operators and punctuation
- The synthetic end-of-input marker

Author: lexparse contributors
"""

from enum import Enum, auto
from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Optional, Tuple


class TokenKind(Enum):
    """
    Enumeration of all token kinds.

    Organized by category for clarity and maintainability.
    """

    # ========================================================================
    # Special Tokens
    # ========================================================================
    EOF = auto()                    # End of input

    # ========================================================================
    # Literals and Identifiers
    # ========================================================================
    NUMBER = auto()                 # 42, 3.14
    STRING = auto()                 # "hello"
    IDENTIFIER = auto()             # foo, _bar1

    # ========================================================================
    # Reserved Words
    # ========================================================================
    LET = auto()                    # let
    CONST = auto()                  # const
    CLASS = auto()                  # class
    NEW = auto()                    # new
    IMPORT = auto()                 # import
    FROM = auto()                   # from
    FN = auto()                     # fn
    IF = auto()                     # if
    ELSE = auto()                   # else
    FOREACH = auto()                # foreach
    WHILE = auto()                  # while
    FOR = auto()                    # for
    EXPORT = auto()                 # export
    TYPEOF = auto()                 # typeof
    IN = auto()                     # in
    TRUE = auto()                   # true
    FALSE = auto()                  # false
    NULL = auto()                   # null

    # ========================================================================
    # Grouping
    # ========================================================================
    OPEN_BRACKET = auto()           # [
    CLOSE_BRACKET = auto()          # ]
    OPEN_CURLY = auto()             # {
    CLOSE_CURLY = auto()            # }
    OPEN_PAREN = auto()             # (
    CLOSE_PAREN = auto()            # )

    # ========================================================================
    # Operators
    # ========================================================================

    # Equivalence and assignment
    ASSIGNMENT = auto()             # =
    EQUALS = auto()                 # ==
    NOT_EQUALS = auto()             # !=
    NOT = auto()                    # !

    # Comparison
    LESS = auto()                   # <
    LESS_EQUALS = auto()            # <=
    GREATER = auto()                # >
    GREATER_EQUALS = auto()         # >=

    # Logical
    OR = auto()                     # ||
    AND = auto()                    # &&

    # Member access and ranges
    DOT = auto()                    # .
    DOT_DOT = auto()                # ..

    # Shorthand
    PLUS_PLUS = auto()              # ++
    MINUS_MINUS = auto()            # --
    PLUS_EQUALS = auto()            # +=
    MINUS_EQUALS = auto()           # -=

    # Arithmetic
    PLUS = auto()                   # +
    DASH = auto()                   # -
    SLASH = auto()                  # /
    STAR = auto()                   # *
    PERCENT = auto()                # %

    # ========================================================================
    # Punctuation
    # ========================================================================
    SEMICOLON = auto()              # ;
    COLON = auto()                  # :
    QUESTION = auto()               # ?
    COMMA = auto()                  # ,


@dataclass(frozen=True)
class SourceLocation:
    """
    Represents a location in the source text.

    Used for error reporting and for the optional location column of the CLI.
    """
    filename: str
    line: int
    column: int
    offset: int  # Character offset from start of source

    def __str__(self) -> str:
        return f"{self.filename}:{self.line}:{self.column}"

    def __repr__(self) -> str:
        return f"SourceLocation({self.filename!r}, {self.line}, {self.column}, {self.offset})"


@dataclass(frozen=True)
class Token:
    """
    Represents a lexical token.

    ``value`` is the exact source text that produced the token (string quotes
    and the original numeric spelling included). The location is carried for
    diagnostics only and does not take part in equality.
    """
    kind: TokenKind
    value: str
    location: Optional[SourceLocation] = field(default=None, compare=False)

    def __str__(self) -> str:
        return f"{self.kind.name}({self.value!r})"

    def __repr__(self) -> str:
        return f"Token({self.kind.name}, {self.value!r})"

    def is_one_of(self, *kinds: TokenKind) -> bool:
        """Check if this token's kind is any of ``kinds``."""
        return self.kind in kinds

    @property
    def is_literal(self) -> bool:
        """Check if this token carries a literal or identifier value."""
        return self.is_one_of(TokenKind.IDENTIFIER, TokenKind.NUMBER, TokenKind.STRING)

    @property
    def is_keyword(self) -> bool:
        """Check if this token is a reserved word."""
        return self.kind in RESERVED_KINDS

    def debug(self) -> str:
        """Render the token the way the command line tool prints it."""
        if self.is_literal:
            return f"{kind_name(self.kind)} ({self.value})"
        return f"{kind_name(self.kind)} ()"


def kind_name(kind: TokenKind) -> str:
    """Lowercase display name of a token kind, e.g. ``open_paren``."""
    return kind.name.lower()


# Lookup tables used by the pattern table. Both are built once and never
# mutated.

RESERVED_WORDS = MappingProxyType({
    "let": TokenKind.LET,
    "const": TokenKind.CONST,
    "class": TokenKind.CLASS,
    "new": TokenKind.NEW,
    "import": TokenKind.IMPORT,
    "from": TokenKind.FROM,
    "fn": TokenKind.FN,
    "if": TokenKind.IF,
    "else": TokenKind.ELSE,
    "foreach": TokenKind.FOREACH,
    "while": TokenKind.WHILE,
    "for": TokenKind.FOR,
    "export": TokenKind.EXPORT,
    "typeof": TokenKind.TYPEOF,
    "in": TokenKind.IN,
    "true": TokenKind.TRUE,
    "false": TokenKind.FALSE,
    "null": TokenKind.NULL,
})

RESERVED_KINDS = frozenset(RESERVED_WORDS.values())

# Fixed symbols in registration order. A literal must come before any shorter
# literal that is a prefix of it.
SYMBOLS: Tuple[Tuple[str, TokenKind], ...] = (
    ("[", TokenKind.OPEN_BRACKET),
    ("]", TokenKind.CLOSE_BRACKET),
    ("{", TokenKind.OPEN_CURLY),
    ("}", TokenKind.CLOSE_CURLY),
    ("(", TokenKind.OPEN_PAREN),
    (")", TokenKind.CLOSE_PAREN),
    ("==", TokenKind.EQUALS),
    ("!=", TokenKind.NOT_EQUALS),
    ("=", TokenKind.ASSIGNMENT),
    ("!", TokenKind.NOT),
    ("<=", TokenKind.LESS_EQUALS),
    ("<", TokenKind.LESS),
    (">=", TokenKind.GREATER_EQUALS),
    (">", TokenKind.GREATER),
    ("||", TokenKind.OR),
    ("&&", TokenKind.AND),
    ("..", TokenKind.DOT_DOT),
    (".", TokenKind.DOT),
    (";", TokenKind.SEMICOLON),
    (":", TokenKind.COLON),
    ("?", TokenKind.QUESTION),
    (",", TokenKind.COMMA),
    ("++", TokenKind.PLUS_PLUS),
    ("--", TokenKind.MINUS_MINUS),
    ("+=", TokenKind.PLUS_EQUALS),
    ("-=", TokenKind.MINUS_EQUALS),
    ("+", TokenKind.PLUS),
    ("-", TokenKind.DASH),
    ("/", TokenKind.SLASH),
    ("*", TokenKind.STAR),
    ("%", TokenKind.PERCENT),
)
