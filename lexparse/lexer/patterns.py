"""
Pattern table for the lexparse lexer.

The table is an ordered list of patterns tried top to bottom at every
cursor position. The first pattern whose regex matches exactly at the
cursor wins, so registration order is the tie-break: a fixed symbol has to
be registered before every shorter symbol that is a prefix of it
(``==`` before ``=``, ``..`` before ``.``).

Author: lexparse contributors
"""

import re
from dataclasses import dataclass
from typing import TYPE_CHECKING, Callable, List, Optional, Sequence, Tuple

from .tokens import Token, TokenKind, RESERVED_WORDS, SYMBOLS

if TYPE_CHECKING:
    from .lexer import Lexer


Handler = Callable[["Lexer", "Pattern", "re.Match"], None]


@dataclass(frozen=True)
class Pattern:
    """
    A registered (regex, handler) pair.

    Fixed-symbol patterns also carry the ``kind`` and ``literal`` they emit,
    which the shared symbol handler reads instead of closing over them.
    """
    name: str
    regex: "re.Pattern"
    handler: Handler
    kind: Optional[TokenKind] = None
    literal: Optional[str] = None

    @property
    def is_symbol(self) -> bool:
        return self.literal is not None


class PatternTableError(ValueError):
    """Raised for a pattern table that violates the registration order."""


# ============================================================================
# Handlers
# ============================================================================

def symbol_handler(lexer: "Lexer", pattern: Pattern, match: "re.Match") -> None:
    """Emit the pattern's fixed symbol and step over its literal."""
    lexer.push(Token(pattern.kind, pattern.literal, lexer.location()))
    lexer.advance_n(len(pattern.literal))


def skip_handler(lexer: "Lexer", pattern: Pattern, match: "re.Match") -> None:
    lexer.advance_n(match.end() - match.start())


def number_handler(lexer: "Lexer", pattern: Pattern, match: "re.Match") -> None:
    value = match.group(0)
    lexer.push(Token(TokenKind.NUMBER, value, lexer.location()))
    lexer.advance_n(len(value))


def string_handler(lexer: "Lexer", pattern: Pattern, match: "re.Match") -> None:
    # Quotes stay part of the token value
    literal = match.group(0)
    lexer.push(Token(TokenKind.STRING, literal, lexer.location()))
    lexer.advance_n(len(literal))


def identifier_handler(lexer: "Lexer", pattern: Pattern, match: "re.Match") -> None:
    """Emit an identifier, or the reserved word's own kind for an exact spelling."""
    value = match.group(0)
    kind = RESERVED_WORDS.get(value, TokenKind.IDENTIFIER)
    lexer.push(Token(kind, value, lexer.location()))
    lexer.advance_n(len(value))


# ============================================================================
# Table construction
# ============================================================================

def symbol_pattern(literal: str, kind: TokenKind) -> Pattern:
    return Pattern(
        name=kind.name.lower(),
        regex=re.compile(re.escape(literal)),
        handler=symbol_handler,
        kind=kind,
        literal=literal,
    )


def build_default_patterns() -> Tuple[Pattern, ...]:
    """Build the language's pattern table in priority order."""
    patterns = [
        Pattern("identifier", re.compile(r"[a-zA-Z_][a-zA-Z0-9_]*"), identifier_handler),
        Pattern("number", re.compile(r"[0-9]+(\.[0-9]+)?"), number_handler),
        Pattern("string", re.compile(r'"[^"]*"'), string_handler),
        Pattern("comment", re.compile(r"//.*"), skip_handler),
        Pattern("whitespace", re.compile(r"[\t\n\f\r ]+"), skip_handler),
    ]
    patterns.extend(symbol_pattern(literal, kind) for literal, kind in SYMBOLS)
    return tuple(patterns)


def shadowed_symbols(patterns: Sequence[Pattern]) -> List[Tuple[Pattern, Pattern]]:
    """
    Find fixed symbols hidden behind a shorter prefix registered earlier.

    Returns (shorter, longer) pairs. An empty list means every longer symbol
    gets its chance before its prefixes.
    """
    symbols = [p for p in patterns if p.is_symbol]
    shadowed = []
    for i, earlier in enumerate(symbols):
        for later in symbols[i + 1:]:
            if len(later.literal) > len(earlier.literal) and later.literal.startswith(earlier.literal):
                shadowed.append((earlier, later))
    return shadowed


def validate_patterns(patterns: Sequence[Pattern]) -> Tuple[Pattern, ...]:
    """Return ``patterns`` as a tuple, raising PatternTableError if any symbol is shadowed."""
    patterns = tuple(patterns)
    shadowed = shadowed_symbols(patterns)
    if shadowed:
        pairs = ", ".join(f"{short.literal!r} before {long.literal!r}" for short, long in shadowed)
        raise PatternTableError(f"Shorter symbols registered before longer ones: {pairs}")
    return patterns


# Built once per process; read-only and shared by every Lexer.
DEFAULT_PATTERNS = validate_patterns(build_default_patterns())
