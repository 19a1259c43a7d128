"""
lexparse Lexer - turns source text into tokens

The lexer keeps the source text and a cursor. At every position it walks
the pattern table in order, hands the first match to that pattern's
handler and repeats until the cursor reaches the end. Handlers talk to the
lexer only through advance_n / remainder / at_eof / push / location.

Author: lexparse contributors
"""

from typing import List, Sequence

from .tokens import Token, TokenKind, SourceLocation
from .patterns import Pattern, DEFAULT_PATTERNS, validate_patterns
from .errors import StalledLexerError, create_unrecognized_input_error
from ..utils.logger import get_logger

logger = get_logger(__name__)


class Lexer:
    """
    lexparse lexical analyzer.

    One instance owns one tokenization run: the source text, the cursor and
    the tokens produced so far.
    """

    def __init__(self, source: str, filename: str = "<string>",
                 patterns: Sequence[Pattern] = DEFAULT_PATTERNS):
        """
        Initialize the lexer with source text.

        Args:
            source: Source text
            filename: Name used in source locations
            patterns: Pattern table in priority order
        """
        self.source = source
        self.filename = filename
        self.patterns = patterns if patterns is DEFAULT_PATTERNS else validate_patterns(patterns)
        self.pos = 0
        self.line = 1
        self.column = 1
        self.tokens: List[Token] = []
        # Exact text consumed by each step, skipped text included
        self.consumed: List[str] = []

    # ------------------------------------------------------------------
    # Scanner primitives
    # ------------------------------------------------------------------

    def advance_n(self, n: int):
        """Move the cursor forward ``n`` characters, updating line/column."""
        text = self.source[self.pos:self.pos + n]
        newlines = text.count("\n")
        if newlines:
            self.line += newlines
            self.column = len(text) - text.rfind("\n")
        else:
            self.column += len(text)
        self.pos += n

    def remainder(self) -> str:
        return self.source[self.pos:]

    def at_eof(self) -> bool:
        return self.pos >= len(self.source)

    def push(self, token: Token):
        self.tokens.append(token)

    def location(self) -> SourceLocation:
        """Source location of the cursor."""
        return SourceLocation(self.filename, self.line, self.column, self.pos)

    # ------------------------------------------------------------------
    # Dispatch loop
    # ------------------------------------------------------------------

    def tokenize(self) -> List[Token]:
        """
        Tokenize the entire source.

        Returns:
            List of tokens ending with the EOF token

        Raises:
            UnrecognizedInputError: If no pattern matches at some position
            StalledLexerError: If a handler does not move the cursor
        """
        while not self.at_eof():
            self._step()

        self.push(Token(TokenKind.EOF, "EOF", self.location()))
        logger.debug("Tokenized %s: %d tokens from %d characters",
                     self.filename, len(self.tokens), len(self.source))
        return self.tokens

    def _step(self):
        """Run the first pattern that matches at the cursor."""
        start = self.pos
        for pattern in self.patterns:
            match = pattern.regex.match(self.source, start)
            if match is None:
                continue

            pattern.handler(self, pattern, match)
            if self.pos <= start:
                raise StalledLexerError(pattern.name, self.location())

            consumed = self.source[start:self.pos]
            self.consumed.append(consumed)
            logger.debug("%s at %d: %r", pattern.name, start, consumed)
            return

        raise create_unrecognized_input_error(self.remainder(), self.location())


def tokenize(source: str, filename: str = "<string>") -> List[Token]:
    """
    Tokenize a source string.

    Args:
        source: Source text (may be empty)
        filename: Filename for error reporting

    Returns:
        List of tokens, always ending with the EOF token

    Raises:
        UnrecognizedInputError: If the source contains text no pattern recognizes
    """
    return Lexer(source, filename).tokenize()


def tokenize_file(filepath: str) -> List[Token]:
    """
    Read a source file and tokenize it.

    Args:
        filepath: Path to source file

    Returns:
        List of tokens

    Raises:
        UnrecognizedInputError: If lexing fails
        OSError: If file cannot be read
    """
    with open(filepath, 'r', encoding='utf-8') as f:
        source = f.read()

    logger.info("Read %d characters from %s", len(source), filepath)
    return tokenize(source, str(filepath))
