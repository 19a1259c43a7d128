"""
lexparse command line tool

Reads a source file, tokenizes it and prints one line per token.

Examples:
    lexparse                         # Tokenize examples/01.lang
    lexparse program.lang            # Tokenize a given file
    lexparse program.lang --locations --count
"""

import argparse
import logging
import os
import sys
from typing import List, Optional

from . import __version__
from .lexer import LexerError, Token, tokenize_file

DEFAULT_SOURCE = os.path.join("examples", "01.lang")
LOG_LEVEL_ENV = "LEXPARSE_LOG_LEVEL"
LOG_LEVELS = ['DEBUG', 'INFO', 'WARNING', 'ERROR']


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="lexparse",
        description="Print the tokens of a lexparse source file",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
    lexparse                          # Tokenize examples/01.lang
    lexparse program.lang --locations # Prefix each token with line:column
        """
    )
    parser.add_argument('path', nargs='?', default=DEFAULT_SOURCE,
                        help=f'Source file to tokenize (default: {DEFAULT_SOURCE})')
    parser.add_argument('--locations', action='store_true',
                        help='Prefix each token with its line:column')
    parser.add_argument('--count', action='store_true',
                        help='Print the number of tokens after the listing')
    parser.add_argument('--log-level', default=os.environ.get(LOG_LEVEL_ENV, 'WARNING'),
                        choices=LOG_LEVELS, type=str.upper,
                        help=f'Logging verbosity (default: ${LOG_LEVEL_ENV} or WARNING)')
    parser.add_argument('--version', action='version', version=f'%(prog)s {__version__}')
    return parser


def format_token(token: Token, locations: bool = False) -> str:
    line = token.debug()
    if locations and token.location is not None:
        line = f"{token.location.line}:{token.location.column}\t{line}"
    return line


def main(argv: Optional[List[str]] = None) -> int:
    """Main entry point for the command line tool"""
    parser = build_parser()
    args = parser.parse_args(argv)
    # argparse does not check defaults against choices
    if args.log_level not in LOG_LEVELS:
        parser.error(f"invalid ${LOG_LEVEL_ENV} {args.log_level!r} (choose from {', '.join(LOG_LEVELS)})")
    logging.basicConfig(level=args.log_level, format='%(levelname)s %(name)s: %(message)s')

    try:
        tokens = tokenize_file(args.path)
    except OSError as e:
        print(f"error: cannot read {args.path}: {e.strerror or e}", file=sys.stderr)
        return 1
    except UnicodeDecodeError as e:
        print(f"error: {args.path} is not valid UTF-8 (byte {e.start}: {e.reason})", file=sys.stderr)
        return 1
    except LexerError as e:
        print(e, file=sys.stderr, end="")
        return 1

    for token in tokens:
        print(format_token(token, args.locations))

    if args.count:
        print(f"{len(tokens)} tokens")

    return 0


if __name__ == '__main__':
    sys.exit(main())
