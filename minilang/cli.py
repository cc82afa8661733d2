"""
Command-line tool for the minilang lexer.

Reads a source file (or stdin), prints the token stream and reports
invalid characters and lexer errors as diagnostics on stderr.
"""

import sys
import json
import logging
import argparse
from typing import List, Optional

from .lexer import Lexer, Token
from .lexer.errors import Diagnostic, create_invalid_character_diagnostic

logger = logging.getLogger(__name__)


def format_token(token: Token) -> str:
    """One human-readable line per token."""
    loc = token.location
    return f"{loc.line}:{loc.column}\t{token.type.name}\t{token.lexeme}"


def token_to_json(token: Token) -> str:
    return json.dumps({
        "type": token.type.name,
        "lexeme": token.lexeme,
        "value": token.value,
        "line": token.location.line,
        "column": token.location.column,
        "offset": token.location.offset,
    })


def collect_diagnostics(lexer: Lexer, invalid: List[Token]) -> List[Diagnostic]:
    """Invalid characters, errors and warnings in source order."""
    diagnostics = [create_invalid_character_diagnostic(t) for t in invalid]
    diagnostics += [d.diagnostic for d in lexer.get_diagnostics()]
    return sorted(diagnostics, key=lambda d: d.location.offset)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="minilang-lex",
        description="Tokenize a minilang source file",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
    minilang-lex program.ml              # Print tokens
    minilang-lex program.ml --json       # One JSON object per token
    echo 'let x := 1;' | minilang-lex -  # Read from stdin
        """
    )
    parser.add_argument('source',
                        help='Source file to tokenize, or - for stdin')
    parser.add_argument('--json', action='store_true',
                        help='Output tokens as JSON lines')
    parser.add_argument('--strict', action='store_true',
                        help='Exit with status 1 if any invalid character is found')
    parser.add_argument('-v', '--verbose', action='store_true',
                        help='Enable debug logging')
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    """Main entry point for minilang-lex."""
    args = build_parser().parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s"
    )

    if args.source == '-':
        filename = "<stdin>"
        source = sys.stdin.read()
    else:
        filename = args.source
        try:
            with open(filename, 'r', encoding='utf-8') as f:
                source = f.read()
        except (OSError, UnicodeDecodeError) as e:
            print(f"Error: cannot read '{filename}': {e}", file=sys.stderr)
            return 2

    lexer = Lexer(source, filename)
    tokens = lexer.tokenize()
    logger.debug("Scanned %d tokens from %s", len(tokens), filename)

    invalid = [t for t in tokens if t.is_invalid]

    for token in tokens:
        print(token_to_json(token) if args.json else format_token(token))

    for diagnostic in collect_diagnostics(lexer, invalid):
        print(diagnostic, file=sys.stderr, end="")

    if lexer.has_errors() or (args.strict and invalid):
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
