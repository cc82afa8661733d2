"""
minilang Lexer - turns source text into tokens

Pull-based: each next_token() call skips whitespace and produces exactly
one token, or None once the input is used up. One character of lookahead
is enough to split the two-character operators from their one-character
prefixes.

xwest
"""

import logging
from typing import Iterator, List, Optional, Union

from .tokens import (
    Token, TokenType, SourceLocation, KEYWORDS, SINGLE_CHAR_SYMBOLS,
    COMPOUND_SYMBOLS, WHITESPACE, DIGITS, LETTERS, NAME_CHARS, INTEGER_MAX_DIGITS
)
from .errors import (
    LexerError, LexerWarning, create_overflow_error, create_keyword_case_warning
)

logger = logging.getLogger(__name__)


class Lexer:
    """
    minilang lexical analyzer.

    Converts source code text into a stream of tokens. A Lexer is
    forward-only: characters it has consumed are never scanned again.
    """

    def __init__(self, source: str, filename: str = "<unknown>"):
        """
        Initialize the lexer with source code.

        Args:
            source: Source code string, already read into memory
            filename: Name of source file for error reporting
        """
        self.source = source
        self.filename = filename
        self.pos = 0
        self.line = 1
        self.column = 1
        self.errors: List[LexerError] = []
        self.warnings: List[LexerWarning] = []

    def __iter__(self) -> Iterator[Token]:
        return self

    def __next__(self) -> Token:
        token = self.next_token()
        if token is None:
            raise StopIteration
        return token

    def next_token(self) -> Optional[Token]:
        """
        Produce the next token.

        Returns:
            The next token, or None when only whitespace (or nothing) is left

        Raises:
            NumericOverflowError: If an integer literal exceeds 32 bits. The
                digits are consumed, so scanning can resume afterwards.
        """
        self._skip_whitespace()

        if self.pos >= len(self.source):
            return None

        location = self._location()
        char = self._advance()

        if char in SINGLE_CHAR_SYMBOLS:
            return Token(SINGLE_CHAR_SYMBOLS[char], char, None, location)

        if char in COMPOUND_SYMBOLS:
            return self._tokenize_compound_symbol(char, location)

        if char in DIGITS:
            return self._tokenize_integer(location)

        if char in LETTERS:
            return self._tokenize_name_or_keyword(location)

        return Token(TokenType.INVALID, char, None, location)

    def tokenize(self) -> List[Token]:
        """
        Tokenize the rest of the source code.

        Errors are collected in self.errors instead of being raised; the
        offending lexeme yields no token and scanning continues after it.

        Returns:
            List of tokens (there is no end-of-file token)
        """
        tokens: List[Token] = []

        while True:
            try:
                token = self.next_token()
            except LexerError as e:
                logger.debug("Collected lexer error at %s: %s", e.location, e.args[0])
                self.errors.append(e)
                continue

            if token is None:
                break
            tokens.append(token)

        return tokens

    def _tokenize_compound_symbol(self, first: str, location: SourceLocation) -> Token:
        """Tokenize ':', '=', '>' or '<', taking the next char if it extends the symbol."""
        fallback, combined = COMPOUND_SYMBOLS[first]
        second = self._peek()

        if second in combined:
            self._advance()
            return Token(combined[second], first + second, None, location)

        return Token(fallback, first, None, location)

    def _tokenize_integer(self, location: SourceLocation) -> Token:
        """Tokenize a run of decimal digits."""
        start_pos = location.offset

        while self._peek() in DIGITS:
            self._advance()

        lexeme = self.source[start_pos:self.pos]

        # Compare as text first: int() refuses very long digit strings
        digits = lexeme.lstrip('0')
        if len(digits) > len(INTEGER_MAX_DIGITS) or (
                len(digits) == len(INTEGER_MAX_DIGITS) and digits > INTEGER_MAX_DIGITS):
            raise create_overflow_error(lexeme, location)

        return Token(TokenType.INTEGER, lexeme, int(digits or '0'), location)

    def _tokenize_name_or_keyword(self, location: SourceLocation) -> Token:
        """Tokenize a name, then check it against the keyword table."""
        start_pos = location.offset

        while self._peek() in NAME_CHARS:
            self._advance()

        lexeme = self.source[start_pos:self.pos]

        token_type = KEYWORDS.get(lexeme)
        if token_type is not None:
            return Token(token_type, lexeme, None, location)

        # Keywords are exact-case: "If" stays a name
        if lexeme.lower() in KEYWORDS:
            self.warnings.append(create_keyword_case_warning(lexeme, location))

        return Token(TokenType.NAME, lexeme, lexeme, location)

    def _skip_whitespace(self):
        """Skip spaces, tabs and newlines."""
        while self._peek() in WHITESPACE:
            self._advance()

    def _advance(self) -> str:
        """Consume one character, updating line/column."""
        char = self.source[self.pos]
        if char == '\n':
            self.line += 1
            self.column = 1
        else:
            self.column += 1
        self.pos += 1
        return char

    def _peek(self) -> str:
        """Look at the next character without consuming it ('' at end of input)."""
        if self.pos < len(self.source):
            return self.source[self.pos]
        return ''

    def _location(self) -> SourceLocation:
        return SourceLocation(self.filename, self.line, self.column, self.pos)

    def has_errors(self) -> bool:
        """Check if lexer encountered any errors."""
        return len(self.errors) > 0

    def has_warnings(self) -> bool:
        """Check if lexer encountered any warnings."""
        return len(self.warnings) > 0

    def get_diagnostics(self) -> List[Union[LexerError, LexerWarning]]:
        """Get all diagnostics (errors and warnings)."""
        return self.errors + self.warnings


def tokenize_string(source: str, filename: str = "<string>") -> List[Token]:
    """
    Convenience function to tokenize a source string.

    Args:
        source: Source code string
        filename: Filename for error reporting

    Returns:
        List of tokens

    Raises:
        LexerError: If lexing fails
    """
    lexer = Lexer(source, filename)
    tokens = lexer.tokenize()

    if lexer.has_errors():
        # Raise the first error encountered
        raise lexer.errors[0]

    return tokens


def tokenize_file(filepath: str) -> List[Token]:
    """
    Convenience function to tokenize a source file.

    Args:
        filepath: Path to source file

    Returns:
        List of tokens

    Raises:
        LexerError: If lexing fails
        IOError: If file cannot be read
    """
    with open(filepath, 'r', encoding='utf-8') as f:
        source = f.read()

    return tokenize_string(source, filepath)
