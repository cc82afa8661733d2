"""
minilang Lexer Package

Implements the lexical analyzer (tokenizer) for minilang, a small
imperative language with integers, booleans, arrays and a handful of
keywords.

Key Features:
- Pull-based scanning, one token per call
- One character of lookahead for := == >= <= <>
- Case-sensitive keyword recognition
- Source location tracking on every token
- Catchable errors for out-of-range integer literals

Author: xwest
"""

from .tokens import Token, TokenType, SourceLocation, KEYWORDS
from .lexer import Lexer, tokenize_string, tokenize_file
from .errors import Diagnostic, LexerError, LexerWarning, NumericOverflowError

__all__ = [
    "Lexer",
    "Token",
    "TokenType",
    "SourceLocation",
    "KEYWORDS",
    "tokenize_string",
    "tokenize_file",
    "Diagnostic",
    "LexerError",
    "LexerWarning",
    "NumericOverflowError",
]
