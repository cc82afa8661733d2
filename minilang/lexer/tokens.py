"""
Token definitions for the minilang lexer.

This module defines all token types supported by minilang:
- Literals (integers, booleans) and names
- Reserved words
- Single and double-character symbols
- The invalid token used for unrecognized characters

Author: xwest
"""

from enum import Enum, auto
from dataclasses import dataclass
from types import MappingProxyType
from typing import Any, Mapping


class TokenType(Enum):
    """
    Enumeration of all token types in minilang.

    Organized by category for clarity and maintainability.
    """

    # ========================================================================
    # Error Tokens
    # ========================================================================
    INVALID = auto()                # Character that matches no rule

    # ========================================================================
    # Values
    # ========================================================================
    BOOLEAN = auto()                # Reserved, no spelling produces it yet
    INTEGER = auto()                # 42 (signed 32-bit)
    NAME = auto()                   # variable_name, x1

    # ========================================================================
    # Keywords
    # ========================================================================
    AND = auto()                    # and
    ARRAY = auto()                  # array
    IF = auto()                     # if
    LET = auto()                    # let
    NOT = auto()                    # not
    OR = auto()                     # or
    PRINT = auto()                  # print
    WHILE = auto()                  # while

    # ========================================================================
    # Symbols
    # ========================================================================
    ASTERISK = auto()               # *
    BRACE_LEFT = auto()             # {
    BRACE_RIGHT = auto()            # }
    BRACKET_LEFT = auto()           # [
    BRACKET_RIGHT = auto()          # ]
    COLON = auto()                  # :
    DOT = auto()                    # .
    EQUAL_SIGN = auto()             # =
    MINUS = auto()                  # -
    PAREN_LEFT = auto()             # (
    PAREN_RIGHT = auto()            # )
    PLUS = auto()                   # +
    SEMICOLON = auto()              # ;
    SLASH = auto()                  # /

    # ========================================================================
    # Operators
    # ========================================================================
    ASSIGN = auto()                 # :=
    EQ = auto()                     # ==
    GE = auto()                     # >=
    GT = auto()                     # >
    LE = auto()                     # <=
    LT = auto()                     # <
    NE = auto()                     # <>


@dataclass(frozen=True)
class SourceLocation:
    """
    Represents a location in the source code.

    Lines and columns are 1-based; the column resets after every newline.
    The offset counts characters (not bytes) from the start of the input.
    """
    filename: str
    line: int
    column: int
    offset: int

    def __str__(self) -> str:
        return f"{self.filename}:{self.line}:{self.column}"

    def __repr__(self) -> str:
        return f"SourceLocation({self.filename!r}, {self.line}, {self.column}, {self.offset})"


@dataclass(frozen=True)
class Token:
    """
    Represents a lexical token in the minilang language.

    Contains the token type, lexeme (raw text), semantic value,
    and the location of the token's first character.
    """
    type: TokenType
    lexeme: str                     # Raw text from source
    value: Any                      # int for INTEGER, str for NAME, else None
    location: SourceLocation

    def __str__(self) -> str:
        if self.value is not None:
            return f"{self.type.name}({self.value!r})"
        return self.type.name

    def __repr__(self) -> str:
        return (f"Token({self.type.name}, {self.lexeme!r}, "
                f"{self.value!r}, {self.location!r})")

    @property
    def is_literal(self) -> bool:
        """Check if this token is a literal value."""
        return self.type in (TokenType.INTEGER, TokenType.BOOLEAN)

    @property
    def is_keyword(self) -> bool:
        """Check if this token is a reserved word."""
        return self.type in KEYWORD_TYPES

    @property
    def is_symbol(self) -> bool:
        """Check if this token is a symbol or operator."""
        return self.type in SYMBOL_TYPES

    @property
    def is_invalid(self) -> bool:
        """Check if this token is an unrecognized character."""
        return self.type == TokenType.INVALID


# Reserved words, matched case-sensitively. Read-only after import.
KEYWORDS: Mapping[str, TokenType] = MappingProxyType({
    "and": TokenType.AND,
    "array": TokenType.ARRAY,
    "if": TokenType.IF,
    "let": TokenType.LET,
    "not": TokenType.NOT,
    "or": TokenType.OR,
    "print": TokenType.PRINT,
    "while": TokenType.WHILE,
})

# Symbols that never combine with the following character
SINGLE_CHAR_SYMBOLS: Mapping[str, TokenType] = MappingProxyType({
    "*": TokenType.ASTERISK,
    "{": TokenType.BRACE_LEFT,
    "}": TokenType.BRACE_RIGHT,
    "[": TokenType.BRACKET_LEFT,
    "]": TokenType.BRACKET_RIGHT,
    ".": TokenType.DOT,
    "-": TokenType.MINUS,
    "(": TokenType.PAREN_LEFT,
    ")": TokenType.PAREN_RIGHT,
    "+": TokenType.PLUS,
    ";": TokenType.SEMICOLON,
    "/": TokenType.SLASH,
})

# Symbols that may extend into a two-character operator.
# Maps first char -> (fallback type, {second char: combined type})
COMPOUND_SYMBOLS: Mapping[str, tuple] = MappingProxyType({
    ":": (TokenType.COLON, {"=": TokenType.ASSIGN}),
    "=": (TokenType.EQUAL_SIGN, {"=": TokenType.EQ}),
    ">": (TokenType.GT, {"=": TokenType.GE}),
    "<": (TokenType.LT, {"=": TokenType.LE, ">": TokenType.NE}),
})

KEYWORD_TYPES = frozenset(KEYWORDS.values())

SYMBOL_TYPES = frozenset(
    list(SINGLE_CHAR_SYMBOLS.values())
    + [fallback for fallback, _ in COMPOUND_SYMBOLS.values()]
    + [t for _, combined in COMPOUND_SYMBOLS.values() for t in combined.values()]
)

WHITESPACE = frozenset(" \t\n")
DIGITS = frozenset("0123456789")
LETTERS = frozenset("abcdefghijklmnopqrstuvwxyzABCDEFGHIJKLMNOPQRSTUVWXYZ")
NAME_CHARS = LETTERS | DIGITS | {"_"}

# Integer literals are signed 32-bit
INTEGER_MAX = 2**31 - 1
INTEGER_MAX_DIGITS = str(INTEGER_MAX)
