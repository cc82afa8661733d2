"""
minilang Package

Front end for minilang, a small imperative language with integer and
boolean values, arrays, and the keywords and/array/if/let/not/or/print/while.

Architecture:
    minilang/
    ├── lexer/           # Tokenization and lexical analysis
    └── cli.py           # minilang-lex command-line tool

Author: xwest
License: MIT
"""

__version__ = "0.1.0"
__author__ = "xwest"
__license__ = "MIT"

from .lexer import Lexer, Token, TokenType

__all__ = [
    # Core classes
    "Lexer",
    "Token",
    "TokenType",

    # Version info
    "__version__",
    "__author__",
    "__license__",
]
