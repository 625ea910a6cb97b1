"""
minic - Streaming Lexer for a Minimal C-like Language
=====================================================

This package converts minic source text into a flat sequence of tokens.
There is no parser: tokens are the final product, handed to whatever
consumes them.

The language has five punctuation characters, two keywords, identifiers
and unsigned 64-bit integer literals:

    Int main() {
        Return 0x2A;
    }

Main Components
---------------
- **tokens**: Token types and the character classifiers
- **lexer**: The line-oriented tokenizer state machine
- **errors**: Located, formatted lexical errors
- **cli**: The ``mclex`` command-line tool

Quick Start
-----------
Tokenize a string:
    >>> from minic import lex
    >>> lex("Return 0;")
    [Token(RETURN_KEYWORD), Token(INTEGER, 0), Token(SEMICOLON)]

Tokenize a file:
    >>> from minic import lex_file
    >>> tokens = lex_file("prog.c")  # doctest: +SKIP

Or use the command-line tool:
    $ mclex prog.c
"""

__version__ = "1.0.0"

# =============================================================================
# Public API Exports
# =============================================================================

from minic.errors import (
    MinicError,
    SourceLocation,
    LexicalError,
    UnknownCharacterError,
    UnexpectedCharacterError,
    IntegerOverflowError,
)
from minic.tokens import (
    Token,
    TokenType,
    PUNCTUATION,
    KEYWORDS,
    is_punctuation,
    primitive_to_token,
    string_to_token,
)
from minic.lexer import (
    Tokenizer,
    Radix,
    tokenize,
    lex,
    lex_file,
)

__all__ = [
    # Version info
    "__version__",
    # Tokens and classifiers
    "Token",
    "TokenType",
    "PUNCTUATION",
    "KEYWORDS",
    "is_punctuation",
    "primitive_to_token",
    "string_to_token",
    # Lexer
    "Tokenizer",
    "Radix",
    "tokenize",
    "lex",
    "lex_file",
    # Exception hierarchy
    "MinicError",
    "SourceLocation",
    "LexicalError",
    "UnknownCharacterError",
    "UnexpectedCharacterError",
    "IntegerOverflowError",
]
