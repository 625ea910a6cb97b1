"""
minic Error Hierarchy
=====================

This module defines the exception hierarchy for the minic lexer.
All exceptions inherit from MinicError, allowing callers to catch all
lexer-related errors with a single except clause if desired.

Exception Hierarchy
-------------------
MinicError (base)
└── LexicalError - source text that cannot be tokenized ("invalid data")
    ├── UnknownCharacterError - character outside the language alphabet
    ├── UnexpectedCharacterError - valid character in an invalid position
    └── IntegerOverflowError - integer literal wider than 64 bits

I/O failures are not part of this hierarchy. Errors raised while reading
the input stream (OSError, UnicodeDecodeError) propagate unchanged.

Error Message Format
--------------------
When location information is available, errors are formatted as:

    filename:line:column: error: description
        source_line_text
          ^ (pointer to error location)
    hint: suggestion for fixing (when available)
"""

from dataclasses import dataclass
from typing import Optional


# =============================================================================
# Base Exception Class
# =============================================================================

class MinicError(Exception):
    """
    Base exception for all minic errors.

        try:
            tokens = lex_file("program.c")
        except MinicError as e:
            print(f"Error: {e}")
    """
    pass


# =============================================================================
# Source Location Tracking
# =============================================================================

@dataclass(frozen=True)
class SourceLocation:
    """
    Represents a location in source code for error reporting.

    Attributes:
        filename: Name of the source file (or "<input>" for string input)
        line: Line number (1-indexed)
        column: Column number (1-indexed)
    """
    filename: str
    line: int
    column: int

    def __str__(self) -> str:
        """Format as 'filename:line:column' for error messages."""
        return f"{self.filename}:{self.line}:{self.column}"


# =============================================================================
# Lexical Errors
# =============================================================================

class LexicalError(MinicError):
    """
    Base exception for all tokenization errors.

    The state machine raises these without a location, since it only sees
    one character at a time. The tokenizer attaches the location and the
    offending source line with locate() before the error leaves tokenize().

    Attributes:
        message: The error description
        location: Where in the source the error occurred (optional)
        hint: A suggestion for fixing the error (optional)
        source_line: The actual source text at the error location (optional)
    """

    def __init__(
        self,
        message: str,
        location: Optional[SourceLocation] = None,
        hint: Optional[str] = None,
        source_line: Optional[str] = None,
    ):
        self.message = message
        self.location = location
        self.hint = hint
        self.source_line = source_line
        super().__init__(self._format_message())

    def locate(
        self,
        location: SourceLocation,
        source_line: Optional[str] = None,
    ) -> "LexicalError":
        """
        Attach source context to an error raised without it.

        Returns the same exception so callers can write
        ``raise error.locate(where, line)``.
        """
        self.location = location
        self.source_line = source_line
        self.args = (self._format_message(),)
        return self

    def _format_message(self) -> str:
        """
        Format the error message with location, source context, and hint.

        Example output:
            prog.c:1:3: error: unexpected character '2' in binary literal
                0b2
                  ^
        """
        parts = []

        if self.location:
            parts.append(f"{self.location}: error: {self.message}")
        else:
            parts.append(f"error: {self.message}")

        # Source context with caret pointer
        if self.source_line is not None and self.location is not None:
            parts.append(f"    {self.source_line}")
            if self.location.column > 0:
                padding = " " * (4 + self.location.column - 1)
                parts.append(f"{padding}^")

        if self.hint:
            parts.append(f"hint: {self.hint}")

        return "\n".join(parts)


class UnknownCharacterError(LexicalError):
    """
    Character that no token of the language can contain or start with.

    Examples:
        @, $, #, +, = anywhere in the source
        '-' in the middle of an identifier
    """

    def __init__(
        self,
        char: str,
        location: Optional[SourceLocation] = None,
        source_line: Optional[str] = None,
    ):
        self.char = char
        super().__init__(
            f"unknown character {char!r}",
            location=location,
            source_line=source_line,
        )


class UnexpectedCharacterError(LexicalError):
    """
    Character that is valid somewhere, but not where it appears.

    Raised for digits outside the radix of an integer literal, letters
    inside an integer literal, and non-punctuation characters handed to
    the punctuation classifier.

    Examples:
        0b2     ; '2' is not a binary digit
        12abc   ; 'a' is not a decimal digit
        0q      ; 'q' is not a radix prefix
    """

    def __init__(
        self,
        char: str,
        context: Optional[str] = None,
        location: Optional[SourceLocation] = None,
        hint: Optional[str] = None,
        source_line: Optional[str] = None,
    ):
        self.char = char
        self.context = context

        message = f"unexpected character {char!r}"
        if context:
            message = f"{message} in {context}"

        super().__init__(
            message,
            location=location,
            hint=hint,
            source_line=source_line,
        )


class IntegerOverflowError(LexicalError):
    """
    Integer literal whose value does not fit in 64 unsigned bits.

    Integer tokens carry an unsigned 64-bit magnitude, so the largest
    accepted literal is 18446744073709551615 (0xffffffffffffffff).
    """

    def __init__(
        self,
        location: Optional[SourceLocation] = None,
        source_line: Optional[str] = None,
    ):
        super().__init__(
            "integer literal does not fit in 64 bits",
            location=location,
            hint="the largest integer literal is 0xffffffffffffffff",
            source_line=source_line,
        )
