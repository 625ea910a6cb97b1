"""
minic Lexer (Tokenizer)
=======================

This module implements the streaming lexer for minic. Source is read one
line at a time and scanned one character at a time by a small state
machine. Each character moves the machine to a new state and may emit
tokens; at the end of every line any pending lexeme is flushed and the
machine returns to Idle, so no token ever spans two lines.

States
------
| State                | Meaning                                         |
|----------------------|-------------------------------------------------|
| Idle                 | between tokens                                  |
| InIdentifier(text)   | collecting an identifier or keyword             |
| LeadingZero          | just read a leading 0, radix not yet known      |
| InInteger(value, r)  | collecting an integer literal in radix r        |

Number Formats
--------------
| Format      | Prefix | Example | Value |
|-------------|--------|---------|-------|
| Decimal     | (none) | 123     | 123   |
| Hexadecimal | 0x     | 0x7F    | 127   |
| Octal       | 0o     | 0o177   | 127   |
| Binary      | 0b     | 0b1010  | 10    |

Leading zeros do not select octal: ``017`` is decimal 17.

Example Usage
-------------
>>> from minic.lexer import lex
>>> lex("Int main() { Return 0x2A; }")
[Token(INT_KEYWORD), Token(IDENTIFIER, 'main'), Token(OPEN_PAREN), Token(CLOSE_PAREN), Token(OPEN_BRACE), Token(RETURN_KEYWORD), Token(INTEGER, 42), Token(SEMICOLON), Token(CLOSE_BRACE)]
"""

import io
import logging
from dataclasses import dataclass
from enum import IntEnum
from pathlib import Path
from typing import Iterable, Optional, Union

from minic.errors import (
    IntegerOverflowError,
    LexicalError,
    SourceLocation,
    UnexpectedCharacterError,
    UnknownCharacterError,
)
from minic.tokens import Token, is_punctuation, primitive_to_token, string_to_token


logger = logging.getLogger(__name__)


# Integer tokens hold an unsigned 64-bit magnitude
U64_MAX = 0xFFFF_FFFF_FFFF_FFFF

# Digit characters in value order, shared by every radix
DIGITS = "0123456789abcdef"

# Characters routed to digit conversion while reading an integer: digits of
# every supported radix plus the radix prefix letters ('b' is a hex digit)
INTEGER_CHARS = frozenset("0123456789abcdefABCDEFox")

# ASCII information separators: str.isspace() accepts them, but they are not
# Unicode White_Space and are rejected as unknown characters
SEPARATORS = frozenset("\x1c\x1d\x1e\x1f")


class Radix(IntEnum):
    """Supported integer literal radixes."""
    BINARY = 2
    OCTAL = 8
    DECIMAL = 10
    HEXADECIMAL = 16


RADIX_PREFIXES: dict[str, Radix] = {
    "b": Radix.BINARY,
    "o": Radix.OCTAL,
    "x": Radix.HEXADECIMAL,
}


# =============================================================================
# Lexer States
# =============================================================================

@dataclass(frozen=True)
class Idle:
    """Not inside a multi-character lexeme."""


@dataclass(frozen=True)
class InIdentifier:
    """Collecting an identifier or keyword; text is never empty."""
    text: str


@dataclass(frozen=True)
class LeadingZero:
    """
    Just read a leading '0'.

    The next character decides between a radix prefix (b, o, x) and a
    decimal literal. Kept apart from InInteger(0, DECIMAL) so that an
    undecided prefix is never confused with a literal whose value is zero.
    """


@dataclass(frozen=True)
class InInteger:
    """Collecting an integer literal whose radix is known."""
    value: int
    radix: Radix


LexerState = Union[Idle, InIdentifier, LeadingZero, InInteger]

IDLE = Idle()
LEADING_ZERO = LeadingZero()


# =============================================================================
# State Machine
# =============================================================================

def digit_value(char: str, radix: int) -> Optional[int]:
    """
    Return the value of char as a digit in radix, or None if it is not one.

    Letters a-f (either case) count as 10-15. A digit is only valid when
    its value is below the radix, so '9' is rejected in octal and '2' in
    binary.
    """
    if len(char) != 1:
        return None
    value = DIGITS.find(char.lower())
    if value < 0 or value >= radix:
        return None
    return value


def flush(state: LexerState) -> list[Token]:
    """Return the token for the lexeme pending in state, if there is one."""
    if isinstance(state, InIdentifier):
        return [string_to_token(state.text)]
    if isinstance(state, InInteger):
        return [Token.integer(state.value)]
    if isinstance(state, LeadingZero):
        return [Token.integer(0)]
    return []


def transition(state: LexerState, char: str) -> tuple[LexerState, list[Token]]:
    """
    Advance the state machine by one character.

    Args:
        state: The current lexer state
        char: The next source character

    Returns:
        The new state and the tokens emitted by this step, in order

    Raises:
        UnknownCharacterError: If char cannot appear in this state at all
        UnexpectedCharacterError: If char is invalid inside an integer literal
        IntegerOverflowError: If an integer literal exceeds 64 bits
    """
    # Punctuation ends any lexeme and is a token of its own
    if is_punctuation(char):
        return IDLE, flush(state) + [primitive_to_token(char)]

    if char.isspace() and char not in SEPARATORS:
        return IDLE, flush(state)

    if isinstance(state, Idle):
        if char == "0":
            return LEADING_ZERO, []
        if "1" <= char <= "9":
            return InInteger(int(char), Radix.DECIMAL), []
        if char.isalpha() or char == "_":
            return InIdentifier(char), []
        raise UnknownCharacterError(char)

    if isinstance(state, InIdentifier):
        if char.isalnum() or char == "_":
            return InIdentifier(state.text + char), []
        raise UnknownCharacterError(char)

    if isinstance(state, LeadingZero):
        if char in RADIX_PREFIXES:
            return InInteger(0, RADIX_PREFIXES[char]), []
        if "0" <= char <= "9":
            return InInteger(int(char), Radix.DECIMAL), []
        if char.isalpha():
            raise UnexpectedCharacterError(
                char,
                "integer literal",
                hint="radix prefixes are 0b, 0o and 0x",
            )
        raise UnknownCharacterError(char)

    if isinstance(state, InInteger):
        if char in INTEGER_CHARS:
            digit = digit_value(char, state.radix)
            if digit is None:
                raise UnexpectedCharacterError(
                    char, f"{state.radix.name.lower()} literal"
                )
            value = state.value * state.radix + digit
            if value > U64_MAX:
                raise IntegerOverflowError()
            return InInteger(value, state.radix), []
        if char.isalpha():
            raise UnexpectedCharacterError(
                char, f"{state.radix.name.lower()} literal"
            )
        raise UnknownCharacterError(char)

    raise TypeError(f"not a lexer state: {state!r}")


# =============================================================================
# Tokenizer
# =============================================================================

class Tokenizer:
    """
    Tokenizes minic source from a line-oriented stream.

    The tokenizer owns the current state for the duration of one
    tokenize() call and tracks the line and column of each character so
    that lexical errors can point at the offending source.

    Usage:
        with open("prog.c", "rb") as f:
            tokens = Tokenizer("prog.c").tokenize(f)

    Attributes:
        filename: Name of the source (for error messages)
        state: The current lexer state
    """

    def __init__(self, filename: str = "<input>"):
        self.filename = filename
        self.state: LexerState = IDLE
        self._line = 0
        self._column = 0

    def tokenize(
        self,
        stream: Union[str, bytes, Iterable[Union[str, bytes]]],
    ) -> list[Token]:
        """
        Tokenize every line of stream.

        Args:
            stream: A text or binary file, any iterable of lines, or the
                whole source as a single str or bytes value. Binary lines
                are decoded as UTF-8. Trailing line terminators are ignored.

        Returns:
            All tokens, in source order

        Raises:
            LexicalError: On the first character that cannot be tokenized.
                No tokens are returned in that case.
            OSError: If reading the stream fails
        """
        # A whole source must be split into lines, not iterated per character
        if isinstance(stream, str):
            stream = io.StringIO(stream)
        elif isinstance(stream, bytes):
            stream = io.BytesIO(stream)

        tokens: list[Token] = []
        self.state = IDLE
        self._line = 0

        for raw_line in stream:
            self._line += 1
            self._scan_line(_line_text(raw_line), tokens)

        logger.debug(
            f"Tokenized {self.filename}: {self._line} lines, {len(tokens)} tokens"
        )
        return tokens

    def _scan_line(self, line: str, tokens: list[Token]) -> None:
        """Feed one line through the state machine, then flush it."""
        self._column = 0
        for char in line:
            self._column += 1
            try:
                self.state, emitted = transition(self.state, char)
            except LexicalError as error:
                self.state = IDLE
                error.locate(
                    SourceLocation(self.filename, self._line, self._column),
                    line,
                )
                logger.debug(f"Lexical error at {error.location}: {error.message}")
                raise
            tokens.extend(emitted)

        # End of line: nothing carries over to the next one
        tokens.extend(flush(self.state))
        self.state = IDLE


def _line_text(raw_line: Union[str, bytes]) -> str:
    """Decode a raw line and strip its terminator ('\\n' or '\\r\\n')."""
    if isinstance(raw_line, bytes):
        raw_line = raw_line.decode("utf-8")
    if raw_line.endswith("\n"):
        raw_line = raw_line[:-1]
        if raw_line.endswith("\r"):
            raw_line = raw_line[:-1]
    return raw_line


# =============================================================================
# Convenience Functions
# =============================================================================

def tokenize(
    stream: Union[str, bytes, Iterable[Union[str, bytes]]],
    filename: str = "<input>",
) -> list[Token]:
    """Tokenize a line-oriented stream (or whole source) with a fresh Tokenizer."""
    return Tokenizer(filename).tokenize(stream)


def lex(source: str, filename: str = "<input>") -> list[Token]:
    """
    Tokenize source held in memory.

    Example:
        >>> lex("Return 0;")
        [Token(RETURN_KEYWORD), Token(INTEGER, 0), Token(SEMICOLON)]
    """
    return tokenize(io.StringIO(source), filename)


def lex_file(path: Union[str, Path]) -> list[Token]:
    """
    Tokenize a source file.

    The file is read in binary mode and decoded line by line as UTF-8.
    Errors opening or reading it propagate unchanged.
    """
    path = Path(path)
    logger.debug(f"Reading {path}")
    with path.open("rb") as stream:
        return tokenize(stream, str(path))
