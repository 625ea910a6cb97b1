"""
minic Tokens and Character Classifier
=====================================

Token definitions for the minic language and the two pure classifiers the
state machine in minic.lexer relies on.

Token Categories
----------------
| Category    | Spelling              | TokenType                     |
|-------------|-----------------------|-------------------------------|
| Punctuation | { } ( ) ;             | OPEN_BRACE ... SEMICOLON      |
| Keywords    | Int, Return           | INT_KEYWORD, RETURN_KEYWORD   |
| Identifiers | letter/_ then alnum/_ | IDENTIFIER (value: name)      |
| Integers    | 42, 0x2A, 0o52, 0b101 | INTEGER (value: u64 magnitude)|

Keywords are case-sensitive: ``Int`` is a keyword, ``int`` is an identifier.

Example
-------
>>> from minic.tokens import primitive_to_token, string_to_token
>>> string_to_token("Return")
Token(RETURN_KEYWORD)
>>> string_to_token("main")
Token(IDENTIFIER, 'main')
>>> primitive_to_token(";")
Token(SEMICOLON)
"""

from dataclasses import dataclass
from enum import Enum, auto

from minic.errors import UnexpectedCharacterError


# =============================================================================
# Token Type Enumeration
# =============================================================================

class TokenType(Enum):
    """Token types produced by the minic lexer."""

    # === Punctuation ===
    OPEN_BRACE = auto()     # {
    CLOSE_BRACE = auto()    # }
    OPEN_PAREN = auto()     # (
    CLOSE_PAREN = auto()    # )
    SEMICOLON = auto()      # ;

    # === Keywords ===
    INT_KEYWORD = auto()    # Int
    RETURN_KEYWORD = auto() # Return

    # === Values ===
    IDENTIFIER = auto()     # Variable/function names
    INTEGER = auto()        # Integer literals (all radixes)


# Punctuation characters and the tokens they map to. These always
# terminate any lexeme in progress.
PUNCTUATION: dict[str, TokenType] = {
    "{": TokenType.OPEN_BRACE,
    "}": TokenType.CLOSE_BRACE,
    "(": TokenType.OPEN_PAREN,
    ")": TokenType.CLOSE_PAREN,
    ";": TokenType.SEMICOLON,
}

# Reserved spellings. Matching is exact, with no case folding.
KEYWORDS: dict[str, TokenType] = {
    "Int": TokenType.INT_KEYWORD,
    "Return": TokenType.RETURN_KEYWORD,
}

_SPELLINGS: dict[TokenType, str] = {
    **{token_type: char for char, token_type in PUNCTUATION.items()},
    **{token_type: word for word, token_type in KEYWORDS.items()},
}


# =============================================================================
# Token Data Class
# =============================================================================

@dataclass(frozen=True)
class Token:
    """
    A single token of minic source.

    Fixed tokens (punctuation and keywords) have no value. Identifiers
    carry their name, integers their unsigned 64-bit value.

    Attributes:
        type: The TokenType classification
        value: Identifier name, integer value, or None
    """
    type: TokenType
    value: str | int | None = None

    @classmethod
    def identifier(cls, name: str) -> "Token":
        return cls(TokenType.IDENTIFIER, name)

    @classmethod
    def integer(cls, value: int) -> "Token":
        return cls(TokenType.INTEGER, value)

    def __repr__(self) -> str:
        """Format token for debugging output."""
        if self.value is None:
            return f"Token({self.type.name})"
        if isinstance(self.value, int):
            return f"Token({self.type.name}, {self.value})"
        return f"Token({self.type.name}, {self.value!r})"

    @property
    def text(self) -> str:
        """Source spelling of the token (integers in decimal)."""
        if self.value is None:
            return _SPELLINGS[self.type]
        return str(self.value)

    def is_keyword(self) -> bool:
        """Return True if this token is a reserved keyword."""
        return self.type in (TokenType.INT_KEYWORD, TokenType.RETURN_KEYWORD)

    def is_punctuation(self) -> bool:
        """Return True if this token is a punctuation token."""
        return self.type in PUNCTUATION.values()


# =============================================================================
# Classifiers
# =============================================================================

def is_punctuation(char: str) -> bool:
    """Return True if char is one of the five punctuation characters."""
    return char in PUNCTUATION


def primitive_to_token(char: str) -> Token:
    """
    Map a punctuation character to its token.

    Callers only pass characters for which is_punctuation() holds; anything
    else is rejected as an unexpected character.

    Raises:
        UnexpectedCharacterError: If char is not punctuation
    """
    token_type = PUNCTUATION.get(char)
    if token_type is None:
        raise UnexpectedCharacterError(char, "punctuation")
    return Token(token_type)


def string_to_token(text: str) -> Token:
    """Classify a completed lexeme as a keyword or an identifier."""
    token_type = KEYWORDS.get(text)
    if token_type is not None:
        return Token(token_type)
    return Token.identifier(text)
