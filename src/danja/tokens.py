"""
Token types for the Danja lexer.

Danja source is made of three single-character block markers plus runs of
identifier text. Tokens carry no source positions; only their order matters.

Error code ranges:
- E0xx: Lexer errors
- E1xx: Parser errors
- E2xx: Interpreter errors
- E3xx: Binding errors
"""

from enum import Enum, auto
from dataclasses import dataclass
from typing import Optional


class TokenKind(Enum):
    """All token kinds produced by the lexer."""

    BLOCK = auto()              # one of the block markers below
    IDENTIFIER = auto()         # call/variable names, raw text
    VALUE = auto()              # literal text in argument position (after '|')
    EOF = auto()                # end of input sentinel, never stored


class Marker(Enum):
    """The block markers. Constructs need them doubled: [[ ... ]]."""

    BLOCK_START = "["
    BLOCK_END = "]"
    SEPARATOR = "|"             # splits the function name from its arguments


@dataclass(frozen=True)
class Token:
    """A single token from the lexer."""
    kind: TokenKind
    text: str
    marker: Optional[Marker] = None

    def is_marker(self, marker: Marker) -> bool:
        """Check if this token is the given block marker."""
        return self.kind == TokenKind.BLOCK and self.marker == marker

    def __str__(self) -> str:
        if self.kind == TokenKind.BLOCK:
            return f"{self.marker.name}({self.text!r})"
        if self.kind == TokenKind.EOF:
            return "EOF"
        return f"{self.kind.name}({self.text!r})"


# Character -> marker lookup used by the lexer
MARKERS: dict[str, Marker] = {m.value: m for m in Marker}


def block_token(marker: Marker) -> Token:
    """Create a block marker token."""
    return Token(TokenKind.BLOCK, marker.value, marker)


def describe_token(token: Optional[Token]) -> str:
    """Human-readable token description for error messages."""
    if token is None:
        return "end of input"
    if token.kind == TokenKind.BLOCK:
        return f"'{token.text}'"
    return str(token)
