"""
Lexer for Danja.

Converts source text into a stream of tokens for the parser.
Supports:
- The block markers '[', ']' and '|'
- Insignificant whitespace between tokens
- Identifier runs starting with any Unicode letter or digit (Hangul included)

An identifier run is greedy: once started it takes every character up to the
next ']' or '|', so names and literals may contain inner and trailing spaces
and punctuation. There is no quoting syntax.
"""

import logging
from typing import List, Iterator, Optional

from .tokens import Token, TokenKind, MARKERS, Marker, block_token
from .errors import error_unexpected_character
from .optimizer import optimize as optimize_tokens

logger = logging.getLogger(__name__)

# Characters that end an identifier run (and are lexed on the next scan)
_IDENTIFIER_STOPS = frozenset((Marker.BLOCK_END.value, Marker.SEPARATOR.value))


class Lexer:
    """
    Tokenizer for Danja.

    Usage:
        lexer = Lexer(source_code)
        tokens = lexer.tokenize()

    Or for streaming raw (unoptimized) tokens:
        lexer = Lexer(source_code)
        for token in lexer:
            process(token)
    """

    def __init__(self, source: str):
        self.source = source
        self.pos = 0            # Current position in source

    def _peek(self) -> str:
        """Look at the current character without consuming it."""
        if self.pos >= len(self.source):
            return '\0'
        return self.source[self.pos]

    def _advance(self) -> str:
        """Consume and return current character."""
        ch = self.source[self.pos]
        self.pos += 1
        return ch

    def _is_at_end(self) -> bool:
        """Check if we've reached end of source."""
        return self.pos >= len(self.source)

    def _scan_identifier(self) -> Token:
        """Scan an identifier run up to the next ']' or '|'."""
        start = self.pos
        self._advance()
        while not self._is_at_end() and self._peek() not in _IDENTIFIER_STOPS:
            self._advance()
        return Token(TokenKind.IDENTIFIER, self.source[start:self.pos])

    def _scan_token(self) -> Optional[Token]:
        """Scan the next token. Returns None for skipped whitespace."""
        if self._is_at_end():
            return Token(TokenKind.EOF, "")

        ch = self._peek()

        if ch in MARKERS:
            self._advance()
            return block_token(MARKERS[ch])

        if ch.isspace():
            self._advance()
            return None

        if ch.isalnum():
            return self._scan_identifier()

        raise error_unexpected_character(ch, self.pos)

    def __iter__(self) -> Iterator[Token]:
        """Iterate over raw tokens, without the EOF sentinel."""
        while True:
            token = self._scan_token()
            if token is None:
                continue
            if token.kind == TokenKind.EOF:
                break
            yield token

    def tokenize(self, optimize: bool = True) -> List[Token]:
        """Tokenize the entire source, returning a list of tokens."""
        tokens = list(self)
        logger.debug("lexed %d token(s) from %d character(s)", len(tokens), len(self.source))
        if optimize:
            return optimize_tokens(tokens)
        return tokens


def tokenize(source: str, optimize: bool = True) -> List[Token]:
    """
    Convenience function to tokenize source code.

    Args:
        source: The source code to tokenize
        optimize: Reclassify identifiers that follow '|' as VALUE tokens

    Returns:
        List of tokens (no EOF sentinel)

    Raises:
        LexerError: If tokenization fails
    """
    return Lexer(source).tokenize(optimize=optimize)
