"""
Recursive descent parser for Danja.

Converts a token stream into an Abstract Syntax Tree (AST).

Grammar:
    program       := statement*
    statement     := call_or_block | VALUE | IDENTIFIER
    call_or_block := "[" "[" IDENTIFIER ( "|" ( "|"? statement )* )? "]" "]"

Brackets are always doubled. Separators between arguments are optional:
[[f|[[a]][[b]]]] passes two arguments just like [[f|[[a]]|[[b]]]].
"""

import logging
from typing import List, Optional

from .tokens import Token, TokenKind, Marker
from .ast import AstNode, Program, Function, Block, Identifier, Value
from .errors import (
    error_expected_block_start,
    error_expected_block_end,
    error_unexpected_token,
    error_unexpected_end_of_input,
)

logger = logging.getLogger(__name__)


class TokenCursor:
    """Single-pass read position over a token list."""

    def __init__(self, tokens: List[Token]):
        self.tokens = tokens
        self.pos = 0

    def next(self) -> Optional[Token]:
        """Consume and return the next token, or None past the end."""
        if self.pos >= len(self.tokens):
            return None
        token = self.tokens[self.pos]
        self.pos += 1
        return token

    @property
    def index(self) -> int:
        """Index of the most recently consumed token."""
        return self.pos - 1


class Parser:
    """
    Recursive descent parser for Danja.

    Usage:
        parser = Parser(tokens)
        program = parser.parse()

    Parsing never backtracks; the first malformed construct raises ParserError.
    """

    def __init__(self, tokens: List[Token]):
        self.tokens = tokens

    def parse(self) -> Program:
        """Parse the full token list into a Program."""
        cursor = TokenCursor(self.tokens)
        statements: List[AstNode] = []
        while True:
            token = cursor.next()
            if token is None:
                break
            statements.append(self._parse_statement(token, cursor))
        logger.debug("parsed %d statement(s) from %d token(s)", len(statements), len(self.tokens))
        return Program(statements=tuple(statements))

    def _parse_statement(self, token: Token, cursor: TokenCursor) -> AstNode:
        """Parse one statement (or argument) starting at an already-read token."""
        if token.is_marker(Marker.BLOCK_START):
            return self._parse_function_or_block(cursor)

        if token.kind == TokenKind.IDENTIFIER:
            return Identifier(token.text)

        if token.kind == TokenKind.VALUE:
            return Value(token.text)

        raise error_unexpected_token(token, cursor.index)

    def _expect_token(self, cursor: TokenCursor, expected: str) -> Token:
        """Consume a token that must exist."""
        token = cursor.next()
        if token is None:
            raise error_unexpected_end_of_input(expected, cursor.pos)
        return token

    def _expect_block_end(self, cursor: TokenCursor) -> None:
        """Consume the second ']' of a closing pair."""
        token = cursor.next()
        if token is None or not token.is_marker(Marker.BLOCK_END):
            raise error_expected_block_end(token, cursor.index if token else cursor.pos)

    def _parse_function_or_block(self, cursor: TokenCursor) -> AstNode:
        """
        Parse a call or a variable reference after its first '['.

        ex) [[print|Hello|[[name]]]]  or  [[name]]
        """
        token = self._expect_token(cursor, "'['")
        if not token.is_marker(Marker.BLOCK_START):
            raise error_expected_block_start(token, cursor.index)

        token = self._expect_token(cursor, "a name")
        if token.kind != TokenKind.IDENTIFIER:
            raise error_unexpected_token(token, cursor.index)
        name = token.text

        token = self._expect_token(cursor, "'|' or ']'")
        if token.is_marker(Marker.SEPARATOR):
            args = self._parse_arguments(cursor)
            self._expect_block_end(cursor)
            return Function(name=name, args=tuple(args))

        if token.is_marker(Marker.BLOCK_END):
            self._expect_block_end(cursor)
            return Block(name=name)

        raise error_unexpected_token(token, cursor.index)

    def _parse_arguments(self, cursor: TokenCursor) -> List[AstNode]:
        """Parse arguments up to and including the first closing ']'."""
        args: List[AstNode] = []
        while True:
            token = cursor.next()
            if token is None:
                raise error_unexpected_end_of_input("an argument or ']'", cursor.pos)
            if token.is_marker(Marker.BLOCK_END):
                return args
            if token.is_marker(Marker.SEPARATOR):
                token = self._expect_token(cursor, "an argument")
            args.append(self._parse_statement(token, cursor))


def parse(tokens: List[Token]) -> Program:
    """
    Convenience function to parse a token list.

    Args:
        tokens: Tokens from tokenize()

    Returns:
        The Program AST

    Raises:
        ParserError: If the token stream is malformed
    """
    return Parser(tokens).parse()
