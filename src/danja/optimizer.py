"""
Token stream optimization pass.

Runs after lexing and before parsing. An identifier that directly follows a
separator is in argument position, so it is turned into a literal VALUE
token. Identifiers anywhere else stay IDENTIFIER tokens and are used as
call or variable names.
"""

from typing import List

from .tokens import Token, TokenKind, Marker


def optimize(tokens: List[Token]) -> List[Token]:
    """Reclassify identifiers in argument position as VALUE tokens."""
    optimized: List[Token] = []
    for i, token in enumerate(tokens):
        # The first token has no predecessor and is never reclassified
        if (i > 0 and token.kind == TokenKind.IDENTIFIER
                and tokens[i - 1].is_marker(Marker.SEPARATOR)):
            optimized.append(Token(TokenKind.VALUE, token.text))
        else:
            optimized.append(token)
    return optimized
