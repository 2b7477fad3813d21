"""
Evaluation context for Danja.

A Context owns one SymbolTable and runs the lex -> parse -> interpret
pipeline over source text against it.
"""

import asyncio
import logging

from .interpreter import Interpreter
from ..lexer import Lexer
from ..parser import Parser
from ..symbols import SymbolTable

logger = logging.getLogger(__name__)


class Context:
    """
    The host-facing entry point.

    Usage:
        ctx = create_context()
        ctx.bindings.define_function("print", lambda args: print(*args))
        await ctx.evaluate("[[print|Hello]]")

    The bindings may be changed between evaluations. Evaluating two programs
    against the same context at once is not supported.
    """

    def __init__(self, optimize: bool = True):
        self._bindings = SymbolTable()
        self.optimize = optimize

    @property
    def bindings(self) -> SymbolTable:
        """The global symbol table."""
        return self._bindings

    def get_bindings(self) -> SymbolTable:
        return self._bindings

    async def evaluate(self, source: str) -> None:
        """
        Lex, parse and interpret source text.

        Raises:
            DanjaError: The first error from any stage; nothing is recovered
        """
        tokens = Lexer(source).tokenize(optimize=self.optimize)
        program = Parser(tokens).parse()
        logger.debug("interpreting %d statement(s)", len(program.statements))
        await Interpreter().interpret(program, self._bindings)

    def run(self, source: str) -> None:
        """Blocking form of evaluate(), for callers without an event loop."""
        asyncio.run(self.evaluate(source))


def create_context(optimize: bool = True) -> Context:
    """Create a context with a fresh, empty symbol table."""
    return Context(optimize=optimize)
