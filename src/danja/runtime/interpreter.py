"""
Tree-walking interpreter for Danja.

Runs the top-level calls of a Program against a SymbolTable. Lexing and
parsing are synchronous; the only suspension points are native processors,
which may return awaitables.
"""

import inspect
import logging
from typing import Any, List

from .values import DynamicValue, coerce_value
from ..ast import AstNode, Program, Function, Block, Identifier, Value
from ..symbols import SymbolTable
from ..errors import (
    error_undefined_function,
    error_undefined_variable,
    error_unsupported_argument,
)

logger = logging.getLogger(__name__)


class Interpreter:
    """
    Tree-walking interpreter for Danja.

    Only Function statements at the top level are executed; top-level
    Block, Identifier and Value nodes have no effect.
    """

    async def interpret(self, program: Program, bindings: SymbolTable) -> None:
        """Execute every top-level call in order."""
        if not isinstance(program, Program):
            raise ValueError(f"expected a Program node, got {program.__class__.__name__}")

        for statement in program.statements:
            if isinstance(statement, Function):
                await self.evaluate_call(statement, bindings)

    async def evaluate_call(self, call: Function, bindings: SymbolTable) -> Any:
        """
        Evaluate a call and return the native's raw result.

        Arguments are evaluated strictly left to right, each one finishing
        before the next starts.
        """
        native = bindings.get_function(call.name)
        if native is None:
            raise error_undefined_function(call.name)

        args: List[DynamicValue] = []
        for arg in call.args:
            args.append(await self._evaluate_argument(arg, bindings))

        logger.debug("calling %s with %d argument(s)", call.name, len(args))
        result = native.processor(args)
        if inspect.isawaitable(result):
            result = await result
        return result

    async def _evaluate_argument(self, arg: AstNode, bindings: SymbolTable) -> DynamicValue:
        """Turn one argument node into a DynamicValue."""
        if isinstance(arg, Value):
            return coerce_value(arg.text)
        elif isinstance(arg, Function):
            return coerce_value(await self.evaluate_call(arg, bindings))
        elif isinstance(arg, Block):
            variable = bindings.get_variable(arg.name)
            if variable is None:
                raise error_undefined_variable(arg.name)
            return variable.value
        elif isinstance(arg, Identifier):
            raise error_unsupported_argument(f"identifier {arg.text!r}")
        raise error_unsupported_argument(f"node {arg.__class__.__name__}")


async def interpret(program: Program, bindings: SymbolTable) -> None:
    """
    Convenience function to run a Program.

    Args:
        program: The parsed program
        bindings: Native functions and variables to resolve names against

    Raises:
        InterpreterError: On undefined names or unsupported arguments
    """
    await Interpreter().interpret(program, bindings)
