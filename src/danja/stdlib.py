"""
Sample native functions for the Danja CLI.

    출력 (print)  - writes every argument's raw value, space-separated
    덧셈 (add)    - sums numeric arguments; non-numbers raise TypeMismatch
    대기 (wait)   - sleeps for the given number of milliseconds
"""

import asyncio
import sys
from typing import List, Optional, TextIO

from .runtime.values import DynamicValue
from .symbols import SymbolTable

PRINT = "출력"
ADD = "덧셈"
WAIT = "대기"


def register_stdlib(bindings: SymbolTable, out: Optional[TextIO] = None) -> SymbolTable:
    """Register the sample natives on a symbol table.

    Args:
        bindings: Table to register on
        out: Stream for 출력 output (defaults to sys.stdout at call time)
    """

    def print_values(args: List[DynamicValue]) -> None:
        print(*(arg.as_any() for arg in args), file=out or sys.stdout)

    def add(args: List[DynamicValue]):
        return sum((arg.as_number() for arg in args), 0)

    async def wait(args: List[DynamicValue]) -> None:
        delay = args[0].as_number() if args else 0
        await asyncio.sleep(delay / 1000)

    bindings.define_function(PRINT, print_values)
    bindings.define_function(ADD, add)
    bindings.define_function(WAIT, wait)
    return bindings
