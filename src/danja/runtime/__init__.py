"""
Danja runtime - tree-walking interpreter and host context.

This module provides:
- DynamicValue: Runtime value wrappers with typed accessors
- Interpreter: Executes parsed programs against a symbol table
- Context: Runs source text through the whole pipeline
"""

from .values import (
    DynamicValue,
    ValueKind,
    string_val,
    number_val,
    bool_val,
    array_val,
    block_val,
    none_val,
    kind_of,
    wrap_value,
    unwrap_values,
    to_number,
    coerce_value,
)

from .interpreter import (
    Interpreter,
    interpret,
)

from .context import (
    Context,
    create_context,
)

__all__ = [
    # Values
    'DynamicValue',
    'ValueKind',
    'string_val',
    'number_val',
    'bool_val',
    'array_val',
    'block_val',
    'none_val',
    'kind_of',
    'wrap_value',
    'unwrap_values',
    'to_number',
    'coerce_value',

    # Interpreter
    'Interpreter',
    'interpret',

    # Context
    'Context',
    'create_context',
]
