"""
Danja: a small bracket-and-pipe call language.

This module provides:
- Lexer: Tokenizes Danja source code
- Parser: Builds the AST from tokens
- Interpreter: Runs top-level calls against host-supplied native functions
- Context: Runs the whole pipeline over one global symbol table

Usage:
    from danja import create_context

    ctx = create_context()
    bindings = ctx.bindings
    bindings.define_function("출력", lambda args: print(*(a.as_any() for a in args)))
    bindings.define_function("덧셈", lambda args: sum(a.as_number() for a in args))
    bindings.define_variable("a", 1)

    ctx.run('''
        [[출력|
            [[덧셈|1|2|3]] |
            [[a]]
        ]]
    ''')
"""

import logging

from .tokens import (
    Token,
    TokenKind,
    Marker,
)

from .lexer import (
    Lexer,
    tokenize,
)

from .optimizer import optimize

from .parser import (
    Parser,
    parse,
)

from .ast import (
    AstNode,
    AstVisitor,
    Program,
    Function,
    Block,
    Identifier,
    Value,
    format_ast,
    print_ast,
)

from .errors import (
    DanjaError,
    LexerError,
    ParserError,
    InterpreterError,
    BindingError,
    Diagnostic,
    ErrorKind,
    ErrorSeverity,
)

from .runtime import (
    # Interpreter
    Interpreter,
    interpret,
    # Values
    DynamicValue,
    ValueKind,
    wrap_value,
    coerce_value,
    to_number,
    # Context
    Context,
    create_context,
)

from .symbols import (
    SymbolTable,
    NativeFunction,
    Variable,
)

from .stdlib import register_stdlib

from .config import (
    RunConfig,
    load_config,
)

logging.getLogger(__name__).addHandler(logging.NullHandler())

__all__ = [
    # Tokens
    'Token',
    'TokenKind',
    'Marker',
    # Lexer
    'Lexer',
    'tokenize',
    'optimize',
    # Parser
    'Parser',
    'parse',
    # AST
    'AstNode',
    'AstVisitor',
    'Program',
    'Function',
    'Block',
    'Identifier',
    'Value',
    'format_ast',
    'print_ast',
    # Errors
    'DanjaError',
    'LexerError',
    'ParserError',
    'InterpreterError',
    'BindingError',
    'Diagnostic',
    'ErrorKind',
    'ErrorSeverity',
    # Runtime
    'Interpreter',
    'interpret',
    'DynamicValue',
    'ValueKind',
    'wrap_value',
    'coerce_value',
    'to_number',
    'Context',
    'create_context',
    # Symbols
    'SymbolTable',
    'NativeFunction',
    'Variable',
    # Extras
    'register_stdlib',
    'RunConfig',
    'load_config',
]

__version__ = "0.1.0"
