#!/usr/bin/env python3
"""
CLI for the Danja interpreter.

Usage:
    python -m danja run FILE [--config CFG] [--var NAME=VALUE ...] [-v]
    python -m danja tokens FILE [--raw]
    python -m danja ast FILE

Examples:
    # Run a script with the sample natives (출력, 덧셈, 대기)
    python -m danja run hello.danja --var a=1

    # Inspect the token stream before the optimization pass
    python -m danja tokens hello.danja --raw
"""

import argparse
import logging
import sys
from pathlib import Path
from typing import Any, List, Optional, Tuple


def parse_var(var_str: str) -> Tuple[str, Any]:
    """
    Split a --var option into a variable name and a host value.

    The value becomes a bool for true/false (any case), then an int or a
    float when it reads as one; anything else is text, with one pair of
    matching quotes removed. Danja variables are never coerced again, so
    the type chosen here is what natives see.
    """
    name, sep, raw = var_str.partition('=')
    name = name.strip()
    if not sep or not name:
        raise ValueError(f"bad --var {var_str!r}: expected NAME=VALUE")

    raw = raw.strip()
    flag = raw.lower()
    if flag in ('true', 'false'):
        return name, flag == 'true'

    for convert in (int, float):
        try:
            return name, convert(raw)
        except ValueError:
            continue

    if len(raw) >= 2 and raw[0] == raw[-1] and raw[0] in '"\'':
        raw = raw[1:-1]
    return name, raw


def _read_source(path_str: str) -> Optional[str]:
    source_path = Path(path_str)
    if not source_path.exists():
        print(f"Error: File not found: {source_path}", file=sys.stderr)
        return None
    return source_path.read_text(encoding="utf-8")


def cmd_run(args) -> int:
    """Evaluate a Danja file with the sample natives registered."""
    from . import DanjaError, create_context, register_stdlib
    from .config import RunConfig, load_config

    try:
        config = load_config(args.config) if args.config else RunConfig()
        for var_str in args.var or []:
            name, value = parse_var(var_str)
            config.variables[name] = value
    except (OSError, ValueError) as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else config.log_level,
        format="%(levelname)s %(name)s: %(message)s",
    )

    source = _read_source(args.file)
    if source is None:
        return 1

    ctx = create_context(optimize=config.optimize)
    register_stdlib(ctx.bindings)
    for name, value in config.variables.items():
        ctx.bindings.define_variable(name, value)

    try:
        ctx.run(source)
    except DanjaError as e:
        print(e, file=sys.stderr)
        return 1
    except Exception as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1
    return 0


def cmd_tokens(args) -> int:
    """Print the token stream of a Danja file."""
    from . import DanjaError, tokenize

    source = _read_source(args.file)
    if source is None:
        return 1
    try:
        tokens = tokenize(source, optimize=not args.raw)
    except DanjaError as e:
        print(e, file=sys.stderr)
        return 1
    for token in tokens:
        print(token)
    return 0


def cmd_ast(args) -> int:
    """Print the AST of a Danja file."""
    from . import DanjaError, tokenize, parse, format_ast

    source = _read_source(args.file)
    if source is None:
        return 1
    try:
        program = parse(tokenize(source))
    except DanjaError as e:
        print(e, file=sys.stderr)
        return 1
    print(format_ast(program))
    return 0


def main(argv: Optional[List[str]] = None) -> int:
    parser = argparse.ArgumentParser(
        prog='python -m danja',
        description='Danja lexer, parser and interpreter',
    )

    subparsers = parser.add_subparsers(dest='action', required=True)

    # run command
    run_parser = subparsers.add_parser('run', help='Evaluate a Danja file')
    run_parser.add_argument('file', help='Danja source file')
    run_parser.add_argument('-c', '--config', metavar='FILE',
                            help='YAML or JSON run configuration')
    run_parser.add_argument('--var', action='append', metavar='NAME=VALUE',
                            help='Define a variable (can be repeated)')
    run_parser.add_argument('-v', '--verbose', action='store_true',
                            help='Log pipeline details')

    # tokens command
    tokens_parser = subparsers.add_parser('tokens', help='Print the token stream')
    tokens_parser.add_argument('file', help='Danja source file')
    tokens_parser.add_argument('--raw', action='store_true',
                               help='Skip the optimization pass')

    # ast command
    ast_parser = subparsers.add_parser('ast', help='Print the parsed AST')
    ast_parser.add_argument('file', help='Danja source file')

    args = parser.parse_args(argv)

    if args.action == 'run':
        return cmd_run(args)
    elif args.action == 'tokens':
        return cmd_tokens(args)
    elif args.action == 'ast':
        return cmd_ast(args)
    else:
        parser.print_help()
        return 1


if __name__ == '__main__':
    sys.exit(main())
