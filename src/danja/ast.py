"""
Abstract Syntax Tree (AST) node definitions for Danja.

A parsed program is a flat sequence of statements. Each statement is one of:
- Function: a native call, [[name|arg|arg...]]
- Block: a variable reference, [[name]]
- Value: literal text that followed a '|'
- Identifier: any other raw text (inert)

Nodes are immutable; a tree lives only as long as one evaluation.
"""

from dataclasses import dataclass, field
from typing import Any, List, Tuple
from abc import ABC


# =============================================================================
# Base Classes
# =============================================================================

@dataclass(frozen=True)
class AstNode(ABC):
    """Base class for all AST nodes."""

    def accept(self, visitor: "AstVisitor") -> Any:
        """Accept a visitor for traversal."""
        method_name = f"visit_{self.__class__.__name__}"
        method = getattr(visitor, method_name, visitor.generic_visit)
        return method(self)


class AstVisitor(ABC):
    """Base class for AST visitors."""

    def generic_visit(self, node: AstNode) -> Any:
        """Default visit method."""
        raise NotImplementedError(f"No visitor for {node.__class__.__name__}")


# =============================================================================
# Nodes
# =============================================================================

@dataclass(frozen=True)
class Identifier(AstNode):
    """Raw text that did not follow a separator."""
    text: str


@dataclass(frozen=True)
class Value(AstNode):
    """A literal argument (text directly after '|')."""
    text: str


@dataclass(frozen=True)
class Block(AstNode):
    """A bare variable reference, e.g. [[a]]."""
    name: str


@dataclass(frozen=True)
class Function(AstNode):
    """A native function call, e.g. [[print|Hello|[[a]]]].

    A name followed by a separator is always a call, even when no arguments
    follow it: [[name|]] is a call with zero arguments.
    """
    name: str
    args: Tuple[AstNode, ...] = field(default_factory=tuple)


@dataclass(frozen=True)
class Program(AstNode):
    """The root node. Statement order is execution order."""
    statements: Tuple[AstNode, ...] = field(default_factory=tuple)


# =============================================================================
# Visitor Helpers
# =============================================================================

class FormatVisitor(AstVisitor):
    """Debug visitor that renders the AST structure as indented text."""

    def __init__(self, indent: int = 0):
        self.indent = indent
        self.lines: List[str] = []

    def _emit(self, text: str) -> None:
        self.lines.append("  " * self.indent + text)

    def _visit_children(self, nodes: Tuple[AstNode, ...]) -> None:
        child = FormatVisitor(self.indent + 1)
        for node in nodes:
            node.accept(child)
        self.lines.extend(child.lines)

    def visit_Program(self, node: Program) -> None:
        self._emit("Program")
        self._visit_children(node.statements)

    def visit_Function(self, node: Function) -> None:
        self._emit(f"Function {node.name!r}")
        self._visit_children(node.args)

    def visit_Block(self, node: Block) -> None:
        self._emit(f"Block {node.name!r}")

    def visit_Identifier(self, node: Identifier) -> None:
        self._emit(f"Identifier {node.text!r}")

    def visit_Value(self, node: Value) -> None:
        self._emit(f"Value {node.text!r}")


def format_ast(node: AstNode) -> str:
    """Render an AST node for debugging."""
    visitor = FormatVisitor()
    node.accept(visitor)
    return "\n".join(visitor.lines)


def print_ast(node: AstNode) -> None:
    """Print an AST node for debugging."""
    print(format_ast(node))
