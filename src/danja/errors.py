"""
Danja exceptions and error reporting.

Error code ranges:
- E0xx: Lexer errors
- E1xx: Parser errors
- E2xx: Interpreter errors
- E3xx: Binding errors

Every stage is fail-fast: the first error aborts the evaluation.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Optional, List
from .tokens import Token, Marker, describe_token


class ErrorSeverity(Enum):
    """Severity levels for diagnostics."""
    ERROR = "error"
    WARNING = "warning"


class ErrorKind(Enum):
    """What went wrong, independent of the stage that reports it."""
    # Lexer
    UNEXPECTED_CHARACTER = "UnexpectedCharacter"
    # Parser
    EXPECTED_BLOCK_START = "ExpectedBlockStart"
    EXPECTED_BLOCK_END = "ExpectedBlockEnd"
    UNEXPECTED_TOKEN = "UnexpectedToken"
    UNEXPECTED_END_OF_INPUT = "UnexpectedEndOfInput"
    # Interpreter
    UNDEFINED_FUNCTION = "UndefinedFunction"
    UNDEFINED_VARIABLE = "UndefinedVariable"
    UNSUPPORTED_ARGUMENT = "UnsupportedArgument"
    TYPE_MISMATCH = "TypeMismatch"
    # Bindings
    DUPLICATE_VARIABLE = "DuplicateVariable"
    UNKNOWN_VARIABLE = "UnknownVariable"


@dataclass
class Diagnostic:
    """A single diagnostic message."""
    code: str                       # E001, E101, etc.
    kind: ErrorKind
    message: str                    # Human-readable message
    severity: ErrorSeverity = ErrorSeverity.ERROR
    offset: Optional[int] = None    # character offset (lexer) or token index (parser)
    hints: List[str] = field(default_factory=list)

    def format(self) -> str:
        """Format the diagnostic for display."""
        parts = [f"{self.severity.value}[{self.code}]: {self.message}"]
        if self.offset is not None:
            parts.append(f"  --> at position {self.offset}")
        for hint in self.hints:
            parts.append(f"    = hint: {hint}")
        return "\n".join(parts)

    def to_json(self) -> dict:
        """Convert to JSON-serializable dict for tooling integration."""
        return {
            "code": self.code,
            "kind": self.kind.value,
            "message": self.message,
            "severity": self.severity.value,
            "offset": self.offset,
            "hints": self.hints,
        }


class DanjaError(Exception):
    """Base exception for Danja errors."""

    def __init__(self, diagnostic: Diagnostic):
        self.diagnostic = diagnostic
        super().__init__(diagnostic.message)

    @property
    def kind(self) -> ErrorKind:
        return self.diagnostic.kind

    @property
    def code(self) -> str:
        return self.diagnostic.code

    def __str__(self) -> str:
        return self.diagnostic.format()


class LexerError(DanjaError):
    """Error during lexical analysis (E0xx)."""
    pass


class ParserError(DanjaError):
    """Error during parsing (E1xx)."""
    pass


class InterpreterError(DanjaError):
    """Error during interpretation (E2xx)."""
    pass


class BindingError(DanjaError):
    """Error while registering symbols (E3xx)."""
    pass


# --- Lexer error codes ---

def error_unexpected_character(char: str, offset: int) -> LexerError:
    """E001: Unexpected character."""
    diag = Diagnostic(
        code="E001",
        kind=ErrorKind.UNEXPECTED_CHARACTER,
        message=f"unexpected character {char!r}",
        offset=offset,
        hints=["names and literals must start with a letter or digit"],
    )
    return LexerError(diag)


# --- Parser error codes ---

def error_expected_block_start(found: Optional[Token], index: int) -> ParserError:
    """E101: A construct was opened with a single '['."""
    diag = Diagnostic(
        code="E101",
        kind=ErrorKind.EXPECTED_BLOCK_START,
        message=f"expected '{Marker.BLOCK_START.value}', found {describe_token(found)}",
        offset=index,
        hints=["calls and references open with two brackets: [[name|...]]"],
    )
    return ParserError(diag)


def error_expected_block_end(found: Optional[Token], index: int) -> ParserError:
    """E102: A construct was not closed with ']]'."""
    diag = Diagnostic(
        code="E102",
        kind=ErrorKind.EXPECTED_BLOCK_END,
        message=f"expected '{Marker.BLOCK_END.value}', found {describe_token(found)}",
        offset=index,
        hints=["calls and references close with two brackets: ]]"],
    )
    return ParserError(diag)


def error_unexpected_token(found: Token, index: int) -> ParserError:
    """E103: Unexpected token."""
    diag = Diagnostic(
        code="E103",
        kind=ErrorKind.UNEXPECTED_TOKEN,
        message=f"unexpected token {describe_token(found)}",
        offset=index,
    )
    return ParserError(diag)


def error_unexpected_end_of_input(expected: str, index: int) -> ParserError:
    """E104: Unexpected end of input."""
    diag = Diagnostic(
        code="E104",
        kind=ErrorKind.UNEXPECTED_END_OF_INPUT,
        message=f"unexpected end of input, expected {expected}",
        offset=index,
    )
    return ParserError(diag)


# --- Interpreter error codes ---

def error_undefined_function(name: str) -> InterpreterError:
    """E201: Call to a function that is not registered."""
    diag = Diagnostic(
        code="E201",
        kind=ErrorKind.UNDEFINED_FUNCTION,
        message=f"function '{name}' does not exist",
    )
    return InterpreterError(diag)


def error_undefined_variable(name: str) -> InterpreterError:
    """E202: Reference to a variable that is not registered."""
    diag = Diagnostic(
        code="E202",
        kind=ErrorKind.UNDEFINED_VARIABLE,
        message=f"variable '{name}' does not exist",
    )
    return InterpreterError(diag)


def error_unsupported_argument(description: str) -> InterpreterError:
    """E203: Argument node the interpreter cannot evaluate."""
    diag = Diagnostic(
        code="E203",
        kind=ErrorKind.UNSUPPORTED_ARGUMENT,
        message=f"unsupported argument {description}",
        hints=["arguments must follow '|' or be nested [[...]] constructs"],
    )
    return InterpreterError(diag)


def error_type_mismatch(expected: str, found: str) -> InterpreterError:
    """E204: Typed accessor used on a value of another kind."""
    diag = Diagnostic(
        code="E204",
        kind=ErrorKind.TYPE_MISMATCH,
        message=f"expected {expected} but got {found}",
    )
    return InterpreterError(diag)


# --- Binding error codes ---

def error_duplicate_variable(name: str) -> BindingError:
    """E301: The same variable record was registered twice."""
    diag = Diagnostic(
        code="E301",
        kind=ErrorKind.DUPLICATE_VARIABLE,
        message=f"variable '{name}' already exists",
        hints=["use update_variable to change a registered variable"],
    )
    return BindingError(diag)


def error_unknown_variable(name: str) -> BindingError:
    """E302: Update of a variable record that was never registered."""
    diag = Diagnostic(
        code="E302",
        kind=ErrorKind.UNKNOWN_VARIABLE,
        message=f"variable '{name}' does not exist",
        hints=["use put_variable to register a new variable"],
    )
    return BindingError(diag)
