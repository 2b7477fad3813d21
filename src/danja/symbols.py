"""
Symbol table for Danja.

A single flat global namespace holding the host's native functions and
variables. The host fills it before evaluation; the interpreter only reads
from it.
"""

import logging
from dataclasses import dataclass, field
from typing import Any, Awaitable, Callable, Dict, List, Optional, Union

from .runtime.values import DynamicValue, wrap_value
from .errors import error_duplicate_variable, error_unknown_variable

logger = logging.getLogger(__name__)

Processor = Callable[[List[DynamicValue]], Union[Any, Awaitable[Any]]]


@dataclass
class NativeFunction:
    """A host function callable from Danja.

    The processor receives the evaluated arguments and returns a raw value,
    or an awaitable resolving to one.
    """
    name: str
    processor: Processor


@dataclass(eq=False)
class Variable:
    """A named value visible to [[name]] references.

    Records compare by identity: two Variables with the same name and
    value are still different records.
    """
    name: str
    value: DynamicValue


@dataclass
class SymbolTable:
    """
    The global bindings of one evaluation context.

    Functions are keyed by name and replaced on re-registration. Variables
    are tracked as records: registering the same record twice fails, but
    distinct records may share a name, and lookups return the one that was
    registered first.
    """
    _functions: Dict[str, NativeFunction] = field(default_factory=dict)
    _variables: Dict[str, List[Variable]] = field(default_factory=dict)

    # --- Functions ---

    def put_function(self, function: NativeFunction) -> NativeFunction:
        """Register a native function, replacing any with the same name."""
        if function.name in self._functions:
            logger.debug("overwriting native function %s", function.name)
        self._functions[function.name] = function
        return function

    def define_function(self, name: str, processor: Processor) -> NativeFunction:
        """Register a processor under a name."""
        return self.put_function(NativeFunction(name, processor))

    def function(self, name: str) -> Callable[[Processor], Processor]:
        """
        Decorator form of define_function.

        Usage:
            @table.function("add")
            def add(args):
                return sum(a.as_number() for a in args)
        """
        def decorator(processor: Processor) -> Processor:
            self.define_function(name, processor)
            return processor
        return decorator

    def get_function(self, name: str) -> Optional[NativeFunction]:
        """Look up a native function by name."""
        return self._functions.get(name)

    # --- Variables ---

    def _contains(self, variable: Variable) -> bool:
        # By identity across all names; a record may be renamed after registration
        return any(
            v is variable for records in self._variables.values() for v in records
        )

    def put_variable(self, variable: Variable) -> Variable:
        """
        Register a variable record.

        Raises:
            BindingError: If this exact record is already registered
        """
        if self._contains(variable):
            raise error_duplicate_variable(variable.name)
        self._variables.setdefault(variable.name, []).append(variable)
        return variable

    def define_variable(self, name: str, value: Any) -> Variable:
        """Create and register a variable, wrapping a raw value if needed."""
        return self.put_variable(Variable(name, wrap_value(value)))

    def update_variable(self, variable: Variable, value: Any = None) -> Variable:
        """
        Update a registered variable record, assigning `value` when given.

        Raises:
            BindingError: If the record was never registered
        """
        if not self._contains(variable):
            raise error_unknown_variable(variable.name)
        if value is not None:
            variable.value = wrap_value(value)
        return variable

    def get_variable(self, name: str) -> Optional[Variable]:
        """Look up the first-registered variable with this name."""
        records = self._variables.get(name)
        if records:
            return records[0]
        return None

    @property
    def function_names(self) -> List[str]:
        """Names of the registered native functions."""
        return list(self._functions)

    @property
    def variable_names(self) -> List[str]:
        """Names under which variables were registered."""
        return list(self._variables)
