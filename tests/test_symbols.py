"""
Tests for the global symbol table.
"""

import pytest

from danja import SymbolTable, NativeFunction, Variable, BindingError, ErrorKind
from danja.runtime import number_val, string_val, ValueKind


class TestFunctions:
    """Test native function registration."""

    def test_put_and_get_function(self):
        """A registered function is found by name."""
        table = SymbolTable()
        native = NativeFunction("f", lambda args: None)
        assert table.put_function(native) is native
        assert table.get_function("f") is native

    def test_missing_function(self):
        """Lookup of an unknown name returns None."""
        assert SymbolTable().get_function("nope") is None

    def test_put_function_overwrites(self):
        """Re-registering a name replaces the old function."""
        table = SymbolTable()
        table.define_function("f", lambda args: 1)
        table.define_function("f", lambda args: 2)
        assert table.get_function("f").processor([]) == 2
        assert table.function_names == ["f"]

    def test_function_decorator(self):
        """The decorator registers and returns the processor."""
        table = SymbolTable()

        @table.function("double")
        def double(args):
            return args[0].as_number() * 2

        assert table.get_function("double").processor is double
        assert double([number_val(4)]) == 8


class TestVariables:
    """Test variable records and their identity rules."""

    def test_put_and_get_variable(self):
        """A registered variable is found by name."""
        table = SymbolTable()
        variable = Variable("a", number_val(1))
        table.put_variable(variable)
        assert table.get_variable("a") is variable

    def test_missing_variable(self):
        """Lookup of an unknown name returns None."""
        assert SymbolTable().get_variable("a") is None

    def test_same_record_twice_is_rejected(self):
        """Registering the identical record again fails."""
        table = SymbolTable()
        variable = Variable("a", number_val(1))
        table.put_variable(variable)
        with pytest.raises(BindingError) as exc_info:
            table.put_variable(variable)
        assert exc_info.value.kind == ErrorKind.DUPLICATE_VARIABLE
        assert exc_info.value.code == "E301"

    def test_distinct_records_with_same_name_are_accepted(self):
        """Name collisions between distinct records are not detected."""
        table = SymbolTable()
        first = Variable("a", number_val(1))
        second = Variable("a", number_val(1))
        table.put_variable(first)
        table.put_variable(second)
        # Lookups keep returning the first-registered record
        assert table.get_variable("a") is first

    def test_update_registered_variable(self):
        """Updating a registered record assigns the new value."""
        table = SymbolTable()
        variable = table.define_variable("a", 1)
        table.update_variable(variable, "two")
        assert table.get_variable("a").value == string_val("two")

    def test_update_after_mutating_record(self):
        """Updating without a value just confirms the record."""
        table = SymbolTable()
        variable = table.define_variable("a", 1)
        variable.value = number_val(5)
        assert table.update_variable(variable) is variable
        assert table.get_variable("a").value.as_number() == 5

    def test_update_renamed_record(self):
        """A registered record stays known after the host renames it."""
        table = SymbolTable()
        variable = table.define_variable("a", 1)
        variable.name = "b"
        table.update_variable(variable, 2)
        assert table.get_variable("a").value.as_number() == 2
        with pytest.raises(BindingError) as exc_info:
            table.put_variable(variable)
        assert exc_info.value.kind == ErrorKind.DUPLICATE_VARIABLE

    def test_update_unknown_variable(self):
        """Updating a record that was never registered fails."""
        table = SymbolTable()
        table.define_variable("a", 1)
        with pytest.raises(BindingError) as exc_info:
            table.update_variable(Variable("a", number_val(2)))
        assert exc_info.value.kind == ErrorKind.UNKNOWN_VARIABLE
        assert exc_info.value.code == "E302"
        assert table.get_variable("a").value.as_number() == 1

    def test_define_variable_wraps_raw_values(self):
        """Raw values are wrapped without numeric coercion."""
        table = SymbolTable()
        assert table.define_variable("n", 3).value.kind == ValueKind.NUMBER
        assert table.define_variable("s", "3").value.kind == ValueKind.STRING
        assert table.variable_names == ["n", "s"]
