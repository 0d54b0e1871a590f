"""Tests for error types and the operator registry."""

import pytest

from pysimple import (
    ErrorCodes,
    NonTermination,
    NumberLiteral,
    Operator,
    SimpleError,
    TypeMismatch,
    UnboundVariable,
    Variable,
    create_core_registry,
)


def test_unbound_variable():
    err = SimpleError.unbound_variable("z")
    assert isinstance(err, UnboundVariable)
    assert err.code is ErrorCodes.UNBOUND_VARIABLE
    assert str(err) == "Unbound variable: z"
    assert repr(err) == "UnboundVariable('z')"
    assert err.to_dict() == {
        "kind": "error",
        "code": "UnboundVariable",
        "message": "Unbound variable: z",
        "meta": {"name": "z"},
    }


def test_type_mismatch_describes_node():
    err = SimpleError.type_mismatch("boolean", NumberLiteral(1), "if condition")
    assert isinstance(err, TypeMismatch)
    assert str(err) == "Type mismatch (if condition): expected boolean, got number «1»"


def test_non_termination():
    err = SimpleError.non_termination(10)
    assert isinstance(err, NonTermination)
    assert err.max_steps == 10


def test_core_registry():
    registry = create_core_registry()
    assert len(registry) == 3
    assert "lessThan" in registry
    assert registry.apply("multiply", NumberLiteral(6), NumberLiteral(7)) == NumberLiteral(42)


def test_registry_rejects_duplicates():
    registry = create_core_registry()
    with pytest.raises(ValueError):
        registry.register(Operator("add", "+", lambda a, b: NumberLiteral(a + b)))


def test_operator_rejects_unreduced_operand():
    registry = create_core_registry()
    with pytest.raises(TypeMismatch):
        registry.apply("add", Variable("x"), NumberLiteral(1))


def test_unknown_operator():
    with pytest.raises(KeyError):
        create_core_registry().get("divide")
