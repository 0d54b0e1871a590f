"""Test configuration and shared fixtures."""

import pytest

from pysimple import (
    Add,
    Assign,
    BooleanLiteral,
    Environment,
    If,
    LessThan,
    Multiply,
    NumberLiteral,
    Sequence,
    Variable,
    While,
)


@pytest.fixture
def increment():
    """x = x + 1"""
    return Assign("x", Add(Variable("x"), NumberLiteral(1)))


@pytest.fixture
def conditional():
    """if (x) { y = 1 } else { y = 2 }"""
    return If(
        Variable("x"),
        Assign("y", NumberLiteral(1)),
        Assign("y", NumberLiteral(2)),
    )


@pytest.fixture
def sequence():
    """x = 1 + 1; y = x + 3"""
    return Sequence(
        Assign("x", Add(NumberLiteral(1), NumberLiteral(1))),
        Assign("y", Add(Variable("x"), NumberLiteral(3))),
    )


@pytest.fixture
def loop():
    """while (x < 5) { x = x * 3 }"""
    return While(
        LessThan(Variable("x"), NumberLiteral(5)),
        Assign("x", Multiply(Variable("x"), NumberLiteral(3))),
    )


@pytest.fixture
def forever():
    """while (true) { x = x + 1 }"""
    return While(
        BooleanLiteral(True),
        Assign("x", Add(Variable("x"), NumberLiteral(1))),
    )


@pytest.fixture
def env_x1() -> Environment:
    return Environment({"x": NumberLiteral(1)})
