"""Tests for big-step evaluation."""

import pytest

from pysimple import (
    Add,
    Assign,
    BooleanLiteral,
    DoNothing,
    Environment,
    EvalOptions,
    Evaluator,
    If,
    LessThan,
    NonTermination,
    NumberLiteral,
    Sequence,
    TypeMismatch,
    UnboundVariable,
    Variable,
    While,
)


def test_literals_evaluate_to_themselves():
    env = Environment()
    assert NumberLiteral(7).evaluate(env) == NumberLiteral(7)
    assert BooleanLiteral(True).evaluate(env) == BooleanLiteral(True)


def test_expression():
    """(x + 2) < y under {x: 4, y: 5}"""
    expr = LessThan(Add(Variable("x"), NumberLiteral(2)), Variable("y"))
    assert expr.evaluate(Environment.of(x=4, y=5)) == BooleanLiteral(False)


def test_unbound_variable():
    """Variable("z") under {} fails instead of producing an absent value."""
    with pytest.raises(UnboundVariable) as info:
        Variable("z").evaluate(Environment())
    assert info.value.name == "z"
    assert info.value.code.value == "UnboundVariable"


def test_do_nothing_returns_environment():
    env = Environment.of(x=1)
    assert DoNothing().evaluate(env) is env


def test_assign_updates_exactly_one_binding():
    """Only the assigned name changes."""
    env = Environment.of(x=2, y=10, flag=True)
    result = Assign("x", Add(Variable("x"), Variable("y"))).evaluate(env)
    assert result == env.extend("x", NumberLiteral(12))
    assert result.bindings["y"] == NumberLiteral(10)
    assert result.bindings["flag"] == BooleanLiteral(True)


def test_conditional(conditional):
    assert conditional.evaluate(Environment.of(x=True)) == Environment.of(x=True, y=1)
    assert conditional.evaluate(Environment.of(x=False)) == Environment.of(x=False, y=2)


def test_conditional_rejects_number():
    statement = If(NumberLiteral(0), DoNothing(), DoNothing())
    with pytest.raises(TypeMismatch):
        statement.evaluate(Environment())


def test_sequence(sequence):
    assert sequence.evaluate(Environment()) == Environment.of(x=2, y=5)


def test_sequence_threads_environment(sequence):
    """s1; s2 evaluates s2 under the environment s1 left behind."""
    env = Environment()
    assert sequence.evaluate(env) == sequence.second.evaluate(sequence.first.evaluate(env))


def test_loop(loop, env_x1):
    """1 -> 3 -> 9, then 9 < 5 is false."""
    assert loop.evaluate(env_x1) == Environment.of(x=9)


def test_loop_that_never_runs():
    loop = While(BooleanLiteral(False), Assign("x", NumberLiteral(1)))
    env = Environment()
    assert loop.evaluate(env) == env


def test_loop_rejects_non_boolean_condition():
    loop = While(Variable("x"), DoNothing())
    with pytest.raises(TypeMismatch):
        loop.evaluate(Environment.of(x=1))


def test_long_loop_does_not_hit_recursion_limit():
    """Counting to 5000 runs in constant Python stack depth."""
    loop = While(
        LessThan(Variable("i"), NumberLiteral(5000)),
        Assign("i", Add(Variable("i"), NumberLiteral(1))),
    )
    assert loop.evaluate(Environment.of(i=0)) == Environment.of(i=5000)


def test_step_bound(forever):
    with pytest.raises(NonTermination) as info:
        forever.evaluate(Environment.of(x=0), EvalOptions(max_steps=200))
    assert info.value.max_steps == 200


def test_statement_in_expression_position():
    with pytest.raises(TypeMismatch):
        Evaluator().evaluate(Add(DoNothing(), NumberLiteral(1)), Environment())


def test_expression_in_statement_position():
    with pytest.raises(TypeMismatch):
        Sequence(NumberLiteral(1), DoNothing()).evaluate(Environment())
