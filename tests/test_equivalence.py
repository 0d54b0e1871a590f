"""The three strategies agree on every well-typed program."""

import pytest

from pysimple import (
    Add,
    Assign,
    BooleanLiteral,
    DoNothing,
    Environment,
    If,
    LessThan,
    Machine,
    Multiply,
    NumberLiteral,
    Reducer,
    Sequence,
    Variable,
    While,
    is_statement,
)
from pysimple.samples import SAMPLES


EXPRESSIONS = [
    NumberLiteral(3),
    BooleanLiteral(False),
    Variable("a"),
    Add(Variable("a"), Variable("b")),
    Multiply(Add(Variable("a"), NumberLiteral(1)), Multiply(Variable("b"), Variable("b"))),
    LessThan(Multiply(Variable("a"), NumberLiteral(2)), Add(Variable("b"), NumberLiteral(3))),
    LessThan(Variable("b"), Variable("a")),
]

ENVIRONMENTS = [
    Environment.of(a=0, b=0),
    Environment.of(a=3, b=4),
    Environment.of(a=-2, b=7),
]

FACTORIAL = Sequence(
    Assign("acc", NumberLiteral(1)),
    While(
        LessThan(NumberLiteral(0), Variable("n")),
        Sequence(
            Assign("acc", Multiply(Variable("acc"), Variable("n"))),
            Assign("n", Add(Variable("n"), NumberLiteral(-1))),
        ),
    ),
)

STATEMENTS = [
    DoNothing(),
    Assign("a", Add(Variable("a"), Variable("b"))),
    If(LessThan(Variable("a"), Variable("b")), Assign("m", Variable("b")), Assign("m", Variable("a"))),
    Sequence(Assign("t", Variable("a")), Sequence(Assign("a", Variable("b")), Assign("b", Variable("t")))),
    While(LessThan(Variable("a"), NumberLiteral(20)), Assign("a", Add(Variable("a"), Variable("b")))),
]


@pytest.mark.parametrize("env", ENVIRONMENTS)
@pytest.mark.parametrize("expr", EXPRESSIONS, ids=str)
def test_expression_strategies_agree(expr, env):
    """Reducing to normal form, evaluating and compiling give the same literal."""
    expected = expr.evaluate(env)
    assert Reducer().normalize(expr, env) == expected
    assert expr.compile()(env) == expected


@pytest.mark.parametrize("env", ENVIRONMENTS[1:])
@pytest.mark.parametrize("stmt", STATEMENTS, ids=str)
def test_statement_strategies_agree(stmt, env):
    """Machine, evaluator and compiled closure end in the same environment."""
    expected = stmt.evaluate(env)
    final = Machine(stmt, env).run()
    assert final.statement == DoNothing()
    assert final.environment == expected
    assert stmt.compile()(env) == expected


@pytest.mark.parametrize("n, result", [(0, 1), (1, 1), (5, 120)])
def test_factorial(n, result):
    env = Environment.of(n=n)
    expected = Environment.of(n=0, acc=result)
    assert FACTORIAL.evaluate(env) == expected
    assert FACTORIAL.compile()(env) == expected
    assert Machine(FACTORIAL, env).run().environment == expected


@pytest.mark.parametrize("sample", SAMPLES, ids=lambda sample: sample.name)
def test_samples(sample):
    expected = sample.node.evaluate(sample.environment)
    final = Machine(sample.node, sample.environment).run()
    observed = final.environment if is_statement(final.statement) else final.statement
    assert observed == expected
    assert sample.node.compile()(sample.environment) == expected
