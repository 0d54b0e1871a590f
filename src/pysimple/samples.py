"""
SIMPLE Sample Programs

Small programs exercising every node kind, used by the CLI and the tests.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Dict, List

from pysimple.types import (
    Node,
    NumberLiteral,
    BooleanLiteral,
    Variable,
    Add,
    Multiply,
    LessThan,
    Assign,
    If,
    Sequence,
    While,
)
from pysimple.env import Environment, empty_environment


@dataclass(frozen=True)
class Sample:
    """A named program with its starting environment"""
    name: str
    description: str
    node: Node
    environment: Environment = field(default_factory=empty_environment)


SAMPLES: List[Sample] = [
    Sample(
        "increment",
        "assignment with self-reference",
        Assign("x", Add(Variable("x"), NumberLiteral(1))),
        Environment({"x": NumberLiteral(2)}),
    ),
    Sample(
        "conditional",
        "branch on a boolean variable",
        If(
            Variable("x"),
            Assign("y", NumberLiteral(1)),
            Assign("y", NumberLiteral(2)),
        ),
        Environment({"x": BooleanLiteral(True)}),
    ),
    Sample(
        "conditional-false",
        "same branch taken the other way",
        If(
            Variable("x"),
            Assign("y", NumberLiteral(1)),
            Assign("y", NumberLiteral(2)),
        ),
        Environment({"x": BooleanLiteral(False)}),
    ),
    Sample(
        "sequence",
        "second assignment reads the first",
        Sequence(
            Assign("x", Add(NumberLiteral(1), NumberLiteral(1))),
            Assign("y", Add(Variable("x"), NumberLiteral(3))),
        ),
    ),
    Sample(
        "loop",
        "multiply x by 3 while it is below 5",
        While(
            LessThan(Variable("x"), NumberLiteral(5)),
            Assign("x", Multiply(Variable("x"), NumberLiteral(3))),
        ),
        Environment({"x": NumberLiteral(1)}),
    ),
    Sample(
        "comparison",
        "expression over two variables",
        LessThan(Add(Variable("x"), NumberLiteral(2)), Variable("y")),
        Environment({"x": NumberLiteral(4), "y": NumberLiteral(5)}),
    ),
]


def samples_by_name() -> Dict[str, Sample]:
    return {sample.name: sample for sample in SAMPLES}
