"""
SIMPLE Node Definitions for Python
Implements the expression and statement AST of the SIMPLE language

This module provides frozen dataclasses for immutable node representations.
Each node class carries a string 'kind' used for dispatch by the reducer,
the evaluator and the compiler. Literal nodes double as runtime values:
there is no separate value domain.
"""

from __future__ import annotations
from dataclasses import dataclass
from typing import (
    Any,
    Callable,
    Optional,
    Tuple,
    Union,
    TYPE_CHECKING,
    TypeAlias,
)

if TYPE_CHECKING:
    from pysimple.env import Environment
    from pysimple.evaluator import EvalOptions


#==============================================================================
# Node Base
#==============================================================================

class Node:
    """
    Base class for all SIMPLE nodes.

    The methods here are the object-level entry points to the three
    interpretation strategies; the rules themselves live in
    pysimple.reducer, pysimple.evaluator and pysimple.compiler.
    """

    kind = "node"

    def reducible(self) -> bool:
        """Whether the node can take a small-step reduction"""
        return True

    def reduce(self, env: Environment) -> Any:
        """
        Take one small-step reduction.

        Expressions return the reduced node; statements return a
        (node, environment) pair.
        """
        from pysimple.reducer import reduce
        return reduce(self, env)

    def evaluate(self, env: Environment, options: Optional[EvalOptions] = None) -> Any:
        """
        Evaluate the node big-step.

        Expressions return a literal value; statements return the
        resulting environment.
        """
        from pysimple.evaluator import evaluate
        return evaluate(self, env, options)

    def compile(self) -> Callable[[Environment], Any]:
        """Translate the node to a closure taking an environment"""
        from pysimple.compiler import compile_node
        return compile_node(self)

    def __repr__(self) -> str:
        return f"«{self}»"


#==============================================================================
# Value Nodes (irreducible literals)
#==============================================================================

@dataclass(frozen=True, repr=False)
class NumberLiteral(Node):
    """Integer literal"""
    value: int

    kind = "number"

    def __post_init__(self) -> None:
        # bool is a subclass of int
        if isinstance(self.value, bool) or not isinstance(self.value, int):
            raise TypeError(f"NumberLiteral needs an int, got {type(self.value).__name__}: {self.value!r}")

    def reducible(self) -> bool:
        return False

    def __str__(self) -> str:
        return str(self.value)


@dataclass(frozen=True, repr=False)
class BooleanLiteral(Node):
    """Boolean literal"""
    value: bool

    kind = "boolean"

    def __post_init__(self) -> None:
        if not isinstance(self.value, bool):
            raise TypeError(f"BooleanLiteral needs a bool, got {type(self.value).__name__}: {self.value!r}")

    def reducible(self) -> bool:
        return False

    def __str__(self) -> str:
        return "true" if self.value else "false"


#==============================================================================
# Expression Nodes
#==============================================================================

@dataclass(frozen=True, repr=False)
class Variable(Node):
    """Reference to a variable bound in the environment"""
    name: str

    kind = "variable"

    def __str__(self) -> str:
        return self.name


@dataclass(frozen=True, repr=False)
class Add(Node):
    """Integer addition"""
    left: Expression
    right: Expression

    kind = "add"

    def __str__(self) -> str:
        return f"{self.left} + {self.right}"


@dataclass(frozen=True, repr=False)
class Multiply(Node):
    """Integer multiplication"""
    left: Expression
    right: Expression

    kind = "multiply"

    def __str__(self) -> str:
        return f"{self.left} * {self.right}"


@dataclass(frozen=True, repr=False)
class LessThan(Node):
    """Integer comparison yielding a boolean"""
    left: Expression
    right: Expression

    kind = "lessThan"

    def __str__(self) -> str:
        return f"{self.left} < {self.right}"


#==============================================================================
# Statement Nodes
#==============================================================================

@dataclass(frozen=True, repr=False)
class DoNothing(Node):
    """The empty statement; the normal form of every terminating statement"""

    kind = "doNothing"

    def reducible(self) -> bool:
        return False

    def __str__(self) -> str:
        return "do-nothing"


@dataclass(frozen=True, repr=False)
class Assign(Node):
    """Bind the value of an expression to a name"""
    name: str
    expression: Expression

    kind = "assign"

    def __str__(self) -> str:
        return f"{self.name} = {self.expression}"


@dataclass(frozen=True, repr=False)
class If(Node):
    """Two-armed conditional"""
    condition: Expression
    consequence: Statement
    alternative: Statement

    kind = "if"

    def __str__(self) -> str:
        return f"if ({self.condition}) {{ {self.consequence} }} else {{ {self.alternative} }}"


@dataclass(frozen=True, repr=False)
class Sequence(Node):
    """Run first, then second"""
    first: Statement
    second: Statement

    kind = "sequence"

    def __str__(self) -> str:
        return f"{self.first}; {self.second}"


@dataclass(frozen=True, repr=False)
class While(Node):
    """Loop while the condition holds"""
    condition: Expression
    body: Statement

    kind = "while"

    def __str__(self) -> str:
        return f"while ({self.condition}) {{ {self.body} }}"


#==============================================================================
# Type Aliases
#==============================================================================

Value: TypeAlias = Union[NumberLiteral, BooleanLiteral]

Expression: TypeAlias = Union[
    NumberLiteral,
    BooleanLiteral,
    Variable,
    Add,
    Multiply,
    LessThan,
]

Statement: TypeAlias = Union[
    DoNothing,
    Assign,
    If,
    Sequence,
    While,
]

# Result of a statement reduction step
Reduction: TypeAlias = Tuple[Statement, "Environment"]


#==============================================================================
# Kind Sets
#==============================================================================

VALUE_KINDS = frozenset({"number", "boolean"})

EXPRESSION_KINDS = frozenset({
    "number",
    "boolean",
    "variable",
    "add",
    "multiply",
    "lessThan",
})

STATEMENT_KINDS = frozenset({
    "doNothing",
    "assign",
    "if",
    "sequence",
    "while",
})


#==============================================================================
# Type Guards
#==============================================================================

def is_value(node: Any) -> bool:
    """Check if a node is a literal value"""
    return isinstance(node, Node) and node.kind in VALUE_KINDS


def is_number(node: Any) -> bool:
    """Check if a node is a number literal"""
    return isinstance(node, NumberLiteral)


def is_boolean(node: Any) -> bool:
    """Check if a node is a boolean literal"""
    return isinstance(node, BooleanLiteral)


def is_expression(node: Any) -> bool:
    """Check if a node is an expression"""
    return isinstance(node, Node) and node.kind in EXPRESSION_KINDS


def is_statement(node: Any) -> bool:
    """Check if a node is a statement"""
    return isinstance(node, Node) and node.kind in STATEMENT_KINDS


#==============================================================================
# Value Constructors
#==============================================================================

def literal(value: Union[int, bool, Value]) -> Value:
    """
    Coerce a Python int or bool to the matching literal node.

    Literal nodes are returned unchanged.

    Raises:
        TypeError: If the value has no literal form
    """
    if is_value(value):
        return value
    # bool first: bool is a subclass of int
    if isinstance(value, bool):
        return BooleanLiteral(value)
    if isinstance(value, int):
        return NumberLiteral(value)
    raise TypeError(f"No SIMPLE literal for {type(value).__name__}: {value!r}")
