"""
SIMPLE Operator Registry
Binary operators shared by the reducer, the evaluator and the compiler

Each binary node kind (add, multiply, lessThan) maps to one Operator. The
three interpretation strategies all apply operators through the registry so
that operand checking and result construction happen in one place.
"""

from __future__ import annotations

from typing import Callable, Dict, List, Optional
from dataclasses import dataclass

from pysimple.errors import TypeMismatch
from pysimple.types import (
    Node,
    Value,
    NumberLiteral,
    BooleanLiteral,
    is_number,
)


#==============================================================================
# Operator Class
#==============================================================================

@dataclass(frozen=True)
class Operator:
    """
    A binary operator definition.

    Attributes:
        kind: Node kind the operator implements (e.g., "add")
        symbol: Infix symbol used in messages
        impl: Implementation taking two ints and returning a literal node
    """
    kind: str
    symbol: str
    impl: Callable[[int, int], Value]

    def apply(self, left: Node, right: Node) -> Value:
        """
        Apply the operator to two literal operands.

        Raises:
            TypeMismatch: If either operand is not a number literal
        """
        if not is_number(left):
            raise TypeMismatch("number", left, f"left operand of {self.symbol}")
        if not is_number(right):
            raise TypeMismatch("number", right, f"right operand of {self.symbol}")
        return self.impl(left.value, right.value)

    def __str__(self) -> str:
        return f"Operator({self.kind}, {self.symbol})"


#==============================================================================
# Operator Registry
#==============================================================================

class OperatorRegistry:
    """Registry of binary operators keyed by node kind."""

    def __init__(self) -> None:
        self._operators: Dict[str, Operator] = {}

    def register(self, operator: Operator) -> "OperatorRegistry":
        """
        Register an operator in the registry.

        Returns:
            self for chaining

        Raises:
            ValueError: If an operator for the same kind already exists
        """
        if operator.kind in self._operators:
            raise ValueError(f"Operator {operator.kind} already registered")
        self._operators[operator.kind] = operator
        return self

    def register_all(self, operators: List[Operator]) -> "OperatorRegistry":
        for op in operators:
            self.register(op)
        return self

    def lookup(self, kind: str) -> Optional[Operator]:
        return self._operators.get(kind)

    def get(self, kind: str) -> Operator:
        """
        Get an operator, raising an error if not found.

        Raises:
            KeyError: If no operator is registered for kind
        """
        op = self.lookup(kind)
        if op is None:
            raise KeyError(f"Operator {kind} not registered")
        return op

    def apply(self, kind: str, left: Node, right: Node) -> Value:
        """Apply the operator registered for kind to two operands"""
        return self.get(kind).apply(left, right)

    def operators(self) -> List[Operator]:
        return list(self._operators.values())

    def __len__(self) -> int:
        return len(self._operators)

    def __contains__(self, kind: str) -> bool:
        return kind in self._operators


#==============================================================================
# Core Operators
#==============================================================================

add = Operator("add", "+", lambda a, b: NumberLiteral(a + b))

multiply = Operator("multiply", "*", lambda a, b: NumberLiteral(a * b))

less_than = Operator("lessThan", "<", lambda a, b: BooleanLiteral(a < b))


def create_core_registry() -> OperatorRegistry:
    """Create a registry holding add, multiply and lessThan"""
    return OperatorRegistry().register_all([add, multiply, less_than])


_default_registry: Optional[OperatorRegistry] = None


def default_registry() -> OperatorRegistry:
    """Return the shared core registry, creating it on first use"""
    global _default_registry
    if _default_registry is None:
        _default_registry = create_core_registry()
    return _default_registry


#==============================================================================
# Operand Checks
#==============================================================================

def expect_boolean(node: Node, context: str) -> bool:
    """
    Extract the truth value of an irreducible condition.

    Raises:
        TypeMismatch: If the node is not a boolean literal
    """
    if isinstance(node, BooleanLiteral):
        return node.value
    raise TypeMismatch("boolean", node, context)


def expect_value(node: Node, context: str) -> Value:
    """
    Check that an irreducible node is a literal value.

    Raises:
        TypeMismatch: If the node is not a number or boolean literal
    """
    if isinstance(node, (NumberLiteral, BooleanLiteral)):
        return node
    raise TypeMismatch("value", node, context)
