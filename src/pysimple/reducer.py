"""
SIMPLE Reducer
Implements small-step reduction: <e, rho> -> e'  and  <s, rho> -> <s', rho'>

Each call performs exactly one rewrite. Composite nodes reduce their leftmost
reducible child first; a node whose children are all values performs its own
computation. Loops are expressed by rewriting a while node into a conditional
that contains the same while node again.
"""

from __future__ import annotations

from dataclasses import replace
from typing import Optional, Tuple, Union

from pysimple.types import (
    Node,
    Expression,
    Statement,
    Reduction,
    Value,
    Variable,
    Add,
    Multiply,
    LessThan,
    DoNothing,
    Assign,
    If,
    Sequence,
    While,
    VALUE_KINDS,
    STATEMENT_KINDS,
)
from pysimple.env import Environment
from pysimple.errors import TypeMismatch, NonTermination, exhaustive
from pysimple.operators import (
    OperatorRegistry,
    default_registry,
    expect_boolean,
    expect_value,
)


#==============================================================================
# Reducer Class
#==============================================================================

class Reducer:
    """
    Small-step reducer for SIMPLE expressions and statements.

    Expression rules:
    - R-Var:      <x, rho> -> rho(x)
    - R-OpLeft:   <l, rho> -> l'  ⇒  <l op r, rho> -> l' op r
    - R-OpRight:  <r, rho> -> r'  ⇒  <v op r, rho> -> v op r'
    - R-Op:       <v1 op v2, rho> -> v1 op v2 (computed)

    Statement rules:
    - R-Assign:    <e, rho> -> e'  ⇒  <x = e, rho> -> <x = e', rho>
    - R-AssignVal: <x = v, rho> -> <do-nothing, rho[x := v]>
    - R-IfCond:    <c, rho> -> c'  ⇒  <if (c) ..., rho> -> <if (c') ..., rho>
    - R-IfTrue:    <if (true) { s1 } else { s2 }, rho> -> <s1, rho>
    - R-IfFalse:   <if (false) { s1 } else { s2 }, rho> -> <s2, rho>
    - R-SeqSkip:   <do-nothing; s2, rho> -> <s2, rho>
    - R-Seq:       <s1, rho> -> <s1', rho'>  ⇒  <s1; s2, rho> -> <s1'; s2, rho'>
    - R-While:     <while (c) { s }, rho> -> <if (c) { s; while (c) { s } } else { do-nothing }, rho>
    """

    def __init__(self, registry: Optional[OperatorRegistry] = None):
        """
        Initialize the reducer.

        Args:
            registry: Operator registry for binary operators (optional)
        """
        self._registry = registry or default_registry()

    #---------------------------------------------------------------------------
    # Public Reduction API
    #---------------------------------------------------------------------------

    def reduce(self, node: Node, env: Environment) -> Union[Expression, Reduction]:
        """
        Take one reduction step on any node.

        Returns:
            The reduced node for expressions, a (statement, environment)
            pair for statements
        """
        if node.kind in STATEMENT_KINDS:
            return self.reduce_statement(node, env)
        return self.reduce_expression(node, env)

    def step(self, node: Node, env: Environment) -> Tuple[Node, Environment]:
        """
        Take one reduction step, always returning a (node, environment) pair.

        Expression steps never change the environment.
        """
        if node.kind in STATEMENT_KINDS:
            return self.reduce_statement(node, env)
        return self.reduce_expression(node, env), env

    def normalize(
        self,
        expr: Expression,
        env: Environment,
        max_steps: Optional[int] = None
    ) -> Value:
        """
        Reduce an expression until it is irreducible.

        Args:
            expr: Expression to reduce
            env: Environment for variable lookups
            max_steps: Step bound (optional, unbounded by default)

        Returns:
            The literal the expression reduces to

        Raises:
            NonTermination: If max_steps is exceeded
        """
        steps = 0
        while expr.reducible():
            steps += 1
            if max_steps is not None and steps > max_steps:
                raise NonTermination(max_steps)
            expr = self.reduce_expression(expr, env)
        return expect_value(expr, "normal form")

    #---------------------------------------------------------------------------
    # Expression Reduction (Dispatch)
    #---------------------------------------------------------------------------

    def reduce_expression(self, expr: Expression, env: Environment) -> Expression:
        """
        Main expression dispatch based on node kind.

        Raises:
            TypeMismatch: If the node is a value or a statement
        """
        kind = expr.kind

        if kind == "variable":
            return self._reduce_variable(expr, env)
        elif kind in ("add", "multiply", "lessThan"):
            return self._reduce_binary(expr, env)
        elif kind in VALUE_KINDS:
            raise TypeMismatch("reducible expression", expr, "reduce")
        elif kind in STATEMENT_KINDS:
            raise TypeMismatch("expression", expr, "reduce")
        else:
            exhaustive(expr)

    def _reduce_variable(self, expr: Variable, env: Environment) -> Expression:
        return env.resolve(expr.name)

    def _reduce_binary(
        self,
        expr: Union[Add, Multiply, LessThan],
        env: Environment
    ) -> Expression:
        """Left operand reduces to completion before the right one starts."""
        if expr.left.reducible():
            return replace(expr, left=self.reduce_expression(expr.left, env))
        if expr.right.reducible():
            return replace(expr, right=self.reduce_expression(expr.right, env))
        return self._registry.apply(expr.kind, expr.left, expr.right)

    #---------------------------------------------------------------------------
    # Statement Reduction (Dispatch)
    #---------------------------------------------------------------------------

    def reduce_statement(self, stmt: Statement, env: Environment) -> Reduction:
        """
        Main statement dispatch based on node kind.

        Raises:
            TypeMismatch: If the node is do-nothing or an expression
        """
        kind = stmt.kind

        if kind == "assign":
            return self._reduce_assign(stmt, env)
        elif kind == "if":
            return self._reduce_if(stmt, env)
        elif kind == "sequence":
            return self._reduce_sequence(stmt, env)
        elif kind == "while":
            return self._reduce_while(stmt, env)
        elif kind == "doNothing":
            raise TypeMismatch("reducible statement", stmt, "reduce")
        elif kind in VALUE_KINDS or kind in ("variable", "add", "multiply", "lessThan"):
            raise TypeMismatch("statement", stmt, "reduce")
        else:
            exhaustive(stmt)

    def _reduce_assign(self, stmt: Assign, env: Environment) -> Reduction:
        if stmt.expression.reducible():
            return Assign(stmt.name, self.reduce_expression(stmt.expression, env)), env
        value = expect_value(stmt.expression, f"assignment to {stmt.name}")
        return DoNothing(), env.extend(stmt.name, value)

    def _reduce_if(self, stmt: If, env: Environment) -> Reduction:
        if stmt.condition.reducible():
            return replace(stmt, condition=self.reduce_expression(stmt.condition, env)), env
        if expect_boolean(stmt.condition, "if condition"):
            return stmt.consequence, env
        return stmt.alternative, env

    def _reduce_sequence(self, stmt: Sequence, env: Environment) -> Reduction:
        if isinstance(stmt.first, DoNothing):
            return stmt.second, env
        first, env = self.reduce_statement(stmt.first, env)
        return Sequence(first, stmt.second), env

    def _reduce_while(self, stmt: While, env: Environment) -> Reduction:
        return If(stmt.condition, Sequence(stmt.body, stmt), DoNothing()), env


#==============================================================================
# Convenience Functions
#==============================================================================

_default_reducer: Optional[Reducer] = None


def create_reducer(registry: Optional[OperatorRegistry] = None) -> Reducer:
    """Create a reducer over the given (or core) operator registry"""
    return Reducer(registry)


def reduce(node: Node, env: Environment) -> Union[Expression, Reduction]:
    """Take one small-step reduction with the shared core reducer"""
    global _default_reducer
    if _default_reducer is None:
        _default_reducer = Reducer()
    return _default_reducer.reduce(node, env)
