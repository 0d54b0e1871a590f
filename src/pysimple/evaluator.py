"""
SIMPLE Evaluator
Implements big-step evaluation: rho |- e ⇓ v  and  rho |- s ⇓ rho'

Expressions evaluate to literal values; statements evaluate to the
environment they leave behind. No intermediate reduced trees are built.
"""

from __future__ import annotations

from typing import Optional, Union
from dataclasses import dataclass

from pysimple.types import (
    Node,
    Value,
    Expression,
    Statement,
    Variable,
    Add,
    Multiply,
    LessThan,
    Assign,
    If,
    Sequence,
    While,
    STATEMENT_KINDS,
)
from pysimple.env import Environment
from pysimple.errors import TypeMismatch, NonTermination, exhaustive
from pysimple.operators import (
    OperatorRegistry,
    default_registry,
    expect_boolean,
)


#==============================================================================
# Evaluation Options
#==============================================================================

@dataclass
class EvalOptions:
    """Options for evaluation; max_steps of None means unbounded"""
    max_steps: Optional[int] = None


#==============================================================================
# Evaluation Context
#==============================================================================

@dataclass
class EvalContext:
    """Internal evaluation state for tracking steps and configuration"""
    steps: int = 0
    max_steps: Optional[int] = None


#==============================================================================
# Evaluator Class
#==============================================================================

class Evaluator:
    """
    Big-step evaluator for SIMPLE expressions and statements.

    The evaluator implements the following inference rules:
    - E-Lit:       rho |- v ⇓ v
    - E-Var:       rho(x) = v ⇒ rho |- x ⇓ v
    - E-Op:        rho |- l ⇓ v1, rho |- r ⇓ v2 ⇒ rho |- l op r ⇓ v1 op v2
    - E-Skip:      rho |- do-nothing ⇓ rho
    - E-Assign:    rho |- e ⇓ v ⇒ rho |- x = e ⇓ rho[x := v]
    - E-IfTrue:    rho |- c ⇓ true, rho |- s1 ⇓ rho' ⇒ rho |- if (c) { s1 } else { s2 } ⇓ rho'
    - E-IfFalse:   rho |- c ⇓ false, rho |- s2 ⇓ rho' ⇒ rho |- if (c) { s1 } else { s2 } ⇓ rho'
    - E-Seq:       rho |- s1 ⇓ rho', rho' |- s2 ⇓ rho'' ⇒ rho |- s1; s2 ⇓ rho''
    - E-WhileTrue: rho |- c ⇓ true, rho |- s ⇓ rho', rho' |- while (c) { s } ⇓ rho''
                   ⇒ rho |- while (c) { s } ⇓ rho''
    - E-WhileFalse: rho |- c ⇓ false ⇒ rho |- while (c) { s } ⇓ rho
    """

    def __init__(self, registry: Optional[OperatorRegistry] = None):
        """
        Initialize the evaluator.

        Args:
            registry: Operator registry for binary operators (optional)
        """
        self._registry = registry or default_registry()

    #---------------------------------------------------------------------------
    # Public Evaluation API
    #---------------------------------------------------------------------------

    def evaluate(
        self,
        node: Node,
        env: Environment,
        options: Optional[EvalOptions] = None
    ) -> Union[Value, Environment]:
        """
        Evaluate an expression or a statement.

        Args:
            node: Node to evaluate
            env: Environment for variable lookups
            options: Evaluation options (max_steps)

        Returns:
            A literal value for expressions, the final environment for
            statements

        Raises:
            SimpleError: If evaluation fails or exceeds max steps
        """
        opts = options or EvalOptions()
        state = EvalContext(steps=0, max_steps=opts.max_steps)
        if node.kind in STATEMENT_KINDS:
            return self._eval_statement(node, env, state)
        return self._eval_expr(node, env, state)

    #---------------------------------------------------------------------------
    # Expression Evaluation (Dispatch)
    #---------------------------------------------------------------------------

    def _eval_expr(
        self,
        expr: Expression,
        env: Environment,
        state: EvalContext
    ) -> Value:
        """Main expression dispatch based on node kind."""
        self._check_steps(state)

        kind = expr.kind

        if kind in ("number", "boolean"):
            return expr
        elif kind == "variable":
            return self._eval_variable(expr, env, state)
        elif kind in ("add", "multiply", "lessThan"):
            return self._eval_binary(expr, env, state)
        elif kind in STATEMENT_KINDS:
            raise TypeMismatch("expression", expr, "evaluate")
        else:
            exhaustive(expr)

    def _eval_variable(
        self,
        expr: Variable,
        env: Environment,
        state: EvalContext
    ) -> Value:
        """
        E-Var: rho(x) = v
               -------
               rho |- x ⇓ v
        """
        return env.resolve(expr.name)

    def _eval_binary(
        self,
        expr: Union[Add, Multiply, LessThan],
        env: Environment,
        state: EvalContext
    ) -> Value:
        """
        E-Op: rho |- l ⇓ v1    rho |- r ⇓ v2
              --------------------------
                rho |- l op r ⇓ v1 op v2
        """
        left = self._eval_expr(expr.left, env, state)
        right = self._eval_expr(expr.right, env, state)
        return self._registry.apply(expr.kind, left, right)

    #---------------------------------------------------------------------------
    # Statement Evaluation (Dispatch)
    #---------------------------------------------------------------------------

    def _eval_statement(
        self,
        stmt: Statement,
        env: Environment,
        state: EvalContext
    ) -> Environment:
        """Main statement dispatch based on node kind."""
        self._check_steps(state)

        kind = stmt.kind

        if kind == "doNothing":
            return env
        elif kind == "assign":
            return self._eval_assign(stmt, env, state)
        elif kind == "if":
            return self._eval_if(stmt, env, state)
        elif kind == "sequence":
            return self._eval_sequence(stmt, env, state)
        elif kind == "while":
            return self._eval_while(stmt, env, state)
        elif kind in ("number", "boolean", "variable", "add", "multiply", "lessThan"):
            raise TypeMismatch("statement", stmt, "evaluate")
        else:
            exhaustive(stmt)

    def _eval_assign(
        self,
        stmt: Assign,
        env: Environment,
        state: EvalContext
    ) -> Environment:
        """
        E-Assign: rho |- e ⇓ v
                  ----------------------
                  rho |- x = e ⇓ rho[x := v]
        """
        value = self._eval_expr(stmt.expression, env, state)
        return env.extend(stmt.name, value)

    def _eval_if(
        self,
        stmt: If,
        env: Environment,
        state: EvalContext
    ) -> Environment:
        """
        Both branches run under the environment the condition saw.
        """
        condition = self._eval_expr(stmt.condition, env, state)
        if expect_boolean(condition, "if condition"):
            return self._eval_statement(stmt.consequence, env, state)
        return self._eval_statement(stmt.alternative, env, state)

    def _eval_sequence(
        self,
        stmt: Sequence,
        env: Environment,
        state: EvalContext
    ) -> Environment:
        return self._eval_statement(
            stmt.second,
            self._eval_statement(stmt.first, env, state),
            state,
        )

    def _eval_while(
        self,
        stmt: While,
        env: Environment,
        state: EvalContext
    ) -> Environment:
        """
        E-WhileTrue re-evaluates the same while node under the environment
        the body produced; here that tail re-evaluation is a loop. Each
        iteration counts against max_steps.
        """
        while expect_boolean(self._eval_expr(stmt.condition, env, state), "while condition"):
            env = self._eval_statement(stmt.body, env, state)
            self._check_steps(state)
        return env

    #---------------------------------------------------------------------------
    # Helpers
    #---------------------------------------------------------------------------

    def _check_steps(self, state: EvalContext) -> None:
        """
        Check if step limit has been exceeded.

        Raises:
            NonTermination: If max steps exceeded
        """
        state.steps += 1
        if state.max_steps is not None and state.steps > state.max_steps:
            raise NonTermination(state.max_steps)


#==============================================================================
# Convenience Functions
#==============================================================================

def create_evaluator(registry: Optional[OperatorRegistry] = None) -> Evaluator:
    """Create an evaluator over the given (or core) operator registry"""
    return Evaluator(registry)


def evaluate(
    node: Node,
    env: Environment,
    options: Optional[EvalOptions] = None,
) -> Union[Value, Environment]:
    """Evaluate a node big-step with the core operators"""
    return Evaluator().evaluate(node, env, options)
