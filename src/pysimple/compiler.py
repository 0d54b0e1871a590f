"""
SIMPLE Compiler
Translates nodes into Python closures over an environment

Every node compiles to a single-argument callable. Expression closures map
an Environment to a literal value; statement closures map an Environment to
the Environment left after running the statement. Closures are built once
per tree and can then be invoked on any number of environments.
"""

from __future__ import annotations

from typing import Callable, Optional, Union

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
    VALUE_KINDS,
    STATEMENT_KINDS,
)
from pysimple.env import Environment
from pysimple.errors import TypeMismatch, exhaustive
from pysimple.operators import (
    OperatorRegistry,
    default_registry,
    expect_boolean,
)


#==============================================================================
# Compiled Forms
#==============================================================================

CompiledExpression = Callable[[Environment], Value]
CompiledStatement = Callable[[Environment], Environment]
Compiled = Union[CompiledExpression, CompiledStatement]


#==============================================================================
# Compiler Class
#==============================================================================

class Compiler:
    """
    Compiler from SIMPLE nodes to closures.

    Composition mirrors the big-step rules of pysimple.evaluator:
    - literal     ->  lambda env: literal
    - x           ->  lambda env: env[x]
    - l op r      ->  lambda env: op(l(env), r(env))
    - do-nothing  ->  lambda env: env
    - x = e       ->  lambda env: env[x := e(env)]
    - if          ->  lambda env: s1(env) if c(env) else s2(env)
    - s1; s2      ->  lambda env: s2(s1(env))
    - while       ->  loop calling c and s until c is false
    """

    def __init__(self, registry: Optional[OperatorRegistry] = None):
        self._registry = registry or default_registry()

    #---------------------------------------------------------------------------
    # Public Compilation API
    #---------------------------------------------------------------------------

    def compile(self, node: Node) -> Compiled:
        """
        Compile any node.

        Raises:
            TypeMismatch: If a statement appears where an expression is
                required or vice versa
        """
        if node.kind in STATEMENT_KINDS:
            return self.compile_statement(node)
        return self.compile_expression(node)

    #---------------------------------------------------------------------------
    # Expression Compilation (Dispatch)
    #---------------------------------------------------------------------------

    def compile_expression(self, expr: Expression) -> CompiledExpression:
        kind = expr.kind

        if kind in VALUE_KINDS:
            return self._compile_literal(expr)
        elif kind == "variable":
            return self._compile_variable(expr)
        elif kind in ("add", "multiply", "lessThan"):
            return self._compile_binary(expr)
        elif kind in STATEMENT_KINDS:
            raise TypeMismatch("expression", expr, "compile")
        else:
            exhaustive(expr)

    def _compile_literal(self, expr: Value) -> CompiledExpression:
        def literal(env: Environment) -> Value:
            return expr
        return literal

    def _compile_variable(self, expr: Variable) -> CompiledExpression:
        name = expr.name

        def variable(env: Environment) -> Value:
            return env.resolve(name)
        return variable

    def _compile_binary(self, expr: Union[Add, Multiply, LessThan]) -> CompiledExpression:
        operator = self._registry.get(expr.kind)
        left = self.compile_expression(expr.left)
        right = self.compile_expression(expr.right)

        def binary(env: Environment) -> Value:
            return operator.apply(left(env), right(env))
        return binary

    #---------------------------------------------------------------------------
    # Statement Compilation (Dispatch)
    #---------------------------------------------------------------------------

    def compile_statement(self, stmt: Statement) -> CompiledStatement:
        kind = stmt.kind

        if kind == "doNothing":
            return self._compile_do_nothing(stmt)
        elif kind == "assign":
            return self._compile_assign(stmt)
        elif kind == "if":
            return self._compile_if(stmt)
        elif kind == "sequence":
            return self._compile_sequence(stmt)
        elif kind == "while":
            return self._compile_while(stmt)
        elif kind in VALUE_KINDS or kind in ("variable", "add", "multiply", "lessThan"):
            raise TypeMismatch("statement", stmt, "compile")
        else:
            exhaustive(stmt)

    def _compile_do_nothing(self, stmt: Statement) -> CompiledStatement:
        def do_nothing(env: Environment) -> Environment:
            return env
        return do_nothing

    def _compile_assign(self, stmt: Assign) -> CompiledStatement:
        name = stmt.name
        expression = self.compile_expression(stmt.expression)

        def assign(env: Environment) -> Environment:
            return env.extend(name, expression(env))
        return assign

    def _compile_if(self, stmt: If) -> CompiledStatement:
        condition = self.compile_expression(stmt.condition)
        consequence = self.compile_statement(stmt.consequence)
        alternative = self.compile_statement(stmt.alternative)

        def if_(env: Environment) -> Environment:
            if expect_boolean(condition(env), "if condition"):
                return consequence(env)
            return alternative(env)
        return if_

    def _compile_sequence(self, stmt: Sequence) -> CompiledStatement:
        first = self.compile_statement(stmt.first)
        second = self.compile_statement(stmt.second)

        def sequence(env: Environment) -> Environment:
            return second(first(env))
        return sequence

    def _compile_while(self, stmt: While) -> CompiledStatement:
        condition = self.compile_expression(stmt.condition)
        body = self.compile_statement(stmt.body)

        def while_(env: Environment) -> Environment:
            while expect_boolean(condition(env), "while condition"):
                env = body(env)
            return env
        return while_


#==============================================================================
# Convenience Functions
#==============================================================================

def create_compiler(registry: Optional[OperatorRegistry] = None) -> Compiler:
    """Create a compiler over the given (or core) operator registry"""
    return Compiler(registry)


def compile_node(node: Node) -> Compiled:
    """Compile a node with the core operators"""
    return Compiler().compile(node)
