"""
SIMPLE Python Implementation

An operational-semantics engine for SIMPLE, a toy imperative language of
arithmetic/boolean expressions and assignment, conditional, sequence and
while statements. The same syntax tree can be run three ways:

- small-step reduction, driven to a fixed point by Machine
- big-step evaluation (Evaluator, Node.evaluate)
- compilation to Python closures (Compiler, Node.compile)
"""

from __future__ import annotations

#==============================================================================
# Nodes
#==============================================================================

from pysimple.types import (
    # Base and aliases
    Node,
    Value,
    Expression,
    Statement,
    # Values
    NumberLiteral,
    BooleanLiteral,
    # Expressions
    Variable,
    Add,
    Multiply,
    LessThan,
    # Statements
    DoNothing,
    Assign,
    If,
    Sequence,
    While,
    # Type guards
    is_value,
    is_number,
    is_boolean,
    is_expression,
    is_statement,
    # Value constructors
    literal,
)

#==============================================================================
# Environment
#==============================================================================

from pysimple.env import (
    Environment,
    empty_environment,
)

#==============================================================================
# Errors
#==============================================================================

from pysimple.errors import (
    ErrorCodes,
    SimpleError,
    UnboundVariable,
    TypeMismatch,
    NonTermination,
)

#==============================================================================
# Operators
#==============================================================================

from pysimple.operators import (
    Operator,
    OperatorRegistry,
    create_core_registry,
)

#==============================================================================
# Interpretation Strategies
#==============================================================================

from pysimple.reducer import (
    Reducer,
    create_reducer,
)

from pysimple.evaluator import (
    Evaluator,
    EvalOptions,
    evaluate,
    create_evaluator,
)

from pysimple.compiler import (
    Compiler,
    compile_node,
    create_compiler,
)

from pysimple.machine import (
    Machine,
    MachineOptions,
    MachineState,
)

__version__ = "0.1.0"
