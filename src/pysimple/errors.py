# SIMPLE Error Types
# Error domain for reduction, evaluation and compiled-closure failures

from __future__ import annotations

from enum import Enum
from typing import Any, Optional


#==============================================================================
# Error Codes
#==============================================================================

class ErrorCodes(str, Enum):
    """Error code constants for SIMPLE errors"""

    # Lookup errors
    UNBOUND_VARIABLE = "UnboundVariable"

    # Type errors
    TYPE_MISMATCH = "TypeMismatch"

    # Termination errors
    NON_TERMINATION = "NonTermination"


#==============================================================================
# SIMPLE Error Classes
#==============================================================================

class SimpleError(Exception):
    """Base exception class for all SIMPLE errors"""

    def __init__(self, code: ErrorCodes, message: str, meta: Optional[dict[str, Any]] = None):
        super().__init__(message)
        self.code = code
        self.message = message
        self.meta = meta

    def __str__(self) -> str:
        return self.message

    def to_dict(self) -> dict[str, Any]:
        """Convert to a plain dict for reporting"""
        result: dict[str, Any] = {
            "kind": "error",
            "code": self.code.value,
            "message": self.message,
        }
        if self.meta is not None:
            result["meta"] = self.meta
        return result

    #---------------------------------------------------------------------------
    # Static factory methods for common errors
    #---------------------------------------------------------------------------

    @staticmethod
    def unbound_variable(name: str) -> "UnboundVariable":
        """Create an UnboundVariable error"""
        return UnboundVariable(name)

    @staticmethod
    def type_mismatch(expected: str, got: Any, context: Optional[str] = None) -> "TypeMismatch":
        """Create a TypeMismatch error"""
        return TypeMismatch(expected, got, context)

    @staticmethod
    def non_termination(max_steps: int) -> "NonTermination":
        """Create a NonTermination error"""
        return NonTermination(max_steps)


class UnboundVariable(SimpleError):
    """Raised when a variable is looked up in an environment that lacks it"""

    def __init__(self, name: str):
        super().__init__(
            ErrorCodes.UNBOUND_VARIABLE,
            f"Unbound variable: {name}",
            {"name": name},
        )
        self.name = name

    def __repr__(self) -> str:
        return f"UnboundVariable({self.name!r})"


class TypeMismatch(SimpleError):
    """Raised when a node receives an operand of the wrong kind"""

    def __init__(self, expected: str, got: Any, context: Optional[str] = None):
        ctx = f" ({context})" if context else ""
        super().__init__(
            ErrorCodes.TYPE_MISMATCH,
            f"Type mismatch{ctx}: expected {expected}, got {describe(got)}",
            {"expected": expected, "got": describe(got)},
        )
        self.expected = expected
        self.got = got
        self.context = context


class NonTermination(SimpleError):
    """Raised when a configured step limit is exceeded"""

    def __init__(self, max_steps: int):
        super().__init__(
            ErrorCodes.NON_TERMINATION,
            f"Program did not terminate within {max_steps} steps",
            {"max_steps": max_steps},
        )
        self.max_steps = max_steps


#==============================================================================
# Formatting (for error messages)
#==============================================================================

def describe(got: Any) -> str:
    """Describe an offending node or value for error messages"""
    kind = getattr(got, "kind", None)
    if kind is None:
        return type(got).__name__
    return f"{kind} «{got}»"


#==============================================================================
# Exhaustiveness Checking
#==============================================================================

def exhaustive(value: Any) -> None:
    """
    Asserts that a value is unreachable, ensuring exhaustive handling.
    Use in dispatch default cases to ensure all node kinds are handled.

    Raises:
        AssertionError: If called (indicating unhandled case)
    """
    raise AssertionError(f"Unexpected value: {value!r}")
