"""
SIMPLE Environment
Value environment threaded through reduction, evaluation and compiled closures

This module provides an immutable environment class using the dict.copy()
pattern: every update returns a new Environment and leaves the original
untouched, so an environment held by one caller is never changed by another.
"""

from __future__ import annotations
from typing import Dict, Iterator, Optional, Tuple, Union

from pysimple.errors import UnboundVariable
from pysimple.types import Value, literal


#==============================================================================
# Value Environment (ρ)
# Maps variable names to literal value nodes
#==============================================================================

class Environment:
    """
    Immutable value environment.

    Uses dict.copy() pattern to ensure immutability - all operations
    return new Environment instances without modifying the original.
    """

    def __init__(self, bindings: Union[Dict[str, Value], "Environment", None] = None):
        """
        Create a new environment.

        Args:
            bindings: Initial value bindings, or an Environment to copy (optional)
        """
        if isinstance(bindings, Environment):
            bindings = bindings._bindings
        self._bindings = dict(bindings) if bindings else {}

    @classmethod
    def of(cls, **values: Union[int, bool, Value]) -> "Environment":
        """
        Create an environment from keyword arguments, coercing Python
        ints and bools to literal nodes.

            Environment.of(x=1, flag=True)
        """
        return cls({name: literal(value) for name, value in values.items()})

    @property
    def bindings(self) -> Dict[str, Value]:
        """Return a copy of the bindings to prevent external mutation."""
        return dict(self._bindings)

    def extend(self, name: str, value: Value) -> "Environment":
        """
        Bind a name, replacing any existing binding.
        Returns a new Environment without modifying the original.

        Args:
            name: Variable name
            value: Value to bind

        Returns:
            New Environment with the binding
        """
        new_bindings = self._bindings.copy()
        new_bindings[name] = value
        return Environment(new_bindings)

    def extend_many(self, bindings: list[tuple[str, Value]]) -> "Environment":
        """
        Bind several names at once.
        Returns a new Environment without modifying the original.

        Args:
            bindings: List of (name, value) tuples

        Returns:
            New Environment with the additional bindings
        """
        new_bindings = self._bindings.copy()
        for name, val in bindings:
            new_bindings[name] = val
        return Environment(new_bindings)

    def lookup(self, name: str) -> Optional[Value]:
        """
        Look up a value binding in the environment.

        Args:
            name: Variable name to look up

        Returns:
            Value if found, None otherwise
        """
        return self._bindings.get(name)

    def resolve(self, name: str) -> Value:
        """
        Look up a value binding, failing if the name is unbound.

        Raises:
            UnboundVariable: If name has no binding
        """
        try:
            return self._bindings[name]
        except KeyError:
            raise UnboundVariable(name) from None

    def to_python(self) -> Dict[str, Union[int, bool]]:
        """Return the bindings as plain Python values"""
        return {name: value.value for name, value in self._bindings.items()}

    def __getitem__(self, name: str) -> Value:
        return self.resolve(name)

    def __contains__(self, name: str) -> bool:
        """Check if a name is bound in the environment."""
        return name in self._bindings

    def __iter__(self) -> Iterator[str]:
        return iter(self._bindings)

    def items(self) -> Iterator[Tuple[str, Value]]:
        return iter(self._bindings.items())

    def __len__(self) -> int:
        """Return the number of bindings."""
        return len(self._bindings)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Environment):
            return NotImplemented
        return self._bindings == other._bindings

    __hash__ = None  # type: ignore[assignment]

    def __str__(self) -> str:
        inner = ", ".join(f"{name}: {value}" for name, value in self._bindings.items())
        return f"{{{inner}}}"

    def __repr__(self) -> str:
        return f"Environment({self._bindings})"


def empty_environment() -> Environment:
    """
    Create an empty environment.

    Returns:
        New Environment with no bindings
    """
    return Environment()
