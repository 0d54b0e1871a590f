"""
SIMPLE Machine
Drives small-step reduction to a fixed point

The machine holds a (statement, environment) pair and repeatedly replaces it
with the result of one reduction step until the statement is irreducible.
Every state visited is recorded in the machine's trace and logged at DEBUG.
"""

from __future__ import annotations

import logging
from typing import List, Optional
from dataclasses import dataclass, field

from pysimple.types import Node
from pysimple.env import Environment
from pysimple.errors import NonTermination
from pysimple.reducer import Reducer

logger = logging.getLogger(__name__)


#==============================================================================
# Machine Options
#==============================================================================

@dataclass
class MachineOptions:
    """Options for running a machine; max_steps of None means unbounded"""
    max_steps: Optional[int] = None
    trace: bool = True


#==============================================================================
# Machine State
#==============================================================================

@dataclass(frozen=True)
class MachineState:
    """One (statement, environment) configuration"""
    statement: Node
    environment: Environment

    def __str__(self) -> str:
        return f"{self.statement!r}, {self.environment}"


#==============================================================================
# Machine
#==============================================================================

@dataclass
class Machine:
    """
    Small-step driver.

    Example:
        machine = Machine(
            Assign("x", Add(Variable("x"), NumberLiteral(1))),
            Environment.of(x=2),
        )
        final = machine.run()   # MachineState(do-nothing, {x: 3})
    """
    statement: Node
    environment: Environment
    options: MachineOptions = field(default_factory=MachineOptions)
    reducer: Reducer = field(default_factory=Reducer)
    steps: int = 0
    trace: List[MachineState] = field(default_factory=list)

    @property
    def state(self) -> MachineState:
        """Current configuration"""
        return MachineState(self.statement, self.environment)

    def step(self) -> MachineState:
        """
        Apply one reduction step and return the new state.

        Raises:
            NonTermination: If max_steps is exceeded
            SimpleError: If the reduction fails
        """
        if self.options.max_steps is not None and self.steps >= self.options.max_steps:
            raise NonTermination(self.options.max_steps)
        self.statement, self.environment = self.reducer.step(self.statement, self.environment)
        self.steps += 1
        return self.state

    def run(self) -> MachineState:
        """
        Reduce until the statement is irreducible.

        Returns:
            The terminal state

        Raises:
            NonTermination: If max_steps is exceeded
            SimpleError: On the first reduction failure; states already
                recorded stay in the trace
        """
        logger.debug("--- run ---")
        self._record()
        while self.statement.reducible():
            self.step()
            self._record()
        logger.debug("--- end --- (%d steps)", self.steps)
        return self.state

    def _record(self) -> None:
        state = self.state
        if self.options.trace:
            self.trace.append(state)
        logger.debug("%s", state)


#==============================================================================
# Convenience Functions
#==============================================================================

def run(
    statement: Node,
    environment: Environment,
    options: Optional[MachineOptions] = None,
) -> MachineState:
    """Run a statement to completion on a fresh machine"""
    return Machine(statement, environment, options or MachineOptions()).run()
