"""Exceptions raised by the scheduling engine."""

from typing import List


class SchedulingError(Exception):
    """Base class for all scheduling errors."""


class ValidationError(SchedulingError):
    """Raised when tasks or a request fail input validation."""


class CyclicDependencyError(SchedulingError):
    """Raised when task dependencies form a cycle."""

    def __init__(self, cycle: List[str]):
        self.cycle = list(cycle)
        super().__init__(f"Cyclic dependency: {' -> '.join(self.cycle)}")
