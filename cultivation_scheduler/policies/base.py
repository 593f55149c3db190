"""Base confidence strategy interface."""

from abc import ABC, abstractmethod

from ..models.task import WorkflowRequest


class ConfidenceStrategy(ABC):
    """Abstract base class for schedule confidence models."""

    def __init__(self, config: dict):
        """Initialize strategy with configuration."""
        self.config = config

    @abstractmethod
    def score(self, total_labor_hours: float, request: WorkflowRequest) -> int:
        """Return a confidence score in the range 0-100."""
        pass

    @abstractmethod
    def get_strategy_name(self) -> str:
        """Return the name of this strategy."""
        pass
