"""Flat-baseline confidence heuristic."""

from ..models.task import WorkflowRequest
from .base import ConfidenceStrategy


class HeuristicConfidence(ConfidenceStrategy):
    """Flat baseline, penalized when modeled labor exceeds daily availability."""

    def __init__(self, config: dict):
        """Initialize heuristic from the ``confidence`` config section."""
        super().__init__(config)
        confidence_config = config.get('confidence', {})
        self.baseline = confidence_config.get('baseline', 85)
        self.penalty = confidence_config.get('penalty', 15)
        self.labor_ratio_threshold = confidence_config.get('labor_ratio_threshold', 1.2)

    def score(self, total_labor_hours: float, request: WorkflowRequest) -> int:
        """Score = min(100, baseline - penalty if labor ratio > threshold)."""
        available = request.constraint_set.labor_hours_available
        if available > 0:
            overloaded = total_labor_hours / available > self.labor_ratio_threshold
        else:
            # No labor available: any scheduled labor is an overload
            overloaded = total_labor_hours > 0

        score = self.baseline - (self.penalty if overloaded else 0)
        return int(max(0, min(100, score)))

    def get_strategy_name(self) -> str:
        """Return strategy name."""
        return "HEURISTIC"
