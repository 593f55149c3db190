"""Schedule confidence strategies."""

from .base import ConfidenceStrategy
from .heuristic import HeuristicConfidence

__all__ = ['ConfidenceStrategy', 'HeuristicConfidence']
