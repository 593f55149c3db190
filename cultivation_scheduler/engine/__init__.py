"""Scheduling engine components."""

from .graph import build_dependency_graph, topological_sort
from .risk import identify_risk_factors
from .scheduler import SchedulingEngine

__all__ = ['SchedulingEngine', 'build_dependency_graph', 'topological_sort', 'identify_risk_factors']
