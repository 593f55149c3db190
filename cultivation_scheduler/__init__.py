"""Cultivation workflow scheduling engine."""

from .engine.scheduler import SchedulingEngine
from .errors import CyclicDependencyError, SchedulingError, ValidationError

__all__ = ['SchedulingEngine', 'SchedulingError', 'ValidationError', 'CyclicDependencyError']
