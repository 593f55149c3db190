"""Task, request and schedule data models."""

from .proposal import ScheduledTask, ScheduleProposal
from .task import ConstraintSet, HarvestTarget, WorkflowRequest, WorkflowTask

__all__ = [
    'WorkflowTask', 'HarvestTarget', 'ConstraintSet', 'WorkflowRequest',
    'ScheduledTask', 'ScheduleProposal',
]
