"""Core scheduling engine."""

import dataclasses
import logging
import math
import uuid
from datetime import datetime
from typing import Dict, Iterable, List, Optional

from ..errors import ValidationError
from ..models.proposal import ScheduledTask, ScheduleProposal
from ..models.task import WorkflowRequest, WorkflowTask
from ..policies.base import ConfidenceStrategy
from ..policies.heuristic import HeuristicConfidence
from ..utils.datetime_utils import add_hours, ceil_days, parse_start_date
from ..utils.formatting import format_number
from .graph import build_dependency_graph, topological_sort
from .risk import identify_risk_factors

logger = logging.getLogger(__name__)


class SchedulingEngine:
    """Turns interdependent workflow tasks into a serial, time-sequenced schedule.

    All tasks share one timeline: the cursor advances past every task, so two
    tasks never overlap even when they have no dependency between them. Room,
    facility and equipment fields are descriptive labels only.
    """

    def __init__(self, config: Optional[dict] = None, confidence_strategy: Optional[ConfidenceStrategy] = None):
        """Initialize engine with configuration and a confidence model."""
        self.config = config or {}
        self.scheduling_config = self.config.get('scheduling', {})
        self.risk_config = self.config.get('risk', {})
        self.day_start_hour = self.scheduling_config.get('day_start_hour', 6)
        self.working_hours_per_day = self.scheduling_config.get('working_hours_per_day', 8)
        self.strict_dependencies = self.scheduling_config.get('strict_dependencies', False)
        self.confidence_strategy = confidence_strategy or HeuristicConfidence(self.config)

    def create_schedule_proposal(
        self,
        tasks: Iterable[WorkflowTask],
        request: WorkflowRequest,
        start_date: str,
    ) -> ScheduleProposal:
        """Generate a schedule proposal for tasks starting on ``start_date``."""
        tasks = list(tasks)
        base_time = parse_start_date(start_date, self.day_start_hour)

        graph = build_dependency_graph(tasks, strict=self.strict_dependencies)
        order = topological_sort(graph, [task.task_id for task in tasks])

        scheduled = self._allocate_times(tasks, graph, order, base_time)

        total_days = self._compute_total_days(scheduled)
        total_labor_hours = sum(task.assigned_labor for task in scheduled)
        estimated_yield_kg = sum(target.target_yield_kg for target in request.harvest_targets)
        utilization = self._compute_equipment_utilization(scheduled, request, total_days)

        risk_factors = identify_risk_factors(
            scheduled,
            request,
            overload_factor=self.risk_config.get('labor_overload_factor', 1.5),
            max_species_per_day=self.risk_config.get('max_species_per_day', 3),
        )

        proposal = ScheduleProposal(
            proposal_id=f"schedule-{uuid.uuid4().hex[:12]}",
            created_at=datetime.now(),
            scheduled_tasks=tuple(scheduled),
            start_date=start_date,
            end_date=scheduled[-1].scheduled_end.date().isoformat() if scheduled else start_date,
            total_days=total_days,
            estimated_yield_kg=estimated_yield_kg,
            total_labor_hours=total_labor_hours,
            equipment_utilization=utilization,
            rationale=(
                f"Sequential schedule for {len(scheduled)} tasks over {total_days} days, "
                f"targeting {format_number(estimated_yield_kg)}kg yield with {total_labor_hours:.1f} labor hours"
            ),
            confidence=self.confidence_strategy.score(total_labor_hours, request),
            risk_factors=tuple(risk_factors),
        )

        logger.info(
            "Created proposal %s: %d tasks over %d days, confidence %d, %d risk factor(s)",
            proposal.proposal_id, len(scheduled), total_days, proposal.confidence, len(risk_factors),
        )

        return proposal

    def distribute_across_rooms(
        self,
        scheduled_tasks: Iterable[ScheduledTask],
        room_count: int,
    ) -> List[ScheduledTask]:
        """Assign round-robin rooms to tasks that have none.

        The room index comes from each task's position in ``scheduled_tasks``.
        Returns new task objects; the input is left untouched.
        """
        if room_count < 1:
            raise ValidationError(f"room_count must be at least 1, got {room_count}")

        adjusted = []
        for index, task in enumerate(scheduled_tasks):
            if not task.room:
                task = dataclasses.replace(task, room=f"room-{(index % room_count) + 1}")
            adjusted.append(task)

        return adjusted

    def _allocate_times(
        self,
        tasks: List[WorkflowTask],
        graph: Dict[str, tuple],
        order: List[str],
        base_time: datetime,
    ) -> List[ScheduledTask]:
        """Walk the ordered tasks with a single cursor and assign start/end times."""
        task_map = {task.task_id: task for task in tasks}
        scheduled: List[ScheduledTask] = []
        scheduled_map: Dict[str, ScheduledTask] = {}
        current_time = base_time

        for task_id in order:
            task = task_map[task_id]

            task_start = current_time
            for dep_id in graph.get(task_id, ()):
                dep = scheduled_map.get(dep_id)
                if dep is not None and dep.scheduled_end > task_start:
                    task_start = dep.scheduled_end

            task_end = add_hours(task_start, task.duration_hours)

            scheduled_task = ScheduledTask(
                task_id=task_id,
                type=task.type,
                scheduled_start=task_start,
                scheduled_end=task_end,
                sequence_order=len(scheduled) + 1,
                room=task.room,
                facility=task.facility,
                species=task.species,
                assigned_labor=task.labor_hours,
                assigned_equipment=task.equipment,
            )

            logger.debug(
                "Scheduled #%d %s: %s -> %s",
                scheduled_task.sequence_order, task_id, task_start.isoformat(), task_end.isoformat(),
            )

            scheduled.append(scheduled_task)
            scheduled_map[task_id] = scheduled_task
            current_time = task_end

        return scheduled

    def _compute_total_days(self, scheduled: List[ScheduledTask]) -> int:
        """Span of the schedule in whole days, rounded up."""
        if not scheduled:
            return 0
        return ceil_days(scheduled[0].scheduled_start, scheduled[-1].scheduled_end)

    def _compute_equipment_utilization(
        self,
        scheduled: List[ScheduledTask],
        request: WorkflowRequest,
        total_days: int,
    ) -> Dict[str, int]:
        """Percent of working hours each available equipment item is occupied."""
        available_hours = total_days * self.working_hours_per_day

        utilization = {}
        for equipment_id in request.constraint_set.equipment_available:
            utilized_hours = sum(
                task.assigned_labor for task in scheduled
                if equipment_id in task.assigned_equipment
            )
            if available_hours > 0:
                # Half-up rounding
                utilization[equipment_id] = int(math.floor(utilized_hours / available_hours * 100 + 0.5))
            else:
                utilization[equipment_id] = 0

        return utilization
