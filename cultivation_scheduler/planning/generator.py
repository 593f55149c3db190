"""Workflow task generator for cultivation requests."""

import logging
import math
from typing import List

from ..models.task import HarvestTarget, WorkflowRequest, WorkflowTask
from ..utils.formatting import format_number
from .species import get_species_timeline

logger = logging.getLogger(__name__)

# Roughly 1 kg of substrate per 2 kg of yield
SUBSTRATE_KG_PER_YIELD_KG = 0.5


def substrate_kg_for(target: HarvestTarget) -> int:
    """Substrate required to reach a harvest target."""
    return int(math.ceil(target.target_yield_kg * SUBSTRATE_KG_PER_YIELD_KG))


class WorkflowTaskGenerator:
    """Generates deterministic workflow task chains from a request."""

    def __init__(self, config: dict = None):
        """Initialize generator; task ids count up from 1 per instance."""
        self.config = config or {}
        self.task_counter = 0

    def _next_id(self) -> str:
        self.task_counter += 1
        return f"task-{self.task_counter}"

    def generate_workflow_tasks(self, request: WorkflowRequest) -> List[WorkflowTask]:
        """Build the cultivation task chain for every harvest target."""
        tasks = []

        for target in request.harvest_targets:
            tasks.extend(self._generate_species_chain(target))

        equipment = request.constraint_set.equipment_available
        if equipment:
            tasks.append(WorkflowTask(
                task_id=self._next_id(),
                type='equipment-maintenance',
                duration_hours=4,
                labor_hours=2,
                equipment=equipment,
                rationale=f"Scheduled maintenance for {len(equipment)} equipment items",
                priority='normal',
            ))

        logger.info(
            "Generated %d tasks for request %s (%d harvest targets)",
            len(tasks), request.request_id, len(request.harvest_targets),
        )

        return tasks

    def _generate_species_chain(self, target: HarvestTarget) -> List[WorkflowTask]:
        """Seven-step chain from substrate preparation to cleanup."""
        species = target.species
        timeline = get_species_timeline(species)
        substrate_kg = substrate_kg_for(target)

        # (type, duration_hours, labor_hours, priority, rationale)
        steps = [
            (
                'substrate-prep',
                max(1, math.ceil(substrate_kg / 10 * 4)),  # ~4 hours per 10kg
                math.ceil(substrate_kg / 10 * 2),
                'critical',
                f"Prepare substrate for {species}: {substrate_kg}kg to achieve {format_number(target.target_yield_kg)}kg yield",
            ),
            (
                'inoculation', 2, 2, 'critical',
                f"Inoculate {species} substrate after preparation",
            ),
            (
                'incubation-transition', 1, 0.5, 'high',
                f"Transition {species} to fruiting conditions after "
                f"{timeline.colonization_days} days colonization",
            ),
            (
                'fruiting-transition', 2, 1, 'high',
                f"Initiate fruiting conditions for {species}",
            ),
            (
                'misting', timeline.total_cycle_days, timeline.total_cycle_days * 0.5, 'normal',
                f"Daily misting during fruiting phase ({timeline.total_cycle_days} days)",
            ),
            (
                'harvest',
                max(1, math.ceil(target.target_yield_kg / 20)),  # ~20kg/hour
                math.ceil(target.target_yield_kg / 10),
                'high',
                f"Harvest {format_number(target.target_yield_kg)}kg of {species}",
            ),
            (
                'cleaning', timeline.cleanup_days * 8, timeline.cleanup_days * 4, 'high',
                "Clean and sanitize growing area after harvest",
            ),
        ]

        chain = []
        for task_type, duration, labor, priority, rationale in steps:
            chain.append(WorkflowTask(
                task_id=self._next_id(),
                type=task_type,
                species=species,
                duration_hours=duration,
                labor_hours=labor,
                depends_on=(chain[-1].task_id,) if chain else (),
                rationale=rationale,
                priority=priority,
            ))

        return chain

    def validate_tasks(self, tasks: List[WorkflowTask], request: WorkflowRequest) -> List[str]:
        """Check generated tasks against the request's constraint set."""
        issues = []
        constraints = request.constraint_set

        total_labor = sum(task.labor_hours for task in tasks)
        labor_budget = constraints.labor_hours_available * request.time_window_days
        if total_labor > labor_budget:
            issues.append(
                f"Total labor hours required ({total_labor:.1f}) exceeds available "
                f"({format_number(labor_budget)} over {request.time_window_days} days)"
            )

        required_equipment = []
        for task in tasks:
            for equipment_id in task.equipment:
                if equipment_id not in required_equipment:
                    required_equipment.append(equipment_id)

        for equipment_id in required_equipment:
            if equipment_id not in constraints.equipment_available:
                issues.append(f'Required equipment "{equipment_id}" not available in constraint set')

        substrate_needed = sum(substrate_kg_for(target) for target in request.harvest_targets)
        if constraints.substrate_limit_kg and substrate_needed > constraints.substrate_limit_kg:
            issues.append(
                f"Substrate required ({substrate_needed}kg) exceeds limit "
                f"({format_number(constraints.substrate_limit_kg)}kg)"
            )

        low, high = constraints.min_room_temperature, constraints.max_room_temperature
        if low is not None or high is not None:
            facility_range = _temperature_range(low, high)
            for target in request.harvest_targets:
                for stage in get_species_timeline(target.species).stages:
                    if not stage.fits_temperature(low, high):
                        issues.append(
                            f"Species {target.species} stage {stage.name} needs "
                            f"{_temperature_range(stage.temp_min, stage.temp_max)}, "
                            f"outside facility range {facility_range}"
                        )

        for issue in issues:
            logger.warning("Validation issue for request %s: %s", request.request_id, issue)

        return issues


def _temperature_range(low, high) -> str:
    if low is None:
        return f"at most {format_number(high)}°C"
    if high is None:
        return f"at least {format_number(low)}°C"
    return f"{format_number(low)}-{format_number(high)}°C"
