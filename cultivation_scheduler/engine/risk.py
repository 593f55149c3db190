"""Risk scans over a produced schedule."""

import logging
from typing import Dict, Iterable, List, Set

from ..models.proposal import ScheduledTask
from ..models.task import WorkflowRequest
from ..utils.formatting import format_number

logger = logging.getLogger(__name__)


def identify_risk_factors(
    scheduled_tasks: Iterable[ScheduledTask],
    request: WorkflowRequest,
    overload_factor: float = 1.5,
    max_species_per_day: int = 3,
) -> List[str]:
    """Scan the schedule for labor overload and species co-location by day."""
    scheduled_tasks = list(scheduled_tasks)
    labor_limit = request.constraint_set.labor_hours_available

    factors = []

    daily_labor: Dict[str, float] = {}
    for task in scheduled_tasks:
        daily_labor[task.day] = daily_labor.get(task.day, 0.0) + task.assigned_labor

    for day, hours in daily_labor.items():
        if hours > labor_limit * overload_factor:
            factors.append(
                f"Day {day}: labor overload ({hours:.1f}h exceeds typical {format_number(labor_limit)}h)"
            )

    # Tasks without species do not count toward co-location
    species_by_day: Dict[str, Set[str]] = {}
    for task in scheduled_tasks:
        if task.species:
            species_by_day.setdefault(task.day, set()).add(task.species)

    for day, species in species_by_day.items():
        if len(species) > max_species_per_day:
            factors.append(
                f"Day {day}: {len(species)} active species (potential contamination cross-risk)"
            )

    for factor in factors:
        logger.warning("Schedule risk: %s", factor)

    return factors
