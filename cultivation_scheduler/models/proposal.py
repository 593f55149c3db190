"""Schedule output models."""

from dataclasses import dataclass, field, asdict
from datetime import datetime
from typing import Any, Dict, Optional, Tuple

from ..utils.formatting import format_number


@dataclass(frozen=True)
class ScheduledTask:
    """A workflow task placed on the timeline."""

    task_id: str
    type: str
    scheduled_start: datetime
    scheduled_end: datetime
    sequence_order: int
    room: Optional[str] = None
    facility: Optional[str] = None
    species: Optional[str] = None
    assigned_labor: float = 0.0
    assigned_equipment: Tuple[str, ...] = ()

    @property
    def day(self) -> str:
        """Calendar day of the scheduled start (YYYY-MM-DD)."""
        return self.scheduled_start.date().isoformat()


@dataclass(frozen=True)
class ScheduleProposal:
    """Complete result of a scheduling run."""

    proposal_id: str
    created_at: datetime
    scheduled_tasks: Tuple[ScheduledTask, ...]
    start_date: str
    end_date: str
    total_days: int
    estimated_yield_kg: float
    total_labor_hours: float
    equipment_utilization: Dict[str, int] = field(default_factory=dict)
    rationale: str = ""
    confidence: int = 0
    risk_factors: Tuple[str, ...] = ()

    def to_dict(self) -> Dict[str, Any]:
        """Convert proposal to dictionary for JSON export."""
        data = asdict(self)
        data['created_at'] = self.created_at.isoformat()
        data['scheduled_tasks'] = [
            {
                **task,
                'scheduled_start': task['scheduled_start'].isoformat(),
                'scheduled_end': task['scheduled_end'].isoformat(),
                'assigned_equipment': list(task['assigned_equipment']),
            }
            for task in data['scheduled_tasks']
        ]
        data['risk_factors'] = list(self.risk_factors)
        return data

    def to_human_readable(self) -> str:
        """Generate human-readable report format."""
        lines = [
            f"=== Schedule Proposal: {self.proposal_id} ===",
            f"Created: {self.created_at}",
            f"Window: {self.start_date} -> {self.end_date} ({self.total_days} days)",
            f"Confidence: {self.confidence}",
            f"Rationale: {self.rationale}",
            "",
            "Scheduled Tasks:",
        ]

        for task in self.scheduled_tasks:
            lines.append(
                f"  #{task.sequence_order} {task.task_id} [{task.type}] "
                f"{task.scheduled_start:%Y-%m-%d %H:%M} -> {task.scheduled_end:%Y-%m-%d %H:%M}"
            )
            labels = [
                f"{name}={value}"
                for name, value in (('room', task.room), ('facility', task.facility), ('species', task.species))
                if value
            ]
            if labels:
                lines.append(f"    {', '.join(labels)}")
            lines.append(f"    Labor: {task.assigned_labor:.1f}h")
            if task.assigned_equipment:
                lines.append(f"    Equipment: {', '.join(task.assigned_equipment)}")

        lines.extend([
            "",
            "Metrics:",
            f"  estimated_yield_kg: {format_number(self.estimated_yield_kg)}",
            f"  total_labor_hours: {self.total_labor_hours:.1f}",
        ])

        for equipment_id, percent in self.equipment_utilization.items():
            lines.append(f"  utilization[{equipment_id}]: {percent}%")

        lines.extend([
            "",
            "Risk Factors:",
        ])

        if self.risk_factors:
            for factor in self.risk_factors:
                lines.append(f"  - {factor}")
        else:
            lines.append("  none")

        lines.append("=" * 50)

        return "\n".join(lines)
