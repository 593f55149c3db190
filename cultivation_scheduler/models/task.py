"""Workflow task and request data models."""

import math
from dataclasses import dataclass
from typing import Any, Dict, Optional, Tuple

from ..errors import ValidationError


def _id_tuple(value: Any, field_name: str) -> Tuple[str, ...]:
    """Coerce a YAML/JSON list of ids (or a single id) into a tuple of strings."""
    if value is None:
        return ()
    if isinstance(value, str):
        return (value,)
    if isinstance(value, (list, tuple)):
        return tuple(str(item) for item in value)
    raise ValidationError(f"{field_name} must be a list of ids, got {type(value).__name__}")


def _optional_float(value: Any) -> Optional[float]:
    return None if value is None else float(value)


@dataclass(frozen=True)
class WorkflowTask:
    """A unit of cultivation work with a duration and optional predecessors."""

    task_id: str
    type: str
    duration_hours: float
    depends_on: Tuple[str, ...] = ()
    room: Optional[str] = None
    facility: Optional[str] = None
    species: Optional[str] = None
    stage: Optional[str] = None
    labor_hours: float = 0.0
    equipment: Tuple[str, ...] = ()
    rationale: str = ""
    priority: str = "normal"

    def __post_init__(self):
        """Validate fields and normalize sequences to tuples."""
        if not self.task_id:
            raise ValidationError("Task id must be a non-empty string")
        if (
            self.duration_hours is None
            or not math.isfinite(self.duration_hours)
            or self.duration_hours <= 0
        ):
            raise ValidationError(
                f"Task {self.task_id}: duration_hours must be positive, got {self.duration_hours}"
            )
        if not math.isfinite(self.labor_hours) or self.labor_hours < 0:
            raise ValidationError(
                f"Task {self.task_id}: labor_hours must not be negative, got {self.labor_hours}"
            )
        # Frozen dataclass, so assign through object.__setattr__
        object.__setattr__(self, 'depends_on', tuple(dict.fromkeys(self.depends_on or ())))
        object.__setattr__(self, 'equipment', tuple(self.equipment or ()))

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "WorkflowTask":
        """Build a task from a plain mapping (YAML/JSON input)."""
        try:
            return cls(
                task_id=str(data['task_id']),
                type=data.get('type', 'unspecified'),
                duration_hours=float(data['duration_hours']),
                depends_on=_id_tuple(data.get('depends_on'), 'depends_on'),
                room=data.get('room'),
                facility=data.get('facility'),
                species=data.get('species'),
                stage=data.get('stage'),
                labor_hours=float(data.get('labor_hours', 0.0)),
                equipment=_id_tuple(data.get('equipment'), 'equipment'),
                rationale=data.get('rationale', ''),
                priority=data.get('priority', 'normal'),
            )
        except KeyError as e:
            raise ValidationError(f"Task is missing required field {e}") from e
        except (TypeError, ValueError) as e:
            raise ValidationError(f"Task {data.get('task_id')}: invalid value: {e}") from e


@dataclass(frozen=True)
class HarvestTarget:
    """Target yield for one species."""

    species: str
    target_yield_kg: float


@dataclass(frozen=True)
class ConstraintSet:
    """Facility constraints the schedule is planned against."""

    labor_hours_available: float
    equipment_available: Tuple[str, ...] = ()
    substrate_limit_kg: float = 0.0
    max_room_temperature: Optional[float] = None
    min_room_temperature: Optional[float] = None


@dataclass(frozen=True)
class WorkflowRequest:
    """Read-only planning input: harvest targets plus facility constraints."""

    request_id: str
    harvest_targets: Tuple[HarvestTarget, ...]
    constraint_set: ConstraintSet
    time_window_days: int = 30
    facility_ids: Tuple[str, ...] = ()
    species_selection: Tuple[str, ...] = ()
    source: str = "user-submitted"
    prioritize_yield: bool = False
    prioritize_contamination_mitigation: bool = False
    prioritize_labor: bool = False

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "WorkflowRequest":
        """Build a request from a plain mapping (YAML/JSON input)."""
        try:
            constraints = data['constraint_set']
            constraint_set = ConstraintSet(
                labor_hours_available=float(constraints['labor_hours_available']),
                equipment_available=_id_tuple(
                    constraints.get('equipment_available'), 'equipment_available'
                ),
                substrate_limit_kg=float(constraints.get('substrate_limit_kg', 0.0)),
                max_room_temperature=_optional_float(constraints.get('max_room_temperature')),
                min_room_temperature=_optional_float(constraints.get('min_room_temperature')),
            )
            targets = tuple(
                HarvestTarget(species=t['species'], target_yield_kg=float(t['target_yield_kg']))
                for t in data.get('harvest_targets') or ()
            )
            time_window_days = int(data.get('time_window_days', 30))
        except (KeyError, TypeError, ValueError) as e:
            raise ValidationError(f"Malformed workflow request: {e}") from e

        return cls(
            request_id=str(data.get('request_id', 'request')),
            harvest_targets=targets,
            constraint_set=constraint_set,
            time_window_days=time_window_days,
            facility_ids=_id_tuple(data.get('facility_ids'), 'facility_ids'),
            species_selection=_id_tuple(data.get('species_selection'), 'species_selection'),
            source=data.get('source', 'user-submitted'),
            prioritize_yield=bool(data.get('prioritize_yield', False)),
            prioritize_contamination_mitigation=bool(
                data.get('prioritize_contamination_mitigation', False)
            ),
            prioritize_labor=bool(data.get('prioritize_labor', False)),
        )
