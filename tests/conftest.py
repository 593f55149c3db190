"""Shared fixtures for the scheduler test suite."""

import pytest

from cultivation_scheduler.engine.scheduler import SchedulingEngine
from cultivation_scheduler.models.task import (
    ConstraintSet,
    HarvestTarget,
    WorkflowRequest,
    WorkflowTask,
)
from cultivation_scheduler.utils.config import get_default_config


def make_task(task_id, duration=1.0, depends_on=(), labor=0.0, **kwargs):
    """Build a WorkflowTask with terse defaults."""
    return WorkflowTask(
        task_id=task_id,
        type=kwargs.pop('type', 'misting'),
        duration_hours=duration,
        depends_on=tuple(depends_on),
        labor_hours=labor,
        **kwargs,
    )


def make_request(labor_hours_available=8.0, equipment=(), targets=None, **kwargs):
    """Build a WorkflowRequest with terse defaults."""
    if targets is None:
        targets = (HarvestTarget('oyster', 40), HarvestTarget('lions-mane', 20))
    return WorkflowRequest(
        request_id=kwargs.pop('request_id', 'req-test'),
        harvest_targets=tuple(targets),
        constraint_set=ConstraintSet(
            labor_hours_available=labor_hours_available,
            equipment_available=tuple(equipment),
            substrate_limit_kg=kwargs.pop('substrate_limit_kg', 100.0),
            min_room_temperature=kwargs.pop('min_room_temperature', None),
            max_room_temperature=kwargs.pop('max_room_temperature', None),
        ),
        **kwargs,
    )


@pytest.fixture
def config():
    return get_default_config()


@pytest.fixture
def engine(config):
    return SchedulingEngine(config)


@pytest.fixture
def request_8h():
    return make_request(labor_hours_available=8.0, equipment=('autoclave-1', 'fridge-1'))
