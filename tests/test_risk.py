"""Tests for the schedule risk scans."""

from datetime import datetime, timedelta

from cultivation_scheduler.engine.risk import identify_risk_factors
from cultivation_scheduler.models.proposal import ScheduledTask

from conftest import make_request


def _scheduled(task_id, start, hours=1, labor=0.0, species=None):
    return ScheduledTask(
        task_id=task_id,
        type='harvest',
        scheduled_start=start,
        scheduled_end=start + timedelta(hours=hours),
        sequence_order=1,
        species=species,
        assigned_labor=labor,
    )


DAY_1 = datetime(2024, 1, 1, 6)
DAY_2 = datetime(2024, 1, 2, 6)


class TestLaborOverload:
    """Daily labor above 1.5x availability."""

    def test_overloaded_day_reported(self):
        tasks = [_scheduled(f"t{i}", DAY_1 + timedelta(hours=i), labor=10) for i in range(10)]

        factors = identify_risk_factors(tasks, make_request(labor_hours_available=8))

        assert factors == ["Day 2024-01-01: labor overload (100.0h exceeds typical 8h)"]

    def test_moderate_load_not_reported(self):
        # 10 x 5h = 50h is well over 12h; 2 x 5h = 10h is not
        tasks = [_scheduled('a', DAY_1, labor=5), _scheduled('b', DAY_1, labor=5)]

        assert identify_risk_factors(tasks, make_request(labor_hours_available=8)) == []

    def test_threshold_is_strict(self):
        tasks = [_scheduled('a', DAY_1, labor=12)]

        assert identify_risk_factors(tasks, make_request(labor_hours_available=8)) == []

    def test_days_evaluated_independently(self):
        tasks = [
            _scheduled('a', DAY_1, labor=7),
            _scheduled('b', DAY_2, labor=7),
            _scheduled('c', DAY_2 + timedelta(hours=3), labor=7),
        ]

        factors = identify_risk_factors(tasks, make_request(labor_hours_available=8))

        assert factors == ["Day 2024-01-02: labor overload (14.0h exceeds typical 8h)"]

    def test_configurable_factor(self):
        tasks = [_scheduled('a', DAY_1, labor=9)]

        factors = identify_risk_factors(tasks, make_request(labor_hours_available=8), overload_factor=1.0)

        assert len(factors) == 1

    def test_large_availability_printed_without_exponent(self):
        tasks = [_scheduled('a', DAY_1, labor=3000000)]

        factors = identify_risk_factors(tasks, make_request(labor_hours_available=1500000))

        assert factors == ["Day 2024-01-01: labor overload (3000000.0h exceeds typical 1500000h)"]


class TestSpeciesColocation:
    """More than three species active on one day."""

    def test_four_species_reported(self):
        species = ['oyster', 'shiitake', 'reishi', 'enoki']
        tasks = [_scheduled(f"t{i}", DAY_1 + timedelta(hours=i), species=s) for i, s in enumerate(species)]

        factors = identify_risk_factors(tasks, make_request())

        assert factors == ["Day 2024-01-01: 4 active species (potential contamination cross-risk)"]

    def test_three_species_and_repeats_not_reported(self):
        species = ['oyster', 'shiitake', 'reishi', 'oyster', None]
        tasks = [_scheduled(f"t{i}", DAY_1 + timedelta(hours=i), species=s) for i, s in enumerate(species)]

        assert identify_risk_factors(tasks, make_request()) == []

    def test_species_split_across_days(self):
        tasks = [
            _scheduled('a', DAY_1, species='oyster'),
            _scheduled('b', DAY_1, species='shiitake'),
            _scheduled('c', DAY_2, species='reishi'),
            _scheduled('d', DAY_2, species='enoki'),
        ]

        assert identify_risk_factors(tasks, make_request()) == []

    def test_labor_factors_listed_before_species_factors(self):
        species = ['oyster', 'shiitake', 'reishi', 'enoki']
        tasks = [
            _scheduled(f"t{i}", DAY_1 + timedelta(hours=i), labor=5, species=s)
            for i, s in enumerate(species)
        ]

        factors = identify_risk_factors(tasks, make_request(labor_hours_available=8))

        assert factors == [
            "Day 2024-01-01: labor overload (20.0h exceeds typical 8h)",
            "Day 2024-01-01: 4 active species (potential contamination cross-risk)",
        ]

    def test_scan_does_not_mutate_schedule(self):
        tasks = [_scheduled('a', DAY_1, labor=50, species='oyster')]
        before = list(tasks)

        identify_risk_factors(tasks, make_request())

        assert tasks == before
