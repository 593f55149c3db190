"""Species lifecycle timelines."""

from dataclasses import dataclass
from typing import Dict, Optional, Tuple

from ..errors import ValidationError


@dataclass(frozen=True)
class LifecycleStage:
    """One growth stage of a species and the room conditions it needs."""

    name: str
    duration_days: int
    temp_min: float
    temp_max: float
    humidity_min: float
    humidity_max: float
    co2_min: float
    co2_max: float
    light_required: bool

    def fits_temperature(self, low: Optional[float] = None, high: Optional[float] = None) -> bool:
        """True if the stage's temperature range lies within ``[low, high]``."""
        if low is not None and self.temp_min < low:
            return False
        if high is not None and self.temp_max > high:
            return False
        return True


@dataclass(frozen=True)
class SpeciesTimeline:
    """Deterministic cultivation cycle for a species."""

    species: str
    stages: Tuple[LifecycleStage, ...]
    total_cycle_days: int
    harvest_window_days: int
    cleanup_days: int

    @property
    def colonization_days(self) -> int:
        """Duration of the first (colonization) stage."""
        return self.stages[0].duration_days


def _timeline(species, stages, total, harvest_window, cleanup):
    return SpeciesTimeline(
        species=species,
        stages=tuple(LifecycleStage(*stage) for stage in stages),
        total_cycle_days=total,
        harvest_window_days=harvest_window,
        cleanup_days=cleanup,
    )


# (name, days, temp C min/max, humidity % min/max, CO2 ppm min/max, light)
SPECIES_TIMELINES: Dict[str, SpeciesTimeline] = {
    t.species: t for t in (
        _timeline('oyster', [
            ('colonization', 14, 18, 24, 60, 80, 0, 5000, False),
            ('pinning', 7, 16, 22, 85, 95, 1000, 3000, True),
            ('fruiting', 10, 16, 20, 80, 95, 800, 1500, True),
        ], 31, 3, 2),
        _timeline('shiitake', [
            ('colonization', 21, 18, 24, 60, 75, 0, 5000, False),
            ('fruiting-prep', 7, 12, 18, 80, 90, 1000, 2000, True),
            ('fruiting', 14, 12, 18, 80, 90, 800, 1500, True),
        ], 42, 5, 3),
        _timeline('lions-mane', [
            ('colonization', 14, 20, 26, 60, 75, 0, 5000, False),
            ('fruiting-prep', 5, 18, 24, 85, 95, 1000, 2000, True),
            ('fruiting', 12, 18, 24, 80, 95, 800, 1500, True),
        ], 31, 4, 2),
        _timeline('king-oyster', [
            ('colonization', 16, 18, 24, 65, 80, 0, 5000, False),
            ('pinning', 8, 16, 22, 85, 95, 1000, 3000, True),
            ('fruiting', 12, 14, 20, 80, 95, 800, 1500, True),
        ], 36, 4, 2),
        _timeline('enoki', [
            ('colonization', 12, 20, 26, 60, 75, 0, 5000, False),
            ('fruiting', 10, 10, 16, 85, 95, 1500, 3000, False),
        ], 22, 3, 1),
        _timeline('pioppino', [
            ('colonization', 14, 18, 24, 60, 80, 0, 5000, False),
            ('fruiting', 8, 14, 20, 85, 95, 1000, 2000, True),
        ], 22, 3, 1),
        _timeline('reishi', [
            ('colonization', 28, 22, 28, 60, 75, 0, 5000, False),
            ('fruiting-prep', 7, 20, 26, 85, 95, 1000, 2000, True),
            ('fruiting', 30, 20, 26, 80, 95, 800, 1500, True),
        ], 65, 5, 3),
        _timeline('cordyceps', [
            ('colonization', 21, 18, 24, 60, 75, 0, 5000, False),
            ('fruiting', 14, 16, 22, 85, 95, 1000, 2000, True),
        ], 35, 4, 2),
        _timeline('turkey-tail', [
            ('colonization', 28, 20, 26, 60, 75, 0, 5000, False),
            ('fruiting', 21, 18, 24, 85, 95, 1000, 2000, True),
        ], 49, 5, 2),
        _timeline('chestnut', [
            ('colonization', 18, 18, 24, 65, 80, 0, 5000, False),
            ('fruiting', 12, 14, 20, 85, 95, 1000, 2000, True),
        ], 30, 4, 2),
        _timeline('maitake', [
            ('colonization', 28, 18, 24, 60, 75, 0, 5000, False),
            ('fruiting', 21, 16, 22, 85, 95, 1000, 2000, True),
        ], 49, 5, 3),
        _timeline('chaga', [
            ('colonization', 60, 15, 20, 60, 75, 0, 5000, False),
            ('fruiting', 30, 10, 18, 85, 95, 1000, 2000, False),
        ], 90, 7, 3),
    )
}


def get_species_timeline(species: str) -> SpeciesTimeline:
    """Look up the timeline for ``species``."""
    try:
        return SPECIES_TIMELINES[species]
    except KeyError:
        raise ValidationError(f"Unknown species: {species}") from None
