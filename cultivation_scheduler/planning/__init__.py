"""Workflow task generation."""

from .generator import WorkflowTaskGenerator
from .species import SPECIES_TIMELINES, get_species_timeline

__all__ = ['WorkflowTaskGenerator', 'SPECIES_TIMELINES', 'get_species_timeline']
