"""Configuration management."""

import json
import yaml
from pathlib import Path
from typing import Dict, Any

from ..errors import ValidationError
from ..models.task import WorkflowRequest


def _load_file(path: Path) -> Any:
    """Load a YAML or JSON document from ``path``."""
    with open(path, 'r') as f:
        if path.suffix.lower() in ['.yaml', '.yml']:
            return yaml.safe_load(f)
        elif path.suffix.lower() == '.json':
            return json.load(f)
        else:
            raise ValueError(f"Unsupported config file format: {path.suffix}")


def load_config(config_path: str) -> Dict[str, Any]:
    """Load configuration from YAML or JSON file."""
    path = Path(config_path)

    if not path.exists():
        raise FileNotFoundError(f"Config file not found: {config_path}")

    return _load_file(path) or {}


def load_request(request_path: str) -> WorkflowRequest:
    """Load a workflow request from YAML or JSON file."""
    path = Path(request_path)

    if not path.exists():
        raise FileNotFoundError(f"Request file not found: {request_path}")

    data = _load_file(path)
    if not isinstance(data, dict):
        raise ValidationError(f"Request file must contain a mapping: {request_path}")

    return WorkflowRequest.from_dict(data)


def get_default_config() -> Dict[str, Any]:
    """Get default configuration."""
    return {
        'scheduling': {
            'day_start_hour': 6,
            'working_hours_per_day': 8,
            'strict_dependencies': False,
            'room_count': 0,  # 0 disables room distribution
        },
        'risk': {
            'labor_overload_factor': 1.5,
            'max_species_per_day': 3,
        },
        'confidence': {
            'baseline': 85,
            'penalty': 15,
            'labor_ratio_threshold': 1.2,
        },
    }
