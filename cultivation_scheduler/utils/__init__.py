"""Utility functions."""

from .config import get_default_config, load_config, load_request
from .datetime_utils import parse_start_date
from .formatting import format_number
from .logging_utils import setup_logging

__all__ = [
    'get_default_config', 'load_config', 'load_request', 'parse_start_date',
    'format_number', 'setup_logging',
]
