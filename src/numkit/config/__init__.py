"""
Configuration loading and data model for numkit.
"""

from .models import NumericConfig, EPSILON, SINC_THRESHOLD, DEFAULT_SEED
from .loader import (
    ConfigError,
    ConfigLoader,
    load_config,
    validate_config,
    get_config,
    set_config,
    reset_config,
)

__all__ = [
    'NumericConfig',
    'EPSILON',
    'SINC_THRESHOLD',
    'DEFAULT_SEED',
    'ConfigError',
    'ConfigLoader',
    'load_config',
    'validate_config',
    'get_config',
    'set_config',
    'reset_config',
]
