"""
numkit

A small numeric toolkit used as a foundation layer by geometry and
graphics code: tolerance comparisons, interpolation and angle helpers,
a seedable random source, sequence statistics, clamping, lenient and
strict number parsing, and a normalized sinc.

Example:
    >>> from numkit import equal, lerp, variance
    >>> equal(0.1 + 0.2, 0.3)
    True
    >>> lerp(0.0, 4.0, 0.25)
    1.0
    >>> variance([1, 2, 3]) == 2 / 3
    True
"""

__version__ = "0.1.0"

from .utils import (
    EPSILON,
    PI,
    INV_PI,
    to_val,
    to_zero,
    equal,
    is_zero,
    lerp,
    radians,
    degrees,
    sgn,
    clamp,
    sinc,
    SeededRNG,
    RNGManager,
    default_rng,
    rand_i,
    rand_ui,
    rand_f,
    rand_f_exclude1,
    rand_d,
    rand_set_seed_by_cur_time,
    mean,
    variance,
    minimum,
    maximum,
    permute,
    cast_to,
    parse_number,
    ValidationError,
    EmptySequenceError,
)
from .config import NumericConfig, ConfigError, load_config, get_config, set_config
from .output import DebugLogger, LogLevel, get_logger

__all__ = [
    'EPSILON',
    'PI',
    'INV_PI',
    'to_val',
    'to_zero',
    'equal',
    'is_zero',
    'lerp',
    'radians',
    'degrees',
    'sgn',
    'clamp',
    'sinc',
    'SeededRNG',
    'RNGManager',
    'default_rng',
    'rand_i',
    'rand_ui',
    'rand_f',
    'rand_f_exclude1',
    'rand_d',
    'rand_set_seed_by_cur_time',
    'mean',
    'variance',
    'minimum',
    'maximum',
    'permute',
    'cast_to',
    'parse_number',
    'ValidationError',
    'EmptySequenceError',
    'NumericConfig',
    'ConfigError',
    'load_config',
    'get_config',
    'set_config',
    'DebugLogger',
    'LogLevel',
    'get_logger',
]
