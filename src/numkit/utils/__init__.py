"""
Numeric utility functions for numkit.
"""

from .math_utils import (
    EPSILON,
    PI,
    INV_PI,
    SINC_THRESHOLD,
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
)
from .rng import (
    SeededRNG,
    RNGManager,
    default_rng,
    reset_default_rng,
    rand_i,
    rand_ui,
    rand_f,
    rand_f_exclude1,
    rand_d,
    rand_set_seed_by_cur_time,
)
from .stats import (
    mean,
    variance,
    std_dev,
    coefficient_of_variation,
    minimum,
    maximum,
    permute,
)
from .parsing import cast_to, parse_number, ParseResult, ParseErrorKind, ParseError
from .validators import ValidationError, EmptySequenceError

__all__ = [
    'EPSILON',
    'PI',
    'INV_PI',
    'SINC_THRESHOLD',
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
    'reset_default_rng',
    'rand_i',
    'rand_ui',
    'rand_f',
    'rand_f_exclude1',
    'rand_d',
    'rand_set_seed_by_cur_time',
    'mean',
    'variance',
    'std_dev',
    'coefficient_of_variation',
    'minimum',
    'maximum',
    'permute',
    'cast_to',
    'parse_number',
    'ParseResult',
    'ParseErrorKind',
    'ParseError',
    'ValidationError',
    'EmptySequenceError',
]
