"""
Configuration data model for numkit.

Holds the process-wide numeric defaults: the tolerance used when a
comparison is called without an explicit bound, the sinc cutoff, the seed
of the default random generator and the shared logger's level.
"""

from dataclasses import dataclass, asdict
from typing import Any, Dict


EPSILON = 1e-6
SINC_THRESHOLD = 1e-5
DEFAULT_SEED = 5489
DEFAULT_LOG_LEVEL = "WARNING"


@dataclass(frozen=True)
class NumericConfig:
    """
    Numeric defaults.

    Attributes:
        epsilon: Default tolerance bound for to_val/to_zero/equal/is_zero
        sinc_threshold: |x| below which sinc(x) returns exactly 1
        default_seed: Seed of the process-wide default generator
        log_level: Name of the shared logger's minimum LogLevel
    """
    epsilon: float = EPSILON
    sinc_threshold: float = SINC_THRESHOLD
    default_seed: int = DEFAULT_SEED
    log_level: str = DEFAULT_LOG_LEVEL

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)
