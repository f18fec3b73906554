"""
Seeded random number generation for numkit.

SeededRNG owns its generator state, so independent streams never
interfere and tests get the same sequence on every run. A process-wide
default instance backs the module-level draw functions (rand_i, rand_f,
...); those functions serialize access through a lock. SeededRNG
instances themselves are single-owner: share one across threads only
behind your own lock, or give each thread its own stream (RNGManager).
"""

import random
import threading
import time
from typing import Any, Dict, Iterable, List, Optional, TypeVar

from ..config.models import DEFAULT_SEED
from ..output.debug_logger import get_logger

T = TypeVar('T')

INT_MAX = 0x7FFFFFFF
UINT_MAX = 0xFFFFFFFF

_FLOAT_BITS = 24
_DOUBLE_BITS = 53


class SeededRNG:
    """
    A seeded random number generator.

    Wraps random.Random (Mersenne Twister) with explicit seed management.
    Without a seed the generator starts from DEFAULT_SEED, so two fresh
    instances always produce identical sequences. Call
    set_seed_by_cur_time() for run-to-run variation.

    Attributes:
        seed: The seed the generator was last (re)seeded with
        name: Name for debugging

    Example:
        >>> a, b = SeededRNG(), SeededRNG()
        >>> [a.rand_ui() for _ in range(3)] == [b.rand_ui() for _ in range(3)]
        True
        >>> 0.0 <= a.rand_f_exclude1() < 1.0
        True
    """

    def __init__(self, seed: Optional[int] = None, name: str = "default"):
        """
        Initialize the RNG.

        Args:
            seed: Integer seed. If None, uses DEFAULT_SEED.
            name: Name for this RNG stream (for debugging)
        """
        self.name = name
        self._random = random.Random()
        self.seed = DEFAULT_SEED if seed is None else seed
        self._random.seed(self.seed)
        self._call_count = 0

    # =========================================================================
    # Draws
    # =========================================================================

    def rand_i(self) -> int:
        """Return a signed integer in [-0x7FFFFFFF, 0x7FFFFFFF]."""
        self._call_count += 1
        return self._random.randint(-INT_MAX, INT_MAX)

    def rand_ui(self) -> int:
        """Return an unsigned integer in [0, 0xFFFFFFFF]."""
        self._call_count += 1
        return self._random.getrandbits(32)

    def rand_f(self) -> float:
        """
        Return a float in [0.0, 1.0], both ends included.

        Resolution is single precision (2**24 evenly spaced values).
        """
        self._call_count += 1
        return self._random.getrandbits(_FLOAT_BITS) / float((1 << _FLOAT_BITS) - 1)

    def rand_f_exclude1(self) -> float:
        """Return a float in [0.0, 1.0) at single precision."""
        self._call_count += 1
        return self._random.getrandbits(_FLOAT_BITS) / float(1 << _FLOAT_BITS)

    def rand_d(self) -> float:
        """Return a double in [0.0, 1.0], both ends included."""
        self._call_count += 1
        return self._random.getrandbits(_DOUBLE_BITS) / float((1 << _DOUBLE_BITS) - 1)

    def permute(self, items: Iterable[T]) -> List[T]:
        """
        Return a uniformly shuffled copy of items.

        Every ordering is equally likely (Fisher-Yates). The input is
        not modified.
        """
        self._call_count += 1
        result = list(items)
        self._random.shuffle(result)
        return result

    # =========================================================================
    # Seeding and State
    # =========================================================================

    def set_seed_by_cur_time(self) -> int:
        """
        Reseed from the wall clock.

        Returns:
            The seed that was applied
        """
        seed = time.time_ns()
        self.reset(seed)
        get_logger().log_reseed(self.name, seed, "time")
        return seed

    def reset(self, seed: Optional[int] = None) -> None:
        """
        Reset the RNG to its initial state or a new seed.

        Args:
            seed: New seed to use. If None, uses the current seed.
        """
        if seed is not None:
            self.seed = seed
        self._random.seed(self.seed)
        self._call_count = 0

    @property
    def call_count(self) -> int:
        """Number of draws since the last (re)seed."""
        return self._call_count

    def get_state(self) -> Dict[str, Any]:
        """
        Get the current state of the RNG for serialization.

        Returns:
            Dictionary containing RNG state
        """
        return {
            'name': self.name,
            'seed': self.seed,
            'call_count': self._call_count,
            'state': self._random.getstate()
        }

    def set_state(self, state: Dict[str, Any]) -> None:
        """
        Restore RNG state from a previous get_state() call.

        Args:
            state: State dictionary from get_state()
        """
        self.name = state['name']
        self.seed = state['seed']
        self._call_count = state['call_count']
        self._random.setstate(state['state'])

    def __repr__(self) -> str:
        return f"SeededRNG(seed={self.seed}, name='{self.name}', calls={self._call_count})"


class RNGManager:
    """
    Manages multiple named RNG streams.

    Each stream's seed is derived from a master generator in the order
    the streams are first requested, so a fixed master seed and request
    order reproduce every stream. Handing one stream to each thread
    avoids sharing a generator.

    Example:
        >>> manager = RNGManager(master_seed=42)
        >>> worker = manager.get('worker-1')
        >>> worker is manager.get('worker-1')
        True
    """

    def __init__(self, master_seed: Optional[int] = None):
        """
        Initialize the RNG manager with a master seed.

        Args:
            master_seed: Seed used to derive seeds for all streams
        """
        self._master = SeededRNG(seed=master_seed, name="master")
        self._streams: Dict[str, SeededRNG] = {}
        self.master_seed = self._master.seed

    def get(self, name: str) -> SeededRNG:
        """Get or create a named RNG stream."""
        if name not in self._streams:
            derived_seed = self._master.rand_ui()
            self._streams[name] = SeededRNG(seed=derived_seed, name=name)
        return self._streams[name]

    def reset_all(self) -> None:
        """Reset the master and forget all derived streams."""
        self._master.reset()
        self._streams.clear()

    def get_state(self) -> Dict[str, Any]:
        """Get state of all RNG streams."""
        return {
            'master_seed': self.master_seed,
            'master': self._master.get_state(),
            'streams': {name: rng.get_state() for name, rng in self._streams.items()}
        }

    def __repr__(self) -> str:
        streams = ', '.join(self._streams.keys())
        return f"RNGManager(master_seed={self.master_seed}, streams=[{streams}])"


# =============================================================================
# Process-wide default generator
# =============================================================================

_default: Optional[SeededRNG] = None
_lock = threading.RLock()


def default_rng() -> SeededRNG:
    """
    Return the process-wide generator, creating it on first use.

    It is seeded from the configured default_seed. The same object is
    returned for the life of the process; reseeding never replaces it.
    """
    global _default
    with _lock:
        if _default is None:
            from ..config import get_config
            seed = get_config().default_seed
            _default = SeededRNG(seed=seed, name="global")
            get_logger().log_reseed(_default.name, seed, "default")
        return _default


def reset_default_rng(seed: Optional[int] = None) -> SeededRNG:
    """Rewind the default generator to its seed (or a new one)."""
    with _lock:
        rng = default_rng()
        rng.reset(seed)
        get_logger().log_reseed(rng.name, rng.seed, "reset")
        return rng


def rand_i() -> int:
    """Signed integer in [-0x7FFFFFFF, 0x7FFFFFFF] from the default generator."""
    with _lock:
        return default_rng().rand_i()


def rand_ui() -> int:
    """Unsigned integer in [0, 0xFFFFFFFF] from the default generator."""
    with _lock:
        return default_rng().rand_ui()


def rand_f() -> float:
    """Float in [0.0, 1.0] from the default generator."""
    with _lock:
        return default_rng().rand_f()


def rand_f_exclude1() -> float:
    """Float in [0.0, 1.0) from the default generator."""
    with _lock:
        return default_rng().rand_f_exclude1()


def rand_d() -> float:
    """Double in [0.0, 1.0] from the default generator."""
    with _lock:
        return default_rng().rand_d()


def rand_set_seed_by_cur_time() -> int:
    """Reseed the default generator from the wall clock; returns the seed."""
    with _lock:
        return default_rng().set_seed_by_cur_time()


def permute(items: Iterable[T]) -> List[T]:
    """Uniformly shuffled copy of items, drawn from the default generator."""
    with _lock:
        return default_rng().permute(items)
