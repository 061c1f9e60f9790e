"""
Seeded pseudorandom number generator for CAD scripts.

The raw primitive is a Mulberry32-style 32-bit generator whose output matches
the JavaScript prelude bit for bit, so a script seeded with the same number
produces the same model in both environments. Every distribution below draws
its randomness exclusively through ``uniform()``.
"""

import math
import numbers
from typing import Callable, Optional, Sequence, TypeVar

import numpy as np
import structlog

from .errors import InvalidArgumentError
from .poisson_disc import poisson_disc_sample
from ..utils.random import system_entropy

logger = structlog.get_logger()

T = TypeVar("T")

_UINT32_MASK = 0xFFFFFFFF
_UINT32_RANGE = 4294967296  # 2^32
_STATE_INCREMENT = 0x6D2B79F5


def _uint32(n) -> int:
    """Convert to unsigned 32-bit integer with JavaScript ToInt32 semantics."""
    if isinstance(n, int):
        return n & _UINT32_MASK
    if not math.isfinite(n):
        return 0
    # int() truncates toward zero, like ToInt32
    return int(n) & _UINT32_MASK


def _imul(a: int, b: int) -> int:
    """Low 32 bits of the product, as Math.imul."""
    return (a * b) & _UINT32_MASK


def _mix(state) -> int:
    """Avalanche the 32-bit state into an output word."""
    t = _uint32(state)
    t = _imul(t ^ (t >> 15), t | 1)
    t ^= (t + _imul(t ^ (t >> 7), t | 61)) & _UINT32_MASK
    return (t ^ (t >> 14)) & _UINT32_MASK


class SeededRNG:
    """
    Deterministic generator with uniform, integer, choice, Gaussian, Poisson
    and Poisson-disc sampling.

    Any real number is accepted as a seed. Integer seeds are kept as 32-bit
    words; fractional seeds keep their fraction, which affects the sequence
    the same way it does in the JavaScript prelude.

    Not thread-safe: give each concurrent consumer its own instance.
    """

    def __init__(self, seed: Optional[float] = None, entropy: Optional[Callable[[], float]] = None):
        """
        Initialize with an explicit seed or from an entropy source.

        Args:
            seed: Initial state. Any real number, used verbatim.
            entropy: Callable returning a float in [0, 1), used only when
                ``seed`` is None. Defaults to OS randomness.
        """
        if seed is None:
            source = entropy if entropy is not None else system_entropy
            state = source() * _UINT32_MASK
            seed_source = "entropy"
        elif isinstance(seed, numbers.Integral):
            state = int(seed)
            seed_source = "explicit"
        elif isinstance(seed, numbers.Real):
            state = float(seed)
            seed_source = "explicit"
        else:
            raise TypeError(f"Seed must be a real number, got {type(seed).__name__}")

        self._state = state
        self._draws = 0
        logger.debug("Seeded RNG initialized", seed_source=seed_source, state=state)

    @property
    def state(self):
        """Current generator state (read-only)."""
        return self._state

    @property
    def draws(self) -> int:
        """Number of uniform() calls made so far."""
        return self._draws

    def uniform(self) -> float:
        """Generate next random number in [0, 1)."""
        state = self._state + _STATE_INCREMENT
        if isinstance(state, int):
            state &= _UINT32_MASK
        elif state >= _UINT32_RANGE:
            # fmod is exact and keeps the sign, so truncation is unchanged mod 2^32
            state = math.fmod(state, _UINT32_RANGE)
        self._state = state
        self._draws += 1
        return _mix(state) / _UINT32_RANGE

    def uniform_int(self, min_val: float, max_val: float) -> int:
        """
        Random integer in [min_val, max_val).

        No clamping: when ``max_val <= min_val`` the result falls at or below
        ``min_val``. An infinite bound has no integer result and raises
        OverflowError; a NaN bound raises ValueError.
        """
        return math.floor(self.uniform() * (max_val - min_val) + min_val)

    def choice(self, items: Sequence[T]) -> T:
        """Choose a random element from a non-empty sequence."""
        if len(items) == 0:
            raise InvalidArgumentError("Cannot choose from an empty sequence")
        return items[self.uniform_int(0, len(items))]

    def gaussian(self, mean: float = 0.0, sd: float = 1.0) -> float:
        """
        Normally distributed sample via the Box-Muller transform.

        Uses two uniform draws per call and keeps only the cosine branch.
        """
        u = 1.0 - self.uniform()  # (0, 1], so the log is defined
        v = self.uniform()
        z = math.sqrt(-2.0 * math.log(u)) * math.cos(2.0 * math.pi * v)
        return z * sd + mean

    def poisson(self, lam: float) -> int:
        """
        Poisson distributed sample using Knuth's algorithm.

        ``lam <= 0`` returns 0 after a single draw.
        """
        limit = math.exp(-lam)
        k = 0
        p = 1.0
        while True:
            k += 1
            p *= self.uniform()
            if not p > limit:
                break
        return k - 1

    def poisson_disc(
        self, width: float, height: float, radius: float, k: Optional[int] = None
    ) -> np.ndarray:
        """
        Blue-noise points with a minimum spacing (Bridson's algorithm).

        Args:
            width: Width of the sampling area
            height: Height of the sampling area
            radius: Minimum distance between points
            k: Candidate attempts per active point before it is retired.
                Defaults to ``settings.poisson_disc_attempts``.

        Returns:
            Array of shape (n, 2) with [x, y] rows in placement order
        """
        return poisson_disc_sample(self, width, height, radius, k)
