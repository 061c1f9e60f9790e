"""
Entropy sources for default seeding.

A generator constructed without a seed asks one of these callables for a
float in [0, 1). Tests pass ``constant_entropy`` to make the default-seed
path reproducible; nothing here holds process-wide generator state.
"""

import os
from typing import Callable


def system_entropy() -> float:
    """
    Draw a float in [0, 1) from the operating system's random source.

    Returns:
        Value with 32 bits of entropy
    """
    return int.from_bytes(os.urandom(4), "little") / 4294967296


def constant_entropy(value: float) -> Callable[[], float]:
    """
    Build an entropy source that always returns ``value``.

    Args:
        value: Float in [0, 1)

    Returns:
        Zero-argument callable
    """
    if not 0.0 <= value < 1.0:
        raise ValueError(f"Entropy value must be in [0, 1), got {value}")

    def entropy() -> float:
        return value

    return entropy
