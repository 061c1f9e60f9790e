#!/usr/bin/env python3
"""
Simple demo script showing seeded scatter generation.
"""

import logging

import numpy as np
from scipy.spatial.distance import pdist

from py_prelude import SeededRNG, configure_logging, polar_copies
from py_prelude.config import Settings


class Peg:
    """Stand-in for a host CAD solid."""

    def __init__(self, angle=0.0):
        self.angle = angle

    def translate(self, x, y):
        return Peg(self.angle)

    def clone(self):
        return Peg(self.angle)

    def rotate(self, angle):
        return Peg(angle)


def main():
    """Demonstrate scatter generation."""
    logging.basicConfig(level=logging.DEBUG, format="%(message)s")
    configure_logging(Settings(log_level="DEBUG", log_format="console"), force=True)

    print("Py-Prelude Scatter Demo")
    print("=" * 40)

    rng = SeededRNG(42)
    for radius in (5, 10, 20):
        points = rng.poisson_disc(100, 100, radius)
        spacing = pdist(points).min() if len(points) > 1 else float("nan")
        print(f"\nradius={radius}: {len(points)} points")
        print(f"  Closest pair: {spacing:.2f}")
        print(f"  Bounding box: {np.ptp(points[:, 0]):.1f} x {np.ptp(points[:, 1]):.1f}")

    count = rng.uniform_int(3, 9)
    pegs = polar_copies(Peg(), count, radius=12)
    print(f"\n{count} pegs at {[round(p.angle, 1) for p in pegs]} degrees")
    print(f"Jittered heights: {[round(rng.gaussian(10, 0.5), 2) for _ in pegs]}")
    print(f"Rivets per peg: {[rng.poisson(3) for _ in pegs]}")
    print(f"Random draws used: {rng.draws}")


if __name__ == "__main__":
    main()
