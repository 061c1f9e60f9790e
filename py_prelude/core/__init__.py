"""
Core prelude functionality.
"""

from .errors import InvalidArgumentError
from .seeded_rng import SeededRNG
from .poisson_disc import PoissonDiscConfig, poisson_disc_sample
from .vector import (add, subtract, dot_product, scale, magnitude, normalize,
                     polar_to_cartesian, point_along)
from .shapes import fuse_all, polar_copies, draw_points

__all__ = ['InvalidArgumentError', 'SeededRNG', 'PoissonDiscConfig', 'poisson_disc_sample',
           'add', 'subtract', 'dot_product', 'scale', 'magnitude', 'normalize',
           'polar_to_cartesian', 'point_along',
           'fuse_all', 'polar_copies', 'draw_points']
