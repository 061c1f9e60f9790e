"""
Poisson-disc point sampling (Bridson's algorithm).

Produces blue-noise scatter positions: every pair of points is at least
``radius`` apart and the area is filled until no active point can spawn a
new neighbor. A background grid with cells of side ``radius / sqrt(2)`` holds
at most one point per cell, so a 5x5 block of cells around a candidate is
enough to certify its spacing.
"""

import math
import numbers
from typing import List, Optional, Tuple

import numpy as np
import structlog
from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator

from .errors import InvalidArgumentError
from ..config import settings

logger = structlog.get_logger()


class PoissonDiscConfig(BaseModel):
    """Validated parameters for one sampling run."""

    model_config = ConfigDict(frozen=True)

    width: float = Field(..., gt=0, allow_inf_nan=False, description="Width of the sampling area")
    height: float = Field(..., gt=0, allow_inf_nan=False, description="Height of the sampling area")
    radius: float = Field(..., gt=0, allow_inf_nan=False, description="Minimum distance between points")
    k: int = Field(default=30, gt=0, description="Attempts before an active point is retired")

    @field_validator("width", "height", "radius", mode="before")
    @classmethod
    def _require_real(cls, value):
        # bools and numeric strings would otherwise be coerced
        if isinstance(value, bool) or not isinstance(value, numbers.Real):
            raise ValueError(f"must be a real number, got {type(value).__name__}")
        try:
            return float(value)
        except OverflowError as e:
            raise ValueError("must be a finite number") from e

    @field_validator("k", mode="before")
    @classmethod
    def _require_integer(cls, value):
        if isinstance(value, bool) or not isinstance(value, numbers.Integral):
            raise ValueError(f"must be an integer, got {type(value).__name__}")
        return int(value)

    @property
    def cell_size(self) -> float:
        return self.radius / math.sqrt(2)

    @property
    def grid_shape(self) -> Tuple[int, int]:
        """Grid dimensions as (rows, columns)."""
        return (
            math.ceil(self.height / self.cell_size),
            math.ceil(self.width / self.cell_size),
        )


def build_config(width: float, height: float, radius: float, k: int) -> PoissonDiscConfig:
    """
    Validate sampler arguments.

    Raises:
        InvalidArgumentError: if a dimension or the radius is not a positive
            finite number, ``k`` is not a positive integer, or the grid would
            exceed ``settings.max_grid_cells``
    """
    try:
        config = PoissonDiscConfig(width=width, height=height, radius=radius, k=k)
    except ValidationError as e:
        raise InvalidArgumentError(f"Invalid Poisson disc parameters: {e}") from e

    # Positive finite inputs can still overflow, e.g. a subnormal radius
    ratios = (config.height / config.cell_size, config.width / config.cell_size)
    if not all(math.isfinite(ratio) for ratio in ratios):
        raise InvalidArgumentError(
            f"Poisson disc grid for {config.width}x{config.height} at radius "
            f"{config.radius} exceeds the limit of {settings.max_grid_cells}"
        )

    rows, cols = config.grid_shape
    if rows * cols > settings.max_grid_cells:
        raise InvalidArgumentError(
            f"Poisson disc grid of {cols}x{rows} cells exceeds the limit of "
            f"{settings.max_grid_cells}; increase radius or max_grid_cells"
        )
    return config


class _SpatialGrid:
    """Point coordinates bucketed by cell; empty cells hold NaN."""

    def __init__(self, config: PoissonDiscConfig):
        self.cell_size = config.cell_size
        self.rows, self.cols = config.grid_shape
        self.xs = np.full((self.rows, self.cols), np.nan)
        self.ys = np.full((self.rows, self.cols), np.nan)

    def cell_of(self, x: float, y: float) -> Tuple[int, int]:
        # x < width can still round onto the far edge when width is a multiple of cell_size
        i = min(math.floor(x / self.cell_size), self.cols - 1)
        j = min(math.floor(y / self.cell_size), self.rows - 1)
        return i, j

    def insert(self, x: float, y: float) -> None:
        i, j = self.cell_of(x, y)
        self.xs[j, i] = x
        self.ys[j, i] = y

    def has_neighbor_within(self, x: float, y: float, radius: float) -> bool:
        """Check the 5x5 block of cells around (x, y) for a point closer than radius."""
        i, j = self.cell_of(x, y)
        i0, i1 = max(i - 2, 0), min(i + 3, self.cols)
        j0, j1 = max(j - 2, 0), min(j + 3, self.rows)

        dx = x - self.xs[j0:j1, i0:i1]
        dy = y - self.ys[j0:j1, i0:i1]
        # NaN distances compare False, so empty cells never reject
        return bool(np.any(dx * dx + dy * dy < radius * radius))


def poisson_disc_sample(
    rng, width: float, height: float, radius: float, k: Optional[int] = None
) -> np.ndarray:
    """
    Generate points using Poisson disc sampling.

    The draw order is fixed (seed point x then y; per iteration one active
    index, then angle and distance for each candidate), so a given generator
    state always yields the same point list.

    Args:
        rng: Generator exposing ``uniform()`` and ``uniform_int(min, max)``
        width: Width of the sampling area
        height: Height of the sampling area
        radius: Minimum distance between points
        k: Number of attempts before rejecting an active point.
            Defaults to ``settings.poisson_disc_attempts``.

    Returns:
        Array of shape (n, 2) with [x, y] rows, n >= 1
    """
    if k is None:
        k = settings.poisson_disc_attempts
    config = build_config(width, height, radius, k)
    width, height, radius, k = config.width, config.height, config.radius, config.k

    grid = _SpatialGrid(config)
    points: List[Tuple[float, float]] = []
    active: List[int] = []

    def is_valid(x: float, y: float) -> bool:
        if x < 0 or x >= width or y < 0 or y >= height:
            return False
        return not grid.has_neighbor_within(x, y, radius)

    def place(x: float, y: float) -> None:
        grid.insert(x, y)
        active.append(len(points))
        points.append((x, y))

    place(rng.uniform() * width, rng.uniform() * height)

    iterations = 0
    while active:
        iterations += 1
        active_slot = rng.uniform_int(0, len(active))
        px, py = points[active[active_slot]]

        for _ in range(k):
            angle = rng.uniform() * 2 * math.pi
            r = radius + rng.uniform() * radius
            x = px + r * math.cos(angle)
            y = py + r * math.sin(angle)

            if is_valid(x, y):
                place(x, y)
                break
        else:
            # No room left around this point
            active.pop(active_slot)

    logger.debug(
        f"Poisson disc sampling placed {len(points)} points",
        grid_rows=grid.rows,
        grid_cols=grid.cols,
        iterations=iterations,
    )
    return np.array(points, dtype=np.float64)
