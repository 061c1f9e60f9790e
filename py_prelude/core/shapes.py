"""
Convenience wrappers over the host CAD shape and drawing API.

The host objects are only duck-typed here; the protocols below list the
methods each wrapper calls.
"""

import numbers
from functools import reduce
from typing import List, Protocol, Sequence, TypeVar

from .errors import InvalidArgumentError

S = TypeVar("S", bound="Fusable")


class Fusable(Protocol):
    def fuse(self, other): ...


class Transformable(Protocol):
    def translate(self, x: float, y: float): ...

    def clone(self): ...

    def rotate(self, angle: float): ...


class Drawing(Protocol):
    def line_to(self, point): ...

    def close(self): ...


class Pen(Protocol):
    def move_pointer_to(self, point) -> Drawing: ...


def fuse_all(shapes: Sequence[S]) -> S:
    """
    Fuse a list of shapes into one, left to right.

    A single shape is returned as is.

    Raises:
        InvalidArgumentError: if ``shapes`` is empty
    """
    if len(shapes) == 0:
        raise InvalidArgumentError("fuse_all needs at least one shape")
    return reduce(lambda result, shape: result.fuse(shape), shapes[1:], shapes[0])


def polar_copies(shape: Transformable, count: int, radius: float) -> List:
    """
    Make ``count`` copies of a shape spread evenly around the origin.

    The shape is first moved ``radius`` along +y, then each copy is rotated
    by ``i * 360 / count`` degrees.

    Args:
        shape: Shape supporting translate, clone and rotate
        count: Number of copies, at least 1
        radius: Distance of each copy from the origin

    Returns:
        List of rotated copies, in angle order
    """
    if isinstance(count, bool) or not isinstance(count, numbers.Integral) or count < 1:
        raise InvalidArgumentError(f"polar_copies count must be a positive integer, got {count!r}")

    base = shape.translate(0, radius)
    angle = 360 / count
    return [base.clone().rotate(i * angle) for i in range(count)]


def draw_points(pen: Pen, points: Sequence):
    """
    Draw a closed polygon through a list of points.

    Args:
        pen: Host drawing pen
        points: Polygon vertices in drawing order

    Returns:
        The closed drawing
    """
    if len(points) == 0:
        raise InvalidArgumentError("draw_points needs at least one point")

    drawing = pen.move_pointer_to(points[0])
    for point in points[1:]:
        drawing = drawing.line_to(point)
    return drawing.close()
