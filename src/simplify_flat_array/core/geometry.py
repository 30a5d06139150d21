# simplify_flat_array/core/geometry.py
"""
Geometry primitives for polyline simplification.

Points are ``(x, y)`` pairs. All functions are pure.
"""

from typing import Sequence

Point = Sequence[float]


def squared_distance(p1: Point, p2: Point) -> float:
    """
    Squared Euclidean distance between two points.

    Args:
        p1: First point.
        p2: Second point.

    Returns:
        float: Sum of squared coordinate differences.
    """
    dx = p1[0] - p2[0]
    dy = p1[1] - p2[1]

    return dx * dx + dy * dy


def squared_distance_to_segment(p: Point, a: Point, b: Point) -> float:
    """
    Squared distance from a point to a line segment.

    The projection of ``p`` onto the line through ``a`` and ``b`` is clamped to
    the segment. A zero-length segment degenerates to the distance to ``a``.

    Args:
        p: Point to measure.
        a: Segment start.
        b: Segment end.

    Returns:
        float: Squared distance from ``p`` to the closest point of the segment.
    """
    x = a[0]
    y = a[1]
    dx = b[0] - x
    dy = b[1] - y

    if dx != 0 or dy != 0:
        t = ((p[0] - x) * dx + (p[1] - y) * dy) / (dx * dx + dy * dy)

        if t > 1:
            x = b[0]
            y = b[1]
        elif t > 0:
            x += dx * t
            y += dy * t

    dx = p[0] - x
    dy = p[1] - y

    return dx * dx + dy * dy


def triangle_area(a: Point, b: Point, c: Point) -> float:
    """
    Area of the triangle ``abc``; zero when the points are collinear.
    """
    return abs(
        a[0] * (b[1] - c[1])
        + b[0] * (c[1] - a[1])
        + c[0] * (a[1] - b[1])
    ) / 2
