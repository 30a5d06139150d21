# simplify_flat_array/strategies/douglas_peucker.py
"""
Douglas-Peucker polyline simplification.

Keeps the points whose deviation from the chord between already kept points
exceeds the tolerance. An optional radial-distance pre-pass trades quality for
speed on dense input.
"""

from typing import List
import logging

from simplify_flat_array.config import Algorithm
from simplify_flat_array.core.geometry import squared_distance, squared_distance_to_segment
from .strategy import SimplificationStrategy
from .registry import register_strategy

logger = logging.getLogger(__name__)


def simplify_radial_distance(points: List[float], sq_tolerance: float) -> List[float]:
    """
    Drop points that lie within the tolerance of the previously kept point.

    The first point is always kept and the last point is appended even when
    it was filtered.

    Args:
        points: Flat coordinate sequence with at least one point.
        sq_tolerance: Squared distance tolerance.

    Returns:
        List[float]: Reduced flat coordinate sequence.
    """
    prev_point = (points[0], points[1])
    new_points = [points[0], points[1]]
    last_index = len(points) - 2
    kept_last = last_index == 0

    for i in range(2, last_index + 1, 2):
        point = (points[i], points[i + 1])

        if squared_distance(point, prev_point) > sq_tolerance:
            new_points.extend(point)
            prev_point = point
            kept_last = i == last_index

    if not kept_last:
        new_points.extend((points[last_index], points[last_index + 1]))

    return new_points


def simplify_douglas_peucker(points: List[float], sq_tolerance: float) -> List[float]:
    """
    Max-deviation partitioning with an explicit stack of index ranges.

    A range keeps its farthest interior point when that point's squared
    deviation exceeds ``sq_tolerance``; the first point reaching a new maximum
    wins ties. Both endpoints are always kept.

    Args:
        points: Flat coordinate sequence with at least two points.
        sq_tolerance: Squared distance tolerance.

    Returns:
        List[float]: Kept points in input order.
    """
    count = len(points) // 2
    keep = [False] * count
    keep[0] = keep[count - 1] = True

    stack = [(0, count - 1)]
    while stack:
        first, last = stack.pop()
        start = (points[2 * first], points[2 * first + 1])
        end = (points[2 * last], points[2 * last + 1])

        max_sq_dist = sq_tolerance
        index = None

        for i in range(first + 1, last):
            sq_dist = squared_distance_to_segment((points[2 * i], points[2 * i + 1]), start, end)

            if sq_dist > max_sq_dist:
                index = i
                max_sq_dist = sq_dist

        if index is not None:
            keep[index] = True
            if index - first > 1:
                stack.append((first, index))
            if last - index > 1:
                stack.append((index, last))

    simplified = []
    for i in range(count):
        if keep[i]:
            simplified.append(points[2 * i])
            simplified.append(points[2 * i + 1])

    return simplified


@register_strategy(Algorithm.DOUGLAS_PEUCKER.value)
class DouglasPeuckerStrategy(SimplificationStrategy):
    """
    Strategy for Douglas-Peucker polyline simplification.

    The tolerance is a distance. Unless ``high_quality`` is set, a radial
    distance pass runs first on the working copy.
    """

    default_tolerance = 1.0

    def simplify(self, points: List[float]) -> List[float]:
        """
        Simplify a polyline with the Douglas-Peucker algorithm.

        Args:
            points: Flat coordinate sequence.

        Returns:
            List[float]: Simplified flat coordinate sequence that keeps the
            first and last input points.
        """
        points = self.prepare_input(points)

        if len(points) < 6:
            return points

        input_count = self._count(points)
        tolerance = self.tolerance
        sq_tolerance = tolerance * tolerance

        if not self.config.high_quality:
            points = simplify_radial_distance(points, sq_tolerance)

        simplified = simplify_douglas_peucker(points, sq_tolerance)

        logger.debug(
            f"Douglas-Peucker reduced {input_count} to {self._count(simplified)} points "
            f"(tolerance={tolerance}, high_quality={self.config.high_quality})"
        )
        return simplified

    @staticmethod
    def _count(points: List[float]) -> int:
        return len(points) // 2
