# simplify_flat_array/strategies/visvalingam.py
"""
Visvalingam-Whyatt polyline simplification.

This module simplifies polylines by repeatedly removing the point whose
triangle with its two current neighbours has the smallest area. The
traversal order is kept in parallel ``prev``/``next``/``area`` arrays indexed
by original point position.
"""

from typing import List, Optional
import logging
import math

from simplify_flat_array.config import Algorithm
from simplify_flat_array.core.geometry import triangle_area
from .strategy import SimplificationStrategy
from .registry import register_strategy

logger = logging.getLogger(__name__)

# Link value for "no neighbour" at the ends of an open polyline
NO_LINK = -1

# Smallest number of points the reduction leaves
MIN_POINTS = 3


class TraversalOrder:
    """
    Doubly linked order over point indices with a removal weight per point.

    Open polylines have fixed endpoints with an infinite area. Closed
    polylines form a ring in which every point is eligible once there are
    more than three points.
    """

    def __init__(self, points: List[float], closed: bool = False) -> None:
        """
        Link all points and compute their initial effective areas.

        Args:
            points: Flat coordinate sequence with at least three points.
            closed: Whether the polyline is a ring.
        """
        self.points = points
        self.count = len(points) // 2
        self.closed = closed
        self.protect_ends = not (closed and self.count > MIN_POINTS)
        self.remaining = self.count

        last = self.count - 1
        self.prev = list(range(-1, last))
        self.next = list(range(1, self.count + 1))
        self.next[last] = NO_LINK

        if closed:
            self.prev[0] = last
            self.next[last] = 0

        # None marks a retired point
        self.area: List[Optional[float]] = [math.inf] * self.count
        for i in range(self.count):
            self._update_area(i)

    def _is_protected(self, index: int) -> bool:
        return self.protect_ends and (index == 0 or index == self.count - 1)

    def _point(self, index: int):
        return self.points[2 * index], self.points[2 * index + 1]

    def _update_area(self, index: int) -> None:
        if self._is_protected(index):
            return
        self.area[index] = triangle_area(
            self._point(self.prev[index]),
            self._point(index),
            self._point(self.next[index])
        )

    def find_min(self):
        """
        Find the live point with the smallest effective area.

        Ties go to the lowest index.

        Returns:
            Tuple of (index, area); index is ``NO_LINK`` if no point is eligible.
        """
        index = NO_LINK
        min_area = math.inf

        for i, area in enumerate(self.area):
            if area is not None and area < min_area:
                min_area = area
                index = i

        return index, min_area

    def remove(self, index: int) -> None:
        """
        Splice a point out and recompute the areas of its two new neighbours.

        Args:
            index: Index of a live, unprotected point.
        """
        before = self.prev[index]
        after = self.next[index]

        self.next[before] = after
        self.prev[after] = before
        self.area[index] = None
        self.remaining -= 1

        self._update_area(before)
        self._update_area(after)

    def to_flat(self) -> List[float]:
        """
        Walk the surviving points in order.

        Closed rings are anchored at the first input point: its coordinates
        open and close the output even when the point itself was removed.

        Returns:
            List[float]: Flat coordinate sequence of the surviving points.
        """
        start = next(i for i, area in enumerate(self.area) if area is not None)

        result = []
        if self.closed and start != 0:
            result.extend(self._point(0))

        index = start
        while True:
            result.extend(self._point(index))
            index = self.next[index]
            if index == NO_LINK or index == start:
                break

        if self.closed and len(result) >= 4:
            result.extend(self._point(0))

        return result


def simplify_visvalingam(
        points: List[float],
        tolerance: float = 0.5,
        target_points: Optional[int] = None,
        closed: bool = False
) -> List[float]:
    """
    Remove minimum-area points until the stopping criterion holds.

    Stops at three points, at ``target_points`` when given, or, without a
    target, when the smallest remaining area exceeds ``tolerance``.

    Args:
        points: Flat coordinate sequence.
        tolerance: Area threshold, used only without ``target_points``.
        target_points: Exact output point count; values below 3 act as 3.
        closed: Treat the polyline as a ring.

    Returns:
        List[float]: Simplified flat coordinate sequence.
    """
    if len(points) < 2 * MIN_POINTS:
        return list(points)

    order = TraversalOrder(points, closed)
    floor = MIN_POINTS if target_points is None else max(target_points, MIN_POINTS)

    while order.remaining > floor:
        index, min_area = order.find_min()

        if index == NO_LINK:
            break

        if target_points is None and min_area > tolerance:
            break

        order.remove(index)

    return order.to_flat()


@register_strategy(Algorithm.VISVALINGAM.value)
class VisvalingamStrategy(SimplificationStrategy):
    """
    Strategy for Visvalingam-Whyatt polyline simplification.

    The tolerance is an area threshold and only applies when no target point
    count is configured.
    """

    default_tolerance = 0.5

    def simplify(self, points: List[float]) -> List[float]:
        """
        Simplify a polyline with the Visvalingam-Whyatt algorithm.

        Args:
            points: Flat coordinate sequence.

        Returns:
            List[float]: Simplified flat coordinate sequence. Closed rings end
            with a repeat of their first point.
        """
        points = self.prepare_input(points)
        closed = self.config.closed

        # A ring given with its closing point repeated is linked without it
        if closed and len(points) >= 2 * (MIN_POINTS + 1) and points[:2] == points[-2:]:
            points = points[:-2]

        simplified = simplify_visvalingam(
            points,
            tolerance=self.tolerance,
            target_points=self.config.target_points,
            closed=closed
        )

        logger.debug(
            f"Visvalingam reduced {len(points) // 2} to {len(simplified) // 2} points "
            f"(tolerance={self.tolerance}, target_points={self.config.target_points}, closed={closed})"
        )
        return simplified
