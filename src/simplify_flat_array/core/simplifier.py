# simplify_flat_array/core/simplifier.py
"""
Entry points for polyline simplification.

``simplify_classic`` always runs Douglas-Peucker, ``simplify_with_config``
routes on a ``SimplifyConfig``, and ``simplify`` keeps the legacy call shape
``simplify(points, tolerance, high_quality, options)`` on top of both.
"""

import array
import copy
import logging
from typing import Any, List, Mapping, Optional, Sequence

import numpy as np

from simplify_flat_array.config import Algorithm, SimplifyConfig
from simplify_flat_array.strategies import get_strategy

logger = logging.getLogger(__name__)


def _is_recognized(points: Any) -> bool:
    if isinstance(points, np.ndarray):
        return points.ndim == 1 or (points.ndim == 2 and points.shape[1] == 2)
    return isinstance(points, (list, tuple, array.array))


def _value_count(points: Any) -> int:
    if isinstance(points, np.ndarray):
        return points.size
    return len(points)


def _as_flat_list(points: Any) -> Optional[List[float]]:
    """
    Convert a recognized sequence type to a flat list of floats.

    Returns None for values that don't convert to floats.
    """
    try:
        if isinstance(points, np.ndarray):
            return points.reshape(-1).astype(np.float64).tolist()
        return [float(value) for value in points]
    except (TypeError, ValueError):
        return None


def _pass_through(points: Any) -> Any:
    if isinstance(points, np.ndarray):
        return points.copy()
    return copy.copy(points)


def to_float32_buffer(points: Sequence[float]) -> np.ndarray:
    """
    Convert a flat coordinate sequence to a 1-D float32 numpy buffer.

    Args:
        points: Flat coordinate sequence.

    Returns:
        np.ndarray: Array of dtype float32.
    """
    return np.asarray(points, dtype=np.float32)


def simplify_classic(
        points: Any,
        tolerance: Optional[float] = None,
        high_quality: bool = False
) -> Any:
    """
    Simplify a polyline with Douglas-Peucker.

    Inputs with fewer than three points, and inputs that aren't a recognized
    sequence type, are returned as an unchanged copy.

    Args:
        points: Flat coordinate sequence ``[x0, y0, x1, y1, ...]``.
        tolerance: Distance tolerance, 1 when None. Negative values are clamped to 0.
        high_quality: Skip the radial-distance pre-pass.

    Returns:
        List[float]: Simplified flat coordinate sequence.
    """
    return simplify_with_config(
        points,
        SimplifyConfig(
            algorithm=Algorithm.DOUGLAS_PEUCKER,
            tolerance=tolerance,
            high_quality=bool(high_quality)
        )
    )


def simplify_with_config(points: Any, config: SimplifyConfig) -> Any:
    """
    Simplify a polyline with the algorithm selected by a configuration.

    Args:
        points: Flat coordinate sequence, or a numpy array of shape (n, 2).
        config: Simplification parameters.

    Returns:
        Simplified flat coordinate sequence: a list of floats, or a float32
        numpy buffer when ``config.use_typed_array`` is set. Trivial and
        unrecognized inputs come back as an unchanged copy.
    """
    if not _is_recognized(points):
        logger.debug(f"Returning unrecognized input of type {type(points).__name__} unchanged")
        return _pass_through(points)

    if _value_count(points) < 6:
        return _pass_through(points)

    flat = _as_flat_list(points)
    if flat is None:
        logger.debug("Returning input with non-numeric values unchanged")
        return _pass_through(points)

    strategy = get_strategy(config.algorithm, config)
    simplified = strategy.simplify(flat)

    if config.use_typed_array:
        return to_float32_buffer(simplified)
    return simplified


def simplify(
        points: Any,
        tolerance: Optional[float] = None,
        high_quality: bool = False,
        options: Optional[Mapping[str, Any]] = None
) -> Any:
    """
    Simplify a polyline, keeping the legacy call shape.

    Without ``options``, or with options that don't name an ``algorithm``,
    Douglas-Peucker runs and every other option is ignored. Otherwise the
    options select the algorithm and its parameters.

    Args:
        points: Flat coordinate sequence ``[x0, y0, x1, y1, ...]``.
        tolerance: Distance tolerance (Douglas-Peucker) or area threshold
            (Visvalingam). None selects the algorithm default.
        high_quality: Skip the radial-distance pre-pass of Douglas-Peucker.
        options: Mapping with ``algorithm``, ``targetPoints``, ``closed`` and
            ``useTypedArray``.

    Returns:
        Simplified flat coordinate sequence.

    Example:
        >>> simplify([0, 0, 1, 0.1, 2, 0, 3, 5], 1)
        [0.0, 0.0, 2.0, 0.0, 3.0, 5.0]
        >>> simplify([0, 0, 1, 0.1, 2, 0, 3, 5], None, False, {"algorithm": "visvalingam", "targetPoints": 3})
        [0.0, 0.0, 2.0, 0.0, 3.0, 5.0]
    """
    if options is None or "algorithm" not in options:
        return simplify_classic(points, tolerance, high_quality)

    config = SimplifyConfig.from_options(options, tolerance, high_quality)
    return simplify_with_config(points, config)
