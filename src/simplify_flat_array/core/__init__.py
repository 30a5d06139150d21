# simplify_flat_array/core/__init__.py
"""
Core functionality for the simplify_flat_array package.

This sub-package contains the geometry primitives and the simplification
entry points.
"""

from simplify_flat_array.core.geometry import (
    squared_distance,
    squared_distance_to_segment,
    triangle_area,
)
from simplify_flat_array.core.simplifier import (
    simplify,
    simplify_classic,
    simplify_with_config,
    to_float32_buffer,
)

__all__ = [
    "squared_distance",
    "squared_distance_to_segment",
    "triangle_area",
    "simplify",
    "simplify_classic",
    "simplify_with_config",
    "to_float32_buffer",
]
