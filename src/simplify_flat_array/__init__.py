# simplify_flat_array/__init__.py
"""
Polyline simplification over flat coordinate sequences.

This package reduces the point count of a 2D polyline given as
``[x0, y0, x1, y1, ...]`` while keeping its shape, with the Douglas-Peucker
and Visvalingam-Whyatt algorithms.

Main components:
- core: Geometry primitives and simplification entry points
- strategies: Algorithm implementations and their registry
- config: Configuration schemas for Hydra integration
- utils: Registry and coordinate file helpers
- cli: Command-line tools
"""

from simplify_flat_array.config import Algorithm, SimplifyConfig
from simplify_flat_array.core import simplify, simplify_classic, simplify_with_config

__version__ = "0.1.0"

__all__ = [
    "simplify",
    "simplify_classic",
    "simplify_with_config",
    "Algorithm",
    "SimplifyConfig",
]
