# simplify_flat_array/config/__init__.py
"""
Configuration schemas for the simplify_flat_array package.

This subpackage contains the structured configuration schemas used with
Hydra for selecting and parameterizing simplification algorithms.
"""

from simplify_flat_array.config.config_schema import (
    Algorithm,
    SimplifyConfig,
    CliConfig,
    BenchmarkConfig,
)

__all__ = [
    "Algorithm",
    "SimplifyConfig",
    "CliConfig",
    "BenchmarkConfig",
]
