# simplify_flat_array/utils/__init__.py
"""
Utility functions for the simplify_flat_array package.

This subpackage contains the generic registry and coordinate file helpers.
"""

from simplify_flat_array.utils.registry import Registry
from simplify_flat_array.utils.coordinate_file import read_coordinate_file, write_coordinate_file

__all__ = [
    "Registry",
    "read_coordinate_file",
    "write_coordinate_file",
]
