"""
Simplification strategies.

This subpackage contains the Douglas-Peucker and Visvalingam-Whyatt
implementations and the registry used to look them up by algorithm name.
"""

from .strategy import SimplificationStrategy
from .registry import register_strategy, get_strategy, list_strategies

# Import all strategies to register them
from .douglas_peucker import DouglasPeuckerStrategy
from .visvalingam import VisvalingamStrategy

__all__ = [
    "SimplificationStrategy",
    "register_strategy",
    "get_strategy",
    "list_strategies",
    "DouglasPeuckerStrategy",
    "VisvalingamStrategy",
]
