# simplify_flat_array/config/config_schema.py
"""
Configuration schemas for polyline simplification.

This module defines the structured configuration schemas used with Hydra for
selecting a simplification algorithm and its parameters, and for the
command-line tools.
"""

import logging
from dataclasses import dataclass, field
from enum import Enum
from typing import Any, List, Mapping, Optional

from hydra.core.config_store import ConfigStore
from omegaconf import MISSING

logger = logging.getLogger(__name__)


class Algorithm(Enum):
    """Simplification algorithms."""

    DOUGLAS_PEUCKER = "douglas-peucker"
    VISVALINGAM = "visvalingam"

    @classmethod
    def default(cls) -> "Algorithm":
        return cls.DOUGLAS_PEUCKER

    @classmethod
    def parse(cls, value: Any) -> "Algorithm":
        """
        Resolve an algorithm from a member, value or name.

        Accepts ``Algorithm`` members, values (``"visvalingam"``), member names
        (``"VISVALINGAM"``) and underscore spellings (``"douglas_peucker"``).
        Anything else resolves to the default algorithm without raising.

        Args:
            value: Algorithm designation.

        Returns:
            Algorithm: The resolved algorithm.
        """
        if isinstance(value, cls):
            return value

        if isinstance(value, str):
            normalized = value.strip().lower().replace("_", "-")
            for member in cls:
                if member.value == normalized:
                    return member

        logger.debug(f"Unknown algorithm {value!r}, falling back to {cls.default().value}")
        return cls.default()


_TRUE_STRINGS = {"true", "yes", "on", "1"}
_FALSE_STRINGS = {"false", "no", "off", "0", ""}


def _coerce_number(name: str, value: Any, kind: type) -> Optional[Any]:
    """Convert an option to ``kind``; values that don't convert become None."""
    if value is None:
        return None
    try:
        return kind(value)
    except (TypeError, ValueError, OverflowError):
        logger.warning(f"Invalid {name} {value!r} ignored")
        return None


def _coerce_flag(name: str, value: Any) -> bool:
    """Convert an option to a bool; unrecognized strings become False."""
    if isinstance(value, str):
        normalized = value.strip().lower()
        if normalized in _TRUE_STRINGS:
            return True
        if normalized not in _FALSE_STRINGS:
            logger.warning(f"Invalid {name} {value!r} treated as false")
        return False
    return bool(value)


# Option keys accepted by SimplifyConfig.from_options, mapped to field names
OPTION_ALIASES = {
    "algorithm": "algorithm",
    "targetPoints": "target_points",
    "target_points": "target_points",
    "closed": "closed",
    "useTypedArray": "use_typed_array",
    "use_typed_array": "use_typed_array",
}


@dataclass
class SimplifyConfig:
    """
    Configuration for a single simplification call.
    """

    algorithm: Algorithm = Algorithm.DOUGLAS_PEUCKER
    """Simplification algorithm to run."""

    tolerance: Optional[float] = None
    """Distance tolerance (Douglas-Peucker) or area threshold (Visvalingam). None selects the algorithm default."""

    high_quality: bool = False
    """Skip the radial-distance pre-pass of Douglas-Peucker."""

    target_points: Optional[int] = None
    """Exact output point count for Visvalingam; overrides the tolerance when set."""

    closed: bool = False
    """Treat the polyline as a closed ring (Visvalingam only)."""

    use_typed_array: bool = False
    """Return a float32 numpy buffer instead of a list of floats."""

    def __post_init__(self) -> None:
        """
        Normalize the algorithm and apply the tolerance policy.

        Non-numeric tolerances fall back to the algorithm default and
        negative tolerances are clamped to zero.
        """
        self.algorithm = Algorithm.parse(self.algorithm)
        self.tolerance = _coerce_number("tolerance", self.tolerance, float)

        if self.tolerance is not None and self.tolerance < 0:
            logger.warning(f"Negative tolerance {self.tolerance} clamped to 0")
            self.tolerance = 0.0

    @classmethod
    def from_options(
            cls,
            options: Mapping[str, Any],
            tolerance: Optional[float] = None,
            high_quality: bool = False
    ) -> "SimplifyConfig":
        """
        Build a configuration from an options mapping.

        Args:
            options: Mapping with any of ``algorithm``, ``targetPoints``,
                ``closed`` and ``useTypedArray`` (snake_case spellings work too).
            tolerance: Tolerance passed alongside the options.
            high_quality: High quality flag passed alongside the options.

        Returns:
            SimplifyConfig: The resulting configuration.
        """
        kwargs = {}
        for key in options:
            name = OPTION_ALIASES.get(key)
            if name is None:
                logger.debug(f"Ignoring unknown simplify option {key!r}")
                continue
            kwargs[name] = options[key]

        if "target_points" in kwargs:
            kwargs["target_points"] = _coerce_number("target_points", kwargs["target_points"], int)
        for name in ("closed", "use_typed_array"):
            if name in kwargs:
                kwargs[name] = _coerce_flag(name, kwargs[name])

        return cls(tolerance=tolerance, high_quality=bool(high_quality), **kwargs)


@dataclass
class CliConfig:
    """
    Root configuration for the simplify-path command.
    """

    input: str = MISSING
    """Path of the coordinate file to simplify."""

    output: Optional[str] = None
    """Path to write the simplified coordinates to (logged when unset)."""

    simplify: SimplifyConfig = field(default_factory=SimplifyConfig)
    """Simplification parameters."""

    debug: bool = False
    """Log full tracebacks on failure."""


@dataclass
class BenchmarkConfig:
    """
    Configuration for the simplify-benchmark command.
    """

    sizes: List[int] = field(default_factory=lambda: [500, 2000])
    """Point counts of the generated benchmark paths."""

    iterations: int = 100
    """Number of timed calls per algorithm and size."""

    tolerance: float = 2.0
    """Douglas-Peucker tolerance."""

    target_points: int = 40
    """Visvalingam target point count."""

    debug: bool = False
    """Log full tracebacks on failure."""

    def __post_init__(self) -> None:
        """
        Validate benchmark parameters.

        Raises:
            ValueError: If iterations is not positive or a size is below 3 points.
        """
        if self.iterations <= 0:
            raise ValueError(f"Benchmark iterations must be positive, got {self.iterations}")

        for size in self.sizes:
            if size < 3:
                raise ValueError(f"Benchmark path sizes must be at least 3 points, got {size}")


# Register configs with Hydra
cs = ConfigStore.instance()
cs.store(name="config_schema", node=CliConfig)
cs.store(name="benchmark_schema", node=BenchmarkConfig)
