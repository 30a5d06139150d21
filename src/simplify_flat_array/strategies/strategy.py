from abc import ABC, abstractmethod
import logging
from typing import List, Sequence

from simplify_flat_array.config import SimplifyConfig

logger = logging.getLogger(__name__)


class SimplificationStrategy(ABC):
    """
    Abstract base class for polyline simplification strategies.

    A strategy implements one reduction algorithm over a flat coordinate
    sequence ``[x0, y0, x1, y1, ...]``. Input coercion and output reshaping
    are left to the caller.
    """

    #: Tolerance used when the configuration leaves it unset
    default_tolerance: float = 1.0

    def __init__(self, config: SimplifyConfig) -> None:
        """
        Initialize the simplification strategy.

        Args:
            config: Simplification parameters.
        """
        self.config = config
        self.name = config.algorithm.value

    @property
    def tolerance(self) -> float:
        """Configured tolerance, or the strategy default when unset."""
        if self.config.tolerance is None:
            return self.default_tolerance
        return float(self.config.tolerance)

    @abstractmethod
    def simplify(self, points: List[float]) -> List[float]:
        """
        Simplify a polyline.

        Args:
            points: Flat coordinate sequence. Never mutated.

        Returns:
            List[float]: The reduced flat coordinate sequence.
        """
        pass

    def prepare_input(self, points: Sequence[float]) -> List[float]:
        """
        Copy the input into a working list of whole ``x, y`` pairs.

        Args:
            points: Flat coordinate sequence.

        Returns:
            List[float]: Working copy without any odd trailing value.
        """
        if len(points) % 2:
            logger.debug(f"Ignoring trailing value of odd-length input ({len(points)} values)")
            return list(points[:-1])
        return list(points)
