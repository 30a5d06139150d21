from typing import Dict, Type, Union

from simplify_flat_array.config import Algorithm, SimplifyConfig
from simplify_flat_array.utils.registry import Registry
from .strategy import SimplificationStrategy

# Create a registry for simplification strategies
strategy_registry = Registry[SimplificationStrategy]("SimplificationStrategy")

register_strategy = strategy_registry.register


def get_strategy(algorithm: Union[Algorithm, str], config: SimplifyConfig) -> SimplificationStrategy:
    """
    Get a configured strategy by algorithm.

    Args:
        algorithm: Algorithm member or registered name.
        config: Simplification parameters.

    Returns:
        SimplificationStrategy: Strategy instance for the algorithm.

    Raises:
        ValueError: If no strategy is registered under the name.
    """
    name = algorithm.value if isinstance(algorithm, Algorithm) else algorithm
    strategy_cls = strategy_registry.get(name)

    return strategy_cls(config)


def list_strategies() -> Dict[str, Type[SimplificationStrategy]]:
    """
    Get a dictionary of all registered simplification strategies.

    Returns:
        Dict[str, Type[SimplificationStrategy]]: Dictionary mapping names to classes.
    """
    return strategy_registry.list()
