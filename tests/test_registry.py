import pytest

from simplify_flat_array import Algorithm, SimplifyConfig
from simplify_flat_array.strategies import (
    DouglasPeuckerStrategy,
    SimplificationStrategy,
    VisvalingamStrategy,
    get_strategy,
    list_strategies,
)
from simplify_flat_array.utils import Registry


def test_strategies_are_registered():
    strategies = list_strategies()
    assert strategies["douglas-peucker"] is DouglasPeuckerStrategy
    assert strategies["visvalingam"] is VisvalingamStrategy


def test_get_strategy_by_member_and_name():
    config = SimplifyConfig(algorithm=Algorithm.VISVALINGAM, target_points=4)
    strategy = get_strategy(Algorithm.VISVALINGAM, config)
    assert isinstance(strategy, VisvalingamStrategy)
    assert strategy.config is config
    assert strategy.name == "visvalingam"

    assert isinstance(get_strategy("douglas-peucker", SimplifyConfig()), DouglasPeuckerStrategy)


def test_get_unknown_strategy_raises():
    with pytest.raises(ValueError, match="not found"):
        get_strategy("chaikin", SimplifyConfig())


def test_registry_rejects_duplicates():
    registry = Registry[SimplificationStrategy]("SimplificationStrategy")
    registry.register("dp")(DouglasPeuckerStrategy)

    with pytest.raises(ValueError, match="already registered"):
        registry.register("dp")(VisvalingamStrategy)

    assert registry.list() == {"dp": DouglasPeuckerStrategy}
