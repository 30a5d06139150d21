#!/usr/bin/env python3
# simplify_flat_array/cli/benchmark.py
"""
Script for timing the simplification algorithms on generated paths.

The script uses Hydra for configuration management, e.g.::

    simplify-benchmark iterations=20 "sizes=[500,5000]"
"""

import logging
import time
from typing import Callable, Dict, List

import hydra
import numpy as np
from omegaconf import DictConfig
from tqdm import tqdm

from ..config import Algorithm, BenchmarkConfig, SimplifyConfig
from ..core import simplify_with_config
from .cli_utils import run_cli_command

logger = logging.getLogger(__name__)


def generate_path(count: int = 500) -> List[float]:
    """
    Generate a wavy path with a spike every 50 points.

    Args:
        count: Number of points.

    Returns:
        List[float]: Flat coordinate sequence.
    """
    i = np.arange(count)
    xs = i * 2.0
    ys = np.sin(i * 0.1) * 30 + np.where(i % 50 == 0, 40.0, 0.0)

    return np.column_stack([xs, ys]).reshape(-1).tolist()


def _time_calls(func: Callable[[], object], iterations: int, desc: str) -> float:
    start = time.perf_counter()
    for _ in tqdm(range(iterations), desc=desc, leave=False):
        func()
    return time.perf_counter() - start


def run_benchmark(config: BenchmarkConfig) -> Dict[str, Dict[int, float]]:
    """
    Time both algorithms on generated paths of each configured size.

    Args:
        config: Benchmark configuration.

    Returns:
        Dict[str, Dict[int, float]]: Total seconds per algorithm and path size.
    """
    configs = {
        Algorithm.DOUGLAS_PEUCKER: SimplifyConfig(
            algorithm=Algorithm.DOUGLAS_PEUCKER,
            tolerance=config.tolerance
        ),
        Algorithm.VISVALINGAM: SimplifyConfig(
            algorithm=Algorithm.VISVALINGAM,
            target_points=config.target_points
        ),
    }

    results: Dict[str, Dict[int, float]] = {algorithm.value: {} for algorithm in configs}

    for size in config.sizes:
        path = generate_path(size)

        for algorithm, simplify_config in configs.items():
            elapsed = _time_calls(
                lambda: simplify_with_config(path, simplify_config),
                config.iterations,
                desc=f"{algorithm.value} {size} pts"
            )
            results[algorithm.value][size] = elapsed

            logger.info(
                f"{algorithm.value:<16} {size:>6} pts: {elapsed * 1000:.1f} ms "
                f"for {config.iterations} calls ({elapsed * 1000 / config.iterations:.3f} ms/call)"
            )

    return results


@hydra.main(config_path="../configs", config_name="benchmark", version_base=None)
def main(cfg: DictConfig) -> None:
    """
    Run the simplification benchmark.

    Args:
        cfg: Hydra configuration object.
    """
    run_cli_command(cfg=cfg, command_func=run_benchmark)


if __name__ == "__main__":
    main()
