#!/usr/bin/env python3
# simplify_flat_array/cli/simplify_path.py
"""
Script for simplifying a polyline stored in a coordinate file.

The script uses Hydra for configuration management, e.g.::

    simplify-path input=path.json output=out.json simplify.algorithm=VISVALINGAM simplify.target_points=20
"""

import logging
from typing import Any, List

import hydra
from omegaconf import DictConfig

from ..config import CliConfig
from ..core import simplify_with_config
from ..utils import read_coordinate_file, write_coordinate_file
from .cli_utils import run_cli_command

logger = logging.getLogger(__name__)


def run_simplification(config: CliConfig) -> Any:
    """
    Read, simplify and write a polyline.

    Args:
        config: Structured CLI configuration.

    Returns:
        The simplified coordinates.
    """
    points: List[float] = read_coordinate_file(config.input)
    simplified = simplify_with_config(points, config.simplify)

    logger.info(
        f"Simplified {len(points) // 2} points to {len(simplified) // 2} "
        f"using {config.simplify.algorithm.value}"
    )

    if config.output:
        output_path = write_coordinate_file(config.output, simplified)
        logger.info(f"Wrote simplified coordinates to {output_path}")
    else:
        logger.info(f"Simplified coordinates: {list(map(float, simplified))}")

    return simplified


@hydra.main(config_path="../configs", config_name="config", version_base=None)
def main(cfg: DictConfig) -> None:
    """
    Simplify the polyline in ``cfg.input``.

    Args:
        cfg: Hydra configuration object.
    """
    run_cli_command(
        cfg=cfg,
        command_func=run_simplification,
        required_keys=["input"]
    )


if __name__ == "__main__":
    main()
