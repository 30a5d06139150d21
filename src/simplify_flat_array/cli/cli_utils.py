# simplify_flat_array/cli/cli_utils.py
"""
CLI utilities for polyline simplification.

This module provides common utilities for command-line scripts to ensure
consistent logging, validation and error handling.
"""

import logging
import sys
import traceback
from typing import Any, Callable, List, Optional

from omegaconf import DictConfig, OmegaConf

# Configure module-level logger
logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s - %(levelname)s - %(message)s",
    datefmt="%Y-%m-%d %H:%M:%S",
)
logger = logging.getLogger(__name__)


def validate_config(cfg: DictConfig, required_keys: Optional[List[str]] = None) -> None:
    """
    Validate configuration for required keys.

    Args:
        cfg: Hydra configuration object.
        required_keys: Keys that must be set to a non-empty value.

    Raises:
        ValueError: If a required key is missing or empty.
    """
    for key in required_keys or []:
        if OmegaConf.is_missing(cfg, key) or not cfg.get(key):
            raise ValueError(f"'{key}' is required in configuration")


def convert_config(cfg: DictConfig) -> Any:
    """
    Convert Hydra DictConfig to its structured config object.

    Args:
        cfg: Hydra configuration object.

    Returns:
        The dataclass instance described by the configuration.
    """
    return OmegaConf.to_object(cfg)


def handle_errors(e: Exception, cfg: DictConfig, exit_code: int = 1) -> None:
    """
    Handle exceptions in a consistent way across CLI scripts.

    Args:
        e: The exception to handle.
        cfg: Hydra configuration object (for debug mode checking).
        exit_code: Exit code to use when terminating. Defaults to 1.

    Note:
        This function will terminate the program with sys.exit().
    """
    logger.error(f"Error: {e}")

    if cfg.get("debug", False):
        logger.error(traceback.format_exc())

    sys.exit(exit_code)


def run_cli_command(
        cfg: DictConfig,
        command_func: Callable[[Any], None],
        required_keys: Optional[List[str]] = None
) -> None:
    """
    Run a CLI command with standard error handling and configuration management.

    This function encapsulates the common pattern used across CLI scripts:
    1. Log the configuration
    2. Validate the configuration
    3. Convert the configuration to its structured object
    4. Run the command function

    Args:
        cfg: Hydra configuration object.
        command_func: Function implementing the command, called with the
            structured configuration.
        required_keys: Keys that must be set in the configuration.

    Raises:
        SystemExit: If an error occurs during command execution.
    """
    logger.info("Configuration:")
    logger.info(OmegaConf.to_yaml(cfg))

    try:
        validate_config(cfg, required_keys)
        config = convert_config(cfg)
        command_func(config)
        logger.info("Command completed successfully")

    except Exception as e:
        handle_errors(e, cfg)
