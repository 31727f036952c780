"""
Configuration management for the MCTS chess engine.

This module handles loading, validation, and access to configuration parameters
used throughout the system.
"""

import os
import yaml
import chess
import logging
from dataclasses import dataclass, field
from typing import Dict, Any, Optional, Tuple

# Configure logging
logger = logging.getLogger(__name__)

# Define base paths
BASE_DIR = os.path.dirname(os.path.dirname(os.path.abspath(__file__)))
CONFIG_DIR = os.path.join(BASE_DIR, 'config')
LOG_DIR = os.path.join(BASE_DIR, 'logs')
PLOT_DIR = os.path.join(LOG_DIR, 'plots')

PROMOTION_NAMES = {
    'queen': chess.QUEEN,
    'rook': chess.ROOK,
    'bishop': chess.BISHOP,
    'knight': chess.KNIGHT,
}


@dataclass
class MCTSSettings:
    """
    Settings for one search request.

    Values are validated on construction; invalid settings raise ValueError.
    At least one stop condition (playout limit or time limit) must be enabled.
    """
    exploration_constant: float = 0.7
    limit_num_of_playouts: bool = True
    max_num_of_playouts: int = 1000
    playout_depth_limit: int = 40
    use_time_limit: bool = False
    time_limit_ms: int = 1000
    use_threading: bool = False
    promotions_to_search: Tuple[chess.PieceType, ...] = field(
        default_factory=lambda: (chess.QUEEN, chess.ROOK, chess.BISHOP, chess.KNIGHT)
    )

    def __post_init__(self):
        self.promotions_to_search = tuple(
            PROMOTION_NAMES[p.lower()] if isinstance(p, str) and p.lower() in PROMOTION_NAMES else p
            for p in self.promotions_to_search
        )

        if self.exploration_constant < 0:
            raise ValueError(f"exploration_constant must be non-negative, got {self.exploration_constant}")
        if self.max_num_of_playouts < 1:
            raise ValueError(f"max_num_of_playouts must be at least 1, got {self.max_num_of_playouts}")
        if self.playout_depth_limit < 0:
            raise ValueError(f"playout_depth_limit must be non-negative, got {self.playout_depth_limit}")
        if self.time_limit_ms <= 0:
            raise ValueError(f"time_limit_ms must be positive, got {self.time_limit_ms}")
        if not self.limit_num_of_playouts and not self.use_time_limit:
            raise ValueError("Either limit_num_of_playouts or use_time_limit must be enabled")
        if not self.promotions_to_search:
            raise ValueError("promotions_to_search must name at least one piece")
        for piece_type in self.promotions_to_search:
            if piece_type not in PROMOTION_NAMES.values():
                raise ValueError(f"Invalid promotion piece: {piece_type!r}")

    @classmethod
    def from_config(cls, config: Dict[str, Any], **overrides) -> 'MCTSSettings':
        """
        Build settings from the ``mcts`` section of a configuration dictionary.

        Args:
            config: Configuration dictionary as returned by load_config.
            **overrides: Values that take precedence over the configuration.

        Returns:
            Validated settings.
        """
        mcts_config = dict(config.get('mcts', {}))
        mcts_config.update(overrides)
        known = {name for name in cls.__dataclass_fields__}
        unknown = set(mcts_config) - known - {'seed'}
        if unknown:
            logger.warning(f"Ignoring unknown mcts settings: {sorted(unknown)}")
        return cls(**{k: v for k, v in mcts_config.items() if k in known})


def load_config(config_path: Optional[str] = None) -> Dict[str, Any]:
    """
    Load configuration from YAML file.

    Args:
        config_path: Path to the config file. If None, uses default hyperparameters.yaml.

    Returns:
        Dict containing configuration parameters.

    Raises:
        FileNotFoundError: If the configuration file doesn't exist.
        yaml.YAMLError: If the configuration file is not valid YAML.
    """
    if config_path is None:
        config_path = os.path.join(CONFIG_DIR, 'hyperparameters.yaml')

    logger.info(f"Loading configuration from {config_path}")

    try:
        with open(config_path, 'r') as f:
            config_params = yaml.safe_load(f) or {}
    except FileNotFoundError:
        logger.error(f"Configuration file not found: {config_path}")
        raise
    except yaml.YAMLError as e:
        logger.error(f"Error parsing configuration file: {e}")
        raise

    # Add directory paths to config
    config_params.setdefault('base_dir', BASE_DIR)
    config_params.setdefault('config_dir', CONFIG_DIR)
    config_params.setdefault('log_dir', LOG_DIR)
    config_params.setdefault('plot_dir', PLOT_DIR)

    return config_params

def validate_config(config: Dict[str, Any]) -> bool:
    """
    Validate configuration parameters.

    Args:
        config: Configuration dictionary to validate.

    Returns:
        True if configuration is valid, False otherwise.
    """
    mcts_config = config.get('mcts')
    if not isinstance(mcts_config, dict):
        logger.error("Missing required configuration section: mcts")
        return False

    # Required parameters for MCTS
    required_mcts_params = [
        'exploration_constant', 'max_num_of_playouts', 'playout_depth_limit'
    ]

    # Check for required parameters
    for param in required_mcts_params:
        if param not in mcts_config:
            logger.error(f"Missing required configuration parameter: {param}")
            return False

    try:
        MCTSSettings.from_config(config)
    except (ValueError, TypeError) as e:
        logger.error(f"Invalid mcts settings: {e}")
        return False

    return True

# Load the default configuration
CONFIG = load_config()

# Validate the configuration
if not validate_config(CONFIG):
    logger.warning("Configuration validation failed, using defaults")
