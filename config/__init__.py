"""
MCTS Chess Configuration Package.

This package contains configuration utilities and parameters for the MCTS chess engine.
"""

from .config import CONFIG, MCTSSettings, load_config, validate_config

__all__ = ['CONFIG', 'MCTSSettings', 'load_config', 'validate_config']
