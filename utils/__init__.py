"""
Utility Package.

This package contains utility functions and helpers used throughout the MCTS chess engine.
"""

from .logger import setup_logger, log_config, log_system_info, log_exception, LoggerAdapter
from .visualization import plot_root_statistics

__all__ = [
    'setup_logger', 'log_config', 'log_system_info', 'log_exception', 'LoggerAdapter',
    'plot_root_statistics',
]
