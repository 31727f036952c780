"""
Logging utilities for the MCTS chess engine.

This module provides a consistent logging setup across the application.
"""

import os
import sys
import logging
from datetime import datetime
from typing import Dict, Any, Optional

def setup_logger(config: Dict[str, Any], log_name: Optional[str] = None,
                 log_to_file: bool = True) -> logging.Logger:
    """
    Set up and configure the root logger.

    Args:
        config: Configuration dictionary
        log_name: Optional name for the log file (if None, uses timestamp)
        log_to_file: Whether to add a file handler in ``log_dir``

    Returns:
        Configured logger instance
    """
    # Get log level from config
    system_config = config.get('system', {})
    log_level_str = system_config.get('log_level', 'INFO')
    log_level = logging.getLevelName(log_level_str.upper())
    if not isinstance(log_level, int):
        log_level = logging.INFO

    # Configure root logger
    root_logger = logging.getLogger()
    root_logger.setLevel(log_level)

    # Remove existing handlers to avoid duplicates
    for handler in root_logger.handlers[:]:
        root_logger.removeHandler(handler)

    formatter = logging.Formatter('%(asctime)s - %(name)s - %(levelname)s - %(message)s')

    # Configure console handler
    console_handler = logging.StreamHandler(sys.stdout)
    console_handler.setLevel(log_level)
    console_handler.setFormatter(formatter)
    root_logger.addHandler(console_handler)

    log_path = None
    if log_to_file:
        log_dir = config.get('log_dir', './logs')
        os.makedirs(log_dir, exist_ok=True)

        # Get or create log file name
        if log_name is None:
            timestamp = datetime.now().strftime('%Y%m%d-%H%M%S')
            log_name = f"mcts_chess_{timestamp}.log"

        log_path = os.path.join(log_dir, log_name)

        file_handler = logging.FileHandler(log_path)
        file_handler.setLevel(log_level)
        file_handler.setFormatter(formatter)
        root_logger.addHandler(file_handler)

    logger = logging.getLogger(__name__)
    logger.info(f"Logging initialized at level {logging.getLevelName(log_level)}")
    if log_path:
        logger.info(f"Log file: {log_path}")

    return root_logger

def log_config(config: Dict[str, Any], logger: Optional[logging.Logger] = None) -> None:
    """
    Log the configuration parameters.

    Args:
        config: Configuration dictionary
        logger: Logger to use (if None, uses the module logger)
    """
    if logger is None:
        logger = logging.getLogger(__name__)

    logger.info("Configuration parameters:")

    for section, params in config.items():
        if isinstance(params, dict):
            logger.info(f"  {section}:")
            for key, value in params.items():
                logger.info(f"    {key}: {value}")
        else:
            logger.info(f"  {section}: {params}")

def log_system_info(logger: Optional[logging.Logger] = None) -> None:
    """
    Log interpreter and library versions.

    Args:
        logger: Logger to use (if None, uses the module logger)
    """
    if logger is None:
        logger = logging.getLogger(__name__)

    import platform
    import chess
    import numpy as np

    logger.info("System information:")
    logger.info(f"  Python version: {platform.python_version()}")
    logger.info(f"  System: {platform.system()} {platform.release()}")
    logger.info(f"  python-chess version: {chess.__version__}")
    logger.info(f"  NumPy version: {np.__version__}")

def log_exception(e: Exception, logger: Optional[logging.Logger] = None) -> None:
    """
    Log an exception with traceback.

    Args:
        e: Exception to log
        logger: Logger to use (if None, uses the module logger)
    """
    if logger is None:
        logger = logging.getLogger(__name__)

    logger.error(f"Exception: {e}", exc_info=e)

class LoggerAdapter(logging.LoggerAdapter):
    """
    Logger adapter that prefixes every message with a context tag.

    Used to tag all messages of one search request, e.g. ``[search 3]``.
    """

    def __init__(self, logger: logging.Logger, prefix: str):
        """
        Initialize the logger adapter.

        Args:
            logger: Logger to adapt
            prefix: Prefix to add to all messages
        """
        super().__init__(logger, {})
        self.prefix = prefix

    def process(self, msg, kwargs):
        return f"[{self.prefix}] {msg}", kwargs
