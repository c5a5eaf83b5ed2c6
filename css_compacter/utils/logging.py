"""Logging utility for CSS Compacter."""

import logging
import os
from typing import Optional
from .common import ensure_directory
from .config import LOG_LEVEL

LOG_FORMAT = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'

def setup_logging(log_level: Optional[int] = None, log_file: Optional[str] = None) -> None:
    """Set up logging configuration.

    Args:
        log_level: Logging level, defaults to LOG_LEVEL
        log_file: Optional file to log to in addition to stderr
    """
    if log_level is None:
        log_level = getattr(logging, LOG_LEVEL)

    handlers = [logging.StreamHandler()]
    if log_file:
        ensure_directory(os.path.dirname(log_file))
        handlers.append(logging.FileHandler(log_file))

    logging.basicConfig(
        level=log_level,
        format=LOG_FORMAT,
        datefmt='%Y-%m-%d %H:%M:%S',
        handlers=handlers
    )

def get_logger(name):
    """Get a logger instance for the specified module.
    
    Args:
        name: Name of the module
        
    Returns:
        Logger instance
    """
    return logging.getLogger(name)

# Exported functions
__all__ = ['setup_logging', 'get_logger', 'LOG_FORMAT']
