# -*- coding: utf-8 -*-
"""
Logging utilities for the plugin integration pipeline
"""

import logging
import sys
from pathlib import Path
from typing import Optional, Union, TYPE_CHECKING

if TYPE_CHECKING:
    from .config import Config
    from .settings import IntegratorSettings

LOGGER_NAME = 'ditaplugins'
LOG_FORMAT = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'
DATE_FORMAT = '%Y-%m-%d %H:%M:%S'


def setup_logger(
    name: str = LOGGER_NAME,
    level: str = 'INFO',
    log_file: Optional[Union[str, Path]] = None,
    console: bool = True
) -> logging.Logger:
    """Setup the integrator logger with console and file handlers

    Calling it again replaces the handlers instead of stacking them.

    Args:
        name: Logger name
        level: Log level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
        log_file: Path to log file (optional)
        console: Whether to output to stdout

    Returns:
        Configured logger
    """
    log_level = getattr(logging, level.upper())
    logger = logging.getLogger(name)
    logger.setLevel(log_level)
    logger.handlers.clear()

    formatter = logging.Formatter(LOG_FORMAT, datefmt=DATE_FORMAT)

    if console:
        stream = logging.StreamHandler(sys.stdout)
        stream.setLevel(log_level)
        stream.setFormatter(formatter)
        logger.addHandler(stream)

    if log_file:
        log_path = Path(log_file)
        log_path.parent.mkdir(parents=True, exist_ok=True)

        file_handler = logging.FileHandler(log_path, encoding='utf-8')
        file_handler.setLevel(logging.DEBUG)
        file_handler.setFormatter(formatter)
        logger.addHandler(file_handler)

    return logger


def setup_logger_from_config(config: 'Config', console: bool = True) -> logging.Logger:
    """Setup the integrator logger from the ``logging`` config section

    Args:
        config: Config instance
        console: Whether to output to stdout

    Returns:
        Configured logger
    """
    return setup_logger(
        name=LOGGER_NAME,
        level=config.get('logging.level', 'INFO'),
        log_file=config.get('logging.file'),
        console=console,
    )


def setup_logger_from_settings(
    settings: 'IntegratorSettings',
    log_file: Optional[Union[str, Path]] = None,
    console: bool = True
) -> logging.Logger:
    """Setup the integrator logger at the settings' log level

    Args:
        settings: IntegratorSettings instance
        log_file: Path to log file (optional)
        console: Whether to output to stdout

    Returns:
        Configured logger
    """
    return setup_logger(
        name=LOGGER_NAME,
        level=settings.log_level.value,
        log_file=log_file,
        console=console,
    )
