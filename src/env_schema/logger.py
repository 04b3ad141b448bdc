"""
env_schema Logger
Package-level logger whose threshold can be set from the environment.
"""
import os
import logging
from typing import Literal, cast

LogLevel = Literal['debug', 'info', 'warning', 'error', 'critical']

LOG_LEVELS = {
    'debug': logging.DEBUG,
    'info': logging.INFO,
    'warning': logging.WARNING,
    'error': logging.ERROR,
    'critical': logging.CRITICAL,
}

LOGGER_NAME = 'env_schema'

_logger = logging.getLogger(LOGGER_NAME)

# Detect initial log level from env
env_level = os.getenv('ENV_SCHEMA_LOG_LEVEL', '').lower()
if env_level in LOG_LEVELS:
    _logger.setLevel(LOG_LEVELS[env_level])

def get_logger(name: str = LOGGER_NAME) -> logging.Logger:
    """Return the package logger, or a child of it for a module name."""
    if name == LOGGER_NAME or name.startswith(f"{LOGGER_NAME}."):
        return logging.getLogger(name)
    return _logger.getChild(name)

def get_log_level() -> LogLevel:
    level = _logger.getEffectiveLevel()
    for name, value in LOG_LEVELS.items():
        if value >= level:
            return cast(LogLevel, name)
    return 'critical'

def set_log_level(level: LogLevel) -> None:
    if level in LOG_LEVELS:
        _logger.setLevel(LOG_LEVELS[level])
