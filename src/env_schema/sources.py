"""
Helpers for building resolution inputs from the running process.
"""
import os
import sys
import logging
from typing import Dict, List, Optional
from dotenv import dotenv_values

from .sensitive import mask_value

logger = logging.getLogger(__name__)

def process_env(dotenv_path: Optional[str] = None) -> Dict[str, str]:
    """
    Return a copy of the process environment, for use as the env argument
    of Schema.read. This only builds an input mapping; it takes no part in
    resolution, and Schema.read never reads files or os.environ itself.

    Args:
        dotenv_path: Optional dotenv file whose variables fill in keys that
            are not already set in the process environment. os.environ
            itself is never modified.
    """
    env = dict(os.environ)

    if dotenv_path is None:
        return env

    if not os.path.isfile(dotenv_path):
        logger.warning(f"Dotenv file not found: {dotenv_path}")
        return env

    logger.debug(f"Loading file: {dotenv_path}")
    for key, value in dotenv_values(dotenv_path).items():
        if value is None:
            continue
        if key in env:
            logger.debug(f"ENV SKIP: {key} (already set in process)")
            continue
        logger.debug(f"ENV SET: {key} = {mask_value(key, value)}")
        env[key] = value

    return env

def process_argv() -> List[str]:
    """Return a copy of sys.argv."""
    return list(sys.argv)
