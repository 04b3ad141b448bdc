"""
env_schema - Declare configuration fields once and resolve them from
environment variables and command-line options
"""
from .types import SchemaFlag, Flag, Multi, Required, Prompt
from .transforms import env_name, opt_name
from .domain import ARGV_KEY, FieldDefinition
from .store import DefinitionStore
from .env_reader import read_env
from .argv_reader import read_argv, split_opts
from .validators import SchemaError, SchemaFieldRequiredError, verify
from .core import Schema
from .sources import process_env, process_argv
from .logger import get_logger, get_log_level, set_log_level
from .sensitive import mask_value, set_log_mask

__all__ = [
    # Flags
    "SchemaFlag",
    "Flag",
    "Multi",
    "Required",
    "Prompt",
    # Name transforms
    "env_name",
    "opt_name",
    # Definitions
    "ARGV_KEY",
    "FieldDefinition",
    "DefinitionStore",
    # Resolution passes
    "read_env",
    "read_argv",
    "split_opts",
    "verify",
    "Schema",
    # Errors
    "SchemaError",
    "SchemaFieldRequiredError",
    # Process inputs
    "process_env",
    "process_argv",
    # Logging
    "get_logger",
    "get_log_level",
    "set_log_level",
    "mask_value",
    "set_log_mask",
]
