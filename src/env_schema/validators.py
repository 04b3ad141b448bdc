"""Required-field validation and custom exceptions."""

import logging
from typing import Any, Dict, Iterable, MutableMapping

from .domain import FieldDefinition
from .transforms import env_name, opt_name
from .types import SchemaFlag

logger = logging.getLogger(__name__)

class SchemaError(Exception):
    """Base exception for schema resolution errors."""
    pass

class SchemaFieldRequiredError(SchemaError):
    """Raised when a Required field has no value from any source."""
    def __init__(self, field_name: str):
        super().__init__(f"missing required {field_name}")
        self.field_name = field_name
        self.env_name = env_name(field_name)
        self.opt_name = opt_name(field_name)

    def to_dict(self) -> Dict[str, str]:
        return {
            "field_name": self.field_name,
            "env_name": self.env_name,
            "opt_name": self.opt_name,
        }

def verify(definitions: Iterable[FieldDefinition], config: MutableMapping[str, Any]) -> None:
    """
    Check Required fields after the environment and argument passes.

    Flag-shaped fields fall back to their "off" value (0 for counters,
    False for switches); any other missing Required field raises.
    """
    for definition in definitions:
        name = definition.name

        if not definition.has(SchemaFlag.REQUIRED) or config.get(name) is not None:
            continue

        if definition.has(SchemaFlag.FLAG, SchemaFlag.MULTI):
            config[name] = 0
        elif definition.has(SchemaFlag.FLAG):
            config[name] = False
        else:
            logger.debug(f"Required field '{name}' is missing (tried {definition.env_name}, {definition.opt_name})")
            raise SchemaFieldRequiredError(name)
