"""
Environment pass: map environment variables onto declared fields.
"""
import logging
from typing import Any, Iterable, Mapping, MutableMapping

from .domain import FieldDefinition
from .sensitive import mask_value
from .types import SchemaFlag

logger = logging.getLogger(__name__)

def env_value(definition: FieldDefinition, raw: str) -> Any:
    """Derive a field value from a raw environment string according to its flags."""
    if definition.has(SchemaFlag.FLAG, SchemaFlag.MULTI):
        return 1 if raw else 0
    if definition.has(SchemaFlag.FLAG):
        return bool(raw)
    if definition.has(SchemaFlag.MULTI):
        return [raw]
    return raw

def read_env(
    definitions: Iterable[FieldDefinition],
    env: Mapping[str, str],
    config: MutableMapping[str, Any]
) -> None:
    """Populate config from env. Fields without a matching variable are left untouched."""
    for definition in definitions:
        name = definition.env_name

        if name not in env:
            continue

        value = env_value(definition, env[name])
        config[definition.name] = value
        logger.debug(f"ENV SET: {definition.name} = {mask_value(definition.name, value)} (from {name})")
