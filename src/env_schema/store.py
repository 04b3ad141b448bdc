"""Insertion-ordered storage of field definitions."""

import logging
from typing import Dict, Iterable, Iterator, Optional

from .domain import FieldDefinition
from .types import SchemaFlag

logger = logging.getLogger(__name__)

class DefinitionStore:
    """Holds one FieldDefinition per field name, in declaration order."""

    def __init__(self) -> None:
        self._defs: Dict[str, FieldDefinition] = {}

    def declare(self, name: str, flags: Iterable[SchemaFlag] = ()) -> FieldDefinition:
        """Store the definition for name, replacing any previous one."""
        definition = FieldDefinition(name=name, flags=frozenset(flags))

        if name in self._defs:
            logger.debug(f"Redefining field '{name}'")

        self._defs[name] = definition
        return definition

    def enumerate(self) -> Iterator[FieldDefinition]:
        # Generator, so each pass sees the store as it is when iterated
        for definition in self._defs.values():
            yield definition

    def get(self, name: str) -> Optional[FieldDefinition]:
        return self._defs.get(name)

    def __contains__(self, name: object) -> bool:
        return name in self._defs

    def __len__(self) -> int:
        return len(self._defs)
