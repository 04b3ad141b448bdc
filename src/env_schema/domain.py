"""Data models for env_schema."""

from typing import Annotated, FrozenSet
from pydantic import BaseModel, ConfigDict, Field, Strict

from .types import SchemaFlag
from .transforms import env_name, opt_name

# Key of the config object that receives unconsumed arguments
ARGV_KEY = "argv"

class FieldDefinition(BaseModel):
    """A declared field and the flags that control its resolution."""
    model_config = ConfigDict(frozen=True)

    name: str
    # Strict: flags must be SchemaFlag members, not their string values
    flags: FrozenSet[Annotated[SchemaFlag, Strict()]] = Field(default_factory=frozenset)

    def has(self, *flags: SchemaFlag) -> bool:
        """True when every given flag is set on this field."""
        return all(flag in self.flags for flag in flags)

    @property
    def env_name(self) -> str:
        return env_name(self.name)

    @property
    def opt_name(self) -> str:
        return opt_name(self.name)
