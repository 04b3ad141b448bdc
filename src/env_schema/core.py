"""Schema: declare fields once, resolve them from environment and arguments."""

import logging
from typing import Any, Iterator, Mapping, MutableMapping, Optional, Sequence

from .argv_reader import read_argv
from .domain import FieldDefinition
from .env_reader import read_env
from .store import DefinitionStore
from .transforms import env_name, opt_name
from .types import SchemaFlag
from .validators import verify

logger = logging.getLogger(__name__)

class Schema:
    """Set of declared configuration fields.

    Values are resolved with the precedence: command-line option >
    environment variable > initial config value.

    Example:
        schema = Schema()
        schema.define("port", Schema.Required)
        schema.define("verbose", Schema.Flag, Schema.Multi)
        config = schema.read(os.environ, sys.argv[1:])
    """
    Flag = SchemaFlag.FLAG
    Multi = SchemaFlag.MULTI
    Required = SchemaFlag.REQUIRED
    Prompt = SchemaFlag.PROMPT

    env_name = staticmethod(env_name)
    opt_name = staticmethod(opt_name)

    def __init__(self) -> None:
        self._store = DefinitionStore()

    def define(self, name: str, *flags: SchemaFlag) -> FieldDefinition:
        """Declare a field. Redefining a name replaces its flags."""
        return self._store.declare(name, flags)

    def definitions(self) -> Iterator[FieldDefinition]:
        return self._store.enumerate()

    def read(
        self,
        env: Mapping[str, str],
        argv: Sequence[str],
        config: Optional[MutableMapping[str, Any]] = None
    ) -> MutableMapping[str, Any]:
        """Resolve every declared field into config and return it.

        config is used in place (not copied); a new dict is created when
        omitted. Raises SchemaFieldRequiredError when a Required field has
        no value; config may be partially populated in that case.
        """
        if config is None:
            config = {}

        defs = list(self.definitions())
        logger.debug(f"Resolving {len(defs)} field(s) from {len(env)} env var(s) and {len(argv)} arg(s)")

        read_env(defs, env, config)
        read_argv(defs, argv, config)
        verify(defs, config)

        return config

    resolve = read
