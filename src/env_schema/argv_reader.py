"""
Argument pass: consume declared options from an argument list.

Options are matched by their exact long form (see transforms.opt_name).
Matched tokens are removed from a working copy of the arguments; whatever
is left over is stored on the config object under ARGV_KEY.
"""
import re
import logging
from typing import Any, Iterable, List, MutableMapping, Sequence

from .domain import ARGV_KEY, FieldDefinition
from .sensitive import mask_value
from .types import SchemaFlag

logger = logging.getLogger(__name__)

# --name=value (value may be empty)
OPT_WITH_VALUE = re.compile(r'^--.+=')

def split_opts(argv: Sequence[str]) -> List[str]:
    """
    Return a new list where each '--name=value' token becomes '--name', 'value'.

    Example:
        >>> split_opts(['--foo=bar', 'baz', '--flag', '--empty='])
        ['--foo', 'bar', 'baz', '--flag', '--empty', '']
    """
    args: List[str] = []
    for arg in argv:
        if OPT_WITH_VALUE.match(arg):
            opt, _, value = arg.partition('=')
            args.extend([opt, value])
        else:
            args.append(arg)
    return args

def _consume(definition: FieldDefinition, args: List[str], config: MutableMapping[str, Any]) -> int:
    """Consume every occurrence of the field's option from args. Returns the occurrence count."""
    name = definition.name
    opt = definition.opt_name
    count = 0
    i = 0

    while opt in args[i:]:
        i = args.index(opt, i)
        count += 1

        if definition.has(SchemaFlag.FLAG, SchemaFlag.MULTI):
            del args[i]
            config[name] += 1
        elif definition.has(SchemaFlag.FLAG):
            del args[i]
            config[name] = True
        else:
            # A trailing option has no value token and yields None
            value = args[i + 1] if i + 1 < len(args) else None
            del args[i:i + 2]
            if value is None:
                logger.warning(f"Option {opt} given without a value")

            if definition.has(SchemaFlag.MULTI):
                values = config.get(name)
                if not isinstance(values, list):
                    values = config[name] = []
                values.append(value)
            else:
                config[name] = value

    return count

def read_argv(
    definitions: Iterable[FieldDefinition],
    argv: Sequence[str],
    config: MutableMapping[str, Any]
) -> List[str]:
    """Populate config from argv and store the leftover arguments on it."""
    args = split_opts(argv)

    for definition in definitions:
        name = definition.name
        present = definition.opt_name in args

        # Counters restart from zero so the argument count replaces the env count
        if present and definition.has(SchemaFlag.FLAG, SchemaFlag.MULTI):
            config[name] = 0

        if definition.has(SchemaFlag.MULTI, SchemaFlag.REQUIRED) and not definition.has(SchemaFlag.FLAG):
            if present or config.get(name) is None:
                config[name] = []

        if not present:
            continue

        count = _consume(definition, args, config)
        logger.debug(
            f"ARGV SET: {name} = {mask_value(name, config.get(name))} "
            f"(from {count} x {definition.opt_name})"
        )

    config[ARGV_KEY] = args
    return args
