from enum import Enum

class SchemaFlag(Enum):
    """Markers attached to a field definition to change how it resolves."""
    FLAG = 'FLAG'
    MULTI = 'MULTI'
    REQUIRED = 'REQUIRED'
    # Reserved; accepted by define() but ignored when reading/validating
    PROMPT = 'PROMPT'

Flag = SchemaFlag.FLAG
Multi = SchemaFlag.MULTI
Required = SchemaFlag.REQUIRED
Prompt = SchemaFlag.PROMPT
