"""
Sensitive Value Detection and Masking
"""
import os
import re
from typing import Any

SENSITIVE_KEY_PATTERNS = [
    re.compile(r'KEY', re.IGNORECASE),
    re.compile(r'SECRET', re.IGNORECASE),
    re.compile(r'PASSWORD', re.IGNORECASE),
    re.compile(r'TOKEN', re.IGNORECASE),
    re.compile(r'CREDENTIAL', re.IGNORECASE),
    re.compile(r'AUTH', re.IGNORECASE),
    re.compile(r'PRIVATE', re.IGNORECASE)
]

MASK = '[REDACTED]'

_log_mask = os.getenv('ENV_SCHEMA_LOG_MASK', '').lower() != 'false'

def set_log_mask(enabled: bool) -> None:
    global _log_mask
    _log_mask = enabled

def is_sensitive_key(key: str) -> bool:
    return any(p.search(key) for p in SENSITIVE_KEY_PATTERNS)

def mask_value(key: str, value: Any) -> str:
    """Render a field value for logs, hiding it when the field name looks secret."""
    if not _log_mask or not is_sensitive_key(key):
        return repr(value)

    if value is None or value == "" or value == []:
        return repr(value)

    return MASK
