"""
Field name transformations for environment variables and CLI options
"""
import re

ENV_SEPARATORS = re.compile(r'[ -]')
OPT_SEPARATORS = re.compile(r'[ _]')


def env_name(name: str) -> str:
    """
    Convert a field name to its environment variable name

    Examples:
        >>> env_name('simple value')
        'SIMPLE_VALUE'
        >>> env_name('foo-bar')
        'FOO_BAR'
    """
    return ENV_SEPARATORS.sub('_', name).upper()


def opt_name(name: str) -> str:
    """
    Convert a field name to its long CLI option

    Examples:
        >>> opt_name('simple value')
        '--simple-value'
        >>> opt_name('FOO_BAR')
        '--foo-bar'
    """
    return f"--{OPT_SEPARATORS.sub('-', name).lower()}"
