"""
Built-in shell commands registry.

All built-in commands live in the commands/ directory. This module loads
them once and exposes a read-only table; the set of builtins never changes
after import.
"""

from types import MappingProxyType

from .commands import load_all_commands, BUILTINS as _COMMANDS

# Load all command modules to populate the registry
load_all_commands()

BUILTINS = MappingProxyType(dict(_COMMANDS))


def get_builtin(command: str):
    """
    Get a built-in command executor.

    Args:
        command: The command name to look up (case-sensitive)

    Returns:
        The command function, or None if not found

    Example:
        >>> executor = get_builtin('echo')
        >>> if executor:
        ...     executor(process)
    """
    return BUILTINS.get(command)
