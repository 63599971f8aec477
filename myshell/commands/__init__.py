"""
Builtin command modules.

Each module defines one ``cmd_<name>(process) -> int`` function and
registers it with ``@register_command('<name>')``. ``load_all_commands``
imports every module so the registry is complete.
"""

import importlib
from typing import Callable, Dict

BUILTINS: Dict[str, Callable] = {}

COMMAND_MODULES = (
    'cd',
    'echo',
    'exit_cmd',
    'pwd',
    'type_cmd',
)


def register_command(name: str):
    """
    Decorator that adds a command function to the registry.

    Example:
        @register_command('pwd')
        def cmd_pwd(process):
            ...
    """
    def decorator(func: Callable) -> Callable:
        if name in BUILTINS:
            raise ValueError(f"builtin already registered: {name}")
        BUILTINS[name] = func
        return func
    return decorator


def load_all_commands():
    """Import every command module so each registers itself"""
    for module_name in COMMAND_MODULES:
        importlib.import_module(f'{__name__}.{module_name}')
