"""
TYPE command - describe how a name would be run.
"""

from ..process import Process
from ..search_path import find_executable
from . import BUILTINS, register_command
from .base import validate_arg_count


@register_command('type')
def cmd_type(process: Process) -> int:
    """
    Show whether each name is a builtin or an executable on PATH

    Usage: type name [name ...]

    Returns:
        0 if every name was found, 1 otherwise

    Examples:
        type cd      # cd is a shell builtin
        type ls      # ls is /usr/bin/ls
        type nope    # nope: not found
    """
    validate_arg_count(process, min_args=1)

    session = process.context
    exit_code = 0
    for name in process.args:
        if name in BUILTINS:
            process.stdout.write(f"{name} is a shell builtin\n")
            continue

        path = find_executable(name, session.search_path, session.cwd)
        if path:
            process.stdout.write(f"{name} is {path}\n")
        else:
            process.stdout.write(f"{name}: not found\n")
            exit_code = 1

    return exit_code
