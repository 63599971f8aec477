"""
EXIT command - leave the shell.
"""

import re

from ..control_flow import ExitShell
from ..exceptions import InvalidArgumentError
from ..process import Process
from . import register_command
from .base import validate_arg_count

# Optional sign followed by ASCII digits only
NUMERIC = re.compile(r"[+-]?[0-9]+")


@register_command('exit')
def cmd_exit(process: Process) -> int:
    """
    Exit the shell with an optional exit code

    Usage: exit [n]

    Exit with status n (defaults to 0). n is reduced modulo 256.
    A non-numeric n is reported and the shell keeps running.

    Examples:
        exit        # Exit with status 0
        exit 7      # Exit with status 7
    """
    validate_arg_count(process, max_args=1)

    exit_code = 0
    if process.args:
        if not NUMERIC.fullmatch(process.args[0]):
            raise InvalidArgumentError('exit', process.args[0], "numeric argument required")
        exit_code = int(process.args[0])

    raise ExitShell(exit_code & 0xFF)
