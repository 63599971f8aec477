"""
CD command - change the working directory.
"""

from ..process import Process
from . import register_command
from .base import validate_arg_count


@register_command('cd')
def cmd_cd(process: Process) -> int:
    """
    Change directory

    Usage: cd path

    ``~`` expands to HOME. The target is resolved logically (``..`` drops
    the last component) and must be an existing directory; on any error
    the working directory is left unchanged.

    Examples:
        cd /tmp
        cd ../src
        cd ~/projects
    """
    validate_arg_count(process, min_args=1, max_args=1)
    process.context.change_directory(process.args[0])
    return 0
