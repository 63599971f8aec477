"""
PWD command - print working directory.
"""

from ..process import Process
from . import register_command


@register_command('pwd')
def cmd_pwd(process: Process) -> int:
    """
    Print working directory

    Usage: pwd

    Note:
        Prints the directory tracked by the session, not os.getcwd().
    """
    process.stdout.write(f"{process.cwd}\n")
    return 0
