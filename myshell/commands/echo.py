"""
ECHO command - print arguments.
"""

from ..process import Process
from . import register_command


@register_command('echo')
def cmd_echo(process: Process) -> int:
    """Echo arguments to stdout, separated by single spaces"""
    process.stdout.write(' '.join(process.args) + '\n')
    return 0
