"""Spawning of external commands with inherited standard streams"""

import logging
import subprocess
from typing import List

from .context import Session
from .exceptions import CommandNotFoundError
from .exit_codes import EXIT_CODE_SIGNAL_BASE

logger = logging.getLogger(__name__)


def run_external(command: str, path: str, args: List[str], session: Session) -> int:
    """
    Run an executable and wait for it to exit.

    The child gets ``[path, *args]`` as argv, runs in the session's working
    directory with the session's environment, and shares the shell's
    stdin, stdout and stderr. Nothing is captured.

    Args:
        command: Name the user typed, used in error messages
        path: Resolved executable path
        args: Argument vector
        session: Session providing cwd and env

    Returns:
        Exit status of the child; 128 + N if it was killed by signal N

    Raises:
        CommandNotFoundError: If the process could not be started
    """
    argv = [path] + list(args)
    logger.debug("spawn %r in %s", argv, session.cwd)
    try:
        completed = subprocess.run(argv, cwd=session.cwd, env=session.env)
    except OSError as e:
        logger.debug("spawn of %s failed: %s", path, e)
        raise CommandNotFoundError(command) from e

    returncode = completed.returncode
    if returncode < 0:
        returncode = EXIT_CODE_SIGNAL_BASE - returncode
    logger.debug("%s exited with %d", command, returncode)
    return returncode
