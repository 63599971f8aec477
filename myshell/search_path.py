"""
Lookup of external commands on the search path.

Directories listed in PATH are searched in order and the first regular
file with an execute bit wins, so earlier directories shadow later ones.
"""

import logging
import os
import stat
from typing import List, Optional

logger = logging.getLogger(__name__)

EXECUTE_BITS = stat.S_IXUSR | stat.S_IXGRP | stat.S_IXOTH


def is_executable(path: str) -> bool:
    """
    Check that a path exists, is not a directory and has an execute bit.

    Symlinks are followed.
    """
    try:
        st = os.stat(path)
    except OSError:
        return False
    if stat.S_ISDIR(st.st_mode):
        return False
    return bool(st.st_mode & EXECUTE_BITS)


def split_search_path(search_path: Optional[str], cwd: str = '/') -> List[str]:
    """
    Split a PATH value into absolute directories.

    Empty entries are skipped; relative entries are taken relative to cwd.

    Example:
        >>> split_search_path('/bin::bin', cwd='/opt')
        ['/bin', '/opt/bin']
    """
    if not search_path:
        return []
    directories = []
    for entry in search_path.split(os.pathsep):
        if not entry:
            continue
        if not os.path.isabs(entry):
            entry = os.path.normpath(os.path.join(cwd, entry))
        directories.append(entry)
    return directories


def find_executable(name: str, search_path: Optional[str], cwd: str = '/') -> Optional[str]:
    """
    Resolve a command name to an executable file.

    Args:
        name: Command name as typed by the user
        search_path: Value of PATH
        cwd: Working directory for relative PATH entries and for names
            that contain a separator

    Returns:
        Absolute path of the executable, or None if not found

    Examples:
        find_executable('ls', '/usr/bin:/bin') -> '/usr/bin/ls'
        find_executable('./run.sh', '', cwd='/src') -> '/src/run.sh'
    """
    if not name:
        return None

    if os.sep in name:
        candidate = os.path.normpath(os.path.join(cwd, name))
        return candidate if is_executable(candidate) else None

    for directory in split_search_path(search_path, cwd):
        candidate = os.path.join(directory, name)
        if is_executable(candidate):
            logger.debug("resolved %s -> %s", name, candidate)
            return candidate

    logger.debug("%s not found on search path", name)
    return None
