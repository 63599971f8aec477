"""Path resolution for changing the working directory.

This module provides the logical path walk used by ``cd``:
- ``~`` and ``~/...`` expand to HOME
- Absolute paths restart from the root, relative ones from the cwd
- ``.`` and empty components are dropped, ``..`` pops one component
- Popping above the root is an error rather than being clamped

Nothing here touches the filesystem; verifying that the result is a
directory is left to the caller.
"""

import os
from typing import List, Optional

from .exceptions import FileNotFoundError, HomeNotSetError

SEPARATOR = "/"


def expand_home(path: str, home: Optional[str]) -> str:
    """Replace a leading ``~`` with HOME.

    Args:
        path: Path as typed by the user
        home: Value of HOME (may be None or empty)

    Returns:
        Path with ``~`` expanded; other paths are returned unchanged

    Raises:
        HomeNotSetError: If the path needs HOME and it is unset or empty
    """
    if path != "~" and not path.startswith("~" + SEPARATOR):
        return path
    if not home:
        raise HomeNotSetError()
    return home + path[1:]


def split_components(path: str) -> List[str]:
    """Split a path into its non-empty components."""
    return [part for part in path.split(SEPARATOR) if part]


def resolve_path(path: str, cwd: str, home: Optional[str] = None) -> str:
    """Resolve a cd argument to an absolute candidate path.

    Args:
        path: Path as typed by the user
        cwd: Current working directory (absolute)
        home: Value of HOME used for ``~``

    Returns:
        Absolute, normalized candidate path

    Raises:
        HomeNotSetError: If ``~`` is used without HOME
        FileNotFoundError: If ``..`` walks above the root

    Examples:
        resolve_path('docs', '/home/user') -> '/home/user/docs'
        resolve_path('../x', '/home/user') -> '/home/x'
        resolve_path('/etc/./ssh', '/tmp') -> '/etc/ssh'
        resolve_path('..', '/') -> FileNotFoundError
    """
    expanded = expand_home(path, home)

    if expanded.startswith(SEPARATOR):
        parts: List[str] = []
    else:
        parts = split_components(cwd)

    for component in expanded.split(SEPARATOR):
        if component in ("", "."):
            continue
        if component == "..":
            if not parts:
                raise FileNotFoundError(path)
            parts.pop()
        else:
            parts.append(component)

    return SEPARATOR + SEPARATOR.join(parts)


def is_directory(path: str) -> bool:
    """Check that a path exists and is a directory."""
    return os.path.isdir(path)
