"""
Session - the mutable state of one running shell.

This module provides the Session dataclass that is owned by the Shell and
handed to every builtin through ``process.context``. Builtins never touch
process-wide state such as ``os.chdir`` or ``os.environ``.
"""

from dataclasses import dataclass, field
from typing import Dict, Optional
import logging
import os

from . import path_manager
from .exceptions import FileNotFoundError

logger = logging.getLogger(__name__)


@dataclass
class Session:
    """
    Encapsulates all state a command may read or change.

    This provides commands with access to:
    - The tracked working directory
    - A private copy of the environment (PATH, HOME)
    - The exit status of the previous turn

    Example:
        >>> session = Session(cwd='/tmp', env={'HOME': '/home/alice'})
        >>> session.get_variable('HOME')
        '/home/alice'
        >>> session.resolve_path('~/docs')
        '/home/alice/docs'
    """

    cwd: str = '/'
    env: Dict[str, str] = field(default_factory=dict)
    last_exit_code: int = 0

    @classmethod
    def from_environment(cls) -> 'Session':
        """Create a session from the OS working directory and environment"""
        return cls(cwd=os.getcwd(), env=dict(os.environ))

    @property
    def home(self) -> Optional[str]:
        return self.get_variable('HOME')

    @property
    def search_path(self) -> str:
        return self.get_variable('PATH') or ''

    def get_variable(self, name: str) -> Optional[str]:
        """
        Get an environment variable.

        Args:
            name: Variable name

        Returns:
            Variable value or None if not set
        """
        return self.env.get(name)

    def resolve_path(self, path: str) -> str:
        """
        Resolve a path against the working directory without checking it.

        Args:
            path: Path to resolve (relative, absolute or starting with ~)

        Returns:
            Absolute candidate path

        Raises:
            HomeNotSetError: If ``~`` is used and HOME is unset or empty
            FileNotFoundError: If ``..`` walks above the root
        """
        return path_manager.resolve_path(path, self.cwd, self.home)

    def change_directory(self, path: str) -> str:
        """
        Change the working directory.

        The full candidate path is computed and verified before ``cwd`` is
        assigned, so a failure leaves the session unchanged.

        Args:
            path: Target as typed by the user

        Returns:
            The new working directory

        Raises:
            HomeNotSetError: If ``~`` is used and HOME is unset or empty
            FileNotFoundError: If the target does not exist, is not a
                directory, or walks above the root
        """
        candidate = self.resolve_path(path)
        if not path_manager.is_directory(candidate):
            raise FileNotFoundError(path)

        logger.debug("cwd %s -> %s", self.cwd, candidate)
        self.cwd = candidate
        return candidate

    def __repr__(self):
        """String representation for debugging"""
        return (
            f"Session(cwd={self.cwd!r}, "
            f"env_vars={len(self.env)}, "
            f"last_exit_code={self.last_exit_code})"
        )
