"""
Base utilities for command implementations.

This module provides common helper functions that command modules can use
to reduce code duplication and maintain consistency.
"""

from typing import Optional

from ..exceptions import CommandSyntaxError
from ..process import Process


def validate_arg_count(process: Process, min_args: int = 0, max_args: Optional[int] = None):
    """
    Validate the number of arguments.

    Args:
        process: The process object
        min_args: Minimum required arguments
        max_args: Maximum allowed arguments (None = unlimited)

    Raises:
        CommandSyntaxError: With "missing argument" or "too many arguments"
    """
    arg_count = len(process.args)

    if arg_count < min_args:
        raise CommandSyntaxError(process.command, "missing argument")

    if max_args is not None and arg_count > max_args:
        raise CommandSyntaxError(process.command, "too many arguments")


__all__ = [
    'validate_arg_count',
]
