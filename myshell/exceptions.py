"""
Custom exception hierarchy for myshell.

This module defines a structured exception hierarchy that provides:
- Clear error categorization
- Consistent error messages
- Proper exit codes

Usage:
    from myshell.exceptions import ShellError

    try:
        session.change_directory(path)
    except ShellError as e:
        print(f"cd: {e}")
        return e.exit_code
"""

from typing import Optional

from .exit_codes import EXIT_CODE_COMMAND_NOT_FOUND, EXIT_CODE_USAGE


class ShellError(Exception):
    """
    Base class for all shell errors.

    All custom exceptions should inherit from this class.
    This allows catching all shell-specific errors with a single except clause.

    Attributes:
        message: Error message
        exit_code: Suggested exit code (default: 1)
    """

    def __init__(self, message: str, exit_code: int = 1):
        super().__init__(message)
        self.message = message
        self.exit_code = exit_code

    def __str__(self):
        return self.message


# =============================================================================
# File System Errors
# =============================================================================

class FileSystemError(ShellError):
    """
    Base class for filesystem-related errors.

    Raised when a path cannot be resolved or verified.
    """

    def __init__(self, message: str, path: Optional[str] = None, exit_code: int = 1):
        super().__init__(message, exit_code)
        self.path = path


class FileNotFoundError(FileSystemError):
    """
    Raised when a directory does not exist or a path walks above the root.

    Example:
        raise FileNotFoundError("/no/such/dir")
    """

    def __init__(self, path: str, message: Optional[str] = None):
        if message is None:
            message = f"{path}: No such file or directory"
        super().__init__(message, path, exit_code=1)


class HomeNotSetError(FileSystemError):
    """Raised when ``~`` is used but HOME is unset or empty."""

    def __init__(self):
        super().__init__("HOME not set", path="~", exit_code=1)


# =============================================================================
# Command Errors
# =============================================================================

class CommandError(ShellError):
    """
    Base class for command-related errors.

    The message is already prefixed with the command name.
    """

    def __init__(self, command: str, message: str, exit_code: int = 1):
        super().__init__(message, exit_code)
        self.command = command


class ExecutableNotFoundError(CommandError):
    """
    Raised when a command is neither a builtin nor found on the search path.

    Example:
        raise ExecutableNotFoundError("nonexistent")
    """

    def __init__(self, command: str):
        super().__init__(command, f"{command}: not found", exit_code=EXIT_CODE_COMMAND_NOT_FOUND)


class CommandNotFoundError(CommandError):
    """
    Raised when a resolved executable could not be spawned.

    Example:
        raise CommandNotFoundError("vanished")
    """

    def __init__(self, command: str):
        message = f"{command}: command not found"
        super().__init__(command, message, exit_code=EXIT_CODE_COMMAND_NOT_FOUND)


class InvalidArgumentError(CommandError):
    """
    Raised when invalid arguments are provided to a command.

    Example:
        raise InvalidArgumentError("exit", "abc", "numeric argument required")
    """

    def __init__(self, command: str, argument: str, details: Optional[str] = None,
                 exit_code: int = EXIT_CODE_USAGE):
        if details is None:
            details = "invalid argument"
        super().__init__(command, f"{command}: {argument}: {details}", exit_code=exit_code)
        self.argument = argument


class CommandSyntaxError(CommandError):
    """
    Raised when a command is called with the wrong number of arguments.

    Example:
        raise CommandSyntaxError("cd", "missing argument")
    """

    def __init__(self, command: str, details: str, exit_code: int = 1):
        message = f"{command}: {details}"
        super().__init__(command, message, exit_code=exit_code)


# =============================================================================
# Parsing Errors
# =============================================================================

class ParsingError(ShellError):
    """
    Base class for parsing-related errors.

    Raised when tokenizing shell input fails.
    """

    def __init__(self, message: str, line: Optional[str] = None, position: Optional[int] = None):
        super().__init__(message, exit_code=EXIT_CODE_USAGE)
        self.line = line
        self.position = position


class UnmatchedQuoteError(ParsingError):
    """
    Raised when the line ends while a quote is still open.

    Example:
        raise UnmatchedQuoteError("echo 'hello", quote_char="'", position=5)
    """

    def __init__(self, line: str, quote_char: str = '"', position: Optional[int] = None):
        message = f"unterminated quote: {quote_char}"
        super().__init__(message, line=line, position=position)
        self.quote_char = quote_char
