"""Exceptions that steer the read-eval loop rather than report errors"""


class ControlFlowException(Exception):
    """Base class for loop directives raised by builtins"""
    pass


class ExitShell(ControlFlowException):
    """Raised by the exit builtin to stop the loop with the given status"""

    def __init__(self, exit_code: int = 0):
        super().__init__(exit_code)
        self.exit_code = exit_code
