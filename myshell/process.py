"""Process class for running a builtin command"""

from typing import List, Optional, Callable
import logging

from .context import Session
from .streams import OutputStream, ErrorStream
from .control_flow import ControlFlowException
from .exceptions import CommandError, ShellError
from .exit_codes import EXIT_CODE_COMMAND_NOT_FOUND, EXIT_CODE_FAILURE

logger = logging.getLogger(__name__)


class Process:
    """Represents a single builtin invocation and its captured output"""

    def __init__(
        self,
        command: str,
        args: List[str],
        stdout: Optional[OutputStream] = None,
        stderr: Optional[ErrorStream] = None,
        executor: Optional[Callable] = None,
        context: Optional[Session] = None,
    ):
        """
        Initialize a process

        Args:
            command: Command name
            args: Command arguments
            stdout: Output stream
            stderr: Error stream
            executor: Callable that executes the command
            context: Session the command reads and changes
        """
        self.command = command
        self.args = args
        self.stdout = stdout or OutputStream.to_buffer()
        self.stderr = stderr or ErrorStream.to_buffer()
        self.executor = executor
        self.context = context if context is not None else Session()

        self.exit_code = 0

    @property
    def cwd(self):
        """Current working directory of the session"""
        return self.context.cwd

    def execute(self) -> int:
        """
        Execute the process

        Returns:
            Exit code (0 for success, non-zero for error)

        Raises:
            ControlFlowException: Loop directives such as ``exit`` propagate
        """
        if self.executor is None:
            self.stderr.write(f"{self.command}: command not found\n")
            self.exit_code = EXIT_CODE_COMMAND_NOT_FOUND
            return self.exit_code

        try:
            self.exit_code = self.executor(self)
        except KeyboardInterrupt:
            # Let KeyboardInterrupt propagate for proper Ctrl-C handling
            raise
        except ControlFlowException:
            raise
        except CommandError as e:
            self.stderr.write(f"{e}\n")
            self.exit_code = e.exit_code
        except ShellError as e:
            self.stderr.write(f"{self.command}: {e}\n")
            self.exit_code = e.exit_code
        except Exception as e:
            logger.debug("builtin %s raised", self.command, exc_info=True)
            self.stderr.write(f"Error executing '{self.command}': {str(e)}\n")
            self.exit_code = EXIT_CODE_FAILURE

        self.stdout.flush()
        self.stderr.flush()

        return self.exit_code

    def get_stdout(self) -> bytes:
        """Get stdout contents"""
        return self.stdout.get_value()

    def get_stderr(self) -> bytes:
        """Get stderr contents"""
        return self.stderr.get_value()

    def __repr__(self):
        args_str = ' '.join(self.args) if self.args else ''
        return f"Process({self.command} {args_str})"
