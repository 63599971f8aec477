"""Shell implementation with REPL and command execution"""

import logging
from typing import Callable, List, Optional, TextIO

from rich.console import Console

from .builtins import get_builtin
from .config import ShellConfig
from .context import Session
from .control_flow import ExitShell
from .exceptions import CommandError, ExecutableNotFoundError, ParsingError
from .executor import run_external
from .exit_codes import EXIT_CODE_SUCCESS
from .lexer import split_command
from .process import Process
from .search_path import find_executable

logger = logging.getLogger(__name__)

SHELL_NAME = "myshell"


def make_console(**kwargs) -> Console:
    """Console that prints text verbatim: no markup, emoji or wrapping"""
    kwargs.setdefault("highlight", False)
    kwargs.setdefault("markup", False)
    kwargs.setdefault("emoji", False)
    kwargs.setdefault("soft_wrap", True)
    return Console(**kwargs)


class Shell:
    """Line-at-a-time shell with builtins and external commands"""

    def __init__(
        self,
        config: Optional[ShellConfig] = None,
        session: Optional[Session] = None,
        console: Optional[Console] = None,
        stdin: Optional[TextIO] = None,
    ):
        """
        Args:
            config: Prompt and debug settings
            session: Working directory and environment; defaults to the
                current process state
            console: Rich console used for all shell output
            stdin: Stream to read lines from; None reads the terminal
        """
        self.config = config or ShellConfig()
        self.session = session if session is not None else Session.from_environment()
        self.console = console or make_console()
        self.stdin = stdin

    def execute(self, command_line: str) -> int:
        """
        Run one line: tokenize, then dispatch to a builtin or executable.

        Args:
            command_line: Line as typed, without the trailing newline

        Returns:
            Exit status of the turn

        Raises:
            ExitShell: If the exit builtin was run
        """
        try:
            command, args = split_command(command_line)
        except ParsingError as e:
            self.report_error(f"{SHELL_NAME}: {e}")
            return self._finish(e.exit_code)

        if command is None:
            return EXIT_CODE_SUCCESS

        executor = get_builtin(command)
        if executor is not None:
            return self._finish(self.run_builtin(command, args, executor))

        try:
            return self._finish(self.run_external(command, args))
        except CommandError as e:
            self.report_error(str(e))
            return self._finish(e.exit_code)

    def run_builtin(self, command: str, args: List[str], executor: Callable) -> int:
        """Run a builtin and print what it wrote"""
        logger.debug("builtin %s %r", command, args)
        process = Process(command, args, executor=executor, context=self.session)
        try:
            exit_code = process.execute()
        finally:
            self._render(process)
        return exit_code

    def run_external(self, command: str, args: List[str]) -> int:
        """
        Resolve a command on PATH and run it in the foreground.

        Raises:
            ExecutableNotFoundError: If no executable matches
            CommandNotFoundError: If the executable could not be started
        """
        path = find_executable(command, self.session.search_path, self.session.cwd)
        if path is None:
            raise ExecutableNotFoundError(command)

        # Anything already printed must reach the terminal before the child writes
        self.console.file.flush()
        return run_external(command, path, args, self.session)

    def report_error(self, message: str):
        self.console.print(message, style="red")

    def read_line(self) -> str:
        """
        Print the prompt and read one line.

        Raises:
            EOFError: At end of input
        """
        if self.stdin is None:
            return self.console.input(self.config.prompt, markup=False, emoji=False)

        line = self.console.input(self.config.prompt, markup=False, emoji=False,
                                  stream=self.stdin)
        if not line:
            raise EOFError
        return line.rstrip("\n")

    def repl(self) -> int:
        """
        Run the read-eval loop until exit or end of input.

        Returns:
            Status given to exit, or 0 at end of input

        Raises:
            OSError: If reading input fails
        """
        while True:
            try:
                line = self.read_line()
            except EOFError:
                # Leave the terminal on a fresh line after Ctrl+D
                if self.console.is_terminal:
                    self.console.print()
                return EXIT_CODE_SUCCESS
            except KeyboardInterrupt:
                # Ctrl+C at the prompt - start a new line
                self.console.print()
                continue

            try:
                self.execute(line)
            except ExitShell as e:
                logger.debug("exit %d", e.exit_code)
                return e.exit_code
            except KeyboardInterrupt:
                self.console.print()
                continue

    def _render(self, process: Process):
        stdout_text = process.stdout.get_text()
        if stdout_text:
            # Builtin output is user data: write it verbatim, not as rich Text
            self.console.file.write(stdout_text)
            self.console.file.flush()
        stderr_text = process.stderr.get_text()
        if stderr_text:
            self.console.print(stderr_text, end="", style="red")

    def _finish(self, exit_code: int) -> int:
        self.session.last_exit_code = exit_code
        return exit_code
