"""
Pytest configuration and shared fixtures for myshell tests.

This module provides reusable test fixtures for:
- Sessions rooted in a temporary directory
- Shells with captured console output
- Executable scripts on a private search path
"""

import io
import os

import pytest

from myshell.config import ShellConfig
from myshell.context import Session
from myshell.process import Process
from myshell.shell import Shell, make_console


# ============================================================================
# Pytest Fixtures
# ============================================================================

@pytest.fixture
def bin_dir(tmp_path):
    """
    Provides an empty directory used as the only PATH entry.

    Returns:
        pathlib.Path: Directory for test executables
    """
    path = tmp_path / "bin"
    path.mkdir()
    return path


@pytest.fixture
def work_dir(tmp_path):
    """
    Provides a working directory with a small tree.

    Layout:
        work/
          docs/
            notes/
          file.txt
    """
    work = tmp_path / "work"
    (work / "docs" / "notes").mkdir(parents=True)
    (work / "file.txt").write_text("hello\n")
    return work


@pytest.fixture
def session(work_dir, bin_dir, tmp_path):
    """
    Provides a Session whose cwd is work_dir and whose PATH is bin_dir.

    Example:
        def test_pwd(session):
            assert session.cwd.endswith('/work')
    """
    home = tmp_path / "home"
    home.mkdir()
    return Session(
        cwd=str(work_dir),
        env={'PATH': str(bin_dir), 'HOME': str(home)},
    )


@pytest.fixture
def make_executable(bin_dir):
    """
    Provides a factory that writes a shell script and marks it executable.

    Example:
        def test_run(make_executable):
            path = make_executable('hello', 'echo hello')
    """
    def _make(name, body='exit 0', directory=None, mode=0o755):
        target = (directory or bin_dir) / name
        target.write_text(f"#!/bin/sh\n{body}\n")
        os.chmod(target, mode)
        return target

    return _make


@pytest.fixture
def make_shell(session):
    """
    Provides a factory for Shell instances with a captured console.

    Returns:
        callable: make_shell(input_text=None) -> (shell, output_buffer)
    """
    def _make(input_text=None, prompt='$ '):
        buffer = io.StringIO()
        console = make_console(file=buffer, color_system=None, width=200)
        stdin = io.StringIO(input_text) if input_text is not None else None
        shell = Shell(
            config=ShellConfig(prompt=prompt),
            session=session,
            console=console,
            stdin=stdin,
        )
        return shell, buffer

    return _make


@pytest.fixture
def run_builtin(session):
    """
    Provides a helper that runs a builtin against the session.

    Returns:
        callable: run_builtin(name, *args) -> Process (already executed)
    """
    from myshell.builtins import get_builtin

    def _run(name, *args):
        process = Process(name, list(args), executor=get_builtin(name), context=session)
        process.execute()
        return process

    return _run


# ============================================================================
# Helper Functions
# ============================================================================

def get_stdout(process) -> str:
    """Get stdout content as string."""
    return process.get_stdout().decode('utf-8', errors='replace')


def get_stderr(process) -> str:
    """Get stderr content as string."""
    return process.get_stderr().decode('utf-8', errors='replace')


# Make helper functions available as pytest helpers
pytest.get_stdout = get_stdout
pytest.get_stderr = get_stderr
