"""Runtime settings for the shell, read from the environment and CLI flags"""

import os
from dataclasses import dataclass
from typing import Mapping, Optional

DEFAULT_PROMPT = "$ "

PROMPT_VAR = "MYSHELL_PROMPT"
DEBUG_VAR = "MYSHELL_DEBUG"

_TRUTHY = {"1", "true", "yes", "on"}


def _is_truthy(value: Optional[str]) -> bool:
    return value is not None and value.strip().lower() in _TRUTHY


@dataclass
class ShellConfig:
    """
    Settings that do not change while the shell runs.

    Attributes:
        prompt: Text printed before each line is read
        debug: Enable debug logging
    """

    prompt: str = DEFAULT_PROMPT
    debug: bool = False

    @classmethod
    def from_env(cls, env: Optional[Mapping[str, str]] = None) -> "ShellConfig":
        """
        Build a config from MYSHELL_PROMPT and MYSHELL_DEBUG.

        Example:
            >>> ShellConfig.from_env({'MYSHELL_PROMPT': '> ', 'MYSHELL_DEBUG': 'yes'})
            ShellConfig(prompt='> ', debug=True)
        """
        if env is None:
            env = os.environ
        return cls(
            prompt=env.get(PROMPT_VAR, DEFAULT_PROMPT),
            debug=_is_truthy(env.get(DEBUG_VAR)),
        )
