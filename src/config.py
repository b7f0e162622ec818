""" Shell configuration. """
import os
from dataclasses import dataclass

from constants import CONTINUATION_PROMPT, PROMPT

TRUTHY = {"1", "true", "yes", "on"}


@dataclass
class ShellConfig:
    """Shell configuration settings."""
    prompt: str = PROMPT
    continuation_prompt: str = CONTINUATION_PROMPT
    log_file: str | None = None
    debug: bool = False

    @classmethod
    def from_env(cls, environ=None) -> "ShellConfig":
        """ Build a config from CHAINSH_* environment variables. """
        if environ is None:
            environ = os.environ
        return cls(
            prompt=environ.get("CHAINSH_PROMPT", PROMPT),
            log_file=environ.get("CHAINSH_LOG_FILE") or None,
            debug=environ.get("CHAINSH_DEBUG", "").strip().lower() in TRUTHY,
        )
