"""Process-wide lookup of external commands on the PATH."""

import logging
import shutil
from functools import lru_cache
from pathlib import Path

logger = logging.getLogger(__name__)


class MissingCommandError(RuntimeError):
    """Raised when a required external command is not on the PATH."""


@lru_cache(maxsize=8)
def find_command_on_path(name: str) -> Path | None:
    """Return the location of a command, or None if it is not installed.

    The result, including a miss, is computed once per name and reused.
    """
    found = shutil.which(name)
    if found is None:
        logger.debug("Command %s not found on PATH", name)
        return None
    return Path(found)


def mvn_command(name: str = "mvn") -> Path:
    """Return the Maven executable, failing if it cannot be located."""
    command = find_command_on_path(name)
    if command is None:
        msg = f"Unable to find the '{name}' command"
        raise MissingCommandError(msg)
    return command
