"""Helper for running an external command and collecting its output."""

import logging
import subprocess
from collections.abc import Sequence
from pathlib import Path

logger = logging.getLogger(__name__)


def exec_and_read_stdout_and_stderr(
    cmd_list: Sequence[str | Path], cwd: Path
) -> tuple[str, str]:
    """Run a command to completion and return its (stdout, stderr) text.

    A non-zero exit code is logged but not raised; callers inspect the output.
    """
    result = subprocess.run(
        [str(x) for x in cmd_list],
        cwd=cwd,
        capture_output=True,
        text=True,
        check=False,
    )
    if result.returncode != 0:
        logger.debug("Command exited with status %s", result.returncode)
    return result.stdout or "", result.stderr or ""
