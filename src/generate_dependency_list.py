"""Logic for asking the build tool to write the module's dependency list."""

import logging
from pathlib import Path
from typing import Any

from src.exec_and_read_stdout_and_stderr import exec_and_read_stdout_and_stderr
from src.find_command_on_path import MissingCommandError, mvn_command
from src.is_build_failure import is_build_failure

logger = logging.getLogger(__name__)


def generate_dependency_list(descriptor: Path, config: dict[str, Any]) -> Path:
    """Run the dependency listing goal next to the descriptor.

    Always returns the expected list file location; a failed build is only
    reported as a warning.
    """
    layout = config["layout"]
    command = config["command"]
    working_directory = descriptor.absolute().parent
    list_file = working_directory / layout["output_dir"] / layout["list_file"]

    cmd = [mvn_command(command["name"]), command["goal"]]
    logger.info("Run %s in %s", " ".join(str(x) for x in cmd), working_directory)
    try:
        result, errors = exec_and_read_stdout_and_stderr(cmd, working_directory)
    except FileNotFoundError as e:
        msg = f"Unable to run the '{command['name']}' command at {cmd[0]}"
        raise MissingCommandError(msg) from e
    logger.debug(result)

    marker = command["failure_marker"]
    for output in (errors, result):
        if is_build_failure(output, marker):
            logger.warning("Maven task failed: %s", output.splitlines()[0])
            break

    return list_file
