"""Top-level classpath resolution for a Tycho build module."""

import logging
from pathlib import Path, PurePath
from typing import Any

from src.generate_dependency_list import generate_dependency_list
from src.load_config import load_config
from src.read_dependency_list import read_dependency_list

logger = logging.getLogger(__name__)


def _path_parts(value: str | list[str]) -> tuple[str, ...]:
    """Accept a directory given either as "a/b" or as ["a", "b"]."""
    if isinstance(value, str):
        return PurePath(value).parts
    return tuple(value)


def resolve_classpath(
    descriptor: Path, config: dict[str, Any] | None = None
) -> set[Path]:
    """Resolve the classpath entries for the module owning the descriptor.

    The module's own ``bin`` directory is always part of the result.
    """
    if config is None:
        config = load_config()
    layout = config["layout"]

    module_dir = descriptor.absolute().parent
    list_file = generate_dependency_list(descriptor, config)
    artifacts = read_dependency_list(
        list_file,
        module_dir.parent,
        bin_dir=layout["bin_dir"],
        tooling_classes_dir=_path_parts(layout["tooling_classes_dir"]),
    )

    summary_limit = config["logging"]["summary_limit"]
    if not artifacts:
        logger.warning("No artifacts found in %s", descriptor)
    elif len(artifacts) < summary_limit:
        listed = ", ".join(sorted(str(a) for a in artifacts))
        logger.info("Found %s in %s", listed, descriptor)
    else:
        logger.info("Found %s artifacts in %s", len(artifacts), descriptor)

    classpath = {
        path for artifact in artifacts for path in artifact.list_dependencies()
    }
    classpath.add(module_dir / layout["bin_dir"])
    return classpath
