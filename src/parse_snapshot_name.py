"""Utility for splitting a SNAPSHOT artifact name into project and version."""

import re

SNAPSHOT_SUFFIX_RE = re.compile(r"-(\d+\.\d+\.\d+)-SNAPSHOT")


def parse_snapshot_name(name: str) -> tuple[str, str] | None:
    """Split an artifact name like ``mod-b-1.0.0-SNAPSHOT`` into its parts.

    Returns ``(project, version)`` where the project is the name with every
    ``-X.Y.Z-SNAPSHOT`` occurrence removed, or None when no suffix is present.
    """
    match = SNAPSHOT_SUFFIX_RE.search(name)
    if not match:
        return None
    return SNAPSHOT_SUFFIX_RE.sub("", name), match.group(1)
