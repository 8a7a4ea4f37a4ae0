"""Predicate for spotting a failed build in external tool output."""

FAILURE_MARKER = "BUILD FAILURE"


def is_build_failure(output: str, marker: str = FAILURE_MARKER) -> bool:
    """Check if the tool output reports a failed build."""
    return marker in output
