"""Predicate for checking if a file is a module build descriptor."""

from pathlib import Path

DESCRIPTOR_NAME = "pom.xml"


def is_build_descriptor(file: Path, descriptor_name: str = DESCRIPTOR_NAME) -> bool:
    """Check if the file name is exactly the expected descriptor name."""
    return file.name == descriptor_name
