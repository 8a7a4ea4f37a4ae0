"""Classpath resolver strategy for Eclipse Tycho modules."""

from pathlib import Path
from typing import Any

from src.is_build_descriptor import is_build_descriptor
from src.load_config import load_config
from src.resolve_classpath import resolve_classpath


class TychoClassPathResolver:
    """Resolves a module classpath by asking Maven/Tycho for its dependencies."""

    resolver_type = "Tycho"

    def __init__(self, pom: Path, config: dict[str, Any] | None = None) -> None:
        """Initialize the resolver for a module descriptor."""
        self.pom = pom
        self.config = config if config is not None else load_config()

    @property
    def classpath(self) -> set[Path]:
        """Recompute the classpath; nothing is cached between calls."""
        return resolve_classpath(self.pom, self.config)

    @classmethod
    def maybe_create(
        cls, file: Path, config: dict[str, Any] | None = None
    ) -> "TychoClassPathResolver | None":
        """Create a resolver if the file is a module descriptor."""
        config = config if config is not None else load_config()
        if not is_build_descriptor(file, config["layout"]["descriptor_name"]):
            return None
        return cls(file, config)
