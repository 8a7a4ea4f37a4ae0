"""Data model for one entry of a Tycho dependency list."""

import logging
from dataclasses import dataclass
from pathlib import Path

from src.parse_snapshot_name import parse_snapshot_name

logger = logging.getLogger(__name__)

BIN_DIR = "bin"
TOOLING_CLASSES_DIR = (".kotlin-eclipse", "classes")


@dataclass(frozen=True)
class TychoDependency:
    """A dependency path plus the workspace directory holding sibling projects."""

    path: Path
    base_path_projects: Path
    bin_dir: str = BIN_DIR
    tooling_classes_dir: tuple[str, ...] = TOOLING_CLASSES_DIR

    def source_path(self) -> Path | None:
        """Return the sibling project directory this artifact was built from."""
        parsed = parse_snapshot_name(self.path.stem)
        if parsed is None:
            return None
        project, _version = parsed
        candidate = self.base_path_projects / project
        return candidate if candidate.is_dir() else None

    def list_dependencies(self) -> list[Path]:
        """Map the entry to compiled output directories or the artifact itself."""
        source = self.source_path()
        if source is not None:
            logger.info("found source entry %s", source)
            return [source / self.bin_dir, source.joinpath(*self.tooling_classes_dir)]
        logger.info("found jar entry %s", self.path)
        return [self.path]

    def __str__(self) -> str:
        source = self.source_path()
        return str(self.path) if source is None else f"{source.name} (source)"
