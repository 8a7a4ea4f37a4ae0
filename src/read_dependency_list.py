"""Logic for reading the dependency list written by the build tool."""

from pathlib import Path

from src.tycho_dependency import BIN_DIR, TOOLING_CLASSES_DIR, TychoDependency


def read_dependency_list(
    list_file: Path,
    base_path_projects: Path,
    bin_dir: str = BIN_DIR,
    tooling_classes_dir: tuple[str, ...] = TOOLING_CLASSES_DIR,
) -> set[TychoDependency]:
    """Parse one dependency per non-blank line.

    Relative entries are taken relative to the workspace directory. Bytes that
    are not UTF-8 are kept as surrogates so the paths still match the files on
    disk. Raises FileNotFoundError when the build tool did not produce the file.
    """
    text = list_file.read_text(encoding="utf-8", errors="surrogateescape")
    entries: set[TychoDependency] = set()
    for line in text.splitlines():
        raw = line.strip()
        if not raw:
            continue
        entries.add(
            TychoDependency(
                path=base_path_projects / raw,
                base_path_projects=base_path_projects,
                bin_dir=bin_dir,
                tooling_classes_dir=tooling_classes_dir,
            )
        )
    return entries
