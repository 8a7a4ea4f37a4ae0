"""Logic for loading and merging resolver configuration files."""

from pathlib import Path
from typing import Any

import yaml

from src.deep_merge import deep_merge
from src.tycho_dependency import BIN_DIR, TOOLING_CLASSES_DIR

DEFAULT_CONFIG: dict[str, Any] = {
    "command": {
        "name": "mvn",
        "goal": (
            "org.eclipse.tycho.extras:tycho-dependency-tools-plugin:list-dependencies"
        ),
        "failure_marker": "BUILD FAILURE",
    },
    "layout": {
        "descriptor_name": "pom.xml",
        "output_dir": "target",
        "list_file": "dependencies-list.txt",
        "bin_dir": BIN_DIR,
        "tooling_classes_dir": list(TOOLING_CLASSES_DIR),
    },
    "logging": {
        "summary_limit": 5,
    },
}


def load_config(path: str | None = None) -> dict[str, Any]:
    """Load configuration from a YAML file and merge it with defaults."""
    config = deep_merge(DEFAULT_CONFIG, {})
    if path:
        p = Path(path)
        if p.exists():
            user_config = yaml.safe_load(p.read_text(encoding="utf-8")) or {}
            config = deep_merge(config, user_config)
    return config
