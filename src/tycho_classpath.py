"""Print the classpath of a Tycho module.

Runs the Tycho dependency listing goal for the given ``pom.xml`` and prints
one resolved classpath entry per line.
"""

import argparse
import logging
import os
import sys
from pathlib import Path

from src.find_command_on_path import MissingCommandError
from src.load_config import load_config
from src.tycho_classpath_resolver import TychoClassPathResolver


def main(argv: list[str] | None = None) -> int:
    """Run the classpath resolution."""
    ap = argparse.ArgumentParser(
        description="Resolve the classpath of an Eclipse Tycho module.",
    )
    ap.add_argument(
        "descriptor",
        type=Path,
        help="Module descriptor (pom.xml) to resolve",
    )
    ap.add_argument(
        "--config",
        help="Path to configuration file",
    )
    ap.add_argument(
        "--verbose",
        action="store_true",
        help="Log build tool output and debug details",
    )
    args = ap.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(levelname)s %(name)s: %(message)s",
    )

    if not args.descriptor.is_file():
        msg = f"Descriptor not found: {args.descriptor}"
        raise SystemExit(msg)

    config = load_config(args.config)
    resolver = TychoClassPathResolver.maybe_create(args.descriptor, config)
    if resolver is None:
        msg = (
            f"Not a {config['layout']['descriptor_name']} descriptor: "
            f"{args.descriptor}"
        )
        raise SystemExit(msg)

    try:
        classpath = resolver.classpath
    except MissingCommandError as e:
        raise SystemExit(str(e)) from e
    except FileNotFoundError as e:
        msg = f"Dependency list was not generated: {e.filename}"
        raise SystemExit(msg) from e

    # Paths may carry undecodable bytes from the list file.
    sys.stdout.flush()
    for path in sorted(classpath):
        sys.stdout.buffer.write(os.fsencode(path) + b"\n")
    sys.stdout.buffer.flush()
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
