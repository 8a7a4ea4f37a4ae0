"""Development script to run formatting, linting, type checks and tests."""

import argparse
import subprocess
import sys


def run_step(command: list[str], step_name: str) -> None:
    """Run one development step and stop at the first failure."""
    print(f"\n--- Running Step: {step_name} ---")
    print(f"$ {' '.join(command)}")
    try:
        subprocess.run(command, check=True)
    except subprocess.CalledProcessError:
        print(f"\n❌ Failed: {step_name}")
        sys.exit(1)


def main() -> None:
    """Run the development checks, optionally resolving a sample module."""
    parser = argparse.ArgumentParser(description="Run development checks.")
    parser.add_argument(
        "--ci",
        action="store_true",
        help="Check formatting without rewriting files",
    )
    parser.add_argument(
        "--pom",
        help="Resolve this pom.xml with tycho-classpath once checks pass",
    )
    args = parser.parse_args()

    if args.ci:
        run_step(["uv", "run", "ruff", "format", "--check"], "Ruff Format Check")
        run_step(["uv", "run", "ruff", "check"], "Ruff Linting")
    else:
        run_step(["uv", "run", "ruff", "format"], "Ruff Formatting")
        run_step(
            ["uv", "run", "ruff", "check", "--fix", "--unsafe-fixes"],
            "Ruff Linting & Fixes",
        )
    run_step(["uv", "run", "mypy", "src", "tests"], "Mypy Type Checks")
    run_step(
        ["uv", "run", "pytest", "--cov=src", "--cov-fail-under=90"],
        "Pytest With Coverage",
    )

    if args.pom:
        run_step(
            ["uv", "run", "python", "-m", "src.tycho_classpath", args.pom],
            "Resolve Sample Module",
        )

    print("\n✅ All development checks passed successfully.")


if __name__ == "__main__":
    main()
