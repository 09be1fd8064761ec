"""
Application entry point for the cargofleet console app.

Runs the sample fleet scenario, then waits for 'exit' on standard input.
"""

import sys
from pathlib import Path
from typing import TextIO

from cargofleet_app.config.settings import Settings, init_logging
from cargofleet_app.init_demo_fleet import run_demo

EXIT_PROMPT = "Type 'exit' to close the program."
INVALID_INPUT = "Invalid input. Type 'exit' to close the program."


def interactive_loop(stdin: TextIO | None = None, out: TextIO | None = None) -> None:
    """Read lines until one equals 'exit' (any case) or input ends."""
    stdin = stdin or sys.stdin
    out = out or sys.stdout
    print(EXIT_PROMPT, file=out)
    for line in stdin:
        if line.strip().lower() == "exit":
            return
        print(INVALID_INPUT, file=out)


def main() -> None:
    """Bootstraps the cargofleet console app."""
    settings = Settings.default()
    init_logging(settings)

    run_demo(settings)
    interactive_loop()
    sys.exit(0)


if __name__ == "__main__":
    # Allow running as a script: `python -m cargofleet_app.main`
    # or `python cargofleet_app/main.py` (when cwd is project root)
    project_root = Path(__file__).resolve().parents[1]
    if project_root.exists():
        sys.path.insert(0, str(project_root))
    main()
