#!/usr/bin/env python3
"""
Minimal main.py - only captures and routes command line arguments.

Argument checks, bundle validation, environment setup and the process
handoff are all handled by ApplicationLauncher.
"""

import sys
from pathlib import Path

sys.path.insert(0, str(Path(__file__).parent / "src"))

from bundle_launcher.core.application_launcher import ApplicationLauncher


def main():
    try:
        launcher = ApplicationLauncher(sys.argv[1:], prog=Path(sys.argv[0]).name)
        sys.exit(launcher.run())
    except KeyboardInterrupt:
        print("\nLauncher interrupted by user", file=sys.stderr)
        sys.exit(1)


if __name__ == "__main__":
    main()
