#!/usr/bin/env python3
"""
Solfège transcoder - note names to solfège syllables and back

Main entry point for the transcoder.

Usage:
    python main.py <mode> <input-path>
"""

import sys
from pathlib import Path

from src.solfege.cli import main as cli_main


def load_version() -> str:
    """Load version from VERSION file."""
    version_file = Path(__file__).parent / "VERSION"
    if version_file.exists():
        return version_file.read_text().strip()
    return "unknown"


def main():
    """Main entry point."""
    if len(sys.argv) > 1 and sys.argv[1] == "--version":
        print(f"solfege {load_version()}")
        return 0

    return cli_main(sys.argv[1:])


if __name__ == "__main__":
    sys.exit(main())
