#!/usr/bin/env python3
"""
Entry point for Fredulator.

    python main.py

Set FREDULATOR_LOG_LEVEL=DEBUG to trace every state change, and
FREDULATOR_LOG_FILE=<path> to also write the log to a file.
"""
import sys
from pathlib import Path

# Make backend/ and frontend/ importable when run from a source checkout
ROOT = Path(__file__).resolve().parent
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from backend.log import setup_logging
from frontend.gui import main as run_gui


def main():
    setup_logging()
    run_gui()


if __name__ == "__main__":
    main()
