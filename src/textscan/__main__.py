"""Allow running TextScan as ``python -m textscan``."""

from textscan.cli import app

if __name__ == "__main__":
    app()
