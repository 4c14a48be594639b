"""
Entry point for running tirerec as a module.

Usage:
    python -m tirerec pressure --input rider.json
    python -m tirerec make-example
    python -m tirerec serve --port 8000
"""

import sys

from tirerec.cli.main import cli

if __name__ == "__main__":
    sys.exit(cli())
