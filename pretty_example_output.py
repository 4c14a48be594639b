"""
Quick formatter for a saved recommendation JSON to make it easier to skim.

Usage:
    python -m tirerec ride --input rider.json --lat 39.77 --lon -86.16 -o ride.json
    python pretty_example_output.py --input ride.json
"""

from __future__ import annotations

import argparse
from pathlib import Path

from tirerec.cli.readable_output import print_readable_output


def main() -> None:
    parser = argparse.ArgumentParser(
        description="Print a readable summary of a tirerec result file"
    )
    parser.add_argument(
        "--input",
        "-i",
        type=Path,
        default=Path("example_output.json"),
        help="Path to a pressure, compensation, wind or ride JSON file (default: example_output.json)",
    )
    args = parser.parse_args()

    print_readable_output(args.input)


if __name__ == "__main__":
    main()
