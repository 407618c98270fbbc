"""Split digit strings into runs of equal characters."""

from __future__ import annotations

import argparse
import sys
from dataclasses import dataclass
from itertools import groupby

DEFAULT_RUNS_TEXT = (
    "01000011110001111111100011000010000101010111111111111111111111111111111"
    "111111111111111111111111111101"
)
DEFAULT_BLOCKS_TEXT = "311150003223111055001111101912"


@dataclass(frozen=True)
class StartStop:
    """Inclusive start and stop positions of a block."""

    start: int
    stop: int


def split_zero_and_ones_string(text: str) -> list[int]:
    """Return the lengths of the consecutive runs of equal characters."""
    return [sum(1 for _ in run) for _, run in groupby(text)]


def split_zeros_and_ones_blocks(text: str) -> list[StartStop]:
    """Return the inclusive positions of every run of '0's or of '1's.

    Runs of any other character are skipped.
    """
    blocks: list[StartStop] = []
    position = 0
    for char, run in groupby(text):
        length = sum(1 for _ in run)
        if char in "01":
            blocks.append(StartStop(position, position + length - 1))
        position += length
    return blocks


def _rulers(length: int) -> tuple[str, str]:
    tens = "".join(str((i // 10) % 10) for i in range(length))
    ones = "".join(str(i % 10) for i in range(length))
    return tens, ones


def main(argv: list[str] | None = None) -> int:
    """Print the runs, or the 0/1 blocks, of a digit string."""
    parser = argparse.ArgumentParser(description="Split a digit string into runs.")
    parser.add_argument("text", nargs="?", help="the string to split")
    parser.add_argument(
        "--blocks",
        action="store_true",
        help="report start and stop positions of blocks of 0s and 1s",
    )
    args = parser.parse_args(argv)

    if args.blocks:
        text = args.text if args.text is not None else DEFAULT_BLOCKS_TEXT
        tens, ones = _rulers(len(text))
        print(f"{tens} -- ruler tens")
        print(f"{ones} -- ruler ones")
        print(f"{text} -- input_string")
        for block in split_zeros_and_ones_blocks(text):
            print(block.start, block.stop)
        print()
    else:
        text = args.text if args.text is not None else DEFAULT_RUNS_TEXT
        print(text)
        print(" ".join(str(n) for n in split_zero_and_ones_string(text)))
    return 0


if __name__ == "__main__":
    sys.exit(main())