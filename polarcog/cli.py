"""Interactive centre-of-gravity calculator."""

from __future__ import annotations

import math
import re
import sys
from collections.abc import Callable
from typing import TextIO

from polarcog.geometry import Item, PolarCoord, center_of_gravity
from polarcog.plot import draw_polar_plot

_WORD_PATTERN = re.compile(r"\S+")


class InputError(ValueError):
    """Raised when interactive input cannot be parsed."""


class _Scanner:
    """Reads whitespace-separated words and single characters from a stream."""

    def __init__(self, stream: TextIO) -> None:
        self._stream = stream
        self._line = ""
        self._pos = 0

    def _fill(self) -> bool:
        if self._pos < len(self._line):
            return True
        self._line = self._stream.readline()
        self._pos = 0
        return bool(self._line)

    def word(self) -> str | None:
        while self._fill():
            match = _WORD_PATTERN.search(self._line, self._pos)
            if match:
                self._pos = match.end()
                return match.group()
            self._pos = len(self._line)
        return None

    def skip_line(self) -> None:
        while self._fill():
            newline = self._line.find("\n", self._pos)
            if newline >= 0:
                self._pos = newline + 1
                return
            self._pos = len(self._line)

    def char(self) -> str | None:
        if not self._fill():
            return None
        ch = self._line[self._pos]
        self._pos += 1
        return ch


def _read_float(read: Callable[[], str | None], what: str) -> float:
    word = read()
    try:
        if word is None:
            raise ValueError
        return float(word)
    except ValueError:
        raise InputError(f"Invalid input for {what}.") from None


def input_items(
    count: int, read: Callable[[], str | None], write: Callable[[str], object]
) -> tuple[list[Item], float]:
    """Prompt for *count* items and return them with the largest radius seen.

    *read* returns the next input word or None at end of input; *write*
    shows prompts. Angles are entered in degrees.
    """
    items: list[Item] = []
    max_radius = 0.0
    for number in range(1, count + 1):
        write(f"\n--- Item {number} ---\n")
        write("Enter weight: ")
        weight = _read_float(read, "weight")
        write("Enter radius (r): ")
        radius = _read_float(read, "radius")
        max_radius = max(max_radius, radius)
        write("Enter angle in degrees (theta): ")
        degrees = _read_float(read, "angle")
        items.append(Item(weight, PolarCoord(radius, math.radians(degrees))))
    return items, max_radius


def main(argv: list[str] | None = None) -> int:
    """Run the interactive calculator on standard input and output."""
    out = sys.stdout

    def write(text: str) -> None:
        out.write(text)
        out.flush()

    scanner = _Scanner(sys.stdin)

    write("Enter the number of items: ")
    first_word = scanner.word()
    try:
        count = int(first_word) if first_word is not None else 0
    except ValueError:
        count = 0
    if count <= 0:
        print(
            "Invalid input. Please enter a positive integer for number of items.",
            file=sys.stderr,
        )
        return 1

    try:
        items, max_radius = input_items(count, scanner.word, write)
    except InputError as exc:
        print(f"{exc} Exiting.", file=sys.stderr)
        return 1

    cog = center_of_gravity(items)
    max_radius = max(max_radius, cog.r)
    if max_radius == 0.0:
        max_radius = 1.0

    write("\nDo you want to plot the results? (y/n): ")
    scanner.skip_line()
    answer = scanner.char()

    if answer in ("y", "Y"):
        draw_polar_plot(items, cog, max_radius, out)
    else:
        write("Plotting skipped as per user's request.\n")

    write("\nCalculated Center of Gravity (COG):\n")
    write(f"  Radius (R): {cog.r:.2f}\n")
    write(f"  Angle (Theta): {cog.theta:.2f} radians ({math.degrees(cog.theta):.2f} degrees)\n")
    return 0


if __name__ == "__main__":
    sys.exit(main())