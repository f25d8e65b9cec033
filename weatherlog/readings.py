"""Temperature readings: parsing, sorting by temperature and writing back out."""

from __future__ import annotations

import argparse
import re
import struct
import sys
from dataclasses import dataclass
from pathlib import Path
from typing import Iterable, Sequence

_ENTRY = re.compile(r'\s*(?:\{\s*)?"([^"]+)"\s*:\s*"([^"]+)"')
_FLOAT_PREFIX = re.compile(
    r"\s*([+-]?(?:(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?|inf(?:inity)?|nan))",
    re.IGNORECASE,
)

DEFAULT_INPUT = "tempm.txt"
DEFAULT_OUTPUTS = {
    "merge": "sorted_temperatures_MergeSort.txt",
    "quick": "sorted_temperatures_QuickSort.txt",
}


@dataclass
class Reading:
    """One timestamped temperature measurement."""

    timestamp: str
    temperature: float


def _leading_float(text: str) -> float:
    """Convert the numeric prefix of ``text``; 0.0 when there is none."""
    match = _FLOAT_PREFIX.match(text)
    return float(match.group(1)) if match else 0.0


def _as_float32(value: float) -> float:
    return struct.unpack("f", struct.pack("f", value))[0]


def parse_readings(lines: Iterable[str]) -> list[Reading]:
    """Parse ``{"timestamp": "value"}`` pairs, split on commas, from text lines."""
    readings = []
    for line in lines:
        for token in line.split(","):
            if not token:
                continue
            match = _ENTRY.match(token)
            if match:
                timestamp, value = match.groups()
                readings.append(Reading(timestamp, _leading_float(value)))
    return readings


def read_readings(path: str | Path) -> list[Reading]:
    """Read all readings from a file; raises OSError if it cannot be opened."""
    with open(path, encoding="utf-8", errors="replace") as handle:
        return parse_readings(handle)


def merge_sort(readings: Sequence[Reading]) -> list[Reading]:
    """Return the readings sorted by temperature with a stable merge sort."""
    items = list(readings)
    if len(items) <= 1:
        return items
    mid = (len(items) - 1) // 2 + 1
    left = merge_sort(items[:mid])
    right = merge_sort(items[mid:])
    merged: list[Reading] = []
    li = ri = 0
    while li < len(left) and ri < len(right):
        if left[li].temperature <= right[ri].temperature:
            merged.append(left[li])
            li += 1
        else:
            merged.append(right[ri])
            ri += 1
    merged.extend(left[li:])
    merged.extend(right[ri:])
    return merged


def _partition(items: list[Reading], low: int, high: int) -> int:
    pivot = _as_float32(items[high].temperature)
    boundary = low - 1
    for j in range(low, high):
        if items[j].temperature < pivot:
            boundary += 1
            items[boundary], items[j] = items[j], items[boundary]
    items[boundary + 1], items[high] = items[high], items[boundary + 1]
    return boundary + 1


def quick_sort(readings: Sequence[Reading]) -> list[Reading]:
    """Return the readings sorted by temperature with a last-element-pivot quicksort.

    The pivot is held in single precision, as the measurements were
    originally compared.
    """
    items = list(readings)
    pending = [(0, len(items) - 1)]
    while pending:
        low, high = pending.pop()
        if low < high:
            pivot_index = _partition(items, low, high)
            pending.append((pivot_index + 1, high))
            pending.append((low, pivot_index - 1))
    return items


def format_reading(reading: Reading) -> str:
    """Render a reading as one output line, without the newline."""
    return f'{{"{reading.timestamp}": "{reading.temperature:f}"}}'


def write_readings(path: str | Path, readings: Iterable[Reading]) -> None:
    """Write readings to ``path``, one per line."""
    with open(path, "w", encoding="utf-8") as handle:
        for reading in readings:
            handle.write(format_reading(reading) + "\n")


def main(argv: Sequence[str] | None = None) -> int:
    """Sort the readings of a file by temperature and write them out."""
    parser = argparse.ArgumentParser(description="Sort temperature readings.")
    parser.add_argument("input", nargs="?", default=DEFAULT_INPUT)
    parser.add_argument("-a", "--algorithm", choices=sorted(DEFAULT_OUTPUTS), default="merge")
    parser.add_argument("-o", "--output")
    args = parser.parse_args(argv)

    try:
        readings = read_readings(args.input)
    except OSError as exc:
        print(f"Error opening file: {exc}", file=sys.stderr)
        print("Error reading file")
        return 1

    if args.algorithm == "quick":
        ordered = quick_sort(readings)
        print("\nSorted data points:")
        for reading in ordered:
            print(f"Timestamp: {reading.timestamp}, Temperature: {reading.temperature:f}")
    else:
        ordered = merge_sort(readings)

    output = args.output or DEFAULT_OUTPUTS[args.algorithm]
    try:
        write_readings(output, ordered)
    except OSError as exc:
        print(f"Error opening file for writing: {exc}", file=sys.stderr)
        return 1
    print(f"Sorted contents written to {output}")
    return 0


if __name__ == "__main__":
    sys.exit(main())