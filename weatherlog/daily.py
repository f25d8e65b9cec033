"""Daily temperature averages, kept in a self-balancing tree keyed by date."""

from __future__ import annotations

import argparse
import sys
from dataclasses import dataclass
from pathlib import Path
from typing import Iterable, Iterator, Sequence

from weatherlog.readings import Reading, read_readings

DEFAULT_INPUT = "tempm.txt"
DEFAULT_OUTPUT = "daily_average_temperatures.txt"
CSV_HEADER = "Date,Average Temperature,Number of Measurements"


@dataclass
class DailyAverage:
    """Accumulated temperatures for one calendar day."""

    date: str
    total: float
    count: int
    average: float

    def add(self, temperature: float) -> None:
        """Fold one more measurement into the day."""
        self.total += temperature
        self.count += 1
        self.average = self.total / self.count


def extract_date(timestamp: str) -> str:
    """The ``YYYY-MM-DD`` part of a timestamp: its first ten characters."""
    return timestamp[:10]


def daily_averages(readings: Iterable[Reading]) -> list[DailyAverage]:
    """Average the readings per day, in the order the days first appear."""
    days: dict[str, DailyAverage] = {}
    for reading in readings:
        date = extract_date(reading.timestamp)
        day = days.get(date)
        if day is None:
            days[date] = DailyAverage(date, reading.temperature, 1, reading.temperature)
        else:
            day.total += reading.temperature
            day.count += 1
    for day in days.values():
        day.average = day.total / day.count
    return list(days.values())


def write_daily_averages(path: str | Path, averages: Iterable[DailyAverage]) -> None:
    """Write the averages as comma-separated lines under a header."""
    with open(path, "w", encoding="utf-8") as handle:
        handle.write(CSV_HEADER + "\n")
        for day in averages:
            handle.write(f"{day.date},{day.average:.2f},{day.count}\n")


class _Node:
    __slots__ = ("record", "left", "right", "height")

    def __init__(self, record: DailyAverage) -> None:
        self.record = record
        self.left: _Node | None = None
        self.right: _Node | None = None
        self.height = 1


def _height(node: _Node | None) -> int:
    return node.height if node else 0


def _balance(node: _Node | None) -> int:
    return _height(node.left) - _height(node.right) if node else 0


def _update(node: _Node) -> None:
    node.height = 1 + max(_height(node.left), _height(node.right))


def _rotate_right(y: _Node) -> _Node:
    x = y.left
    assert x is not None
    y.left = x.right
    x.right = y
    _update(y)
    _update(x)
    return x


def _rotate_left(x: _Node) -> _Node:
    y = x.right
    assert y is not None
    x.right = y.left
    y.left = x
    _update(x)
    _update(y)
    return y


class DayTree:
    """An AVL tree of daily averages ordered by date string."""

    def __init__(self) -> None:
        self._root: _Node | None = None
        self._size = 0

    def insert(self, date: str, temperature: float) -> None:
        """Add a measurement for ``date``, creating the day if it is new."""
        self._root = self._insert(self._root, date, temperature)

    def _insert(self, node: _Node | None, date: str, temperature: float) -> _Node:
        if node is None:
            self._size += 1
            return _Node(DailyAverage(date, temperature, 1, temperature))
        if date == node.record.date:
            node.record.add(temperature)
            return node
        if date < node.record.date:
            node.left = self._insert(node.left, date, temperature)
        else:
            node.right = self._insert(node.right, date, temperature)

        _update(node)
        balance = _balance(node)
        if balance > 1 and node.left is not None:
            if date > node.left.record.date:
                node.left = _rotate_left(node.left)
            return _rotate_right(node)
        if balance < -1 and node.right is not None:
            if date < node.right.record.date:
                node.right = _rotate_right(node.right)
            return _rotate_left(node)
        return node

    def _find_node(self, date: str) -> _Node | None:
        node = self._root
        while node is not None and node.record.date != date:
            node = node.left if date < node.record.date else node.right
        return node

    def find(self, date: str) -> DailyAverage | None:
        """The record for ``date``, or None when the day is absent."""
        node = self._find_node(date)
        return node.record if node else None

    def edit_average(self, date: str, new_average: float) -> DailyAverage:
        """Set a day's average, rescaling its total; KeyError if the day is absent."""
        node = self._find_node(date)
        if node is None:
            raise KeyError(date)
        node.record.average = new_average
        node.record.total = new_average * node.record.count
        return node.record

    def delete(self, date: str) -> None:
        """Remove the day; KeyError if it is absent."""
        if self._find_node(date) is None:
            raise KeyError(date)
        self._root = self._delete(self._root, date)
        self._size -= 1

    def _delete(self, node: _Node | None, date: str) -> _Node | None:
        if node is None:
            return None
        if date < node.record.date:
            node.left = self._delete(node.left, date)
        elif date > node.record.date:
            node.right = self._delete(node.right, date)
        else:
            if node.left is None or node.right is None:
                return node.left or node.right
            successor = node.right
            while successor.left is not None:
                successor = successor.left
            node.record = successor.record
            node.right = self._delete(node.right, successor.record.date)

        _update(node)
        balance = _balance(node)
        if balance > 1 and node.left is not None:
            if _balance(node.left) < 0:
                node.left = _rotate_left(node.left)
            return _rotate_right(node)
        if balance < -1 and node.right is not None:
            if _balance(node.right) > 0:
                node.right = _rotate_right(node.right)
            return _rotate_left(node)
        return node

    def is_balanced(self) -> bool:
        """Whether every node's subtree heights differ by at most one."""
        def check(node: _Node | None) -> bool:
            if node is None:
                return True
            if abs(_balance(node)) > 1:
                return False
            return check(node.left) and check(node.right)

        return check(self._root)

    def __iter__(self) -> Iterator[DailyAverage]:
        stack: list[_Node] = []
        node = self._root
        while stack or node is not None:
            while node is not None:
                stack.append(node)
                node = node.left
            node = stack.pop()
            yield node.record
            node = node.right

    def __len__(self) -> int:
        return self._size


def _read_word(prompt: str) -> str:
    words = input(prompt).split()
    while not words:
        words = input().split()
    return words[0]


def _print_record(record: DailyAverage, title: str, rule: str) -> None:
    print(title)
    print(f"Date: {record.date}")
    print(f"Average Temperature: {record.average:.2f}°C")
    print(f"Number of measurements: {record.count}")
    print(rule)


def _not_found(date: str) -> None:
    print(f"Date {date} not found in the records.")


_MENU = (
    "\nMenu:\n"
    "1. Print BST in-order traversal (by date)\n"
    "2. Search for average temperature by date\n"
    "3. Edit average temperature for a date\n"
    "4. Delete a record by date\n"
    "5. Exit"
)


def _menu(tree: DayTree) -> None:
    while True:
        print(_MENU)
        try:
            word = _read_word("Enter your choice: ")
        except EOFError:
            return
        try:
            choice = int(word)
        except ValueError:
            continue
        try:
            if choice == 1:
                print("\nBST In-Order Traversal (by Date):")
                for record in tree:
                    _print_record(record, "----- Record -----", "------------------")
            elif choice == 2:
                date = _read_word("Enter a date to search for average temperature (YYYY-MM-DD): ")[:10]
                record = tree.find(date)
                if record is None:
                    _not_found(date)
                else:
                    _print_record(record, "----- Record Found -----", "------------------------")
            elif choice == 3:
                date = _read_word("Enter a date to edit (YYYY-MM-DD): ")[:10]
                try:
                    new_average = float(_read_word("Enter new average temperature: "))
                except ValueError:
                    print("Invalid temperature input.")
                    continue
                try:
                    record = tree.edit_average(date, new_average)
                except KeyError:
                    _not_found(date)
                else:
                    print(f"Average temperature for {record.date} updated to {record.average:.2f}°C.")
            elif choice == 4:
                date = _read_word("Enter a date to delete (YYYY-MM-DD): ")[:10]
                try:
                    tree.delete(date)
                except KeyError:
                    _not_found(date)
            elif choice == 5:
                return
            else:
                print("Invalid choice. Please try again.")
        except EOFError:
            return


def main(argv: Sequence[str] | None = None) -> int:
    """Compute daily averages from a readings file and browse them interactively."""
    parser = argparse.ArgumentParser(description="Daily average temperatures.")
    parser.add_argument("input", nargs="?", default=DEFAULT_INPUT)
    parser.add_argument("-o", "--output", default=DEFAULT_OUTPUT)
    args = parser.parse_args(argv)

    try:
        readings = read_readings(args.input)
    except OSError as exc:
        print(f"Error opening file: {exc}", file=sys.stderr)
        return 1
    print(f"Read {len(readings)} data points")

    tree = DayTree()
    for reading in readings:
        tree.insert(extract_date(reading.timestamp), reading.temperature)

    averages = daily_averages(readings)
    print("\nDaily Average Temperatures:")
    print("---------------------------")
    for day in averages:
        print(
            f"Date: {day.date}, Average Temperature: {day.average:.2f}°C, "
            f"Number of measurements: {day.count}"
        )

    try:
        write_daily_averages(args.output, averages)
    except OSError as exc:
        print(f"Error opening file for writing: {exc}", file=sys.stderr)
    else:
        print(f"Daily average temperatures saved to {args.output}")

    _menu(tree)

    if tree.is_balanced():
        print("The AVL tree is balanced.")
    else:
        print("The AVL tree is NOT balanced.")
    return 0


if __name__ == "__main__":
    sys.exit(main())