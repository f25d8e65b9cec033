# weatherlog

Tools for timestamped temperature readings. The readings are stored as
JSON-like `{"timestamp": "value"}` pairs. A line may hold one pair or several
pairs separated by commas, for example:

```
{"2014-02-13T06:20:00": "21.5"}
{"2014-02-13T06:50:00": "22.0"}
```

## Installation

```
pip install .
```

To run the tests as well:

```
pip install .[test]
pytest
```

## Commands

### Sorting temperatures

```
weatherlog-sort [INPUT] [-a {merge,quick}] [-o OUTPUT]
```

This command reads readings from `INPUT` (default `tempm.txt`) and sorts them
by temperature. It then writes them with one `{"timestamp": "value"}` object
per line.

- `-a merge` is the default. It uses a stable merge sort and writes
  `sorted_temperatures_MergeSort.txt`.
- `-a quick` uses a quicksort that takes the last element as the pivot. It
  also prints the sorted readings, and it writes
  `sorted_temperatures_QuickSort.txt`.
- `-o` chooses a different output file.

### Daily averages

```
weatherlog-daily [INPUT] [-o OUTPUT]
```

This command groups the readings by calendar day, using the first ten
characters of each timestamp. It prints each day's average and the number of
measurements. It also writes them as CSV with a header row; the default output
file is `daily_average_temperatures.txt`.

After that it opens an interactive menu. From the menu you can:

- list the days in date order,
- look up a day,
- change a day's average,
- delete a day.

When you leave the menu, the command reports whether its tree is still
balanced.

Run either command with `--help` to see its options.

## Library use

```python
from weatherlog.readings import read_readings, merge_sort, write_readings
from weatherlog.daily import DayTree, daily_averages, extract_date

readings = read_readings("tempm.txt")
write_readings("sorted.txt", merge_sort(readings))

tree = DayTree()
for reading in readings:
    tree.insert(extract_date(reading.timestamp), reading.temperature)
print(tree.find("2014-02-13"))
```

### `weatherlog.readings`

This module provides:

- the `Reading` dataclass, with `timestamp` and `temperature` fields;
- `parse_readings` and `read_readings` for loading readings;
- `merge_sort` and `quick_sort`, which return new sorted lists;
- `format_reading` and `write_readings` for output.

### `weatherlog.daily`

This module provides:

- the `DailyAverage` dataclass, with `date`, `total`, `count` and `average`
  fields;
- `extract_date`, `daily_averages` and `write_daily_averages`;
- `DayTree`, an AVL tree keyed by date.

A `DayTree` has these operations:

- `insert` adds a measurement for a day.
- `find` returns the day's record, or `None` if the day is not in the tree.
- `edit_average` changes a day's average and raises `KeyError` if the day is
  missing.
- `delete` removes a day and raises `KeyError` if the day is missing.
- `is_balanced` reports whether the tree is balanced.
- Iterating over the tree yields the days in date order, and `len` gives the
  number of days.

## Limitations

The package reads temperature readings only. It does not load humidity files
and has no lookup of individual observations by timestamp. Sorting,
per-day averaging and the daily tree are all it offers.