import datetime
import random
import statistics

import pytest

from weatherlog.daily import (
    CSV_HEADER,
    DailyAverage,
    DayTree,
    daily_averages,
    extract_date,
    main,
    write_daily_averages,
)
from weatherlog.readings import Reading


def _dates(count):
    start = datetime.date(2014, 1, 1)
    return [(start + datetime.timedelta(days=offset)).isoformat() for offset in range(count)]


def _feed(monkeypatch, answers):
    pending = iter(answers)

    def fake_input(prompt=""):
        try:
            return next(pending)
        except StopIteration:
            raise EOFError from None

    monkeypatch.setattr("builtins.input", fake_input)


def test_extract_date_takes_day_part():
    assert extract_date("2014-02-13T05:00:00") == "2014-02-13"


def test_extract_date_short_input_unchanged():
    assert extract_date("2014") == "2014"


def test_daily_averages_groups_in_first_seen_order():
    readings = [
        Reading("2014-02-14T01:00:00", 3.0),
        Reading("2014-02-13T01:00:00", 10.0),
        Reading("2014-02-14T02:00:00", 5.0),
        Reading("2014-02-13T02:00:00", 20.0),
        Reading("2014-02-13T03:00:00", 30.0),
    ]
    days = daily_averages(readings)
    assert [day.date for day in days] == ["2014-02-14", "2014-02-13"]
    assert [day.count for day in days] == [2, 3]
    assert days[0].average == pytest.approx(statistics.mean([3.0, 5.0]))
    assert days[1].average == pytest.approx(statistics.mean([10.0, 20.0, 30.0]))
    assert days[1].total == pytest.approx(sum([10.0, 20.0, 30.0]))


def test_daily_averages_empty():
    assert daily_averages([]) == []


def test_write_daily_averages(tmp_path):
    path = tmp_path / "out.txt"
    write_daily_averages(path, [DailyAverage("2014-02-13", 21.5, 2, 10.75)])
    lines = path.read_text(encoding="utf-8").splitlines()
    assert lines[0] == CSV_HEADER
    assert lines[1] == "2014-02-13,10.75,2"


def test_tree_insert_accumulates_same_day():
    tree = DayTree()
    tree.insert("2014-02-13", 10.0)
    tree.insert("2014-02-13", 20.0)
    record = tree.find("2014-02-13")
    assert len(tree) == 1
    assert record.count == 2
    assert record.average == pytest.approx(statistics.mean([10.0, 20.0]))


def test_tree_find_missing_returns_none():
    tree = DayTree()
    tree.insert("2014-02-13", 10.0)
    assert tree.find("2014-02-14") is None


@pytest.mark.parametrize("order", ["ascending", "descending", "shuffled"])
def test_tree_stays_balanced_and_sorted(order):
    dates = _dates(200)
    if order == "descending":
        dates = dates[::-1]
    elif order == "shuffled":
        random.Random(7).shuffle(dates)
    tree = DayTree()
    for date in dates:
        tree.insert(date, 1.0)
    assert len(tree) == 200
    assert tree.is_balanced()
    assert [record.date for record in tree] == sorted(dates)


def test_tree_edit_average_rescales_total():
    tree = DayTree()
    tree.insert("2014-02-13", 10.0)
    tree.insert("2014-02-13", 20.0)
    tree.insert("2014-02-13", 30.0)
    record = tree.edit_average("2014-02-13", 5.0)
    assert record.average == 5.0
    assert record.total == pytest.approx(5.0 * 3)
    assert tree.find("2014-02-13").average == 5.0


def test_tree_edit_missing_raises():
    tree = DayTree()
    with pytest.raises(KeyError):
        tree.edit_average("2014-02-13", 1.0)


def test_tree_delete_keeps_order_and_balance():
    dates = _dates(64)
    tree = DayTree()
    for position, date in enumerate(dates):
        tree.insert(date, float(position))
    removed = dates[::3]
    for date in removed:
        tree.delete(date)
        assert tree.is_balanced()
    remaining = [date for date in dates if date not in removed]
    assert [record.date for record in tree] == remaining
    assert len(tree) == len(remaining)
    for date in removed:
        assert tree.find(date) is None
    assert tree.find(remaining[0]).average == float(dates.index(remaining[0]))


def test_tree_delete_node_with_two_children_keeps_records():
    tree = DayTree()
    for position, date in enumerate(_dates(7)):
        tree.insert(date, float(position))
    middle = _dates(7)[3]
    tree.delete(middle)
    for position, date in enumerate(_dates(7)):
        if date != middle:
            assert tree.find(date).average == float(position)


def test_tree_delete_missing_raises():
    tree = DayTree()
    tree.insert("2014-02-13", 1.0)
    with pytest.raises(KeyError):
        tree.delete("2014-02-14")
    assert len(tree) == 1


def test_main_writes_averages_and_searches(tmp_path, monkeypatch, capsys):
    source = tmp_path / "tempm.txt"
    source.write_text(
        '{"2014-02-13T01:00:00": "10.0"}, {"2014-02-13T02:00:00": "20.0"}\n'
        '{"2014-02-14T01:00:00": "4.0"}\n',
        encoding="utf-8",
    )
    output = tmp_path / "daily.txt"
    _feed(monkeypatch, ["2", "2014-02-14", "4", "2014-02-13", "2", "2014-02-13", "5"])
    assert main([str(source), "-o", str(output)]) == 0
    text = capsys.readouterr().out
    assert "Read 3 data points" in text
    assert "----- Record Found -----" in text
    assert "Date 2014-02-13 not found in the records." in text
    assert "The AVL tree is balanced." in text
    lines = output.read_text(encoding="utf-8").splitlines()
    assert lines[0] == CSV_HEADER
    assert lines[2] == "2014-02-14,4.00,1"


def test_main_edit_and_invalid_choice(tmp_path, monkeypatch, capsys):
    source = tmp_path / "tempm.txt"
    source.write_text('{"2014-02-13T01:00:00": "10.0"}\n', encoding="utf-8")
    _feed(monkeypatch, ["9", "3", "2014-02-13", "12.5", "3", "2014-02-13", "abc"])
    assert main([str(source), "-o", str(tmp_path / "out.txt")]) == 0
    text = capsys.readouterr().out
    assert "Invalid choice. Please try again." in text
    assert "Average temperature for 2014-02-13 updated to 12.50°C." in text
    assert "Invalid temperature input." in text


def test_main_missing_file(tmp_path, monkeypatch):
    _feed(monkeypatch, [])
    assert main([str(tmp_path / "absent.txt"), "-o", str(tmp_path / "out.txt")]) == 1