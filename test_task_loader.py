import pytest

from policylab.core.models import Task
from policylab.core.task_loader import (
    InputUnavailableError,
    InvalidTaskError,
    load_tasks,
    parse_tasks,
    task_from_fields,
)


def test_parse_whitespace_delimited_records():
    text = "A 1 5\nB 2 25\n\tC   3\n8\n"
    assert parse_tasks(text) == [Task("A", 1, 5), Task("B", 2, 25), Task("C", 3, 8)]


def test_parse_stops_at_first_malformed_record():
    text = "A 1 5\nB high 25\nC 3 8\n"
    assert parse_tasks(text) == [Task("A", 1, 5)]


def test_parse_ignores_incomplete_trailing_record():
    assert parse_tasks("A 1 5 B 2") == [Task("A", 1, 5)]


def test_parse_empty_input():
    assert parse_tasks("") == []
    assert parse_tasks("  \n\n ") == []


def test_parse_accepts_negative_priority():
    assert parse_tasks("idle -4 3") == [Task("idle", -4, 3)]


def test_non_positive_burst_is_rejected():
    with pytest.raises(InvalidTaskError):
        parse_tasks("A 1 5\nB 2 0\n")
    with pytest.raises(InvalidTaskError):
        parse_tasks("A 1 -7")


def test_load_tasks_from_file(tmp_path):
    path = tmp_path / "schedule.txt"
    path.write_text("T1 2 20\nT2 4 10\n", encoding="utf-8")
    assert load_tasks(str(path)) == [Task("T1", 2, 20), Task("T2", 4, 10)]


def test_missing_file_is_input_unavailable(tmp_path):
    with pytest.raises(InputUnavailableError):
        load_tasks(str(tmp_path / "missing.txt"))


def test_task_from_fields():
    assert task_from_fields(" T1 ", "-2", "15") == Task("T1", -2, 15)


def test_task_from_fields_rejects_bad_input():
    for name, priority, burst in [
        ("", "1", "5"),
        ("two words", "1", "5"),
        ("A", "x", "5"),
        ("A", "1", ""),
        ("A", "1", "0"),
        ("A", "1", "²"),
        ("A", "²", "5"),
    ]:
        with pytest.raises(InvalidTaskError):
            task_from_fields(name, priority, burst)
