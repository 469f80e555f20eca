# tests/test_parse.py

import pytest

from tzinstant.core.errors import InvalidEpoch, UnparseableTime
from tzinstant.core.types import DateOrder, WallClock
from tzinstant.render.parse import parse_date, parse_time

@pytest.mark.parametrize("text,expected", [
    ("4pm", (16, 0, None)),
    ("4:30am", (4, 30, None)),
    ("12:15am", (0, 15, None)),
    ("16:30", (16, 30, None)),
    ("0:00:59", (0, 0, 59)),
])
def test_parse_time(text, expected):
    assert parse_time(text) == expected

@pytest.mark.parametrize("text", ["24:00", "4:30 pm extra", "pm", "4", None])
def test_parse_time_rejects(text):
    with pytest.raises(UnparseableTime):
        parse_time(text)

@pytest.mark.parametrize("text,expected", [
    ("2023-10-31", WallClock(2023, 9, 31)),
    ("2023-10-31T09:00", WallClock(2023, 9, 31, 9, 0)),
    ("2023-10-31 09:00:05.5", WallClock(2023, 9, 31, 9, 0, 5, 500)),
    ("10/31/2023", WallClock(2023, 9, 31)),
    ("October 31, 2023 9:00:00", WallClock(2023, 9, 31, 9, 0, 0)),
    ("Oct 31st, 2023", WallClock(2023, 9, 31)),
    ("31 October 2023 4pm", WallClock(2023, 9, 31, 16, 0)),
    ("  october   31 2023 ", WallClock(2023, 9, 31)),
])
def test_parse_date(text, expected):
    assert parse_date(text) == expected

def test_parse_date_day_first():
    assert parse_date("31/10/2023", DateOrder.DAY_MONTH_YEAR) == WallClock(2023, 9, 31)
    with pytest.raises(InvalidEpoch):
        parse_date("31/10/2023")

@pytest.mark.parametrize("text", [
    "2023-02-30",
    "2023-13-01",
    "2023-10-31T25:00",
    "October 32, 2023",
    "Smarch 3, 2023",
    "October 31, 2023 at noon",
    "yesterday",
    "",
])
def test_parse_date_rejects(text):
    with pytest.raises(InvalidEpoch):
        parse_date(text)

def test_parse_date_rejects_non_strings():
    with pytest.raises(InvalidEpoch):
        parse_date(20231031)
