# tests/test_compare.py

import pytest
import random

import tzinstant
from tzinstant import Unit
from tzinstant.engines.compare import _trunc_div

NY = "America/New_York"
VALID_EPOCH = 1698710400000  # Mon Oct 30 2023, 20:00 EDT

@pytest.fixture
def valid():
    return tzinstant.instant(VALID_EPOCH, NY)

def test_is_same_scenario(valid):
    later = tzinstant.instant(1698714000000, NY)  # 21:00 the same evening
    assert not later.is_same(valid, "hour")
    assert later.is_same(valid, "day")
    assert later.is_same(valid, "week")
    assert later.is_same(valid, "year")

def test_is_same_uses_each_zone(valid):
    london = valid.goto("Europe/London")  # 00:00 on Oct 31 in London
    assert valid.is_equal(london)
    assert not valid.is_same(london, "day")
    assert valid.is_same(london, "hour")
    assert valid.is_same(tzinstant.instant(VALID_EPOCH, "est"), "day")

def test_ordering(valid):
    later = valid.add(1, "millisecond")
    assert valid.is_before(later)
    assert later.is_after(valid)
    assert not valid.is_before(valid)
    assert valid.is_equal(tzinstant.instant(VALID_EPOCH, "Asia/Tokyo"))

def test_is_between(valid):
    start = valid.subtract(1, "day")
    end = valid.add(1, "day")
    assert valid.is_between(start, end)
    assert not start.is_between(start, end)
    assert start.is_between(start, end, inclusive=True)
    assert not end.add(1, "millisecond").is_between(start, end, inclusive=True)

def test_trunc_div():
    assert _trunc_div(7, 2) == 3
    assert _trunc_div(-7, 2) == -3
    assert _trunc_div(0, 5) == 0

def test_diff_fixed_units(valid):
    b = valid.add(90, "minute")
    assert valid.diff(b, "hour") == 1
    assert valid.diff(b, "minute") == 90
    assert b.diff(valid, "hour") == -1
    assert valid.diff(valid.add(31, "minute"), "quarterhour") == 2

def test_diff_days_across_dst():
    a = tzinstant.parse("November 4, 2023 12:00", NY)
    b = a.add(1, "day")
    assert a.diff(b, "hour") == 24
    assert b.hour() == 11
    assert a.diff(b, "day") == 1
    assert a.diff(b.subtract(1, "millisecond"), "day") == 0
    assert b.diff(a, "day") == -1

def test_diff_weeks(valid):
    assert valid.diff(valid.add(7, "day"), "week") == 1
    assert valid.diff(valid.add(13, "day"), "week") == 1
    assert valid.diff(valid.add(14, "day"), "week") == 2
    assert valid.diff(valid.subtract(20, "day"), "week") == -2

def test_diff_months_and_years():
    a = tzinstant.parse("January 31, 2023 10:00", NY)
    assert a.diff(tzinstant.parse("February 28, 2023 10:00", NY), "month") == 1
    assert a.diff(tzinstant.parse("February 28, 2023 9:59", NY), "month") == 0
    assert a.diff(a.add(7, "month"), "quarter") == 2
    assert a.diff(a.add(25, "year"), "decade") == 2
    assert a.diff(a.subtract(11, "month"), "year") == 0
    assert a.diff(a.subtract(12, "month"), "year") == -1
    assert a.diff(a.add(3, "century"), "century") == 3

def test_is_same_with_itself():
    random.seed(17)
    zones = [NY, "Europe/London", "Australia/Sydney", "America/Santiago", "Asia/Kolkata", "-5h"]
    for _ in range(300):
        t = tzinstant.instant(random.randint(-2_000_000_000_000, 4_000_000_000_000), random.choice(zones))
        for unit in Unit:
            assert t.is_same(t, unit)
            assert t.is_same(tzinstant.instant(t.epoch_ms, t.zone.name), unit)
            assert t.start_of(unit).is_same(t.end_of(unit), unit)
