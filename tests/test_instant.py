# tests/test_instant.py

import dataclasses
import logging
import math
import random

import pytest

import tzinstant
from tzinstant import InvalidEpoch, InvalidField, UnknownZone
from tzinstant.core.table import ZoneTable

NY = "America/New_York"
VALID_EPOCH = 1698710400000  # Mon Oct 30 2023, 20:00 EDT

@pytest.fixture
def valid():
    return tzinstant.instant(VALID_EPOCH, NY)

@pytest.fixture
def invalid():
    return tzinstant.instant(None, NY)

# ============================================================
# Construction
# ============================================================

def test_valid_getters(valid):
    assert valid.year() == 2023
    assert valid.month() == 9
    assert valid.date() == 30
    assert valid.day() == 1
    assert valid.day_name() == "monday"
    assert valid.iso_weekday() == 1
    assert valid.hour() == 20
    assert valid.minute() == 0
    assert valid.quarter() == 4
    assert valid.week() == 44
    assert valid.day_of_year() == 303
    assert valid.season() == "autumn"
    assert valid.month_name() == "october"
    assert valid.offset() == -240
    assert valid.is_dst()
    assert valid.hemisphere() == "North"

def test_invalid_epoch_falls_back_to_local_1970(invalid):
    assert invalid.format("iso") == "1970-01-01T00:00:00.000-05:00"
    assert invalid.epoch_ms == 5 * 3600 * 1000
    assert invalid.season() == "winter"
    assert invalid.month_name() == "january"
    assert invalid.week() == 1
    assert invalid == tzinstant.default_instant(NY)

@pytest.mark.parametrize("epoch", [None, True, "", "garbage", float("nan"), math.inf, 2 ** 63, [1]])
def test_invalid_epochs(epoch, caplog):
    with caplog.at_level(logging.WARNING, logger="tzinstant.api"):
        t = tzinstant.instant(epoch, "Asia/Tokyo")
    assert t.format("iso") == "1970-01-01T00:00:00.000+09:00"
    assert "falling back" in caplog.text
    with pytest.raises(InvalidEpoch):
        tzinstant.instant(epoch, "Asia/Tokyo", silent=False)

def test_numeric_epochs():
    assert tzinstant.instant(1.5e12, "utc").epoch_ms == 1_500_000_000_000
    assert tzinstant.instant(-1, "utc").format("iso") == "1969-12-31T23:59:59.999+00:00"
    assert tzinstant.instant(2 ** 63 - 1, "utc").epoch_ms == 2 ** 63 - 1

def test_unknown_zone_is_never_silenced():
    with pytest.raises(UnknownZone):
        tzinstant.instant(VALID_EPOCH, "1234")
    with pytest.raises(UnknownZone):
        tzinstant.instant(None, "1234")

def test_instants_are_immutable(valid):
    with pytest.raises(dataclasses.FrozenInstanceError):
        valid.epoch_ms = 0
    valid.add(1, "day")
    valid.with_year(1999)
    valid.goto("Asia/Tokyo")
    assert valid.epoch_ms == VALID_EPOCH
    assert valid.zone.name == NY

def test_equality_ignores_table(valid):
    other = tzinstant.instant(VALID_EPOCH, "est", table=tzinstant.get_table().with_records([]))
    assert other == valid
    assert hash(other) == hash(valid)

# ============================================================
# goto / timezone()
# ============================================================

def test_goto_keeps_epoch(valid):
    london = valid.goto("Europe/London")
    assert london.epoch_ms == VALID_EPOCH
    assert (london.date(), london.hour(), london.offset()) == (31, 0, 0)
    assert london.goto(NY) == valid

def test_goto_unknown_zone(valid, invalid):
    for t in (valid, invalid):
        with pytest.raises(UnknownZone) as exc:
            t.goto("1234")
        assert str(exc.value) == "Cannot find timezone named: '1234'. Please enter an IANA timezone id."

def test_goto_host_zone(valid, monkeypatch):
    monkeypatch.setenv("TZINSTANT_ZONE", "Asia/Tokyo")
    assert valid.goto(None).zone.name == "Asia/Tokyo"

def test_timezone_new_york(valid, invalid):
    expected = {
        "name": "America/New_York",
        "hasDst": True,
        "default_offset": -4,
        "hemisphere": "North",
        "current": {"offset": -4, "isDST": True},
        "change": {"start": "03/12:02", "back": "11/05:02"},
    }
    assert valid.timezone().as_dict() == expected
    # switch dates come from the table's rule year, not 1970
    assert invalid.timezone().as_dict() == {
        "name": "America/New_York",
        "hasDst": True,
        "default_offset": -4,
        "hemisphere": "North",
        "current": {"offset": -5, "isDST": False},
        "change": {"start": "03/12:02", "back": "11/05:02"},
    }

def test_timezone_change_strings_without_rule_year():
    table = tzinstant.get_table()
    bare = ZoneTable.build(table.version, [table.get(NY)])
    assert bare.rule_year is None
    t = tzinstant.instant(None, NY, table=bare)
    assert t.timezone().change == ("03/08:02", "11/01:02")
    assert table.with_records([]).rule_year == table.rule_year

def test_timezone_nassau(invalid):
    tz = invalid.goto("America/Nassau").timezone().as_dict()
    assert tz["current"] == {"offset": -5, "isDST": False}
    assert tz["change"] == {"start": "03/12:02", "back": "11/05:02"}

def test_timezone_london(valid):
    tz = valid.goto("Europe/London").timezone().as_dict()
    assert tz["name"] == "Europe/London"
    assert tz["default_offset"] == 1
    assert tz["current"] == {"offset": 0, "isDST": False}
    assert tz["change"] == {"start": "03/26:01", "back": "10/29:02"}

def test_timezone_fixed_offsets(valid):
    tz = valid.goto("-5h").timezone().as_dict()
    assert tz == {
        "name": "Etc/GMT+5",
        "hasDst": False,
        "default_offset": -5,
        "hemisphere": "North",
        "current": {"offset": -5, "isDST": False},
    }
    assert valid.goto("gmt").timezone().name == "Etc/GMT"

def test_timezone_other_zones(valid):
    sydney = valid.goto("Australia/Sydney").timezone()
    assert sydney.hemisphere == "South"
    assert sydney.as_dict()["default_offset"] == 10
    assert sydney.current.is_dst
    assert valid.goto("Asia/Kolkata").timezone().as_dict()["default_offset"] == 5.5

# ============================================================
# with_* builders
# ============================================================

def test_with_week(valid):
    # week 1 of 2023 starts Monday 2 January
    assert valid.with_week(1).format("iso-short") == "2023-01-02"
    assert valid.with_week(44) == valid
    t = valid.with_week(10)
    assert (t.format("iso-short"), t.hour()) == ("2023-03-06", 20)

@pytest.mark.parametrize("week, day, read_back", [
    (-53, "2021-12-20", 52),
    (-3, "2022-12-05", 50),
    (0, "2022-12-26", 53),
    (10, "2023-03-06", 11),
    (104, "2024-12-23", 52),
])
def test_with_week_read_back(valid, week, day, read_back):
    t = valid.with_week(week)
    assert t.format("iso-short") == day
    assert t.week() == read_back

def test_week_numbers(valid):
    assert valid.start_of("week").week() == 44
    # Sunday 1 January 2023 falls before the first Monday
    assert tzinstant.parse("2023-01-01 12:00", NY).week() == 1
    # 2024 starts on a Monday, so there is no partial first week
    assert tzinstant.parse("2024-01-01 12:00", NY).week() == 1
    assert tzinstant.parse("2024-01-08 12:00", NY).week() == 2
    assert tzinstant.parse("2024-12-31 12:00", NY).week() == 52

def test_with_quarter_clamps(valid):
    t = valid.with_quarter(2)
    assert (t.month(), t.date(), t.hour()) == (3, 1, 0)
    assert valid.with_quarter(7).quarter() == 4
    assert valid.with_quarter(0).quarter() == 1
    assert valid.with_quarter(-3).format("iso-short") == "2023-01-01"

def test_with_season(valid):
    t = valid.with_season("summer")
    assert (t.month(), t.date(), t.hour()) == (5, 30, 20)
    assert t.season() == "summer"
    assert valid.with_season("fall").month() == 8
    assert valid.with_season("winter").format("iso-short") == "2023-12-30"
    with pytest.raises(InvalidField):
        valid.with_season("monsoon")

def test_with_season_southern(valid):
    syd = valid.goto("Australia/Sydney")
    t = syd.with_season("summer")
    assert t.month() == 11
    assert t.season() == "summer"

def test_with_month_name_clamps(valid):
    t = valid.with_month_name("february")
    assert (t.month(), t.date(), t.hour()) == (1, 28, 20)
    assert valid.with_month_name("Jun").month_name() == "june"
    with pytest.raises(InvalidField):
        valid.with_month_name("smarch")

def test_with_fields(valid):
    assert valid.with_year(2020).format("iso-short") == "2020-10-30"
    assert valid.with_month(1).format("iso-short") == "2023-02-28"
    assert valid.with_month(12).format("iso-short") == "2024-01-30"
    assert valid.with_date(32).format("iso-short") == "2023-11-01"
    assert valid.with_hour(7).time() == "7:00am"
    assert valid.with_minute(75).time() == "9:15pm"
    assert valid.with_second(30).second() == 30
    assert valid.with_millisecond(250).millisecond() == 250
    leap = tzinstant.parse("2024-02-29", NY)
    assert leap.with_year(2025).format("iso-short") == "2025-02-28"

@pytest.mark.parametrize("value", ["5", 5.0, None, True])
def test_with_fields_require_ints(valid, value):
    with pytest.raises(InvalidField):
        valid.with_hour(value)

def test_with_day(valid):
    assert valid.with_day("sunday").format("iso-short") == "2023-11-05"
    assert valid.with_day("fri").format("iso-short") == "2023-11-03"
    assert valid.with_day(1) == valid
    sun_week = tzinstant.instant(VALID_EPOCH, NY, week_start=tzinstant.WeekStart.SUNDAY)
    assert sun_week.with_day(0).format("iso-short") == "2023-10-29"
    with pytest.raises(InvalidField):
        valid.with_day("s")

def test_with_time_in_gap():
    t = tzinstant.parse("March 12, 2023 9:00", NY).with_time("2:30am")
    assert t.time() == "3:30am"

def test_with_day_keeps_wall_clock_across_dst(valid):
    # Monday 30 Oct 20:00 EDT -> Sunday 5 Nov 20:00 EST
    t = valid.with_day("sunday")
    assert (t.hour(), t.offset()) == (20, -300)
    assert t.with_day("monday") == valid

def test_dst_free_zones_never_change_offset():
    random.seed(11)
    table = tzinstant.get_table()
    names = [n for n in tzinstant.list_zones() if not table.get(n).has_dst]
    names += ["-5h", "+3h", "Etc/GMT+5", "Etc/GMT-14", "Etc/GMT", "Asia/Kolkata"]
    for name in names:
        for _ in range(40):
            t = tzinstant.instant(random.randint(-2_000_000_000_000, 4_000_000_000_000), name)
            tz = t.timezone().as_dict()
            assert tz["hasDst"] is False
            assert tz["current"] == {"offset": tz["default_offset"], "isDST": False}
            assert "change" not in tz
            assert not t.is_dst()
