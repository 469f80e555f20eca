# tests/test_cli.py

import json

import pytest

from tzinstant.cli import main

VALID = "1698710400000"
NY = "America/New_York"

def test_show(capsys):
    assert main(["show", VALID, "--tz", NY]) == 0
    assert capsys.readouterr().out.strip() == "2023-10-30T20:00:00.000-04:00"

def test_show_formats(capsys):
    assert main(["show", VALID, "--tz", NY, "--format", "nice"]) == 0
    assert capsys.readouterr().out.strip() == "Oct 30th, 8:00pm"
    assert main(["show", "31/10/2023", "--tz", NY, "--dmy", "--format", "numeric"]) == 0
    assert capsys.readouterr().out.strip() == "31/10/2023"

def test_show_fixed_offset(capsys):
    assert main(["show", VALID, "--tz=-5h", "--format", "time"]) == 0
    assert capsys.readouterr().out.strip() == "7:00pm"

def test_zone(capsys):
    assert main(["zone", NY, "--epoch", VALID]) == 0
    out = json.loads(capsys.readouterr().out)
    assert out["change"] == {"start": "03/12:02", "back": "11/05:02"}
    assert out["current"] == {"offset": -4, "isDST": True}

def test_add(capsys):
    assert main(["add", "October 31, 2023 9:00:00", "3", "week", "--tz", NY, "--format", "iso-short"]) == 0
    assert capsys.readouterr().out.strip() == "2023-11-21"
    assert main(["add", VALID, "1.5", "hours", "--tz", NY, "--format", "time"]) == 0
    assert capsys.readouterr().out.strip() == "9:30pm"

def test_start_of(capsys):
    assert main(["start-of", VALID, "month", "--tz", NY, "--format", "iso-short"]) == 0
    assert capsys.readouterr().out.strip() == "2023-10-01"
    assert main(["start-of", VALID, "day", "--end", "--tz", NY]) == 0
    assert capsys.readouterr().out.strip() == "2023-10-30T23:59:59.999-04:00"

def test_zones(capsys):
    assert main(["zones", "--aliases"]) == 0
    out = capsys.readouterr().out.splitlines()
    assert out[0] == "# table 2023c"
    assert "Europe/London" in out
    assert "est -> America/New_York" in out

def test_errors_exit_2(capsys):
    assert main(["show", VALID, "--tz", "1234"]) == 2
    assert "Cannot find timezone named: '1234'" in capsys.readouterr().err
    assert main(["show", "garbage", "--tz", NY, "--strict"]) == 2
    assert main(["add", VALID, "1", "fortnight", "--tz", NY]) == 2

def test_diag_round_trip(capsys):
    rc = main(["diag", "round-trip", "--N", "20", "--zones", "America/New_York,Australia/Sydney"])
    assert rc == 0
    assert "All round-trip tests passed." in capsys.readouterr().out

def test_diag_offset_scan(capsys):
    pytest.importorskip("numpy")
    rc = main(["diag", "offset-scan", "--zones", "America/New_York,Australia/Sydney",
               "--year-start", "2023", "--year-end", "2024", "--step-minutes", "30"])
    assert rc == 0
    assert "agrees" in capsys.readouterr().out

def test_unknown_subcommand():
    with pytest.raises(SystemExit):
        main(["frobnicate"])
