from datetime import datetime as DateTime

import pytest

from barstatus.basic import datetime
from barstatus.cli import render_status
from barstatus.config import INTERVAL, MAXLEN, UNKNOWN_STR, Entry, default_entries


def test_default_entries_show_date_and_time():
    entries = default_entries(INTERVAL)
    assert len(entries) == 1
    assert entries[0].func is datetime
    assert entries[0].fmt == "%s"
    assert entries[0].argument == "%F %T"


def test_default_entries_render_a_timestamp():
    status = render_status(default_entries(INTERVAL), UNKNOWN_STR, MAXLEN)
    parsed = DateTime.strptime(status, "%Y-%m-%d %H:%M:%S")
    assert len(status) == 19
    assert abs((DateTime.now() - parsed).total_seconds()) < 60


@pytest.mark.parametrize("interval", [0, -1000])
def test_default_entries_reject_bad_interval(interval):
    with pytest.raises(ValueError):
        default_entries(interval)


def test_entry_default_argument_is_none():
    entry = Entry(lambda arg: arg, "%s")
    assert entry.argument is None
    assert entry.func("abc") == "abc"


def test_entry_is_immutable():
    entry = Entry(lambda arg: arg, "%s", "x")
    with pytest.raises(AttributeError):
        entry.fmt = "%s%s"  # type: ignore[misc]
    assert entry.fmt == "%s"
    assert entry.argument == "x"