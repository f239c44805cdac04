from datetime import datetime

from gitlog.revision import Rev, RevAll, RevNumber, RevRange, RevTime


def test_rev():
    assert Rev(ref="5e312d5").args() == ["5e312d5"]
    assert Rev(ref="v0.0.1").args() == ["v0.0.1"]


def test_rev_range_puts_old_first():
    assert RevRange(new="d01b41a", old="5e312d5").args() == ["5e312d5..d01b41a"]
    assert RevRange(new="v0.1.2", old="v0.0.1").args() == ["v0.0.1..v0.1.2"]


def test_rev_all():
    assert RevAll().args() == ["--all"]


def test_rev_number():
    assert RevNumber(limit=10).args() == ["-n", "10"]


def test_rev_number_is_not_validated():
    assert RevNumber(limit=-1).args() == ["-n", "-1"]


def test_rev_time():
    now = datetime(2018, 1, 28, 9, 5, 7)
    formatted = "2018-01-28 09:05:07"

    assert RevTime(since=now, until=now).args() == ["--since", formatted, "--until", formatted]
    assert RevTime(since=now).args() == ["--since", formatted]
    assert RevTime(until=now).args() == ["--until", formatted]
    assert RevTime().args() == []
