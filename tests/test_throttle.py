import time
from datetime import timedelta

from depwatch.changelog.throttle import Throttle


def test_default_delay():
    assert Throttle(0).min_delay == 60.0


def test_negative_delay_defaults():
    assert Throttle(-3).min_delay == 60.0


def test_custom_delay():
    assert Throttle(5).min_delay == 5.0


def test_timedelta_delay():
    assert Throttle(timedelta(seconds=5)).min_delay == 5.0


def test_first_call_permitted():
    assert Throttle(10).allow("dep-a") is True


def test_second_call_blocked():
    th = Throttle(10)
    th.allow("dep-a")
    assert th.allow("dep-a") is False


def test_independent_keys():
    th = Throttle(10)
    th.allow("dep-a")
    assert th.allow("dep-b") is True


def test_after_delay_permitted():
    th = Throttle(0.01)
    th.allow("dep-a")
    time.sleep(0.02)
    assert th.allow("dep-a") is True


def test_reset_allows_immediate_fetch():
    th = Throttle(10)
    th.allow("dep-a")
    th.reset("dep-a")
    assert th.allow("dep-a") is True


def test_len_tracks_keys():
    th = Throttle(10)
    assert len(th) == 0
    th.allow("dep-a")
    th.allow("dep-b")
    assert len(th) == 2


def test_reset_unknown_key_noop():
    th = Throttle(10)
    th.reset("nonexistent")
    assert len(th) == 0