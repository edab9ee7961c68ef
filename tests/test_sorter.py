from datetime import datetime, timedelta

from depwatch.changelog.sorter import SortOrder, Sorter
from depwatch.changelog.transform import Entry

NOW = datetime(2024, 6, 1, 12, 0, 0)
OLD = NOW - timedelta(hours=48)
OLDER = NOW - timedelta(hours=96)


def sample_entries():
    return [
        Entry(version="v1.0.0", date=OLD, body="old"),
        Entry(version="v1.2.0", date=NOW, body="new"),
        Entry(version="v0.9.0", date=OLDER, body="oldest"),
    ]


def test_descending_order():
    out = Sorter(SortOrder.DESCENDING).apply(sample_entries())
    assert [e.version for e in out] == ["v1.2.0", "v1.0.0", "v0.9.0"]


def test_ascending_order():
    out = Sorter(SortOrder.ASCENDING).apply(sample_entries())
    assert [e.version for e in out] == ["v0.9.0", "v1.0.0", "v1.2.0"]


def test_default_is_descending():
    out = Sorter().apply(sample_entries())
    assert out[0].version == "v1.2.0"


def test_missing_date_placed_last():
    entries = [
        Entry(version="v1.0.0", date=None, body="no date"),
        Entry(version="v1.1.0", date=NOW, body="has date"),
    ]
    out = Sorter(SortOrder.DESCENDING).apply(entries)
    assert [e.version for e in out] == ["v1.1.0", "v1.0.0"]


def test_missing_date_last_when_ascending():
    entries = [
        Entry(version="a", date=None),
        Entry(version="b", date=NOW),
        Entry(version="c", date=None),
        Entry(version="d", date=OLD),
    ]
    out = Sorter(SortOrder.ASCENDING).apply(entries)
    assert [e.version for e in out] == ["d", "b", "a", "c"]


def test_equal_dates_keep_input_order():
    entries = [Entry(version=v, date=NOW) for v in ["x", "y", "z"]]
    out = Sorter(SortOrder.DESCENDING).apply(entries)
    assert [e.version for e in out] == ["x", "y", "z"]


def test_does_not_mutate_input():
    entries = sample_entries()
    Sorter(SortOrder.DESCENDING).apply(entries)
    assert entries[0].version == "v1.0.0"


def test_empty_input():
    assert Sorter(SortOrder.DESCENDING).apply([]) == []