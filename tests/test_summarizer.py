from depwatch.changelog.summarizer import DEFAULT_SUMMARY_LENGTH, Summarizer
from depwatch.changelog.transform import Entry


def test_default_length():
    assert Summarizer().max_runes == DEFAULT_SUMMARY_LENGTH == 120


def test_custom_length():
    assert Summarizer(50).max_runes == 50


def test_zero_length_ignored():
    assert Summarizer(0).max_runes == DEFAULT_SUMMARY_LENGTH


def test_short_body_unchanged():
    out = Summarizer().apply([Entry(body="short body")])
    assert out[0].body == "short body"


def test_collapses_newlines():
    out = Summarizer().apply([Entry(body="line one\nline two\nline three")])
    assert out[0].body == "line one line two line three"


def test_truncates_long_body():
    out = Summarizer(10).apply([Entry(body="hello world this is a long sentence")])
    assert out[0].body == "hello worl…"
    assert len(out[0].body) == 11


def test_does_not_mutate_input():
    entries = [Entry(body="hello world")]
    out = Summarizer(5).apply(entries)
    assert entries[0].body == "hello world"
    assert out[0].body == "hello…"


def test_empty_body():
    assert Summarizer().apply([Entry(body="")])[0].body == ""


def test_preserves_other_fields():
    out = Summarizer().apply([Entry(dependency="lib", version="1.0.0", body="  a\t b  ")])
    assert (out[0].dependency, out[0].version, out[0].body) == ("lib", "1.0.0", "a b")