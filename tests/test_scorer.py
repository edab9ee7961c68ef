from depwatch.changelog.scorer import Scorer
from depwatch.changelog.transform import Entry


def sample_entry(body):
    return Entry(dependency="lib", version="v1.2.3", body=body)


def test_no_keywords_zero_score():
    assert Scorer().score(sample_entry("breaking change in API")) == 0


def test_keyword_match_increases_score():
    assert Scorer(["breaking"]).score(sample_entry("breaking change in API")) == 1


def test_multiple_matches_accumulate():
    assert Scorer(["fix"]).score(sample_entry("fix memory leak, fix race condition")) == 2


def test_security_keyword_double_counts():
    assert Scorer(["security"]).score(sample_entry("security fix for auth bypass")) == 2


def test_case_insensitive():
    assert Scorer(["BREAKING"]).score(sample_entry("breaking change")) == 1


def test_no_match_zero_score():
    assert Scorer(["deprecat"]).score(sample_entry("minor style fixes")) == 0


def test_version_string_is_searched():
    assert Scorer(["1.2"]).score(sample_entry("nothing here")) == 1


def test_several_keywords_add_up():
    scorer = Scorer(["security", "critical"])
    assert scorer.score(sample_entry("security patch critical")) == 3


def test_apply_sets_score_without_mutating_input():
    entries = [sample_entry("security fix"), sample_entry("docs")]
    out = Scorer(["security"]).apply(entries)
    assert [e.score for e in out] == [2, 0]
    assert entries[0].score == 0