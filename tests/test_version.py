import pytest

from depwatch.changelog.version import Version, VersionError, parse_version


def test_parse_valid():
    assert parse_version("v1.2.3") == Version(1, 2, 3)


def test_parse_without_prefix():
    v = parse_version("0.10.5")
    assert (v.major, v.minor, v.patch) == (0, 10, 5)


def test_parse_pre_release():
    v = parse_version("v2.0.0-beta")
    assert v.pre == "beta"
    assert (v.major, v.minor, v.patch) == (2, 0, 0)


@pytest.mark.parametrize("text", ["1.2", "abc", "", "1.x.3", "1.2.3.4"])
def test_parse_invalid(text):
    with pytest.raises(VersionError):
        parse_version(text)


def test_string():
    v = Version(major=3, minor=1, patch=4)
    assert str(v) == "3.1.4"
    assert str(Version(3, 1, 4, "rc1")) == "3.1.4-rc1"


def test_less():
    a = parse_version("1.0.0")
    b = parse_version("2.0.0")
    assert a.less(b)
    assert not b.less(a)


def test_equal_ignores_pre_release():
    assert parse_version("1.2.3").equal(parse_version("v1.2.3-alpha"))
    assert not parse_version("1.2.3").equal(parse_version("1.2.4"))


def test_string_round_trip():
    assert str(parse_version("v4.5.6-rc2")) == "4.5.6-rc2"