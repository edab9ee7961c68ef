import pytest

from depwatch.changelog.source import (
    MissingNameError,
    MissingOwnerError,
    MissingRepoError,
    MissingURLError,
    Source,
    SourceError,
    SourceType,
    UnknownSourceTypeError,
)


def test_http_missing_url():
    with pytest.raises(MissingURLError):
        Source(name="lib", type=SourceType.HTTP).validate()


def test_http_valid():
    src = Source(name="lib", type=SourceType.HTTP, url="https://example.com/CHANGELOG.md")
    assert src.validate() is None


def test_github_missing_owner():
    with pytest.raises(MissingOwnerError):
        Source(name="lib", type=SourceType.GITHUB, repo="myrepo").validate()


def test_github_missing_repo():
    with pytest.raises(MissingRepoError):
        Source(name="lib", type=SourceType.GITHUB, owner="myorg").validate()


def test_github_valid():
    src = Source(name="lib", type=SourceType.GITHUB, owner="myorg", repo="myrepo")
    assert src.validate() is None


def test_unknown_type():
    with pytest.raises(UnknownSourceTypeError):
        Source(name="lib", type="rss").validate()


def test_missing_name():
    with pytest.raises(MissingNameError):
        Source(type=SourceType.HTTP, url="https://example.com/x").validate()


def test_plain_string_type_accepted():
    src = Source(name="lib", type="github", owner="myorg", repo="myrepo")
    assert src.validate() is None


def test_errors_share_base_class():
    with pytest.raises(SourceError):
        Source(name="lib", type=SourceType.HTTP).validate()


@pytest.mark.parametrize(
    "source, expected",
    [
        (Source(name="lib", type=SourceType.GITHUB, owner="myorg", repo="myrepo"), "github:myorg/myrepo"),
        (Source(name="lib", type=SourceType.HTTP, url="https://example.com/CL.md"), "http:https://example.com/CL.md"),
        (Source(name="lib", type="rss"), "rss:lib"),
    ],
)
def test_str(source, expected):
    assert str(source) == expected