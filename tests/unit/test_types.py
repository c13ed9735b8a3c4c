"""Unit tests for release and parameter types."""

import pytest

from release_generator.exceptions import InvalidRequestError
from release_generator.types import Commit, Release, SelectionParameters


class TestRelease:
    """Test the Release dataclass."""

    def test_from_github(self, github_tags_json):
        """Test building a release from a GitHub tag object."""
        release = Release.from_github(github_tags_json[0])

        assert release.name == "v1.0.1"
        assert release.commit == Commit(
            sha="c5b97d5ae6c19d5c5df71a34c7fbeeda2479ccbc",
            url="https://api.github.com/repos/example/app/commits/c5b97d5ae6c19d5c5df71a34c7fbeeda2479ccbc",
        )
        assert release.node_id == "MDM6UmVmcmVmcy90YWdzL3YxLjAuMQ=="
        assert release.name_slug == ""
        assert release.tag_slug == ""

    def test_from_github_ignores_upstream_slugs(self):
        """Test that slug fields in the payload are never taken over."""
        release = Release.from_github(
            {"name": "v1.0.0", "name_slug": "evil", "tag_slug": "evil"}
        )
        assert release.name_slug == ""
        assert release.tag_slug == ""

    def test_from_github_missing_optional_fields(self):
        """Test that commit and node_id default to empty strings."""
        release = Release.from_github({"name": "v1.0.0"})
        assert release.commit == Commit()
        assert release.node_id == ""

    def test_from_github_requires_name(self):
        """Test that a tag without a name is rejected."""
        with pytest.raises(KeyError):
            Release.from_github({"node_id": "x"})

    def test_is_immutable(self):
        """Test that releases and commits cannot be changed in place."""
        release = Release(name="v1.0.0", commit=Commit(sha="abc", url="u"))
        with pytest.raises(AttributeError):
            release.name_slug = "latest"
        with pytest.raises(AttributeError):
            release.commit.sha = "def"

    def test_to_dict(self):
        """Test the rendered output item."""
        release = Release(
            name="v1.2.3",
            commit=Commit(sha="abc", url="https://example.com/abc"),
            node_id="node",
            name_slug="v1-2-3",
            tag_slug="v1-2-3",
        )
        assert release.to_dict() == {
            "name": "v1.2.3",
            "name_slug": "v1-2-3",
            "tag_slug": "v1-2-3",
            "commit": {"sha": "abc", "url": "https://example.com/abc"},
            "node_id": "node",
        }


class TestSelectionParametersFromDict:
    """Test decoding request parameters."""

    def test_full_payload(self):
        """Test that every field is decoded."""
        parsed = SelectionParameters.from_dict(
            {
                "repository": "example/app",
                "min_release": "v1.0.0",
                "keep_releases": 3,
                "only_latest_minor": True,
                "only_latest_patch": True,
                "with_latest": True,
            }
        )
        assert parsed == SelectionParameters(
            repository="example/app",
            min_release="v1.0.0",
            keep_releases=3,
            only_latest_minor=True,
            only_latest_patch=True,
            with_latest=True,
        )

    def test_defaults(self):
        """Test that optional fields default to off."""
        parsed = SelectionParameters.from_dict({"repository": "example/app", "min_release": "v0.0.0"})
        assert parsed.keep_releases == 0
        assert not parsed.only_latest_minor
        assert not parsed.only_latest_patch
        assert not parsed.with_latest

    def test_missing_min_release_is_empty(self):
        """Test that a missing min_release decodes as an empty string."""
        parsed = SelectionParameters.from_dict({"repository": "example/app"})
        assert parsed.min_release == ""

    @pytest.mark.parametrize(
        "payload",
        [
            None,
            [],
            {},
            {"repository": ""},
            {"repository": 42},
            {"repository": "a/b", "min_release": 1},
            {"repository": "a/b", "keep_releases": "2"},
            {"repository": "a/b", "keep_releases": 1.5},
            {"repository": "a/b", "keep_releases": True},
            {"repository": "a/b", "keep_releases": -1},
            {"repository": "a/b", "only_latest_minor": "yes"},
            {"repository": "a/b", "with_latest": 1},
        ],
    )
    def test_rejects_invalid_payloads(self, payload):
        """Test that malformed parameters raise InvalidRequestError."""
        with pytest.raises(InvalidRequestError):
            SelectionParameters.from_dict(payload)

    def test_is_immutable(self):
        """Test that parameters cannot be changed after decoding."""
        parsed = SelectionParameters(repository="a/b", min_release="v0.0.0")
        with pytest.raises(AttributeError):
            parsed.keep_releases = 5
