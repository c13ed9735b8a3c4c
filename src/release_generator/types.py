"""Data types and dataclasses for release-generator."""

from dataclasses import dataclass, field
from typing import Any, Dict

from .exceptions import InvalidRequestError


@dataclass(frozen=True)
class Commit:
    """Commit a tag points at."""

    sha: str = ""
    url: str = ""


@dataclass(frozen=True)
class Release:
    """A published version of a repository, as returned to the plugin caller."""

    name: str  # Raw tag name, e.g. "v1.2.3"
    commit: Commit = field(default_factory=Commit)
    node_id: str = ""  # Opaque GitHub identifier

    # Derived during selection, never taken from upstream
    name_slug: str = ""  # e.g. "v1-2-3", or "latest"
    tag_slug: str = ""  # e.g. "v1-2-3", or "v1-2-3-latest"

    @classmethod
    def from_github(cls, payload: Dict[str, Any]) -> "Release":
        """
        Build a release from one element of GitHub's list-tags response.

        Args:
            payload: Tag object with name, commit.sha, commit.url and node_id

        Returns:
            Release without slugs
        """
        commit = payload.get("commit") or {}
        return cls(
            name=payload["name"],
            commit=Commit(sha=commit.get("sha", ""), url=commit.get("url", "")),
            node_id=payload.get("node_id", ""),
        )

    def to_dict(self) -> Dict[str, Any]:
        """Render the release as one item of the plugin output."""
        return {
            "name": self.name,
            "name_slug": self.name_slug,
            "tag_slug": self.tag_slug,
            "commit": {"sha": self.commit.sha, "url": self.commit.url},
            "node_id": self.node_id,
        }


@dataclass(frozen=True)
class SelectionParameters:
    """Filter parameters sent by the plugin caller."""

    repository: str  # "owner/name"
    min_release: str  # Releases below this version are dropped
    keep_releases: int = 0  # 0 keeps everything
    only_latest_minor: bool = False  # Takes precedence over only_latest_patch
    only_latest_patch: bool = False
    with_latest: bool = False

    @classmethod
    def from_dict(cls, payload: Dict[str, Any]) -> "SelectionParameters":
        """
        Decode the input.parameters object of a plugin request.

        Args:
            payload: Parameters object from the request body

        Returns:
            Validated SelectionParameters

        Raises:
            InvalidRequestError: If a field is missing or has the wrong type
        """
        if not isinstance(payload, dict):
            raise InvalidRequestError("parameters must be an object")

        repository = payload.get("repository")
        if not isinstance(repository, str) or not repository:
            raise InvalidRequestError("repository must be a non-empty string")

        min_release = payload.get("min_release", "")
        if not isinstance(min_release, str):
            raise InvalidRequestError("min_release must be a string")

        keep_releases = payload.get("keep_releases", 0)
        # bool is an int subclass but never a valid count
        if isinstance(keep_releases, bool) or not isinstance(keep_releases, int):
            raise InvalidRequestError("keep_releases must be an integer")
        if keep_releases < 0:
            raise InvalidRequestError("keep_releases must not be negative")

        flags = {}
        for flag in ("only_latest_minor", "only_latest_patch", "with_latest"):
            value = payload.get(flag, False)
            if not isinstance(value, bool):
                raise InvalidRequestError(f"{flag} must be a boolean")
            flags[flag] = value

        return cls(
            repository=repository,
            min_release=min_release,
            keep_releases=keep_releases,
            **flags,
        )
