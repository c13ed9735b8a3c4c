"""Semantic version ordering for release-generator."""

import re
from typing import List, Sequence

from semver import Version

from .exceptions import InvalidVersionError
from .types import Release

# vMAJOR and vMAJOR.MINOR, without pre-release or build suffix
_SHORTHAND_RE = re.compile(r"(0|[1-9]\d*)(?:\.(0|[1-9]\d*))?")


def parse_version(version: str) -> Version:
    """
    Parse a semantic version, optionally prefixed with 'v'.

    The shorthands vMAJOR and vMAJOR.MINOR are accepted; missing parts are 0.
    A shorthand cannot carry a pre-release or build suffix.

    Args:
        version: Version string, e.g. "v1.2.3", "1.2.3-rc.1+build.5" or "v2"

    Returns:
        Parsed semver Version

    Raises:
        InvalidVersionError: If the string is not a semantic version
    """
    if not isinstance(version, str):
        raise InvalidVersionError(f"invalid semver: {version!r}")

    raw = version[1:] if version.startswith("v") else version
    shorthand = _SHORTHAND_RE.fullmatch(raw)
    if shorthand:
        return Version(int(shorthand.group(1)), int(shorthand.group(2) or 0), 0)

    try:
        return Version.parse(raw)
    except ValueError as e:
        raise InvalidVersionError(f"invalid semver: {version!r}") from e


def is_valid(version: str) -> bool:
    """Return True if the string parses as a semantic version."""
    try:
        parse_version(version)
    except InvalidVersionError:
        return False
    return True


def compare(a: str, b: str) -> int:
    """
    Compare two versions by semver precedence.

    Build metadata is ignored; a pre-release sorts before its release.

    Returns:
        -1, 0 or 1
    """
    return parse_version(a).compare(parse_version(b))


def major(version: str) -> str:
    """Major component as a bucket key, e.g. "1" for "v1.2.3"."""
    return str(parse_version(version).major)


def major_minor(version: str) -> str:
    """Major.minor components as a bucket key, e.g. "1.2" for "v1.2.3"."""
    parsed = parse_version(version)
    return f"{parsed.major}.{parsed.minor}"


def sort_releases(releases: Sequence[Release], descending: bool = False) -> List[Release]:
    """
    Stable sort of releases by the version in their name.

    Releases with equal precedence keep their relative order in both directions.
    """
    return sorted(releases, key=lambda r: parse_version(r.name), reverse=descending)
