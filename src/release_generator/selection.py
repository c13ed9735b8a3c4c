"""Release selection for release-generator."""

import logging
from dataclasses import replace
from typing import Dict, List, Sequence

from .constants import LATEST_SLUG, LATEST_TAG_SUFFIX
from .types import Release, SelectionParameters
from .versions import major, major_minor, parse_version, sort_releases

logger = logging.getLogger(__name__)


def slugify(version: str) -> str:
    """Make a version usable as an identifier: "v1.2.3" -> "v1-2-3"."""
    return version.replace(".", "-")


def select_releases(
    releases: Sequence[Release], params: SelectionParameters
) -> List[Release]:
    """
    Select the releases matching the parameters.

    Releases are walked newest first so the first release seen in a major
    (or major.minor) bucket is the newest of that bucket. The retention cap
    counts accepted releases only.

    Args:
        releases: Releases in any order; not modified
        params: Selection parameters

    Returns:
        Accepted releases with slugs set, oldest first

    Raises:
        InvalidVersionError: If min_release or any release name is not a
            semantic version
    """
    min_release = parse_version(params.min_release)

    selected: List[Release] = []
    latest_in_bucket: Dict[str, str] = {}

    for release in sort_releases(releases, descending=True):
        if parse_version(release.name) < min_release:
            continue

        if params.keep_releases != 0 and len(selected) == params.keep_releases:
            break

        if params.only_latest_minor:
            bucket = major(release.name)
        elif params.only_latest_patch:
            bucket = major_minor(release.name)
        else:
            bucket = None

        if bucket is not None:
            if bucket in latest_in_bucket:
                continue
            latest_in_bucket[bucket] = release.name

        slug = slugify(release.name)
        selected.append(replace(release, name_slug=slug, tag_slug=slug))

    logger.debug("selected %d of %d releases", len(selected), len(releases))
    return sort_releases(selected)


def add_latest(selected: Sequence[Release]) -> List[Release]:
    """
    Append a copy of the newest release under the "latest" slug.

    Args:
        selected: Releases sorted oldest first

    Returns:
        New list ending with the copy; unchanged copy of the input when empty
    """
    if not selected:
        return list(selected)

    newest = selected[-1]
    latest = replace(
        newest,
        name_slug=LATEST_SLUG,
        tag_slug=f"{newest.tag_slug}{LATEST_TAG_SUFFIX}",
    )
    return [*selected, latest]


def generate_parameters(
    releases: Sequence[Release], params: SelectionParameters
) -> List[Release]:
    """
    Compute the plugin output items for a set of releases.

    Args:
        releases: Releases fetched for params.repository
        params: Selection parameters

    Returns:
        Selected releases oldest first, followed by the latest alias when
        params.with_latest is set and anything was selected

    Raises:
        InvalidVersionError: If min_release or any release name is invalid
    """
    selected = select_releases(releases, params)
    if params.with_latest:
        selected = add_latest(selected)
    return selected
