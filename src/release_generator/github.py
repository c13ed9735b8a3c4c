"""GitHub tag fetching for release-generator."""

import logging
from typing import List, Optional

import requests

from .constants import DEFAULT_GITHUB_API_URL, DEFAULT_GITHUB_TIMEOUT
from .exceptions import GitHubFetchError
from .types import Release

logger = logging.getLogger(__name__)


def fetch_releases(
    repository: str,
    token: Optional[str] = None,
    api_url: str = DEFAULT_GITHUB_API_URL,
    timeout: float = DEFAULT_GITHUB_TIMEOUT,
) -> List[Release]:
    """
    Fetch the tags of a repository from the GitHub REST API.

    Only the first page GitHub returns is used.

    Args:
        repository: Repository as "owner/name"
        token: Personal access token; anonymous requests are rate limited
            and cannot see private repositories
        api_url: Base URL of the GitHub API
        timeout: Request timeout in seconds

    Returns:
        Releases in the order GitHub returned them, without slugs

    Raises:
        GitHubFetchError: If the request fails or GitHub does not answer 200
    """
    url = f"{api_url.rstrip('/')}/repos/{repository}/tags"
    headers = {"Accept": "application/vnd.github+json"}
    if token:
        headers["Authorization"] = f"Bearer {token}"

    try:
        response = requests.get(url, headers=headers, timeout=timeout)
    except requests.RequestException as e:
        raise GitHubFetchError(f"Network error fetching releases: {e}") from e

    if response.status_code != 200:
        logger.error(
            "failed to fetch releases for %s, github_status_code=%d",
            repository,
            response.status_code,
        )
        raise GitHubFetchError(
            f"failed to fetch releases, github responded with: {response.status_code}",
            status_code=response.status_code,
        )

    try:
        tags = response.json()
    except ValueError as e:
        raise GitHubFetchError(f"GitHub returned invalid JSON: {e}") from e

    if not isinstance(tags, list):
        raise GitHubFetchError("GitHub returned an unexpected tags payload")

    try:
        return [Release.from_github(tag) for tag in tags]
    except (KeyError, TypeError, AttributeError) as e:
        raise GitHubFetchError(f"GitHub returned a malformed tag: {e}") from e
