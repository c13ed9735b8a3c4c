"""
release-generator: Argo CD plugin generator that turns a repository's tags into parameters
"""

from importlib.metadata import PackageNotFoundError, version

from .exceptions import (
    ConfigurationError,
    GitHubFetchError,
    InvalidRequestError,
    InvalidVersionError,
    ReleaseGeneratorError,
)
from .github import fetch_releases
from .selection import add_latest, generate_parameters, select_releases, slugify
from .server import create_app
from .types import Commit, Release, SelectionParameters

try:
    __version__ = version("release-generator")
except PackageNotFoundError:
    __version__ = None

__all__ = [
    "create_app",
    "fetch_releases",
    "select_releases",
    "add_latest",
    "generate_parameters",
    "slugify",
    "Commit",
    "Release",
    "SelectionParameters",
    "ReleaseGeneratorError",
    "InvalidVersionError",
    "InvalidRequestError",
    "GitHubFetchError",
    "ConfigurationError",
]
