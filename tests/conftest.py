"""Shared pytest fixtures for release-generator tests."""

import json
from pathlib import Path
from typing import Any, Callable, Dict, List

import pytest

from release_generator.config import Settings
from release_generator.types import Commit, Release


@pytest.fixture
def fixtures_dir() -> Path:
    """Return the path to the fixtures directory."""
    return Path(__file__).parent / "fixtures"


@pytest.fixture
def github_tags_json(fixtures_dir: Path) -> List[Dict[str, Any]]:
    """Load and return the sample GitHub list-tags response."""
    with open(fixtures_dir / "github_tags.json") as f:
        return json.load(f)


@pytest.fixture
def make_releases() -> Callable[..., List[Release]]:
    """Return a factory building releases from tag names."""

    def _make(*names: str) -> List[Release]:
        return [
            Release(
                name=name,
                commit=Commit(sha=f"sha-{name}", url=f"https://example.com/{name}"),
                node_id=f"node-{name}",
            )
            for name in names
        ]

    return _make


@pytest.fixture
def six_releases(make_releases: Callable[..., List[Release]]) -> List[Release]:
    """v0.0.0 through v1.0.1, oldest first."""
    return make_releases("v0.0.0", "v0.0.1", "v0.1.0", "v0.1.1", "v1.0.0", "v1.0.1")


@pytest.fixture
def settings() -> Settings:
    """Settings with a known bearer token and no GitHub token."""
    return Settings(token="s3cret", github_api_url="https://github.test")
