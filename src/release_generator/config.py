"""Environment configuration for release-generator."""

import os
from dataclasses import dataclass
from typing import Mapping, Optional

from .constants import (
    DEFAULT_GITHUB_API_URL,
    DEFAULT_GITHUB_TIMEOUT,
    DEFAULT_LOG_LEVEL,
    DEFAULT_PORT,
)
from .exceptions import ConfigurationError


def _int_from_env(environ: Mapping[str, str], name: str, default: int) -> int:
    value = environ.get(name)
    if not value:
        return default
    try:
        return int(value)
    except ValueError as e:
        raise ConfigurationError(f"${name} must be an integer, got {value!r}") from e


@dataclass(frozen=True)
class Settings:
    """Runtime settings of the webhook server."""

    token: str = ""  # Bearer token Argo CD sends; empty rejects every request
    github_pat: Optional[str] = None
    log_level: str = DEFAULT_LOG_LEVEL
    port: int = DEFAULT_PORT
    github_api_url: str = DEFAULT_GITHUB_API_URL
    github_timeout: int = DEFAULT_GITHUB_TIMEOUT

    @classmethod
    def from_env(cls, environ: Optional[Mapping[str, str]] = None) -> "Settings":
        """
        Load settings from environment variables.

        Args:
            environ: Mapping to read from (defaults to os.environ)

        Returns:
            Settings

        Raises:
            ConfigurationError: If $PORT or $GITHUB_TIMEOUT is not an integer
        """
        if environ is None:
            environ = os.environ

        return cls(
            token=environ.get("ARGOCD_TOKEN", ""),
            github_pat=environ.get("GITHUB_PAT") or None,
            log_level=environ.get("LOG_LEVEL") or DEFAULT_LOG_LEVEL,
            port=_int_from_env(environ, "PORT", DEFAULT_PORT),
            github_api_url=environ.get("GITHUB_API_URL") or DEFAULT_GITHUB_API_URL,
            github_timeout=_int_from_env(environ, "GITHUB_TIMEOUT", DEFAULT_GITHUB_TIMEOUT),
        )
