"""Configuration constants for release-generator."""

# Argo CD calls plugin generators on this path
ENDPOINT_PATH = "/api/v1/getparams.execute"

DEFAULT_PORT = 8080
DEFAULT_LOG_LEVEL = "INFO"

DEFAULT_GITHUB_API_URL = "https://api.github.com"
DEFAULT_GITHUB_TIMEOUT = 30  # seconds

# Slug given to the duplicated newest release when with_latest is set
LATEST_SLUG = "latest"
LATEST_TAG_SUFFIX = "-latest"
