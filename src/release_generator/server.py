"""Argo CD plugin generator webhook for release-generator."""

import hmac
import logging
from typing import Any, Callable, Dict, List, Optional, Sequence

from flask import Flask, Response, jsonify, request

from .config import Settings
from .constants import ENDPOINT_PATH
from .exceptions import GitHubFetchError, InvalidRequestError, InvalidVersionError
from .github import fetch_releases
from .selection import generate_parameters
from .types import Release, SelectionParameters
from .versions import is_valid

logger = logging.getLogger(__name__)

Fetcher = Callable[[str], List[Release]]


def render_output(releases: Sequence[Release]) -> Dict[str, Any]:
    """Wrap releases in the response envelope Argo CD expects."""
    return {"output": {"parameters": [release.to_dict() for release in releases]}}


def parse_request(body: Any) -> SelectionParameters:
    """
    Decode a plugin request body.

    Args:
        body: Decoded JSON body, expected as {"input": {"parameters": {...}}}

    Returns:
        SelectionParameters with a valid min_release

    Raises:
        InvalidRequestError: If the body does not have the expected shape
        InvalidVersionError: If min_release is not a semantic version
    """
    if not isinstance(body, dict) or not isinstance(body.get("input"), dict):
        raise InvalidRequestError("request body must contain an input object")

    params = SelectionParameters.from_dict(body["input"].get("parameters"))
    if not is_valid(params.min_release):
        raise InvalidVersionError(f"invalid semver: {params.min_release!r}")
    return params


def is_authorized(header: Optional[str], token: str) -> bool:
    """Check an Authorization header against the configured bearer token."""
    if not header or not token:
        return False
    scheme, _, credentials = header.partition(" ")
    if scheme.lower() != "bearer":
        return False
    return hmac.compare_digest(credentials.strip().encode(), token.encode())


def _error(message: str, status: int) -> Response:
    return Response(f"{message}\n", status=status, mimetype="text/plain")


def create_app(
    settings: Optional[Settings] = None, fetcher: Optional[Fetcher] = None
) -> Flask:
    """
    Build the webhook application.

    Args:
        settings: Runtime settings (defaults to Settings.from_env())
        fetcher: Callable returning the releases of a repository
                 (defaults to the GitHub client configured from settings)

    Returns:
        Flask application serving the plugin generator endpoint
    """
    if settings is None:
        settings = Settings.from_env()

    if fetcher is None:

        def fetcher(repository: str) -> List[Release]:
            return fetch_releases(
                repository,
                token=settings.github_pat,
                api_url=settings.github_api_url,
                timeout=settings.github_timeout,
            )

    app = Flask(__name__)

    @app.errorhandler(405)
    def method_not_allowed(exc: Exception) -> Response:
        return _error("Method not allowed", 405)

    @app.route(ENDPOINT_PATH, methods=["POST"], provide_automatic_options=False)
    def generate() -> Response:
        if not is_authorized(request.headers.get("Authorization"), settings.token):
            logger.warning("rejected request with missing or invalid bearer token")
            return _error("Unauthorized", 401)

        body = request.get_json(force=True, silent=True)
        if body is None:
            logger.error("failed to decode request body")
            return _error("request body must be valid JSON", 400)

        try:
            params = parse_request(body)
        except (InvalidRequestError, InvalidVersionError) as e:
            logger.error("invalid request: %s", e)
            return _error(str(e), 400)

        logger.debug("fetching releases for %s", params.repository)
        try:
            releases = fetcher(params.repository)
        except GitHubFetchError as e:
            logger.error("failed to fetch releases: %s", e)
            return _error(str(e), 502)

        logger.debug("fetched %d releases", len(releases))

        try:
            selected = generate_parameters(releases, params)
        except InvalidVersionError as e:
            logger.error("failed to filter releases: %s", e)
            return _error(str(e), 400)

        logger.debug(
            "returning %d releases after filtering with min_release of %s",
            len(selected),
            params.min_release,
        )
        return jsonify(render_output(selected))

    return app
