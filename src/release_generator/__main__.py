"""Start the release-generator webhook server."""

import logging

from .config import Settings
from .log import configure_logging
from .server import create_app

logger = logging.getLogger(__name__)


def main() -> None:
    """
    Serve the plugin generator endpoint on the configured port.

    This runs Flask's built-in development server. In production, point a
    WSGI server at the application factory instead, e.g.
    ``release_generator.server:create_app()``; it reads the same environment
    variables.
    """
    settings = Settings.from_env()
    configure_logging(settings.log_level)

    if settings.github_pat is None:
        logger.info(
            "GITHUB_PAT is not set. Private repositories will not be accessible "
            "and GitHub rate limits anonymous clients to 60 requests per hour"
        )
    if not settings.token:
        logger.warning("ARGOCD_TOKEN is not set, every request will be rejected")

    app = create_app(settings)
    app.run(host="0.0.0.0", port=settings.port)


if __name__ == "__main__":
    main()
