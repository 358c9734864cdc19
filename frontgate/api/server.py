"""
frontgate.api.server

Purpose:
    Process entrypoint (`frontgate` console script): build the app from
    environment settings and serve it with uvicorn.

Created:
    2026-10-19
"""

from __future__ import annotations

import logging

import uvicorn

from frontgate.api.contracts.api_paths import ApiPaths
from frontgate.api.main import create_app
from frontgate.api.settings import get_settings

logger = logging.getLogger(__name__)


def main() -> None:
    settings = get_settings()
    app = create_app(settings)
    paths = ApiPaths()

    logger.info("Application is running on: http://localhost:%s", settings.port)
    logger.info("Frontend served from: %s", settings.frontend_root)
    logger.info("API available at: http://localhost:%s%s", settings.port, paths.api_prefix)
    logger.info("Swagger docs at: http://localhost:%s%s", settings.port, paths.api(paths.docs))

    uvicorn.run(app, host=settings.host, port=settings.port, log_config=None)


if __name__ == "__main__":
    main()
