"""
frontgate.api.main

Purpose:
    FastAPI application entrypoint for the gateway: API routers under /api,
    the frontend bundle (static assets + SPA fallback) everywhere else, and a
    single error normalizer in front of both.

Created:
    2026-10-19
"""

from __future__ import annotations

import logging
import os
from functools import partial
from typing import Iterable

from fastapi import APIRouter, FastAPI

from frontgate.api.contracts.api_paths import ApiPaths
from frontgate.api.contracts.correlation_id_policy import CorrelationIdPolicy
from frontgate.api.error_handlers import ErrorNormalizer, register_error_handlers
from frontgate.api.frontend.resolver import FrontendResolver
from frontgate.api.i18n.translator import JsonCatalogTranslator
from frontgate.api.logging.logging_config import configure_logging
from frontgate.api.middleware import build_middleware_chain
from frontgate.api.routes import build_api_router
from frontgate.api.routes.info import identity_payload
from frontgate.api.routing.dispatcher import RoutingDispatcher
from frontgate.api.settings import Settings, get_settings

logger = logging.getLogger(__name__)


def _log_frontend_location(resolver: FrontendResolver) -> None:
    logger.info("Current working directory: %s", os.getcwd())
    logger.info("Looking for frontend at: %s", resolver.root)
    if resolver.root_exists():
        logger.info("Frontend static files will be served from: %s", resolver.root)
    else:
        logger.warning(
            "Frontend directory not found at %s; only the API is served until it is deployed.",
            resolver.root,
        )


def create_app(
    settings: Settings | None = None,
    api_routers: Iterable[APIRouter] = (),
) -> FastAPI:
    settings = settings or get_settings()

    configure_logging(settings.log_level)

    paths = ApiPaths()
    resolver = FrontendResolver(settings.frontend_root)
    translator = JsonCatalogTranslator.from_package(default_locale=settings.default_locale)
    normalizer = ErrorNormalizer(resolver, paths=paths, translator=translator)

    identity = partial(identity_payload, settings, paths)
    dispatcher = RoutingDispatcher(
        resolver,
        paths=paths,
        identity=identity if settings.root_identity_when_no_frontend else None,
    )

    app = FastAPI(
        title=settings.service_name,
        version=settings.service_version,
        docs_url=paths.api(paths.docs),
        redoc_url=None,
        openapi_url=paths.api(paths.openapi),
        middleware=build_middleware_chain(normalizer, CorrelationIdPolicy()),
    )

    register_error_handlers(app, normalizer)

    app.include_router(build_api_router(identity, api_routers))

    # Must stay last: matches every path the routers above did not.
    app.include_router(dispatcher.router())

    _log_frontend_location(resolver)
    return app


app = create_app()
