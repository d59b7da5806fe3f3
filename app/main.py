import logging
import os
from contextlib import asynccontextmanager
from typing import Optional

import httpx
from fastapi import FastAPI, Request
from starlette.middleware.httpsredirect import HTTPSRedirectMiddleware

from app.api.routes import build_target_router, normalize_prefix, parse_route_aliases, router
from app.core.config import SERVICE_NAME, SERVICE_VERSION, settings
from app.fetch.httpx_fetcher import HttpxFetcher, build_client
from app.schemas import ServiceInfo

logging.basicConfig(
    level=settings.LOG_LEVEL,
    format="%(asctime)s %(levelname)s %(name)s: %(message)s",
)
logger = logging.getLogger(__name__)

if settings.LOG_LEVEL != os.getenv("LOG_LEVEL", "INFO").strip().upper():
    logger.warning("Unknown LOG_LEVEL %r, using %s", os.getenv("LOG_LEVEL"), settings.LOG_LEVEL)

def create_app(
    transport: Optional[httpx.AsyncBaseTransport] = None,
    base_url: Optional[str] = None,
) -> FastAPI:
    """
    Build the application.

    The outbound client is created on startup and closed on shutdown. Passing
    `transport` swaps the network layer, e.g. for an `httpx.MockTransport`.
    """
    prefix = normalize_prefix(settings.TARGET_ROUTE_PREFIX)
    aliases = parse_route_aliases(settings.TARGET_ROUTE_ALIASES)

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        # Startup
        client = build_client(base_url=base_url, transport=transport)
        app.state.fetcher = HttpxFetcher(client)
        logger.info("Starting %s, forwarding to %s", SERVICE_NAME, client.base_url)

        yield

        # Shutdown
        logger.info("Shutting down %s", SERVICE_NAME)
        await client.aclose()

    docs_enabled = settings.is_development
    app = FastAPI(
        title=SERVICE_NAME,
        description="Forwards requests to a fixed remote host and returns its body",
        version=SERVICE_VERSION,
        lifespan=lifespan,
        docs_url="/docs" if docs_enabled else None,
        redoc_url=None,
        openapi_url="/openapi.json" if docs_enabled else None,
    )

    if settings.HTTPS_REDIRECT:
        app.add_middleware(HTTPSRedirectMiddleware)

    app.include_router(router)
    app.include_router(build_target_router(prefix, aliases))

    @app.get("/", response_model=ServiceInfo)
    async def root(request: Request):
        """Root endpoint with basic info"""
        return ServiceInfo(
            service=SERVICE_NAME,
            version=SERVICE_VERSION,
            base_address=request.app.state.fetcher.base_url,
            endpoints=[f"{a.method} {prefix}{a.path}" for a in aliases] + ["GET /health"],
        )

    return app

app = create_app()

def run():
    """Console entry point: serve the app with uvicorn."""
    import uvicorn

    uvicorn.run("app.main:app", host=settings.HOST, port=settings.PORT)
