import logging
from typing import List

from fastapi import APIRouter, Depends, Request
from fastapi.responses import PlainTextResponse

from app.core.config import SERVICE_NAME, settings
from app.fetch.base import BaseFetcher
from app.schemas import HealthResponse, RouteAlias

logger = logging.getLogger(__name__)

SUPPORTED_METHODS = ("GET", "POST", "PUT", "PATCH", "DELETE")

router = APIRouter()

def get_fetcher(request: Request) -> BaseFetcher:
    """Fetcher shared by all requests, created in the application lifespan."""
    return request.app.state.fetcher

def normalize_prefix(prefix: str) -> str:
    prefix = prefix.strip().strip("/")
    return f"/{prefix}" if prefix else ""

def parse_route_aliases(raw: str) -> List[RouteAlias]:
    """
    Parse a comma separated alias list such as "GET /GetData,POST /GetData".
    Raises ValueError on malformed entries.
    """
    aliases: List[RouteAlias] = []
    for entry in raw.split(","):
        entry = entry.strip()
        if not entry:
            continue

        parts = entry.split()
        if len(parts) != 2:
            raise ValueError(f"Route alias must look like 'METHOD /path', got {entry!r}")

        method, path = parts[0].upper(), parts[1]
        if method not in SUPPORTED_METHODS:
            raise ValueError(f"Unsupported method {method!r} in route alias {entry!r}")
        if not path.startswith("/"):
            path = "/" + path

        alias = RouteAlias(method=method, path=path)
        if alias not in aliases:
            aliases.append(alias)

    if not aliases:
        raise ValueError("At least one route alias is required")
    return aliases

async def fetch_remote_data(fetcher: BaseFetcher = Depends(get_fetcher)):
    """
    Fetch the target base address and return its body verbatim.

    Transport errors are not handled here and surface as 500. Upstream error
    statuses are answered with 200 unless PROPAGATE_UPSTREAM_STATUS is set.
    """
    if settings.PROPAGATE_UPSTREAM_STATUS:
        result = await fetcher.fetch()
        return PlainTextResponse(result.text, status_code=result.status_code)

    return PlainTextResponse(await fetcher.get_data())

def build_target_router(prefix: str, aliases: List[RouteAlias]) -> APIRouter:
    """Map the single fetch handler onto every alias."""
    target = APIRouter(prefix=normalize_prefix(prefix), tags=["target"])
    for alias in aliases:
        target.add_api_route(
            alias.path,
            fetch_remote_data,
            methods=[alias.method],
            name="FetchRemoteData",
            response_class=PlainTextResponse,
        )
        logger.debug("Registered %s %s%s", alias.method, target.prefix, alias.path)
    return target

@router.get("/health", response_model=HealthResponse)
async def health_check():
    """Health check endpoint"""
    return HealthResponse(status="healthy", service=SERVICE_NAME)
