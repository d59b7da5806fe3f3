import logging
from typing import Optional

import httpx

from app.core.config import settings
from .base import BaseFetcher, FetchResult

logger = logging.getLogger(__name__)

def build_client(
    base_url: Optional[str] = None,
    transport: Optional[httpx.AsyncBaseTransport] = None,
    timeout: Optional[float] = None,
) -> httpx.AsyncClient:
    """
    Build the shared outbound client bound to the target base address.

    `transport` replaces the network transport, which is how tests plug in
    an `httpx.MockTransport`.
    """
    base_url = base_url or settings.TARGET_BASE_URL
    if not base_url.startswith(("http://", "https://")):
        raise ValueError(f"Base address must start with http:// or https://, got {base_url!r}")

    return httpx.AsyncClient(
        base_url=base_url,
        transport=transport,
        timeout=settings.REQUEST_TIMEOUT if timeout is None else timeout,
        headers={"User-Agent": settings.USER_AGENT},
        follow_redirects=True,
    )

class HttpxFetcher(BaseFetcher):
    def __init__(self, client: httpx.AsyncClient):
        self._client = client

    @property
    def base_url(self) -> str:
        return str(self._client.base_url)

    async def fetch(self) -> FetchResult:
        # Empty relative path: the base address itself. Upstream error
        # statuses are returned as ordinary results, transport errors propagate.
        try:
            resp = await self._client.get("")
        except httpx.TransportError as e:
            logger.warning("GET %s failed: %s: %s", self.base_url, type(e).__name__, e)
            raise

        text = resp.text
        logger.info("GET %s -> %s (%d chars)", resp.url, resp.status_code, len(text))
        if resp.is_error:
            logger.debug("Upstream error status %s passed through as data", resp.status_code)

        return FetchResult(
            url=str(resp.url),
            status_code=resp.status_code,
            reason_phrase=resp.reason_phrase or None,
            text=text,
        )
