from dataclasses import dataclass
from typing import Optional

@dataclass
class FetchResult:
    url: str
    status_code: int
    reason_phrase: Optional[str]
    text: str

class BaseFetcher:
    """Outbound transport capability used by the public routes."""

    async def fetch(self) -> FetchResult:
        raise NotImplementedError

    async def get_data(self) -> str:
        """Return the upstream body as text, whatever the upstream status."""
        result = await self.fetch()
        return result.text
