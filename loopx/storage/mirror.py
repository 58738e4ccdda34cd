"""Remote scoreboard mirror."""

import logging
from typing import Optional, Protocol
from urllib.parse import quote

import httpx
from pydantic import ValidationError

from ..errors import MirrorError
from ..models import MirrorFields, UserScore

logger = logging.getLogger(__name__)


class Mirror(Protocol):
    """Remote scoreboard contract shared by HttpMirror and NullMirror."""

    enabled: bool

    async def create(self, name: str, fields: MirrorFields) -> None: ...

    async def upsert(self, name: str, fields: MirrorFields) -> None: ...

    async def leaderboard(self, limit: int = 10) -> list[UserScore]: ...

    async def close(self) -> None: ...


class NullMirror:
    """Mirror used when the remote scoreboard is disabled. Every call is a no-op."""

    enabled = False

    async def create(self, name: str, fields: MirrorFields) -> None:
        return None

    async def upsert(self, name: str, fields: MirrorFields) -> None:
        return None

    async def leaderboard(self, limit: int = 10) -> list[UserScore]:
        return []

    async def close(self) -> None:
        return None


class HttpMirror:
    """Mirror progress to a JSON scoreboard service.

    Endpoints, relative to ``base_url``:
        PUT   /scores/{name}   create a participant record
        PATCH /scores/{name}   replace the tracked fields of a record
        GET   /scores?limit=N  top scores, highest first
    """

    enabled = True

    def __init__(
        self,
        base_url: str,
        timeout: float = 10.0,
        client: Optional[httpx.AsyncClient] = None,
    ):
        """Initialize the mirror.

        Args:
            base_url: Scoreboard service root URL
            timeout: HTTP timeout in seconds
            client: Pre-built client (tests pass one with a mock transport)
        """
        self.base_url = base_url.rstrip("/")
        self._owns_client = client is None
        self.client = client or httpx.AsyncClient(timeout=timeout)

    def _record_url(self, name: str) -> str:
        return f"{self.base_url}/scores/{quote(name, safe='')}"

    async def create(self, name: str, fields: MirrorFields) -> None:
        """Create (or overwrite) the remote record for a fresh participant."""
        payload = {"name": name, **fields.to_payload()}
        await self._send("PUT", self._record_url(name), json=payload)

    async def upsert(self, name: str, fields: MirrorFields) -> None:
        """Replace the tracked fields of a participant's remote record."""
        await self._send("PATCH", self._record_url(name), json=fields.to_payload())

    async def leaderboard(self, limit: int = 10) -> list[UserScore]:
        """Fetch the top scores.

        Args:
            limit: Maximum number of rows

        Returns:
            Rows sorted by score, highest first
        """
        response = await self._send(
            "GET", f"{self.base_url}/scores", params={"limit": limit}
        )
        try:
            data = response.json()
            rows = data.get("items", []) if isinstance(data, dict) else data
            scores = [UserScore(name=row["name"], score=row.get("score") or 0) for row in rows]
        except (ValueError, KeyError, TypeError, AttributeError, ValidationError) as e:
            raise MirrorError(f"Malformed leaderboard response: {e}") from e

        scores.sort(key=lambda s: s.score, reverse=True)
        return scores[:limit]

    async def _send(self, method: str, url: str, **kwargs) -> httpx.Response:
        try:
            response = await self.client.request(method, url, **kwargs)
        except httpx.HTTPError as e:
            raise MirrorError(f"{method} {url} failed: {e}") from e

        if response.status_code >= 400:
            raise MirrorError(f"{method} {url} returned {response.status_code}")
        return response

    async def close(self) -> None:
        if self._owns_client:
            await self.client.aclose()
