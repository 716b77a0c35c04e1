"""YouTube Data API v3 client for channel metadata and handle lookups.

Only the ``channels`` endpoint is used:
- ``part=snippet,statistics&id=<id>`` for metadata,
- ``part=id&forHandle=<handle>`` to turn a handle into a channel ID.
"""

import logging
from typing import Protocol

import httpx

from errors import UpstreamError

logger = logging.getLogger(__name__)

USER_AGENT = "SocialAgeChecker/1.0"


class ChannelDirectory(Protocol):
    async def get_channel(self, channel_id: str) -> dict | None: ...

    async def find_channel_ids_by_handle(self, handle: str) -> list[str]: ...


class YouTubeClient:
    def __init__(
        self,
        api_key: str | None,
        base_url: str = "https://www.googleapis.com/youtube/v3",
        timeout: float = 10,
        transport: httpx.AsyncBaseTransport | None = None,
    ):
        self._api_key = api_key
        self._base_url = base_url.rstrip("/")
        self._timeout = timeout
        self._transport = transport

    async def _list_channels(self, params: dict) -> list[dict]:
        """Call ``channels.list`` and return its ``items`` (empty when absent)."""
        async with httpx.AsyncClient(
            timeout=self._timeout,
            transport=self._transport,
            headers={"User-Agent": USER_AGENT},
        ) as client:
            try:
                resp = await client.get(
                    f"{self._base_url}/channels",
                    params={**params, "key": self._api_key or ""},
                )
            except httpx.HTTPError as e:
                logger.error("YouTube request failed (%s): %s", type(e).__name__, e)
                raise UpstreamError() from e

        if not resp.is_success:
            logger.error("YouTube API returned HTTP %d", resp.status_code)
            raise UpstreamError("Failed to fetch channel data", status_code=resp.status_code)

        try:
            data = resp.json()
        except ValueError as e:
            logger.error("YouTube API returned an undecodable body: %s", e)
            raise UpstreamError() from e

        items = (data.get("items") if isinstance(data, dict) else None) or []
        if not isinstance(items, list) or not all(isinstance(item, dict) for item in items):
            logger.error("YouTube API returned malformed items: %r", items)
            raise UpstreamError()
        return items

    async def get_channel(self, channel_id: str) -> dict | None:
        """Fetch snippet + statistics for one channel. None if YouTube knows no such ID."""
        items = await self._list_channels({"part": "snippet,statistics", "id": channel_id})
        return items[0] if items else None

    async def find_channel_ids_by_handle(self, handle: str) -> list[str]:
        items = await self._list_channels({"part": "id", "forHandle": handle})
        return [item["id"] for item in items if item.get("id")]
