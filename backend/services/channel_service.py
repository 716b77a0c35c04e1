"""Channel age lookup: resolve -> cache -> fetch -> normalize -> cache.

The cache is keyed by the resolved channel ID, so ``@MrBeast`` and its
``UC...`` ID share one entry. Canonical-ID and ``/channel/`` URL inputs
resolve offline, so for them the cache is consulted before any network call.
Cache hits are served verbatim, derived fields included.

Concurrent misses for the same channel may both fetch; the last write wins.
"""

import logging

from errors import ChannelNotFoundError, InvalidChannelInputError, UpstreamError
from models import DEFAULT_CHANNEL_NAME, DEFAULT_COUNTRY, DEFAULT_PROFILE_IMAGE_URL, ChannelSnapshot
from services.age import compute_age, parse_timestamp
from services.cache import ResponseCache
from services.resolver import ChannelResolver
from services.youtube import ChannelDirectory

logger = logging.getLogger(__name__)

VERIFIED_SUBSCRIBER_THRESHOLD = 100_000


def build_snapshot(item: dict) -> ChannelSnapshot:
    """Normalize a ``channels.list`` item. Raises ValueError/KeyError on a malformed item."""
    snippet = item.get("snippet") or {}
    statistics = item.get("statistics") or {}

    creation_date = snippet["publishedAt"]
    age = compute_age(parse_timestamp(creation_date))
    subscribers = int(statistics.get("subscriberCount") or 0)
    thumbnail = (snippet.get("thumbnails") or {}).get("default") or {}

    return ChannelSnapshot(
        channel_id=item["id"],
        channel_name=snippet.get("title") or DEFAULT_CHANNEL_NAME,
        profile_image_url=thumbnail.get("url") or DEFAULT_PROFILE_IMAGE_URL,
        creation_date=creation_date,
        account_age=age.human_readable,
        age_days=age.days,
        country=snippet.get("country") or DEFAULT_COUNTRY,
        verification_status="Verified" if subscribers >= VERIFIED_SUBSCRIBER_THRESHOLD else "Not Verified",
        subscribers=subscribers,
        description=snippet.get("description") or "",
    )


class ChannelService:
    def __init__(self, directory: ChannelDirectory, cache: ResponseCache, resolver: ChannelResolver | None = None):
        self._directory = directory
        self._cache = cache
        self._resolver = resolver or ChannelResolver(directory)

    async def get_channel_age(self, channel_input: str | None) -> dict:
        """Return the response payload for ``channel_input``.

        Raises:
            InvalidChannelInputError: empty or unresolvable input (400).
            ChannelNotFoundError: YouTube has no channel for the resolved ID (404).
            UpstreamError: YouTube answered non-2xx (status forwarded) or the
                call/body failed (500).
        """
        if not channel_input or not channel_input.strip():
            logger.error("Invalid channel input: %r", channel_input)
            raise InvalidChannelInputError("Channel URL or ID is required")

        channel_id = await self._resolver.resolve(channel_input)
        if not channel_id:
            logger.error("Invalid channel input: %r", channel_input)
            raise InvalidChannelInputError()

        entry = self._cache.get(channel_id)
        if entry is not None:
            logger.info("Cache hit for channel ID: %s", channel_id)
            return {**entry.snapshot.to_dict(), "is_cached": True}

        try:
            item = await self._directory.get_channel(channel_id)
        except UpstreamError as e:
            logger.error("Error fetching channel for ID %s: %s (HTTP %d)", channel_id, e, e.status_code)
            raise
        if item is None:
            logger.error("No channel found for ID: %s (input %r)", channel_id, channel_input)
            raise ChannelNotFoundError()

        try:
            snapshot = build_snapshot(item)
        except (KeyError, TypeError, ValueError) as e:
            logger.error("Malformed channel data for ID %s: %s", channel_id, e)
            raise UpstreamError() from e

        self._cache.put(channel_id, snapshot)
        logger.info("Successfully fetched data for channel ID: %s", channel_id)
        return {**snapshot.to_dict(), "is_cached": False}
