"""Turn user input (channel ID, profile URL, or handle) into a canonical channel ID.

Input forms are tried in a fixed order and the first match wins:

1. ``UCxxxxxxxxxxxxxxxxxxxxxx``                 -> returned as is
2. ``https://www.youtube.com/channel/UC...``    -> embedded ID
3. ``https://www.youtube.com/@name`` or ``/c/name``  -> handle lookup
4. ``@name``                                    -> handle lookup
5. ``name`` (single token, no slash/space)      -> handle lookup

Only the handle forms touch the network, with exactly one ``forHandle``
lookup per resolution.
"""

import logging
import re
from dataclasses import dataclass
from typing import Literal
from urllib.parse import unquote

from errors import UpstreamError
from services.youtube import ChannelDirectory

logger = logging.getLogger(__name__)

CHANNEL_ID_PATTERN = r"UC[0-9A-Za-z_-]{22}"

_MALFORMED_ESCAPE = re.compile(r"%(?![0-9A-Fa-f]{2})")


@dataclass(frozen=True)
class ParsedIdentifier:
    kind: Literal["channel_id", "handle"]
    value: str


@dataclass(frozen=True)
class _Matcher:
    name: str
    pattern: re.Pattern
    kind: Literal["channel_id", "handle"]


# Evaluated top to bottom; order matters (e.g. a bare channel ID would also
# satisfy the loose-token matcher).
MATCHERS: list[_Matcher] = [
    _Matcher("channel_id", re.compile(rf"^({CHANNEL_ID_PATTERN})$"), "channel_id"),
    _Matcher(
        "channel_url",
        re.compile(rf"(?i:/channel/)({CHANNEL_ID_PATTERN})(?![0-9A-Za-z_-])"),
        "channel_id",
    ),
    _Matcher("handle_url", re.compile(r"youtube\.com/(?:c/|@)([^\s/?#]+)", re.IGNORECASE), "handle"),
    _Matcher("at_handle", re.compile(r"^@([^\s/?#]+)$"), "handle"),
    _Matcher("bare_token", re.compile(r"^([^\s/?#@:]+)$"), "handle"),
]


def percent_decode(raw: str) -> str | None:
    """Strictly decode %XX escapes. None on a malformed escape or invalid UTF-8."""
    if _MALFORMED_ESCAPE.search(raw):
        return None
    try:
        return unquote(raw, errors="strict")
    except UnicodeDecodeError:
        return None


def parse_identifier(raw: str) -> ParsedIdentifier | None:
    """Classify input without any network call. None if no form matches."""
    decoded = percent_decode(raw)
    if decoded is None:
        return None
    text = decoded.strip()
    if not text:
        return None

    for matcher in MATCHERS:
        match = matcher.pattern.search(text)
        if match:
            value = match.group(1)
            if matcher.kind == "handle":
                value = value.lstrip("@")
                if not value:
                    continue
            return ParsedIdentifier(kind=matcher.kind, value=value)
    return None


class ChannelResolver:
    def __init__(self, directory: ChannelDirectory):
        self._directory = directory

    async def resolve(self, raw: str) -> str | None:
        """Return the canonical channel ID for ``raw``, or None if it cannot be resolved.

        An unknown handle and a failed lookup both come back as None.
        """
        parsed = parse_identifier(raw)
        if parsed is None:
            return None
        if parsed.kind == "channel_id":
            return parsed.value

        try:
            ids = await self._directory.find_channel_ids_by_handle(parsed.value)
        except UpstreamError as e:
            logger.error("Error resolving handle %s: %s", parsed.value, e)
            return None

        if not ids:
            logger.info("No channel found for handle %s", parsed.value)
            return None
        return ids[0]
