"""YouTube channel age routes.

POST /api/youtube-age                  body: {"channel": "<id | url | handle>"}
GET  /api/youtube-age/{channel_input}  input in the path, percent-decoded once
"""

from urllib.parse import quote

from fastapi import APIRouter, Request

from models import ChannelRequest
from services.channel_service import ChannelService

router = APIRouter(prefix="/api/youtube-age")


def _service(request: Request) -> ChannelService:
    return request.app.state.channel_service


@router.post("")
async def channel_age(body: ChannelRequest, request: Request) -> dict:
    """Channel age for the identifier in the JSON body."""
    return await _service(request).get_channel_age(body.channel)


@router.get("/{channel_input:path}")
async def channel_age_from_path(channel_input: str, request: Request) -> dict:
    """Channel age for the identifier in the path. Accepts full profile URLs.

    The identifier is taken still percent-encoded so it is decoded exactly once,
    by the resolver.
    """
    return await _service(request).get_channel_age(_encoded_path_input(request, channel_input))


def _encoded_path_input(request: Request, channel_input: str) -> str:
    raw_path = request.scope.get("raw_path")
    if raw_path:
        _, found, tail = raw_path.decode("latin-1").partition(f"{router.prefix}/")
        if found:
            return tail
    # Server gave no raw path: re-encode the decoded value so one decode restores it.
    return quote(channel_input, safe="")
