import pytest
from fastapi.testclient import TestClient

from app import create_app
from config import Settings
from services.cache import ResponseCache
from services.channel_service import ChannelService

MRBEAST_ID = "UCX6OQ3DkcsbYNE6H8uQQuVA"


class FakeDirectory:
    """Records calls and serves canned ``channels.list`` results."""

    def __init__(self, channels: dict | None = None, handles: dict | None = None):
        self.channels = channels or {}
        self.handles = handles or {}
        self.channel_calls: list[str] = []
        self.handle_calls: list[str] = []
        self.channel_error: Exception | None = None
        self.handle_error: Exception | None = None

    async def get_channel(self, channel_id: str) -> dict | None:
        self.channel_calls.append(channel_id)
        if self.channel_error is not None:
            raise self.channel_error
        return self.channels.get(channel_id)

    async def find_channel_ids_by_handle(self, handle: str) -> list[str]:
        self.handle_calls.append(handle)
        if self.handle_error is not None:
            raise self.handle_error
        return self.handles.get(handle, [])


class FakeClock:
    def __init__(self, now: float = 1_700_000_000.0):
        self.now = now

    def __call__(self) -> float:
        return self.now


def make_channel_item(
    channel_id: str = MRBEAST_ID,
    subscribers: str | None = "250000000",
    published_at: str = "2012-02-20T00:43:50Z",
) -> dict:
    statistics = {"viewCount": "1", "videoCount": "800"}
    if subscribers is not None:
        statistics["subscriberCount"] = subscribers
    return {
        "kind": "youtube#channel",
        "id": channel_id,
        "snippet": {
            "title": "MrBeast",
            "description": "SUBSCRIBE FOR A COOKIE!",
            "publishedAt": published_at,
            "thumbnails": {"default": {"url": "https://yt3.ggpht.com/avatar=s88", "width": 88, "height": 88}},
            "country": "US",
        },
        "statistics": statistics,
    }


@pytest.fixture
def clock() -> FakeClock:
    return FakeClock()


@pytest.fixture
def cache(clock: FakeClock) -> ResponseCache:
    return ResponseCache(clock=clock)


@pytest.fixture
def directory() -> FakeDirectory:
    return FakeDirectory(
        channels={MRBEAST_ID: make_channel_item()},
        handles={"MrBeast": [MRBEAST_ID]},
    )


@pytest.fixture
def service(directory: FakeDirectory, cache: ResponseCache) -> ChannelService:
    return ChannelService(directory, cache)


@pytest.fixture
def client(directory: FakeDirectory, cache: ResponseCache) -> TestClient:
    settings = Settings()
    settings.cors_origins = ["https://socialagechecker.com"]
    app = create_app(settings=settings, directory=directory, cache=cache)
    with TestClient(app) as test_client:
        yield test_client
