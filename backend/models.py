"""Request and response shapes for the channel age API."""

from dataclasses import asdict, dataclass

from pydantic import BaseModel

DEFAULT_CHANNEL_NAME = "N/A"
DEFAULT_PROFILE_IMAGE_URL = "https://via.placeholder.com/50"
DEFAULT_COUNTRY = "N/A"
ACCURACY_LABEL = "Exact"


class ChannelRequest(BaseModel):
    channel: str | None = None


@dataclass(frozen=True)
class ChannelAge:
    human_readable: str
    days: int


@dataclass(frozen=True)
class ChannelSnapshot:
    """Point-in-time view of a channel as returned to clients.

    Built once per upstream fetch; a cache refresh builds a new one.
    """

    channel_id: str
    channel_name: str
    profile_image_url: str
    creation_date: str
    account_age: str
    age_days: int
    country: str
    verification_status: str
    subscribers: int
    description: str = ""
    accuracy: str = ACCURACY_LABEL

    def to_dict(self) -> dict:
        return asdict(self)
