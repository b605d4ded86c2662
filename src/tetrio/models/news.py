"""Models for the news endpoints (``news/`` and ``news/{stream}``)."""
from typing import Any, ClassVar, Dict, List, Union

from pydantic import Field, model_validator

from ..api.params.record import Gamemode
from .common import TetrioModel, UserLookup, to_unix_ts
from .rank import Rank


class _UsernameNews(TetrioModel, UserLookup):
    username: str

    user_key_field: ClassVar[str] = "username"


class LeaderboardNews(_UsernameNews):
    """A user placed on a global leaderboard."""

    gametype: str
    rank: int
    result: float
    replay_id: str = Field(alias="replayid")

    @property
    def record_gamemode(self) -> Gamemode:
        return Gamemode(self.gametype)

    @property
    def replay_url(self) -> str:
        return f"https://tetr.io/#R:{self.replay_id}"


class PersonalBestNews(_UsernameNews):
    gametype: str
    result: float
    replay_id: str = Field(alias="replayid")

    @property
    def record_gamemode(self) -> Gamemode:
        return Gamemode(self.gametype)

    @property
    def replay_url(self) -> str:
        return f"https://tetr.io/#R:{self.replay_id}"


class BadgeNews(_UsernameNews):
    badge_id: str = Field(alias="type")
    label: str

    @property
    def badge_icon_url(self) -> str:
        return f"https://tetr.io/res/badges/{self.badge_id}.png"


class RankUpNews(_UsernameNews):
    rank: Rank


class SupporterNews(_UsernameNews):
    pass


class SupporterGiftNews(_UsernameNews):
    pass


_NEWS_DATA_TYPES = {
    "leaderboard": LeaderboardNews,
    "personalbest": PersonalBestNews,
    "badge": BadgeNews,
    "rankup": RankUpNews,
    "supporter": SupporterNews,
    "supporter_gift": SupporterGiftNews,
}

NewsData = Union[
    Dict[str, Any],
    LeaderboardNews,
    PersonalBestNews,
    BadgeNews,
    RankUpNews,
    SupporterNews,
    SupporterGiftNews,
]


class News(TetrioModel):
    """
    A news item. ``data`` is parsed according to ``type``; unknown news
    types keep their raw dict.
    """

    id: str = Field(alias="_id")
    stream: str
    type: str
    data: NewsData = Field(union_mode="left_to_right")
    created_at: str = Field(alias="ts")

    @model_validator(mode="before")
    @classmethod
    def _parse_data_by_type(cls, value: Any) -> Any:
        if not isinstance(value, dict):
            return value
        model = _NEWS_DATA_TYPES.get(value.get("type"))
        data = value.get("data")
        if model is not None and isinstance(data, dict):
            return {**value, "data": model.model_validate(data)}
        return value

    @property
    def created_at_unix(self) -> int:
        return to_unix_ts(self.created_at)

    @property
    def is_global_stream(self) -> bool:
        return self.stream == "global"

    @property
    def is_user_stream(self) -> bool:
        return self.stream.startswith("user_")

    @property
    def is_known_type(self) -> bool:
        return not isinstance(self.data, dict)


class NewsItems(TetrioModel):
    news: List[News]
