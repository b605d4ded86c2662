"""Models for the "User Info" endpoint (``users/{user}``)."""
import math
from typing import Any, List, Optional

from pydantic import Field, field_validator

from .common import TetrioModel, country_flag_url, to_unix_ts
from .role import Role, RoleMixin

DEFAULT_AVATAR_URL = "https://tetr.io/res/avatar.png"


def xp_to_level(xp: float) -> int:
    # (xp/500)^0.6 + (xp / (5000 + max(0, xp-4000000) / 5000)) + 1
    return math.floor(
        (xp / 500) ** 0.6 + (xp / (5000 + max(0.0, xp - 4000000) / 5000)) + 1
    )


class Badge(TetrioModel):
    id: str
    group: Optional[str] = None
    label: str
    desc: Optional[str] = None
    received_at: Optional[str] = Field(default=None, alias="ts")

    @field_validator("received_at", mode="before")
    @classmethod
    def _non_string_to_none(cls, value: Any) -> Any:
        # older badges have `ts: false`
        return value if isinstance(value, str) else None

    @property
    def icon_url(self) -> str:
        return f"https://tetr.io/res/badges/{self.id}.png"

    @property
    def received_at_unix(self) -> Optional[int]:
        return to_unix_ts(self.received_at) if self.received_at else None


class Connection(TetrioModel):
    id: str
    username: str
    display_username: str


class Connections(TetrioModel):
    discord: Optional[Connection] = None
    twitch: Optional[Connection] = None
    twitter: Optional[Connection] = None
    reddit: Optional[Connection] = None
    youtube: Optional[Connection] = None
    steam: Optional[Connection] = None


class Distinguishment(TetrioModel):
    type: str
    detail: Optional[str] = None
    header: Optional[str] = None
    footer: Optional[str] = None


class AchievementRatingCounts(TetrioModel):
    """How many achievements of each tier make up a user's AR."""

    bronze: Optional[int] = Field(default=None, alias="1")
    silver: Optional[int] = Field(default=None, alias="2")
    gold: Optional[int] = Field(default=None, alias="3")
    platinum: Optional[int] = Field(default=None, alias="4")
    diamond: Optional[int] = Field(default=None, alias="5")
    issued: Optional[int] = Field(default=None, alias="100")
    top100: Optional[int] = Field(default=None, alias="t100")
    top50: Optional[int] = Field(default=None, alias="t50")
    top25: Optional[int] = Field(default=None, alias="t25")
    top10: Optional[int] = Field(default=None, alias="t10")
    top5: Optional[int] = Field(default=None, alias="t5")
    top3: Optional[int] = Field(default=None, alias="t3")


class User(TetrioModel, RoleMixin):
    """
    A user profile.

    Statistics the user chose to hide (``play_count``, ``won_count``,
    ``play_time``) are reported as -1.
    """

    id: str = Field(alias="_id")
    username: str
    role: Role
    created_at: Optional[str] = Field(default=None, alias="ts")
    bot_master: Optional[str] = Field(default=None, alias="botmaster")
    badges: List[Badge] = Field(default_factory=list)
    xp: float
    play_count: int = Field(alias="gamesplayed")
    won_count: int = Field(alias="gameswon")
    play_time: float = Field(alias="gametime")
    country: Optional[str] = None
    is_badstanding: bool = Field(default=False, alias="badstanding")
    is_supporter: bool = Field(default=False, alias="supporter")
    supporter_tier: int = 0
    avatar_revision: Optional[int] = None
    banner_revision: Optional[int] = None
    bio: Optional[str] = None
    connections: Connections = Field(default_factory=Connections)
    friend_count: Optional[int] = None
    distinguishment: Optional[Distinguishment] = None
    achievements: List[int] = Field(default_factory=list)
    achievement_rating: int = Field(default=0, alias="ar")
    achievement_rating_counts: AchievementRatingCounts = Field(
        default_factory=AchievementRatingCounts, alias="ar_counts"
    )

    @property
    def level(self) -> int:
        return xp_to_level(self.xp)

    @property
    def profile_url(self) -> str:
        return f"https://ch.tetr.io/u/{self.username}"

    @property
    def avatar_url(self) -> str:
        if not self.avatar_revision:
            return DEFAULT_AVATAR_URL
        return (
            f"https://tetr.io/user-content/avatars/{self.id}.jpg"
            f"?rv={self.avatar_revision}"
        )

    @property
    def banner_url(self) -> Optional[str]:
        if not self.banner_revision:
            return None
        return (
            f"https://tetr.io/user-content/banners/{self.id}.jpg"
            f"?rv={self.banner_revision}"
        )

    @property
    def national_flag_url(self) -> Optional[str]:
        return country_flag_url(self.country)

    @property
    def has_badge(self) -> bool:
        return bool(self.badges)

    @property
    def badge_count(self) -> int:
        return len(self.badges)

    @property
    def created_at_unix(self) -> Optional[int]:
        return to_unix_ts(self.created_at) if self.created_at else None
