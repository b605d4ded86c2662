from dataclasses import dataclass
from enum import Enum


class SocialProvider(str, Enum):
    DISCORD = "discord"
    TWITCH = "twitch"
    TWITTER = "twitter"
    REDDIT = "reddit"
    YOUTUBE = "youtube"
    STEAM = "steam"


@dataclass(frozen=True)
class SocialConnection:
    """An account on another platform that a TETR.IO user has linked."""

    provider: SocialProvider
    id: str

    @classmethod
    def discord(cls, user_id: str) -> "SocialConnection":
        return cls(SocialProvider.DISCORD, user_id)

    def to_param(self) -> str:
        return f"{SocialProvider(self.provider).value}:{self.id}"
