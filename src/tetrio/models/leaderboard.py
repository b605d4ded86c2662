"""Models for the user leaderboards, current (``users/by``) and historical."""
from typing import List, Optional

from pydantic import Field

from .common import Prisecter, TetrioModel, UserLookup, country_flag_url, to_unix_ts
from .rank import Rank
from .role import Role, RoleMixin
from .user import AchievementRatingCounts, xp_to_level


class PartialLeagueData(TetrioModel):
    games_played: int = Field(alias="gamesplayed")
    games_won: int = Field(alias="gameswon")
    tr: float
    gxe: float
    rank: Rank
    best_rank: Optional[Rank] = Field(default=None, alias="bestrank")
    glicko: float
    rd: Optional[float] = None
    apm: Optional[float] = None
    pps: Optional[float] = None
    vs: Optional[float] = None
    is_decaying: bool = Field(alias="decaying")


class LeaderboardUser(TetrioModel, RoleMixin, UserLookup):
    id: str = Field(alias="_id")
    username: str
    role: Role
    created_at: Optional[str] = Field(default=None, alias="ts")
    xp: float
    country: Optional[str] = None
    is_supporter: bool = Field(default=False, alias="supporter")
    league: PartialLeagueData
    online_games_played: int = Field(alias="gamesplayed")
    online_games_won: int = Field(alias="gameswon")
    game_time: float = Field(alias="gametime")
    achievement_rating: int = Field(alias="ar")
    achievement_rating_counts: AchievementRatingCounts = Field(alias="ar_counts")
    prisecter: Prisecter = Field(alias="p")

    @property
    def level(self) -> int:
        return xp_to_level(self.xp)

    @property
    def profile_url(self) -> str:
        return f"https://ch.tetr.io/u/{self.username}"

    @property
    def national_flag_url(self) -> Optional[str]:
        return country_flag_url(self.country)

    @property
    def created_at_unix(self) -> Optional[int]:
        return to_unix_ts(self.created_at) if self.created_at else None


class Leaderboard(TetrioModel):
    entries: List[LeaderboardUser]


class PastUserWithPrisecter(TetrioModel, UserLookup):
    """A user's final placement in a past season."""

    id: str = Field(alias="_id")
    season: str
    username: str
    country: Optional[str] = None
    placement: int
    is_ranked: bool = Field(alias="ranked")
    games_played: int = Field(alias="gamesplayed")
    games_won: int = Field(alias="gameswon")
    glicko: float
    rd: float
    tr: float
    gxe: float
    rank: Rank
    best_rank: Optional[Rank] = Field(default=None, alias="bestrank")
    apm: float
    pps: float
    vs: float
    prisecter: Prisecter = Field(alias="p")

    @property
    def national_flag_url(self) -> Optional[str]:
        return country_flag_url(self.country)


class HistoricalLeaderboard(TetrioModel):
    entries: List[PastUserWithPrisecter]
