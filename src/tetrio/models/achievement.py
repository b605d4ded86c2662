"""Models for achievements and the "Achievement Info" endpoint."""
from typing import List, Optional

from pydantic import Field

from .common import TetrioModel, UserLookup, country_flag_url
from .role import Role, RoleMixin


class Achievement(TetrioModel):
    """
    An achievement definition, plus the user's progress when it comes from
    a user's achievement summary.
    """

    id: int = Field(alias="k")
    category: str
    name: str
    object: str
    desc: str
    order: Optional[int] = Field(default=None, alias="o")
    rank_type: int = Field(alias="rt")
    value_type: int = Field(alias="vt")
    ar_type: int = Field(alias="art")
    min: int
    deci: int
    is_hidden: bool = Field(alias="hidden")
    value: Optional[float] = Field(default=None, alias="v")
    additional: Optional[float] = Field(default=None, alias="a")
    time: Optional[str] = Field(default=None, alias="t")
    position: Optional[int] = Field(default=None, alias="pos")
    total: Optional[int] = None
    rank: Optional[int] = None


class AchievementUser(TetrioModel, RoleMixin, UserLookup):
    id: str = Field(alias="_id")
    username: str
    role: Role
    is_supporter: bool = Field(default=False, alias="supporter")
    country: Optional[str] = None

    @property
    def national_flag_url(self) -> Optional[str]:
        return country_flag_url(self.country)


class AchievementLeaderboardUser(TetrioModel):
    user: AchievementUser = Field(alias="u")
    value: float = Field(alias="v")
    additional_value: Optional[float] = Field(default=None, alias="a")
    last_updated_at: str = Field(alias="t")


class Cutoffs(TetrioModel):
    """Scores needed for each tier; ``None`` when the tier is not reached."""

    total: int
    diamond: Optional[float] = None
    platinum: Optional[float] = None
    gold: Optional[float] = None
    silver: Optional[float] = None
    bronze: Optional[float] = None


class AchievementInfo(TetrioModel):
    achievement: Achievement
    leaderboard: List[AchievementLeaderboardUser]
    cutoffs: Cutoffs
