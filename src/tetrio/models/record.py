"""
Models for records: a user's personal records, the records leaderboards and
the reverse record lookup. Summaries embed the same ``Record`` shape.
"""
from typing import Any, Dict, List, Optional, Union

from pydantic import Field

from ..api.params.record import Gamemode
from ..api.params.record_leaderboard import RecordsLeaderboardId
from .common import Prisecter, TetrioModel, UserLookup, country_flag_url, to_unix_ts
from .rank import Rank


class PartialUser(TetrioModel, UserLookup):
    id: str
    username: str
    avatar_revision: Optional[int] = None
    banner_revision: Optional[int] = None
    country: Optional[str] = None
    is_supporter: bool = Field(default=False, alias="supporter")

    @property
    def national_flag_url(self) -> Optional[str]:
        return country_flag_url(self.country)


class SinglePlayerResults(TetrioModel):
    final_stats: Dict[str, Any] = Field(alias="stats")
    aggregate_stats: Dict[str, Any] = Field(alias="aggregatestats")
    game_over_reason: str = Field(alias="gameoverreason")


class PlayerStats(TetrioModel, UserLookup):
    id: str
    username: str
    is_active: bool = Field(alias="active")
    wins: int
    stats: Dict[str, Any]


class PlayerStatsRound(TetrioModel, UserLookup):
    id: str
    username: str
    is_active: bool = Field(alias="active")
    is_alive: bool = Field(alias="alive")
    lifetime: int
    stats: Dict[str, Any]


class MultiPlayerResults(TetrioModel):
    leaderboard: List[PlayerStats]
    rounds: List[List[PlayerStatsRound]]


class PlayerExtraStats(TetrioModel):
    glicko: float
    rd: float
    tr: float
    rank: Rank
    placement: Optional[int] = None


class ZenithExtras(TetrioModel):
    mods: List[str] = Field(default_factory=list)


class Extras(TetrioModel):
    league: Optional[Dict[str, List[PlayerExtraStats]]] = None
    result: Optional[str] = None
    zenith: Optional[ZenithExtras] = None


Results = Union[SinglePlayerResults, MultiPlayerResults, Dict[str, Any]]


class Record(TetrioModel):
    """
    A single game record.

    ``results`` is ``SinglePlayerResults``, ``MultiPlayerResults``, or the
    raw dict when the shape is neither.
    """

    id: str = Field(alias="_id")
    replay_id: str = Field(alias="replayid")
    is_stub: bool = Field(alias="stub")
    game_mode: str = Field(alias="gamemode")
    is_personal_best: bool = Field(alias="pb")
    has_been_personal_best: bool = Field(alias="oncepb")
    submitted_at: str = Field(alias="ts")
    revolution: Optional[str] = None
    user: Optional[PartialUser] = None
    other_users: List[PartialUser] = Field(default_factory=list, alias="otherusers")
    leaderboards: List[str] = Field(default_factory=list)
    is_disputed: bool = Field(default=False, alias="disputed")
    results: Results = Field(union_mode="left_to_right")
    extras: Extras = Field(default_factory=Extras)
    prisecter: Optional[Prisecter] = Field(default=None, alias="p")

    @property
    def replay_url(self) -> str:
        return f"https://tetr.io/#R:{self.replay_id}"

    @property
    def submitted_at_unix(self) -> int:
        return to_unix_ts(self.submitted_at)

    @property
    def record_gamemode(self) -> Gamemode:
        """The game mode as a request parameter. Raises ValueError if unknown."""
        return Gamemode(self.game_mode)

    @property
    def is_single_play(self) -> bool:
        return isinstance(self.results, SinglePlayerResults)

    @property
    def is_multi_play(self) -> bool:
        return isinstance(self.results, MultiPlayerResults)

    def leaderboard_ids(self, revolution_id: Optional[str] = None) -> List[RecordsLeaderboardId]:
        return [RecordsLeaderboardId.parse(name, revolution_id) for name in self.leaderboards]


class RecordList(TetrioModel):
    entries: List[Record]
