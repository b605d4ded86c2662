"""Models for the user summaries (``users/{user}/summaries/...``)."""
from typing import Dict, List, Optional, Union

from pydantic import ConfigDict, Field

from .achievement import Achievement
from .common import TetrioModel, country_flag_url
from .rank import Rank
from .record import Record


class FortyLines(TetrioModel):
    """40 LINES summary. ``rank`` / ``rank_local`` are -1 when not ranked."""

    record: Optional[Record] = None
    rank: int
    rank_local: int


class Blitz(TetrioModel):
    record: Optional[Record] = None
    rank: int
    rank_local: int


class ZenithBest(TetrioModel):
    record: Optional[Record] = None
    rank: int


class Zenith(TetrioModel):
    """QUICK PLAY (or EXPERT QUICK PLAY) summary for the current week."""

    record: Optional[Record] = None
    rank: int
    rank_local: int
    best: ZenithBest


class Zen(TetrioModel):
    level: int
    score: float


class PastUser(TetrioModel):
    season: str
    username: str
    country: Optional[str] = None
    placement: Optional[int] = None
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

    @property
    def national_flag_url(self) -> Optional[str]:
        return country_flag_url(self.country)


class LeagueData(TetrioModel):
    """TETRA LEAGUE summary: current standing plus past seasons."""

    games_played: int = Field(alias="gamesplayed")
    games_won: int = Field(alias="gameswon")
    glicko: float
    rd: Optional[float] = None
    is_decaying: bool = Field(alias="decaying")
    tr: float
    gxe: float
    rank: Rank
    best_rank: Optional[Rank] = Field(default=None, alias="bestrank")
    apm: Optional[float] = None
    pps: Optional[float] = None
    vs: Optional[float] = None
    standing: Optional[int] = None
    standing_local: Optional[int] = None
    percentile: Optional[float] = None
    percentile_rank: Optional[Rank] = None
    next_rank: Optional[Rank] = None
    prev_rank: Optional[Rank] = None
    next_at: Optional[int] = None
    prev_at: Optional[int] = None
    past: Dict[str, PastUser] = Field(default_factory=dict)

    @property
    def rank_progress(self) -> Optional[float]:
        """
        Progress from the previous rank towards the next one, in percent.

        None when the user has no global standing or sits at the top/bottom.
        """
        if self.standing is None or self.prev_at is None or self.next_at is None:
            return None
        if self.prev_at < 0 or self.next_at < 0 or self.next_at == self.prev_at:
            return None
        return (self.standing - self.prev_at) / (self.next_at - self.prev_at) * 100


class EmptyLeagueData(TetrioModel):
    """Sent as ``{}`` for users who never touched TETRA LEAGUE."""

    model_config = ConfigDict(frozen=True, extra="forbid")


LeagueSummary = Union[LeagueData, EmptyLeagueData]


class AllSummaries(TetrioModel):
    forty_lines: FortyLines = Field(alias="40l")
    blitz: Blitz
    zenith: Zenith
    zenith_ex: Zenith = Field(alias="zenithex")
    league: LeagueSummary
    zen: Zen
    achievements: List[Achievement] = Field(default_factory=list)
