"""Models for the experimental ``labs/`` endpoints."""
from typing import List, Optional, Tuple

from pydantic import Field

from .common import TetrioModel


class LabsScoreflow(TetrioModel):
    """
    Condensed graph of a user's records in one game mode.

    Each point is ``(ms after oldest_record_ts, is personal best, score)``.
    """

    oldest_record_ts: int = Field(alias="startTime")
    points: List[Tuple[int, int, int]]


class LabsLeagueflow(TetrioModel):
    """
    Condensed graph of a user's TETRA LEAGUE matches.

    Each point is ``(ms after oldest_record_ts, result, tr after, opponent tr)``.
    """

    oldest_record_ts: int = Field(alias="startTime")
    points: List[Tuple[int, int, int, int]]


class RankData(TetrioModel):
    position: int = Field(alias="pos")
    percentile: float
    tr: float
    target_tr: float = Field(alias="targettr")
    apm: Optional[float] = None
    pps: Optional[float] = None
    vs: Optional[float] = None
    count: int


class LeagueRanksData(TetrioModel):
    total: int
    rank_x_plus: RankData = Field(alias="x+")
    rank_x: RankData = Field(alias="x")
    rank_u: RankData = Field(alias="u")
    rank_ss: RankData = Field(alias="ss")
    rank_s_plus: RankData = Field(alias="s+")
    rank_s: RankData = Field(alias="s")
    rank_s_minus: RankData = Field(alias="s-")
    rank_a_plus: RankData = Field(alias="a+")
    rank_a: RankData = Field(alias="a")
    rank_a_minus: RankData = Field(alias="a-")
    rank_b_plus: RankData = Field(alias="b+")
    rank_b: RankData = Field(alias="b")
    rank_b_minus: RankData = Field(alias="b-")
    rank_c_plus: RankData = Field(alias="c+")
    rank_c: RankData = Field(alias="c")
    rank_c_minus: RankData = Field(alias="c-")
    rank_d_plus: RankData = Field(alias="d+")
    rank_d: RankData = Field(alias="d")


class LabsLeagueRanks(TetrioModel):
    """TR cutoffs and averages for every rank, as last computed upstream."""

    id: str = Field(alias="_id")
    stream_id: str = Field(alias="s")
    created_at: str = Field(alias="t")
    data: LeagueRanksData
