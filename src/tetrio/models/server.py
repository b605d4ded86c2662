"""Models for ``general/stats`` and ``general/activity``."""
from typing import List, Optional

from pydantic import Field

from .common import TetrioModel


class ServerStats(TetrioModel):
    user_count: int = Field(alias="usercount")
    user_count_delta: float = Field(alias="usercount_delta")
    anon_count: int = Field(alias="anoncount")
    total_accounts: int = Field(alias="totalaccounts")
    ranked_count: int = Field(alias="rankedcount")
    record_count: int = Field(alias="recordcount")
    games_play_count: int = Field(alias="gamesplayed")
    games_play_count_delta: float = Field(alias="gamesplayed_delta")
    games_finish_count: int = Field(alias="gamesfinished")
    play_time: float = Field(alias="gametime")
    inputs: int
    pieces_place_count: int = Field(alias="piecesplaced")

    @property
    def registered_players(self) -> int:
        return self.user_count - self.anon_count

    @property
    def play_time_minutes(self) -> float:
        return self.play_time / 60

    @property
    def play_time_hours(self) -> float:
        return self.play_time / 3600

    @property
    def play_time_days(self) -> float:
        return self.play_time / 86400

    @property
    def play_time_months(self) -> float:
        return self.play_time / 2628000

    @property
    def play_time_years(self) -> float:
        return self.play_time / 31536000

    @property
    def avg_pieces_per_second(self) -> float:
        if not self.play_time:
            return 0.0
        return self.pieces_place_count / self.play_time

    @property
    def avg_keys_per_second(self) -> float:
        if not self.play_time:
            return 0.0
        return self.inputs / self.play_time


class ServerActivity(TetrioModel):
    """Online player counts over the last two days, oldest first."""

    activity: List[int]

    @property
    def peak(self) -> Optional[int]:
        return max(self.activity, default=None)

    @property
    def peak_index(self) -> Optional[int]:
        if not self.activity:
            return None
        return self.activity.index(max(self.activity))

    @property
    def trough(self) -> Optional[int]:
        return min(self.activity, default=None)

    @property
    def trough_index(self) -> Optional[int]:
        if not self.activity:
            return None
        return self.activity.index(min(self.activity))

    @property
    def average(self) -> Optional[float]:
        if not self.activity:
            return None
        return sum(self.activity) / len(self.activity)
