from dataclasses import dataclass
from enum import Enum

from .pagination import PaginatedCriteria


class Gamemode(str, Enum):
    FORTY_LINES = "40l"
    BLITZ = "blitz"
    ZENITH = "zenith"
    ZENITH_EX = "zenithex"
    LEAGUE = "league"

    def to_param(self) -> str:
        return self.value


class RecordLeaderboardType(str, Enum):
    """Which of a user's personal record lists to read."""

    TOP = "top"
    RECENT = "recent"
    PROGRESSION = "progression"

    def to_param(self) -> str:
        return self.value


@dataclass
class SearchCriteria(PaginatedCriteria):
    """Search criteria for a user's personal records."""
