import dataclasses
from dataclasses import dataclass
from enum import Enum
from typing import List, Optional, Tuple

from .pagination import PaginatedCriteria


class LeaderboardType(str, Enum):
    """Which user leaderboard to read (``users/by/{kind}``)."""

    LEAGUE = "league"
    XP = "xp"
    AR = "ar"

    def to_param(self) -> str:
        return self.value


@dataclass
class SearchCriteria(PaginatedCriteria):
    """
    Search criteria for the user leaderboards, current and historical.

    ``limit(0)`` is accepted here and asks for the full export of the
    leaderboard instead of a page.
    """

    country_code: Optional[str] = None

    min_limit = 0

    def country(self, country: str) -> "SearchCriteria":
        """Filter by ISO 3166-1 country code (case does not matter)."""
        return dataclasses.replace(self, country_code=country)

    def _filters(self) -> List[Tuple[str, str]]:
        if self.country_code is None:
            return []
        return [("country", self.country_code.upper())]
