from dataclasses import dataclass
from typing import Optional

from .pagination import PaginatedCriteria


@dataclass(frozen=True)
class Scope:
    """Global scope, or the leaderboard of a single country."""

    country_code: Optional[str] = None

    @classmethod
    def country(cls, code: str) -> "Scope":
        return cls(country_code=code)

    @property
    def is_global(self) -> bool:
        return self.country_code is None

    def to_param(self) -> str:
        if self.country_code is None:
            return "global"
        return f"country_{self.country_code.upper()}"


Scope.GLOBAL = Scope()


@dataclass(frozen=True)
class RecordsLeaderboardId:
    """
    Identifies a records leaderboard, e.g. ``zenith_country_JP@2024w31``.

    Args:
        gamemode: Game mode part, e.g. "40l" or "zenith".
        scope: ``Scope.GLOBAL`` or ``Scope.country("jp")``.
        revolution_id: Optional time-window suffix, e.g. "@2024w31".
    """

    gamemode: str
    scope: Scope = Scope.GLOBAL
    revolution_id: Optional[str] = None

    @classmethod
    def parse(cls, name: str, revolution_id: Optional[str] = None) -> "RecordsLeaderboardId":
        """Build an id from a leaderboard name found in a record, e.g. "blitz_country_JP"."""
        parts = name.split("_")
        if len(parts) == 2 and parts[1] == "global":
            return cls(parts[0], Scope.GLOBAL, revolution_id)
        if len(parts) == 3 and parts[1] == "country":
            return cls(parts[0], Scope.country(parts[2]), revolution_id)
        raise ValueError(f"Not a records leaderboard name: {name!r}")

    def to_param(self) -> str:
        gamemode = getattr(self.gamemode, "value", self.gamemode)
        return f"{gamemode}_{self.scope.to_param()}{self.revolution_id or ''}"


@dataclass
class SearchCriteria(PaginatedCriteria):
    """Search criteria for a records leaderboard."""
