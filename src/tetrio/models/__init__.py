from .achievement import Achievement, AchievementInfo
from .common import CacheData, CacheStatus, ErrorResponse, Prisecter, Response
from .labs import LabsLeagueflow, LabsLeagueRanks, LabsScoreflow
from .leaderboard import HistoricalLeaderboard, Leaderboard, LeaderboardUser
from .news import News, NewsItems
from .rank import Rank
from .record import Record, RecordList
from .role import Role
from .search import SearchedUser
from .server import ServerActivity, ServerStats
from .summary import AllSummaries, Blitz, EmptyLeagueData, FortyLines, LeagueData, LeagueSummary, Zen, Zenith
from .user import User

__all__ = [
    "Achievement",
    "AchievementInfo",
    "AllSummaries",
    "Blitz",
    "CacheData",
    "CacheStatus",
    "EmptyLeagueData",
    "ErrorResponse",
    "FortyLines",
    "HistoricalLeaderboard",
    "LabsLeagueRanks",
    "LabsLeagueflow",
    "LabsScoreflow",
    "Leaderboard",
    "LeaderboardUser",
    "LeagueData",
    "LeagueSummary",
    "News",
    "NewsItems",
    "Prisecter",
    "Rank",
    "Record",
    "RecordList",
    "Response",
    "Role",
    "SearchedUser",
    "ServerActivity",
    "ServerStats",
    "User",
    "Zen",
    "Zenith",
]
