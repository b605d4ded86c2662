from . import news_stream, pagination, record, record_leaderboard, search_user, user_leaderboard
from .news_stream import NewsStream
from .pagination import After, Before, Bound
from .record import Gamemode, RecordLeaderboardType
from .record_leaderboard import RecordsLeaderboardId, Scope
from .search_user import SocialConnection, SocialProvider
from .user_leaderboard import LeaderboardType

__all__ = [
    "After",
    "Before",
    "Bound",
    "Gamemode",
    "LeaderboardType",
    "NewsStream",
    "RecordLeaderboardType",
    "RecordsLeaderboardId",
    "Scope",
    "SocialConnection",
    "SocialProvider",
    "news_stream",
    "pagination",
    "record",
    "record_leaderboard",
    "search_user",
    "user_leaderboard",
]
