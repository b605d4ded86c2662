# src/tetrio/api/ch_client.py
import logging
import os
import time
import uuid
from typing import Any, Dict, List, Optional, Tuple, Type, Union
from urllib.parse import quote

import requests
from dotenv import find_dotenv, load_dotenv

from ..models.achievement import Achievement, AchievementInfo
from ..models.common import Response
from ..models.labs import LabsLeagueflow, LabsLeagueRanks, LabsScoreflow
from ..models.leaderboard import HistoricalLeaderboard, Leaderboard
from ..models.news import NewsItems
from ..models.record import Record, RecordList
from ..models.search import SearchedUser
from ..models.server import ServerActivity, ServerStats
from ..models.summary import AllSummaries, Blitz, FortyLines, LeagueSummary, Zen, Zenith
from ..models.user import User
from . import params
from .errors import ClientCreationError, TransportError
from .params.pagination import PaginatedCriteria, validate_limit
from .response import decode_response

DEFAULT_BASE_URL = "https://ch.tetr.io/api/"
SESSION_ID_HEADER = "X-Session-ID"

LOGGER = logging.getLogger(__name__)

QueryParams = List[Tuple[str, str]]


def load_env() -> None:
    """Load a .env file found from the current working directory upwards."""
    path = find_dotenv(usecwd=True)
    if path:
        load_dotenv(path)


def get_base_url() -> str:
    load_env()
    return os.getenv("TETRIO_API_URL", DEFAULT_BASE_URL)


def get_timeout() -> Optional[float]:
    """Transport timeout in seconds from TETRIO_TIMEOUT; unset means none."""
    load_env()
    raw = os.getenv("TETRIO_TIMEOUT")
    if not raw:
        return None
    try:
        return float(raw)
    except ValueError as exc:
        raise ClientCreationError(f"TETRIO_TIMEOUT is not a number: {raw!r}") from exc


def _check_session_id(session_id: str) -> str:
    # header values must be visible ASCII without surrounding whitespace
    if (
        not session_id
        or not (session_id.isascii() and session_id.isprintable())
        or session_id != session_id.strip()
    ):
        raise ClientCreationError(
            f"failed to parse header value `{session_id}` for {SESSION_ID_HEADER}"
        )
    return session_id


def _segment(value: str, safe: str = "") -> str:
    return quote(str(value), safe=safe)


def _user_segment(user: str) -> str:
    # the API is case-insensitive on usernames and ids
    return _segment(user.lower())


def _criteria_params(criteria: Optional[PaginatedCriteria]) -> QueryParams:
    if criteria is None:
        return []
    # criteria may have been filled in by assignment, bypassing limit()
    criteria.validate_limit()
    return criteria.build()


class Client:
    """
    Client for the TETRA CHANNEL API.

    Every method issues exactly one GET request and returns the decoded
    ``Response`` envelope. Nothing is cached or retried.

    Raises (from every endpoint method):
        TransportError: the request could not be completed.
        HttpError: non-2xx status without a readable error body.
        DeserializeError: the body did not match the expected shape.

    Pass a session id (``with_session_id``) when paginating, so the server
    keeps serving the same snapshot across the pages.
    """

    def __init__(
        self,
        session_id: Optional[str] = None,
        base_url: Optional[str] = None,
        timeout: Optional[float] = None,
        session: Optional[requests.Session] = None,
    ) -> None:
        self._session_id = _check_session_id(session_id) if session_id is not None else None
        self.base_url = (base_url or get_base_url()).rstrip("/") + "/"
        self.timeout = timeout if timeout is not None else get_timeout()
        self._session = session or requests.Session()

    @classmethod
    def with_session_id(cls, session_id: Optional[str] = None, **kwargs: Any) -> "Client":
        """Create a client that sends X-Session-ID; a UUID is generated if none given."""
        if session_id is None:
            session_id = str(uuid.uuid4())
        return cls(session_id=session_id, **kwargs)

    @classmethod
    def from_env(cls, **kwargs: Any) -> "Client":
        """Create a client using TETRIO_SESSION_ID (if set) as the session id."""
        load_env()
        session_id = os.getenv("TETRIO_SESSION_ID") or None
        return cls(session_id=session_id, **kwargs)

    @property
    def session_id(self) -> Optional[str]:
        return self._session_id

    @property
    def session(self) -> requests.Session:
        return self._session

    def close(self) -> None:
        self._session.close()

    def __enter__(self) -> "Client":
        return self

    def __exit__(self, *exc_info: Any) -> None:
        self.close()

    def _headers(self) -> Dict[str, str]:
        headers = {"Accept": "application/json"}
        if self._session_id is not None:
            headers[SESSION_ID_HEADER] = self._session_id
        return headers

    def _get(
        self,
        path: str,
        payload_type: Any,
        query: Optional[QueryParams] = None,
    ) -> Response[Any]:
        """
        Low-level helper for GET requests to the TETRA CHANNEL API.

        Args:
            path: Path relative to the base URL, without a leading '/'.
            payload_type: Type of the envelope's ``data``.
            query: Ordered query parameters.
        """
        url = f"{self.base_url}{path}"
        LOGGER.debug("GET %s params=%s", path, query or [])
        started = time.perf_counter()
        try:
            response = self._session.get(
                url,
                headers=self._headers(),
                params=query or None,
                timeout=self.timeout,
            )
        except requests.RequestException as exc:
            elapsed_ms = int((time.perf_counter() - started) * 1000)
            LOGGER.debug("GET %s failed in %d ms: %s", path, elapsed_ms, exc)
            raise TransportError(str(exc)) from exc

        elapsed_ms = int((time.perf_counter() - started) * 1000)
        LOGGER.debug("GET %s status=%s in %d ms", path, response.status_code, elapsed_ms)
        envelope: Type[Response[Any]] = Response[payload_type]
        return decode_response(response, envelope)

    # Users

    def get_user(self, user: str) -> Response[User]:
        """Get a user's profile by username or user id."""
        return self._get(f"users/{_user_segment(user)}", User)

    def search_user(self, connection: params.SocialConnection) -> Response[SearchedUser]:
        """Find the TETR.IO user who linked the given social account."""
        return self._get(f"users/search/{_segment(connection.to_param(), safe=':')}", SearchedUser)

    def get_user_all_summaries(self, user: str) -> Response[AllSummaries]:
        return self._get(f"users/{_user_segment(user)}/summaries", AllSummaries)

    def get_user_40l(self, user: str) -> Response[FortyLines]:
        return self._get(f"users/{_user_segment(user)}/summaries/40l", FortyLines)

    def get_user_blitz(self, user: str) -> Response[Blitz]:
        return self._get(f"users/{_user_segment(user)}/summaries/blitz", Blitz)

    def get_user_zenith(self, user: str) -> Response[Zenith]:
        return self._get(f"users/{_user_segment(user)}/summaries/zenith", Zenith)

    def get_user_zenith_ex(self, user: str) -> Response[Zenith]:
        return self._get(f"users/{_user_segment(user)}/summaries/zenithex", Zenith)

    def get_user_league(self, user: str) -> Response[LeagueSummary]:
        return self._get(f"users/{_user_segment(user)}/summaries/league", LeagueSummary)

    def get_user_zen(self, user: str) -> Response[Zen]:
        return self._get(f"users/{_user_segment(user)}/summaries/zen", Zen)

    def get_user_achievements(self, user: str) -> Response[List[Achievement]]:
        return self._get(
            f"users/{_user_segment(user)}/summaries/achievements", List[Achievement]
        )

    # Leaderboards

    def get_leaderboard(
        self,
        leaderboard: Union[params.LeaderboardType, str],
        criteria: Optional[params.user_leaderboard.SearchCriteria] = None,
    ) -> Response[Leaderboard]:
        """
        Get a page of a user leaderboard (league, xp or ar).

        Wraps:
            https://ch.tetr.io/api/users/by/{leaderboard}
        """
        kind = params.LeaderboardType(leaderboard).to_param()
        return self._get(f"users/by/{kind}", Leaderboard, _criteria_params(criteria))

    def get_historical_league_leaderboard(
        self,
        season: str,
        criteria: Optional[params.user_leaderboard.SearchCriteria] = None,
    ) -> Response[HistoricalLeaderboard]:
        """Get a page of a past TETRA LEAGUE season's final standings."""
        kind = params.LeaderboardType.LEAGUE.to_param()
        return self._get(
            f"users/history/{kind}/{_segment(season)}",
            HistoricalLeaderboard,
            _criteria_params(criteria),
        )

    # Records

    def get_user_records(
        self,
        user: str,
        gamemode: Union[params.Gamemode, str],
        leaderboard: Union[params.RecordLeaderboardType, str],
        criteria: Optional[params.record.SearchCriteria] = None,
    ) -> Response[RecordList]:
        """Get a page of a user's top, recent or progression records."""
        mode = params.Gamemode(gamemode).to_param()
        board = params.RecordLeaderboardType(leaderboard).to_param()
        return self._get(
            f"users/{_user_segment(user)}/records/{mode}/{board}",
            RecordList,
            _criteria_params(criteria),
        )

    def get_records_leaderboard(
        self,
        leaderboard: params.RecordsLeaderboardId,
        criteria: Optional[params.record_leaderboard.SearchCriteria] = None,
    ) -> Response[RecordList]:
        """
        Get a page of a records leaderboard.

        Wraps:
            https://ch.tetr.io/api/records/{gamemode}_{scope}{revolution}
        """
        return self._get(
            f"records/{_segment(leaderboard.to_param(), safe='@')}",
            RecordList,
            _criteria_params(criteria),
        )

    def search_record(
        self,
        user_id: str,
        gamemode: Union[params.Gamemode, str],
        timestamp: int,
    ) -> Response[Record]:
        """Find a user's record by the exact time it was submitted (ms)."""
        query = [
            ("user", user_id),
            ("gamemode", params.Gamemode(gamemode).to_param()),
            ("ts", str(timestamp)),
        ]
        return self._get("records/reverse", Record, query)

    # News

    def get_news_all(self, limit: Optional[int] = None) -> Response[NewsItems]:
        """Get the latest news items from every stream (1-100, default 25)."""
        query: QueryParams = []
        if limit is not None:
            query.append(("limit", str(validate_limit(limit))))
        return self._get("news/", NewsItems, query)

    def get_news_latest(self, stream: params.NewsStream, limit: int) -> Response[NewsItems]:
        """Get the latest news items from one stream (1-100)."""
        validate_limit(limit)
        return self._get(
            f"news/{_segment(stream.to_param())}", NewsItems, [("limit", str(limit))]
        )

    # General

    def get_server_stats(self) -> Response[ServerStats]:
        return self._get("general/stats", ServerStats)

    def get_server_activity(self) -> Response[ServerActivity]:
        return self._get("general/activity", ServerActivity)

    # Labs

    def get_labs_scoreflow(
        self, user: str, gamemode: Union[params.Gamemode, str]
    ) -> Response[LabsScoreflow]:
        mode = params.Gamemode(gamemode).to_param()
        return self._get(f"labs/scoreflow/{_user_segment(user)}/{mode}", LabsScoreflow)

    def get_labs_leagueflow(self, user: str) -> Response[LabsLeagueflow]:
        return self._get(f"labs/leagueflow/{_user_segment(user)}", LabsLeagueflow)

    def get_labs_league_ranks(self) -> Response[LabsLeagueRanks]:
        return self._get("labs/league_ranks", LabsLeagueRanks)

    # Achievements

    def get_achievement_info(self, achievement_id: Union[int, str]) -> Response[AchievementInfo]:
        return self._get(f"achievements/{_segment(str(achievement_id))}", AchievementInfo)
