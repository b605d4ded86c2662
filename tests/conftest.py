import json
from typing import Any, Dict, List, Optional, Union
from unittest.mock import MagicMock

import pytest
import requests

from tetrio import Client

BASE_URL = "https://ch.tetr.io/api/"


def make_response(status_code: int, body: Union[Dict[str, Any], str, bytes, None]) -> requests.Response:
    response = requests.Response()
    response.status_code = status_code
    if isinstance(body, (dict, list)):
        response._content = json.dumps(body).encode()
    elif isinstance(body, str):
        response._content = body.encode()
    else:
        response._content = body or b""
    response.headers["Content-Type"] = "application/json"
    return response


def ok(data: Any, cache: Optional[Dict[str, Any]] = None) -> requests.Response:
    body = {"success": True, "data": data}
    if cache is not None:
        body["cache"] = cache
    return make_response(200, body)


def sent_url(session: MagicMock, call: int = -1) -> str:
    return session.get.call_args_list[call].args[0]


def sent_params(session: MagicMock, call: int = -1) -> List:
    return session.get.call_args_list[call].kwargs["params"] or []


def sent_headers(session: MagicMock, call: int = -1) -> Dict[str, str]:
    return session.get.call_args_list[call].kwargs["headers"]


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    # setenv first so values loaded from a .env during the test are undone too
    for name in ("TETRIO_API_URL", "TETRIO_SESSION_ID", "TETRIO_TIMEOUT"):
        monkeypatch.setenv(name, "")
        monkeypatch.delenv(name)


@pytest.fixture()
def fake_session():
    return MagicMock(spec=requests.Session)


@pytest.fixture()
def client(fake_session):
    with Client(base_url=BASE_URL, session=fake_session) as test_client:
        yield test_client


@pytest.fixture()
def cache_payload() -> Dict[str, Any]:
    return {"status": "hit", "cached_at": 1700000000500, "cached_until": 1700000060999}


@pytest.fixture()
def user_payload() -> Dict[str, Any]:
    return {
        "_id": "5e32fc85ab319c2ab1beb07c",
        "username": "rinrin",
        "role": "user",
        "ts": "2020-01-30T16:06:29.532Z",
        "badges": [
            {"id": "leaderboard1", "label": "#1", "ts": "2021-03-01T10:00:00.000Z"},
            {"id": "infdev", "label": "INF DEV", "ts": False},
        ],
        "xp": 12345678.9,
        "gamesplayed": 5000,
        "gameswon": 3000,
        "gametime": 654321.5,
        "country": "JP",
        "supporter": True,
        "supporter_tier": 3,
        "avatar_revision": 1624888208913,
        "banner_revision": 0,
        "bio": "hello",
        "connections": {
            "discord": {"id": "1234", "username": "rin", "display_username": "Rin"}
        },
        "friend_count": 42,
        "achievements": [1, 2, 3],
        "ar": 120,
        "ar_counts": {"1": 4, "2": 3, "t100": 1},
    }


def leaderboard_entry(username: str, tr: float, prisecter: List[float]) -> Dict[str, Any]:
    return {
        "_id": f"id-{username}",
        "username": username,
        "role": "user",
        "ts": "2021-01-01T00:00:00.000Z",
        "xp": 1000.0,
        "country": "JP",
        "supporter": False,
        "league": {
            "gamesplayed": 100,
            "gameswon": 60,
            "tr": tr,
            "gxe": 90.1,
            "rank": "x",
            "bestrank": "x+",
            "glicko": 2500.0,
            "rd": 60.0,
            "apm": 150.2,
            "pps": 2.8,
            "vs": 300.1,
            "decaying": False,
        },
        "gamesplayed": 200,
        "gameswon": 120,
        "gametime": 12345.6,
        "ar": 50,
        "ar_counts": {"3": 2},
        "p": {"pri": prisecter[0], "sec": prisecter[1], "ter": prisecter[2]},
    }


@pytest.fixture()
def record_payload() -> Dict[str, Any]:
    return {
        "_id": "rec-1",
        "replayid": "abc123",
        "stub": False,
        "gamemode": "40l",
        "pb": True,
        "oncepb": True,
        "ts": "2024-07-30T12:00:00.000Z",
        "revolution": None,
        "user": {"id": "user-1", "username": "rinrin", "country": "JP", "supporter": True},
        "otherusers": [],
        "leaderboards": ["40l_global", "40l_country_JP"],
        "disputed": False,
        "results": {
            "stats": {"finaltime": 15234.5},
            "aggregatestats": {"apm": 0, "pps": 4.1},
            "gameoverreason": "clear",
        },
        "extras": {},
        "p": {"pri": 15234.5, "sec": 0, "ter": 1722340800000},
    }
