from unittest.mock import MagicMock

import pytest
from pydantic import ValidationError

from tetrio.api.params import Gamemode, RecordsLeaderboardId, Scope
from tetrio.models import (
    CacheStatus,
    News,
    NewsItems,
    Rank,
    Record,
    Response,
    ServerActivity,
    ServerStats,
    User,
)
from tetrio.models.news import BadgeNews, LeaderboardNews, RankUpNews
from tetrio.models.rank import LEGACY_XX_COLOR
from tetrio.models.user import DEFAULT_AVATAR_URL, xp_to_level


def test_envelope_success_requires_data():
    with pytest.raises(ValidationError):
        Response[ServerActivity].model_validate({"success": True})


def test_envelope_failure_rejects_data():
    with pytest.raises(ValidationError):
        Response[ServerActivity].model_validate(
            {"success": False, "error": {"msg": "x"}, "data": {"activity": []}}
        )


def test_envelope_cache(cache_payload):
    response = Response[ServerActivity].model_validate(
        {"success": True, "cache": cache_payload, "data": {"activity": [3, 1, 4]}}
    )

    assert response.cache.status is CacheStatus.HIT
    assert response.cache.cached_at_seconds == 1700000000
    assert response.cache.cached_until_seconds == 1700000060


def test_error_context_is_kept():
    response = Response[ServerActivity].model_validate(
        {"success": False, "error": {"msg": "Bad", "key": "bad_input", "context": {"field": "limit"}}}
    )

    assert response.error.key == "bad_input"
    assert response.error.context == {"field": "limit"}


def test_user_profile(user_payload):
    user = User.model_validate(user_payload)

    assert user.id == "5e32fc85ab319c2ab1beb07c"
    assert user.level == xp_to_level(12345678.9)
    assert user.profile_url == "https://ch.tetr.io/u/rinrin"
    assert user.avatar_url.startswith("https://tetr.io/user-content/avatars/5e32fc85ab319c2ab1beb07c.jpg")
    assert user.banner_url is None
    assert user.national_flag_url == "https://tetr.io/res/flags/jp.png"
    assert user.badge_count == 2
    assert user.badges[1].received_at is None
    assert user.badges[0].received_at_unix == 1614592800
    assert user.connections.discord.display_username == "Rin"
    assert user.achievement_rating_counts.bronze == 4
    assert user.achievement_rating_counts.top100 == 1
    assert user.is_normal_user
    assert user.created_at_unix == 1580400389


def test_user_default_avatar(user_payload):
    user_payload["avatar_revision"] = None
    assert User.model_validate(user_payload).avatar_url == DEFAULT_AVATAR_URL


def test_xp_to_level():
    assert xp_to_level(0) == 1
    assert xp_to_level(500) == 2
    assert xp_to_level(5000) == 5


def test_models_are_frozen(user_payload):
    user = User.model_validate(user_payload)
    with pytest.raises(ValidationError):
        user.username = "other"


def test_rank():
    assert Rank("x+") is Rank.X_PLUS
    assert Rank.Z.display_name == "Unranked"
    assert Rank.Z.is_unranked
    assert Rank.S_PLUS.display_name == "S+"
    assert Rank.A_PLUS.color == 0x1FA834
    assert Rank.SS.icon_url == "https://tetr.io/res/league-ranks/ss.png"
    assert LEGACY_XX_COLOR == 0xFF8FFF
    assert all(isinstance(rank.color, int) for rank in Rank)


def test_record(record_payload):
    rec = Record.model_validate(record_payload)

    assert rec.is_single_play
    assert not rec.is_multi_play
    assert rec.record_gamemode is Gamemode.FORTY_LINES
    assert rec.submitted_at_unix == 1722340800
    assert rec.prisecter.to_array() == [15234.5, 0.0, 1722340800000.0]
    assert rec.leaderboard_ids("@2024w31") == [
        RecordsLeaderboardId("40l", Scope.GLOBAL, "@2024w31"),
        RecordsLeaderboardId("40l", Scope.country("JP"), "@2024w31"),
    ]


def test_record_with_unknown_results(record_payload):
    record_payload["results"] = {"something": "new"}
    assert Record.model_validate(record_payload).results == {"something": "new"}


def test_server_activity():
    activity = ServerActivity.model_validate({"activity": [5, 9, 2, 9]})

    assert activity.peak == 9
    assert activity.peak_index == 1
    assert activity.trough == 2
    assert activity.trough_index == 2
    assert activity.average == pytest.approx(6.25)


def test_server_activity_empty():
    activity = ServerActivity.model_validate({"activity": []})

    assert activity.peak is None
    assert activity.trough_index is None
    assert activity.average is None


def _news(news_type, data, stream="global"):
    return {
        "_id": "n1",
        "stream": stream,
        "type": news_type,
        "data": data,
        "ts": "2024-07-30T12:00:00.000Z",
    }


def test_news_data_is_parsed_by_type():
    items = NewsItems.model_validate(
        {
            "news": [
                _news(
                    "leaderboard",
                    {"username": "rinrin", "gametype": "40l", "rank": 3, "result": 15234.5, "replayid": "r1"},
                ),
                _news("badge", {"username": "rinrin", "type": "leaderboard1", "label": "#1"}, "user_u1"),
                _news("rankup", {"username": "rinrin", "rank": "x+"}),
                _news("fancy_new_type", {"anything": 1}),
            ]
        }
    )
    leaderboard, badge, rankup, unknown = items.news

    assert isinstance(leaderboard.data, LeaderboardNews)
    assert leaderboard.data.replay_url == "https://tetr.io/#R:r1"
    assert leaderboard.is_global_stream
    assert isinstance(badge.data, BadgeNews)
    assert badge.data.badge_id == "leaderboard1"
    assert badge.is_user_stream
    assert isinstance(rankup.data, RankUpNews)
    assert rankup.data.rank is Rank.X_PLUS
    assert not unknown.is_known_type
    assert unknown.data == {"anything": 1}


def test_news_get_user_uses_username():
    news = News.model_validate(_news("supporter", {"username": "rinrin"}))
    client = MagicMock()

    news.data.get_user(client)

    client.get_user.assert_called_once_with("rinrin")


def _server_stats(gametime):
    return ServerStats.model_validate(
        {
            "usercount": 100,
            "usercount_delta": 0.5,
            "anoncount": 40,
            "totalaccounts": 120,
            "rankedcount": 30,
            "recordcount": 5000,
            "gamesplayed": 900,
            "gamesplayed_delta": 1.5,
            "gamesfinished": 800,
            "gametime": gametime,
            "inputs": 6000,
            "piecesplaced": 3000,
        }
    )


def test_server_stats_averages():
    stats = _server_stats(1000.0)

    assert stats.registered_players == 60
    assert stats.avg_pieces_per_second == pytest.approx(3.0)
    assert stats.avg_keys_per_second == pytest.approx(6.0)


def test_server_stats_averages_without_play_time():
    stats = _server_stats(0)

    assert stats.avg_pieces_per_second == 0.0
    assert stats.avg_keys_per_second == 0.0
